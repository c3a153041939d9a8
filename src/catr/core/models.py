"""Domain models for catr.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and self-validation.  They carry zero I/O
and no dependencies on external packages.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from catr.exceptions import ConfigurationError

STDIN_TOKEN: str = "-"
"""Filename token that selects standard input."""

WHITESPACE: str = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)
"""Unicode White_Space characters.  Narrower than ``str.strip()``, which
also strips the ``\\x1c``-``\\x1f`` separators."""


# ---------------------------------------------------------------------------
# Numbering policy
# ---------------------------------------------------------------------------

class NumberingMode(enum.Enum):
    """Closed set of line-numbering policies, chosen once per run."""

    PLAIN = "plain"
    NUMBER_ALL = "number-all"
    NUMBER_NONBLANK = "number-nonblank"


# ---------------------------------------------------------------------------
# Run configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Config:
    """Validated, immutable configuration for a single run.

    Raises
    ------
    ConfigurationError
        If *files* is empty or both numbering flags are set.
    """

    files: tuple[str, ...] = (STDIN_TOKEN,)
    """Ordered filename tokens; ``"-"`` means standard input."""

    number_lines: bool = False
    """Number every output line."""

    number_nonblank_lines: bool = False
    """Number only non-blank output lines."""

    def __post_init__(self) -> None:
        if not self.files:
            raise ConfigurationError(
                "At least one input is required.",
                hint=f"Pass '{STDIN_TOKEN}' to read standard input.",
            )
        if self.number_lines and self.number_nonblank_lines:
            raise ConfigurationError(
                "--number and --number-nonblank are mutually exclusive.",
            )

    @property
    def numbering_mode(self) -> NumberingMode:
        if self.number_lines:
            return NumberingMode.NUMBER_ALL
        if self.number_nonblank_lines:
            return NumberingMode.NUMBER_NONBLANK
        return NumberingMode.PLAIN


# ---------------------------------------------------------------------------
# Line record
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class LineRecord:
    """One line of input with its terminator removed."""

    text: str
    is_blank: bool

    @classmethod
    def from_raw(cls, raw: str) -> LineRecord:
        """Build a record from a line as yielded by a line source.

        A trailing ``\\r\\n`` or ``\\n`` is removed; a lone ``\\r`` is
        part of the text.
        """
        if raw.endswith("\r\n"):
            text = raw[:-2]
        elif raw.endswith("\n"):
            text = raw[:-1]
        else:
            text = raw
        return cls(text=text, is_blank=not text.strip(WHITESPACE))


# ---------------------------------------------------------------------------
# Per-file outcomes
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FileProcessed:
    """The input was opened and fully drained."""

    filename: str


@dataclass(frozen=True, slots=True)
class FileOpenFailed:
    """The input could not be opened; it contributed no output."""

    filename: str
    cause: str

    @property
    def message(self) -> str:
        return f"Failed to open {self.filename}: {self.cause}"


FileOutcome = FileProcessed | FileOpenFailed


@dataclass(frozen=True, slots=True)
class RunSummary:
    """Ordered outcomes of a completed run, one per filename token."""

    outcomes: tuple[FileOutcome, ...]
