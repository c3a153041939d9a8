"""Custom exception hierarchy for catr.

All exceptions that cross layer boundaries must inherit from
:class:`CatrError`.  Raw ``OSError`` and ``UnicodeDecodeError`` raised
while opening or reading an input never propagate beyond the layer that
touched the stream; they are caught and re-raised as a typed subclass
defined here.

Hierarchy
---------
CatrError
├── ConfigurationError
├── InputOpenError
└── InputReadError
"""

from __future__ import annotations


class CatrError(Exception):
    """Base exception for all catr errors.

    The CLI error boundary renders any subclass as a one-line message
    (plus optional hint) without a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Configuration ---------------------------------------------------------

class ConfigurationError(CatrError):
    """Raised when a :class:`~catr.core.models.Config` violates its invariants."""


# --- Inputs ----------------------------------------------------------------

class _InputError(CatrError):
    """Shared shape for errors tied to a single named input."""

    _action: str = "process"

    def __init__(self, filename: str, cause: str, *, hint: str | None = None) -> None:
        super().__init__(f"Failed to {self._action} {filename}: {cause}", hint=hint)
        self.filename: str = filename
        self.cause: str = cause


class InputOpenError(_InputError):
    """Raised when an input cannot be opened.

    Recoverable: the line processor reports it and moves on to the next
    input.
    """

    _action = "open"


class InputReadError(_InputError):
    """Raised when an already-open input fails mid-stream.

    Fatal: the run aborts and the error reaches the CLI boundary.
    """

    _action = "read"


def describe_os_error(exc: BaseException) -> str:
    """Return the human-readable cause text for *exc*.

    ``OSError.strerror`` is preferred since ``str()`` repeats the
    filename, which the callers already include.
    """
    strerror = getattr(exc, "strerror", None)
    if strerror:
        return str(strerror)
    return str(exc)
