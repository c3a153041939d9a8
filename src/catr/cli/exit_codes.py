"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""The whole file list was processed.  Inputs that failed to open were
reported on stderr but do not change the status."""

GENERAL_ERROR: int = 1
"""A known CatrError was caught (e.g. a fatal read error)."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""

BROKEN_PIPE: int = 141
"""The reader closed stdout early.  Follows POSIX convention (128 + SIGPIPE=13)."""
