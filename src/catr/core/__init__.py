"""Core / service layer — line numbering and multi-file traversal.

Rules
-----
* No ``print()`` calls.
* No direct filesystem access; inputs arrive through an
  :class:`~catr.core.protocols.InputResolver`.
* No imports from ``cli`` or ``infra``.
"""

from catr.core.line_processor import LineProcessor
from catr.core.models import (
    STDIN_TOKEN,
    Config,
    FileOpenFailed,
    FileOutcome,
    FileProcessed,
    LineRecord,
    NumberingMode,
    RunSummary,
)
from catr.core.numbering import format_number, render_line
from catr.core.protocols import InputResolver, LineSource

__all__: list[str] = [
    "STDIN_TOKEN",
    "Config",
    "FileOpenFailed",
    "FileOutcome",
    "FileProcessed",
    "InputResolver",
    "LineProcessor",
    "LineRecord",
    "LineSource",
    "NumberingMode",
    "RunSummary",
    "format_number",
    "render_line",
]
