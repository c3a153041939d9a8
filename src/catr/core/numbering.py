"""Pure per-line rendering for each :class:`NumberingMode`.

No I/O.  The caller owns the per-file counter and threads it through
:func:`render_line`, which returns the updated value.
"""

from __future__ import annotations

from catr.core.models import LineRecord, NumberingMode

NUMBER_WIDTH: int = 6


def format_number(counter: int) -> str:
    """Return the line-number prefix: *counter* right-aligned, then a tab."""
    return f"{counter:>{NUMBER_WIDTH}}\t"


def render_line(mode: NumberingMode, record: LineRecord, counter: int) -> tuple[str, int]:
    """Render *record* under *mode*.

    Returns
    -------
    tuple[str, int]
        The output text without a line terminator, and the counter value
        after this line.
    """
    if mode is NumberingMode.PLAIN:
        return record.text, counter

    if mode is NumberingMode.NUMBER_NONBLANK and record.is_blank:
        return "", counter

    counter += 1
    return format_number(counter) + record.text, counter
