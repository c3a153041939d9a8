"""Rich console bound to stderr.

All diagnostics go through :data:`console`; stdout is reserved for the
concatenated output.  The console resolves ``sys.stderr`` on every
write, so pytest's ``capsys`` sees what it prints.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from catr.core.models import FileOpenFailed
from catr.exceptions import CatrError

console = Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)


def report_open_failure(failure: FileOpenFailed) -> None:
    """Print ``Failed to open <filename>: <cause>`` verbatim."""
    console.print(failure.message, markup=False)


def report_error(exc: CatrError) -> None:
    """Render a fatal :class:`CatrError` and its optional hint."""
    console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
    if exc.hint:
        console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
