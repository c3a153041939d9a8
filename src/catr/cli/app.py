"""CLI application entry point for catr.

This module is the **sole error boundary** for the entire application.
It catches :class:`~catr.exceptions.CatrError`, ``BrokenPipeError``,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
messages on stderr via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — line handling is delegated to
  :class:`~catr.core.line_processor.LineProcessor`.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import os
import sys

from rich.markup import escape

from catr.cli import exit_codes
from catr.cli.console import console, report_error, report_open_failure
from catr.core.line_processor import LineProcessor
from catr.core.models import STDIN_TOKEN, Config
from catr.exceptions import CatrError
from catr.infra.input_resolver import FileInputResolver
from catr.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the argument parser.

    ``-n`` and ``-b`` share a mutually exclusive group, so argparse
    rejects the combination before a :class:`Config` is ever built.
    """
    parser = argparse.ArgumentParser(
        prog="catr",
        description="Python cat: concatenate files to standard output.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help=f"Input files ('{STDIN_TOKEN}' or none for standard input).",
    )
    numbering = parser.add_mutually_exclusive_group()
    numbering.add_argument(
        "-n",
        "--number",
        dest="number_lines",
        action="store_true",
        help="Number all output lines.",
    )
    numbering.add_argument(
        "-b",
        "--number-nonblank",
        dest="number_nonblank_lines",
        action="store_true",
        help="Number non-blank output lines.",
    )
    return parser


def parse_config(argv: list[str] | None = None) -> Config:
    """Parse *argv* into a validated :class:`Config`."""
    args = _build_parser().parse_args(argv)
    return Config(
        files=tuple(args.files) or (STDIN_TOKEN,),
        number_lines=args.number_lines,
        number_nonblank_lines=args.number_nonblank_lines,
    )


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run catr.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.  Inputs that could not be opened are
        reported but still yield :data:`exit_codes.SUCCESS`.
    """
    config = parse_config(argv)

    processor = LineProcessor(
        FileInputResolver(),
        sys.stdout,
        on_open_failure=report_open_failure,
    )
    processor.run(config)
    sys.stdout.flush()
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _silence_stdout() -> None:
    """Point stdout at devnull so the interpreter's final flush cannot
    raise a second ``BrokenPipeError``."""
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except CatrError as exc:
        report_error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except BrokenPipeError:
        _silence_stdout()
        sys.exit(exit_codes.BROKEN_PIPE)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
