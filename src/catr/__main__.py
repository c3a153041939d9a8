"""Allow ``python -m catr`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m catr`` behaves identically to the ``catr`` console
script.
"""

from __future__ import annotations

from catr.cli.app import cli

if __name__ == "__main__":
    cli()
