"""Core line processor — drives inputs through the numbering policy.

The processor resolves each filename token through an injected
:class:`~catr.core.protocols.InputResolver`, renders every line with
:func:`~catr.core.numbering.render_line`, and writes the result to an
injected text sink.

Failure handling
----------------
* :class:`~catr.exceptions.InputOpenError` is recoverable: the file is
  recorded as :class:`~catr.core.models.FileOpenFailed`, the optional
  ``on_open_failure`` callback is notified, and the next token is
  processed.
* A failure while iterating an already-open source is fatal and raises
  :class:`~catr.exceptions.InputReadError` immediately.

Guarantees
----------
* No ``print()``; output goes only to the injected sink.
* Lines are written in read order, file by file.
* The line counter restarts at zero for every file.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TextIO

from catr.core.models import (
    Config,
    FileOpenFailed,
    FileOutcome,
    FileProcessed,
    LineRecord,
    NumberingMode,
    RunSummary,
)
from catr.core.numbering import render_line
from catr.core.protocols import InputResolver
from catr.exceptions import InputOpenError, InputReadError, describe_os_error


class LineProcessor:
    """Concatenates inputs to *out*, numbering lines per the run's config.

    Parameters
    ----------
    resolver:
        Any object satisfying the :class:`InputResolver` protocol.
    out:
        Text sink receiving the rendered lines.
    on_open_failure:
        Optional callable invoked once for every input that could not be
        opened.  May be ``None``.
    """

    def __init__(
        self,
        resolver: InputResolver,
        out: TextIO,
        *,
        on_open_failure: Callable[[FileOpenFailed], None] | None = None,
    ) -> None:
        self._resolver: InputResolver = resolver
        self._out: TextIO = out
        self._on_open_failure: Callable[[FileOpenFailed], None] | None = on_open_failure

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self, config: Config) -> RunSummary:
        """Process every token in ``config.files`` in order.

        Raises
        ------
        InputReadError
            When an input fails mid-stream.  Output already written for
            earlier lines and files is kept.
        """
        mode = config.numbering_mode
        outcomes: list[FileOutcome] = []

        for filename in config.files:
            outcome = self._process_file(filename, mode)
            if isinstance(outcome, FileOpenFailed) and self._on_open_failure is not None:
                self._on_open_failure(outcome)
            outcomes.append(outcome)

        return RunSummary(outcomes=tuple(outcomes))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _process_file(self, filename: str, mode: NumberingMode) -> FileOutcome:
        try:
            source = self._resolver.open(filename)
        except InputOpenError as exc:
            return FileOpenFailed(filename=filename, cause=exc.cause)

        with source as lines:
            self._copy_lines(filename, lines, mode)

        return FileProcessed(filename=filename)

    def _copy_lines(
        self, filename: str, lines: Iterable[str], mode: NumberingMode,
    ) -> None:
        counter = 0
        iterator = iter(lines)

        while True:
            try:
                raw = next(iterator)
            except StopIteration:
                break
            except (OSError, UnicodeDecodeError) as exc:
                raise InputReadError(filename, describe_os_error(exc)) from exc

            text, counter = render_line(mode, LineRecord.from_raw(raw), counter)
            self._out.write(text + "\n")
