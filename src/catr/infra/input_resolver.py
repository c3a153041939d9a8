"""Filesystem / stdin implementation of :class:`~catr.core.protocols.InputResolver`.

This module is the **only** place in the codebase that opens a
user-named path.  ``OSError`` from ``open()`` is caught here and
re-raised as :class:`~catr.exceptions.InputOpenError`; nothing raw
escapes the infrastructure boundary.

Inputs are read as bytes, split on ``\\n`` only, and each line is
decoded on its own.  A lone ``\\r`` therefore stays inside its line, and
an invalid byte sequence surfaces only when its own line is reached.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import BinaryIO

from catr.core.models import STDIN_TOKEN
from catr.core.protocols import LineSource
from catr.exceptions import InputOpenError, describe_os_error

ENCODING: str = "utf-8"


@contextmanager
def _decoded_lines(stream: BinaryIO, *, close: bool) -> Iterator[Iterator[str]]:
    """Yield a lazy iterator of strictly decoded lines from *stream*.

    ``UnicodeDecodeError`` is raised from ``next()`` for the offending
    line, after every earlier line has been handed out.
    """
    try:
        yield (raw.decode(ENCODING) for raw in stream)
    finally:
        if close:
            stream.close()


class FileInputResolver:
    """Concrete :class:`InputResolver` over the local filesystem.

    Parameters
    ----------
    stdin:
        Byte stream used for the ``"-"`` token.  When ``None`` (default),
        ``sys.stdin.buffer`` is looked up at resolution time.
    """

    def __init__(self, stdin: BinaryIO | None = None) -> None:
        self._stdin: BinaryIO | None = stdin

    def open(self, token: str) -> LineSource:
        """Resolve *token* to a line source.

        Standard input is never closed when the source is released.
        Files are opened read-only and decoded as strict UTF-8.

        Raises
        ------
        InputOpenError
            If the path is missing, unreadable, a directory, etc.
        """
        if token == STDIN_TOKEN:
            stdin = self._stdin if self._stdin is not None else sys.stdin.buffer
            return _decoded_lines(stdin, close=False)

        try:
            handle = open(token, "rb")
        except OSError as exc:
            raise InputOpenError(token, describe_os_error(exc)) from exc
        return _decoded_lines(handle, close=True)
