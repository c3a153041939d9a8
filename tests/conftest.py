"""Shared pytest fixtures and configuration for the catr test suite.

Guidelines
----------
* Files are only ever written under ``tmp_path``.
* Core tests drive the line processor through in-memory resolvers.
* Tests must not depend on OS state.
"""

from __future__ import annotations

import io
from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from pathlib import Path

import pytest

from catr.core.protocols import LineSource
from catr.exceptions import InputOpenError


class MemoryResolver:
    """In-memory :class:`InputResolver` keyed by filename token.

    Tokens missing from *files* fail to open with ``No such file or
    directory``.  Every successful :meth:`open` is recorded in
    :attr:`opened`; every closed source in :attr:`closed`.
    """

    def __init__(self, files: dict[str, str | Iterable[str]]) -> None:
        self._files = files
        self.opened: list[str] = []
        self.closed: list[str] = []

    def open(self, token: str) -> LineSource:
        if token not in self._files:
            raise InputOpenError(token, "No such file or directory")
        self.opened.append(token)
        content = self._files[token]
        lines = io.StringIO(content) if isinstance(content, str) else content
        return self._track(token, lines)

    @contextmanager
    def _track(self, token: str, lines: Iterable[str]) -> Iterator[Iterable[str]]:
        try:
            yield lines
        finally:
            self.closed.append(token)


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str | bytes], str]:
    """Return a factory writing *content* to ``tmp_path / name``.

    The factory returns the path as a string, ready to use as a filename
    token.
    """

    def _write(name: str, content: str | bytes) -> str:
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8", newline="")
        return str(path)

    return _write


@pytest.fixture
def set_stdin(monkeypatch: pytest.MonkeyPatch) -> Callable[[str | bytes], None]:
    """Return a function that replaces ``sys.stdin`` with *content*.

    The replacement has a real ``.buffer`` so byte-level readers see
    exactly *content*.
    """

    def _set(content: str | bytes) -> None:
        data = content.encode("utf-8") if isinstance(content, str) else content
        monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(data), encoding="utf-8"))

    return _set


@pytest.fixture
def make_resolver() -> Callable[[dict[str, str | Iterable[str]]], MemoryResolver]:
    """Return the :class:`MemoryResolver` constructor."""
    return MemoryResolver
