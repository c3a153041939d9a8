"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — so the line processor can be driven by in-memory
sources in tests.
"""

from __future__ import annotations

from collections.abc import Iterable
from contextlib import AbstractContextManager
from typing import Protocol

LineSource = AbstractContextManager[Iterable[str]]
"""A context manager yielding text lines (terminators included).

Leaving the context releases whatever the source holds open.
"""


class InputResolver(Protocol):
    """Contract for turning a filename token into a :data:`LineSource`."""

    def open(self, token: str) -> LineSource:
        """Resolve *token* to a readable line source.

        ``"-"`` selects standard input; any other token is a filesystem
        path.

        Raises
        ------
        InputOpenError
            When the named input cannot be opened.
        """
        ...  # pragma: no cover
