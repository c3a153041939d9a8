"""Infrastructure layer — operating-system integration.

This layer owns every ``open()`` of a user-named input and every read of
the process's standard input.  Raw ``OSError`` must be caught here and
re-raised as a :class:`~catr.exceptions.CatrError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from catr.infra.input_resolver import FileInputResolver

__all__: list[str] = [
    "FileInputResolver",
]
