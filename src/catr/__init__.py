"""catr — a Python ``cat``.

Concatenates files (or standard input) to standard output, optionally
numbering every line or only the non-blank ones.
"""

from catr.version import __version__

__all__: list[str] = ["__version__"]
