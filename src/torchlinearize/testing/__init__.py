"""Testing helpers for code that consumes linearized pixels.

Requires the ``testing`` extra (``hypothesis`` and ``numpy``).
"""

from . import strategies

__all__ = [
    "strategies",
]
