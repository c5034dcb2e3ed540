"""Testing utilities for torchistft.

Requires the ``test`` extra (``hypothesis`` and ``numpy``).
"""

from . import strategies

__all__ = ["strategies"]
