"""torchistft: inverse short-time Fourier transform for PyTorch."""

from . import transform

__all__ = [
    "transform",
]

__version__ = "0.1.0"
