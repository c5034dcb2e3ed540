"""Hypothesis strategies for inverse STFT testing."""

from ._available_devices import available_devices
from ._frame_geometries import FrameGeometry, frame_geometries
from ._signals import signals
from ._windows import overlap_add_windows

__all__ = [
    # Geometry strategies
    "FrameGeometry",
    "frame_geometries",
    # Tensor strategies
    "signals",
    "overlap_add_windows",
    # Device strategies
    "available_devices",
]
