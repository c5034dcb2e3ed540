"""Inverse short-time Fourier transform.

Transforms
----------
inverse_short_time_fourier_transform
    Overlap-add reconstruction of a time-domain signal from STFT frames.

Stages
------
inverse_frame_transform, apply_window, overlap_add,
normalize_by_window_energy, trim_center, fit_length
    The individual synthesis steps, as pure functions over tensors.

Exceptions
----------
InverseShortTimeFourierTransformError
    Base class of all argument errors; a ``ValueError``.
"""

from ._exceptions import (
    BufferSizeError,
    InvalidFrameSizeError,
    InvalidFrameStepError,
    InvalidLengthError,
    InverseShortTimeFourierTransformError,
    SignalShapeError,
    WindowShapeError,
)
from ._inverse_short_time_fourier_transform import (
    inverse_short_time_fourier_transform,
)
from ._overlap_add import (
    apply_window,
    fit_length,
    inverse_frame_transform,
    normalize_by_window_energy,
    overlap_add,
    overlap_add_length,
    trim_center,
)

__all__ = [
    # Transforms
    "inverse_short_time_fourier_transform",
    # Stages
    "apply_window",
    "fit_length",
    "inverse_frame_transform",
    "normalize_by_window_energy",
    "overlap_add",
    "overlap_add_length",
    "trim_center",
    # Exceptions
    "BufferSizeError",
    "InvalidFrameSizeError",
    "InvalidFrameStepError",
    "InvalidLengthError",
    "InverseShortTimeFourierTransformError",
    "SignalShapeError",
    "WindowShapeError",
]
