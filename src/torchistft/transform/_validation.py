"""Argument validation for the inverse short-time Fourier transform."""

import math
import operator

import torch
from torch import Tensor

from torchistft._constants import MAX_BUFFER_LENGTH

from ._exceptions import (
    BufferSizeError,
    InverseShortTimeFourierTransformError,
    SignalShapeError,
    WindowShapeError,
)


def as_int(
    value: int | Tensor,
    name: str,
    error: type[InverseShortTimeFourierTransformError],
) -> int:
    """Convert a Python integer or 0-d integer tensor to ``int``.

    Booleans, floating values and non-scalar tensors raise ``error``.
    """
    if isinstance(value, bool):
        raise error(f"{name} must be an integer, got bool {value}")

    if isinstance(value, Tensor):
        if value.ndim != 0:
            raise error(
                f"{name} must be a scalar, got tensor with shape "
                f"{tuple(value.shape)}"
            )
        if (
            value.dtype.is_floating_point
            or value.dtype.is_complex
            or value.dtype == torch.bool
        ):
            raise error(
                f"{name} must be an integer tensor, got dtype {value.dtype}"
            )
        return int(value.item())

    try:
        return operator.index(value)
    except TypeError:
        raise error(
            f"{name} must be an integer, got {type(value).__name__} {value!r}"
        ) from None


def check_signal(input: Tensor) -> tuple[int, int]:
    """Validate the spectral encoding and return ``(bins, num_frames)``.

    Complex input has shape ``(..., bins, num_frames)``. Real input has
    shape ``(..., bins, num_frames, 2)`` with (real, imaginary) pairs.
    """
    if input.is_complex():
        if input.ndim < 2:
            raise SignalShapeError(
                f"complex input must have shape (..., bins, frames), got "
                f"{input.ndim}-D tensor with shape {tuple(input.shape)}"
            )
        return input.shape[-2], input.shape[-1]

    if not input.is_floating_point():
        raise SignalShapeError(
            f"input must be complex or floating point, got dtype {input.dtype}"
        )

    if input.ndim < 3 or input.shape[-1] != 2:
        raise SignalShapeError(
            f"real input must have shape (..., bins, frames, 2) holding "
            f"(real, imaginary) pairs, got shape {tuple(input.shape)}"
        )

    return input.shape[-3], input.shape[-2]


def as_complex(input: Tensor) -> Tensor:
    """Return the complex view of a validated spectral input."""
    if input.is_complex():
        return input

    # torch.complex is only defined for float32 and float64 parts
    dtype = torch.promote_types(input.dtype, torch.float32)
    input = input.to(dtype)

    return torch.complex(input[..., 0], input[..., 1])


def check_frame_bins(bins: int, frame_size: int, onesided: bool) -> None:
    """Check that each frame holds the bins a ``frame_size`` spectrum has."""
    expected = frame_size // 2 + 1 if onesided else frame_size

    if bins != expected:
        kind = "one-sided" if onesided else "full"
        raise SignalShapeError(
            f"a {kind} spectrum of frame_size {frame_size} has {expected} "
            f"frequency bins, got {bins}"
        )


def check_window(window: Tensor | None, frame_size: int | None = None) -> Tensor:
    """Validate the synthesis window and broadcast it to ``frame_size``.

    Without ``frame_size`` only presence, dimensionality and dtype are
    checked.
    """
    if window is None:
        raise WindowShapeError(
            "window is required for inverse_short_time_fourier_transform. "
            "Must match the window used in the forward STFT."
        )

    if window.ndim != 1:
        raise WindowShapeError(
            f"window must be 1-D, got {window.ndim}-D tensor with shape "
            f"{tuple(window.shape)}"
        )

    if window.is_complex():
        raise WindowShapeError(
            f"window must be real-valued, got dtype {window.dtype}"
        )

    if frame_size is None:
        return window

    window_length = window.size(0)

    if window_length == frame_size:
        return window

    if window_length == 1:
        return window.expand(frame_size)

    raise WindowShapeError(
        f"window length ({window_length}) must equal frame_size "
        f"({frame_size}) or be 1"
    )


def check_buffer_length(
    num_frames: int,
    frame_size: int,
    frame_step: int,
    length: int | None = None,
) -> int:
    """Return the overlap-add length, raising if a buffer cannot hold it."""
    signal_length = frame_step * (num_frames - 1) + frame_size

    if signal_length > MAX_BUFFER_LENGTH:
        raise BufferSizeError(
            f"overlap-add length frame_step * (num_frames - 1) + frame_size "
            f"= {frame_step} * {num_frames - 1} + {frame_size} exceeds the "
            f"largest buffer ({MAX_BUFFER_LENGTH})"
        )

    if length is not None and length > MAX_BUFFER_LENGTH:
        raise BufferSizeError(
            f"length ({length}) exceeds the largest buffer "
            f"({MAX_BUFFER_LENGTH})"
        )

    return signal_length


def check_epsilon(epsilon: float) -> float:
    epsilon = float(epsilon)

    if not math.isfinite(epsilon) or epsilon < 0:
        raise InverseShortTimeFourierTransformError(
            f"epsilon must be finite and non-negative, got {epsilon}"
        )

    return epsilon
