"""Overlap-add synthesis stages of the inverse short-time Fourier transform.

Each stage is a pure function of its tensor arguments. The accumulation
buffers created by :func:`overlap_add` belong to the caller and are never
shared between calls.
"""

import torch
import torch.nn.functional as F
from torch import Tensor


def overlap_add_length(num_frames: int, frame_size: int, frame_step: int) -> int:
    """Number of samples covered by ``num_frames`` frames spaced ``frame_step`` apart."""
    return frame_step * (num_frames - 1) + frame_size


def inverse_frame_transform(
    spectrum: Tensor,
    frame_size: int,
    *,
    onesided: bool = True,
) -> Tensor:
    r"""Invert every frame of a framed spectrum.

    Parameters
    ----------
    spectrum : Tensor
        Complex tensor of shape ``(..., bins, num_frames)``.
    frame_size : int
        Number of time samples per frame.
    onesided : bool, optional
        If ``True``, ``spectrum`` holds the ``frame_size // 2 + 1``
        non-negative frequency bins of real frames and is inverted with
        ``torch.fft.irfft``. If ``False``, it holds all ``frame_size`` bins
        and the real part of ``torch.fft.ifft`` is kept.
        Default: ``True``.

    Returns
    -------
    Tensor
        Real tensor of shape ``(..., num_frames, frame_size)``.

    Notes
    -----
    Both inverses are scaled by :math:`1/N`:

    .. math::
        x_m[n] = \frac{1}{N} \sum_{k=0}^{N-1} X[k, m] \, e^{2\pi i k n / N}
    """
    frames = spectrum.transpose(-2, -1)

    if onesided:
        return torch.fft.irfft(frames, n=frame_size, dim=-1)

    return torch.fft.ifft(frames, n=frame_size, dim=-1).real


def apply_window(frames: Tensor, window: Tensor) -> Tensor:
    return frames * window


def overlap_add(
    frames: Tensor,
    window: Tensor,
    frame_step: int,
) -> tuple[Tensor, Tensor]:
    """Accumulate windowed frames and squared-window energy.

    Frames are added in ascending frame order so the result is the same
    from run to run.

    Parameters
    ----------
    frames : Tensor
        Windowed frames of shape ``(..., num_frames, frame_size)``.
    window : Tensor
        Window of shape ``(frame_size,)`` that was applied to ``frames``.
    frame_step : int
        Distance in samples between consecutive frame starts.

    Returns
    -------
    acc : Tensor
        Overlap-added samples of shape ``(..., signal_length)``.
    weight : Tensor
        Accumulated ``window ** 2`` of shape ``(signal_length,)``.
    """
    *batch_shape, num_frames, frame_size = frames.shape
    signal_length = overlap_add_length(num_frames, frame_size, frame_step)

    acc = frames.new_zeros(*batch_shape, signal_length)
    weight = window.new_zeros(signal_length)
    window_energy = window * window

    for index in range(num_frames):
        start = index * frame_step
        stop = start + frame_size
        acc[..., start:stop] += frames[..., index, :]
        weight[start:stop] += window_energy

    return acc, weight


def normalize_by_window_energy(
    acc: Tensor,
    weight: Tensor,
    epsilon: float,
) -> Tensor:
    """Divide by the window energy, zeroing samples where it is ``<= epsilon``."""
    valid = weight > epsilon

    # Keep the unused branch finite so gradients stay finite too
    safe_weight = torch.where(valid, weight, torch.ones_like(weight))

    return torch.where(valid, acc / safe_weight, torch.zeros_like(acc))


def trim_center(signal: Tensor, frame_size: int) -> Tensor:
    """Remove the padding added by a centered forward transform.

    ``frame_size // 2`` samples are dropped from the front and the
    remaining ``frame_size - frame_size // 2`` from the back.
    """
    front = frame_size // 2
    back = frame_size - front

    return signal[..., front : signal.shape[-1] - back]


def fit_length(signal: Tensor, length: int, *, offset: int = 0) -> Tensor:
    """Take ``length`` samples starting at ``offset``, zero-padding on the right."""
    available = max(signal.shape[-1] - offset, 0)

    if available >= length:
        return signal[..., offset : offset + length]

    return F.pad(signal[..., offset:], (0, length - available))
