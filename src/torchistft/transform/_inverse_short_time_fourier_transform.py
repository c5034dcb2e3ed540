"""Inverse short-time Fourier transform implementation."""

import math
import warnings

import torch
from torch import Tensor

from torchistft._constants import WINDOW_ENERGY_EPSILON

from ._exceptions import (
    InvalidFrameSizeError,
    InvalidFrameStepError,
    InvalidLengthError,
    SignalShapeError,
)
from ._overlap_add import (
    apply_window,
    fit_length,
    inverse_frame_transform,
    normalize_by_window_energy,
    overlap_add,
    trim_center,
)
from ._types import IntegerScalar
from ._validation import (
    as_complex,
    as_int,
    check_buffer_length,
    check_epsilon,
    check_frame_bins,
    check_signal,
    check_window,
)


def inverse_short_time_fourier_transform(
    input: Tensor,
    *,
    window: Tensor | None = None,
    frame_size: IntegerScalar | None = None,
    frame_step: IntegerScalar | None = None,
    center: bool = True,
    normalized: bool = False,
    length: IntegerScalar | None = None,
    onesided: bool = True,
    epsilon: float = WINDOW_ENERGY_EPSILON,
    out: Tensor | None = None,
) -> Tensor:
    r"""Compute the inverse short-time Fourier transform (ISTFT) of a signal.

    The ISTFT reconstructs a time-domain signal from its STFT representation
    using the overlap-add method with squared-window normalization.

    .. math::
        x[n] = \frac{\sum_m w[n - mH] \cdot x_m[n - mH]}
                    {\sum_m w^2[n - mH]}

    where :math:`m` is the frame index, :math:`H` is the frame step,
    :math:`w[n]` is the window function and :math:`x_m` is the inverse
    discrete Fourier transform of frame :math:`m`. Samples where the
    denominator is at most ``epsilon`` are set to zero.

    Parameters
    ----------
    input : Tensor
        Framed spectrum. Either a complex tensor of shape
        ``(..., bins, num_frames)`` or a real tensor of shape
        ``(..., bins, num_frames, 2)`` whose last dimension holds
        (real, imaginary) pairs. ``...`` are batch dimensions.
    window : Tensor
        **Required.** 1-D synthesis window of length ``frame_size``, or of
        length 1 to broadcast a constant. Should match the window used in
        the forward STFT.
    frame_size : int or Tensor, optional
        Number of samples per frame. Accepts a 0-d integer tensor.
        Default: ``2 * (bins - 1)`` if ``onesided``, else ``bins``.
    frame_step : int or Tensor, optional
        Distance in samples between consecutive frames (hop length).
        Accepts a 0-d integer tensor.
        Default: ``frame_size // 4``.
    center : bool, optional
        If ``True``, the forward transform padded the signal by
        ``frame_size // 2`` on each side, and this padding is removed:
        ``frame_size // 2`` samples from the front and
        ``frame_size - frame_size // 2`` from the back.
        Default: ``True``.
    normalized : bool, optional
        If ``True``, the forward transform scaled frames by
        ``1 / sqrt(frame_size)`` and the output is multiplied by
        ``sqrt(frame_size)``.
        Default: ``False``.
    length : int or Tensor, optional
        Exact output length. The reconstruction (starting after the
        centering offset) is truncated or zero-padded on the right to this
        many samples.
        Default: ``None`` (use the natural overlap-add length).
    onesided : bool, optional
        If ``True``, each frame holds ``frame_size // 2 + 1`` bins of a
        real signal's spectrum and is inverted with ``torch.fft.irfft``.
        If ``False``, each frame holds ``frame_size`` bins and the real
        part of ``torch.fft.ifft`` is kept.
        Default: ``True``.
    epsilon : float, optional
        Accumulated window energy at or below this value is treated as
        zero.
        Default: ``1e-11``.
    out : Tensor, optional
        Output tensor. Must have the correct shape and a real dtype.
        Default: ``None`` (allocate new tensor).

    Returns
    -------
    Tensor
        The reconstructed real signal of shape ``(..., signal_length)``.
        Without ``length``, ``signal_length`` is
        ``frame_step * (num_frames - 1) + frame_size``, less ``frame_size``
        if ``center``.

    Raises
    ------
    WindowShapeError
        If ``window`` is missing, not 1-D, complex, or its length is neither
        ``frame_size`` nor 1.
    SignalShapeError
        If ``input`` is not a valid framed spectrum, has the wrong number of
        frequency bins for ``frame_size``, or holds no frames.
    InvalidFrameSizeError
        If ``frame_size`` is not a positive integer.
    InvalidFrameStepError
        If ``frame_step`` is not a positive integer.
    InvalidLengthError
        If ``length`` is not a non-negative integer.
    BufferSizeError
        If the overlap-add buffer or ``length`` exceeds the int64 range.

    All of these derive from ``InverseShortTimeFourierTransformError``,
    which is a ``ValueError``.

    Warns
    -----
    RuntimeWarning
        If every window coefficient is zero. The output is then all zeros.

    Examples
    --------
    Round-trip reconstruction:

    >>> x = torch.randn(1024)
    >>> window = torch.hann_window(256)
    >>> S = torch.stft(x, 256, 64, window=window, return_complex=True)
    >>> x_rec = inverse_short_time_fourier_transform(
    ...     S, window=window, frame_step=64, length=1024
    ... )
    >>> torch.allclose(x, x_rec, atol=1e-5)
    True

    Real/imaginary pairs in the last dimension:

    >>> pairs = torch.view_as_real(S)
    >>> pairs.shape
    torch.Size([129, 17, 2])
    >>> inverse_short_time_fourier_transform(
    ...     pairs, window=window, frame_step=64, length=1024
    ... ).shape
    torch.Size([1024])

    Notes
    -----
    **Perfect Reconstruction:**

    The reconstruction inverts the forward STFT wherever

    .. math::
        \sum_m w^2[n - mH] > \epsilon

    Positions that violate it (typically the edges of an uncentered
    transform with a tapered window) are output as zero.

    **Accumulation Order:**

    Frames are inverted and windowed all at once, then added to the
    output in ascending frame order, so results are reproducible bit for
    bit on a given device.

    **Gradient Computation:**

    The reconstruction is composed of differentiable PyTorch operations.
    Gradients with respect to ``input`` and ``window`` are exact.

    See Also
    --------
    torch.stft : The matching forward transform.
    torch.istft : PyTorch's ISTFT implementation.
    """
    window = check_window(window)

    bins, num_frames = check_signal(input)

    if frame_size is None:
        frame_size = 2 * (bins - 1) if onesided else bins

    frame_size = as_int(frame_size, "frame_size", InvalidFrameSizeError)

    if frame_size <= 0:
        raise InvalidFrameSizeError(
            f"frame_size must be positive, got {frame_size}"
        )

    if frame_step is None:
        frame_step = frame_size // 4

    frame_step = as_int(frame_step, "frame_step", InvalidFrameStepError)

    if frame_step <= 0:
        raise InvalidFrameStepError(
            f"frame_step must be positive, got {frame_step}"
        )

    if length is not None:
        length = as_int(length, "length", InvalidLengthError)

        if length < 0:
            raise InvalidLengthError(
                f"length must be non-negative, got {length}"
            )

    check_frame_bins(bins, frame_size, onesided)

    if num_frames == 0:
        raise SignalShapeError("input must contain at least one frame")

    window = check_window(window, frame_size)

    epsilon = check_epsilon(epsilon)

    check_buffer_length(num_frames, frame_size, frame_step, length)

    spectrum = as_complex(input)

    window = window.to(dtype=spectrum.real.dtype, device=spectrum.device)

    if not torch.any(window != 0):
        warnings.warn(
            "window is identically zero; every reconstructed sample will "
            "be zero.",
            RuntimeWarning,
            stacklevel=2,
        )

    frames = inverse_frame_transform(spectrum, frame_size, onesided=onesided)

    frames = apply_window(frames, window)

    acc, weight = overlap_add(frames, window, frame_step)

    result = normalize_by_window_energy(acc, weight, epsilon)

    if normalized:
        result = result * math.sqrt(frame_size)

    if length is not None:
        offset = frame_size // 2 if center else 0

        result = fit_length(result, length, offset=offset)
    elif center:
        result = trim_center(result, frame_size)

    if out is not None:
        out.copy_(result)
        return out

    return result
