"""Exceptions for the inverse short-time Fourier transform."""


class InverseShortTimeFourierTransformError(ValueError):
    """Base exception for invalid inverse STFT arguments."""

    pass


class InvalidFrameSizeError(InverseShortTimeFourierTransformError):
    """Raised when the frame size is invalid.

    This occurs when:
    - frame_size is not an integer
    - frame_size is not positive
    """

    pass


class InvalidFrameStepError(InverseShortTimeFourierTransformError):
    """Raised when the frame step (hop length) is invalid.

    This occurs when:
    - frame_step is not an integer
    - frame_step is not positive, including a default that resolves to 0
    """

    pass


class InvalidLengthError(InverseShortTimeFourierTransformError):
    """Raised when the requested output length is not a non-negative integer."""

    pass


class WindowShapeError(InverseShortTimeFourierTransformError):
    """Raised when the window cannot be applied to the frames.

    This occurs when:
    - window is missing
    - window is not 1-D
    - window length is neither frame_size nor 1
    """

    pass


class SignalShapeError(InverseShortTimeFourierTransformError):
    """Raised when the framed spectral input is malformed.

    This occurs when:
    - a real input does not end in a (real, imaginary) dimension of size 2
    - the input has too few dimensions
    - the number of frequency bins does not match frame_size
    - the input holds no frames
    """

    pass


class BufferSizeError(InverseShortTimeFourierTransformError):
    """Raised when the overlap-add buffer or output length cannot be allocated."""

    pass
