from typing import NamedTuple

import hypothesis.strategies


class FrameGeometry(NamedTuple):
    frame_size: int
    frame_step: int
    num_frames: int

    @property
    def signal_length(self) -> int:
        """Overlap-add length before centering or length adjustment."""
        return self.frame_step * (self.num_frames - 1) + self.frame_size


@hypothesis.strategies.composite
def frame_geometries(
    draw: hypothesis.strategies.DrawFn,
    min_frame_size: int = 1,
    max_frame_size: int = 64,
    max_frames: int = 16,
    max_overlap_ratio: float | None = None,
) -> FrameGeometry:
    """Strategy for (frame_size, frame_step, num_frames) triples.

    ``max_overlap_ratio`` bounds ``frame_step`` to at most
    ``frame_size * max_overlap_ratio`` (and at least 1), e.g. ``0.5`` for
    windows that need 50% overlap to cover every sample.
    """
    frame_size = draw(
        hypothesis.strategies.integers(
            min_value=min_frame_size, max_value=max_frame_size
        )
    )

    max_step = 2 * frame_size
    if max_overlap_ratio is not None:
        max_step = max(1, int(frame_size * max_overlap_ratio))

    frame_step = draw(
        hypothesis.strategies.integers(min_value=1, max_value=max_step)
    )
    num_frames = draw(
        hypothesis.strategies.integers(min_value=1, max_value=max_frames)
    )

    return FrameGeometry(frame_size, frame_step, num_frames)
