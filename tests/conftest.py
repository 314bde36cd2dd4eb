"""Shared test fixtures."""

import numpy as np
import pytest

from shotsegments.models import StreamInfo


class FakeSource:
    """Stands in for videoio.VideoSource, yielding prepared frames."""

    def __init__(self, frames: list[np.ndarray], fps: float = 30.0):
        self._frames = frames
        height, width = frames[0].shape[:2] if frames else (0, 0)
        self.info = StreamInfo(fps=fps, width=width, height=height)
        self.closed = False

    def frames(self):
        yield from self._frames

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


def _frames_from_scores(scores: list[int], size: tuple[int, int] = (4, 6)) -> list[np.ndarray]:
    """Uniform gray frames whose consecutive difference scores equal *scores*.

    ``scores[i]`` is the score of frame ``i + 1``; frame 0 is black.
    """
    value = 0
    frames = [np.full(size, value, dtype=np.uint8)]
    for score in scores:
        value = value + score if value + score <= 255 else value - score
        frames.append(np.full(size, value, dtype=np.uint8))
    return frames


@pytest.fixture
def frames_from_scores():
    return _frames_from_scores


@pytest.fixture
def scenario_frames() -> list[np.ndarray]:
    """120 frames: static to 29, a cut at 30, steady motion to 89, static to 119."""
    scores = [0] * 29 + [80] * 60 + [0] * 30
    return _frames_from_scores(scores)


@pytest.fixture
def fake_source():
    return FakeSource
