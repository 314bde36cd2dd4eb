"""Shared data types used across shotsegments."""

from dataclasses import dataclass


@dataclass
class Segment:
    """A retained frame range [start, end), numbered from 1."""

    number: int
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass
class StreamInfo:
    """Properties of an opened video stream."""

    fps: float
    width: int
    height: int


@dataclass
class FrameScore:
    """Per-frame detector record handed to progress callbacks."""

    frame: int
    score: int
    delta: int
    boundary: bool = False
