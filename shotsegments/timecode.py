"""HH:MM:SS time-codes for ffmpeg seek and duration arguments."""

from enum import Enum


class TimecodeMode(Enum):
    """Rounding applied to a frame offset before formatting.

    INPUT and OUTPUT split a seek point into a coarse whole-minute input seek
    and the residual output seek, so ``INPUT + OUTPUT == floor(frame / fps)``.
    DURATION pads by one second so the last frame of a segment is kept.
    """

    INPUT = "input"
    OUTPUT = "output"
    DURATION = "duration"


def timecode_seconds(frame: int, fps: float, mode: TimecodeMode) -> int:
    """Return the whole seconds that *frame* maps to under *mode*."""
    if fps <= 0:
        raise ValueError(f"frame rate must be positive, got {fps}")

    total = int(frame / fps)
    if mode is TimecodeMode.INPUT:
        total -= total % 60
    elif mode is TimecodeMode.OUTPUT:
        total %= 60
    elif mode is TimecodeMode.DURATION:
        total += 1
    return total


def format_seconds(total: int) -> str:
    h = total // 3600
    m = (total // 60) % 60
    s = total % 60
    return f"{h:02d}:{m:02d}:{s:02d}"


def format_timecode(frame: int, fps: float, mode: TimecodeMode) -> str:
    """Format a frame offset (or frame count, for DURATION) as HH:MM:SS."""
    return format_seconds(timecode_seconds(frame, fps, mode))
