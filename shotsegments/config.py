"""Detection settings: the contract between the CLI and the engine."""

import re
from dataclasses import dataclass
from pathlib import Path

DEFAULT_THRESHOLD = 50
DEFAULT_MIN_DURATION = 1000

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class DetectConfig:
    """Configuration for one shot-segmentation pass."""

    input: str
    threshold: int = DEFAULT_THRESHOLD
    min_duration: int = DEFAULT_MIN_DURATION
    save_images: bool = False
    image_dir: Path = Path(".")
    ffmpeg: bool = False
    verbose: int = 0


def _leading_int(text: str | None) -> int:
    """Parse the leading integer of *text* the way C ``atoi`` does (0 if none)."""
    if text is None:
        return 0
    m = _LEADING_INT.match(text)
    return int(m.group(1)) if m else 0


def parse_count(text: str | None, default: int) -> int:
    """Forgiving parse for numeric flags.

    Non-numeric, zero or negative values fall back to *default* instead of
    failing. A deliberate value of 0 therefore cannot be requested this way.
    Unlike plain ``atoi`` handling, negatives are replaced too rather than
    passed through, since neither a threshold nor a length can be negative.
    """
    value = _leading_int(text)
    if value <= 0:
        return default
    return value


def parse_verbosity(text: str | None) -> int:
    """Parse an optional ``--verbose`` level. A bare flag means level 1."""
    if text is None:
        return 1
    return max(_leading_int(text), 0)
