"""Frame reduction and scoring: grayscale conversion and pixel differences."""

import cv2
import numpy as np


def to_gray(frame: np.ndarray) -> np.ndarray:
    """Reduce a colour frame to a single intensity channel."""
    if frame.ndim == 2:
        return frame
    return cv2.cvtColor(frame, cv2.COLOR_RGB2GRAY)


def difference_score(current: np.ndarray, previous: np.ndarray) -> int:
    """Mean absolute per-pixel difference between two grayscale frames.

    The sum of differences is floor-divided by the pixel count, so the
    score is always a non-negative integer and identical frames score 0.
    """
    if current.shape != previous.shape:
        raise ValueError(
            f"frame shape mismatch: {current.shape} vs {previous.shape}"
        )

    diffs = cv2.absdiff(current, previous)
    total = int(diffs.sum(dtype=np.int64))
    return total // (current.shape[0] * current.shape[1])
