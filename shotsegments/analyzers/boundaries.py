"""Shot boundary detector: dual-threshold rule over consecutive scores."""

import logging

logger = logging.getLogger(__name__)


class BoundaryDetector:
    """Turns a stream of per-frame scores into boundary markers.

    Frame 0 has no score; each call to :meth:`observe` scores the next frame.
    A boundary is declared only when the score exceeds the threshold *and*
    differs from the previous frame's score by more than the threshold, so a
    sustained run of high-motion frames marks only its first frame.
    """

    def __init__(self, threshold: int) -> None:
        if threshold < 0:
            raise ValueError(f"threshold must be non-negative, got {threshold}")
        self.threshold = threshold
        self.frame = 0
        self.last_score = 0
        self.last_delta = 0
        self.markers: list[int] = [0]

    def observe(self, score: int) -> int | None:
        """Score the next frame. Returns its index if it starts a new segment."""
        self.frame += 1
        delta = abs(score - self.last_score)
        self.last_delta = delta
        # Compared against the immediately preceding score, never a baseline
        self.last_score = score

        if score > self.threshold and delta > self.threshold:
            self.markers.append(self.frame)
            logger.debug(
                "Boundary at frame %d (score=%d, delta=%d)", self.frame, score, delta
            )
            return self.frame
        return None

    def finish(self) -> list[int]:
        """Close the pass with the final-frame sentinel and return all markers."""
        if len(self.markers) < 2 or self.markers[-1] != self.frame:
            self.markers.append(self.frame)
        return self.markers
