"""Segment assembler: pairs up boundary markers and filters by length."""

from shotsegments.models import Segment


def assemble_segments(markers: list[int], min_duration: int) -> list[Segment]:
    """Build numbered segments from consecutive markers.

    Each adjacent pair ``(markers[i - 1], markers[i])`` is one candidate
    segment. Candidates shorter than *min_duration* frames are dropped, not
    merged into a neighbour, and numbering counts retained segments only.
    """
    if len(markers) < 2:
        raise ValueError("need at least a start and an end marker")

    segments: list[Segment] = []
    for start, end in zip(markers, markers[1:]):
        if end - start >= min_duration:
            segments.append(Segment(number=len(segments) + 1, start=start, end=end))
    return segments
