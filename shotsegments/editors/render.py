"""Output renderer: segment listings and ffmpeg extraction commands."""

from shotsegments import ffutil
from shotsegments.models import Segment


def segment_filename(input_path: str, number: int) -> str:
    """Derive the output file for segment *number*.

    ``movie.mp4`` becomes ``movie-1.mp4``: the suffix goes before the last
    ``.`` of the base name, and an extensionless name gets it appended.
    Everything up to the last ``/`` is kept as typed, so URLs and relative
    paths survive unchanged.
    """
    head, sep, base = input_path.rpartition("/")
    stem, dot, ext = base.rpartition(".")
    if not dot:
        return f"{input_path}-{number}"
    return f"{head}{sep}{stem}-{number}.{ext}"


def render_listing(segments: list[Segment]) -> list[str]:
    return [f"{seg.number}: {seg.start} - {seg.end}" for seg in segments]


def render_commands(
    segments: list[Segment], input_path: str, fps: float
) -> list[str]:
    """One ffmpeg command line per segment, extracting it without re-encoding."""
    lines: list[str] = []
    for seg in segments:
        cmd = ffutil.extract_segment_cmd(
            input_path,
            seg.start,
            seg.end,
            fps,
            segment_filename(input_path, seg.number),
        )
        lines.append(ffutil.format_cmd(cmd))
    return lines
