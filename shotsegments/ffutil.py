"""FFmpeg command construction for segment extraction."""

from shotsegments.timecode import TimecodeMode, format_timecode


def extract_segment_cmd(
    input_path: str, start: int, end: int, fps: float, output_path: str
) -> list[str]:
    """Build a stream-copy ffmpeg command for frames [start, end).

    Seeks coarsely before ``-i`` (fast, keyframe-aligned) and then finely
    after it, which together land on ``floor(start / fps)`` seconds.
    """
    return [
        "ffmpeg",
        "-ss", format_timecode(start, fps, TimecodeMode.INPUT),
        "-i", input_path,
        "-ss", format_timecode(start, fps, TimecodeMode.OUTPUT),
        "-t", format_timecode(end - start, fps, TimecodeMode.DURATION),
        "-c", "copy",
        "-y",
        output_path,
    ]


def format_cmd(cmd: list[str]) -> str:
    """Render a command as one shell line, double-quoting the ``-i`` input."""
    parts: list[str] = []
    quote_next = False
    for arg in cmd:
        parts.append(f'"{arg}"' if quote_next else arg)
        quote_next = arg == "-i"
    return " ".join(parts)
