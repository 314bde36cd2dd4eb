"""Orchestrator: runs one detection pass defined by a DetectConfig."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from shotsegments import videoio
from shotsegments.analyzers.boundaries import BoundaryDetector
from shotsegments.analyzers.frames import difference_score, to_gray
from shotsegments.config import DetectConfig
from shotsegments.editors.render import render_commands, render_listing
from shotsegments.editors.segments import assemble_segments
from shotsegments.models import FrameScore, Segment, StreamInfo


@dataclass
class EngineResult:
    stream: StreamInfo
    frame_count: int = 0
    markers: list[int] = field(default_factory=list)
    segments: list[Segment] = field(default_factory=list)
    saved_images: list[Path] = field(default_factory=list)


def process(
    config: DetectConfig,
    on_frame: Callable[[FrameScore], None] | None = None,
    on_open: Callable[[StreamInfo], None] | None = None,
) -> EngineResult:
    """Detect shot boundaries in ``config.input`` and assemble segments.

    Args:
        config: Detection settings.
        on_frame: Optional callback receiving every scored frame (frame 0 is
            never scored).
        on_open: Optional callback receiving the stream properties once the
            video is open and before any frame is decoded.

    Raises:
        videoio.VideoOpenError: the video cannot be opened.
        videoio.EmptyVideoError: the video has no frames.
        videoio.FrameRateError: ffmpeg commands were requested but the stream
            has no usable frame rate.
    """
    with videoio.open_video(config.input) as source:
        stream = source.info
        if config.ffmpeg and stream.fps <= 0:
            raise videoio.FrameRateError("no usable frame rate")
        if on_open:
            on_open(stream)

        frames = source.frames()
        previous_color = next(frames, None)
        if previous_color is None:
            raise videoio.EmptyVideoError("need some frames")

        saved: list[Path] = []

        def _save(frame: int, image, tag: str) -> None:
            if config.save_images:
                saved.append(videoio.save_frame(frame, image, tag, config.image_dir))

        previous = to_gray(previous_color)
        detector = BoundaryDetector(config.threshold)
        _save(0, previous_color, "in")

        for current_color in frames:
            current = to_gray(current_color)
            score = difference_score(current, previous)
            boundary = detector.observe(score)

            if on_frame:
                on_frame(
                    FrameScore(
                        frame=detector.frame,
                        score=score,
                        delta=detector.last_delta,
                        boundary=boundary is not None,
                    )
                )
            if boundary is not None:
                _save(boundary - 1, previous_color, "out")
                _save(boundary, current_color, "in")

            # Only replace the previous frame once it has been scored against
            previous = current
            previous_color = current_color

        markers = detector.finish()
        _save(detector.frame, previous_color, "out")

    return EngineResult(
        stream=stream,
        frame_count=detector.frame + 1,
        markers=markers,
        segments=assemble_segments(markers, config.min_duration),
        saved_images=saved,
    )


def render(result: EngineResult, config: DetectConfig) -> list[str]:
    """Render the retained segments as a listing or as ffmpeg commands."""
    if config.ffmpeg:
        return render_commands(result.segments, config.input, result.stream.fps)
    return render_listing(result.segments)
