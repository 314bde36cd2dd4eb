"""OpenCV video access: decoding frames and saving them as images."""

import logging
from pathlib import Path
from typing import Iterator

import cv2
import numpy as np

from shotsegments.models import StreamInfo

logger = logging.getLogger(__name__)


class VideoOpenError(RuntimeError):
    pass


class EmptyVideoError(ValueError):
    """Raised when an opened stream yields no frames."""
    pass


class FrameRateError(ValueError):
    """Raised when time-codes are needed but the stream reports no frame rate."""
    pass


class VideoSource:
    """A decoded frame stream over a ``cv2.VideoCapture``.

    Frames are yielded in decode order. OpenCV does not distinguish a decode
    error from the end of the stream, so either simply ends iteration.
    """

    def __init__(self, capture: cv2.VideoCapture) -> None:
        self.capture = capture
        self.info = StreamInfo(
            fps=float(capture.get(cv2.CAP_PROP_FPS)),
            width=int(capture.get(cv2.CAP_PROP_FRAME_WIDTH)),
            height=int(capture.get(cv2.CAP_PROP_FRAME_HEIGHT)),
        )

    def frames(self) -> Iterator[np.ndarray]:
        while True:
            ok, frame = self.capture.read()
            if not ok:
                return
            yield frame

    def close(self) -> None:
        self.capture.release()

    def __enter__(self) -> "VideoSource":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


def open_video(input_path: str) -> VideoSource:
    """Open *input_path* for decoding, raising VideoOpenError on failure."""
    capture = cv2.VideoCapture(input_path)
    if not capture.isOpened():
        capture.release()
        raise VideoOpenError("can't open video")

    source = VideoSource(capture)
    logger.debug(
        "Opened %s: %dx%d at %.3f fps",
        input_path,
        source.info.width,
        source.info.height,
        source.info.fps,
    )
    return source


def frame_image_name(frame: int, tag: str) -> str:
    """``00000030-in.jpg`` style name for a saved frame."""
    return f"{frame:08d}-{tag}.jpg"


def save_frame(frame: int, image: np.ndarray, tag: str, out_dir: Path) -> Path:
    """Write *image* as a JPEG tagged ``in`` or ``out``."""
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / frame_image_name(frame, tag)
    cv2.imwrite(str(path), image)
    logger.debug("Saved %s", path)
    return path
