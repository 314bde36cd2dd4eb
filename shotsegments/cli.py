"""Thin CLI entry point: builds a DetectConfig and calls the engine."""

import argparse
import logging
import sys

from shotsegments import videoio
from shotsegments.config import (
    DEFAULT_MIN_DURATION,
    DEFAULT_THRESHOLD,
    DetectConfig,
    parse_count,
    parse_verbosity,
)
from shotsegments.engine import process, render
from shotsegments.models import FrameScore, StreamInfo

USAGE = (
    "shotsegments --in <video-file>\n"
    "                    [--save-images]\n"
    f"                    [--threshold t={DEFAULT_THRESHOLD}]\n"
    f"                    [--min-duration d={DEFAULT_MIN_DURATION}]\n"
    "                    [--ffmpeg]\n"
    "                    [--verbose[=level]]\n"
    "                    [--help]\n"
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shotsegments",
        usage=USAGE,
        description="Split a video into shots by frame-difference boundary detection.",
    )
    # A flag given without its value counts as not given
    parser.add_argument("-i", "--in", dest="input", nargs="?", help="Input video file")
    parser.add_argument(
        "-s", "--save-images", action="store_true",
        help="Save the frames on either side of every boundary as JPEGs",
    )
    parser.add_argument(
        "-t", "--threshold",
        nargs="?",
        help=f"Boundary score threshold (default {DEFAULT_THRESHOLD})",
    )
    parser.add_argument(
        "-m", "--min-duration",
        nargs="?",
        help=f"Minimum segment length in frames (default {DEFAULT_MIN_DURATION})",
    )
    parser.add_argument(
        "-f", "--ffmpeg", action="store_true",
        help="Print ffmpeg extraction commands instead of a segment listing",
    )
    parser.add_argument(
        "-v", "--verbose", nargs="?", const=None, default="0", metavar="LEVEL",
        help="1: report every 1000th frame, 2: report every frame",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()

    if not argv:
        parser.print_usage()
        sys.exit(0)

    args, unknown = parser.parse_known_args(argv)
    for arg in unknown:
        print(f"shotsegments: ignoring unrecognized argument '{arg}'", file=sys.stderr)

    if not args.input:
        parser.print_usage()
        sys.exit(0)

    config = DetectConfig(
        input=args.input,
        threshold=parse_count(args.threshold, DEFAULT_THRESHOLD),
        min_duration=parse_count(args.min_duration, DEFAULT_MIN_DURATION),
        save_images=args.save_images,
        ffmpeg=args.ffmpeg,
        verbose=parse_verbosity(args.verbose),
    )

    logging.basicConfig(
        level=logging.DEBUG if config.verbose >= 2 else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    def on_open(stream: StreamInfo) -> None:
        if config.verbose:
            print(f"FPS={stream.fps:g}")

    def on_frame(fs: FrameScore) -> None:
        if config.verbose > 1 or (config.verbose == 1 and fs.frame % 1000 == 0):
            print(f"Frame={fs.frame} Score={fs.score} Diff={fs.delta}")

    try:
        result = process(config, on_frame=on_frame, on_open=on_open)
    except (videoio.VideoOpenError, videoio.EmptyVideoError, videoio.FrameRateError) as e:
        print(f"{config.input}: {e}", file=sys.stderr)
        sys.exit(1)

    for line in render(result, config):
        print(line)


if __name__ == "__main__":
    main()
