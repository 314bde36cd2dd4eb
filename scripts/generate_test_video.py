#!/usr/bin/env python3
"""Generate a synthetic test video for shotsegments boundary testing.

Produces a 12-second, 30 fps video of solid-colour shots with hard cuts:
  0-3s   blue
  3-7s   white
  7-9s   black
  9-12s  yellow

Cuts land at frames 90, 210 and 270; the last frame is 359.
"""

import subprocess
import sys
from pathlib import Path

SHOTS = [("blue", 3), ("white", 4), ("black", 2), ("yellow", 3)]


def generate_test_video(output: Path) -> None:
    output.parent.mkdir(parents=True, exist_ok=True)

    parts = [
        f"color=c={colour}:s=320x240:d={seconds}:r=30[v{i}]"
        for i, (colour, seconds) in enumerate(SHOTS)
    ]
    labels = "".join(f"[v{i}]" for i in range(len(SHOTS)))
    filter_complex = ";".join(parts) + f";{labels}concat=n={len(SHOTS)}:v=1:a=0[vout]"

    cmd = [
        "ffmpeg", "-y",
        "-filter_complex", filter_complex,
        "-map", "[vout]",
        "-c:v", "libx264",
        "-pix_fmt", "yuv420p",
        str(output),
    ]
    subprocess.run(cmd, capture_output=True, check=True)
    print(f"Generated: {output}")


if __name__ == "__main__":
    out = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("tests/fixtures/synthetic.mp4")
    generate_test_video(out)
