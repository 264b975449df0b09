"""Render a colour gradient and save it as a plain PPM image."""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Sequence, TextIO

from raytrace.mmath import Vec3
from raytrace.progress import update_progress

DEFAULT_WIDTH = 256
DEFAULT_HEIGHT = 256
DEFAULT_OUTPUT = "output.ppm"


def render_gradient(
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    stream: TextIO | None = None,
) -> list[Vec3]:
    """Fill a row-major framebuffer with a red/green gradient.

    Progress is drawn on ``stream`` when one is given.
    """
    if width < 2 or height < 2:
        raise ValueError("width and height must both be at least 2")
    framebuffer: list[Vec3] = []
    for i in range(height):
        red = float(int(i * 255 / (width - 1)))
        framebuffer.extend(
            Vec3(red, float(int(j * 255 / (height - 1))), 0.0) for j in range(width)
        )
        if stream is not None:
            update_progress((i + 1) / height, stream)
    if stream is not None:
        update_progress(1.0, stream)
        stream.write("\n")
    return framebuffer


def _format_number(value: float) -> str:
    return f"{value:g}"


def format_ppm(framebuffer: Sequence[Vec3], width: int, height: int) -> str:
    """Return the image as plain-text (P3) PPM."""
    if len(framebuffer) != width * height:
        raise ValueError(
            f"framebuffer holds {len(framebuffer)} pixels, expected {width * height}"
        )
    lines = [f"P3\n{width} {height}\n255"]
    lines.extend(" ".join(_format_number(c) for c in pixel) for pixel in framebuffer)
    return "\n".join(lines) + "\n"


def write_ppm(path, framebuffer: Sequence[Vec3], width: int, height: int) -> None:
    """Write the image to ``path`` as plain-text PPM."""
    Path(path).write_text(format_ppm(framebuffer, width, height), encoding="ascii")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Render a gradient to a PPM file.")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT)
    args = parser.parse_args(argv)

    start = time.perf_counter()
    try:
        framebuffer = render_gradient(args.width, args.height, sys.stdout)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    elapsed = time.perf_counter() - start
    print(f"Elapsed time: {elapsed} seconds")

    try:
        write_ppm(args.output, framebuffer, args.width, args.height)
    except OSError:
        print("Error opening output file.", file=sys.stderr)
        return 1
    print(f"Finished writing {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())