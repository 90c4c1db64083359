"""Render a single menger prison frame to an image (or ``.npy``) file.

Usage::

    python scripts/render_frame.py                          # saves menger_prison.png
    python scripts/render_frame.py --time 3.5 --velocity 0.5 --out frame.png
    python scripts/render_frame.py --static --size 640 360  # still view from the origin
    python scripts/render_frame.py --out frame.npy          # raw float RGB array

Requirements: numpy, matplotlib
"""
from __future__ import annotations

import argparse
import logging
import os
import sys

# Ensure the repo root (parent of scripts/) is importable regardless of cwd
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from mengerprison import FrameInputs, RenderContext, render_frame, save_image, save_npy
from mengerprison.cli import add_config_arguments, config_from_args, setup_logging

logger = logging.getLogger("render_frame")


def main() -> None:
    parser = argparse.ArgumentParser(description="Render one frame of the menger prison.")
    parser.add_argument("--out", default="menger_prison.png",
                        help="Output path; .npy saves the float RGB array")
    parser.add_argument("--size", type=int, nargs=2, default=(480, 270),
                        metavar=("WIDTH", "HEIGHT"), help="Viewport size in pixels")
    parser.add_argument("--time", type=float, default=0.0, help="Elapsed time in seconds")
    parser.add_argument("--velocity", type=float, default=0.5,
                        help="Forward speed in lattice cells per second")
    parser.add_argument("--static", action="store_true",
                        help="Render the still view from the origin instead of the fly-through")
    parser.add_argument("--workers", type=int, default=os.cpu_count() or 1,
                        help="Threads marching bands of the frame")
    add_config_arguments(parser)
    args = parser.parse_args()

    setup_logging(args.verbose, args.log_file)
    try:
        config = config_from_args(args, static=args.static)
        context = RenderContext(config=config, animated=not args.static, workers=args.workers)
        inputs = FrameInputs(tuple(args.size), args.time, args.velocity)
    except (ValueError, TypeError) as e:
        raise SystemExit(f"Invalid render settings: {e}")

    frame = render_frame(context, inputs)
    if args.out.endswith(".npy"):
        save_npy(args.out, frame)
    else:
        save_image(args.out, frame)
    logger.info(f"Saved: {args.out}")


if __name__ == "__main__":
    main()
