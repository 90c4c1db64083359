"""Render the fly-through as a numbered sequence of PNG frames.

Drives :func:`mengerprison.render_frames` at a fixed time step, which is the
frame loop the renderer leaves to its host.

Usage::

    python scripts/render_sequence.py                       # 8 s at 24 fps into frames/
    python scripts/render_sequence.py --duration 2 --fps 12 --out-dir out
    ffmpeg -framerate 24 -i frames/frame_%05d.png flythrough.mp4

Requirements: numpy, matplotlib
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
import time

# Ensure the repo root (parent of scripts/) is importable regardless of cwd
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np

from mengerprison import FrameInputs, RenderContext, render_frames, save_image
from mengerprison.cli import add_config_arguments, config_from_args, setup_logging

logger = logging.getLogger("render_sequence")


def frame_times(duration: float, fps: float, start: float = 0.0) -> np.ndarray:
    """Elapsed times of every frame in ``[start, start + duration)``."""
    count = int(round(duration * fps))
    return start + np.arange(count) / fps


def main() -> None:
    parser = argparse.ArgumentParser(description="Render the menger prison fly-through to PNG frames.")
    parser.add_argument("--out-dir", default="frames", help="Directory for the numbered frames")
    parser.add_argument("--size", type=int, nargs=2, default=(320, 180),
                        metavar=("WIDTH", "HEIGHT"), help="Viewport size in pixels")
    parser.add_argument("--duration", type=float, default=8.0, help="Seconds of animation")
    parser.add_argument("--fps", type=float, default=24.0, help="Frames per second")
    parser.add_argument("--start", type=float, default=0.0, help="Elapsed time of the first frame")
    parser.add_argument("--velocity", type=float, default=0.5,
                        help="Forward speed in lattice cells per second")
    parser.add_argument("--workers", type=int, default=os.cpu_count() or 1,
                        help="Threads marching bands of each frame")
    add_config_arguments(parser)
    args = parser.parse_args()

    setup_logging(args.verbose, args.log_file)
    if args.fps <= 0 or args.duration < 0:
        raise SystemExit("--fps must be positive and --duration non-negative")
    try:
        config = config_from_args(args)
        context = RenderContext(config=config, animated=True, workers=args.workers)
        # validate size and velocity before the loop starts
        FrameInputs(tuple(args.size), args.start, args.velocity)
    except (ValueError, TypeError) as e:
        raise SystemExit(f"Invalid render settings: {e}")

    times = frame_times(args.duration, args.fps, args.start)
    logger.info(f"Rendering {len(times)} frames of {args.size[0]}x{args.size[1]} into {args.out_dir}")
    started = time.perf_counter()
    for index, (t, frame) in enumerate(render_frames(context, tuple(args.size), times, args.velocity)):
        path = os.path.join(args.out_dir, f"frame_{index:05d}.png")
        save_image(path, frame)
        logger.debug(f"Frame {index} (t={t:.3f}s) -> {path}")
    logger.info(f"Done in {time.perf_counter() - started:.1f}s")


if __name__ == "__main__":
    main()
