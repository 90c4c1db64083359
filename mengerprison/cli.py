"""Command-line helpers shared by the scripts in ``scripts/``."""

from __future__ import annotations

import argparse
import logging
from typing import Optional

from .config import ANIMATED_CONFIG, STATIC_CONFIG, MengerConfig, load_config

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """Send library log records to the console and, optionally, to *log_file*."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=_LOG_FORMAT,
        handlers=handlers,
    )


def add_config_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the render-constant overrides and logging flags to *parser*."""
    group = parser.add_argument_group("render constants")
    group.add_argument("--config", help="JSON file of MengerConfig overrides")
    group.add_argument("--box-dimen", type=float, help="Edge of the largest lattice cube")
    group.add_argument("--iterations", type=int, help="Carving passes")
    group.add_argument("--max-steps", type=int, help="March step budget per ray")
    group.add_argument("--hit-dist", type=float, help="Hit threshold")
    group.add_argument("--miss-dist", type=float, help="Miss threshold")

    parser.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG level")
    parser.add_argument("--log-file", help="Also write log records to this file")


def config_from_args(args: argparse.Namespace, static: bool = False) -> MengerConfig:
    """Build a config from the preset, the ``--config`` file, then explicit flags."""
    base = STATIC_CONFIG if static else ANIMATED_CONFIG
    if args.config:
        base = load_config(args.config, base)

    overrides = {
        name: getattr(args, name)
        for name in ("box_dimen", "iterations", "max_steps", "hit_dist", "miss_dist")
        if getattr(args, name) is not None
    }
    return base.replace(**overrides)
