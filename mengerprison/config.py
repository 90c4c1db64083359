"""Fixed rendering constants for the menger prison field and its ray marcher.

The values are grouped in a frozen :class:`MengerConfig` that is validated
once, when it is built, so a bad value fails before any frame is rendered.

Presets
-------
``ANIMATED_CONFIG``
    The fly-through: 50 march steps per ray.
``STATIC_CONFIG``
    The still view from the origin: 100 march steps per ray.
"""

from __future__ import annotations

import dataclasses
import json
import logging
import math
import numbers
import os
from dataclasses import dataclass
from typing import Any, Mapping

logger = logging.getLogger(__name__)

__all__ = [
    "MengerConfig",
    "ANIMATED_CONFIG",
    "STATIC_CONFIG",
    "config_from_mapping",
    "load_config",
]


@dataclass(frozen=True)
class MengerConfig:
    """Field and integrator constants.

    Parameters
    ----------
    box_dimen:
        Edge length of the largest lattice cube.  The field repeats every
        ``2 * box_dimen`` along each axis.
    iterations:
        Number of carving passes applied below the bounding cross.
    max_steps:
        Step budget of a single ray march.
    hit_dist:
        A field value below this ends the march as a hit.
    miss_dist:
        A field value above this ends the march as a miss.
    """

    box_dimen: float = 20.0
    iterations: int = 5
    max_steps: int = 50
    hit_dist: float = 0.01
    miss_dist: float = 60.0

    def __post_init__(self) -> None:
        for name in ("iterations", "max_steps"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise TypeError(f"{name} must be an integer, got {value!r}")
        for name in ("box_dimen", "hit_dist", "miss_dist"):
            if not math.isfinite(getattr(self, name)):
                raise ValueError(f"{name} must be finite, got {getattr(self, name)!r}")

        if self.box_dimen <= 0:
            raise ValueError(f"box_dimen must be positive, got {self.box_dimen}")
        if self.iterations < 0:
            raise ValueError(f"iterations must be >= 0, got {self.iterations}")
        if self.max_steps <= 0:
            raise ValueError(f"max_steps must be positive, got {self.max_steps}")
        if self.hit_dist <= 0:
            raise ValueError(f"hit_dist must be positive, got {self.hit_dist}")
        if self.miss_dist <= self.hit_dist:
            raise ValueError(
                f"miss_dist ({self.miss_dist}) must exceed hit_dist ({self.hit_dist})"
            )

    @property
    def half_box_dimen(self) -> float:
        """Half-extent of the bounding cross arms."""
        return self.box_dimen * 0.5

    @property
    def period(self) -> float:
        """Spatial period of the lattice along every axis."""
        return self.box_dimen * 2.0

    @property
    def velocity_unit(self) -> float:
        """Forward distance covered per unit of velocity per second."""
        return self.box_dimen

    def replace(self, **changes: Any) -> MengerConfig:
        """Return a validated copy with *changes* applied."""
        return dataclasses.replace(self, **changes)


ANIMATED_CONFIG = MengerConfig(max_steps=50)
STATIC_CONFIG = MengerConfig(max_steps=100)


def _field_names() -> set[str]:
    return {f.name for f in dataclasses.fields(MengerConfig)}


def config_from_mapping(
    data: Mapping[str, Any], base: MengerConfig = ANIMATED_CONFIG
) -> MengerConfig:
    """Overlay the keys of *data* on *base*; unknown keys are rejected."""
    unknown = set(data) - _field_names()
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")
    return base.replace(**data)


def load_config(path: str | os.PathLike, base: MengerConfig = ANIMATED_CONFIG) -> MengerConfig:
    """Read a JSON object from *path* and overlay it on *base*."""
    logger.info(f"Loading render config from: {path}")
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a JSON object")
    config = config_from_mapping(data, base)
    logger.debug(f"Loaded config: {config}")
    return config
