"""Camera rays and the animated fly-through path.

Pixel directions use the bottom-left origin convention of a GL fragment
coordinate, recentered to the middle of the viewport and divided by its
height.  Returned arrays are in image order, so row 0 is the top row.

The fly-through moves forward along +Z at ``velocity * box_dimen`` per second
and weaves sideways in four-cycle patterns.  Each cycle lasts
``4 / velocity`` seconds and pushes the camera toward one of four lateral
directions, by an amount read from :data:`HIGH_Y_LEVELS` that keeps the
camera inside the lattice corridors at that depth of the fractal.  No
collision test is done; the table is what keeps the path clear.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

import numpy as np
import numpy.typing as npt

from ._sdf_common import normalize, smoothstep, vec3
from .config import ANIMATED_CONFIG, MengerConfig

_Array = npt.NDArray[np.floating]

TAU = 2.0 * math.pi

# Peak lateral offset per movement, in units of box_dimen.
HIGH_Y_LEVELS = (
    1.0,
    0.5 + 3.0 / 18.0,
    0.5 + 3.0 / 54.0,
    0.5 + 3.0 / 162.0,
)

# Lateral (x, y) unit directions, indexed by movement index.
MOVEMENT_DIRECTIONS = np.array(
    [
        [0.0, -1.0],
        [-1.0, 0.0],
        [1.0, 0.0],
        [0.0, 1.0],
    ]
)

STATIC_ORIGIN = np.zeros(3)

_SMOOTH_EDGES = (-0.60, 0.60)


@dataclass(frozen=True)
class AnimationState:
    """Time-derived camera state for one frame."""

    elapsed_time: float
    velocity: float

    @property
    def cycles_per_second(self) -> float:
        return self.velocity / 4.0

    @property
    def cycle(self) -> float:
        return self.elapsed_time * self.cycles_per_second

    @property
    def movement_index(self) -> int:
        return int(math.floor(self.cycle)) % 4

    @property
    def sway(self) -> float:
        """Smoothed 0..1 weight of the lateral offset within the current cycle."""
        return float(smoothstep(*_SMOOTH_EDGES, -math.cos(TAU * self.cycle)))

    def lateral_offset(self, config: MengerConfig = ANIMATED_CONFIG) -> _Array:
        """``(x, y)`` sideways displacement of the camera."""
        magnitude = self.sway * config.box_dimen * HIGH_Y_LEVELS[self.movement_index]
        return magnitude * MOVEMENT_DIRECTIONS[self.movement_index]

    def forward_offset(self, config: MengerConfig = ANIMATED_CONFIG) -> float:
        return self.elapsed_time * self.velocity * config.velocity_unit


def camera_origin(state: AnimationState, config: MengerConfig = ANIMATED_CONFIG) -> _Array:
    """Ray origin of the fly-through at *state*."""
    start = np.array([0.0, 0.0, -config.box_dimen])
    lateral = state.lateral_offset(config)
    return start + np.array([lateral[0], lateral[1], state.forward_offset(config)])


def pixel_directions(
    width: int, height: int, rotation: Optional[_Array] = None
) -> _Array:
    """Unit view directions through every pixel centre.

    Parameters
    ----------
    width, height:
        Viewport size in pixels.
    rotation:
        Optional ``(3, 3)`` camera rotation applied before normalising.
        Defaults to the identity.

    Returns
    -------
    numpy.ndarray
        Shape ``(height, width, 3)``; row 0 is the top of the image.
    """
    xs = np.arange(width) + 0.5
    ys = height - (np.arange(height) + 0.5)
    X, Y = np.meshgrid(xs, ys, indexing="xy")

    u = (X - 0.5 * width) / height
    v = (Y - 0.5 * height) / height
    rd = vec3(u, v, np.ones_like(u))
    if rotation is not None:
        rd = rd @ np.asarray(rotation, dtype=float).T
    return normalize(rd)
