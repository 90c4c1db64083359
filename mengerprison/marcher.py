"""Sphere tracing through a distance field."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Tuple

import numpy as np
import numpy.typing as npt

from .config import ANIMATED_CONFIG, MengerConfig

_Array = npt.NDArray[np.floating]
_SDFFunc = Callable[[_Array], _Array]

MISS_DISTANCE = -1.0


@dataclass(frozen=True)
class MarchResult:
    """Outcome of marching a batch of rays.

    ``distance`` holds the travel distance to the hit for rays that hit and
    :data:`MISS_DISTANCE` for rays that missed.  ``steps`` holds the index of
    the step that hit, or ``max_steps`` for a miss.
    """

    distance: _Array
    steps: npt.NDArray[np.integer]

    @property
    def hit(self) -> npt.NDArray[np.bool_]:
        return self.distance >= 0.0

    @property
    def shape(self) -> Tuple[int, ...]:
        return self.distance.shape


def march(
    field: _SDFFunc,
    origin: _Array,
    direction: _Array,
    config: MengerConfig = ANIMATED_CONFIG,
) -> MarchResult:
    """March rays from *origin* along *direction* through *field*.

    Each ray advances by the field value at its current position.  A ray
    hits once a field value drops below ``config.hit_dist`` and misses once
    one exceeds ``config.miss_dist`` or the ``config.max_steps`` budget runs
    out.

    Parameters
    ----------
    field:
        Callable mapping ``(n, 3)`` points to ``(n,)`` distances.
    origin, direction:
        Broadcast-compatible ``(..., 3)`` arrays.  Directions must be unit
        length; they are used as given.
    config:
        Supplies ``max_steps``, ``hit_dist`` and ``miss_dist``.

    Returns
    -------
    MarchResult
        Arrays with the broadcast batch shape of *origin* and *direction*.
    """
    origin, direction = np.broadcast_arrays(
        np.asarray(origin, dtype=float), np.asarray(direction, dtype=float)
    )
    batch = origin.shape[:-1]
    o = origin.reshape(-1, 3)
    rd = direction.reshape(-1, 3)
    n = o.shape[0]

    dist = np.zeros(n)
    steps = np.full(n, config.max_steps, dtype=np.int64)
    hit = np.zeros(n, dtype=bool)
    live = np.arange(n)

    for i in range(config.max_steps):
        if live.size == 0:
            break
        pos = o[live] + dist[live, None] * rd[live]
        d = np.asarray(field(pos), dtype=float)
        dist[live] += d

        hit_now = d < config.hit_dist
        miss_now = d > config.miss_dist
        steps[live[hit_now]] = i
        hit[live[hit_now]] = True
        # NaN distances satisfy neither test and keep marching until the budget runs out
        live = live[~(hit_now | miss_now)]

    # rays starting inside solid stop with negative travel; report them as misses
    hit &= dist >= 0.0
    distance = np.where(hit, dist, MISS_DISTANCE)
    steps = np.where(hit, steps, config.max_steps)
    return MarchResult(distance.reshape(batch), steps.reshape(batch))
