"""Frame rendering entry point.

:func:`render_frame` is a pure function of a :class:`RenderContext` and a
:class:`FrameInputs`: it owns no state between calls, and scheduling frames is
left to the caller.  ``render_frames`` is a small helper for callers that
step time at a fixed rate.
"""

from __future__ import annotations

import logging
import math
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, Tuple

import numpy as np
import numpy.typing as npt

from .camera import STATIC_ORIGIN, AnimationState, camera_origin, pixel_directions
from .config import ANIMATED_CONFIG, MengerConfig
from .geometry import MengerPrison3D
from .marcher import march
from .shading import shade

logger = logging.getLogger(__name__)

_Array = npt.NDArray[np.floating]


@dataclass(frozen=True)
class FrameInputs:
    """Per-frame inputs supplied by the host."""

    resolution: Tuple[int, int]
    elapsed_time: float = 0.0
    velocity: float = 0.5

    def __post_init__(self) -> None:
        width, height = self.resolution
        if int(width) != width or int(height) != height or width <= 0 or height <= 0:
            raise ValueError(f"resolution must be two positive integers, got {self.resolution}")
        if not math.isfinite(self.elapsed_time):
            raise ValueError(f"elapsed_time must be finite, got {self.elapsed_time}")
        if not math.isfinite(self.velocity):
            raise ValueError(f"velocity must be finite, got {self.velocity}")

    @property
    def width(self) -> int:
        return int(self.resolution[0])

    @property
    def height(self) -> int:
        return int(self.resolution[1])

    @property
    def animation(self) -> AnimationState:
        return AnimationState(self.elapsed_time, self.velocity)


@dataclass(frozen=True)
class RenderContext:
    """Everything a frame needs besides its time-varying inputs.

    Parameters
    ----------
    config:
        Field and integrator constants.
    animated:
        ``True`` follows the fly-through path; ``False`` renders the still
        view from :data:`~mengerprison.camera.STATIC_ORIGIN`.
    rotation:
        Optional ``(3, 3)`` camera rotation; ``None`` is the identity.
    workers:
        Number of threads that march horizontal bands of the frame.
    """

    config: MengerConfig = ANIMATED_CONFIG
    animated: bool = True
    rotation: Optional[_Array] = field(default=None, compare=False)
    workers: int = 1

    def __post_init__(self) -> None:
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")
        if self.rotation is not None and np.shape(self.rotation) != (3, 3):
            raise ValueError(f"rotation must be 3x3, got shape {np.shape(self.rotation)}")

    @property
    def prison(self) -> MengerPrison3D:
        return MengerPrison3D(self.config)

    def origin(self, inputs: FrameInputs) -> _Array:
        if not self.animated:
            return STATIC_ORIGIN.copy()
        return camera_origin(inputs.animation, self.config)


def _render_band(
    context: RenderContext, prison: MengerPrison3D, origin: _Array, directions: _Array
) -> _Array:
    result = march(prison, origin, directions, context.config)
    return shade(result, context.config.max_steps)


def render_frame(context: RenderContext, inputs: FrameInputs) -> _Array:
    """Render one frame.

    Returns
    -------
    numpy.ndarray
        ``(height, width, 3)`` RGB array in ``[0, 1]``; row 0 is the top.
    """
    start = time.perf_counter()
    origin = context.origin(inputs)
    directions = pixel_directions(inputs.width, inputs.height, context.rotation)
    prison = context.prison

    workers = min(context.workers, inputs.height)
    if workers == 1:
        image = _render_band(context, prison, origin, directions)
    else:
        bands = np.array_split(directions, workers, axis=0)
        with ThreadPoolExecutor(max_workers=workers) as pool:
            parts = list(
                pool.map(lambda band: _render_band(context, prison, origin, band), bands)
            )
        image = np.concatenate(parts, axis=0)

    logger.debug(
        f"Rendered {inputs.width}x{inputs.height} frame at t={inputs.elapsed_time:.3f}s "
        f"from origin {np.round(origin, 3).tolist()} in {time.perf_counter() - start:.3f}s"
    )
    return image


def render_frames(
    context: RenderContext,
    resolution: Tuple[int, int],
    times: Iterable[float],
    velocity: float = 0.5,
) -> Iterator[Tuple[float, _Array]]:
    """Yield ``(elapsed_time, image)`` for each of *times*, in order."""
    for t in times:
        yield t, render_frame(context, FrameInputs(resolution, t, velocity))
