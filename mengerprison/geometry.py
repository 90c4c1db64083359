"""Geometry objects wrapping the distance functions of :mod:`sdf_lib`."""

from __future__ import annotations

from typing import Callable, Sequence

import numpy as np
import numpy.typing as npt

from . import sdf_lib as sdf
from .config import ANIMATED_CONFIG, MengerConfig

# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------
_Array = npt.NDArray[np.floating]
_SDFFunc = Callable[[_Array], _Array]


# ===========================================================================
# Base class
# ===========================================================================

class Geometry3D:
    """Base class for 3D signed-distance-function geometries.

    A ``Geometry3D`` wraps a callable ``func(p) -> distances`` where *p* is
    a ``(..., 3)`` array of 3D points and the return value is a ``(...)``
    array of signed distances.  Anything with this call signature can be
    handed to :func:`mengerprison.marcher.march`.
    """

    def __init__(self, func: _SDFFunc) -> None:
        self._func = func

    def sdf(self, p: _Array) -> _Array:
        """Evaluate signed distance at *p* (shape ``(..., 3)``)."""
        return self._func(p)

    def __call__(self, p: _Array) -> _Array:
        return self._func(p)


# ===========================================================================
# Shapes
# ===========================================================================

class Cross3D(Geometry3D):
    """Three perpendicular infinite bars with *half_size* ``(hx, hy, hz)``."""

    def __init__(self, half_size: Sequence[float]) -> None:
        b = np.array(half_size, dtype=float)
        super().__init__(lambda p: sdf.sdCross(p, b))


class MengerPrison3D(Geometry3D):
    """The infinite, periodically tiled menger prison.

    Parameters
    ----------
    config:
        Supplies ``box_dimen``, ``iterations`` and ``hit_dist``.  The
        ``hit_dist`` doubles as the bounding-cross cut-off, so the field and
        the marcher that consumes it should share one config.
    """

    def __init__(self, config: MengerConfig = ANIMATED_CONFIG) -> None:
        self.config = config
        super().__init__(
            lambda p: sdf.sdMengerPrison(
                p, config.box_dimen, config.iterations, config.hit_dist
            )
        )

    @property
    def period(self) -> float:
        return self.config.period

    def __repr__(self) -> str:
        return f"MengerPrison3D({self.config!r})"
