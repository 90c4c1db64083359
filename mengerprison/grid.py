"""Planar sampling of the field and output sinks for rendered frames."""

from __future__ import annotations

import os
from typing import Tuple

import numpy as np
import numpy.typing as npt
from matplotlib import image as mpimg

from .geometry import Geometry3D
from .shading import to_uint8

_Array = npt.NDArray[np.floating]
_Bounds2D = Tuple[Tuple[float, float], Tuple[float, float]]

# (u axis, v axis, normal axis) for each coordinate plane
_PLANE_AXES = {"xy": (0, 1, 2), "xz": (0, 2, 1), "yz": (1, 2, 0)}


def _cell_centres(lo: float, hi: float, n: int) -> _Array:
    step = (hi - lo) / n
    return lo + step * (np.arange(n) + 0.5)


def sample_slice(
    geom: Geometry3D,
    plane: str,
    offset: float,
    bounds: _Bounds2D,
    resolution: Tuple[int, int],
) -> _Array:
    """Sample *geom* on a cell-centred grid over one coordinate plane.

    Parameters
    ----------
    geom:
        A 3-D geometry whose ``sdf()`` method accepts ``(..., 3)`` arrays.
    plane:
        ``"xy"``, ``"xz"`` or ``"yz"``.  The first letter names the in-plane
        ``u`` axis, the second the ``v`` axis.
    offset:
        Coordinate of the plane along its normal axis.
    bounds:
        ``((u0, u1), (v0, v1))`` extents within the plane.
    resolution:
        ``(nu, nv)`` number of cells along ``u`` and ``v``.

    Returns
    -------
    numpy.ndarray
        Shape ``(nv, nu)`` array of signed distances, row ``j`` at the
        ``j``-th ``v`` cell, ready for ``imshow(..., origin="lower")``.
    """
    try:
        u_axis, v_axis, n_axis = _PLANE_AXES[plane]
    except KeyError:
        raise ValueError(f"plane must be one of {sorted(_PLANE_AXES)}, got {plane!r}") from None
    nu, nv = resolution
    if nu <= 0 or nv <= 0:
        raise ValueError(f"resolution must be positive, got {resolution}")
    (u0, u1), (v0, v1) = bounds

    V, U = np.meshgrid(_cell_centres(v0, v1, nv), _cell_centres(u0, u1, nu), indexing="ij")
    p = np.empty(V.shape + (3,))
    p[..., u_axis] = U
    p[..., v_axis] = V
    p[..., n_axis] = offset
    return geom.sdf(p)


def _ensure_parent(path: str) -> None:
    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)


def save_npy(path: str, data: _Array) -> None:
    """Save *data* to *path* (creates parent directories if needed)."""
    _ensure_parent(path)
    np.save(path, data)


def save_image(path: str, rgb: _Array) -> None:
    """Write a ``(height, width, 3)`` float color buffer as an image file.

    The format follows the file extension, as chosen by matplotlib.
    """
    _ensure_parent(path)
    mpimg.imsave(path, to_uint8(rgb))
