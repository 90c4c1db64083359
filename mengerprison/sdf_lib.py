"""Distance primitives and the menger prison field (numpy).

Re-exports the shared helpers from :mod:`mengerprison._sdf_common`, then adds
the rectangle and cross primitives, the lattice fold and the fractal field
built from them.

All functions accept and return ``numpy.ndarray`` objects and support
broadcasting over arbitrary leading batch dimensions.  A "point array" *p*
has shape ``(..., 2)`` for 2-D functions and ``(..., 3)`` for 3-D functions;
scalar SDF results have shape ``(...,)``.

The rectangle formula follows Inigo Quilez's box reference:
https://iquilezles.org/articles/distfunctions2d/
"""

from __future__ import annotations

import numpy as np

from ._sdf_common import *  # noqa: F401, F403  (re-export shared helpers)


# ===========================================================================
# Primitive SDFs
# ===========================================================================

def sdRect(p: _F, b: _F) -> _F:
    """Axis-aligned rectangle centred at the origin with half-extents *b*."""
    q = np.abs(p) - b
    return length(np.maximum(q, 0.0)) + np.minimum(np.max(q, axis=-1), 0.0)


def sdCross(p: _F, b: _F) -> _F:
    """Union of three infinite square bars through the origin.

    Each bar is the extrusion of :func:`sdRect` over one coordinate plane
    (``xy``, ``xz`` and ``yz``), so its half-extents come from the matching
    pair of components of *b*.
    """
    b = np.asarray(b, dtype=float)
    x, y, z = p[..., 0], p[..., 1], p[..., 2]
    da = sdRect(vec2(x, y), b[[0, 1]])
    db = sdRect(vec2(x, z), b[[0, 2]])
    dc = sdRect(vec2(y, z), b[[1, 2]])
    return opUnion(da, opUnion(db, dc))


# ===========================================================================
# Domain operators
# ===========================================================================

def opLatticeFold(p: _F, cell: float) -> _F:
    """Map *p* into the cell ``[-cell/2, cell/2)`` of a lattice with period *cell*.

    The lattice nodes sit at odd multiples of ``cell/2``.
    """
    return mod(p, cell) - cell * 0.5


def opCellFold(p: _F, cell: float) -> _F:
    """Map *p* into ``[-cell/2, cell/2)`` around the nearest multiple of *cell*."""
    return mod(p + cell * 0.5, cell) - cell * 0.5


# ===========================================================================
# Fractal field
# ===========================================================================

def sdMengerPrison(
    p: _F,
    box_dimen: float = 20.0,
    iterations: int = 5,
    hit_dist: float = 0.01,
) -> _F:
    """Distance estimate to the infinite menger prison.

    The bounding cross of the folded lattice is evaluated first.  Wherever it
    is farther than *hit_dist* that value is returned as-is; elsewhere
    *iterations* crosses, each a third the size of the last, are carved out of
    it.

    Parameters
    ----------
    p:
        ``(..., 3)`` query points.
    box_dimen:
        Edge of the largest cube; the field has period ``2 * box_dimen``.
    iterations:
        Number of carving passes.
    hit_dist:
        Threshold below which the carving passes are evaluated.

    Returns
    -------
    numpy.ndarray
        Shape ``(...)`` distance estimates.
    """
    p = np.asarray(p, dtype=float)
    batch = p.shape[:-1]
    flat = p.reshape(-1, 3)
    half = np.full(3, box_dimen * 0.5)

    d = sdCross(opLatticeFold(flat, box_dimen * 2.0), half)

    near = d <= hit_dist
    if iterations > 0 and near.any():
        pn = flat[near]
        dn = d[near]
        scale = 1.0
        for _ in range(iterations):
            ray = opCellFold(pn, box_dimen / scale) * scale
            crosses = sdCross(ray * 3.0, half)
            scale *= 3.0
            dn = opSubtraction(crosses / scale, dn)
        d[near] = dn

    return d.reshape(batch)
