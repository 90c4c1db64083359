"""Shared vector and SDF helpers used across the mengerprison package.

This module provides:

* **Type alias**: :data:`_F`
* **Vector constructors**: :func:`vec2`, :func:`vec3`
* **Math helpers**: :func:`length`, :func:`dot`, :func:`clamp`,
  :func:`normalize`, :func:`mod`, :func:`smoothstep`
* **Boolean operators**: :func:`opUnion`, :func:`opSubtraction`

Not meant to be imported directly by end users — import from
``mengerprison.sdf_lib`` instead.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

# ---------------------------------------------------------------------------
# Type alias
# ---------------------------------------------------------------------------
_F = npt.NDArray[np.floating]

__all__ = [
    "_F",
    "vec2", "vec3",
    "length", "dot", "clamp", "normalize", "mod", "smoothstep",
    "opUnion", "opSubtraction",
]


# ===========================================================================
# Vector constructors
# ===========================================================================

def vec2(x: _F, y: _F) -> _F:
    """Stack *x* and *y* into a ``(..., 2)`` array."""
    x, y = np.broadcast_arrays(x, y)
    return np.stack([x, y], axis=-1)


def vec3(x: _F, y: _F, z: _F) -> _F:
    """Stack *x*, *y*, *z* into a ``(..., 3)`` array."""
    x, y, z = np.broadcast_arrays(x, y, z)
    return np.stack([x, y, z], axis=-1)


# ===========================================================================
# Math helpers
# ===========================================================================

def length(v: _F) -> _F:
    """Euclidean length along the last axis."""
    return np.linalg.norm(v, axis=-1)


def dot(a: _F, b: _F) -> _F:
    """Dot product along the last axis."""
    return np.sum(a * b, axis=-1)


def clamp(x: _F, lo: float | _F, hi: float | _F) -> _F:
    """Clamp *x* element-wise to ``[lo, hi]``."""
    return np.minimum(np.maximum(x, lo), hi)


def normalize(v: _F) -> _F:
    """Scale *v* to unit length along the last axis (zero vectors give NaN)."""
    return v / length(v)[..., None]


def mod(x: _F, y: float | _F) -> _F:
    """Remainder of *x* / *y* rounded toward negative infinity.

    Matches GLSL ``mod``: for positive *y* the result lies in ``[0, y)``
    regardless of the sign of *x*.
    """
    return x - y * np.floor(x / y)


def smoothstep(edge0: float, edge1: float, x: _F) -> _F:
    """Hermite interpolation between 0 and 1 as *x* goes from *edge0* to *edge1*."""
    t = clamp((np.asarray(x, dtype=float) - edge0) / (edge1 - edge0), 0.0, 1.0)
    return t * t * (3.0 - 2.0 * t)


# ===========================================================================
# Boolean operators
# ===========================================================================

def opUnion(d1: _F, d2: _F) -> _F:
    """Union of two SDFs: ``min(d1, d2)``."""
    return np.minimum(d1, d2)


def opSubtraction(d1: _F, d2: _F) -> _F:
    """Subtract *d1* from *d2*: ``max(-d1, d2)``."""
    return np.maximum(-d1, d2)
