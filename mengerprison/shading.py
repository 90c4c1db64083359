"""Map march results to colors."""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from .marcher import MarchResult

_Array = npt.NDArray[np.floating]

MISS_COLOR = np.array([0.2, 0.2, 0.2])


def intensity(result: MarchResult, max_steps: int) -> _Array:
    """Grayscale level ``1 - steps / max_steps`` (fewer steps is brighter)."""
    return 1.0 - result.steps / float(max_steps)


def shade(result: MarchResult, max_steps: int) -> _Array:
    """Return ``(..., 3)`` RGB colors for *result*.

    Hits get the step-count grayscale of :func:`intensity`; misses get
    :data:`MISS_COLOR`.
    """
    gray = np.repeat(intensity(result, max_steps)[..., None], 3, axis=-1)
    return np.where(result.hit[..., None], gray, MISS_COLOR)


def to_rgba(rgb: _Array) -> _Array:
    """Append an opaque alpha channel to a ``(..., 3)`` color array."""
    alpha = np.ones(rgb.shape[:-1] + (1,), dtype=rgb.dtype)
    return np.concatenate([rgb, alpha], axis=-1)


def to_uint8(rgb: _Array) -> npt.NDArray[np.uint8]:
    """Quantise ``[0, 1]`` colors to 8-bit channels."""
    return np.round(np.clip(rgb, 0.0, 1.0) * 255.0).astype(np.uint8)
