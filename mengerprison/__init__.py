"""
mengerprison — Sphere-Traced Menger Prison Renderer
===================================================

Renders an infinite, periodically tiled menger prison fractal by sphere
tracing camera rays through its signed distance field, entirely in NumPy.

Implemented features
--------------------
- Distance primitives: :func:`~mengerprison.sdf_lib.sdRect`,
  :func:`~mengerprison.sdf_lib.sdCross`
- Fractal field: :func:`~mengerprison.sdf_lib.sdMengerPrison`,
  :class:`MengerPrison3D`
- Sphere tracing: :func:`march`, :class:`MarchResult`
- Fly-through camera path: :class:`AnimationState`, :func:`camera_origin`,
  :func:`pixel_directions`
- Step-count shading: :func:`shade`, :func:`to_rgba`
- Frame rendering: :func:`render_frame`, :func:`render_frames`
- Field sampling and output: :func:`sample_slice`, :func:`save_npy`,
  :func:`save_image`

Quick start
-----------

::

    from mengerprison import RenderContext, FrameInputs, render_frame, save_image

    context = RenderContext()                       # animated fly-through
    frame   = render_frame(context, FrameInputs((320, 180), elapsed_time=2.0))
    save_image("frame.png", frame)
"""

from .config import (
    MengerConfig,
    ANIMATED_CONFIG,
    STATIC_CONFIG,
    config_from_mapping,
    load_config,
)
from .geometry import Geometry3D, Cross3D, MengerPrison3D
from .marcher import MarchResult, march
from .camera import AnimationState, camera_origin, pixel_directions
from .shading import MISS_COLOR, shade, to_rgba
from .render import FrameInputs, RenderContext, render_frame, render_frames
from .grid import sample_slice, save_npy, save_image

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "MengerConfig",
    "ANIMATED_CONFIG",
    "STATIC_CONFIG",
    "config_from_mapping",
    "load_config",

    # Geometry
    "Geometry3D",
    "Cross3D",
    "MengerPrison3D",

    # Integrator
    "MarchResult",
    "march",

    # Camera
    "AnimationState",
    "camera_origin",
    "pixel_directions",

    # Shading
    "MISS_COLOR",
    "shade",
    "to_rgba",

    # Rendering
    "FrameInputs",
    "RenderContext",
    "render_frame",
    "render_frames",

    # Grid utilities
    "sample_slice",
    "save_npy",
    "save_image",
]
