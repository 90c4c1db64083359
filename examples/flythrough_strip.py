"""Fly-through strip: four frames at the peak of each movement cycle.

Demonstrates: RenderContext, FrameInputs, render_frame, AnimationState
Output:       examples/flythrough_strip.png

At the middle of each cycle the camera sits at its largest sideways offset,
which is ``box_dimen * HIGH_Y_LEVELS[i]`` along ``MOVEMENT_DIRECTIONS[i]``.
Every frame should still look out over open corridors rather than from inside
a wall.
"""
import os, sys
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
from mengerprison import AnimationState, FrameInputs, RenderContext, render_frame, save_image

_SIZE     = (240, 135)
_VELOCITY = 0.5
_OUT      = os.path.join(os.path.dirname(__file__), "flythrough_strip.png")


def main() -> None:
    context = RenderContext(workers=os.cpu_count() or 1)
    seconds_per_cycle = 4.0 / _VELOCITY

    frames = []
    for cycle in range(4):
        t = (cycle + 0.5) * seconds_per_cycle
        state = AnimationState(t, _VELOCITY)
        print(f"  cycle {cycle}: t={t:.1f}s movement={state.movement_index} "
              f"offset={np.round(state.lateral_offset(context.config), 2).tolist()}")
        frames.append(render_frame(context, FrameInputs(_SIZE, t, _VELOCITY)))

    gap = np.ones((_SIZE[1], 4, 3))
    strip = np.concatenate([part for f in frames for part in (f, gap)][:-1], axis=1)
    save_image(_OUT, strip)
    print(f"  Saved: {_OUT}")


if __name__ == "__main__":
    main()
