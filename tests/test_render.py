"""Tests for mengerprison.render — the frame entry point."""

import numpy as np
import numpy.testing as npt
import pytest

from mengerprison import (
    ANIMATED_CONFIG, STATIC_CONFIG,
    FrameInputs, RenderContext, render_frame, render_frames,
)

_SIZE = (16, 9)


class TestFrameInputs:
    def test_defaults(self):
        inputs = FrameInputs((4, 3))
        assert (inputs.width, inputs.height) == (4, 3)
        assert inputs.elapsed_time == 0.0
        assert inputs.velocity == 0.5

    @pytest.mark.parametrize("resolution", [(0, 10), (10, -1), (2.5, 4)])
    def test_bad_resolution(self, resolution):
        with pytest.raises(ValueError):
            FrameInputs(resolution)

    def test_non_finite_time(self):
        with pytest.raises(ValueError):
            FrameInputs((4, 4), elapsed_time=float("nan"))

    def test_non_finite_velocity(self):
        with pytest.raises(ValueError):
            FrameInputs((4, 4), velocity=float("inf"))


class TestRenderContext:
    def test_defaults(self):
        ctx = RenderContext()
        assert ctx.config is ANIMATED_CONFIG
        assert ctx.animated
        assert ctx.workers == 1

    def test_bad_workers(self):
        with pytest.raises(ValueError):
            RenderContext(workers=0)

    def test_bad_rotation(self):
        with pytest.raises(ValueError):
            RenderContext(rotation=np.eye(2))

    def test_static_origin_ignores_time(self):
        ctx = RenderContext(STATIC_CONFIG, animated=False)
        npt.assert_array_equal(ctx.origin(FrameInputs((2, 2), 5.0)), [0.0, 0.0, 0.0])


class TestRenderFrame:
    def test_shape_and_range(self):
        img = render_frame(RenderContext(), FrameInputs(_SIZE, 1.0))
        assert img.shape == (9, 16, 3)
        assert (img >= 0.0).all() and (img <= 1.0).all()

    def test_grayscale(self):
        img = render_frame(RenderContext(), FrameInputs(_SIZE, 1.0))
        npt.assert_array_equal(img[..., 0], img[..., 1])
        npt.assert_array_equal(img[..., 1], img[..., 2])

    def test_deterministic(self):
        ctx = RenderContext()
        inputs = FrameInputs(_SIZE, 3.7, 0.5)
        npt.assert_array_equal(render_frame(ctx, inputs), render_frame(ctx, inputs))

    def test_workers_match_single_thread(self):
        inputs = FrameInputs(_SIZE, 2.0)
        single = render_frame(RenderContext(workers=1), inputs)
        threaded = render_frame(RenderContext(workers=3), inputs)
        npt.assert_allclose(threaded, single, atol=1e-12)

    def test_more_workers_than_rows(self):
        img = render_frame(RenderContext(workers=8), FrameInputs((5, 2)))
        assert img.shape == (2, 5, 3)

    def test_static_centre_looks_down_corridor(self):
        # from the origin, the forward ray runs down an empty corridor
        img = render_frame(RenderContext(STATIC_CONFIG, animated=False), FrameInputs((3, 3)))
        npt.assert_allclose(img[1, 1], [0.2, 0.2, 0.2])

    def test_static_ignores_time(self):
        ctx = RenderContext(STATIC_CONFIG, animated=False)
        a = render_frame(ctx, FrameInputs(_SIZE, 0.0))
        b = render_frame(ctx, FrameInputs(_SIZE, 5.0))
        npt.assert_array_equal(a, b)

    def test_rotation_turns_centre_ray(self):
        # uncarved bars: the forward ray stays sqrt(200) from every bar, while the
        # (1, 1, 0) diagonal reaches a bar corner after a single step
        cfg = STATIC_CONFIG.replace(iterations=0)
        a = 1.0 / np.sqrt(2.0)
        rot = np.array([[-a, 0.0, a], [a, 0.0, a], [0.0, 1.0, 0.0]])
        straight = render_frame(RenderContext(cfg, animated=False), FrameInputs((3, 3)))
        turned = render_frame(RenderContext(cfg, animated=False, rotation=rot), FrameInputs((3, 3)))
        npt.assert_allclose(straight[1, 1], [0.2, 0.2, 0.2])
        npt.assert_allclose(turned[1, 1], [0.99, 0.99, 0.99])

    def test_animated_frames_change_over_time(self):
        ctx = RenderContext()
        a = render_frame(ctx, FrameInputs(_SIZE, 0.0))
        b = render_frame(ctx, FrameInputs(_SIZE, 2.0))
        assert not np.array_equal(a, b)


class TestRenderFrames:
    def test_yields_each_time_in_order(self):
        times = [0.0, 0.5, 1.0]
        frames = list(render_frames(RenderContext(), (4, 3), times))
        assert [t for t, _ in frames] == times
        assert all(img.shape == (3, 4, 3) for _, img in frames)

    def test_matches_render_frame(self):
        ctx = RenderContext()
        (_, img), = render_frames(ctx, (4, 3), [1.5], velocity=0.25)
        npt.assert_array_equal(img, render_frame(ctx, FrameInputs((4, 3), 1.5, 0.25)))
