"""Tests for mengerprison.camera — pixel rays and the fly-through path."""

import numpy as np
import numpy.testing as npt
import pytest

from mengerprison import ANIMATED_CONFIG, AnimationState, MengerConfig, camera_origin, pixel_directions
from mengerprison import sdf_lib as sdf
from mengerprison.camera import HIGH_Y_LEVELS, MOVEMENT_DIRECTIONS


# ===========================================================================
# AnimationState
# ===========================================================================

class TestAnimationState:
    def test_cycle_length_is_four_over_velocity(self):
        # one cycle lasts 4 / velocity seconds
        assert AnimationState(8.0, 0.5).cycle == pytest.approx(1.0)
        assert AnimationState(2.0, 2.0).cycle == pytest.approx(1.0)

    @pytest.mark.parametrize("t, index", [(0.0, 0), (9.0, 1), (17.0, 2), (25.0, 3), (33.0, 0)])
    def test_movement_index_cycles(self, t, index):
        assert AnimationState(t, 0.5).movement_index == index

    def test_negative_time_index_in_range(self):
        assert AnimationState(-2.0, 0.5).movement_index == 3

    def test_sway_endpoints(self):
        assert AnimationState(0.0, 0.5).sway == pytest.approx(0.0)
        assert AnimationState(4.0, 0.5).sway == pytest.approx(1.0)
        assert AnimationState(2.0, 0.5).sway == pytest.approx(0.5)

    def test_zero_velocity_holds_still(self):
        s = AnimationState(123.0, 0.0)
        assert s.cycle == 0.0
        npt.assert_allclose(camera_origin(s), [0.0, 0.0, -ANIMATED_CONFIG.box_dimen])


# ===========================================================================
# Camera origin
# ===========================================================================

class TestCameraOrigin:
    def test_start(self):
        npt.assert_allclose(camera_origin(AnimationState(0.0, 0.5)), [0.0, 0.0, -20.0])

    def test_first_peak_moves_down(self):
        # cycle 0.5: full sway toward -y, forward 4 * 0.5 * 20
        npt.assert_allclose(camera_origin(AnimationState(4.0, 0.5)), [0.0, -20.0, 20.0], atol=1e-9)

    def test_second_peak_moves_left(self):
        expected_x = -20.0 * (0.5 + 3.0 / 18.0)
        npt.assert_allclose(camera_origin(AnimationState(12.0, 0.5)),
                            [expected_x, 0.0, 100.0], atol=1e-9)

    @pytest.mark.parametrize("index", range(4))
    def test_peak_offset_uses_lookup_table(self, index):
        t = (index + 0.5) * 8.0
        origin = camera_origin(AnimationState(t, 0.5))
        lateral = 20.0 * HIGH_Y_LEVELS[index] * MOVEMENT_DIRECTIONS[index]
        npt.assert_allclose(origin[:2], lateral, atol=1e-9)

    def test_forward_speed_in_cells_per_second(self):
        cfg = MengerConfig(box_dimen=5.0)
        a = camera_origin(AnimationState(8.0, 0.5), cfg)
        b = camera_origin(AnimationState(16.0, 0.5), cfg)
        npt.assert_allclose(b[2] - a[2], 8.0 * 0.5 * cfg.velocity_unit)

    def test_returns_to_axis_between_cycles(self):
        for k in range(1, 5):
            origin = camera_origin(AnimationState(8.0 * k, 0.5))
            npt.assert_allclose(origin[:2], [0.0, 0.0], atol=1e-9)

    def test_deterministic(self):
        a = camera_origin(AnimationState(7.25, 0.75))
        b = camera_origin(AnimationState(7.25, 0.75))
        npt.assert_array_equal(a, b)


# ===========================================================================
# Pixel directions
# ===========================================================================

class TestPixelDirections:
    def test_shape_and_unit_length(self):
        d = pixel_directions(8, 6)
        assert d.shape == (6, 8, 3)
        npt.assert_allclose(sdf.length(d), 1.0)

    def test_centre_pixel_looks_forward(self):
        d = pixel_directions(3, 3)
        npt.assert_allclose(d[1, 1], [0.0, 0.0, 1.0], atol=1e-12)

    def test_top_row_looks_up_left_column_looks_left(self):
        d = pixel_directions(4, 4)
        assert (d[0, :, 1] > 0).all()
        assert (d[-1, :, 1] < 0).all()
        assert (d[:, 0, 0] < 0).all()
        assert (d[:, -1, 0] > 0).all()

    def test_scaled_by_height(self):
        d = pixel_directions(4, 2)
        # rightmost pixel centre is 1.5 pixels right of the middle, over a height of 2
        npt.assert_allclose(d[0, 3, 0] / d[0, 3, 2], 0.75)
        npt.assert_allclose(d[0, 3, 1] / d[0, 3, 2], 0.25)

    def test_identity_rotation_is_default(self):
        npt.assert_allclose(pixel_directions(5, 4, np.eye(3)), pixel_directions(5, 4))

    def test_rotation_applied(self):
        # quarter turn about +y maps forward (+z) onto +x
        rot = np.array([[0.0, 0.0, 1.0], [0.0, 1.0, 0.0], [-1.0, 0.0, 0.0]])
        d = pixel_directions(3, 3, rot)
        npt.assert_allclose(d[1, 1], [1.0, 0.0, 0.0], atol=1e-12)

    def test_deterministic(self):
        npt.assert_array_equal(pixel_directions(7, 5), pixel_directions(7, 5))
