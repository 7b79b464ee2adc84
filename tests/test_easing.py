"""Tests for the smoothing hold ramp."""

from tick_wave.easing import SMOOTHING_RAMP, smoothing_holds


class TestSmoothingRamp:
    def test_ramp_bounds_ascending(self):
        limits = [limit for limit, _ in SMOOTHING_RAMP]
        assert limits == sorted(limits)
        assert limits[-1] == 1.0

    def test_first_frame_gets_longest_lead_in(self):
        assert smoothing_holds(0, 100) == 8

    def test_lead_in_steps_down(self):
        assert [smoothing_holds(f, 100) for f in range(6)] == [8, 6, 4, 2, 1, 0]

    def test_middle_has_no_extra_holds(self):
        for frame in range(5, 93):
            assert smoothing_holds(frame, 100) == 0

    def test_lead_out_steps_up(self):
        assert [smoothing_holds(f, 100) for f in range(92, 100)] == [
            0, 2, 4, 4, 6, 6, 8, 10,
        ]

    def test_past_the_budget_is_zero(self):
        assert smoothing_holds(100, 100) == 0

    def test_scales_with_budget(self):
        """With 1000 frames the 1% band covers frames 0..9."""
        assert smoothing_holds(9, 1000) == 8
        assert smoothing_holds(10, 1000) == 6
        assert smoothing_holds(500, 1000) == 0
        assert smoothing_holds(999, 1000) == 10

    def test_small_budget(self):
        assert smoothing_holds(0, 1) == 8
        assert smoothing_holds(0, 2) == 8
        assert smoothing_holds(1, 2) == 0
