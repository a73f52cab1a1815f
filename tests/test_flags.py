"""Tests for flag classification and the reference gauge."""

import pytest

from src.core.markers.flags import classify, reference_position
from src.core.markers.models import Marker, MarkerCategory, MarkerFlag


def _marker(value, ref_min=None, ref_max=None):
    return Marker(
        id="m1", name="X", original_name="X", value=value, unit="",
        ref_min=ref_min, ref_max=ref_max, ref_text="",
        category=MarkerCategory.OTHER, flag=classify(value, ref_min, ref_max),
    )


# ------------------------------------------------------------------
# Both bounds
# ------------------------------------------------------------------

class TestBothBounds:
    def test_hemoglobin_within_range(self):
        assert classify(16.5, 13.0, 17.0) is MarkerFlag.NORMAL

    def test_hemoglobin_critically_low(self):
        # range 4, critical below 13 - 2 = 11
        assert classify(6.0, 13.0, 17.0) is MarkerFlag.CRITICAL_LOW

    @pytest.mark.parametrize("ref_min,ref_max", [(13.0, 17.0), (0.35, 5.5), (70, 110)])
    def test_bounds_are_inclusive(self, ref_min, ref_max):
        assert classify(ref_min, ref_min, ref_max) is MarkerFlag.NORMAL
        assert classify(ref_max, ref_min, ref_max) is MarkerFlag.NORMAL

    def test_low_and_high(self):
        assert classify(12.0, 13.0, 17.0) is MarkerFlag.LOW
        assert classify(18.0, 13.0, 17.0) is MarkerFlag.HIGH

    def test_critical_thresholds_are_exclusive(self):
        assert classify(11.0, 13.0, 17.0) is MarkerFlag.LOW
        assert classify(19.0, 13.0, 17.0) is MarkerFlag.HIGH
        assert classify(19.01, 13.0, 17.0) is MarkerFlag.CRITICAL_HIGH

    def test_just_past_half_range_is_critical_high(self):
        assert classify(17.0 + 4.0 * 0.51, 13.0, 17.0) is MarkerFlag.CRITICAL_HIGH

    def test_zero_range_collapses_critical_band(self):
        assert classify(5.0, 5.0, 5.0) is MarkerFlag.NORMAL
        assert classify(4.9, 5.0, 5.0) is MarkerFlag.CRITICAL_LOW
        assert classify(5.1, 5.0, 5.0) is MarkerFlag.CRITICAL_HIGH


# ------------------------------------------------------------------
# One bound
# ------------------------------------------------------------------

class TestSingleBound:
    def test_only_max(self):
        assert classify(150, ref_max=150) is MarkerFlag.NORMAL
        assert classify(200, ref_max=150) is MarkerFlag.HIGH
        assert classify(225, ref_max=150) is MarkerFlag.HIGH
        assert classify(226, ref_max=150) is MarkerFlag.CRITICAL_HIGH
        assert classify(0, ref_max=150) is MarkerFlag.NORMAL

    def test_only_min(self):
        assert classify(40, ref_min=40) is MarkerFlag.NORMAL
        assert classify(30, ref_min=40) is MarkerFlag.LOW
        assert classify(20, ref_min=40) is MarkerFlag.LOW
        assert classify(19.9, ref_min=40) is MarkerFlag.CRITICAL_LOW
        assert classify(1000, ref_min=40) is MarkerFlag.NORMAL

    def test_no_bounds(self):
        assert classify(-1e9) is MarkerFlag.NORMAL
        assert classify(1e9) is MarkerFlag.NORMAL


# ------------------------------------------------------------------
# Gauge
# ------------------------------------------------------------------

class TestReferencePosition:
    def test_inside_range(self):
        assert reference_position(_marker(15.0, 13.0, 17.0)) == pytest.approx(50.0)
        assert reference_position(_marker(13.0, 13.0, 17.0)) == 0.0
        assert reference_position(_marker(17.0, 13.0, 17.0)) == 100.0

    def test_clamped_outside_range(self):
        assert reference_position(_marker(6.0, 13.0, 17.0)) == 0.0
        assert reference_position(_marker(30.0, 13.0, 17.0)) == 100.0

    def test_no_bounds_is_centered(self):
        assert reference_position(_marker(3.0)) == 50.0

    def test_only_max(self):
        assert reference_position(_marker(75, ref_max=150)) == pytest.approx(50.0)
        assert reference_position(_marker(300, ref_max=150)) == 100.0

    def test_only_min(self):
        assert reference_position(_marker(60, ref_min=40)) == pytest.approx(50.0)
        assert reference_position(_marker(10, ref_min=40)) == 0.0

    def test_zero_range(self):
        assert reference_position(_marker(5.0, 5.0, 5.0)) == 50.0
        assert reference_position(_marker(6.0, 5.0, 5.0)) == 100.0
