"""
Flag classification of a measured value against its reference bounds.
"""

from typing import Optional

from .models import Marker, MarkerFlag


def classify(
    value: float,
    ref_min: Optional[float] = None,
    ref_max: Optional[float] = None,
) -> MarkerFlag:
    """
    Traffic-light flag for a value. Both bounds are inclusive.

    With both bounds the critical band is half the range beyond either
    bound; a zero-width range puts the critical threshold on the bound
    itself. With one bound the critical threshold is max * 1.5 or min * 0.5.
    """
    if ref_min is None and ref_max is None:
        return MarkerFlag.NORMAL

    if ref_min is not None and ref_max is not None:
        span = ref_max - ref_min
        if value < ref_min - span * 0.5:
            return MarkerFlag.CRITICAL_LOW
        if value < ref_min:
            return MarkerFlag.LOW
        if value > ref_max + span * 0.5:
            return MarkerFlag.CRITICAL_HIGH
        if value > ref_max:
            return MarkerFlag.HIGH
        return MarkerFlag.NORMAL

    if ref_max is not None:
        if value > ref_max * 1.5:
            return MarkerFlag.CRITICAL_HIGH
        if value > ref_max:
            return MarkerFlag.HIGH
        return MarkerFlag.NORMAL

    if value < ref_min * 0.5:
        return MarkerFlag.CRITICAL_LOW
    if value < ref_min:
        return MarkerFlag.LOW
    return MarkerFlag.NORMAL


def reference_position(marker: Marker) -> float:
    """
    Where the value sits on the 0-100 gauge drawn under a marker, with 0 at
    ref_min and 100 at ref_max. Markers without bounds sit in the middle.
    """
    lo, hi, value = marker.ref_min, marker.ref_max, marker.value
    if lo is None and hi is None:
        return 50.0
    if lo is None:
        if hi <= 0:
            return 100.0 if value > hi else 0.0
        return max(0.0, min(value / hi * 100, 100.0))
    if hi is None:
        if lo <= 0:
            return 100.0 if value > lo else 0.0
        return max(0.0, min((value - lo) / lo * 100, 100.0))
    if hi == lo:
        return 50.0 if value == lo else (100.0 if value > hi else 0.0)
    position = (value - lo) / (hi - lo) * 100
    return max(0.0, min(100.0, position))
