"""
Tooth and gap angle primitives.

All angles are in radians. A gear with ``num_teeth`` teeth at ``rotation``
has its teeth at ``rotation + i * 2π/num_teeth`` and its gaps half a tooth
pitch further on, at ``rotation + π/num_teeth + i * 2π/num_teeth``.

Example:
    >>> from gearphase.core.angles import tooth_angles, distance_to_nearest_gap
    >>> tooth_angles(4, 0.0)
    [0.0, 1.5707963267948966, 3.141592653589793, 4.71238898038469]
    >>> distance_to_nearest_gap(0.0, 4, 0.0)
    0.7853981633974483
"""

import math
from numbers import Integral
from typing import List, Optional

from ..constants import (
    DEFAULT_NEAR_TOLERANCE_RAD,
    FULL_TURN_RAD,
    HALF_TURN_RAD,
    MIN_TEETH,
)


class InvalidArgument(ValueError):
    """Raised when a tooth count is not a positive integer."""
    pass


def check_tooth_count(value, name: str = "num_teeth") -> int:
    """Return ``value`` if it is a usable tooth count, else raise.

    Args:
        value: Tooth count to check
        name: Parameter name used in the error message

    Returns:
        The tooth count as an int

    Raises:
        InvalidArgument: If value is not an integer or is below MIN_TEETH
    """
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidArgument(f"{name} must be an integer, got {value!r}")
    if value < MIN_TEETH:
        raise InvalidArgument(f"{name} must be >= {MIN_TEETH}, got {value}")
    return int(value)


def normalize_angle(angle: float) -> float:
    """Reduce an angle to the canonical range [0, 2π).

    Truncated remainder first, then one correction for negative remainders.
    A tiny negative input can round up to exactly 2π on the correction;
    that case is folded back to 0.0.
    """
    result = math.fmod(angle, FULL_TURN_RAD)
    if result < 0:
        result += FULL_TURN_RAD
    if result >= FULL_TURN_RAD:
        result = 0.0
    return result


def tooth_pitch(num_teeth: int) -> float:
    """Angular spacing between adjacent teeth (2π/num_teeth)."""
    num_teeth = check_tooth_count(num_teeth)
    return FULL_TURN_RAD / num_teeth


def half_tooth(num_teeth: int) -> float:
    """Angular offset from a tooth to the adjacent gap (π/num_teeth)."""
    num_teeth = check_tooth_count(num_teeth)
    return HALF_TURN_RAD / num_teeth


def _positions(num_teeth: int, rotation: float, offset: float) -> List[float]:
    spacing = FULL_TURN_RAD / num_teeth
    return [normalize_angle(rotation + offset + i * spacing) for i in range(num_teeth)]


def tooth_angles(num_teeth: int, rotation: float) -> List[float]:
    """
    Get all tooth angle positions for a gear at a given rotation.

    Args:
        num_teeth: Number of teeth on the gear
        rotation: Current rotation of the gear (radians, any value)

    Returns:
        List of num_teeth canonical angles, in tooth index order
        (not necessarily ascending once wrapped)

    Raises:
        InvalidArgument: If num_teeth is not a positive integer
    """
    num_teeth = check_tooth_count(num_teeth)
    return _positions(num_teeth, rotation, 0.0)


def gap_angles(num_teeth: int, rotation: float) -> List[float]:
    """
    Get all gap (valley) angle positions for a gear at a given rotation.

    Gaps sit halfway between adjacent teeth.

    Args:
        num_teeth: Number of teeth on the gear
        rotation: Current rotation of the gear (radians, any value)

    Returns:
        List of num_teeth canonical angles, in gap index order

    Raises:
        InvalidArgument: If num_teeth is not a positive integer
    """
    num_teeth = check_tooth_count(num_teeth)
    return _positions(num_teeth, rotation, HALF_TURN_RAD / num_teeth)


def _nearest(target_angle: float, positions: List[float]) -> float:
    target = normalize_angle(target_angle)
    min_dist = math.inf
    for position in positions:
        diff = abs(target - position)
        diff = min(diff, FULL_TURN_RAD - diff)  # wraparound
        if diff < min_dist:
            min_dist = diff
    return min_dist


def distance_to_nearest_tooth(target_angle: float, num_teeth: int, rotation: float) -> float:
    """
    Find the angular distance from a target angle to the nearest tooth.

    Args:
        target_angle: The angle to check (radians, any value)
        num_teeth: Number of teeth on the gear
        rotation: Current rotation of the gear (radians)

    Returns:
        Angular distance to the nearest tooth, in [0, π]

    Raises:
        InvalidArgument: If num_teeth is not a positive integer
    """
    return _nearest(target_angle, tooth_angles(num_teeth, rotation))


def distance_to_nearest_gap(target_angle: float, num_teeth: int, rotation: float) -> float:
    """
    Find the angular distance from a target angle to the nearest gap.

    Args:
        target_angle: The angle to check (radians, any value)
        num_teeth: Number of teeth on the gear
        rotation: Current rotation of the gear (radians)

    Returns:
        Angular distance to the nearest gap, in [0, π]

    Raises:
        InvalidArgument: If num_teeth is not a positive integer
    """
    return _nearest(target_angle, gap_angles(num_teeth, rotation))


def is_near_tooth(
    target_angle: float,
    num_teeth: int,
    rotation: float,
    tolerance: Optional[float] = None,
) -> bool:
    """Check if a tooth lies strictly within ``tolerance`` of the target angle.

    ``tolerance=None`` means DEFAULT_NEAR_TOLERANCE_RAD. An explicit 0.0 is
    kept as given, so the strict comparison can never succeed.
    """
    if tolerance is None:
        tolerance = DEFAULT_NEAR_TOLERANCE_RAD
    return distance_to_nearest_tooth(target_angle, num_teeth, rotation) < tolerance


def is_near_gap(
    target_angle: float,
    num_teeth: int,
    rotation: float,
    tolerance: Optional[float] = None,
) -> bool:
    """Check if a gap lies strictly within ``tolerance`` of the target angle.

    Same default handling as is_near_tooth.
    """
    if tolerance is None:
        tolerance = DEFAULT_NEAR_TOLERANCE_RAD
    return distance_to_nearest_gap(target_angle, num_teeth, rotation) < tolerance
