"""
Gearphase Core - Pure angular geometry of meshing gears.

Stateless functions over tooth counts and rotations in radians.
No JSON or Pydantic dependencies - pure Python API.

Example:
    >>> from math import pi
    >>> from gearphase.core import calculate_child_phase, verify_mesh_alignment
    >>>
    >>> phase = calculate_child_phase(0.0, 0.0, parent_teeth=20, child_teeth=10)
    >>> round(phase, 4)
    3.4558
    >>> verify_mesh_alignment(20, 10, 0.0, 0.0, pi / 10)
    True
"""

from .angles import (
    InvalidArgument,
    check_tooth_count,
    normalize_angle,
    tooth_pitch,
    half_tooth,
    tooth_angles,
    gap_angles,
    distance_to_nearest_tooth,
    distance_to_nearest_gap,
    is_near_tooth,
    is_near_gap,
)
from .phase import calculate_child_phase
from .mesh_alignment import (
    GearAlignment,
    AlignmentReport,
    child_mesh_angle,
    classify_mesh_side,
    get_alignment_info,
    verify_mesh_alignment,
    alignment_info_to_dict,
)

__all__ = [
    # Errors
    "InvalidArgument",
    "check_tooth_count",

    # Angle primitives
    "normalize_angle",
    "tooth_pitch",
    "half_tooth",
    "tooth_angles",
    "gap_angles",
    "distance_to_nearest_tooth",
    "distance_to_nearest_gap",
    "is_near_tooth",
    "is_near_gap",

    # Phase derivation
    "calculate_child_phase",

    # Mesh alignment
    "GearAlignment",
    "AlignmentReport",
    "child_mesh_angle",
    "classify_mesh_side",
    "get_alignment_info",
    "verify_mesh_alignment",
    "alignment_info_to_dict",
]
