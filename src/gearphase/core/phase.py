"""
Child gear phase derivation.

Given a parent gear's phase and the direction from the parent centre to the
child centre, computes the rotation the child must take so that a parent
tooth meets a child gap at the contact point.
"""

from math import pi

from .angles import check_tooth_count, normalize_angle


def calculate_child_phase(
    parent_phase: float,
    mesh_angle: float,
    parent_teeth: int,
    child_teeth: int,
) -> float:
    """
    Calculate the phase offset for a child gear meshing with a parent gear.

    Derived from the mesh condition in tooth-phase form,
    ``tooth_phase(angle) = (angle + rotation) * teeth`` where phase 0 is a
    tooth and phase π is a gap. Requiring parent phase 0 and child phase π at
    the contact line gives:

        ratio  = parent_teeth / child_teeth
        offset = π/child_teeth - π - mesh_angle * (1 + ratio) - parent_phase * ratio

    Args:
        parent_phase: Parent gear's phase offset (radians, any value)
        mesh_angle: Angle from parent centre to child centre (radians, any value)
        parent_teeth: Number of teeth on parent gear
        child_teeth: Number of teeth on child gear

    Returns:
        Phase offset for the child gear, normalized to [0, 2π)

    Raises:
        InvalidArgument: If either tooth count is not a positive integer
    """
    parent_teeth = check_tooth_count(parent_teeth, "parent_teeth")
    child_teeth = check_tooth_count(child_teeth, "child_teeth")

    ratio = parent_teeth / child_teeth
    half_tooth = pi / child_teeth

    offset = half_tooth - pi - mesh_angle * (1 + ratio) - parent_phase * ratio

    return normalize_angle(offset)
