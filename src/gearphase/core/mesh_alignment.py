"""
Gear Pair Mesh Alignment Module.

This module judges whether two gears, at their current rotations, interleave
at the contact line: when one gear presents a tooth there, the other must
present a gap.

The parent gear's contact point is at ``mesh_angle`` in its own frame; the
child sees the same point from the opposite side, at ``mesh_angle + π``.

Example:
    >>> from math import pi
    >>> from gearphase.core.mesh_alignment import verify_mesh_alignment, get_alignment_info
    >>>
    >>> verify_mesh_alignment(20, 10, 0.0, 0.0, pi / 10)
    True
    >>> report = get_alignment_info(20, 10, 0.0, 0.0, pi / 10)
    >>> report.parent.side, report.child.side
    (<MeshSide.TOOTH: 'tooth'>, <MeshSide.GAP: 'gap'>)
"""

from dataclasses import dataclass
from typing import Optional
import logging

from ..constants import HALF_TURN_RAD, MESH_TIE_EPSILON_RAD
from ..enums import MeshSide
from .angles import (
    check_tooth_count,
    distance_to_nearest_gap,
    distance_to_nearest_tooth,
    normalize_angle,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GearAlignment:
    """One gear's view of the contact line.

    Attributes:
        teeth: Number of teeth
        rotation: Rotation as given by the caller (not normalized)
        tooth_dist: Angular distance from the contact point to the nearest tooth
        gap_dist: Angular distance from the contact point to the nearest gap
        half_tooth: Half the tooth pitch (π/teeth)
    """
    teeth: int
    rotation: float
    tooth_dist: float
    gap_dist: float
    half_tooth: float

    @property
    def side(self) -> MeshSide:
        """Tooth, gap or neutral, using MESH_TIE_EPSILON_RAD."""
        return classify_mesh_side(self.tooth_dist, self.gap_dist)


@dataclass(frozen=True)
class AlignmentReport:
    """Snapshot of a parent/child pair at one instant.

    Attributes:
        mesh_angle: Angle from parent centre to child centre, as given
        child_mesh_angle: Contact point in the child's frame, in [0, 2π)
        parent: Parent gear alignment
        child: Child gear alignment
    """
    mesh_angle: float
    child_mesh_angle: float
    parent: GearAlignment
    child: GearAlignment

    @property
    def aligned(self) -> bool:
        """Same judgment as verify_mesh_alignment."""
        return _sides_interleave(self.parent.side, self.child.side)


def child_mesh_angle(mesh_angle: float) -> float:
    """Contact point as seen from the child centre: mesh_angle + π, normalized."""
    return normalize_angle(mesh_angle + HALF_TURN_RAD)


def classify_mesh_side(
    tooth_dist: float,
    gap_dist: float,
    epsilon: float = MESH_TIE_EPSILON_RAD,
) -> MeshSide:
    """Classify what a gear presents at the contact point.

    Args:
        tooth_dist: Distance to the nearest tooth (radians)
        gap_dist: Distance to the nearest gap (radians)
        epsilon: Tie threshold (default MESH_TIE_EPSILON_RAD)

    Returns:
        MeshSide.TOOTH, MeshSide.GAP, or MeshSide.NEUTRAL when neither
        distance beats the other by more than epsilon
    """
    if tooth_dist < gap_dist - epsilon:
        return MeshSide.TOOTH
    if gap_dist < tooth_dist - epsilon:
        return MeshSide.GAP
    return MeshSide.NEUTRAL


def _sides_interleave(parent_side: MeshSide, child_side: MeshSide) -> bool:
    # A tie on either side is acceptable
    if parent_side is MeshSide.NEUTRAL or child_side is MeshSide.NEUTRAL:
        return True
    return (
        (parent_side is MeshSide.TOOTH and child_side is MeshSide.GAP)
        or (parent_side is MeshSide.GAP and child_side is MeshSide.TOOTH)
    )


def _measure(target_angle: float, teeth: int, rotation: float) -> GearAlignment:
    return GearAlignment(
        teeth=teeth,
        rotation=rotation,
        tooth_dist=distance_to_nearest_tooth(target_angle, teeth, rotation),
        gap_dist=distance_to_nearest_gap(target_angle, teeth, rotation),
        half_tooth=HALF_TURN_RAD / teeth,
    )


def get_alignment_info(
    parent_teeth: int,
    child_teeth: int,
    mesh_angle: float,
    parent_rotation: float,
    child_rotation: float,
) -> AlignmentReport:
    """Get detailed alignment info for a parent/child pair.

    Pure diagnostic aggregation; makes no judgment itself (see
    AlignmentReport.aligned for that).

    Args:
        parent_teeth: Number of teeth on parent gear
        child_teeth: Number of teeth on child gear
        mesh_angle: Angle from parent centre to child centre (radians)
        parent_rotation: Current rotation of parent gear (radians)
        child_rotation: Current rotation of child gear (radians)

    Returns:
        AlignmentReport with distances and half-tooth angles for both gears

    Raises:
        InvalidArgument: If either tooth count is not a positive integer
    """
    parent_teeth = check_tooth_count(parent_teeth, "parent_teeth")
    child_teeth = check_tooth_count(child_teeth, "child_teeth")

    child_angle = child_mesh_angle(mesh_angle)

    return AlignmentReport(
        mesh_angle=mesh_angle,
        child_mesh_angle=child_angle,
        parent=_measure(mesh_angle, parent_teeth, parent_rotation),
        child=_measure(child_angle, child_teeth, child_rotation),
    )


def verify_mesh_alignment(
    parent_teeth: int,
    child_teeth: int,
    mesh_angle: float,
    parent_rotation: float,
    child_rotation: float,
    tolerance: Optional[float] = None,
) -> bool:
    """Verify that two gears are properly meshed at a given mesh point.

    For proper meshing, teeth must interleave: when one gear has a tooth
    closer to the mesh point, the other should have a gap closer. This is a
    qualitative check that tolerates any sub-epsilon rotational slack; when
    either gear has tooth and gap equidistant within MESH_TIE_EPSILON_RAD the
    pair is accepted.

    Args:
        parent_teeth: Number of teeth on parent gear
        child_teeth: Number of teeth on child gear
        mesh_angle: Angle from parent centre to child centre (radians)
        parent_rotation: Current rotation of parent gear (radians)
        child_rotation: Current rotation of child gear (radians)
        tolerance: Unused, kept for call-site compatibility

    Returns:
        True if the gears interleave at the mesh point

    Raises:
        InvalidArgument: If either tooth count is not a positive integer
    """
    report = get_alignment_info(
        parent_teeth, child_teeth, mesh_angle, parent_rotation, child_rotation
    )
    parent_side = report.parent.side
    child_side = report.child.side

    aligned = _sides_interleave(parent_side, child_side)
    logger.debug(
        f"Mesh {parent_teeth}T/{child_teeth}T at {mesh_angle:.6f} rad: "
        f"parent={parent_side.value}, child={child_side.value}, aligned={aligned}"
    )
    return aligned


def alignment_info_to_dict(report: AlignmentReport) -> dict:
    """Convert AlignmentReport to a dictionary for JSON serialization.

    Args:
        report: AlignmentReport to convert

    Returns:
        Dictionary representation suitable for JSON output
    """
    def gear_dict(gear: GearAlignment) -> dict:
        return {
            "teeth": gear.teeth,
            "rotation_rad": gear.rotation,
            "tooth_dist_rad": gear.tooth_dist,
            "gap_dist_rad": gear.gap_dist,
            "half_tooth_rad": gear.half_tooth,
            "side": gear.side.value,
        }

    return {
        "mesh_angle_rad": report.mesh_angle,
        "child_mesh_angle_rad": report.child_mesh_angle,
        "parent": gear_dict(report.parent),
        "child": gear_dict(report.child),
        "aligned": report.aligned,
    }
