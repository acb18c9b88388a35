"""
Gear Pair Validation Rules

Collects findings about a parent/child pair as structured messages instead
of raising, so that UI and CLI callers can show every problem at once.

Checks, in order:
- Tooth counts are positive integers (further checks skipped otherwise)
- Parent and child interleave at the contact line
"""

from dataclasses import dataclass, field
from enum import Enum
from math import degrees
from typing import List, Optional

from ..enums import GearRole, MeshSide
from ..core.angles import InvalidArgument, check_tooth_count
from ..core.mesh_alignment import AlignmentReport, get_alignment_info


class Severity(Enum):
    """Validation message severity"""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationMessage:
    """A single validation finding"""
    severity: Severity
    code: str
    message: str
    suggestion: Optional[str] = None


@dataclass
class ValidationResult:
    """Complete validation result"""
    valid: bool  # True if no errors
    messages: List[ValidationMessage] = field(default_factory=list)

    @property
    def errors(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.ERROR]

    @property
    def warnings(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.WARNING]

    @property
    def infos(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.INFO]


def validate_mesh(
    parent_teeth: int,
    child_teeth: int,
    mesh_angle: float,
    parent_rotation: float,
    child_rotation: float,
) -> ValidationResult:
    """
    Validate a parent/child gear pair at its current rotations.

    Args:
        parent_teeth: Number of teeth on parent gear
        child_teeth: Number of teeth on child gear
        mesh_angle: Angle from parent centre to child centre (radians)
        parent_rotation: Current rotation of parent gear (radians)
        child_rotation: Current rotation of child gear (radians)

    Returns:
        ValidationResult with all findings
    """
    messages: List[ValidationMessage] = []

    messages.extend(_validate_teeth(parent_teeth, GearRole.PARENT))
    messages.extend(_validate_teeth(child_teeth, GearRole.CHILD))

    # Mesh checks need usable tooth counts
    if not messages:
        report = get_alignment_info(
            parent_teeth, child_teeth, mesh_angle, parent_rotation, child_rotation
        )
        messages.extend(_validate_interleave(report))

    has_errors = any(m.severity == Severity.ERROR for m in messages)

    return ValidationResult(
        valid=not has_errors,
        messages=messages
    )


def _validate_teeth(value, role: GearRole) -> List[ValidationMessage]:
    """Check a tooth count is a positive integer"""
    try:
        check_tooth_count(value, f"{role.value}_teeth")
    except InvalidArgument as e:
        return [ValidationMessage(
            severity=Severity.ERROR,
            code=f"{role.name}_TEETH_INVALID",
            message=str(e),
            suggestion="Tooth counts must be whole numbers of at least 1"
        )]
    return []


def _validate_interleave(report: AlignmentReport) -> List[ValidationMessage]:
    """Check that one gear's tooth faces the other gear's gap"""
    messages = []
    parent_side = report.parent.side
    child_side = report.child.side

    if parent_side is MeshSide.NEUTRAL or child_side is MeshSide.NEUTRAL:
        neutral = "parent" if parent_side is MeshSide.NEUTRAL else "child"
        messages.append(ValidationMessage(
            severity=Severity.INFO,
            code="MESH_AMBIGUOUS",
            message=f"The {neutral} gear has a tooth and a gap equidistant from the contact point; mesh accepted"
        ))
    elif parent_side is child_side:
        half_pitch_deg = degrees(report.child.half_tooth)
        if parent_side is MeshSide.TOOTH:
            messages.append(ValidationMessage(
                severity=Severity.ERROR,
                code="MESH_TOOTH_ON_TOOTH",
                message="Parent and child both present a tooth at the contact point",
                suggestion=f"Rotate the child by half a tooth pitch ({half_pitch_deg:.2f}°)"
            ))
        else:
            messages.append(ValidationMessage(
                severity=Severity.ERROR,
                code="MESH_GAP_ON_GAP",
                message="Parent and child both present a gap at the contact point",
                suggestion=f"Rotate the child by half a tooth pitch ({half_pitch_deg:.2f}°)"
            ))
    else:
        messages.append(ValidationMessage(
            severity=Severity.INFO,
            code="MESH_INTERLEAVED",
            message=f"Parent {parent_side.value} meets child {child_side.value} at the contact point"
        ))

    return messages
