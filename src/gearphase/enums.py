"""Type-safe enums for gear phase calculations."""

from enum import Enum


class MeshSide(Enum):
    """What one gear presents at the contact line"""
    TOOTH = "tooth"  # Nearest tooth is closer than nearest gap by more than epsilon
    GAP = "gap"  # Nearest gap is closer than nearest tooth by more than epsilon
    NEUTRAL = "neutral"  # Tooth and gap equidistant within epsilon


class GearRole(Enum):
    """Role of a gear within a meshing pair"""
    PARENT = "parent"
    CHILD = "child"
