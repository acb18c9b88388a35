"""
Gearphase IO - JSON documents for gear pairs and alignment reports.

Example:
    >>> from gearphase.io import load_mesh_json, save_alignment_json
    >>> from gearphase.core import get_alignment_info
    >>>
    >>> pair = load_mesh_json("pair.json")
    >>> report = get_alignment_info(
    ...     pair.parent.teeth, pair.child.teeth, pair.mesh_angle_rad,
    ...     pair.parent.rotation_rad, pair.child.rotation_rad,
    ... )
    >>> save_alignment_json(report, "alignment.json")
"""

from .loaders import (
    GearState,
    MeshPair,
    load_mesh_json,
    save_mesh_json,
    save_alignment_json,
)

from .schema import (
    SCHEMA_VERSION,
    validate_json_schema,
    create_example_mesh,
)

__all__ = [
    # Models
    "GearState",
    "MeshPair",

    # Loaders
    "load_mesh_json",
    "save_mesh_json",
    "save_alignment_json",

    # Schema
    "SCHEMA_VERSION",
    "validate_json_schema",
    "create_example_mesh",
]
