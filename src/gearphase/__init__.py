"""
Gearphase - Angular geometry of meshing gears.

Where a gear's teeth and gaps lie, what phase a child gear needs to mesh with
its parent, and whether two gears currently interleave at their contact point.

Example:
    >>> from math import pi
    >>> from gearphase import calculate_child_phase, verify_mesh_alignment
    >>>
    >>> # Rotation for a 10-tooth child placed to the right of a 20-tooth parent
    >>> phase = calculate_child_phase(0.0, 0.0, parent_teeth=20, child_teeth=10)
    >>>
    >>> # Check the pair at its current rotations
    >>> verify_mesh_alignment(20, 10, 0.0, 0.0, pi / 10)
    True

Note: All imports are lazy-loaded for fast startup. The core functions can be
imported without triggering the IO (Pydantic) imports.
"""

__version__ = "0.1.0"

# Define which names come from which submodule
# All imports are lazy to minimize startup time

_ENUMS = {"MeshSide", "GearRole"}

_CORE = {
    "InvalidArgument",
    "check_tooth_count",
    "normalize_angle",
    "tooth_pitch",
    "half_tooth",
    "tooth_angles",
    "gap_angles",
    "distance_to_nearest_tooth",
    "distance_to_nearest_gap",
    "is_near_tooth",
    "is_near_gap",
    "calculate_child_phase",
    "GearAlignment",
    "AlignmentReport",
    "child_mesh_angle",
    "classify_mesh_side",
    "get_alignment_info",
    "verify_mesh_alignment",
    "alignment_info_to_dict",
}

_CALCULATOR = {
    "validate_mesh",
    "Severity",
    "ValidationMessage",
    "ValidationResult",
    "to_json",
    "to_markdown",
    "to_summary",
}

_IO = {
    "GearState",
    "MeshPair",
    "load_mesh_json",
    "save_mesh_json",
    "save_alignment_json",
}

# Cache for lazy-loaded modules
_modules = {}


def __getattr__(name):
    """Lazy load submodules when their attributes are accessed."""
    global _modules

    if name in _ENUMS:
        if "enums" not in _modules:
            from . import enums
            _modules["enums"] = enums
        return getattr(_modules["enums"], name)

    if name in _CORE:
        if "core" not in _modules:
            from . import core
            _modules["core"] = core
        return getattr(_modules["core"], name)

    if name in _CALCULATOR:
        if "calculator" not in _modules:
            from . import calculator
            _modules["calculator"] = calculator
        return getattr(_modules["calculator"], name)

    if name in _IO:
        if "io" not in _modules:
            from . import io
            _modules["io"] = io
        return getattr(_modules["io"], name)

    raise AttributeError(f"module 'gearphase' has no attribute {name!r}")


__all__ = [
    # Version
    "__version__",

    # Enums (lazy loaded from enums)
    "MeshSide",
    "GearRole",

    # Errors (lazy loaded from core)
    "InvalidArgument",
    "check_tooth_count",

    # Angle primitives (lazy loaded from core)
    "normalize_angle",
    "tooth_pitch",
    "half_tooth",
    "tooth_angles",
    "gap_angles",
    "distance_to_nearest_tooth",
    "distance_to_nearest_gap",
    "is_near_tooth",
    "is_near_gap",

    # Phase and mesh (lazy loaded from core)
    "calculate_child_phase",
    "GearAlignment",
    "AlignmentReport",
    "child_mesh_angle",
    "classify_mesh_side",
    "get_alignment_info",
    "verify_mesh_alignment",
    "alignment_info_to_dict",

    # Calculator (lazy loaded from calculator)
    "validate_mesh",
    "Severity",
    "ValidationMessage",
    "ValidationResult",
    "to_json",
    "to_markdown",
    "to_summary",

    # IO (lazy loaded from io)
    "GearState",
    "MeshPair",
    "load_mesh_json",
    "save_mesh_json",
    "save_alignment_json",
]
