"""
JSON schema version and structural checks for mesh documents.

The Pydantic models in loaders.py are the source of truth for field types;
this module provides lightweight structural checks that report every problem
at once, plus an example document.
"""

from typing import Dict, Any

SCHEMA_VERSION = "1.0"


def validate_json_schema(data: Dict) -> Dict[str, Any]:
    """
    Validate mesh document structure.

    Args:
        data: Parsed JSON data

    Returns:
        {
            "valid": bool,
            "errors": List[str],
            "warnings": List[str],
            "schema_version": str
        }

    Example:
        >>> result = validate_json_schema({"parent": {"teeth": 20}})
        >>> result["errors"]
        ["Missing required section: 'child'"]
    """
    errors = []
    warnings = []

    if not isinstance(data, dict):
        return {
            "valid": False,
            "errors": ["Root must be a JSON object/dict"],
            "warnings": [],
            "schema_version": "unknown",
        }

    schema_version = data.get("schema_version", "unknown")
    if schema_version == "unknown":
        warnings.append("Missing 'schema_version' field (assuming current format)")
    elif schema_version != SCHEMA_VERSION:
        warnings.append(f"Schema version {schema_version} != current {SCHEMA_VERSION}")

    for section in ["parent", "child"]:
        if section not in data:
            errors.append(f"Missing required section: '{section}'")
            continue
        gear = data[section]
        if not isinstance(gear, dict):
            errors.append(f"Section '{section}' must be an object/dict")
            continue
        if "teeth" not in gear:
            errors.append(f"{section}.teeth is required")
        elif isinstance(gear["teeth"], bool) or not isinstance(gear["teeth"], int):
            errors.append(f"{section}.teeth must be an integer")
        if "rotation_rad" in gear and not _is_number(gear["rotation_rad"]):
            errors.append(f"{section}.rotation_rad must be a number")

    if "mesh_angle_rad" in data and not _is_number(data["mesh_angle_rad"]):
        errors.append("mesh_angle_rad must be a number")
    elif "mesh_angle_rad" not in data:
        warnings.append("Missing 'mesh_angle_rad' (defaults to 0.0)")

    return {
        "valid": len(errors) == 0,
        "errors": errors,
        "warnings": warnings,
        "schema_version": schema_version
    }


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def create_example_mesh() -> Dict:
    """
    Create an example mesh document: a 20-tooth parent with a tooth on the
    contact line and a 10-tooth child turned so a gap faces it.
    """
    return {
        "schema_version": SCHEMA_VERSION,
        "parent": {"teeth": 20, "rotation_rad": 0.0},
        "child": {"teeth": 10, "rotation_rad": 0.3141592653589793},
        "mesh_angle_rad": 0.0,
    }
