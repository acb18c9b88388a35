"""
JSON input/output for gear pairs and alignment reports.

A mesh document describes one parent/child pair:

    {
        "schema_version": "1.0",
        "parent": {"teeth": 20, "rotation_rad": 0.0},
        "child": {"teeth": 10, "rotation_rad": 0.314159},
        "mesh_angle_rad": 0.0
    }

Uses Pydantic for automatic validation of field types. Tooth counts are
checked by the core functions, not here, so every caller sees the same
InvalidArgument error.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union, TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, field_validator

from ..core.mesh_alignment import AlignmentReport
from .schema import SCHEMA_VERSION, validate_json_schema

if TYPE_CHECKING:
    from ..calculator.validation import ValidationResult

logger = logging.getLogger(__name__)


class GearState(BaseModel):
    """A gear's tooth count and live rotation."""
    model_config = ConfigDict(extra='ignore')

    teeth: int
    rotation_rad: float = 0.0

    @field_validator('teeth', mode='before')
    @classmethod
    def reject_bool_teeth(cls, v):
        # Lax int parsing would read true as 1
        if isinstance(v, bool):
            raise ValueError("teeth must be an integer, not a boolean")
        return v


class MeshPair(BaseModel):
    """A parent/child pair and the direction from parent to child centre."""
    model_config = ConfigDict(extra='ignore')

    parent: GearState
    child: GearState
    mesh_angle_rad: float = 0.0


def load_mesh_json(filepath: Union[str, Path]) -> MeshPair:
    """
    Load a gear pair from a JSON file.

    Args:
        filepath: Path to JSON file

    Returns:
        MeshPair

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the root is not an object, a parent or child section
            is missing, or validate_json_schema() reports errors
        pydantic.ValidationError: If a field has the wrong type
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"Mesh file not found: {filepath}")

    with open(filepath, 'r') as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError("Invalid mesh JSON - root must be an object")

    # Some exports wrap the pair
    if 'pair' in data:
        data = data['pair']

    if not isinstance(data, dict) or 'parent' not in data or 'child' not in data:
        raise ValueError(
            "Invalid mesh JSON - must contain 'parent' and 'child' sections"
        )

    schema = validate_json_schema(data)
    if schema["errors"]:
        raise ValueError(
            f"Invalid mesh JSON - {'; '.join(schema['errors'])}"
        )

    for warning in schema["warnings"]:
        logger.warning(f"{filepath}: {warning}")

    logger.info(f"Loaded mesh pair from {filepath}")
    return MeshPair.model_validate(data)


def save_mesh_json(pair: MeshPair, filepath: Union[str, Path]) -> None:
    """
    Save a gear pair to a JSON file.

    Args:
        pair: Gear pair to save
        filepath: Path to save JSON file
    """
    filepath = Path(filepath)

    data = pair.model_dump(mode='json')
    data['schema_version'] = SCHEMA_VERSION

    with open(filepath, 'w') as f:
        json.dump(data, f, indent=2)

    logger.info(f"Saved mesh pair to {filepath}")


def save_alignment_json(
    report: AlignmentReport,
    filepath: Union[str, Path],
    validation: Optional["ValidationResult"] = None,
) -> None:
    """
    Save an alignment report to a JSON file.

    Writes the same document as calculator.output.to_json().

    Args:
        report: Report from get_alignment_info()
        filepath: Path to save JSON file
        validation: Optional validation results to include
    """
    from ..calculator.output import to_json

    filepath = Path(filepath)

    with open(filepath, 'w') as f:
        f.write(to_json(report, validation))

    logger.info(f"Saved alignment report to {filepath}")
