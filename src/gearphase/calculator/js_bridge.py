"""
JavaScript-Python bridge for Pyodide.

Provides a single, clean entry point for all JS->Python gear phase calls.
All inputs are validated via Pydantic models before processing, and every
failure is returned as ``{"success": false, "error": ...}`` rather than raised.

Usage from JavaScript:
    pyodide.globals.set('input_json', JSON.stringify({
        operation: 'child-phase',
        parent: {teeth: 20, rotation_rad: 0.0},
        child: {teeth: 10},
        mesh_angle_rad: 0.0,
    }));
    const result = await pyodide.runPythonAsync(`
        from gearphase.calculator.js_bridge import calculate
        calculate(input_json)
    `);
    const output = JSON.parse(result);
"""

import json
from typing import Dict, List, Optional

from typing_extensions import TypedDict

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.angles import (
    distance_to_nearest_gap,
    distance_to_nearest_tooth,
    gap_angles,
    is_near_gap,
    is_near_tooth,
    tooth_angles,
)
from ..core.mesh_alignment import alignment_info_to_dict, get_alignment_info
from ..core.phase import calculate_child_phase
from ..io.loaders import GearState
from .output import messages_to_dicts, to_markdown, to_summary
from .validation import validate_mesh


class ValidationMessageDict(TypedDict, total=False):
    """Type for validation message dictionaries sent to JavaScript."""
    severity: str  # "error", "warning", "info"
    code: str  # e.g., "MESH_TOOTH_ON_TOOTH"
    message: str
    suggestion: Optional[str]


OPERATIONS = (
    "child-phase",
    "verify",
    "alignment-info",
    "tooth-angles",
    "gap-angles",
    "nearest",
)


# ============================================================================
# Input Models (Pydantic validation for JS inputs)
# ============================================================================

class BridgeInputs(BaseModel):
    """
    All inputs from the browser.

    Which fields are required depends on the operation:
    - "child-phase": parent, child (rotation ignored), mesh_angle_rad;
      parent_phase_rad defaults to parent.rotation_rad
    - "verify", "alignment-info": parent, child, mesh_angle_rad
    - "tooth-angles", "gap-angles": gear
    - "nearest": gear, target_angle_rad, optional tolerance_rad
    """
    model_config = ConfigDict(extra='ignore')

    operation: str = "verify"

    parent: Optional[GearState] = None
    child: Optional[GearState] = None
    gear: Optional[GearState] = None

    mesh_angle_rad: float = 0.0
    parent_phase_rad: Optional[float] = None
    target_angle_rad: Optional[float] = None
    tolerance_rad: Optional[float] = None

    @field_validator('operation', mode='before')
    @classmethod
    def normalize_operation(cls, v):
        if isinstance(v, str):
            return v.strip().lower().replace('_', '-')
        return v


# ============================================================================
# Output Models
# ============================================================================

class NearestResult(BaseModel):
    """Distances from a target angle to a gear's nearest tooth and gap."""
    tooth_dist_rad: float
    gap_dist_rad: float
    near_tooth: bool
    near_gap: bool


class BridgeOutput(BaseModel):
    """Output from calculate() - matches what JS expects."""
    model_config = ConfigDict(extra='ignore')

    success: bool
    error: Optional[str] = None
    operation: Optional[str] = None

    # Operation results (only the relevant one is filled)
    child_phase_rad: Optional[float] = None
    aligned: Optional[bool] = None
    alignment: Optional[Dict] = None
    angles_rad: Optional[List[float]] = None
    nearest: Optional[NearestResult] = None

    # Display formats
    summary: Optional[str] = None
    markdown: Optional[str] = None

    # Validation
    valid: bool = True
    messages: List[ValidationMessageDict] = Field(default_factory=list)


# ============================================================================
# Main Entry Point
# ============================================================================

def calculate(input_json: str) -> str:
    """
    Single entry point for all gear phase operations from JavaScript.

    Args:
        input_json: JSON string with BridgeInputs structure

    Returns:
        JSON string with BridgeOutput structure
    """
    try:
        data = json.loads(input_json)
        inputs = BridgeInputs.model_validate(data)
        output = _dispatch(inputs)
        return output.model_dump_json()

    except json.JSONDecodeError as e:
        return BridgeOutput(
            success=False,
            error=f"Invalid JSON: {e}"
        ).model_dump_json()

    except Exception as e:
        return BridgeOutput(
            success=False,
            error=str(e)
        ).model_dump_json()


def _require(inputs: BridgeInputs, *names: str) -> None:
    missing = [name for name in names if getattr(inputs, name) is None]
    if missing:
        raise ValueError(f"{', '.join(missing)} required for {inputs.operation} operation")


def _dispatch(inputs: BridgeInputs) -> BridgeOutput:
    """Call the appropriate core function based on operation."""
    op = inputs.operation

    if op == "child-phase":
        _require(inputs, "parent", "child")
        parent_phase = inputs.parent_phase_rad
        if parent_phase is None:
            parent_phase = inputs.parent.rotation_rad
        phase = calculate_child_phase(
            parent_phase,
            inputs.mesh_angle_rad,
            inputs.parent.teeth,
            inputs.child.teeth,
        )
        return BridgeOutput(success=True, operation=op, child_phase_rad=phase)

    if op in ("verify", "alignment-info"):
        _require(inputs, "parent", "child")
        args = (
            inputs.parent.teeth,
            inputs.child.teeth,
            inputs.mesh_angle_rad,
            inputs.parent.rotation_rad,
            inputs.child.rotation_rad,
        )
        report = get_alignment_info(*args)
        validation = validate_mesh(*args)
        return BridgeOutput(
            success=True,
            operation=op,
            aligned=report.aligned,
            alignment=alignment_info_to_dict(report),
            summary=to_summary(report),
            markdown=to_markdown(report, validation) if op == "alignment-info" else None,
            valid=validation.valid,
            messages=messages_to_dicts(validation),
        )

    if op in ("tooth-angles", "gap-angles"):
        _require(inputs, "gear")
        positions = tooth_angles if op == "tooth-angles" else gap_angles
        return BridgeOutput(
            success=True,
            operation=op,
            angles_rad=positions(inputs.gear.teeth, inputs.gear.rotation_rad),
        )

    if op == "nearest":
        _require(inputs, "gear", "target_angle_rad")
        gear = inputs.gear
        target = inputs.target_angle_rad
        nearest = NearestResult(
            tooth_dist_rad=distance_to_nearest_tooth(target, gear.teeth, gear.rotation_rad),
            gap_dist_rad=distance_to_nearest_gap(target, gear.teeth, gear.rotation_rad),
            near_tooth=is_near_tooth(target, gear.teeth, gear.rotation_rad, inputs.tolerance_rad),
            near_gap=is_near_gap(target, gear.teeth, gear.rotation_rad, inputs.tolerance_rad),
        )
        return BridgeOutput(success=True, operation=op, nearest=nearest)

    raise ValueError(f"Unknown operation: {op}. Expected one of: {', '.join(OPERATIONS)}")
