"""
Tests for JavaScript-Python bridge.

The bridge uses a single entry point: calculate(input_json) -> output_json,
and reports failures in the output instead of raising.
"""

import json
import math
import pytest

from gearphase.calculator.js_bridge import (
    BridgeInputs,
    BridgeOutput,
    OPERATIONS,
    calculate,
)


def _call(**payload) -> dict:
    return json.loads(calculate(json.dumps(payload)))


PARENT = {"teeth": 20, "rotation_rad": 0.0}


class TestBridgeInputs:
    """Tests for BridgeInputs model."""

    def test_defaults(self):
        inputs = BridgeInputs()
        assert inputs.operation == "verify"
        assert inputs.mesh_angle_rad == 0.0
        assert inputs.parent is None
        assert inputs.tolerance_rad is None

    @pytest.mark.parametrize("raw,expected", [
        ("child_phase", "child-phase"),
        ("Alignment-Info", "alignment-info"),
        ("  verify ", "verify"),
    ])
    def test_operation_normalized(self, raw, expected):
        assert BridgeInputs(operation=raw).operation == expected

    def test_extra_fields_ignored(self):
        inputs = BridgeInputs.model_validate({"operation": "verify", "units": "mm"})
        assert inputs.operation == "verify"


class TestCalculateChildPhase:
    """child-phase operation."""

    def test_basic(self):
        result = _call(operation="child-phase", parent=PARENT, child={"teeth": 10})
        assert result["success"] is True
        assert result["operation"] == "child-phase"
        assert result["child_phase_rad"] == pytest.approx(11 * math.pi / 10)

    def test_parent_rotation_used_as_phase(self):
        result = _call(
            operation="child-phase",
            parent={"teeth": 20, "rotation_rad": math.pi / 10},
            child={"teeth": 10},
        )
        assert result["child_phase_rad"] == pytest.approx(9 * math.pi / 10)

    def test_explicit_parent_phase_wins(self):
        result = _call(
            operation="child-phase",
            parent={"teeth": 20, "rotation_rad": math.pi / 10},
            child={"teeth": 10},
            parent_phase_rad=0.0,
        )
        assert result["child_phase_rad"] == pytest.approx(11 * math.pi / 10)

    def test_missing_child(self):
        result = _call(operation="child-phase", parent=PARENT)
        assert result["success"] is False
        assert "child required" in result["error"]


class TestCalculateVerify:
    """verify and alignment-info operations."""

    def test_meshed(self):
        result = _call(
            operation="verify",
            parent=PARENT,
            child={"teeth": 10, "rotation_rad": math.pi / 10},
        )
        assert result["success"] is True
        assert result["aligned"] is True
        assert result["valid"] is True
        assert result["alignment"]["child"]["side"] == "gap"
        assert "Aligned: Yes" in result["summary"]
        assert result["markdown"] is None

    def test_clash_reports_messages(self):
        result = _call(operation="verify", parent=PARENT, child={"teeth": 10})
        assert result["success"] is True
        assert result["aligned"] is False
        assert result["valid"] is False
        assert result["messages"][0]["code"] == "MESH_TOOTH_ON_TOOTH"
        assert result["messages"][0]["severity"] == "error"

    def test_alignment_info_includes_markdown(self):
        result = _call(operation="alignment_info", parent=PARENT, child={"teeth": 10})
        assert result["operation"] == "alignment-info"
        assert result["markdown"].startswith("# Gear Mesh Alignment")

    def test_default_operation_is_verify(self):
        result = _call(parent=PARENT, child={"teeth": 10, "rotation_rad": math.pi / 10})
        assert result["operation"] == "verify"
        assert result["aligned"] is True

    def test_invalid_teeth(self):
        result = _call(operation="verify", parent={"teeth": 0}, child={"teeth": 10})
        assert result["success"] is False
        assert "parent_teeth" in result["error"]

    def test_missing_gears(self):
        result = _call(operation="verify")
        assert result["success"] is False
        assert result["error"] == "parent, child required for verify operation"


class TestCalculateAngles:
    """tooth-angles, gap-angles and nearest operations."""

    def test_tooth_angles(self):
        result = _call(operation="tooth-angles", gear={"teeth": 4})
        assert result["angles_rad"] == pytest.approx(
            [0.0, math.pi / 2, math.pi, 3 * math.pi / 2]
        )

    def test_gap_angles(self):
        result = _call(operation="gap-angles", gear={"teeth": 2, "rotation_rad": 0.0})
        assert result["angles_rad"] == pytest.approx([math.pi / 2, 3 * math.pi / 2])

    def test_missing_gear(self):
        result = _call(operation="tooth-angles")
        assert result["success"] is False
        assert "gear" in result["error"]

    def test_nearest(self):
        result = _call(operation="nearest", gear={"teeth": 4}, target_angle_rad=0.005)
        nearest = result["nearest"]
        assert nearest["tooth_dist_rad"] == pytest.approx(0.005)
        assert nearest["gap_dist_rad"] == pytest.approx(math.pi / 4 - 0.005)
        assert nearest["near_tooth"] is True
        assert nearest["near_gap"] is False

    def test_nearest_zero_tolerance(self):
        result = _call(
            operation="nearest", gear={"teeth": 4}, target_angle_rad=0.0, tolerance_rad=0.0
        )
        assert result["nearest"]["near_tooth"] is False

    def test_nearest_requires_target(self):
        result = _call(operation="nearest", gear={"teeth": 4})
        assert result["success"] is False
        assert "target_angle_rad" in result["error"]


class TestCalculateErrors:
    """Failures come back as JSON, never as exceptions."""

    def test_invalid_json(self):
        result = json.loads(calculate("not valid json {"))
        assert result["success"] is False
        assert result["error"].startswith("Invalid JSON")

    def test_unknown_operation(self):
        result = _call(operation="spin")
        assert result["success"] is False
        assert "Unknown operation: spin" in result["error"]
        for op in OPERATIONS:
            assert op in result["error"]

    def test_wrong_field_type(self):
        result = _call(operation="tooth-angles", gear={"teeth": "many"})
        assert result["success"] is False
        assert result["error"]

    @pytest.mark.parametrize("payload", [
        {"operation": "tooth-angles", "gear": {"teeth": True}},
        {"operation": "verify", "parent": {"teeth": True}, "child": {"teeth": 10}},
        {"operation": "child-phase", "parent": PARENT, "child": {"teeth": False}},
    ])
    def test_boolean_teeth_rejected(self, payload):
        """JSON booleans are not read as tooth counts."""
        result = _call(**payload)
        assert result["success"] is False
        assert "boolean" in result["error"]
        assert result["angles_rad"] is None

    def test_output_model_defaults(self):
        output = BridgeOutput(success=True)
        assert output.valid is True
        assert output.messages == []
