"""
Tests for gear pair validation rules.
"""

import math
import pytest

from gearphase.calculator.validation import (
    Severity,
    ValidationMessage,
    ValidationResult,
    validate_mesh,
)


def _codes(result: ValidationResult):
    return [m.code for m in result.messages]


class TestValidationResult:
    """Tests for the ValidationResult container."""

    def test_filters_by_severity(self):
        result = ValidationResult(valid=False, messages=[
            ValidationMessage(Severity.ERROR, "E1", "error one"),
            ValidationMessage(Severity.WARNING, "W1", "warning one"),
            ValidationMessage(Severity.INFO, "I1", "info one"),
            ValidationMessage(Severity.ERROR, "E2", "error two"),
        ])

        assert [m.code for m in result.errors] == ["E1", "E2"]
        assert [m.code for m in result.warnings] == ["W1"]
        assert [m.code for m in result.infos] == ["I1"]

    def test_empty(self):
        result = ValidationResult(valid=True)
        assert result.messages == []
        assert result.errors == []


class TestValidateMeshTeeth:
    """Tooth count checks."""

    def test_invalid_parent(self):
        result = validate_mesh(0, 10, 0.0, 0.0, 0.0)
        assert result.valid is False
        assert _codes(result) == ["PARENT_TEETH_INVALID"]
        assert "parent_teeth" in result.errors[0].message

    def test_invalid_child(self):
        result = validate_mesh(20, 2.5, 0.0, 0.0, 0.0)
        assert result.valid is False
        assert _codes(result) == ["CHILD_TEETH_INVALID"]

    def test_both_invalid_reported_together(self):
        """Every tooth count problem is reported, mesh checks are skipped."""
        result = validate_mesh(-1, 0, 0.0, 0.0, 0.0)
        assert _codes(result) == ["PARENT_TEETH_INVALID", "CHILD_TEETH_INVALID"]

    def test_invalid_teeth_has_suggestion(self):
        result = validate_mesh(0, 10, 0.0, 0.0, 0.0)
        assert result.errors[0].suggestion is not None

    def test_does_not_raise(self):
        result = validate_mesh("twenty", None, 0.0, 0.0, 0.0)
        assert result.valid is False
        assert len(result.errors) == 2


class TestValidateMeshInterleave:
    """Interleaving checks."""

    def test_meshed_pair(self, meshed_pair):
        result = validate_mesh(*meshed_pair)
        assert result.valid is True
        assert _codes(result) == ["MESH_INTERLEAVED"]
        assert result.infos[0].message == "Parent tooth meets child gap at the contact point"

    def test_tooth_on_tooth(self, tooth_on_tooth_pair):
        result = validate_mesh(*tooth_on_tooth_pair)
        assert result.valid is False
        assert _codes(result) == ["MESH_TOOTH_ON_TOOTH"]

    def test_gap_on_gap(self, gap_on_gap_pair):
        result = validate_mesh(*gap_on_gap_pair)
        assert result.valid is False
        assert _codes(result) == ["MESH_GAP_ON_GAP"]

    def test_suggestion_gives_child_half_pitch(self, tooth_on_tooth_pair):
        result = validate_mesh(*tooth_on_tooth_pair)
        assert "18.00°" in result.errors[0].suggestion

    def test_ambiguous_accepted(self, ambiguous_pair):
        result = validate_mesh(*ambiguous_pair)
        assert result.valid is True
        assert _codes(result) == ["MESH_AMBIGUOUS"]
        assert result.infos[0].severity is Severity.INFO
        assert "parent gear" in result.infos[0].message

    def test_agrees_with_verify(self):
        from gearphase.core.mesh_alignment import verify_mesh_alignment

        for child_rotation in (0.0, math.pi / 10, math.pi / 20, 0.3, 1.7):
            args = (20, 10, 0.0, 0.0, child_rotation)
            assert validate_mesh(*args).valid == verify_mesh_alignment(*args)
