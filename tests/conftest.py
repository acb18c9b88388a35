"""
Pytest configuration and shared fixtures for gearphase tests.
"""

import json
import math
import pytest


# ─── Gear pairs as (parent_teeth, child_teeth, mesh_angle, parent_rotation, child_rotation) ───


@pytest.fixture
def meshed_pair():
    """20-tooth parent with a tooth at the contact point, 10-tooth child with a gap facing it."""
    return (20, 10, 0.0, 0.0, math.pi / 10)


@pytest.fixture
def tooth_on_tooth_pair():
    """Both gears present a tooth at the contact point."""
    return (20, 10, 0.0, 0.0, 0.0)


@pytest.fixture
def gap_on_gap_pair():
    """Both gears present a gap at the contact point."""
    return (20, 10, 0.0, math.pi / 20, math.pi / 10)


@pytest.fixture
def ambiguous_pair():
    """4-tooth parent whose contact point is midway between a tooth and a gap."""
    return (4, 10, math.pi / 8, 0.0, 0.0)


# ─── Mesh JSON documents ─────────────────────────────────────────────────


@pytest.fixture
def sample_mesh_dict():
    """Raw mesh document for the meshed 20/10 pair."""
    return _mesh_dict()


@pytest.fixture
def temp_mesh_file(tmp_path, sample_mesh_dict):
    """Mesh document written to a temporary JSON file."""
    path = tmp_path / "pair.json"
    path.write_text(json.dumps(sample_mesh_dict))
    return path


# ─── Helper functions (no pytest dependency) ──────────────────────────────


def _mesh_dict():
    """Return raw mesh dict for the meshed 20/10 pair."""
    return {
        "schema_version": "1.0",
        "parent": {"teeth": 20, "rotation_rad": 0.0},
        "child": {"teeth": 10, "rotation_rad": math.pi / 10},
        "mesh_angle_rad": 0.0,
    }
