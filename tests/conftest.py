"""
Pytest configuration and shared fixtures for machdesign tests.
"""

import json
import pytest

from machdesign.io import (
    BearingLoadCase,
    FourBarLinkage,
    GearStage,
    GearTrain,
    PlanetaryStage,
)


# ─── Raw case dicts ──────────────────────────────────────────────────────


def _drive_case():
    """Two-stage reducer, crank-rocker and a ball bearing that meets its life."""
    return {
        "name": "Conveyor drive",
        "gear_train": {
            "stages": [
                {"kind": "external", "module_mm": 2.0, "teeth_driver": 20, "teeth_driven": 60},
                {
                    "kind": "planetary",
                    "module_mm": 1.5,
                    "sun_teeth": 24,
                    "planet_teeth": 18,
                    "ring_teeth": 60,
                    "fixed_member": "ring",
                },
            ]
        },
        "linkage": {"link_lengths": [50, 15, 50, 45]},
        "bearing": {
            "radial_force_n": 5000,
            "axial_force_n": 0,
            "x_factor": 1.0,
            "y_factor": 0.0,
            "dynamic_capacity_n": 12000,
            "bearing_type": "ball",
        },
        "speed_rpm": 1500,
        "required_life_hours": 50,
    }


@pytest.fixture
def drive_case_dict():
    """Fresh copy of a valid case dict (safe to mutate)."""
    return _drive_case()


@pytest.fixture
def drive_case_file(tmp_path):
    """Valid case written to a temporary JSON file."""
    path = tmp_path / "drive.json"
    path.write_text(json.dumps(_drive_case()))
    return path


# ─── Typed value objects ─────────────────────────────────────────────────


@pytest.fixture
def external_stage():
    """20 → 60 tooth external mesh, 3:1 reversing."""
    return GearStage(module_mm=2.0, teeth_driver=20, teeth_driven=60)


@pytest.fixture
def internal_stage():
    """20 tooth pinion in a 60 tooth ring, 3:1 same direction."""
    return GearStage(module_mm=2.0, teeth_driver=20, teeth_driven=60, kind="internal")


@pytest.fixture
def planetary_ring_fixed():
    """Standard proportions: 24 + 2 × 18 = 60, three planets."""
    return PlanetaryStage(
        module_mm=1.5, sun_teeth=24, planet_teeth=18, ring_teeth=60, fixed_member="ring"
    )


@pytest.fixture
def two_stage_train(external_stage, planetary_ring_fixed):
    return GearTrain(stages=[external_stage, planetary_ring_fixed])


@pytest.fixture
def crank_rocker():
    """Grashof crank-rocker with transmission angle inside 40°..140°."""
    return FourBarLinkage(link_lengths=(50, 15, 50, 45))


@pytest.fixture
def ball_bearing_case():
    """5 kN radial on a 10 kN ball bearing."""
    return BearingLoadCase(radial_force_n=5000, dynamic_capacity_n=10000)
