"""
Tests for value objects and JSON case files.
"""

import json
import pytest

from machdesign.enums import BearingType, FixedMember, StageKind
from machdesign.io import (
    SCHEMA_VERSION,
    BearingLifeResult,
    DesignCase,
    FourBarLinkage,
    GearStage,
    GearTrain,
    GearTrainResult,
    PlanetaryStage,
    load_case_json,
    save_case_json,
)


class TestLoadCaseJson:
    """Tests for load_case_json function."""

    def test_load_valid_json(self, drive_case_file):
        case = load_case_json(drive_case_file)

        assert isinstance(case, DesignCase)
        assert case.name == "Conveyor drive"
        assert case.speed_rpm == 1500
        assert case.reliability_percent == 90

    def test_stages_dispatched_by_kind(self, drive_case_file):
        stages = load_case_json(drive_case_file).gear_train.stages

        assert isinstance(stages[0], GearStage)
        assert stages[0].kind == StageKind.EXTERNAL
        assert isinstance(stages[1], PlanetaryStage)
        assert stages[1].fixed_member == FixedMember.RING
        assert stages[1].num_planets == 3

    def test_linkage_and_bearing(self, drive_case_file):
        case = load_case_json(drive_case_file)

        assert case.linkage.link_lengths == (50.0, 15.0, 50.0, 45.0)
        assert case.linkage.crank == 15.0
        assert case.bearing.bearing_type == BearingType.BALL
        assert case.bearing.life_exponent is None

    def test_case_wrapper(self, tmp_path, drive_case_dict):
        path = tmp_path / "wrapped.json"
        path.write_text(json.dumps({"case": drive_case_dict}))

        assert load_case_json(path).name == "Conveyor drive"

    def test_single_section(self, tmp_path):
        path = tmp_path / "linkage.json"
        path.write_text(json.dumps({"linkage": {"link_lengths": [50, 15, 50, 45]}}))
        case = load_case_json(path)

        assert case.gear_train is None
        assert case.bearing is None

    def test_enum_values_case_insensitive(self, tmp_path, drive_case_dict):
        drive_case_dict["gear_train"]["stages"][1]["kind"] = "Planetary"
        drive_case_dict["gear_train"]["stages"][1]["fixed_member"] = "RING"
        drive_case_dict["bearing"]["bearing_type"] = "Roller"
        path = tmp_path / "caps.json"
        path.write_text(json.dumps(drive_case_dict))
        case = load_case_json(path)

        assert case.gear_train.stages[1].fixed_member == FixedMember.RING
        assert case.bearing.bearing_type == BearingType.ROLLER

    def test_unknown_fields_ignored(self, tmp_path, drive_case_dict):
        drive_case_dict["notes"] = "prototype"
        drive_case_dict["bearing"]["designation"] = "6205"
        path = tmp_path / "extra.json"
        path.write_text(json.dumps(drive_case_dict))

        assert load_case_json(path).bearing.dynamic_capacity_n == 12000

    def test_load_nonexistent_file(self):
        with pytest.raises(FileNotFoundError):
            load_case_json("nonexistent.json")

    def test_load_invalid_json(self, tmp_path):
        path = tmp_path / "invalid.json"
        path.write_text("not valid json {")

        with pytest.raises(ValueError):
            load_case_json(path)

    def test_root_must_be_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2, 3]")

        with pytest.raises(ValueError, match="root must be an object"):
            load_case_json(path)

    def test_no_sections(self, tmp_path):
        path = tmp_path / "empty.json"
        path.write_text(json.dumps({"name": "nothing"}))

        with pytest.raises(ValueError, match="at least one"):
            load_case_json(path)

    def test_unknown_fixed_member(self, tmp_path, drive_case_dict):
        drive_case_dict["gear_train"]["stages"][1]["fixed_member"] = "planet"
        path = tmp_path / "bad.json"
        path.write_text(json.dumps(drive_case_dict))

        with pytest.raises(ValueError):
            load_case_json(path)

    def test_wrong_number_of_links(self, tmp_path):
        path = tmp_path / "three.json"
        path.write_text(json.dumps({"linkage": {"link_lengths": [50, 15, 50]}}))

        with pytest.raises(ValueError):
            load_case_json(path)


class TestSaveCaseJson:

    def test_save_and_load(self, tmp_path, drive_case_file):
        case = load_case_json(drive_case_file)
        out = tmp_path / "saved.json"
        save_case_json(case, out)

        assert load_case_json(out) == case

    def test_saved_content(self, tmp_path, drive_case_file):
        out = tmp_path / "saved.json"
        save_case_json(load_case_json(drive_case_file), out)
        data = json.loads(out.read_text())

        assert data["schema_version"] == SCHEMA_VERSION
        assert data["gear_train"]["stages"][1]["fixed_member"] == "ring"
        assert data["bearing"]["bearing_type"] == "ball"
        # None fields are left out
        assert "life_exponent" not in data["bearing"]


class TestValueObjects:
    """Models are immutable and carry derived properties."""

    def test_stage_is_frozen(self, external_stage):
        with pytest.raises((TypeError, ValueError)):
            external_stage.teeth_driver = 30

    def test_case_is_frozen(self, crank_rocker):
        case = DesignCase(linkage=crank_rocker)

        with pytest.raises((TypeError, ValueError)):
            case.name = "renamed"

    def test_linkage_roles(self):
        linkage = FourBarLinkage(link_lengths=(40, 10, 35, 30))

        assert (linkage.ground, linkage.crank, linkage.coupler, linkage.rocker) == (40, 10, 35, 30)

    def test_train_accepts_model_instances(self, external_stage, planetary_ring_fixed):
        train = GearTrain(stages=[external_stage, planetary_ring_fixed])

        assert isinstance(train.stages[1], PlanetaryStage)
        assert train.stages[1] == planetary_ring_fixed

    def test_default_stage_kind(self):
        assert GearStage(module_mm=1.0, teeth_driver=20, teeth_driven=40).kind == StageKind.EXTERNAL

    def test_signed_ratio(self):
        result = GearTrainResult(
            overall_ratio=3.0, direction=-1, stage_ratios=(3.0,), stage_directions=(-1,)
        )

        assert result.signed_ratio == -3.0

    @pytest.mark.parametrize("margin,meets", [(None, None), (1.0, True), (0.99, False), (2.5, True)])
    def test_meets_requirement(self, margin, meets):
        result = BearingLifeResult(
            equivalent_load_n=5000, l10_revolutions=8e6, l10_hours=88.9, load_ratio=2.0,
            reliability_percent=90, adjusted_life_hours=88.9, safety_margin=margin
        )

        assert result.meets_requirement is meets
