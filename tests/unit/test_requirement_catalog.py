"""Unit tests for the requirement catalog and spec value objects."""

import pytest

from pretrip_inspection.domain.catalog import DEFAULT_CATALOG, RequirementCatalog
from pretrip_inspection.domain.value_objects.requirement_specs import (
    CheckCategory,
    CheckSpec,
    ShotCategory,
    ShotSpec,
)


class TestShotSpec:
    """Test cases for ShotSpec."""

    def test_required_always_ignores_trailer_mode(self):
        """Test an always-required shot is required in both modes."""
        shot = ShotSpec("front", "Front", "Front view", ShotCategory.TRACTOR, required_always=True)

        assert shot.is_required(False) is True
        assert shot.is_required(True) is True

    def test_trailer_shot_only_required_with_trailer(self):
        """Test a trailer shot is only required in trailer mode."""
        shot = ShotSpec("trailer_back", "Back", "Rear", ShotCategory.TRAILER, required_with_trailer=True)

        assert shot.is_required(False) is False
        assert shot.is_required(True) is True

    def test_empty_id_rejected(self):
        """Test shot id validation."""
        with pytest.raises(ValueError, match="Shot id cannot be empty"):
            ShotSpec("  ", "Front", "Front view", ShotCategory.TRACTOR)

    def test_both_flags_rejected(self):
        """Test a shot cannot be both always and trailer-only required."""
        with pytest.raises(ValueError, match="cannot be both"):
            ShotSpec("x", "X", "X", ShotCategory.TRACTOR, required_always=True, required_with_trailer=True)


class TestCheckSpec:
    """Test cases for CheckSpec."""

    def test_non_critical_never_gates(self):
        """Test non-critical checks never gate submission."""
        check = CheckSpec("wipers", "Wipers", "Wipers work", CheckCategory.SAFETY, critical=False)

        assert check.gates_submission(False) is False
        assert check.gates_submission(True) is False

    def test_trailer_only_check_gates_only_with_trailer(self):
        """Test trailer-only critical checks gate only in trailer mode."""
        check = CheckSpec("trailer_brakes", "Brakes", "Brakes", CheckCategory.TRAILER, trailer_only=True)

        assert check.gates_submission(False) is False
        assert check.gates_submission(True) is True

    def test_category_label(self):
        """Test human-readable category labels."""
        assert CheckCategory.BRAKES.get_label() == "Brake Tests"
        assert CheckCategory.TRAILER.get_label() == "Trailer Checks"


class TestRequirementCatalog:
    """Test cases for RequirementCatalog."""

    def test_default_catalog_counts_without_trailer(self):
        """Test the default catalog requires 9 shots and 12 critical checks without trailer."""
        assert len(DEFAULT_CATALOG.required_shots(False)) == 9
        assert len(DEFAULT_CATALOG.critical_checks(False)) == 12

    def test_default_catalog_counts_with_trailer(self):
        """Test trailer mode adds the coupling and trailer shots and trailer checks."""
        assert len(DEFAULT_CATALOG.required_shots(True)) == 14
        assert len(DEFAULT_CATALOG.critical_checks(True)) == 19

    def test_advisory_checks_listed_but_not_gating(self):
        """Test advisory checks stay in the checklist without blocking submission."""
        critical_ids = {check.id for check in DEFAULT_CATALOG.critical_checks(True)}
        applicable_ids = {check.id for check in DEFAULT_CATALOG.applicable_checks(False)}

        for check_id in ("clearance_lights_work", "slack_adjusters_ok", "mirrors_adjusted"):
            assert check_id in applicable_ids
            assert check_id not in critical_ids

    def test_required_shots_in_declaration_order(self):
        """Test required shots keep catalog order."""
        ids = [shot.id for shot in DEFAULT_CATALOG.required_shots(True)]

        assert ids[0] == "front"
        assert ids[8] == "dashboard"
        assert ids[9] == "air_lines"
        assert ids[-1] == "trailer_right"

    def test_required_set_recomputed_per_call(self):
        """Test requirement lists are fresh objects on every call."""
        first = DEFAULT_CATALOG.required_shots(False)
        first.clear()

        assert len(DEFAULT_CATALOG.required_shots(False)) == 9

    def test_visible_shots_hide_trailer_sections(self):
        """Test coupling and trailer shots are only shown in trailer mode."""
        hidden = {shot.category for shot in DEFAULT_CATALOG.visible_shots(False)}
        shown = {shot.category for shot in DEFAULT_CATALOG.visible_shots(True)}

        assert hidden == {ShotCategory.TRACTOR}
        assert shown == {ShotCategory.TRACTOR, ShotCategory.COUPLING, ShotCategory.TRAILER}

    def test_checks_by_category_preserves_order(self):
        """Test grouping of applicable checks."""
        grouped = DEFAULT_CATALOG.checks_by_category(False)

        assert CheckCategory.TRAILER not in grouped
        assert list(grouped)[0] == CheckCategory.LIGHTS
        assert grouped[CheckCategory.LIGHTS][0].id == "headlights_work"

    def test_shot_order_sorts_by_declaration(self):
        """Test arbitrary capture order is sorted into catalog order."""
        ordered = DEFAULT_CATALOG.shot_order(["dashboard", "mystery", "front", "air_lines", "engine"])

        assert ordered == ["front", "engine", "dashboard", "air_lines", "mystery"]

    def test_lookup(self):
        """Test lookups by id."""
        assert DEFAULT_CATALOG.get_shot("front").label == "Front View"
        assert DEFAULT_CATALOG.get_check("horn_works").critical is True
        assert DEFAULT_CATALOG.get_shot("nope") is None
        assert DEFAULT_CATALOG.has_check("nope") is False

    def test_duplicate_ids_rejected(self):
        """Test a catalog cannot declare the same shot twice."""
        shot = ShotSpec("front", "Front", "Front view", ShotCategory.TRACTOR, required_always=True)

        with pytest.raises(ValueError, match="Duplicate shot ids"):
            RequirementCatalog(shots=[shot, shot], checks=[])
