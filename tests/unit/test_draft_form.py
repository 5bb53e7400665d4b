"""Unit tests for DraftForm and its validator."""

import pytest

from pretrip_inspection.domain.value_objects.draft_form import DraftForm, DraftFormValidator


class TestDraftForm:
    """Test cases for DraftForm."""

    def test_trailer_mode_follows_trailer_number(self):
        """Test trailer mode is derived from the trailer number."""
        assert DraftForm().trailer_mode is False
        assert DraftForm(trailer_number="   ").trailer_mode is False
        assert DraftForm(trailer_number="TRL-9").trailer_mode is True

    def test_with_changes_returns_new_form(self):
        """Test updating fields yields a new immutable form."""
        form = DraftForm(unit_number="A1")
        updated = form.with_changes(trailer_number="T1")

        assert form.trailer_mode is False
        assert updated.trailer_mode is True
        assert updated.unit_number == "A1"

    def test_with_changes_rejects_unknown_fields(self):
        """Test only known fields can be changed."""
        with pytest.raises(ValueError, match="Unknown form fields: color"):
            DraftForm().with_changes(color="red")


class TestDraftFormValidator:
    """Test cases for DraftFormValidator."""

    def test_valid_form(self):
        """Test a complete form has no errors."""
        form = DraftForm(driver_name="Sam", unit_number="TRK-101", odometer=0)

        assert DraftFormValidator.validate(form) == {}
        assert DraftFormValidator.is_valid(form) is True

    def test_unit_number_required(self):
        """Test a missing unit number is reported."""
        errors = DraftFormValidator.validate(DraftForm(odometer=10))

        assert errors == {"unit_number": "Unit number is required"}

    def test_unit_number_pattern(self):
        """Test unit numbers only allow letters, numbers and dashes."""
        invalid_numbers = ["TRK 101", "TRK_101", "TRK#1"]

        for unit_number in invalid_numbers:
            errors = DraftFormValidator.validate(DraftForm(unit_number=unit_number, odometer=1))
            assert errors["unit_number"] == "Only letters, numbers, dashes"

    def test_length_limits(self):
        """Test maximum lengths of text fields."""
        form = DraftForm(driver_name="x" * 101, unit_number="A" * 21, trailer_number="T" * 21, odometer=1)

        errors = DraftFormValidator.validate(form)

        assert set(errors) == {"driver_name", "unit_number", "trailer_number"}

    def test_odometer_constraints(self):
        """Test odometer must be present and non-negative."""
        assert DraftFormValidator.validate(DraftForm(unit_number="A1", odometer=-1)) == {
            "odometer": "Cannot be negative"
        }
        assert DraftFormValidator.validate(DraftForm(unit_number="A1", odometer=None)) == {
            "odometer": "Required"
        }
