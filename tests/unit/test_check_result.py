"""Unit tests for the tri-state check result and the check registry."""

import pytest

from pretrip_inspection.domain.entities.check_registry import CheckRegistry
from pretrip_inspection.domain.value_objects.check_result import CheckResult


class TestCheckResult:
    """Test cases for the CheckResult transition table."""

    def test_unchecked_to_resolved(self):
        """Test pressing a button on an unchecked item sets it."""
        assert CheckResult.UNCHECKED.toggled(CheckResult.PASS) is CheckResult.PASS
        assert CheckResult.UNCHECKED.toggled(CheckResult.FAIL) is CheckResult.FAIL

    def test_pressing_active_button_clears(self):
        """Test toggling to the current value returns to unchecked."""
        assert CheckResult.PASS.toggled(CheckResult.PASS) is CheckResult.UNCHECKED
        assert CheckResult.FAIL.toggled(CheckResult.FAIL) is CheckResult.UNCHECKED

    def test_switch_between_pass_and_fail(self):
        """Test toggling to the other resolved value switches directly."""
        assert CheckResult.PASS.toggled(CheckResult.FAIL) is CheckResult.FAIL
        assert CheckResult.FAIL.toggled(CheckResult.PASS) is CheckResult.PASS

    def test_cannot_toggle_to_unchecked(self):
        """Test unchecked is not a valid toggle target."""
        with pytest.raises(ValueError, match="Cannot toggle"):
            CheckResult.PASS.toggled(CheckResult.UNCHECKED)

    def test_payload_values(self):
        """Test resolved results collapse to booleans."""
        assert CheckResult.PASS.as_payload_value() is True
        assert CheckResult.FAIL.as_payload_value() is False
        with pytest.raises(ValueError):
            CheckResult.UNCHECKED.as_payload_value()


class TestCheckRegistry:
    """Test cases for CheckRegistry."""

    def test_default_is_unchecked(self):
        """Test unknown checks read as unchecked."""
        registry = CheckRegistry()

        assert registry.get("horn_works") is CheckResult.UNCHECKED
        assert registry.is_resolved("horn_works") is False

    def test_toggle_cycle(self):
        """Test X -> X' -> unchecked cycling."""
        registry = CheckRegistry()

        assert registry.toggle("horn_works", CheckResult.PASS) is CheckResult.PASS
        assert registry.toggle("horn_works", CheckResult.FAIL) is CheckResult.FAIL
        assert registry.toggle("horn_works", CheckResult.FAIL) is CheckResult.UNCHECKED
        assert registry.resolved() == {}

    def test_payload_omits_unchecked(self):
        """Test unchecked entries never appear in the payload."""
        registry = CheckRegistry()
        registry.toggle("a", CheckResult.PASS)
        registry.toggle("b", CheckResult.FAIL)
        registry.toggle("c", CheckResult.PASS)
        registry.toggle("c", CheckResult.PASS)

        assert registry.to_payload() == {"a": True, "b": False}

    def test_count(self):
        """Test counting results among a set of ids."""
        registry = CheckRegistry()
        registry.toggle("a", CheckResult.PASS)
        registry.toggle("b", CheckResult.FAIL)

        assert registry.count(CheckResult.PASS, ["a", "b", "c"]) == 1
        assert registry.count(CheckResult.UNCHECKED, ["a", "b", "c"]) == 1
