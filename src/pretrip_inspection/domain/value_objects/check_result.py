"""Tri-state manual check result."""

from enum import Enum


class CheckResult(Enum):
    """Result of a manual check."""

    UNCHECKED = "unchecked"
    PASS = "pass"
    FAIL = "fail"

    @property
    def is_resolved(self) -> bool:
        """Check if the result is PASS or FAIL."""
        return self is not CheckResult.UNCHECKED

    def toggled(self, target: "CheckResult") -> "CheckResult":
        """Apply a toggle towards ``target`` and return the new result.

        Pressing the button of the current result clears it, pressing the
        other button switches directly.
        """
        if target not in _TOGGLE_TABLE[self]:
            raise ValueError(f"Cannot toggle a check to {target.value}")
        return _TOGGLE_TABLE[self][target]

    def as_payload_value(self) -> bool:
        """Collapse a resolved result to its boolean wire value."""
        if not self.is_resolved:
            raise ValueError("Unchecked results have no payload value")
        return self is CheckResult.PASS


_TOGGLE_TABLE = {
    CheckResult.UNCHECKED: {
        CheckResult.PASS: CheckResult.PASS,
        CheckResult.FAIL: CheckResult.FAIL,
    },
    CheckResult.PASS: {
        CheckResult.PASS: CheckResult.UNCHECKED,
        CheckResult.FAIL: CheckResult.FAIL,
    },
    CheckResult.FAIL: {
        CheckResult.PASS: CheckResult.PASS,
        CheckResult.FAIL: CheckResult.UNCHECKED,
    },
}
