"""Check registry entity holding manual check results."""

from typing import Dict, Iterable

from ..value_objects.check_result import CheckResult


class CheckRegistry:
    """Tri-state result of each manual check, defaulting to UNCHECKED."""

    def __init__(self):
        self._results: Dict[str, CheckResult] = {}

    def get(self, check_id: str) -> CheckResult:
        return self._results.get(check_id, CheckResult.UNCHECKED)

    def toggle(self, check_id: str, target: CheckResult) -> CheckResult:
        """Toggle a check towards ``target`` and return its new result."""
        new_result = self.get(check_id).toggled(target)
        if new_result is CheckResult.UNCHECKED:
            self._results.pop(check_id, None)
        else:
            self._results[check_id] = new_result
        return new_result

    def is_resolved(self, check_id: str) -> bool:
        return self.get(check_id).is_resolved

    def resolved(self) -> Dict[str, CheckResult]:
        """All PASS/FAIL results keyed by check id."""
        return dict(self._results)

    def count(self, result: CheckResult, check_ids: Iterable[str]) -> int:
        """Count how many of the given checks currently have ``result``."""
        return sum(1 for check_id in check_ids if self.get(check_id) is result)

    def to_payload(self) -> Dict[str, bool]:
        """Collapse results to the wire format, omitting unchecked entries."""
        return {
            check_id: result.as_payload_value()
            for check_id, result in self._results.items()
            if result.is_resolved
        }

    def copy(self) -> "CheckRegistry":
        """Independent registry holding the same results."""
        snapshot = CheckRegistry()
        snapshot._results = dict(self._results)
        return snapshot

    def clear(self) -> None:
        self._results.clear()
