"""Completion gate deciding whether an inspection can be submitted."""

from typing import List

from ...domain.catalog import DEFAULT_CATALOG, RequirementCatalog
from ...domain.entities.check_registry import CheckRegistry
from ...domain.entities.photo_registry import PhotoRegistry
from ...domain.value_objects.check_result import CheckResult
from ...domain.value_objects.readiness import CheckSummary, Readiness


class CompletionGate:
    """Pure evaluation of submit-readiness.

    Nothing is cached: the required sets depend on the trailer mode, so every
    call recomputes them from the catalog and the current registries.
    """

    def __init__(self, catalog: RequirementCatalog = DEFAULT_CATALOG):
        self._catalog = catalog

    def evaluate(
        self,
        trailer_mode: bool,
        photo_registry: PhotoRegistry,
        check_registry: CheckRegistry
    ) -> Readiness:
        """Count required and completed items for the given state."""
        required_shots = self._catalog.required_shots(trailer_mode)
        critical_checks = self._catalog.critical_checks(trailer_mode)

        return Readiness(
            required_photo_count=len(required_shots),
            completed_photo_count=sum(1 for shot in required_shots if photo_registry.has(shot.id)),
            critical_check_count=len(critical_checks),
            resolved_critical_count=sum(1 for check in critical_checks if check_registry.is_resolved(check.id)),
        )

    def missing_shots(self, trailer_mode: bool, photo_registry: PhotoRegistry) -> List[str]:
        """Ids of required shots that have no photo yet."""
        return [
            shot.id for shot in self._catalog.required_shots(trailer_mode)
            if not photo_registry.has(shot.id)
        ]

    def unresolved_checks(self, trailer_mode: bool, check_registry: CheckRegistry) -> List[str]:
        """Ids of critical checks still unchecked."""
        return [
            check.id for check in self._catalog.critical_checks(trailer_mode)
            if not check_registry.is_resolved(check.id)
        ]

    def summarize_checks(self, trailer_mode: bool, check_registry: CheckRegistry) -> CheckSummary:
        """Tally passed and failed checks among those shown, and pending critical ones."""
        applicable = [check.id for check in self._catalog.applicable_checks(trailer_mode)]
        return CheckSummary(
            passed=check_registry.count(CheckResult.PASS, applicable),
            failed=check_registry.count(CheckResult.FAIL, applicable),
            pending=len(self.unresolved_checks(trailer_mode, check_registry)),
        )
