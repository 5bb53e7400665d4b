"""Readiness value object produced by the completion gate."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Readiness:
    """Snapshot of how complete an inspection is."""

    required_photo_count: int
    completed_photo_count: int
    critical_check_count: int
    resolved_critical_count: int

    def __post_init__(self) -> None:
        """Validate counts."""
        if self.completed_photo_count > self.required_photo_count:
            raise ValueError("Completed photos cannot exceed required photos")
        if self.resolved_critical_count > self.critical_check_count:
            raise ValueError("Resolved checks cannot exceed critical checks")

    @property
    def all_photos_complete(self) -> bool:
        return self.completed_photo_count == self.required_photo_count

    @property
    def all_checks_complete(self) -> bool:
        return self.resolved_critical_count == self.critical_check_count

    @property
    def can_submit(self) -> bool:
        """Check if every required item is done."""
        return self.all_photos_complete and self.all_checks_complete

    @property
    def photos_remaining(self) -> int:
        return self.required_photo_count - self.completed_photo_count

    @property
    def checks_remaining(self) -> int:
        return self.critical_check_count - self.resolved_critical_count


@dataclass(frozen=True)
class CheckSummary:
    """Pass/fail/pending tally shown above the manual checks."""

    passed: int
    failed: int
    pending: int

    @property
    def has_defects(self) -> bool:
        return self.failed > 0

    @property
    def warning(self) -> str:
        """Defect warning, empty when nothing failed."""
        if not self.has_defects:
            return ""
        plural = "s" if self.failed > 1 else ""
        return f"{self.failed} defect{plural} found - vehicle may be UNSAFE"
