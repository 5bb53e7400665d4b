"""Shot and manual check requirement value objects."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple


class ShotCategory(Enum):
    """Area of the vehicle a photo shot documents."""

    TRACTOR = "tractor"
    COUPLING = "coupling"
    TRAILER = "trailer"


class CheckCategory(Enum):
    """Grouping of manual checks."""

    LIGHTS = "lights"
    BRAKES = "brakes"
    STEERING = "steering"
    SAFETY = "safety"
    TRAILER = "trailer"

    def get_label(self) -> str:
        """Get human-readable section label."""
        labels = {
            self.LIGHTS: "Lights Test",
            self.BRAKES: "Brake Tests",
            self.STEERING: "Steering & Wheels",
            self.SAFETY: "Safety Equipment",
            self.TRAILER: "Trailer Checks",
        }
        return labels.get(self, self.value)


@dataclass(frozen=True)
class ShotSpec:
    """Immutable definition of one photographic evidence item."""

    id: str
    label: str
    description: str
    category: ShotCategory
    required_always: bool = False
    required_with_trailer: bool = False
    tips: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Validate shot definition."""
        if not self.id or not self.id.strip():
            raise ValueError("Shot id cannot be empty")
        if not isinstance(self.category, ShotCategory):
            raise ValueError("category must be a ShotCategory enum")
        if self.required_always and self.required_with_trailer:
            raise ValueError(f"Shot {self.id} cannot be both always and trailer-only required")

    def is_required(self, trailer_mode: bool) -> bool:
        """Check if this shot is required for the given trailer mode."""
        return self.required_always or (trailer_mode and self.required_with_trailer)


@dataclass(frozen=True)
class CheckSpec:
    """Immutable definition of one manual pass/fail check."""

    id: str
    label: str
    description: str
    category: CheckCategory
    critical: bool = True
    trailer_only: bool = False

    def __post_init__(self) -> None:
        """Validate check definition."""
        if not self.id or not self.id.strip():
            raise ValueError("Check id cannot be empty")
        if not isinstance(self.category, CheckCategory):
            raise ValueError("category must be a CheckCategory enum")

    def is_applicable(self, trailer_mode: bool) -> bool:
        """Check if this check is shown for the given trailer mode."""
        return trailer_mode or not self.trailer_only

    def gates_submission(self, trailer_mode: bool) -> bool:
        """Check if this check must be resolved before submitting."""
        return self.critical and self.is_applicable(trailer_mode)
