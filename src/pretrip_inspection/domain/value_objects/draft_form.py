"""Draft form value object and its field validator."""

import re
from dataclasses import dataclass, replace
from typing import Dict, Optional, Union


UNIT_NUMBER_PATTERN = re.compile(r'^[A-Za-z0-9-]+$')

MAX_DRIVER_NAME_LENGTH = 100
MAX_UNIT_NUMBER_LENGTH = 20
MAX_TRAILER_NUMBER_LENGTH = 20


@dataclass(frozen=True)
class Requester:
    """Identity of the person submitting, as reported by the host."""

    user_id: Optional[int] = None
    first_name: Optional[str] = None


@dataclass(frozen=True)
class DraftForm:
    """Immutable snapshot of the inspection form fields."""

    driver_name: str = ""
    unit_number: str = ""
    trailer_number: str = ""
    odometer: Optional[Union[int, float]] = 0

    @property
    def trailer_mode(self) -> bool:
        """A trailer is being inspected iff a trailer number is entered."""
        return bool(self.trailer_number and self.trailer_number.strip())

    def with_changes(self, **changes) -> "DraftForm":
        """Return a copy with the given fields replaced."""
        unknown = set(changes) - {"driver_name", "unit_number", "trailer_number", "odometer"}
        if unknown:
            raise ValueError(f"Unknown form fields: {', '.join(sorted(unknown))}")
        return replace(self, **changes)


class DraftFormValidator:
    """Validates form fields and reports errors per field."""

    @staticmethod
    def validate(form: DraftForm) -> Dict[str, str]:
        """Return a mapping of field name to error message; empty when valid."""
        errors: Dict[str, str] = {}

        if form.driver_name and len(form.driver_name) > MAX_DRIVER_NAME_LENGTH:
            errors["driver_name"] = f"Max {MAX_DRIVER_NAME_LENGTH} characters"

        unit_number = form.unit_number or ""
        if not unit_number:
            errors["unit_number"] = "Unit number is required"
        elif len(unit_number) > MAX_UNIT_NUMBER_LENGTH:
            errors["unit_number"] = f"Max {MAX_UNIT_NUMBER_LENGTH} characters"
        elif not UNIT_NUMBER_PATTERN.match(unit_number):
            errors["unit_number"] = "Only letters, numbers, dashes"

        if form.trailer_number and len(form.trailer_number) > MAX_TRAILER_NUMBER_LENGTH:
            errors["trailer_number"] = f"Max {MAX_TRAILER_NUMBER_LENGTH} characters"

        odometer = form.odometer
        if odometer is None or isinstance(odometer, bool) or not isinstance(odometer, (int, float)):
            errors["odometer"] = "Required"
        elif odometer < 0:
            errors["odometer"] = "Cannot be negative"

        return errors

    @classmethod
    def is_valid(cls, form: DraftForm) -> bool:
        """Check if every field satisfies its constraints."""
        return not cls.validate(form)
