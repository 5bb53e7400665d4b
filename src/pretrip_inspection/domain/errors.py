"""Error taxonomy for the inspection submission workflow."""

from typing import Dict, Optional


class InspectionWorkflowError(Exception):
    """Base class for all workflow errors."""


class ValidationFailure(InspectionWorkflowError):
    """Local form fields failed their constraints."""

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        fields = ", ".join(sorted(self.errors))
        super().__init__(f"Invalid form fields: {fields}")


class ReadinessFailure(InspectionWorkflowError):
    """Submit was requested before every required item was completed."""

    def __init__(self, photos_remaining: int, checks_remaining: int):
        self.photos_remaining = photos_remaining
        self.checks_remaining = checks_remaining
        parts = []
        if photos_remaining:
            parts.append(f"{photos_remaining} photos remaining")
        if checks_remaining:
            parts.append(f"{checks_remaining} checks remaining")
        super().__init__("Not ready: " + ", ".join(parts))


class UploadFailure(InspectionWorkflowError):
    """A single asset upload did not succeed."""

    stage = "upload"

    def __init__(self, index: int, status_code: Optional[int], detail: str = ""):
        self.index = index
        self.status_code = status_code
        if status_code is not None:
            message = f"Upload failed: {status_code}"
        else:
            message = f"Upload failed: {detail or 'network error'}"
        super().__init__(message)


class CreationFailure(InspectionWorkflowError):
    """The report creation call failed or returned a malformed body."""

    stage = "submit"

    def __init__(self, status_code: Optional[int], message: Optional[str] = None):
        self.status_code = status_code
        if message is None:
            message = f"Submit failed: {status_code}"
        super().__init__(message)


class WorkflowTerminalError(InspectionWorkflowError):
    """The inspection was already submitted from this session."""

    def __init__(self) -> None:
        super().__init__("Inspection already submitted")
