"""Submission outcome value objects."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class UploadedAsset:
    """A captured asset that now lives on the remote service."""

    shot_id: str
    remote_location: str

    def to_payload(self) -> dict:
        return {"shotType": self.shot_id, "imageUrl": self.remote_location}


@dataclass(frozen=True)
class SubmissionSuccess:
    """Report was created by the remote service."""

    report_id: str
    safety_status: str
    report_url: str

    @property
    def is_success(self) -> bool:
        return True


@dataclass(frozen=True)
class SubmissionFailure:
    """A network stage of the submission failed."""

    stage: str
    message: str

    def __post_init__(self) -> None:
        """Validate failure stage."""
        if self.stage not in ("upload", "submit"):
            raise ValueError(f"Unknown failure stage: {self.stage}")

    @property
    def is_success(self) -> bool:
        return False


SubmissionOutcome = Union[SubmissionSuccess, SubmissionFailure]
