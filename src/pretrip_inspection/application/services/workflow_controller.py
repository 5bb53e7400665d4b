"""Workflow controller driving an inspection from draft to submitted report."""

import asyncio
from enum import Enum
from typing import Callable, List, Optional

from ..ports.host_bridge import Feedback, HostBridge
from ..ports.inspection_gateway import InspectionGateway
from .completion_gate import CompletionGate
from .submission_client import SubmissionClient
from .upload_orchestrator import UploadOrchestrator
from ...domain.entities.check_registry import CheckRegistry
from ...domain.entities.inspection_session import InspectionSession
from ...domain.entities.photo_registry import CapturedAsset
from ...domain.errors import ReadinessFailure, UploadFailure, ValidationFailure, WorkflowTerminalError
from ...domain.value_objects.check_result import CheckResult
from ...domain.value_objects.draft_form import DraftForm, DraftFormValidator
from ...domain.value_objects.readiness import CheckSummary, Readiness
from ...domain.value_objects.submission_outcome import (
    SubmissionFailure,
    SubmissionOutcome,
    SubmissionSuccess,
)
from ...infrastructure.host_bridge import NullHostBridge
from ...infrastructure.logging import (
    clear_correlation_id,
    generate_correlation_id,
    get_correlation_id,
    get_logger,
    log_business_rule_violation,
    log_submission_outcome,
    set_correlation_id,
)


PROGRESS_ANALYZING = "analyzing"
PROGRESS_COMPLETE = "complete"
SUBMISSION_CANCELLED = "Submission cancelled"


class WorkflowState(Enum):
    """Submission workflow states."""
    IDLE = "idle"
    UPLOADING = "uploading"
    CREATING = "creating"
    SUBMITTED = "submitted"
    FAILED = "failed"

    @property
    def is_in_flight(self) -> bool:
        return self in (WorkflowState.UPLOADING, WorkflowState.CREATING)


class WorkflowController:
    """State machine tying the session, gate, uploads and report creation together.

    IDLE -> UPLOADING -> CREATING -> SUBMITTED, with any network failure
    landing in FAILED. A submit from FAILED restarts from the first upload.
    SUBMITTED is terminal.
    """

    def __init__(
        self,
        session: InspectionSession,
        gateway: InspectionGateway,
        host_bridge: Optional[HostBridge] = None,
        progress_listener: Optional[Callable[[str], None]] = None
    ):
        self._session = session
        self._host = host_bridge or NullHostBridge()
        self._gate = CompletionGate(session.catalog)
        self._orchestrator = UploadOrchestrator(gateway)
        self._client = SubmissionClient(gateway)
        self._progress_listener = progress_listener
        self._state = WorkflowState.IDLE
        self._progress = ""
        self._outcome: Optional[SubmissionOutcome] = None
        self._attempts = 0
        self._logger = get_logger(__name__)

    @property
    def session(self) -> InspectionSession:
        return self._session

    @property
    def state(self) -> WorkflowState:
        return self._state

    @property
    def progress(self) -> str:
        return self._progress

    @property
    def outcome(self) -> Optional[SubmissionOutcome]:
        return self._outcome

    @property
    def attempts(self) -> int:
        return self._attempts

    @property
    def is_submitting(self) -> bool:
        return self._state.is_in_flight

    def readiness(self) -> Readiness:
        """Evaluate readiness against the current session state."""
        return self._gate.evaluate(self._session.trailer_mode, self._session.photos, self._session.checks)

    def check_summary(self) -> CheckSummary:
        return self._gate.summarize_checks(self._session.trailer_mode, self._session.checks)

    def can_submit(self) -> bool:
        return self._state is not WorkflowState.SUBMITTED and self.readiness().can_submit

    def capture_photo(self, shot_id: str, content: bytes, filename: str = "photo.jpg",
                      content_type: str = "image/jpeg") -> CapturedAsset:
        asset = self._session.capture_photo(shot_id, content, filename, content_type)
        self._host.notify(Feedback.LIGHT)
        return asset

    def remove_photo(self, shot_id: str) -> bool:
        removed = self._session.remove_photo(shot_id)
        self._host.notify(Feedback.LIGHT)
        return removed

    def toggle_check(self, check_id: str, target: CheckResult) -> CheckResult:
        result = self._session.toggle_check(check_id, target)
        self._host.notify(Feedback.LIGHT)
        return result

    def ordered_assets(self) -> List[CapturedAsset]:
        """Every captured asset, sorted by shot declaration order."""
        photos = self._session.photos
        return [photos.get(shot_id) for shot_id in self._session.catalog.shot_order(photos.shot_ids)]

    async def submit(self) -> Optional[SubmissionOutcome]:
        """Run one submission attempt.

        Returns:
            The attempt's outcome, or None when an attempt is already in flight

        Raises:
            WorkflowTerminalError: If the report was already submitted
            ValidationFailure: If form fields are invalid
            ReadinessFailure: If required photos or checks are missing
        """
        if self._state.is_in_flight:
            self._logger.info("Submit ignored: submission already in progress")
            return None

        if self._state is WorkflowState.SUBMITTED:
            log_business_rule_violation(self._logger, "terminal_submission", "inspection already submitted")
            raise WorkflowTerminalError()

        form = self._session.form
        errors = DraftFormValidator.validate(form)
        if errors:
            self._host.notify(Feedback.ERROR)
            log_business_rule_violation(self._logger, "form_validation", ", ".join(sorted(errors)))
            raise ValidationFailure(errors)

        readiness = self.readiness()
        if not readiness.can_submit:
            self._host.notify(Feedback.ERROR)
            failure = ReadinessFailure(readiness.photos_remaining, readiness.checks_remaining)
            log_business_rule_violation(self._logger, "submit_readiness", str(failure))
            raise failure

        owns_correlation_id = get_correlation_id() is None
        if owns_correlation_id:
            set_correlation_id(generate_correlation_id())
        try:
            return await self._run_attempt(form, self._session.checks.copy())
        finally:
            if owns_correlation_id:
                clear_correlation_id()

    async def _run_attempt(self, form: DraftForm, checks: CheckRegistry) -> SubmissionOutcome:
        self._attempts += 1
        if self._state == WorkflowState.FAILED:
            self._logger.warning(
                "Retrying submission; all photos will be uploaded again",
                extra={"session_id": str(self._session.id), "attempt": self._attempts}
            )
        self._outcome = None
        self._state = WorkflowState.UPLOADING
        self._host.notify(Feedback.LIGHT)

        session = self._session
        assets = self.ordered_assets()
        self._logger.info(
            f"Submission attempt {self._attempts} started with {len(assets)} photos",
            extra={"session_id": str(session.id), "attempt": self._attempts}
        )

        try:
            uploaded = await self._orchestrator.upload(assets, on_progress=self._set_progress)
        except UploadFailure as e:
            log_submission_outcome(self._logger, False, "upload", str(e), upload_index=e.index)
            return self._fail(SubmissionFailure(stage="upload", message=str(e)))
        except asyncio.CancelledError:
            self._fail(SubmissionFailure(stage="upload", message=SUBMISSION_CANCELLED))
            raise
        except Exception:
            self._fail(SubmissionFailure(stage="upload", message="Unexpected error"))
            raise

        self._state = WorkflowState.CREATING
        self._set_progress(PROGRESS_ANALYZING)

        try:
            outcome = await self._client.create_report(
                form,
                form.trailer_mode,
                uploaded,
                checks,
                session.requester
            )
        except asyncio.CancelledError:
            self._fail(SubmissionFailure(stage="submit", message=SUBMISSION_CANCELLED))
            raise
        except Exception:
            self._fail(SubmissionFailure(stage="submit", message="Unexpected error"))
            raise

        if isinstance(outcome, SubmissionFailure):
            return self._fail(outcome)

        return self._succeed(outcome, form)

    def _succeed(self, outcome: SubmissionSuccess, form: DraftForm) -> SubmissionSuccess:
        self._state = WorkflowState.SUBMITTED
        self._outcome = outcome
        self._set_progress(PROGRESS_COMPLETE)
        self._host.send_result({
            "inspectionId": outcome.report_id,
            "vehicleUnitNumber": form.unit_number,
            "safetyStatus": outcome.safety_status,
            "pdfUrl": outcome.report_url,
        })
        self._host.notify(Feedback.SUCCESS)
        return outcome

    def _fail(self, failure: SubmissionFailure) -> SubmissionFailure:
        self._state = WorkflowState.FAILED
        self._outcome = failure
        self._set_progress(failure.message)
        self._host.notify(Feedback.ERROR)
        return failure

    def _set_progress(self, message: str) -> None:
        self._progress = message
        if self._progress_listener is not None:
            self._progress_listener(message)
