"""Pydantic schemas for inspection session API requests and responses."""

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional, Union
from uuid import UUID

from pydantic import BaseModel, Field

from ....application.services.workflow_controller import WorkflowController
from ....domain.catalog import RequirementCatalog
from ....domain.value_objects.submission_outcome import SubmissionSuccess


class CreateSessionRequest(BaseModel):
    """Request model for opening an inspection session."""
    telegram_id: Optional[int] = Field(None, description="Host user id, if known")
    first_name: Optional[str] = Field(None, max_length=100, description="Host user display name")


class UpdateFormRequest(BaseModel):
    """Request model for changing form fields; omitted fields are left as is."""
    driver_name: Optional[str] = None
    unit_number: Optional[str] = None
    trailer_number: Optional[str] = None
    odometer: Optional[Union[int, float]] = None


class ToggleCheckRequest(BaseModel):
    """Request model for pressing a check's OK or Defect button."""
    target: Literal["pass", "fail"]


class ShotResponse(BaseModel):
    id: str
    label: str
    description: str
    category: str
    required_always: bool
    required_with_trailer: bool
    tips: List[str]


class CheckResponse(BaseModel):
    id: str
    label: str
    description: str
    category: str
    category_label: str
    critical: bool
    trailer_only: bool


class CatalogResponse(BaseModel):
    """Response model for the requirement catalog."""
    shots: List[ShotResponse]
    checks: List[CheckResponse]


class FormResponse(BaseModel):
    driver_name: Optional[str]
    unit_number: Optional[str]
    trailer_number: Optional[str]
    odometer: Optional[Union[int, float]]


class ReadinessResponse(BaseModel):
    required_photo_count: int
    completed_photo_count: int
    critical_check_count: int
    resolved_critical_count: int
    photos_remaining: int
    checks_remaining: int
    can_submit: bool


class CheckSummaryResponse(BaseModel):
    passed: int
    failed: int
    pending: int
    warning: str


class PhotoResponse(BaseModel):
    shot_id: str
    preview_handle: str
    filename: str
    content_type: str
    size: int
    captured_at: datetime


class OutcomeResponse(BaseModel):
    success: bool
    stage: Optional[str] = None
    message: Optional[str] = None
    inspection_id: Optional[str] = None
    safety_status: Optional[str] = None
    pdf_url: Optional[str] = None


class SessionStateResponse(BaseModel):
    """Response model describing everything the UI renders for a session."""
    id: UUID
    form: FormResponse
    trailer_mode: bool
    visible_shots: List[str]
    required_shots: List[str]
    photos: List[PhotoResponse]
    checks: Dict[str, str]
    readiness: ReadinessResponse
    check_summary: CheckSummaryResponse
    state: str
    progress: str
    attempts: int
    outcome: Optional[OutcomeResponse]


class HostEventsResponse(BaseModel):
    events: List[Dict[str, Any]]


def catalog_to_response(catalog: RequirementCatalog) -> CatalogResponse:
    """Convert the catalog to its response model."""
    return CatalogResponse(
        shots=[
            ShotResponse(
                id=shot.id,
                label=shot.label,
                description=shot.description,
                category=shot.category.value,
                required_always=shot.required_always,
                required_with_trailer=shot.required_with_trailer,
                tips=list(shot.tips)
            ) for shot in catalog.shots
        ],
        checks=[
            CheckResponse(
                id=check.id,
                label=check.label,
                description=check.description,
                category=check.category.value,
                category_label=check.category.get_label(),
                critical=check.critical,
                trailer_only=check.trailer_only
            ) for check in catalog.checks
        ]
    )


def session_to_response(controller: WorkflowController) -> SessionStateResponse:
    """Convert a controller and its session to the state response model."""
    session = controller.session
    trailer_mode = session.trailer_mode
    readiness = controller.readiness()
    summary = controller.check_summary()

    outcome = None
    if controller.outcome is not None:
        if isinstance(controller.outcome, SubmissionSuccess):
            outcome = OutcomeResponse(
                success=True,
                inspection_id=controller.outcome.report_id,
                safety_status=controller.outcome.safety_status,
                pdf_url=controller.outcome.report_url
            )
        else:
            outcome = OutcomeResponse(
                success=False,
                stage=controller.outcome.stage,
                message=controller.outcome.message
            )

    return SessionStateResponse(
        id=session.id,
        form=FormResponse(
            driver_name=session.form.driver_name,
            unit_number=session.form.unit_number,
            trailer_number=session.form.trailer_number,
            odometer=session.form.odometer
        ),
        trailer_mode=trailer_mode,
        visible_shots=[shot.id for shot in session.catalog.visible_shots(trailer_mode)],
        required_shots=[shot.id for shot in session.catalog.required_shots(trailer_mode)],
        photos=[
            PhotoResponse(
                shot_id=asset.shot_id,
                preview_handle=asset.preview_handle,
                filename=asset.filename,
                content_type=asset.content_type,
                size=asset.size,
                captured_at=asset.captured_at
            ) for asset in controller.ordered_assets()
        ],
        checks={
            check.id: session.checks.get(check.id).value
            for check in session.catalog.applicable_checks(trailer_mode)
        },
        readiness=ReadinessResponse(
            required_photo_count=readiness.required_photo_count,
            completed_photo_count=readiness.completed_photo_count,
            critical_check_count=readiness.critical_check_count,
            resolved_critical_count=readiness.resolved_critical_count,
            photos_remaining=readiness.photos_remaining,
            checks_remaining=readiness.checks_remaining,
            can_submit=controller.can_submit()
        ),
        check_summary=CheckSummaryResponse(
            passed=summary.passed,
            failed=summary.failed,
            pending=summary.pending,
            warning=summary.warning
        ),
        state=controller.state.value,
        progress=controller.progress,
        attempts=controller.attempts,
        outcome=outcome
    )
