"""Inspection session endpoints driven by the form UI."""

from uuid import UUID

from fastapi import APIRouter, Depends, File, HTTPException, Response, UploadFile, status

from ....domain.errors import ReadinessFailure, ValidationFailure, WorkflowTerminalError
from ....domain.value_objects.check_result import CheckResult
from ....domain.value_objects.draft_form import Requester
from ....domain.value_objects.submission_outcome import SubmissionFailure
from ....infrastructure.services import ServiceFactory, SessionContext, get_service_factory
from ..config import get_settings
from ..schemas.session_schemas import (
    CreateSessionRequest,
    HostEventsResponse,
    SessionStateResponse,
    ToggleCheckRequest,
    UpdateFormRequest,
    session_to_response,
)

router = APIRouter()


def get_session_context(
    session_id: UUID,
    factory: ServiceFactory = Depends(get_service_factory)
) -> SessionContext:
    """Resolve the session from the path or answer 404."""
    context = factory.get_session(session_id)
    if context is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Inspection session not found: {session_id}"
        )
    return context


@router.post("", response_model=SessionStateResponse, status_code=status.HTTP_201_CREATED)
async def create_session(
    request: CreateSessionRequest,
    factory: ServiceFactory = Depends(get_service_factory)
) -> SessionStateResponse:
    """Open a new inspection session for the requesting driver."""
    context = factory.open_session(Requester(user_id=request.telegram_id, first_name=request.first_name))
    return session_to_response(context.controller)


@router.get("/{session_id}", response_model=SessionStateResponse)
async def get_session(context: SessionContext = Depends(get_session_context)) -> SessionStateResponse:
    """Current form, photos, checks, readiness and submission state."""
    return session_to_response(context.controller)


@router.patch("/{session_id}/form", response_model=SessionStateResponse)
async def update_form(
    request: UpdateFormRequest,
    context: SessionContext = Depends(get_session_context)
) -> SessionStateResponse:
    """Update form fields. Entering a trailer number expands the requirements."""
    changes = request.model_dump(exclude_unset=True)
    if changes:
        context.session.update_form(**changes)
    return session_to_response(context.controller)


@router.put("/{session_id}/photos/{shot_id}", response_model=SessionStateResponse)
async def capture_photo(
    shot_id: str,
    file: UploadFile = File(...),
    context: SessionContext = Depends(get_session_context)
) -> SessionStateResponse:
    """Store or replace the photo of one shot."""
    content = await file.read()
    max_bytes = get_settings().max_photo_bytes
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Photo exceeds {max_bytes} bytes"
        )

    context.controller.capture_photo(
        shot_id,
        content,
        filename=file.filename or f"{shot_id}.jpg",
        content_type=file.content_type or "image/jpeg"
    )
    return session_to_response(context.controller)


@router.delete("/{session_id}/photos/{shot_id}", response_model=SessionStateResponse)
async def remove_photo(
    shot_id: str,
    context: SessionContext = Depends(get_session_context)
) -> SessionStateResponse:
    """Remove the photo of one shot."""
    context.controller.remove_photo(shot_id)
    return session_to_response(context.controller)


@router.post("/{session_id}/checks/{check_id}", response_model=SessionStateResponse)
async def toggle_check(
    check_id: str,
    request: ToggleCheckRequest,
    context: SessionContext = Depends(get_session_context)
) -> SessionStateResponse:
    """Press OK or Defect on a manual check; pressing the active one clears it."""
    context.controller.toggle_check(check_id, CheckResult(request.target))
    return session_to_response(context.controller)


@router.post("/{session_id}/submit", response_model=SessionStateResponse)
async def submit_inspection(context: SessionContext = Depends(get_session_context)) -> SessionStateResponse:
    """
    Submit the inspection.

    Uploads every captured photo in order, then creates the report. A failed
    attempt can be retried and starts again from the first photo.
    """
    controller = context.controller
    try:
        outcome = await controller.submit()
    except ValidationFailure as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"type": "validation_error", "errors": e.errors}
        )
    except ReadinessFailure as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={
                "type": "not_ready",
                "message": str(e),
                "photos_remaining": e.photos_remaining,
                "checks_remaining": e.checks_remaining
            }
        )
    except WorkflowTerminalError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={"type": "already_submitted", "message": str(e)}
        )

    if outcome is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={"type": "in_progress", "message": "Submission already in progress"}
        )

    if isinstance(outcome, SubmissionFailure):
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={"type": "submission_failed", "stage": outcome.stage, "message": outcome.message}
        )

    return session_to_response(controller)


@router.get("/{session_id}/events", response_model=HostEventsResponse)
async def drain_host_events(context: SessionContext = Depends(get_session_context)) -> HostEventsResponse:
    """Hand pending feedback and result events to the embedding page."""
    return HostEventsResponse(events=context.host_bridge.drain())


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def close_session(
    session_id: UUID,
    factory: ServiceFactory = Depends(get_service_factory)
) -> Response:
    """Close a session and release its photo previews."""
    if not factory.close_session(session_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Inspection session not found: {session_id}"
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
