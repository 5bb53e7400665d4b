"""Report creation call against the remote inspection service."""

from typing import Any, Dict, Optional, Sequence

from ..ports.inspection_gateway import GatewayHTTPError, GatewayTransportError, InspectionGateway
from ...domain.entities.check_registry import CheckRegistry
from ...domain.errors import CreationFailure
from ...domain.value_objects.draft_form import DraftForm, Requester
from ...domain.value_objects.submission_outcome import (
    SubmissionFailure,
    SubmissionOutcome,
    SubmissionSuccess,
    UploadedAsset,
)
from ...infrastructure.logging import get_logger, log_submission_outcome


DEFAULT_DRIVER_NAME = "Driver"

REQUIRED_RESPONSE_FIELDS = ("inspectionId", "safetyStatus", "pdfUrl")


def build_report_payload(
    form: DraftForm,
    trailer_mode: bool,
    uploaded_assets: Sequence[UploadedAsset],
    check_registry: CheckRegistry,
    requester: Optional[Requester] = None
) -> Dict[str, Any]:
    """Assemble the JSON body of the report creation request."""
    requester = requester or Requester()
    driver_name = (form.driver_name or "").strip() or requester.first_name or DEFAULT_DRIVER_NAME

    return {
        "telegramId": requester.user_id,
        "driverName": driver_name,
        "vehicleUnitNumber": form.unit_number,
        "trailerUnitNumber": form.trailer_number.strip() if trailer_mode else None,
        "odometer": form.odometer,
        "photos": [asset.to_payload() for asset in uploaded_assets],
        "manualChecks": check_registry.to_payload(),
    }


def parse_report_response(body: Any) -> SubmissionSuccess:
    """Extract the created report from a success body.

    Raises:
        CreationFailure: If the body is not an object or misses a field
    """
    if not isinstance(body, dict):
        raise CreationFailure(None, "Submit failed: malformed response body")

    missing = [name for name in REQUIRED_RESPONSE_FIELDS if body.get(name) in (None, "")]
    if missing:
        raise CreationFailure(None, f"Submit failed: response missing {', '.join(missing)}")

    return SubmissionSuccess(
        report_id=str(body["inspectionId"]),
        safety_status=str(body["safetyStatus"]),
        report_url=str(body["pdfUrl"]),
    )


class SubmissionClient:
    """Builds the report payload and performs the single creation call."""

    def __init__(self, gateway: InspectionGateway):
        self._gateway = gateway
        self._logger = get_logger(__name__)

    async def create_report(
        self,
        form: DraftForm,
        trailer_mode: bool,
        uploaded_assets: Sequence[UploadedAsset],
        check_registry: CheckRegistry,
        requester: Optional[Requester] = None
    ) -> SubmissionOutcome:
        """Create the inspection report.

        Returns:
            SubmissionSuccess with the report identity, or a SubmissionFailure
            with stage ``"submit"``. Never raises for remote errors.
        """
        payload = build_report_payload(form, trailer_mode, uploaded_assets, check_registry, requester)

        try:
            body = await self._gateway.create_inspection(payload)
            outcome = parse_report_response(body)
        except GatewayHTTPError as e:
            failure = CreationFailure(e.status_code)
            return self._failed(failure, payload)
        except GatewayTransportError as e:
            failure = CreationFailure(None, f"Submit failed: {e}")
            return self._failed(failure, payload)
        except CreationFailure as failure:
            return self._failed(failure, payload)

        log_submission_outcome(
            self._logger,
            True,
            "submit",
            f"report {outcome.report_id} is {outcome.safety_status}",
            vehicle_unit_number=payload["vehicleUnitNumber"],
            report_id=outcome.report_id
        )
        return outcome

    def _failed(self, failure: CreationFailure, payload: Dict[str, Any]) -> SubmissionFailure:
        log_submission_outcome(
            self._logger,
            False,
            "submit",
            str(failure),
            vehicle_unit_number=payload["vehicleUnitNumber"],
            status_code=failure.status_code
        )
        return SubmissionFailure(stage="submit", message=str(failure))
