"""Shared fixtures and fakes for the test suite."""

from typing import Any, Dict, List, Optional

import pytest

from pretrip_inspection.application.ports.host_bridge import Feedback, HostBridge
from pretrip_inspection.application.ports.inspection_gateway import GatewayHTTPError, InspectionGateway
from pretrip_inspection.domain.catalog import DEFAULT_CATALOG
from pretrip_inspection.domain.entities.inspection_session import InspectionSession
from pretrip_inspection.domain.value_objects.check_result import CheckResult
from pretrip_inspection.infrastructure.previews import InMemoryPreviewAllocator


TRACTOR_SHOT_IDS = [shot.id for shot in DEFAULT_CATALOG.required_shots(False)]
TRAILER_SHOT_IDS = [
    shot.id for shot in DEFAULT_CATALOG.required_shots(True) if shot.id not in TRACTOR_SHOT_IDS
]
CRITICAL_CHECK_IDS = [check.id for check in DEFAULT_CATALOG.critical_checks(False)]
TRAILER_CRITICAL_CHECK_IDS = [
    check.id for check in DEFAULT_CATALOG.critical_checks(True) if check.id not in CRITICAL_CHECK_IDS
]


class FakeInspectionGateway(InspectionGateway):
    """Records every call and answers from a script."""

    def __init__(self, report: Optional[Dict[str, Any]] = None):
        self.calls: List[tuple] = []
        self.upload_failures: Dict[int, int] = {}
        self.create_status: Optional[int] = None
        self.report = report if report is not None else {
            "inspectionId": "insp-001",
            "safetyStatus": "SAFE",
            "pdfUrl": "https://reports.example.com/insp-001.pdf",
        }
        self._upload_counter = 0

    @property
    def uploaded_shot_ids(self) -> List[str]:
        return [call[1] for call in self.calls if call[0] == "upload"]

    @property
    def create_calls(self) -> List[Dict[str, Any]]:
        return [call[1] for call in self.calls if call[0] == "create"]

    def fail_upload_on_call(self, call_number: int, status_code: int) -> None:
        """Make the n-th upload call overall (0-indexed) fail."""
        self.upload_failures[call_number] = status_code

    async def upload_photo(self, asset) -> str:
        call_number = self._upload_counter
        self._upload_counter += 1
        self.calls.append(("upload", asset.shot_id))
        if call_number in self.upload_failures:
            raise GatewayHTTPError(self.upload_failures[call_number])
        return f"https://storage.example.com/{asset.shot_id}.jpg"

    async def create_inspection(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        self.calls.append(("create", payload))
        if self.create_status is not None:
            raise GatewayHTTPError(self.create_status)
        return self.report


class RecordingHostBridge(HostBridge):
    """Host bridge that remembers everything it was told."""

    def __init__(self):
        self.feedback: List[Feedback] = []
        self.results: List[Dict[str, Any]] = []

    def notify(self, feedback: Feedback) -> None:
        self.feedback.append(feedback)

    def send_result(self, data: Dict[str, Any]) -> None:
        self.results.append(data)


def complete_tractor_inspection(session: InspectionSession) -> None:
    """Fill in a valid form and every non-trailer requirement."""
    session.update_form(driver_name="Sam", unit_number="TRK-101", odometer=120500)
    for shot_id in TRACTOR_SHOT_IDS:
        session.capture_photo(shot_id, f"jpeg-{shot_id}".encode())
    for check_id in CRITICAL_CHECK_IDS:
        session.toggle_check(check_id, CheckResult.PASS)


@pytest.fixture
def previews() -> InMemoryPreviewAllocator:
    return InMemoryPreviewAllocator()


@pytest.fixture
def session(previews) -> InspectionSession:
    return InspectionSession(previews)


@pytest.fixture
def gateway() -> FakeInspectionGateway:
    return FakeInspectionGateway()


@pytest.fixture
def host() -> RecordingHostBridge:
    return RecordingHostBridge()
