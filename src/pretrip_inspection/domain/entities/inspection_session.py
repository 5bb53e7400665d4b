"""Inspection session entity aggregating the form being filled in."""

from datetime import datetime
from typing import Optional, TYPE_CHECKING
from uuid import UUID, uuid4

from ..catalog import DEFAULT_CATALOG, RequirementCatalog
from ..value_objects.check_result import CheckResult
from ..value_objects.draft_form import DraftForm, Requester
from .check_registry import CheckRegistry
from .photo_registry import CapturedAsset, PhotoRegistry

if TYPE_CHECKING:
    from ...application.ports.previews import PreviewAllocator


class InspectionSession:
    """One driver's in-progress pre-trip inspection."""

    def __init__(
        self,
        preview_allocator: "PreviewAllocator",
        requester: Optional[Requester] = None,
        catalog: Optional[RequirementCatalog] = None,
        form: Optional[DraftForm] = None,
        session_id: Optional[UUID] = None
    ):
        self._id = session_id or uuid4()
        self._catalog = catalog or DEFAULT_CATALOG
        self._requester = requester or Requester()
        self._form = form or DraftForm()
        self._photos = PhotoRegistry(preview_allocator)
        self._checks = CheckRegistry()
        self._closed = False
        self._created_at = datetime.utcnow()
        self._updated_at = self._created_at

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def catalog(self) -> RequirementCatalog:
        return self._catalog

    @property
    def requester(self) -> Requester:
        return self._requester

    @property
    def form(self) -> DraftForm:
        return self._form

    @property
    def photos(self) -> PhotoRegistry:
        return self._photos

    @property
    def checks(self) -> CheckRegistry:
        return self._checks

    @property
    def trailer_mode(self) -> bool:
        """Derived from the trailer number field on every read."""
        return self._form.trailer_mode

    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def update_form(self, **fields) -> DraftForm:
        """Replace some form fields."""
        self._ensure_open()
        self._form = self._form.with_changes(**fields)
        self._touch()
        return self._form

    def capture_photo(
        self,
        shot_id: str,
        content: bytes,
        filename: str = "photo.jpg",
        content_type: str = "image/jpeg"
    ) -> CapturedAsset:
        """Store a photo for a catalogued shot."""
        self._ensure_open()
        if not self._catalog.has_shot(shot_id):
            raise ValueError(f"Unknown shot: {shot_id}")
        asset = self._photos.capture(shot_id, content, filename, content_type)
        self._touch()
        return asset

    def remove_photo(self, shot_id: str) -> bool:
        """Remove a captured photo."""
        self._ensure_open()
        if not self._catalog.has_shot(shot_id):
            raise ValueError(f"Unknown shot: {shot_id}")
        removed = self._photos.remove(shot_id)
        if removed:
            self._touch()
        return removed

    def toggle_check(self, check_id: str, target: CheckResult) -> CheckResult:
        """Toggle a catalogued manual check towards ``target``."""
        self._ensure_open()
        if not self._catalog.has_check(check_id):
            raise ValueError(f"Unknown check: {check_id}")
        result = self._checks.toggle(check_id, target)
        self._touch()
        return result

    def close(self) -> None:
        """End the session and release every preview it holds."""
        if self._closed:
            return
        self._photos.clear()
        self._closed = True

    def _ensure_open(self) -> None:
        if self._closed:
            raise ValueError("Inspection session is closed")

    def _touch(self) -> None:
        self._updated_at = datetime.utcnow()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InspectionSession):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"InspectionSession(id={self._id}, unit_number='{self._form.unit_number}', "
            f"trailer_mode={self.trailer_mode}, photos={len(self._photos)}, closed={self._closed})"
        )
