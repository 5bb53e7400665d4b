"""In-memory preview handle allocation."""

from typing import Dict, Set
from uuid import uuid4

from ..application.ports.previews import PreviewAllocator
from .logging import get_logger


logger = get_logger(__name__)


class InMemoryPreviewAllocator(PreviewAllocator):
    """Issues unique ``preview://`` handles and tracks which are still live.

    Releasing a handle twice, or one that was never issued, raises.
    """

    SCHEME = "preview://"

    def __init__(self):
        self._live: Dict[str, bytes] = {}
        self._released: Set[str] = set()

    def allocate(self, content: bytes, content_type: str) -> str:
        handle = f"{self.SCHEME}{uuid4()}"
        self._live[handle] = content
        logger.debug(f"Allocated preview {handle} ({content_type}, {len(content)} bytes)")
        return handle

    def release(self, handle: str) -> None:
        if handle not in self._live:
            if handle in self._released:
                raise ValueError(f"Preview already released: {handle}")
            raise ValueError(f"Unknown preview: {handle}")
        del self._live[handle]
        self._released.add(handle)
        logger.debug(f"Released preview {handle}")

    def read(self, handle: str) -> bytes:
        """Get the bytes behind a live handle."""
        if handle not in self._live:
            raise ValueError(f"Unknown preview: {handle}")
        return self._live[handle]

    def is_live(self, handle: str) -> bool:
        return handle in self._live

    @property
    def live_count(self) -> int:
        return len(self._live)
