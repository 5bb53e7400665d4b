"""Port interface for transient preview handles."""

from abc import ABC, abstractmethod


class PreviewAllocator(ABC):
    """Allocates display previews for captured photos and releases them."""

    @abstractmethod
    def allocate(self, content: bytes, content_type: str) -> str:
        """Create a preview for the given image bytes and return its handle."""
        raise NotImplementedError

    @abstractmethod
    def release(self, handle: str) -> None:
        """Release a previously allocated handle."""
        raise NotImplementedError
