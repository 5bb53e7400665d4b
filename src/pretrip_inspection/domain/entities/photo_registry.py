"""Photo registry entity owning captured assets and their previews."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Iterator, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ...application.ports.previews import PreviewAllocator


@dataclass(frozen=True)
class CapturedAsset:
    """A photo captured for one shot."""

    shot_id: str
    content: bytes
    preview_handle: str
    filename: str = "photo.jpg"
    content_type: str = "image/jpeg"
    captured_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        """Validate captured asset data."""
        if not self.shot_id:
            raise ValueError("Shot id cannot be empty")
        if not self.content:
            raise ValueError("Photo content cannot be empty")

    @property
    def size(self) -> int:
        return len(self.content)


class PhotoRegistry:
    """Holds captured assets keyed by shot id.

    Every asset's preview handle is released exactly once: when the asset is
    replaced by a re-capture, removed, or when the registry is cleared.
    """

    def __init__(self, preview_allocator: "PreviewAllocator"):
        self._preview_allocator = preview_allocator
        self._assets: Dict[str, CapturedAsset] = {}

    def capture(
        self,
        shot_id: str,
        content: bytes,
        filename: str = "photo.jpg",
        content_type: str = "image/jpeg"
    ) -> CapturedAsset:
        """Store a photo for a shot, replacing any earlier capture."""
        if not content:
            raise ValueError("Photo content cannot be empty")

        previous = self._assets.pop(shot_id, None)
        if previous is not None:
            self._preview_allocator.release(previous.preview_handle)

        handle = self._preview_allocator.allocate(content, content_type)
        asset = CapturedAsset(
            shot_id=shot_id,
            content=content,
            preview_handle=handle,
            filename=filename,
            content_type=content_type
        )
        self._assets[shot_id] = asset
        return asset

    def remove(self, shot_id: str) -> bool:
        """Remove the asset for a shot; returns False if nothing was captured."""
        asset = self._assets.pop(shot_id, None)
        if asset is None:
            return False
        self._preview_allocator.release(asset.preview_handle)
        return True

    def clear(self) -> None:
        """Remove every asset, releasing all previews."""
        while self._assets:
            shot_id = next(iter(self._assets))
            self.remove(shot_id)

    def get(self, shot_id: str) -> Optional[CapturedAsset]:
        return self._assets.get(shot_id)

    def has(self, shot_id: str) -> bool:
        return shot_id in self._assets

    @property
    def shot_ids(self) -> List[str]:
        """Captured shot ids in capture order."""
        return list(self._assets)

    def assets(self) -> List[CapturedAsset]:
        """Captured assets in capture order."""
        return list(self._assets.values())

    def __contains__(self, shot_id: object) -> bool:
        return shot_id in self._assets

    def __len__(self) -> int:
        return len(self._assets)

    def __iter__(self) -> Iterator[CapturedAsset]:
        return iter(list(self._assets.values()))
