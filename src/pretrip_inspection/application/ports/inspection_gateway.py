"""Port interface for the remote inspection service."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ...domain.entities.photo_registry import CapturedAsset


class GatewayHTTPError(Exception):
    """The remote service answered with a non-success status."""

    def __init__(self, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        super().__init__(message or f"Remote service returned {status_code}")


class GatewayTransportError(Exception):
    """The request never produced a response."""


class InspectionGateway(ABC):
    """Port interface for the two calls made to the inspection service."""

    @abstractmethod
    async def upload_photo(self, asset: "CapturedAsset") -> str:
        """Upload one photo and return its remote location.

        Raises:
            GatewayHTTPError: On a non-2xx response
            GatewayTransportError: When no response was received
        """
        raise NotImplementedError

    @abstractmethod
    async def create_inspection(self, payload: Dict[str, Any]) -> Any:
        """Create the inspection report and return the decoded response body.

        Raises:
            GatewayHTTPError: On a non-2xx response
            GatewayTransportError: When no response was received
        """
        raise NotImplementedError
