"""HTTP implementation of the inspection gateway using httpx."""

import time
from typing import Any, Dict, Optional

import httpx

from ..application.ports.inspection_gateway import (
    GatewayHTTPError,
    GatewayTransportError,
    InspectionGateway,
)
from ..domain.entities.photo_registry import CapturedAsset
from .logging import get_logger, log_request, log_response


class HttpInspectionGateway(InspectionGateway):
    """Talks to the remote inspection service.

    ``POST {base}/photos`` takes a multipart ``file`` and answers
    ``{"imageUrl": ...}``; ``POST {base}/inspections`` takes the JSON report
    and answers ``{"inspectionId", "safetyStatus", "pdfUrl"}``.
    """

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None
    ):
        self._base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._logger = get_logger(__name__)

    @property
    def base_url(self) -> str:
        return self._base_url

    async def upload_photo(self, asset: CapturedAsset) -> str:
        files = {"file": (asset.filename, asset.content, asset.content_type)}
        response = await self._post("/photos", files=files)
        body = self._decode(response)
        image_url = body.get("imageUrl") if isinstance(body, dict) else None
        if not image_url:
            raise GatewayHTTPError(response.status_code, "Upload response missing imageUrl")
        return image_url

    async def create_inspection(self, payload: Dict[str, Any]) -> Any:
        response = await self._post("/inspections", json=payload)
        try:
            return response.json()
        except ValueError:
            # Malformed success bodies are rejected by the submission client
            return None

    async def close(self) -> None:
        """Close the underlying client if this gateway created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpInspectionGateway":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def _post(self, path: str, **kwargs) -> httpx.Response:
        url = f"{self._base_url}{path}"
        log_request(self._logger, "POST", url)
        start_time = time.time()
        try:
            response = await self._client.post(url, **kwargs)
        except httpx.HTTPError as e:
            self._logger.warning(f"Request to {url} failed: {e}", extra={"error_type": type(e).__name__})
            raise GatewayTransportError(str(e) or type(e).__name__) from e

        duration_ms = (time.time() - start_time) * 1000
        log_response(self._logger, "POST", url, response.status_code, duration_ms)

        if not response.is_success:
            raise GatewayHTTPError(response.status_code, f"{path} returned {response.status_code}")
        return response

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise GatewayHTTPError(response.status_code, "Response body is not JSON") from e
