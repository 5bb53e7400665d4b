"""Unit tests for the httpx inspection gateway."""

import asyncio
import json
import logging

import httpx
import pytest

from pretrip_inspection.application.ports.inspection_gateway import GatewayHTTPError, GatewayTransportError
from pretrip_inspection.domain.entities.photo_registry import CapturedAsset
from pretrip_inspection.infrastructure.http_gateway import HttpInspectionGateway


ASSET = CapturedAsset(
    shot_id="front",
    content=b"\xff\xd8jpeg",
    preview_handle="preview://1",
    filename="front.jpg",
    content_type="image/jpeg"
)


def _gateway(handler) -> HttpInspectionGateway:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return HttpInspectionGateway("https://pti.example.com/", client=client)


class TestHttpInspectionGateway:
    """Test cases for HttpInspectionGateway."""

    @pytest.mark.asyncio
    async def test_upload_photo_posts_multipart(self):
        """Test the photo is posted as a multipart file field."""
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["content_type"] = request.headers["content-type"]
            seen["body"] = request.read()
            return httpx.Response(200, json={"imageUrl": "https://storage.example.com/front.jpg"})

        gateway = _gateway(handler)

        location = await gateway.upload_photo(ASSET)

        assert location == "https://storage.example.com/front.jpg"
        assert seen["url"] == "https://pti.example.com/photos"
        assert seen["content_type"].startswith("multipart/form-data")
        assert b'name="file"' in seen["body"]
        assert b'filename="front.jpg"' in seen["body"]
        assert b"\xff\xd8jpeg" in seen["body"]

    @pytest.mark.asyncio
    async def test_response_log_carries_measured_duration(self, caplog):
        """Test the logged response duration covers the time spent waiting on the server."""
        async def slow_handler(request: httpx.Request) -> httpx.Response:
            await asyncio.sleep(0.05)
            return httpx.Response(200, json={"imageUrl": "https://storage.example.com/front.jpg"})

        gateway = _gateway(slow_handler)

        with caplog.at_level(logging.INFO, logger="pretrip_inspection.infrastructure.http_gateway"):
            await gateway.upload_photo(ASSET)

        responses = [record for record in caplog.records if hasattr(record, "response_duration_ms")]
        assert len(responses) == 1
        assert responses[0].response_status == 200
        assert responses[0].response_duration_ms >= 40

    @pytest.mark.asyncio
    async def test_upload_photo_non_2xx(self):
        """Test a rejected upload raises with its status code."""
        gateway = _gateway(lambda request: httpx.Response(413, text="too large"))

        with pytest.raises(GatewayHTTPError) as exc_info:
            await gateway.upload_photo(ASSET)

        assert exc_info.value.status_code == 413

    @pytest.mark.asyncio
    async def test_upload_photo_without_image_url(self):
        """Test a success body without imageUrl is an error."""
        gateway = _gateway(lambda request: httpx.Response(200, json={}))

        with pytest.raises(GatewayHTTPError, match="missing imageUrl"):
            await gateway.upload_photo(ASSET)

    @pytest.mark.asyncio
    async def test_create_inspection_posts_json(self):
        """Test the report is posted as JSON and the body returned."""
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["payload"] = json.loads(request.read())
            return httpx.Response(201, json={"inspectionId": "9", "safetyStatus": "SAFE", "pdfUrl": "u"})

        gateway = _gateway(handler)

        body = await gateway.create_inspection({"vehicleUnitNumber": "A1"})

        assert seen["url"] == "https://pti.example.com/inspections"
        assert seen["payload"] == {"vehicleUnitNumber": "A1"}
        assert body["inspectionId"] == "9"

    @pytest.mark.asyncio
    async def test_create_inspection_non_json_body(self):
        """Test a success body that is not JSON is handed back as None."""
        gateway = _gateway(lambda request: httpx.Response(200, text="ok"))

        assert await gateway.create_inspection({}) is None

    @pytest.mark.asyncio
    async def test_create_inspection_non_2xx(self):
        """Test a failed creation raises with its status."""
        gateway = _gateway(lambda request: httpx.Response(500, json={"error": "boom"}))

        with pytest.raises(GatewayHTTPError) as exc_info:
            await gateway.create_inspection({})

        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_transport_error(self):
        """Test connection errors become transport errors."""
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        gateway = _gateway(handler)

        with pytest.raises(GatewayTransportError, match="connection refused"):
            await gateway.upload_photo(ASSET)

    @pytest.mark.asyncio
    async def test_owned_client_closed(self):
        """Test a gateway closes the client it created."""
        gateway = HttpInspectionGateway("https://pti.example.com")

        async with gateway:
            assert gateway.base_url == "https://pti.example.com"

        assert gateway._client.is_closed is True
