"""Sequential photo upload orchestration."""

from typing import Callable, List, Optional, Sequence

from ..ports.inspection_gateway import GatewayHTTPError, GatewayTransportError, InspectionGateway
from ...domain.entities.photo_registry import CapturedAsset
from ...domain.errors import UploadFailure
from ...domain.value_objects.submission_outcome import UploadedAsset
from ...infrastructure.logging import get_logger, log_upload_progress


ProgressCallback = Callable[[str], None]


def format_upload_progress(position: int, total: int) -> str:
    """Progress text shown before the request for asset ``position`` is issued."""
    return f"uploading {position}/{total}"


class UploadOrchestrator:
    """Uploads captured assets one at a time, in the order given.

    Only one request is in flight at any moment. The first failure aborts the
    whole run; assets uploaded before it are not remembered, so a later
    attempt starts again from the first asset.
    """

    def __init__(self, gateway: InspectionGateway):
        self._gateway = gateway
        self._logger = get_logger(__name__)

    async def upload(
        self,
        assets: Sequence[CapturedAsset],
        on_progress: Optional[ProgressCallback] = None
    ) -> List[UploadedAsset]:
        """Upload every asset and return their remote locations in order.

        Args:
            assets: Assets in the order they must be uploaded
            on_progress: Called with ``"uploading i/N"`` before each request

        Returns:
            One UploadedAsset per input asset, same order

        Raises:
            UploadFailure: On the first asset that was not accepted
        """
        total = len(assets)
        uploaded: List[UploadedAsset] = []

        for index, asset in enumerate(assets):
            position = index + 1
            if on_progress is not None:
                on_progress(format_upload_progress(position, total))
            log_upload_progress(self._logger, asset.shot_id, position, total, asset_size=asset.size)

            try:
                remote_location = await self._gateway.upload_photo(asset)
            except GatewayHTTPError as e:
                self._logger.warning(
                    f"Upload of {asset.shot_id} rejected with status {e.status_code}",
                    extra={"shot_id": asset.shot_id, "upload_index": index, "status_code": e.status_code}
                )
                raise UploadFailure(index, e.status_code) from e
            except GatewayTransportError as e:
                self._logger.warning(
                    f"Upload of {asset.shot_id} failed: {e}",
                    extra={"shot_id": asset.shot_id, "upload_index": index}
                )
                raise UploadFailure(index, None, str(e)) from e

            uploaded.append(UploadedAsset(shot_id=asset.shot_id, remote_location=remote_location))

        return uploaded
