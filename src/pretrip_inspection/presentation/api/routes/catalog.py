"""Requirement catalog endpoint."""

from fastapi import APIRouter

from ....infrastructure.services import get_service_factory
from ..schemas.session_schemas import CatalogResponse, catalog_to_response

router = APIRouter()


@router.get("", response_model=CatalogResponse)
async def get_catalog() -> CatalogResponse:
    """List every photo shot and manual check."""
    return catalog_to_response(get_service_factory().catalog)
