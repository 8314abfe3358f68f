"""App lifecycle webhooks."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from app.application.use_cases.manage_locations import LocationService
from app.domain.value_objects.result import Err
from app.infrastructure.api.dependencies import get_location_service, require_shop
from app.infrastructure.api.responses import error_response, success

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/webhooks", tags=["webhooks"])


@router.post("/app-uninstalled")
async def app_uninstalled(
    shop: str = Depends(require_shop),
    service: LocationService = Depends(get_location_service),
):
    """Drop every location of a shop that uninstalled the app."""
    logger.info("App uninstalled by %s, removing its locations", shop)
    result = await service.delete_all_for_owner(shop)
    if isinstance(result, Err):
        return error_response(result)
    return success(count=result.value)
