"""Public storefront endpoint — read-only JSON listing for the map widget."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.application.use_cases.manage_locations import LocationService
from app.domain.value_objects.result import Err
from app.infrastructure.api.dependencies import get_location_service

router = APIRouter(tags=["storefront"])


@router.get("/locations.json")
async def storefront_locations(
    shop: str | None = None,
    service: LocationService = Depends(get_location_service),
):
    """Anonymous listing; the owning shop is passed as a query parameter."""
    shop = (shop or "").strip()
    if not shop:
        return JSONResponse(status_code=400, content={"error": "shop param required"})

    result = await service.list_for_owner(shop)
    if isinstance(result, Err):
        return JSONResponse(status_code=500, content={"error": result.error})
    return {"locations": [loc.to_dict() for loc in result.value]}
