"""Nominatim geocoder adapter — implements GeocoderPort."""

from __future__ import annotations

import logging

import httpx

from app.application.ports.geocoder_port import GeocoderPort
from app.config import settings
from app.domain.value_objects.geo_point import GeoPoint

logger = logging.getLogger(__name__)


class NominatimAdapter(GeocoderPort):
    """One Nominatim search request per lookup, first match only.

    No match, a non-2xx status and transport/parse errors all map to None.
    """

    def __init__(
        self,
        user_agent: str | None = None,
        url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._user_agent = user_agent or settings.geocoder_user_agent
        self._url = url or settings.geocoder_url
        self._timeout = timeout if timeout is not None else settings.geocoder_timeout
        self._transport = transport

    async def geocode(self, address: str) -> GeoPoint | None:
        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self._timeout) as client:
                response = await client.get(
                    self._url,
                    params={"q": address, "format": "json", "limit": 1},
                    headers={"User-Agent": self._user_agent},
                )
        except httpx.HTTPError:
            logger.exception("Nominatim request failed for '%s'", address)
            return None

        if not response.is_success:
            logger.error(
                "Nominatim request failed for '%s': %s %s",
                address, response.status_code, response.reason_phrase,
            )
            return None

        try:
            results = response.json()
            if not results:
                logger.info("Nominatim returned no results for '%s'", address)
                return None
            point = GeoPoint.parse(results[0]["lat"], results[0]["lon"])
        except (ValueError, TypeError, KeyError, IndexError):
            logger.exception("Unexpected Nominatim payload for '%s'", address)
            return None

        logger.info("Nominatim resolved '%s' → (%f, %f)", address, point.latitude, point.longitude)
        return point
