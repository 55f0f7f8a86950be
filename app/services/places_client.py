"""Geo-search provider client (Places nearby search)."""

import logging
from typing import Optional

import httpx

from app.config.settings import get_settings
from app.core.exceptions import ProviderNotConfiguredError
from app.schemas.places import PlaceQuery
from app.services.upstream import UpstreamResult

logger = logging.getLogger(__name__)


class PlacesClient:
    provider_name = "places"

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._transport = transport

    def default_query(self, latitude: Optional[float] = None, longitude: Optional[float] = None) -> PlaceQuery:
        """Build a query, falling back to the configured location per coordinate."""
        config = get_settings().places
        return PlaceQuery(
            latitude=config.default_latitude if latitude is None else latitude,
            longitude=config.default_longitude if longitude is None else longitude,
            radius_m=config.radius_m,
        )

    async def search_nearby(self, query: PlaceQuery) -> UpstreamResult:
        """
        Search places around ``query``.

        ``status == "OK"`` yields the provider's ``results`` list; any other
        status is a provider-declared error carrying the whole body.
        """
        config = get_settings().places
        if not config.key:
            raise ProviderNotConfiguredError(self.provider_name)

        params = {
            "location": query.location,
            "radius": query.radius_m,
            "key": config.key,
        }

        try:
            async with httpx.AsyncClient(
                timeout=config.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.get(config.url, params=params)
                response.raise_for_status()
                data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(
                f"Places request failed: {type(e).__name__}",
                extra={"location": query.location, "radius_m": query.radius_m},
            )
            return UpstreamResult.transport_failure(e, secrets=[config.key])

        status = data.get("status") if isinstance(data, dict) else None
        if status != "OK":
            logger.warning(f"Places provider returned status {status!r}")
            return UpstreamResult.provider_error(data)

        return UpstreamResult.success(data.get("results", []))


_client: Optional[PlacesClient] = None


def get_places_client() -> PlacesClient:
    """Get the places client singleton."""
    global _client
    if _client is None:
        _client = PlacesClient()
    return _client
