"""Places: nearby search around the caller's (or the default) location."""

from typing import Optional

from app.handlers.base import HandlerRequest, HandlerResponse
from app.services.places_client import PlacesClient
from app.services.upstream import PLACES_EXPOSURE, ErrorExposurePolicy, UpstreamOutcome


def _coordinate(raw) -> Optional[float]:
    if raw is None or raw == "":
        return None
    return float(raw)


async def places(
    request: HandlerRequest,
    client: PlacesClient,
    policy: ErrorExposurePolicy = PLACES_EXPOSURE,
) -> HandlerResponse:
    query = client.default_query(
        latitude=_coordinate(request.query.get("latitude")),
        longitude=_coordinate(request.query.get("longitude")),
    )
    result = await client.search_nearby(query)

    if result.outcome == UpstreamOutcome.SUCCESS:
        return HandlerResponse(200, result.payload)
    if result.outcome == UpstreamOutcome.PROVIDER_ERROR:
        return HandlerResponse(
            400, result.payload if policy.expose_provider_payload else {"error": "Places search failed"}
        )
    return HandlerResponse(
        500, result.error if policy.expose_transport_error else {"error": "Places search failed"}
    )
