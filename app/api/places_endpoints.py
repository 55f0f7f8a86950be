"""Nearby places endpoint."""
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query, Request
from pydantic import BeforeValidator, Field

from app.api.adapters import to_handler_request, to_response
from app.core.dependencies import get_places
from app.handlers import places
from app.services.places_client import PlacesClient

router = APIRouter(tags=["places"])


def _blank_as_missing(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


Latitude = Annotated[
    Optional[Annotated[float, Field(ge=-90, le=90)]], BeforeValidator(_blank_as_missing), Query()
]
Longitude = Annotated[
    Optional[Annotated[float, Field(ge=-180, le=180)]], BeforeValidator(_blank_as_missing), Query()
]


@router.get("/getPlaces")
async def get_places(
    request: Request,
    latitude: Latitude = None,
    longitude: Longitude = None,
    client: PlacesClient = Depends(get_places),
):
    """
    Places near the given coordinates.

    Missing or blank coordinates fall back to the configured default location.
    """
    query = {}
    if latitude is not None:
        query["latitude"] = latitude
    if longitude is not None:
        query["longitude"] = longitude
    result = await places(await to_handler_request(request, query=query), client)
    return to_response(result)
