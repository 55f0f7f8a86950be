"""GetFavorites / PostFavorite: the caller's own favorites only."""

import logging
from typing import Any, Dict

from app.core.auth_context import AuthContext
from app.core.exceptions import DocumentStoreError
from app.handlers.base import HandlerRequest, HandlerResponse
from app.schemas.favorite import FavoriteCreate, FavoriteCreated
from app.services.favorites_repository import FavoritesRepository
from app.services.upstream import describe_exception

logger = logging.getLogger(__name__)

AUTH_REQUIRED = {"message": "Authentication Required!", "code": 401}


async def get_favorites(auth: AuthContext, repository: FavoritesRepository) -> Dict[str, Any]:
    """
    Favorites record of the authenticated caller.

    Unauthenticated callers get a 401 payload instead of an exception.
    """
    if not auth.is_authenticated:
        return dict(AUTH_REQUIRED)
    return await repository.get_favorites(auth.uid)


async def post_favorite(request: HandlerRequest, repository: FavoritesRepository) -> HandlerResponse:
    if request.method.upper() != "POST":
        return HandlerResponse(400, "Please send a POST request")

    if not request.auth.is_authenticated:
        return HandlerResponse(401, "Authentication required")

    favorite = FavoriteCreate.model_validate(request.json_body())

    try:
        doc_id = await repository.post_favorite(favorite, request.auth.uid)
    except DocumentStoreError as e:
        logger.error(f"Favorite for user {request.auth.uid} was not stored: {e.cause!r}")
        return HandlerResponse(500, describe_exception(e.cause))

    return HandlerResponse(200, FavoriteCreated(id=doc_id).model_dump())
