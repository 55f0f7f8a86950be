"""
Favorites endpoints.

``/getFavorites`` speaks the callable protocol; ``/postFavorite`` is a plain
HTTP endpoint that accepts the usual methods so non-POST calls get the documented
400 instead of a routing error.
"""
from fastapi import APIRouter, Depends, Request

from app.api.adapters import invoke_callable, to_handler_request, to_response
from app.core.auth_context import AuthContext, CallableContext
from app.core.dependencies import get_repository
from app.handlers import get_favorites, post_favorite
from app.services.favorites_repository import FavoritesRepository

router = APIRouter(tags=["favorites"])


@router.post("/getFavorites")
async def get_favorites_callable(
    request: Request,
    repository: FavoritesRepository = Depends(get_repository),
):
    async def handler(data, context: CallableContext):
        return await get_favorites(AuthContext.from_callable_context(context), repository)

    return await invoke_callable(request, handler)


@router.api_route(
    "/postFavorite",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD"],
)
async def post_favorite_endpoint(
    request: Request,
    repository: FavoritesRepository = Depends(get_repository),
):
    """
    Save a favorite place for the authenticated caller.

    - **favorite_place_id**, **place_name**, **favorite_description**
    """
    result = await post_favorite(await to_handler_request(request), repository)
    return to_response(result)
