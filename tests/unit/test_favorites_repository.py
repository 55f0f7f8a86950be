import pytest

from app.schemas.favorite import FavoriteCreate


@pytest.mark.asyncio
async def test_get_favorites_not_found(repository):
    assert await repository.get_favorites("user-1") == {"message": "No favorites found", "code": 404}


@pytest.mark.asyncio
async def test_get_favorites_returns_record(repository, store):
    store.set("favorite", "user-1", {"places": [{"id": "p1"}]})
    assert await repository.get_favorites("user-1") == {"places": [{"id": "p1"}]}


@pytest.mark.asyncio
async def test_post_favorite_uses_given_user(repository, store):
    favorite = FavoriteCreate.model_validate(
        {"favorite_place_id": "p1", "place_name": "Shibuya", "user_id": "intruder"}
    )
    doc_id = await repository.post_favorite(favorite, "user-1")

    stored = store.get("favorite", doc_id)
    assert stored["user_id"] == "user-1"
    assert stored["favorite_place_id"] == "p1"
    assert stored["favorite_description"] is None


@pytest.mark.asyncio
async def test_post_favorite_stores_values_as_sent(repository, store):
    favorite = FavoriteCreate.model_validate(
        {"favorite_place_id": 42, "place_name": {"en": "Shibuya"}, "favorite_description": ["quiet"]}
    )
    doc_id = await repository.post_favorite(favorite, "user-1")

    stored = store.get("favorite", doc_id)
    assert stored["favorite_place_id"] == 42
    assert stored["place_name"] == {"en": "Shibuya"}
    assert stored["favorite_description"] == ["quiet"]
