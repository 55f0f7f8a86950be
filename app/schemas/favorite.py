from pydantic import BaseModel, ConfigDict
from typing import Any


class FavoriteCreate(BaseModel):
    """Client payload for a new favorite; identity fields are not accepted.

    Field values are stored as sent.
    """
    favorite_place_id: Any = None
    place_name: Any = None
    favorite_description: Any = None

    model_config = ConfigDict(extra="ignore")


class FavoriteEntry(BaseModel):
    favorite_place_id: Any = None
    place_name: Any = None
    favorite_description: Any = None
    user_id: str


class FavoriteCreated(BaseModel):
    success: bool = True
    id: str
