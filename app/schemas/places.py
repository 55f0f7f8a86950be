from pydantic import BaseModel, Field
from typing import Any, Dict, List


class PlaceQuery(BaseModel):
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    radius_m: int = Field(ge=1)

    @property
    def location(self) -> str:
        return f"{self.latitude},{self.longitude}"


# Provider-defined place records, passed through as-is
PlaceResult = List[Dict[str, Any]]
