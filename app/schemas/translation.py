from pydantic import BaseModel, ConfigDict, Field


class TranslationRequest(BaseModel):
    text: str
    target_language: str = Field(alias="target")

    model_config = ConfigDict(populate_by_name=True)


class TranslationResult(BaseModel):
    translatedText: str
