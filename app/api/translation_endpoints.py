"""Translation endpoint."""
from fastapi import APIRouter, Depends, Request

from app.api.adapters import to_handler_request, to_response
from app.core.dependencies import get_translator
from app.handlers import translate
from app.services.translation_client import TranslationClient

router = APIRouter(tags=["translation"])


@router.post("/translateContent")
async def translate_content(
    request: Request,
    client: TranslationClient = Depends(get_translator),
):
    """
    Translate English text into the requested language.

    - **text**: source text
    - **target**: target language code
    """
    result = await translate(await to_handler_request(request), client)
    return to_response(result)
