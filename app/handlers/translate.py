"""Translate: proxy text to the translation provider."""

import logging

from pydantic import ValidationError

from app.handlers.base import HandlerRequest, HandlerResponse
from app.schemas.translation import TranslationRequest
from app.services.translation_client import TranslationClient
from app.services.upstream import TRANSLATE_EXPOSURE, ErrorExposurePolicy, UpstreamOutcome

logger = logging.getLogger(__name__)

INVALID_RESPONSE = {"error": "Invalid response from the API"}
TRANSLATION_FAILED = {"error": "Translation failed"}


async def translate(
    request: HandlerRequest,
    client: TranslationClient,
    policy: ErrorExposurePolicy = TRANSLATE_EXPOSURE,
) -> HandlerResponse:
    body = request.json_body()
    try:
        translation_request = TranslationRequest(
            text=body.get("text"), target=body.get("target")
        )
    except ValidationError as e:
        # The provider would reject the call anyway; report it as a failed translation.
        logger.warning(f"Translate request rejected: {e.error_count()} invalid fields")
        return HandlerResponse(500, dict(TRANSLATION_FAILED))

    result = await client.translate(translation_request)

    if result.outcome == UpstreamOutcome.SUCCESS:
        return HandlerResponse(200, result.payload.model_dump())
    if result.outcome == UpstreamOutcome.PROVIDER_ERROR:
        return HandlerResponse(
            400, result.payload if policy.expose_provider_payload else dict(INVALID_RESPONSE)
        )
    return HandlerResponse(
        500, result.error if policy.expose_transport_error else dict(TRANSLATION_FAILED)
    )
