import httpx
import pytest

from app.config.settings import get_settings
from app.core.exceptions import ProviderNotConfiguredError
from app.schemas.translation import TranslationRequest
from app.services.places_client import PlacesClient
from app.services.translation_client import TranslationClient
from app.services.upstream import UpstreamOutcome


def _translation_client(handler):
    return TranslationClient(transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_translation_success():
    client = _translation_client(
        lambda r: httpx.Response(200, json={"data": {"translations": [{"translatedText": "Bonjour"}]}})
    )
    result = await client.translate(TranslationRequest(text="Hello", target="fr"))
    assert result.ok
    assert result.payload.translatedText == "Bonjour"


@pytest.mark.asyncio
async def test_translation_empty_list_is_provider_error():
    client = _translation_client(lambda r: httpx.Response(200, json={"data": {"translations": []}}))
    result = await client.translate(TranslationRequest(text="Hello", target="fr"))
    assert result.outcome == UpstreamOutcome.PROVIDER_ERROR


@pytest.mark.asyncio
async def test_translation_undecodable_body_is_transport_failure():
    client = _translation_client(lambda r: httpx.Response(200, text="<html>oops</html>"))
    result = await client.translate(TranslationRequest(text="Hello", target="fr"))
    assert result.outcome == UpstreamOutcome.TRANSPORT_FAILURE


@pytest.mark.asyncio
async def test_translation_requires_key(monkeypatch):
    monkeypatch.setattr(get_settings().translation, "key", "")
    client = _translation_client(lambda r: httpx.Response(200, json={}))
    with pytest.raises(ProviderNotConfiguredError):
        await client.translate(TranslationRequest(text="Hello", target="fr"))


@pytest.mark.asyncio
async def test_translation_reads_key_per_call(monkeypatch):
    seen = []

    def handler(request):
        seen.append(request.url.params["key"])
        return httpx.Response(200, json={"data": {"translations": [{"translatedText": "x"}]}})

    client = _translation_client(handler)
    await client.translate(TranslationRequest(text="a", target="fr"))
    monkeypatch.setattr(get_settings().translation, "key", "rotated-key")
    await client.translate(TranslationRequest(text="a", target="fr"))

    assert seen == ["test-translation-key", "rotated-key"]


def test_places_default_query():
    query = PlacesClient().default_query()
    assert query.latitude == 35.6895
    assert query.longitude == 139.6917
    assert query.radius_m == 50


def test_places_zero_coordinates_are_not_defaulted():
    query = PlacesClient().default_query(latitude=0.0, longitude=0.0)
    assert query.location == "0.0,0.0"


@pytest.mark.asyncio
async def test_places_non_dict_body_is_provider_error():
    client = PlacesClient(transport=httpx.MockTransport(lambda r: httpx.Response(200, json=[1, 2])))
    result = await client.search_nearby(client.default_query())
    assert result.outcome == UpstreamOutcome.PROVIDER_ERROR
    assert result.payload == [1, 2]


@pytest.mark.asyncio
async def test_places_requires_key(monkeypatch):
    monkeypatch.setattr(get_settings().places, "key", None)
    client = PlacesClient(transport=httpx.MockTransport(lambda r: httpx.Response(200, json={})))
    with pytest.raises(ProviderNotConfiguredError):
        await client.search_nearby(client.default_query())
