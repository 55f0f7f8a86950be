"""
Integration tests for POST /translateContent
"""
import httpx

from app.config.settings import get_settings


def _ok(request):
    return httpx.Response(200, json={"data": {"translations": [{"translatedText": "こんにちは"}]}})


def test_translate_success(client, stub_translation, provider_requests):
    stub_translation(_ok)

    r = client.post("/translateContent", json={"text": "Hello", "target": "ja"})

    assert r.status_code == 200
    assert r.json() == {"translatedText": "こんにちは"}

    sent = provider_requests[0]
    assert sent.method == "POST"
    assert sent.url.params["source"] == "en"
    assert sent.url.params["target"] == "ja"
    assert sent.url.params["q"] == "Hello"
    assert sent.url.params["key"] == "test-translation-key"


def test_translate_missing_translations_is_invalid_response(client, stub_translation):
    stub_translation(lambda request: httpx.Response(200, json={"data": {}}))

    r = client.post("/translateContent", json={"text": "Hello", "target": "ja"})

    assert r.status_code == 400
    assert r.json() == {"error": "Invalid response from the API"}


def test_translate_network_error_is_generic_failure(client, stub_translation):
    def boom(request):
        raise httpx.ConnectError("connection refused", request=request)

    stub_translation(boom)

    r = client.post("/translateContent", json={"text": "Hello", "target": "ja"})

    assert r.status_code == 500
    assert r.json() == {"error": "Translation failed"}


def test_translate_provider_rejection_does_not_leak_details(client, stub_translation):
    stub_translation(lambda request: httpx.Response(403, json={"error": {"message": "API key not valid"}}))

    r = client.post("/translateContent", json={"text": "Hello", "target": "ja"})

    assert r.status_code == 500
    assert r.json() == {"error": "Translation failed"}
    assert "API key" not in r.text


def test_translate_without_api_key_is_structured_500(client, stub_translation, provider_requests, monkeypatch):
    stub_translation(_ok)
    monkeypatch.setattr(get_settings().translation, "key", None)

    r = client.post("/translateContent", json={"text": "Hello", "target": "ja"})

    assert r.status_code == 500
    assert r.json()["error_code"] == "PROVIDER_NOT_CONFIGURED"
    assert provider_requests == []


def test_translate_rejects_get(client, stub_translation):
    stub_translation(_ok)

    r = client.get("/translateContent")

    assert r.status_code == 405
