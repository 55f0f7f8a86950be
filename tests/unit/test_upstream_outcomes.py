import httpx

from app.services.upstream import (
    PLACES_EXPOSURE,
    TRANSLATE_EXPOSURE,
    UpstreamOutcome,
    UpstreamResult,
    describe_exception,
)


def test_describe_exception_masks_secrets():
    request = httpx.Request("GET", "https://maps.example.com/search?key=s3cret&radius=50")
    exc = httpx.ConnectError("failed to reach https://maps.example.com/search?key=s3cret", request=request)

    error = describe_exception(exc, secrets=["s3cret"])

    assert error["name"] == "ConnectError"
    assert "s3cret" not in error["message"]
    assert "s3cret" not in error["url"]


def test_describe_http_status_error_includes_body():
    request = httpx.Request("GET", "https://maps.example.com/search")
    response = httpx.Response(503, json={"status": "UNAVAILABLE"}, request=request)
    exc = httpx.HTTPStatusError("unavailable", request=request, response=response)

    error = describe_exception(exc)

    assert error["status_code"] == 503
    assert error["body"] == {"status": "UNAVAILABLE"}


def test_describe_plain_exception():
    assert describe_exception(RuntimeError("boom")) == {"name": "RuntimeError", "message": "boom"}


def test_result_constructors():
    assert UpstreamResult.success([1]).ok
    assert UpstreamResult.provider_error({"status": "DENIED"}).outcome == UpstreamOutcome.PROVIDER_ERROR
    failure = UpstreamResult.transport_failure(ValueError("bad json"))
    assert failure.outcome == UpstreamOutcome.TRANSPORT_FAILURE
    assert failure.error["name"] == "ValueError"


def test_exposure_policies_differ_per_endpoint():
    assert not TRANSLATE_EXPOSURE.expose_provider_payload
    assert not TRANSLATE_EXPOSURE.expose_transport_error
    assert PLACES_EXPOSURE.expose_provider_payload
    assert PLACES_EXPOSURE.expose_transport_error
