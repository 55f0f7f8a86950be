import json
import logging

from app.core.logging import JsonFormatter


def test_json_formatter_includes_extra_fields():
    record = logging.makeLogRecord({
        "name": "app.test",
        "levelname": "INFO",
        "msg": "Request %s done",
        "args": ("abc",),
        "request_id": "abc",
    })
    payload = json.loads(JsonFormatter().format(record))
    assert payload["message"] == "Request abc done"
    assert payload["request_id"] == "abc"
    assert payload["logger"] == "app.test"
