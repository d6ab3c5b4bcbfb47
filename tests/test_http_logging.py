import json
import logging

from fastapi.testclient import TestClient

from forminator_field_widths.api.http_logging import _redact
from forminator_field_widths.api.main import create_app


def test_redact_nested_secrets():
    assert _redact({"token": "t", "widths": {"password": "p", "fields": [{"secret": 1}]}}) == {
        "token": "***",
        "widths": {"password": "***", "fields": [{"secret": "***"}]},
    }


def test_request_logged_as_json_line(ctx, auth, caplog):
    ctx.settings.http_log = True
    client = TestClient(create_app(ctx=ctx))
    with caplog.at_level(logging.INFO, logger="forminator_field_widths.api.http_logging"):
        client.put("/v1/forms/42/widths", json={"fields": {"a": {"width": 50}}}, headers=auth)

    records = [json.loads(r.getMessage()) for r in caplog.records if r.name.endswith("http_logging")]
    assert records[-1]["method"] == "PUT"
    assert records[-1]["form_id"] == 42
    assert records[-1]["status"] == 200
    assert records[-1]["request"]["body"]["fields"]["a"]["width"] == 50
