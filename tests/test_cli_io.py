import io
import json

from core.desktop.devtools.interface.cli_io import build_response, structured_error, structured_response


def test_build_response_omits_empty_summary():
    body = build_response("list", "OK", "done", {"a": 1})
    assert set(body) == {"command", "status", "message", "timestamp", "payload"}
    assert body["payload"] == {"a": 1}
    assert "summary" in build_response("list", "OK", "", summary="3 todo(s)")


def test_structured_response_writes_json():
    out = io.StringIO()
    rc = structured_response("add", message="Todo 1 created", payload={"todo": {"title": "Café"}}, stream=out)
    assert rc == 0
    body = json.loads(out.getvalue())
    assert body["command"] == "add"
    assert body["payload"]["todo"]["title"] == "Café"
    assert "Café" in out.getvalue()


def test_structured_error(capsys):
    assert structured_error("delete", "Todo 9 not found") == 1
    body = json.loads(capsys.readouterr().out)
    assert body["status"] == "ERROR"
    assert body["payload"] == {}
