from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from mcp_demo import web_server
from mcp_demo.config import Settings


@pytest.fixture
def client():
    return TestClient(web_server.create_app(Settings(mode="http")))


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_index_page(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "translateText" in resp.text


def test_jsonrpc_over_http(client):
    resp = client.post("/mcp", json={"jsonrpc": "2.0", "id": 1, "method": "initialize"})
    assert resp.status_code == 200
    assert resp.json() == {"jsonrpc": "2.0", "id": 1, "result": {"capabilities": {}}}


def test_execute_over_http(client):
    resp = client.post("/mcp", json={
        "mcp_version": "0.1.0", "id": "h1", "method": "execute",
        "toolName": "addNumbers", "inputs": {"number1": 42, "number2": 58},
    })
    assert resp.status_code == 200
    assert resp.json()["result"] == {"sum": 100}


def test_logical_errors_are_in_band(client):
    resp = client.post("/mcp", json={"mcp_version": "0.1.0", "id": "h2", "method": "execute", "toolName": "nope"})
    assert resp.status_code == 200
    assert resp.json()["error"]["code"] == "ToolNotFound"

    resp = client.post("/mcp", json={"jsonrpc": "2.0", "id": 2, "method": "tools/list"})
    assert resp.status_code == 200
    assert resp.json()["error"]["code"] == -32601


@pytest.mark.parametrize("body", [b"{not json", b"", b"{\"id\": NaN, \"method\": \"discover\"}"])
def test_malformed_body(client, body):
    resp = client.post("/mcp", content=body, headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "BadRequest"


def test_internal_error(client, monkeypatch):
    def explode(payload):
        raise RuntimeError("boom")

    monkeypatch.setattr(web_server, "dispatch", explode)
    resp = client.post("/mcp", json={"id": 1, "method": "discover"})
    assert resp.status_code == 500
    assert resp.json() == {"error": {"code": "InternalServerError", "message": "boom"}}


def test_cors_toggle():
    origin = {"Origin": "http://example.com"}
    plain = TestClient(web_server.create_app(Settings(mode="http")))
    assert "access-control-allow-origin" not in plain.get("/health", headers=origin).headers

    cors = TestClient(web_server.create_app(Settings(mode="http", enable_cors=True)))
    assert cors.get("/health", headers=origin).headers["access-control-allow-origin"] == "*"


def test_run_uses_settings(monkeypatch):
    calls = {}

    def fake_run(app, host, port, log_level):
        calls.update(host=host, port=port, log_level=log_level)

    monkeypatch.setattr(web_server.uvicorn, "run", fake_run)
    web_server.run(Settings(mode="http", http_host="127.0.0.1", http_port=8123, log_level="warn"))
    assert calls == {"host": "127.0.0.1", "port": 8123, "log_level": 30}


@pytest.mark.parametrize("body", [b"[1, 2]", b"42", b"null", b"\"discover\""])
def test_non_object_body_is_forwarded(client, body):
    resp = client.post("/mcp", content=body, headers={"Content-Type": "application/json"})
    assert resp.status_code == 200
    assert resp.json() == {
        "mcp_version": "0.1.0",
        "id": None,
        "error": {"code": "MethodNotFound", "message": "Unknown custom method: None"},
    }


def test_overflowed_sum_over_http(client):
    resp = client.post("/mcp", json={
        "mcp_version": "0.1.0", "id": "o", "method": "execute",
        "toolName": "addNumbers", "inputs": {"number1": 1e308, "number2": 1e308},
    })
    assert resp.status_code == 200
    assert resp.json()["result"] == {"sum": None}


def test_unserializable_response_gets_error_envelope(client, monkeypatch):
    monkeypatch.setattr(web_server, "dispatch", lambda payload: {"result": float("inf")})
    resp = client.post("/mcp", json={"id": 1, "method": "discover"})
    assert resp.status_code == 500
    assert resp.json()["error"]["code"] == "InternalServerError"
