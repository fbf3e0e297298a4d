import logging

from fastapi.testclient import TestClient

from contract_forge import main
from contract_forge.main import app


def test_health_ok(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "OK", "message": "Contract Forge Backend is running"}


def test_health_ok_without_openai_key(client, generator):
    assert not generator.configured
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "OK"


def test_list_contracts_is_empty(client):
    r = client.get("/api/contracts")
    assert r.status_code == 200
    assert r.json() == {"contracts": []}


def test_create_contract_placeholder(client):
    r = client.post("/api/contracts")
    assert r.status_code == 200
    assert r.json() == {"message": "Contract creation endpoint"}


def test_non_object_body_is_client_error(client):
    r = client.post("/api/generate-contract", json=["not", "an", "object"])
    assert r.status_code == 400
    assert r.json()["error"] == "Invalid request body"


def run_startup(monkeypatch, caplog, api_key):
    monkeypatch.setattr(main.settings, "OPENAI_API_KEY", api_key)
    caplog.set_level(logging.INFO, logger="contract_forge.main")
    with TestClient(app):
        pass
    return [record.getMessage() for record in caplog.records if record.name == "contract_forge.main"]


def test_startup_logs_endpoints(monkeypatch, caplog):
    messages = run_startup(monkeypatch, caplog, api_key="sk-test")
    port = main.settings.PORT
    assert f"🚀 Backend server running on port {port}" in messages
    assert any("/health" in m for m in messages)
    assert any("POST http://localhost" in m and "/api/generate-contract" in m for m in messages)
    assert any("POST http://localhost" in m and "/api/compile-contract" in m for m in messages)
    assert not any("AI features will not work" in m for m in messages)


def test_startup_warns_without_openai_key(monkeypatch, caplog):
    messages = run_startup(monkeypatch, caplog, api_key=None)
    assert any("AI features will not work" in m for m in messages)
