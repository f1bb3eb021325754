import json

import pytest
from fastapi.testclient import TestClient

from fieldcheck.config import get_settings
from fieldcheck.main import app
from fieldcheck.validators.schemas import clear_schema_cache


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["name"] == "fieldcheck"


def test_health_reports_loaded_models(client):
    response = client.get("/api/v1/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["models_loaded"] >= 1


def test_list_models(client):
    response = client.get("/api/v1/models")

    assert response.status_code == 200
    [movie] = [m for m in response.json() if m["name"] == "movie"]
    assert movie["declared_fields"] == ["title", "release_date", "genre", "price", "rating"]
    assert "id" in movie["fields"]


def test_get_model_exposes_declarations(client):
    response = client.get("/api/v1/models/movie")

    assert response.status_code == 200
    declarations = {d["name"]: d for d in response.json()["declarations"]}
    assert declarations["price"]["constraints"] == [
        {"kind": "range", "low": 1, "high": 100, "error_message": None}
    ]
    assert declarations["release_date"]["constraints"][1]["low"] == "1900-01-01"


def test_unknown_model_is_404(client):
    assert client.get("/api/v1/models/spaceship").status_code == 404
    response = client.post("/api/v1/models/spaceship/records", json={"record": {}})
    assert response.status_code == 404


def test_validate_endpoint_returns_report(client, valid_movie):
    response = client.post(
        "/api/v1/models/movie/validate",
        json={"record": dict(valid_movie, genre="comedy")},
    )

    assert response.status_code == 200
    report = response.json()
    assert report["valid"] is False
    assert report["violations"] == [
        {
            "field": "genre",
            "kind": "regular_expression",
            "message": "The field Genre must match the regular expression '^[A-Z]+[a-zA-Z\\s]*$'.",
        }
    ]


def test_validate_endpoint_does_not_store(client, valid_movie):
    client.post("/api/v1/models/movie/validate", json={"record": valid_movie})

    assert client.get("/api/v1/models/movie/records").json()["count"] == 0


def test_valid_submission_is_created(client, valid_movie):
    response = client.post("/api/v1/models/movie/records", json={"record": valid_movie})

    assert response.status_code == 201
    body = response.json()
    assert body["model"] == "movie"
    assert body["record"] == valid_movie

    stored = client.get("/api/v1/models/movie/records").json()
    assert stored["count"] == 1
    assert stored["records"][body["record_id"]] == valid_movie


def test_invalid_submission_is_rejected_with_annotated_input(client, valid_movie):
    submitted = dict(valid_movie, title="It", rating=None, price="free")

    response = client.post("/api/v1/models/movie/records", json={"record": submitted})

    assert response.status_code == 422
    body = response.json()
    assert body["error"] == "validation_failed"
    assert body["record"] == submitted
    assert [(v["field"], v["kind"]) for v in body["violations"]] == [
        ("title", "string_length"),
        ("price", "range"),
        ("rating", "required"),
    ]
    assert body["errors"]["rating"] == ["The Rating field is required."]
    assert client.get("/api/v1/models/movie/records").json()["count"] == 0


def test_missing_record_body_is_rejected(client):
    response = client.post("/api/v1/models/movie/records", json={})
    assert response.status_code == 422


def test_broken_schema_file_is_a_server_fault(monkeypatch, tmp_path, valid_movie):
    with TestClient(app) as client:
        (tmp_path / "broken.json").write_text(json.dumps({"declarations": []}), encoding="utf-8")
        monkeypatch.setenv("SCHEMA_DIR", str(tmp_path))
        get_settings.cache_clear()
        clear_schema_cache()

        response = client.post("/api/v1/models/movie/validate", json={"record": valid_movie})

    assert response.status_code == 500
    assert response.json()["error"] == "configuration_error"
