"""API tests for the FastAPI router."""

import pytest
from fastapi.testclient import TestClient

from mybatis_log_converter import app
from mybatis_log_converter.api import routes


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def test_root(client: TestClient) -> None:
    response = client.get("/api/v1/")

    assert response.status_code == 200
    assert response.json() == {"message": "API is running"}


def test_list_tools(client: TestClient) -> None:
    response = client.get("/api/v1/tools")

    assert response.status_code == 200
    assert response.json() == [
        {
            "name": "mybatis-log-converter",
            "path": "/mybatis-log-converter",
            "description": "MyBatis Log Converter",
            "created_at": "2025-12-31",
            "keywords": ["mybatis", "log", "converter", "sql"],
        }
    ]


def test_convert(client: TestClient, user_lookup_log: str) -> None:
    response = client.post("/api/v1/mybatis/convert", json={"log_text": user_lookup_log})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["sql"] == "SELECT *\nFROM t\nWHERE id = 1\n  AND name = 'John';"
    assert body["statement_count"] == 1
    assert body["display_mode"] == "heuristic"
    assert "duration_s" in body
    assert "error" not in body


def test_convert_blank_log_is_soft_failure(client: TestClient) -> None:
    response = client.post("/api/v1/mybatis/convert", json={"log_text": "   "})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is False
    assert body["sql"] == ""
    assert "error" not in body


def test_convert_without_statements_reports_error(client: TestClient) -> None:
    response = client.post("/api/v1/mybatis/convert", json={"log_text": "nothing to see here"})

    assert response.status_code == 200
    assert response.json()["error"] == "No valid MyBatis log found"


def test_convert_pretty_mode(client: TestClient) -> None:
    payload = {
        "log_text": "Preparing: SELECT a, b FROM t WHERE id = ?\nParameters: 9(Integer)",
        "display_mode": "pretty",
        "dialect": "postgres",
    }

    response = client.post("/api/v1/mybatis/convert", json=payload)

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["dialect"] == "postgres"
    assert "id = 9" in body["sql"]


@pytest.mark.parametrize("payload", [{"log": "x"}, {"log_text": 42}])
def test_convert_requires_log_text(client: TestClient, payload: dict) -> None:
    response = client.post("/api/v1/mybatis/convert", json=payload)

    assert response.status_code == 400
    assert "log_text" in response.json()["error"]


def test_convert_rejects_unknown_display_mode(client: TestClient) -> None:
    response = client.post("/api/v1/mybatis/convert", json={"log_text": "Preparing: SELECT 1", "display_mode": "fancy"})

    assert response.status_code == 400
    assert "fancy" in response.json()["error"]


def test_convert_rejects_oversized_log(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(routes.log_converter, "max_input_chars", 10)

    response = client.post("/api/v1/mybatis/convert", json={"log_text": "Preparing: SELECT * FROM t"})

    assert response.status_code == 413
