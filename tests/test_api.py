"""Tests for the FastAPI application."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from api.main import app


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def test_root(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["docs"] == "/docs"


def test_calculate_valid_date(client: TestClient) -> None:
    response = client.get("/api/numerology", params={"d": "1981-12-07"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["success"] is True
    assert payload["date"] == "1981/12/07"
    assert payload["query"] == "d=1981%2F12%2F07"
    assert payload["summary"] == {"postnatal": "29", "master": "11", "life": "2"}
    assert payload["data"]["circles"]["1"] == 3
    assert payload["data"]["square_at"] == 2
    assert sorted(payload["data"]["line_digits"]) == [0, 1, 2, 7, 8, 9]
    assert payload["born_digits"] == [1, 2, 7, 8, 9]
    assert payload["risk_items"][0] == {"number": 1, "score": 7}
    active = [line["code"] for line in payload["lines"] if line["active"]]
    assert active == ["789"]


def test_calculate_invalid_date_returns_placeholders(client: TestClient) -> None:
    response = client.get("/api/numerology", params={"d": "08190102"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["success"] is False
    assert payload["date"] == "08190102"
    assert payload["data"] is None
    assert payload["summary"] == {"postnatal": "-", "master": "-", "life": "-"}
    assert all(not line["active"] for line in payload["lines"])


def test_calculate_without_date(client: TestClient) -> None:
    payload = client.get("/api/numerology").json()

    assert payload["success"] is False
    assert payload["query"] == ""


def test_calculate_selection(client: TestClient) -> None:
    payload = client.get(
        "/api/numerology/select", params={"year": 1981, "month": 12, "day": 7}
    ).json()

    assert payload["success"] is True
    assert payload["date"] == "1981/12/07"
    assert payload["max_day"] == 31


def test_calculate_selection_drops_missing_day(client: TestClient) -> None:
    payload = client.get(
        "/api/numerology/select", params={"year": 2023, "month": 2, "day": 30}
    ).json()

    assert payload["success"] is False
    assert payload["max_day"] == 28


def test_report_endpoint(client: TestClient) -> None:
    response = client.get("/api/numerology/report", params={"d": "19811207"})

    assert response.status_code == 200
    assert "Главное число: 2" in response.text


def test_visual_endpoint(client: TestClient) -> None:
    response = client.get("/api/numerology/visual", params={"d": "1981/12/07"})

    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert response.content.startswith(b"\x89PNG")


def test_guides_endpoint(client: TestClient) -> None:
    payload = client.get("/api/guides").json()

    assert sorted(payload["numbers"]) == [str(number) for number in range(1, 10)]
    assert payload["lines"][0] == {"code": "123", "name": "Линия творчества"}


def test_calculate_selection_with_month_out_of_range(client: TestClient) -> None:
    response = client.get(
        "/api/numerology/select", params={"year": 1981, "month": 13, "day": 7}
    )

    assert response.status_code == 200
    payload = response.json()
    assert payload["success"] is False
    assert payload["date"] == "1981/13/07"
    assert payload["max_day"] == 31
