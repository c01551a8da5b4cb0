from __future__ import annotations

import logging

import pytest
from fastapi.testclient import TestClient

from app.infrastructure.repositories.restaurant_repository import SQLAlchemyRestaurantRepository
from app.main import app


@pytest.fixture
def failing_list(monkeypatch):
    def _boom(self):
        raise RuntimeError("secret connection string")

    monkeypatch.setattr(SQLAlchemyRestaurantRepository, "list", _boom)


def _event(record: logging.LogRecord) -> dict:
    return record.msg if isinstance(record.msg, dict) else {}


def test_unexpected_error_is_generic_500(failing_list):
    client = TestClient(app, raise_server_exceptions=False)
    resp = client.get("/api/restaurants")

    assert resp.status_code == 500
    error = resp.json()["error"]
    assert error["code"] == "INTERNAL_ERROR"
    assert error["message"] == "An unexpected error occurred. Please try again later."
    assert error["path"] == "/api/restaurants"
    assert "secret connection string" not in resp.text


def test_unexpected_error_traceback_is_logged_once(failing_list, caplog):
    client = TestClient(app, raise_server_exceptions=False)
    with caplog.at_level(logging.INFO):
        client.get("/api/restaurants")

    with_traceback = [r for r in caplog.records if _event(r).get("exc_info")]
    assert [_event(r)["event"] for r in with_traceback] == ["Unhandled error"]

    failed = [r for r in caplog.records if _event(r).get("event") == "Request failed"]
    assert len(failed) == 1
    assert "exc_info" not in _event(failed[0])
    assert "process_time_ms" in _event(failed[0])
