from __future__ import annotations

import asyncio
import logging
import threading
from typing import Any, Dict, List

import httpx
import pytest
from conftest import make_project

from golive_dashboard.catalog import StatusCategory, include_fields_param
from golive_dashboard.config import Settings
from golive_dashboard.ingest import rocketlane as rl_mod
from golive_dashboard.view_model import RegionProjectsController, run_load_region


class _FakeResponse:
    def __init__(self, status_code: int, *, payload: Any = None, text: str = "") -> None:
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self) -> Any:
        if self._payload is None:
            raise ValueError("No JSON payload configured")
        return self._payload


def _capture_requests(monkeypatch: Any, response: _FakeResponse) -> List[Dict[str, Any]]:
    calls: List[Dict[str, Any]] = []

    async def fake_request(
        client: httpx.AsyncClient, method: str, url: str, **kwargs: Any
    ) -> Any:
        calls.append(
            {
                "method": method,
                "url": url,
                "params": dict(kwargs.get("params") or {}),
                "headers": dict(client.headers),
                "thread": threading.current_thread(),
            }
        )
        await asyncio.sleep(0)
        return response

    monkeypatch.setattr(rl_mod, "_request", fake_request)
    return calls


def test_fetch_by_status_sends_expected_request(monkeypatch: Any, settings: Settings) -> None:
    calls = _capture_requests(monkeypatch, _FakeResponse(200, payload={"data": []}))

    ok, _, items = asyncio.run(
        rl_mod.fetch_by_status(settings, StatusCategory.GO_LIVE_READY, "EU")
    )

    assert ok is True
    assert items == []
    assert len(calls) == 1
    call = calls[0]
    assert call["method"] == "GET"
    assert call["url"] == "https://api.rocketlane.com/api/1.0/projects"
    assert call["headers"]["api-key"] == "rl-test-key-123456"
    assert call["headers"]["accept"] == "application/json"
    assert call["params"]["project.field.26538.value"] == "18"
    assert call["params"]["includeFields"] == include_fields_param()
    assert call["params"]["includeFields"].startswith("fields.26526,fields.565384,")


def test_testing_status_uses_filter_value_4(monkeypatch: Any, settings: Settings) -> None:
    calls = _capture_requests(monkeypatch, _FakeResponse(200, payload={"data": []}))

    asyncio.run(rl_mod.fetch_by_status(settings, StatusCategory.TESTING, "EU"))

    assert calls[0]["params"]["project.field.26538.value"] == "4"


def test_fetch_by_status_filters_region_and_simplifies(
    monkeypatch: Any, settings: Settings
) -> None:
    payload = {
        "data": [
            make_project("1", region="EU", status="Go-Live Ready", project_manager="Linus"),
            make_project("2", region="US", status="Go-Live Ready"),
            make_project("3", status="Go-Live Ready"),
        ]
    }
    _capture_requests(monkeypatch, _FakeResponse(200, payload=payload))

    ok, msg, items = asyncio.run(
        rl_mod.fetch_by_status(settings, StatusCategory.GO_LIVE_READY, "EU")
    )

    assert ok is True
    assert "1 projects in EU" in msg
    assert [p.project_id for p in items] == ["1"]
    assert items[0].project_manager == "Linus"
    assert items[0].implementation_manager == ""


@pytest.mark.parametrize(
    "response",
    [
        _FakeResponse(500, text="boom"),
        _FakeResponse(200, payload=None),
        _FakeResponse(200, payload={"data": {"data": []}}),
        _FakeResponse(200, payload={"items": []}),
        _FakeResponse(200, payload=[make_project("1", region="EU")]),
    ],
)
def test_fetch_by_status_returns_empty_list_on_bad_response(
    monkeypatch: Any, settings: Settings, response: _FakeResponse
) -> None:
    _capture_requests(monkeypatch, response)

    ok, msg, items = asyncio.run(rl_mod.fetch_by_status(settings, StatusCategory.TESTING, "EU"))

    assert ok is False
    assert msg == rl_mod.FETCH_ERROR_MESSAGE
    assert items == []


def test_transport_failure_is_logged_without_leaking_api_key(
    monkeypatch: Any, settings: Settings, caplog: pytest.LogCaptureFixture
) -> None:
    async def failing_request(*args: Any, **kwargs: Any) -> Any:
        raise httpx.ConnectError("connection refused for key rl-test-key-123456")

    monkeypatch.setattr(rl_mod, "_request", failing_request)

    with caplog.at_level(logging.ERROR, logger=rl_mod.__name__):
        ok, _, items = asyncio.run(rl_mod.fetch_by_status(settings, StatusCategory.TESTING, "SEA"))

    assert ok is False
    assert items == []
    assert "Error fetching Testing projects for region SEA" in caplog.text
    assert "connection refused" in caplog.text
    assert "rl-test-key-123456" not in caplog.text


def test_missing_api_key_fails_without_request(monkeypatch: Any) -> None:
    calls = _capture_requests(monkeypatch, _FakeResponse(200, payload={"data": []}))

    ok, _, items = asyncio.run(rl_mod.fetch_by_status(Settings(), StatusCategory.TESTING, "EU"))

    assert ok is False
    assert items == []
    assert calls == []


def test_insecure_base_url_is_rejected(monkeypatch: Any) -> None:
    calls = _capture_requests(monkeypatch, _FakeResponse(200, payload={"data": []}))
    settings = Settings(ROCKETLANE_API_KEY="k", ROCKETLANE_BASE_URL="http://api.rocketlane.com")

    with pytest.raises(rl_mod.ProjectFetchError):
        asyncio.run(rl_mod.fetch_projects(settings, StatusCategory.TESTING))
    assert calls == []


def test_count_by_status_ignores_region_and_include_fields(
    monkeypatch: Any, settings: Settings
) -> None:
    payload = {
        "data": [
            make_project("1", region="EU"),
            make_project("2", region="US"),
            make_project("3"),
        ]
    }
    calls = _capture_requests(monkeypatch, _FakeResponse(200, payload=payload))

    ok, _, count = asyncio.run(rl_mod.count_by_status(settings, StatusCategory.GO_LIVE_READY))

    assert ok is True
    assert count == 3
    assert "includeFields" not in calls[0]["params"]


def test_count_by_status_failure_returns_zero(monkeypatch: Any, settings: Settings) -> None:
    _capture_requests(monkeypatch, _FakeResponse(503, text="unavailable"))

    assert asyncio.run(rl_mod.count_by_status(settings, StatusCategory.TESTING)) == (
        False,
        rl_mod.FETCH_ERROR_MESSAGE,
        0,
    )


def test_region_load_runs_both_requests_on_the_event_loop_thread(
    monkeypatch: Any, settings: Settings
) -> None:
    payload = {"data": [make_project("7", region="IN")]}
    calls = _capture_requests(monkeypatch, _FakeResponse(200, payload=payload))
    controller = RegionProjectsController(settings)

    view = run_load_region(controller, "IN")

    assert [p.project_id for p in view.items] == ["7", "7"]
    assert sorted(c["params"]["project.field.26538.value"] for c in calls) == ["18", "4"]
    assert [c["thread"] for c in calls] == [threading.main_thread()] * 2
