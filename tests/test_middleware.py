"""
Backlog API - Middleware & Entry Point Tests
============================================

What:  Access logging, request ID handling, and the application factory
       entry point.
"""

import importlib
import logging

import pytest

from backlog_api.middleware.logging import level_for_status
from backlog_api.middleware.request_id import resolve_request_id


class TestAccessLog:

    def test_level_follows_status_class(self):
        assert level_for_status(200) == logging.INFO
        assert level_for_status(201) == logging.INFO
        assert level_for_status(404) == logging.WARNING
        assert level_for_status(400) == logging.WARNING
        assert level_for_status(500) == logging.ERROR

    @pytest.mark.asyncio
    async def test_one_line_per_request(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="backlog_api.access")

        await test_client.get("/backlog-items", headers={"X-Request-ID": "trace-1"})

        lines = [r for r in caplog.records if r.name == "backlog_api.access"]
        assert len(lines) == 1
        assert lines[0].levelno == logging.INFO
        assert "GET /backlog-items -> 200" in lines[0].getMessage()
        assert "rid=trace-1" in lines[0].getMessage()

    @pytest.mark.asyncio
    async def test_not_found_logged_as_warning(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="backlog_api.access")

        await test_client.get("/backlog-items/00000000-0000-0000-0000-000000000000")

        lines = [r for r in caplog.records if r.name == "backlog_api.access"]
        assert [r.levelno for r in lines] == [logging.WARNING]

    @pytest.mark.asyncio
    async def test_health_is_not_logged(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="backlog_api.access")

        await test_client.get("/health")

        assert not [r for r in caplog.records if r.name == "backlog_api.access"]


class TestRequestId:

    def test_client_id_kept(self):
        assert resolve_request_id("abc-123.x_y") == "abc-123.x_y"

    def test_missing_id_generated(self):
        rid = resolve_request_id(None)
        assert len(rid) == 8
        int(rid, 16)

    @pytest.mark.parametrize("header", ["", "has space", "x" * 65, "line\nbreak"])
    def test_unusable_client_id_replaced(self, header):
        rid = resolve_request_id(header)
        assert rid != header
        assert len(rid) == 8

    @pytest.mark.asyncio
    async def test_oversized_header_not_echoed(self, test_client):
        response = await test_client.get("/backlog-items", headers={"X-Request-ID": "x" * 200})

        assert response.headers["X-Request-ID"] != "x" * 200


class TestEntryPoint:

    def test_importing_main_builds_no_app(self):
        main = importlib.import_module("backlog_api.main")

        assert not hasattr(main, "app")
        assert callable(main.create_app)

    def test_server_uses_factory(self, monkeypatch):
        from backlog_api import __main__ as entry

        calls = []
        monkeypatch.setattr(entry.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))

        entry.main()

        assert len(calls) == 1
        args, kwargs = calls[0]
        assert args == ("backlog_api.main:create_app",)
        assert kwargs["factory"] is True
