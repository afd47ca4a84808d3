"""Tests for app wiring: health, CORS, logging setup."""

import logging
from unittest.mock import patch

from app.core.logging import LOG_FORMAT, configure_logging
from app.main import create_app


class TestApp:
    def test_health(self, client) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"ok": True}

    def test_settings_attached_once(self, settings) -> None:
        app = create_app(settings)
        assert app.state.settings is settings

    def test_cors_allows_any_origin(self, client) -> None:
        response = client.get("/health", headers={"Origin": "http://elsewhere.test"})
        assert response.headers["access-control-allow-origin"] == "*"
        assert "access-control-allow-credentials" not in response.headers

    def test_cors_preflight(self, client) -> None:
        response = client.options(
            "/events",
            headers={
                "Origin": "http://elsewhere.test",
                "Access-Control-Request-Method": "GET",
            },
        )
        assert response.status_code == 200
        assert "GET" in response.headers["access-control-allow-methods"]

    def test_unknown_route(self, client) -> None:
        assert client.get("/calendar").status_code == 404


class TestConfigureLogging:
    def test_uses_basic_config(self) -> None:
        with patch("app.core.logging.logging.basicConfig") as basic_config:
            configure_logging("debug")
        basic_config.assert_called_once_with(level="DEBUG", format=LOG_FORMAT)

    def test_keeps_existing_handlers(self) -> None:
        root = logging.getLogger()
        handler = logging.NullHandler()
        root.addHandler(handler)
        try:
            before = list(root.handlers)
            configure_logging("info")
            configure_logging("info")
            assert root.handlers == before
        finally:
            root.removeHandler(handler)
