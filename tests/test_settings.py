"""Tests for service settings and logging setup."""

from __future__ import annotations

import json
import logging

from fincalc.api.logging import CalculatorJsonFormatter, log_calculation, setup_logging
from fincalc.settings import Settings


def test_defaults():
    settings = Settings()
    assert settings.port == 8000
    assert settings.log_level == "INFO"


def test_env_override(monkeypatch):
    monkeypatch.setenv("FINCALC_PORT", "9100")
    monkeypatch.setenv("FINCALC_LOG_JSON", "false")
    settings = Settings()
    assert settings.port == 9100
    assert settings.log_json is False


def test_setup_logging_installs_one_handler():
    setup_logging("DEBUG", json_output=True)
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, CalculatorJsonFormatter)
    setup_logging("INFO", json_output=False)
    assert not isinstance(logging.getLogger().handlers[0].formatter, CalculatorJsonFormatter)


def test_json_record_fields():
    formatter = CalculatorJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
    record = logging.LogRecord("fincalc.test", logging.INFO, __file__, 1, "Calculation completed", None, None)
    record.calculator = "loan"
    payload = json.loads(formatter.format(record))
    assert payload["service"] == "fincalc"
    assert payload["level"] == "INFO"
    assert payload["calculator"] == "loan"


def test_log_calculation(caplog):
    logger = logging.getLogger("fincalc.test")
    with caplog.at_level(logging.INFO, logger="fincalc.test"):
        log_calculation(logger, "deposit", 1.23456)
    assert caplog.records[-1].calculator == "deposit"
    assert caplog.records[-1].duration_ms == 1.235


def test_logging_configured_on_startup_not_import(monkeypatch):
    from fastapi.testclient import TestClient

    from fincalc.api import server

    calls = []
    monkeypatch.setattr(server, "setup_logging", lambda *args: calls.append(args))

    TestClient(server.app).get("/health")
    assert calls == []

    with TestClient(server.app) as client:
        client.get("/health")
    assert calls == [(server.settings.log_level, server.settings.log_json)]
