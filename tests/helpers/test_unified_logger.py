"""
Tests for the unified logger.
"""

import pytest
from loguru import logger as _logger

from helpers import unified_logger
from helpers.unified_logger import get_client_logger, get_core_logger


@pytest.fixture
def captured():
    messages = []
    sink_id = _logger.add(
        lambda message: messages.append(message.record),
        level="DEBUG",
        format="{message}",
    )
    yield messages
    _logger.remove(sink_id)


def test_component_id_includes_module():
    assert get_client_logger("private").component_id == "CLIENT:DYDX:module=private"
    assert get_client_logger().component_id == "CLIENT:DYDX"
    assert get_core_logger("http").component_id == "CORE:HTTP"


def test_records_are_bound_to_component(captured):
    get_client_logger("keys").info("registered")

    record = captured[-1]
    assert record["message"] == "registered"
    assert record["extra"]["component_id"] == "CLIENT:DYDX:module=keys"


def test_with_context_extends_component(captured):
    base = get_client_logger("private")
    scoped = base.with_context(market="BTC-USD")

    scoped.debug("signed")

    assert scoped.component_id == "CLIENT:DYDX:module=private:market=BTC-USD"
    assert base.context == {"module": "private"}
    assert captured[-1]["extra"]["component_id"] == scoped.component_id


def test_log_with_unknown_level_falls_back_to_info(captured):
    get_core_logger("http").log("hello", level="verbose")
    assert captured[-1]["level"].name == "INFO"


def test_host_handlers_survive_logger_creation(monkeypatch):
    host_records = []
    host_sink = _logger.add(lambda message: host_records.append(message.record), level="DEBUG")
    # force a fresh sink install as on first import
    monkeypatch.setattr(unified_logger, "_sink_ids", {})
    try:
        get_core_logger("http")
        _logger.warning("host record")
    finally:
        _logger.remove(host_sink)
        for sink_id in unified_logger._sink_ids.values():
            _logger.remove(sink_id)

    assert [record["message"] for record in host_records] == ["host record"]


def test_console_sink_keeps_only_component_records():
    assert not unified_logger._source_column({"extra": {}, "name": "app", "function": "main", "line": 1})

    record = {"extra": {"component_id": "CORE:HTTP"}, "name": "networking.http", "function": "send_request", "line": 42}
    assert unified_logger._source_column(record)
    assert record["extra"]["source"].strip() == "networking.http:send_request:42"
