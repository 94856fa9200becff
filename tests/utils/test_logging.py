import logging

from uowkit.utils.logging import (
    get_correlation_id,
    get_logger,
    resolve_slow_query_ms,
    set_correlation_id,
    time_call,
)


def test_correlation_id_round_trip():
    token = set_correlation_id("test-token")
    assert token == "test-token"
    assert get_correlation_id() == "test-token"


def test_loggers_live_under_package_namespace():
    assert get_logger("tests.logging").name == "uowkit.tests.logging"
    assert logging.getLogger("uowkit").handlers


def test_time_call_logs_duration(caplog):
    logger = get_logger("tests.logging")
    caplog.set_level(logging.DEBUG, logger=logger.name)
    with time_call("unit-test", logger, threshold_ms=10_000):
        pass
    records = [record for record in caplog.records if record.name == logger.name]
    assert any("unit-test took" in record.message for record in records)
    assert records[-1].levelno == logging.DEBUG


def test_time_call_escalates_slow_operations(caplog):
    logger = get_logger("tests.logging")
    caplog.set_level(logging.DEBUG, logger=logger.name)
    with time_call("slow-op", logger, threshold_ms=0):
        pass
    assert caplog.records[-1].levelno == logging.WARNING


def test_slow_query_threshold_resolution(monkeypatch):
    monkeypatch.delenv("UOWKIT_SLOW_QUERY_MS", raising=False)
    assert resolve_slow_query_ms(default=100) == 100
    monkeypatch.setenv("UOWKIT_SLOW_QUERY_MS", "250")
    assert resolve_slow_query_ms(default=100) == 250
    assert resolve_slow_query_ms(default=100, override=5) == 5
    monkeypatch.setenv("UOWKIT_SLOW_QUERY_MS", "fast")
    assert resolve_slow_query_ms(default=100) == 100
