"""Tests for configuration and logging setup."""

import logging
from decimal import Decimal

from loguru import logger

from taxengine.config.settings import Settings
from taxengine.core.logging_config import InterceptHandler, setup_logging
from taxengine.core.money import round2, to_decimal
from taxengine.domain.services.jurisdiction import resolve_state_code


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


def test_defaults(monkeypatch):
    for name in ("LOG_LEVEL", "VERIFY_GSTIN_CHECKSUM", "B2CL_THRESHOLD"):
        monkeypatch.delenv(name, raising=False)
    s = Settings(_env_file=None)
    assert s.LOG_LEVEL == "INFO"
    assert s.VERIFY_GSTIN_CHECKSUM is False
    assert s.B2CL_THRESHOLD == Decimal("250000")


def test_env_override(monkeypatch):
    monkeypatch.setenv("VERIFY_GSTIN_CHECKSUM", "true")
    monkeypatch.setenv("b2cl_threshold", "100000")
    s = Settings(_env_file=None)
    assert s.VERIFY_GSTIN_CHECKSUM is True
    assert s.B2CL_THRESHOLD == Decimal("100000")


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def test_stdlib_logs_reach_loguru():
    setup_logging("DEBUG")
    messages: list[str] = []
    sink_id = logger.add(lambda msg: messages.append(msg.record["message"]), level="DEBUG")
    try:
        assert any(isinstance(h, InterceptHandler) for h in logging.getLogger().handlers)
        logging.getLogger("gst_calculator").info("hello from stdlib")
    finally:
        logger.remove(sink_id)
    assert "hello from stdlib" in messages


# ---------------------------------------------------------------------------
# Money
# ---------------------------------------------------------------------------


def test_to_decimal_goes_through_str():
    assert to_decimal(0.1) == Decimal("0.1")
    assert to_decimal(None) == Decimal("0")
    assert to_decimal(" 12.50 ") == Decimal("12.50")


def test_round2_half_up():
    assert round2("2.675") == Decimal("2.68")
    assert round2("-2.675") == Decimal("-2.68")
    assert round2(Decimal("0.005")) == Decimal("0.01")


def test_unknown_state_logs_warning():
    setup_logging("DEBUG")
    records: list[tuple[str, str]] = []
    sink_id = logger.add(lambda msg: records.append((msg.record["level"].name, msg.record["message"])), level="DEBUG")
    try:
        assert resolve_state_code("Atlantis") == "00"
        assert resolve_state_code("") == "00"
    finally:
        logger.remove(sink_id)
    assert ("WARNING", "Unknown state 'Atlantis', using code 00") in records
    assert ("DEBUG", "No state given, using code 00") in records
