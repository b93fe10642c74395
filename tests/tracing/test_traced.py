"""Tests for the traced decorator."""

import logging

from conftest import Counter, counter_update

from updatelift import Effects, Update, UpdateWithOut, pair, traced
from updatelift.config import ComposerSettings
from updatelift.tracing import LOGGER_NAME, describe_result, setup_logger

TRACE_ON = ComposerSettings(trace_updates=True, log_level="DEBUG")
TRACE_OFF = ComposerSettings(trace_updates=False, log_level="DEBUG")


def test_traced_returns_result_unchanged():
    wrapped = traced(counter_update, settings=TRACE_ON)

    assert wrapped("inc", Counter(0)) == counter_update("inc", Counter(0))


def test_traced_logs_message_type_and_effect_count(caplog):
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)

    @traced(name="counter", settings=TRACE_ON)
    def update(msg, counter):
        return pair.lift(lambda c: c, lambda new, old: new, lambda e: e, counter_update, msg, counter)

    update("twice", Counter(0))

    assert "counter <- str: effects=2" in caplog.text


def test_traced_silent_when_disabled(caplog):
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)

    traced(counter_update, settings=TRACE_OFF)("inc", Counter(0))

    assert caplog.records == []


def test_traced_reads_environment_when_no_settings(fresh_settings, monkeypatch, caplog):
    monkeypatch.setenv("UPDATELIFT_TRACE_UPDATES", "1")
    monkeypatch.setenv("UPDATELIFT_LOG_LEVEL", "DEBUG")
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)

    traced(counter_update)("inc", Counter(0))

    assert "counter_update <- str" in caplog.text


def test_traced_keeps_wrapped_name():
    assert traced(counter_update).__name__ == "counter_update"


def test_describe_result_shapes():
    assert describe_result(Update("m", Effects.of(1, 2))) == "effects=2"
    assert describe_result(UpdateWithOut("m", Effects.none(), None)) == "effects=0 out=none"
    assert describe_result(UpdateWithOut("m", Effects.none(), ValueError())) == "effects=0 out=ValueError"
    assert describe_result(("m", [], None)) == "positional result with 3 slots"
    assert describe_result("m") == "unrecognized result str"


def test_describe_result_with_items():
    assert describe_result(Update("m", Effects.of("a")), include_items=True) == "effects=1 ['a']"


def test_setup_logger_attaches_single_handler():
    log = setup_logger(TRACE_ON)
    handlers = list(log.handlers)

    setup_logger(TRACE_ON)

    assert log.handlers == handlers
    assert log.level == logging.DEBUG


def test_traced_attaches_no_handlers(caplog):
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
    log = logging.getLogger(LOGGER_NAME)
    before = list(log.handlers)

    traced(counter_update, settings=TRACE_ON)("inc", Counter(0))

    assert log.handlers == before
    assert "counter_update <- str" in caplog.text
