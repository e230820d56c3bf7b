from __future__ import annotations

import logging

import pytest

from calcdi.infrastructure import logging_config
from calcdi.infrastructure.logging_config import ContextualFormatter, configure_logging
from calcdi.infrastructure.settings import get_settings


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="calcdi.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Wired %s",
        args=("calc",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_appends_known_extra_keys() -> None:
    formatter = ContextualFormatter(fmt="%(message)s")

    output = formatter.format(_record(step="construction", role="provider"))

    assert output == "Wired calc | step=construction role=provider"


def test_skips_none_and_unknown_keys() -> None:
    formatter = ContextualFormatter(fmt="%(message)s")

    output = formatter.format(_record(qualifier=None, unrelated="x"))

    assert output == "Wired calc"


def test_custom_extra_keys() -> None:
    formatter = ContextualFormatter(fmt="%(message)s", context_keys=["unrelated"])

    output = formatter.format(_record(unrelated="x", step="construction"))

    assert output == "Wired calc | unrelated=x"


@pytest.fixture()
def fresh_logging(monkeypatch):
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    monkeypatch.setattr(logging_config, "_configured", False)
    get_settings.cache_clear()
    yield root
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
    get_settings.cache_clear()


def test_configure_uses_settings_level(monkeypatch, fresh_logging) -> None:
    monkeypatch.setenv("CALCDI_LOG_LEVEL", "error")

    configure_logging()

    assert fresh_logging.level == logging.ERROR
    assert isinstance(fresh_logging.handlers[0].formatter, ContextualFormatter)


def test_explicit_level_reconfigures(fresh_logging) -> None:
    configure_logging("WARNING")
    configure_logging("DEBUG")

    assert fresh_logging.level == logging.DEBUG


def test_second_call_without_level_keeps_first(fresh_logging) -> None:
    configure_logging("INFO")
    configure_logging()

    assert fresh_logging.level == logging.INFO
