import logging

import structlog

from config.settings.logging import build_logging_config, configure_logging, error_code_mapper
from src.core.error_codes import ErrorCode


def test_error_code_mapper_renders_plain_value():
    event = error_code_mapper(None, "info", {"event": "x", "code": ErrorCode.NOT_JSON})
    assert event["code"] == "NOT_JSON"
    assert type(event["code"]) is str


def test_error_code_mapper_leaves_other_events_alone():
    assert error_code_mapper(None, "info", {"event": "x"}) == {"event": "x"}


def test_build_logging_config_uses_level():
    config = build_logging_config("DEBUG")
    assert config["root"]["level"] == "DEBUG"
    assert config["loggers"]["src"]["level"] == "DEBUG"
    assert config["formatters"]["logfmt_formatter"]["()"] is structlog.stdlib.ProcessorFormatter


def test_configure_logging_sets_levels():
    configure_logging("warning")
    assert logging.getLogger("src").level == logging.WARNING
    assert structlog.is_configured()
