import json
import logging

import pytest

from jolt.logging import JoltLogger, LoggerProtocol, LoggingSettings, LogLevel, get_logger


@pytest.fixture
def json_settings():
    return LoggingSettings(json_format=True, include_timestamp=False, include_level=True)


def read_lines(capsys):
    return [json.loads(line) for line in capsys.readouterr().out.splitlines()]


def test_get_logger_returns_jolt_logger():
    logger = get_logger("jolt.test.factory")
    assert isinstance(logger, JoltLogger)
    assert isinstance(logger, LoggerProtocol)
    assert logger.name == "jolt.test.factory"


def test_logger_writes_structured_context(capsys, json_settings):
    logger = JoltLogger("jolt.test.context", settings=json_settings)
    logger.info("Registered service", contract="app.ILogger")
    (line,) = read_lines(capsys)
    assert line["message"] == "Registered service"
    assert line["level"] == "INFO"
    assert line["contract"] == "app.ILogger"


def test_level_filters_messages(capsys, json_settings):
    logger = JoltLogger("jolt.test.level", level=LogLevel.WARNING, settings=json_settings)
    logger.info("hidden")
    logger.warning("shown")
    assert [line["message"] for line in read_lines(capsys)] == ["shown"]
    assert not logger.is_enabled_for(LogLevel.INFO)
    logger.set_level(LogLevel.DEBUG)
    assert logger.is_enabled_for(LogLevel.DEBUG)


def test_bind_adds_context(capsys, json_settings):
    logger = JoltLogger("jolt.test.bind", settings=json_settings)
    bound = logger.bind(provider="main")
    bound.error("failed", contract="x")
    logger.error("unbound")
    first, second = read_lines(capsys)
    assert first["provider"] == "main"
    assert first["contract"] == "x"
    assert "provider" not in second


def test_context_manager_scopes_context(capsys, json_settings):
    logger = JoltLogger("jolt.test.scope", settings=json_settings)
    with logger.context(request="r1"):
        logger.info("inside")
    logger.info("outside")
    inside, outside = read_lines(capsys)
    assert inside["request"] == "r1"
    assert "request" not in outside


def test_exception_info_is_rendered(capsys, json_settings):
    logger = JoltLogger("jolt.test.exc", settings=json_settings)
    try:
        raise RuntimeError("boom")
    except RuntimeError as exc:
        logger.error("failed", exc_info=exc)
    (line,) = read_lines(capsys)
    assert "RuntimeError: boom" in line["exception"]


def test_console_can_be_disabled(capsys):
    settings = LoggingSettings(console_enabled=False)
    logger = JoltLogger("jolt.test.quiet", settings=settings)
    logger.critical("nothing")
    assert capsys.readouterr().out == ""
    assert logging.getLogger("jolt.test.quiet").handlers == []


def test_file_handler(tmp_path):
    path = tmp_path / "jolt.log"
    settings = LoggingSettings(console_enabled=False, file_enabled=True, file_path=str(path))
    logger = JoltLogger("jolt.test.file", settings=settings)
    logger.warning("to file")
    for handler in logging.getLogger("jolt.test.file").handlers:
        handler.flush()
    assert "to file" in path.read_text()
