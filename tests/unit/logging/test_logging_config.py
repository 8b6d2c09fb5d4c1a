import pytest

from jolt.logging import LoggingSettings, LogLevel


@pytest.mark.parametrize(
    "env,expected",
    [
        ({}, LoggingSettings()),
        ({"LEVEL": "debug"}, LoggingSettings(level="DEBUG")),
        ({"JSON_FORMAT": "true"}, LoggingSettings(json_format=True)),
        ({"INCLUDE_TIMESTAMP": "false"}, LoggingSettings(include_timestamp=False)),
        ({"INCLUDE_LEVEL": "false"}, LoggingSettings(include_level=False)),
        ({"CONSOLE_ENABLED": "false"}, LoggingSettings(console_enabled=False)),
        (
            {"FILE_ENABLED": "true", "FILE_PATH": "/tmp/jolt.log"},
            LoggingSettings(file_enabled=True, file_path="/tmp/jolt.log"),
        ),
    ],
)
def test_logging_settings_env(monkeypatch, env, expected):
    for k, v in env.items():
        monkeypatch.setenv(f"JOLT_LOGGING_{k}", v)
    settings = LoggingSettings.load()
    for field in LoggingSettings.model_fields:
        assert getattr(settings, field) == getattr(expected, field)


def test_logging_settings_type_validation():
    with pytest.raises(ValueError):
        LoggingSettings.model_validate({"json_format": "notabool"})
    with pytest.raises(ValueError):
        LoggingSettings.model_validate({"level": 10})
    with pytest.raises(ValueError):
        LoggingSettings(level="LOUD")


def test_level_accepts_enum():
    assert LoggingSettings(level=LogLevel.WARNING).level == "WARNING"


@pytest.mark.parametrize("name", ["debug", "Info", "WARNING", "error", "critical"])
def test_log_level_from_string(name):
    level = LogLevel.from_string(name)
    assert level.value == name.upper()
    assert isinstance(level.to_stdlib_level(), int)
