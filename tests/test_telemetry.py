import pytest

from awildtxt.runtime import telemetry
from awildtxt.runtime.telemetry import TelemetrySettings


def test_settings_defaults() -> None:
    settings = TelemetrySettings.from_env({})

    assert settings.logger_name == "awildtxt"
    assert settings.level == "INFO"
    assert settings.console is True
    assert settings.preset is None


def test_settings_read_prefixed_variables() -> None:
    settings = TelemetrySettings.from_env(
        {
            "AWILDTXT_LOG_LEVEL": "debug",
            "AWILDTXT_DISABLE_CONSOLE": "yes",
            "AWILDTXT_LOG_JSON": "1",
            "AWILDTXT_LOG_BUFFERED": "true",
            "AWILDTXT_LOG_BUFFER_SIZE": "64",
            "AWILDTXT_LOG_PRESET": "production",
        }
    )

    assert settings.level == "DEBUG"
    assert settings.console is False
    assert settings.json is True
    assert settings.buffered is True
    assert settings.buffer_size == 64
    assert settings.preset == "production"


def test_unknown_preset_rejected() -> None:
    with pytest.raises(ValueError):
        telemetry.build_preset("verbose")


def test_configure_rejects_config_and_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="development")


def test_span_records_and_reraises() -> None:
    with pytest.raises(RuntimeError):
        with telemetry.span("test::span", component=True, metadata={"k": 1}):
            raise RuntimeError("boom")


def test_loggers_are_cached() -> None:
    assert telemetry.get_logger("awildtxt.tests") is telemetry.get_logger(
        "awildtxt.tests"
    )
