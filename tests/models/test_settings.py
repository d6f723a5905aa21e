import io

import pytest
from pydantic import ValidationError

from logengine.models.settings import ColorMode, EngineSettings, SinkConfig, SinkKind
from logengine.models.severity import Severity


def test_engine_settings_defaults():
    settings = EngineSettings()
    assert settings.default_sink is True
    assert settings.color_mode is ColorMode.ALWAYS
    assert settings.level is Severity.INFORMATIONAL
    assert settings.verbose is True
    assert settings.header is True
    assert settings.sinks == {}


def test_engine_settings_accept_camel_case_aliases():
    settings = EngineSettings.model_validate(
        {
            "defaultSink": False,
            "colorMode": "never",
            "level": "warning",
            "verbose": False,
        }
    )
    assert settings.default_sink is False
    assert settings.color_mode is ColorMode.NEVER
    assert settings.level is Severity.WARNING
    assert settings.verbose is False


def test_engine_settings_accept_snake_case_names():
    settings = EngineSettings.model_validate({"default_sink": False, "color_mode": "sink-default"})
    assert settings.default_sink is False
    assert settings.color_mode is ColorMode.SINK_DEFAULT


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("true", ColorMode.ALWAYS),
        (True, ColorMode.ALWAYS),
        ("default", ColorMode.SINK_DEFAULT),
        ("false", ColorMode.NEVER),
        (False, ColorMode.NEVER),
        ("ALWAYS", ColorMode.ALWAYS),
    ],
)
def test_color_mode_accepts_legacy_values(raw, expected):
    assert ColorMode.parse(raw) is expected


def test_engine_settings_reject_unknown_keys_and_values():
    with pytest.raises(ValidationError):
        EngineSettings.model_validate({"rotate": True})
    with pytest.raises(ValidationError):
        EngineSettings.model_validate({"level": "loud"})
    with pytest.raises(ValidationError):
        EngineSettings.model_validate({"colorMode": "sometimes"})


def test_sink_config_defaults_to_console():
    config = SinkConfig()
    assert config.kind is SinkKind.CONSOLE
    assert config.stdout is None
    assert config.color is None


def test_sink_config_accepts_legacy_nested_shape():
    stream = io.StringIO()
    config = SinkConfig.model_validate({"type": "console", "options": {"stdout": stream}})
    assert config.kind is SinkKind.CONSOLE
    assert config.stdout is stream


def test_sink_config_rejects_unknown_kind():
    with pytest.raises(ValidationError):
        SinkConfig.model_validate({"kind": "syslog"})


def test_file_sink_config_requires_path(tmp_path):
    with pytest.raises(ValidationError):
        SinkConfig.model_validate({"kind": "file"})
    with pytest.raises(ValidationError):
        SinkConfig.model_validate({"kind": "file", "stdout": io.StringIO()})

    config = SinkConfig.model_validate({"kind": "file", "stdout": tmp_path / "out.log"})
    assert config.kind is SinkKind.FILE


def test_engine_settings_validate_nested_sinks(tmp_path):
    settings = EngineSettings.model_validate(
        {"sinks": {"file": {"kind": "file", "stdout": str(tmp_path / "a.log")}}}
    )
    assert settings.sinks["file"].kind is SinkKind.FILE


def test_console_sink_config_requires_writable_streams():
    with pytest.raises(ValidationError):
        SinkConfig.model_validate({"stdout": "out.log"})
    with pytest.raises(ValidationError):
        SinkConfig.model_validate({"kind": "console", "stderr": 3})

    handler_only = SinkConfig.model_validate({"stdout": "ignored", "handler": object()})
    assert handler_only.stdout == "ignored"
