import io

import pytest

from logengine import Engine
from logengine.errors import ConfigurationError
from logengine.models.settings import ColorMode, EngineSettings, SinkConfig
from logengine.models.severity import Severity


def _quiet_engine(**settings) -> Engine:
    base = {"default_sink": False, "header": False, "color_mode": "never"}
    base.update(settings)
    return Engine(base)


def test_sinks_from_settings_are_registered_in_order():
    first, second = io.StringIO(), io.StringIO()
    engine = _quiet_engine(sinks={"b": {"stdout": first}, "a": {"stdout": second}})
    assert engine.sinks == ["b", "a"]
    engine.info("hi")
    assert first.getvalue() == "hi\n"
    assert second.getvalue() == "hi\n"


def test_default_sink_is_not_part_of_the_named_registry():
    engine = Engine()
    assert engine.has_default_sink
    assert engine.sinks == []

    engine.register_exporter("default", {"stdout": io.StringIO()})
    assert engine.sinks == ["default"]
    assert engine.has_default_sink


def test_set_default_sink_toggles(capsys):
    engine = _quiet_engine()
    assert not engine.has_default_sink
    engine.set_default_sink(True)
    engine.info("visible")
    engine.set_default_sink(False)
    engine.info("hidden")
    assert capsys.readouterr().out == "visible\n"
    assert engine.settings.default_sink is False


def test_unregister_stops_dispatch_and_is_idempotent():
    stream = io.StringIO()
    engine = _quiet_engine()
    engine.register_exporter("console", {"stdout": stream})
    engine.info("one")

    engine.unregister_exporter("console")
    engine.unregister_exporter("console")
    engine.info("two")

    assert stream.getvalue() == "one\n"
    assert engine.sinks == []


def test_unregister_unknown_name_is_noop():
    engine = _quiet_engine()
    engine.unregister_exporter("never-registered")
    assert engine.sinks == []


def test_register_same_name_replaces_and_closes_previous(tmp_path):
    engine = _quiet_engine()
    first_path, second_path = tmp_path / "first.log", tmp_path / "second.log"
    engine.register_exporter("file", {"kind": "file", "stdout": first_path})
    previous = engine.get_sink("file")

    engine.register_exporter("file", {"kind": "file", "stdout": second_path})
    engine.info("after")
    engine.close()

    assert engine.sinks == []
    assert previous.handler.stdout.closed
    assert first_path.read_text(encoding="utf-8") == ""
    assert second_path.read_text(encoding="utf-8") == "after\n"


def test_register_accepts_legacy_shape_and_models():
    stream = io.StringIO()
    engine = _quiet_engine()
    engine.register_exporter("legacy", {"type": "console", "options": {"stdout": stream}})
    engine.register_exporter("model", SinkConfig(stdout=stream))
    engine.info("x")
    assert stream.getvalue() == "x\nx\n"


def test_unknown_sink_kind_raises_configuration_error():
    engine = _quiet_engine()
    with pytest.raises(ConfigurationError):
        engine.register_exporter("bad", {"kind": "syslog"})
    assert engine.sinks == []


def test_invalid_engine_settings_raise_configuration_error():
    with pytest.raises(ConfigurationError):
        Engine({"level": "loud"})
    with pytest.raises(ConfigurationError):
        Engine({"colorMode": "rainbow"})


def test_set_level_parses_and_validates():
    stream = io.StringIO()
    engine = _quiet_engine(sinks={"s": {"stdout": stream}})
    engine.set_level("warning")
    engine.info("dropped")
    engine.warning("kept")
    assert engine.settings.level is Severity.WARNING
    assert stream.getvalue() == ""  # warn goes to stderr stream

    with pytest.raises(ConfigurationError):
        engine.set_level("loud")


def test_set_color_mode_updates_stream_handler_policy():
    engine = _quiet_engine(sinks={"s": {"stdout": io.StringIO()}})
    engine.set_color_mode("default")
    assert engine.settings.color_mode is ColorMode.SINK_DEFAULT
    assert engine.get_sink("s").handler.keep_color is None

    engine.set_color_mode(False)
    assert engine.get_sink("s").handler.keep_color is True

    with pytest.raises(ConfigurationError):
        engine.set_color_mode("rainbow")


def test_engines_do_not_share_state():
    settings = EngineSettings(default_sink=False, header=False)
    first, second = Engine(settings), Engine(settings)
    first.set_level("error")
    first.register_exporter("only-first", {"stdout": io.StringIO()})

    assert second.settings.level is Severity.INFORMATIONAL
    assert second.sinks == []
    assert settings.level is Severity.INFORMATIONAL


def test_context_manager_closes_file_sinks(tmp_path):
    path = tmp_path / "ctx.log"
    with _quiet_engine(sinks={"file": {"kind": "file", "stdout": str(path)}}) as engine:
        engine.notice("inside")
        handler = engine.get_sink("file").handler
    assert handler.stdout.closed
    assert path.read_text(encoding="utf-8") == "inside\n"


def test_console_sink_with_path_target_rejected_at_registration():
    engine = _quiet_engine()
    with pytest.raises(ConfigurationError):
        engine.register_exporter("console", {"kind": "console", "stdout": "out.log"})
    assert engine.sinks == []


class _ClosableHandler:
    def __init__(self):
        self.closed = False

    def log(self, *parts):
        pass

    info = warn = error = debug = trace = log

    def close(self):
        self.closed = True


def test_failed_construction_closes_sinks_already_created(tmp_path):
    first = _ClosableHandler()
    with pytest.raises(ConfigurationError):
        _quiet_engine(
            sinks={
                "first": {"handler": first},
                "broken": {"kind": "file", "stdout": str(tmp_path)},
            }
        )
    assert first.closed


def test_settings_sinks_follow_the_registry():
    engine = _quiet_engine(sinks={"a": {"stdout": io.StringIO()}})
    engine.register_exporter("b", {"stdout": io.StringIO()})
    engine.unregister_exporter("a")

    settings = engine.settings
    assert list(settings.sinks) == ["b"]
    assert settings.sinks["b"] is engine.get_sink("b").config
