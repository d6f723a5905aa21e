import pytest

from logengine.formatting.classifier import classify, color_for, method_for
from logengine.models.severity import Color, DispatchGroup, Severity


@pytest.mark.parametrize(
    ("level", "group"),
    [
        (Severity.EMERGENCY, DispatchGroup.ERROR),
        (Severity.ALERT, DispatchGroup.ERROR),
        (Severity.CRITICAL, DispatchGroup.ERROR),
        (Severity.ERROR, DispatchGroup.ERROR),
        (Severity.WARNING, DispatchGroup.WARNING),
        (Severity.NOTICE, DispatchGroup.NOTICE),
        (Severity.INFORMATIONAL, DispatchGroup.INFORMATIONAL),
        (Severity.DEBUG, DispatchGroup.DEBUG),
    ],
)
def test_classify_maps_each_severity(level, group):
    assert classify(level) is group


def test_classify_is_total():
    for level in Severity:
        assert classify(level) in set(DispatchGroup)


@pytest.mark.parametrize("level", [42, -1, "error", None, 3.0, True])
def test_classify_unknown_values_fall_back_to_informational(level):
    assert classify(level) is DispatchGroup.INFORMATIONAL


def test_classify_accepts_plain_ints():
    assert classify(0) is DispatchGroup.ERROR
    assert classify(4) is DispatchGroup.WARNING


def test_color_table():
    assert color_for(DispatchGroup.ERROR) is Color.RED
    assert color_for(DispatchGroup.WARNING) is Color.YELLOW
    assert color_for(DispatchGroup.NOTICE) is Color.CYAN
    assert color_for(DispatchGroup.DEBUG) is Color.BLUE
    assert color_for(DispatchGroup.INFORMATIONAL) is Color.BLUE


def test_method_table():
    assert method_for(DispatchGroup.ERROR) == "error"
    assert method_for(DispatchGroup.WARNING) == "warn"
    assert method_for(DispatchGroup.NOTICE) == "info"
    assert method_for(DispatchGroup.INFORMATIONAL) == "log"
    assert method_for(DispatchGroup.DEBUG) == "debug"
    assert method_for(DispatchGroup.DEBUG, verbose=True) == "trace"
    assert method_for(DispatchGroup.ERROR, verbose=True) == "error"
