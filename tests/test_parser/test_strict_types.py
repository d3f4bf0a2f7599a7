import pytest

from optline.exceptions import InvalidValueError
from optline.parser import Option, OptionRegistry, ParseEngine


@pytest.fixture
def registry():
    registry = OptionRegistry()
    registry.register(Option(("-n", "--count"), value_type="int"))
    registry.register(Option(("--ratio",), value_type="float"))
    registry.register(Option(("--enabled",), value_type="bool"))
    registry.register(Option(("--name",)))
    return registry


def test_permissive_by_default(registry):
    values, _ = ParseEngine(registry).parse(["-n", "abc", "--ratio", "x"])
    assert values["count"] == "abc"
    assert values.get_value("count").as_int() == 0
    assert values.get_value("ratio").as_float() == 0.0


def test_strict_accepts_valid_values(registry):
    engine = ParseEngine(registry, strict_types=True)
    values, _ = engine.parse(["-n12", "--ratio=0.5", "--enabled", "yes", "--name", "x"])
    assert values.get_value("count").as_int() == 12
    assert values.get_value("ratio").as_float() == 0.5
    assert values.get_value("enabled").as_bool() is True
    assert values["name"] == "x"


@pytest.mark.parametrize(
    "tokens,option,value_type",
    [
        (["-n", "abc"], "-n", "int"),
        (["--count=1.5"], "--count", "int"),
        (["--ratio", "fast"], "--ratio", "float"),
        (["--enabled", "maybe"], "--enabled", "bool"),
    ],
)
def test_strict_rejects_malformed_values(registry, tokens, option, value_type):
    engine = ParseEngine(registry, strict_types=True)
    with pytest.raises(InvalidValueError) as excinfo:
        engine.parse(tokens)
    assert excinfo.value.option == option
    assert excinfo.value.value_type == value_type
