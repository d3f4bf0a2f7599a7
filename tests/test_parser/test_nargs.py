import pytest

from optline.exceptions import MissingArgumentError
from optline.parser import Option, OptionRegistry, ParseEngine


@pytest.fixture
def engine():
    registry = OptionRegistry()
    registry.register(Option(("-p", "--point"), nargs=2))
    registry.register(Option(("-r", "--rgb"), action="append", nargs=3))
    registry.register(Option(("-v",), action="store_true", dest="verbose"))
    return ParseEngine(registry)


def test_nargs_from_following_tokens(engine):
    values, leftovers = engine.parse(["--point", "1", "2", "rest"])
    assert values.all("point") == ["1", "2"]
    assert values["point"] == "1 2"
    assert leftovers == ["rest"]


def test_nargs_inline_fills_first_slot(engine):
    values, _ = engine.parse(["--point=1", "2"])
    assert values.all("point") == ["1", "2"]


def test_nargs_attached_short_fills_first_slot(engine):
    values, _ = engine.parse(["-vp1", "2"])
    assert values.all("point") == ["1", "2"]
    assert values["verbose"] == "1"


def test_nargs_last_occurrence_wins(engine):
    values, _ = engine.parse(["-p", "1", "2", "-p", "3", "4"])
    assert values.all("point") == ["3", "4"]


def test_nargs_append_extends_in_order(engine):
    values, _ = engine.parse(["-r", "1", "2", "3", "--rgb=4", "5", "6"])
    assert values.all("rgb") == ["1", "2", "3", "4", "5", "6"]


@pytest.mark.parametrize(
    "tokens,missing",
    [
        (["--point"], 2),
        (["--point", "1"], 1),
        (["--point=1"], 1),
        (["-p1"], 1),
        (["-r", "1", "2"], 1),
    ],
)
def test_nargs_missing(engine, tokens, missing):
    with pytest.raises(MissingArgumentError) as excinfo:
        engine.parse(tokens)
    assert excinfo.value.missing == missing
    assert excinfo.value.expected in (2, 3)
