import pytest

from optline.exceptions import (
    AmbiguousOptionError,
    InvalidChoiceError,
    MissingArgumentError,
    OptionDeclarationError,
    UnexpectedArgumentError,
    UnknownOptionError,
)
from optline.parser import Option, OptionRegistry, ParseEngine, Values
from optline.signals import HelpSignal, VersionSignal


@pytest.fixture
def registry():
    registry = OptionRegistry()
    registry.register(Option(("-f", "--file"), dest="filename"))
    registry.register(
        Option(("-q", "--quiet"), action="store_false", dest="verbose", default="1")
    )
    return registry


@pytest.fixture
def engine(registry):
    return ParseEngine(registry)


def test_file_and_quiet_scenario(engine):
    values, leftovers = engine.parse(["-f", "out.txt", "-q", "extra"])
    assert values == {"filename": "out.txt", "verbose": "0"}
    assert leftovers == ["extra"]


def test_defaults_are_seeded(engine):
    values, leftovers = engine.parse([])
    assert values == {"verbose": "1"}
    assert leftovers == []


def test_long_prefix_scenario(engine):
    values, _ = engine.parse(["--fil=out.txt"])
    assert values["filename"] == "out.txt"


def test_unknown_short_option_scenario(engine):
    with pytest.raises(UnknownOptionError) as excinfo:
        engine.parse(["-x"])
    assert excinfo.value.option == "-x"
    assert excinfo.value.token == "-x"


def test_unknown_short_option_in_cluster(engine):
    with pytest.raises(UnknownOptionError) as excinfo:
        engine.parse(["-qx"])
    assert excinfo.value.option == "-x"
    assert excinfo.value.token == "-qx"
    assert "-qx" in str(excinfo.value)


def test_unknown_long_option(engine):
    with pytest.raises(UnknownOptionError) as excinfo:
        engine.parse(["--output=x"])
    assert excinfo.value.option == "--output"
    assert excinfo.value.token == "--output=x"


def test_parse_argv_strips_program(engine):
    values, leftovers = engine.parse_argv(["/usr/bin/report", "-fout.txt", "a"])
    assert values["filename"] == "out.txt"
    assert leftovers == ["a"]


def test_double_dash_terminates(engine):
    values, leftovers = engine.parse(["a", "--", "-q", "--file", "x", "--"])
    assert values["verbose"] == "1"
    assert not values.is_set("filename")
    assert leftovers == ["a", "-q", "--file", "x", "--"]


def test_bare_dash_is_positional(engine):
    _, leftovers = engine.parse(["-", "-q", "-"])
    assert leftovers == ["-", "-"]


def test_positionals_interleaved(engine):
    values, leftovers = engine.parse(["one", "-f", "x", "two", "-q", "three"])
    assert values["filename"] == "x"
    assert leftovers == ["one", "two", "three"]


@pytest.mark.parametrize(
    "tokens",
    [
        ["--file=A", "--file=B"],
        ["-f", "A", "--file", "B"],
        ["-fA", "-fB"],
    ],
)
def test_store_last_occurrence_wins(engine, tokens):
    values, _ = engine.parse(tokens)
    assert values["filename"] == "B"


def test_append_preserves_order():
    registry = OptionRegistry()
    registry.register(Option(("-t", "--tag"), action="append"))
    values, _ = ParseEngine(registry).parse(["--tag=A", "--tag=B", "-tC"])
    assert values.all("tag") == ["A", "B", "C"]
    assert values["tag"] == "C"
    assert values != {"tag": "C"}
    assert values == {"tag": ["A", "B", "C"]}


def test_append_default_replaced_by_first_occurrence():
    registry = OptionRegistry()
    registry.register(Option(("--tag",), action="append", default="base"))
    engine = ParseEngine(registry)
    values, _ = engine.parse([])
    assert values.all("tag") == ["base"]
    values, _ = engine.parse(["--tag", "A"])
    assert values.all("tag") == ["A"]


def test_cluster_with_trailing_value():
    registry = OptionRegistry()
    registry.register(Option(("-v",), action="store_true", dest="verbose"))
    registry.register(Option(("-q",), action="store_true", dest="quiet"))
    registry.register(Option(("-f",), dest="filename"))
    values, leftovers = ParseEngine(registry).parse(["-vqf", "value"])
    assert values == {"verbose": "1", "quiet": "1", "filename": "value"}
    assert leftovers == []


def test_attached_short_value_not_reinterpreted():
    registry = OptionRegistry()
    registry.register(Option(("-f",), dest="filename"))
    registry.register(Option(("-v",), action="store_true", dest="verbose"))
    registry.register(Option(("-a",), action="store_true", dest="all"))
    values, _ = ParseEngine(registry).parse(["-fvalue"])
    assert values == {"filename": "value"}


def test_cluster_value_after_flags():
    registry = OptionRegistry()
    registry.register(Option(("-v",), action="count", dest="verbose"))
    registry.register(Option(("-o",), dest="output"))
    values, _ = ParseEngine(registry).parse(["-vvoout.txt"])
    assert values == {"verbose": "2", "output": "out.txt"}


def test_choices():
    registry = OptionRegistry()
    registry.register(Option(("-e", "--env"), choices=["prod", "dev"]))
    engine = ParseEngine(registry)

    values, _ = engine.parse(["--env", "prod"])
    assert values["env"] == "prod"

    with pytest.raises(InvalidChoiceError) as excinfo:
        engine.parse(["--env=Prod"])
    assert excinfo.value.value == "Prod"
    assert excinfo.value.choices == ["prod", "dev"]
    assert excinfo.value.option == "--env"
    assert "choose from 'prod', 'dev'" in str(excinfo.value)

    with pytest.raises(InvalidChoiceError):
        engine.parse(["-etest"])


def test_append_choices_checked():
    registry = OptionRegistry()
    registry.register(Option(("--tag",), action="append", choices=["a", "b"]))
    engine = ParseEngine(registry)
    values, _ = engine.parse(["--tag", "a", "--tag", "b"])
    assert values.all("tag") == ["a", "b"]
    with pytest.raises(InvalidChoiceError):
        engine.parse(["--tag", "a", "--tag", "c"])


def test_abbreviation_matches_full_flag():
    registry = OptionRegistry()
    registry.register(Option(("--verbose",), action="store_true"))
    registry.register(Option(("--version-file",)))
    registry.register(Option(("--output",)))
    engine = ParseEngine(registry)

    assert engine.parse(["--out", "x"]) == engine.parse(["--output", "x"])
    assert engine.parse(["--verb"])[0]["verbose"] == "1"

    with pytest.raises(AmbiguousOptionError) as excinfo:
        engine.parse(["--ver"])
    assert excinfo.value.candidates == ["--verbose", "--version-file"]
    assert excinfo.value.token == "--ver"


def test_exact_match_wins_over_prefix():
    registry = OptionRegistry()
    registry.register(Option(("--file",)))
    registry.register(Option(("--filename",)))
    values, _ = ParseEngine(registry).parse(["--file", "a"])
    assert values == {"file": "a"}


def test_missing_argument(engine):
    with pytest.raises(MissingArgumentError) as excinfo:
        engine.parse(["-q", "--file"])
    assert excinfo.value.option == "--file"
    assert excinfo.value.expected == 1
    assert excinfo.value.missing == 1
    assert str(excinfo.value) == "--file option requires an argument"

    with pytest.raises(MissingArgumentError):
        engine.parse(["-f"])


def test_value_may_look_like_an_option(engine):
    values, _ = engine.parse(["-f", "-q"])
    assert values["filename"] == "-q"
    assert values["verbose"] == "1"


def test_unexpected_argument(engine):
    with pytest.raises(UnexpectedArgumentError) as excinfo:
        engine.parse(["--quiet=yes"])
    assert excinfo.value.option == "--quiet"
    assert excinfo.value.value == "yes"


def test_empty_long_names_are_unknown(engine):
    with pytest.raises(UnknownOptionError):
        engine.parse(["--=value"])
    with pytest.raises(UnknownOptionError):
        engine.parse(["---"])


def test_inline_empty_value(engine):
    values, _ = engine.parse(["--file="])
    assert values["filename"] == ""


def test_store_const_and_append_const():
    registry = OptionRegistry()
    registry.register(Option(("--fast",), action="store_const", const="3", dest="level"))
    registry.register(Option(("--slow",), action="store_const", const="1", dest="level"))
    registry.register(
        Option(("-r",), action="append_const", const="read", dest="perms")
    )
    registry.register(
        Option(("-w",), action="append_const", const="write", dest="perms")
    )
    values, _ = ParseEngine(registry).parse(["--fast", "--slow", "-rw", "-r"])
    assert values["level"] == "1"
    assert values.all("perms") == ["read", "write", "read"]


def test_store_true_ignores_default():
    registry = OptionRegistry()
    registry.register(Option(("--debug",), action="store_true", default="0"))
    registry.register(Option(("--color",), action="store_false", default="yes"))
    values, _ = ParseEngine(registry).parse(["--debug", "--color"])
    assert values == {"debug": "1", "color": "0"}


def test_count():
    registry = OptionRegistry()
    registry.register(Option(("-v", "--verbose"), action="count"))
    engine = ParseEngine(registry)
    values, _ = engine.parse(["-vvv", "--verbose"])
    assert values.get_value("verbose").as_int() == 4
    values, _ = engine.parse([])
    assert not values.is_set("verbose")
    assert values.get_value("verbose").as_int() == 0


def test_count_starts_from_default():
    registry = OptionRegistry()
    registry.register(Option(("-v",), action="count", dest="verbose", default=2))
    values, _ = ParseEngine(registry).parse(["-v"])
    assert values["verbose"] == "3"


def test_help_and_version_signals():
    registry = OptionRegistry()
    registry.register(Option(("-h", "--help"), action="help"))
    registry.register(Option(("--version",), action="version"))
    engine = ParseEngine(registry)
    with pytest.raises(HelpSignal):
        engine.parse(["--he"])
    with pytest.raises(HelpSignal):
        engine.parse(["-h"])
    with pytest.raises(VersionSignal):
        engine.parse(["--version"])


def test_reused_values_accumulate(engine):
    values = Values()
    engine.parse(["-f", "a"], values)
    values, leftovers = engine.parse(["-q", "b"], values)
    assert values == {"filename": "a", "verbose": "0"}
    assert leftovers == ["b"]


def test_error_aborts_after_earlier_writes(engine):
    values = Values()
    with pytest.raises(UnknownOptionError):
        engine.parse(["-f", "a", "-x", "-q"], values)
    assert values["filename"] == "a"
    assert values["verbose"] == "1"


def test_incomplete_option_rejected_before_parsing():
    registry = OptionRegistry()
    registry.register(Option(("--env",), value_type="choice"))
    with pytest.raises(OptionDeclarationError):
        ParseEngine(registry).parse([])


def test_registry_shared_between_parses(engine):
    first, _ = engine.parse(["-f", "one"])
    second, _ = engine.parse(["-q"])
    assert first == {"filename": "one", "verbose": "1"}
    assert second == {"verbose": "0"}
