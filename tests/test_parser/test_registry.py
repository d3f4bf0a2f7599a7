import pytest

from optline.exceptions import (
    AmbiguousOptionError,
    DuplicateFlagError,
    UnknownOptionError,
)
from optline.parser import Option, OptionRegistry


@pytest.fixture
def registry():
    registry = OptionRegistry()
    registry.register(Option(("-f", "--file"), dest="filename"))
    registry.register(Option(("--filter",)))
    registry.register(Option(("-q", "--quiet"), action="store_false", dest="verbose"))
    return registry


def test_register_and_lookup_short(registry):
    assert registry.lookup_short("-f").dest == "filename"
    assert registry.lookup_short("-q").dest == "verbose"
    assert registry.lookup_short("-x") is None
    assert len(registry) == 3
    assert "-f" in registry
    assert "--quiet" in registry
    assert "--qui" not in registry


def test_lookup_long_exact(registry):
    assert registry.lookup_long("--file").dest == "filename"
    assert registry.lookup_long("--filter").dest == "filter"


def test_lookup_long_unique_prefix(registry):
    assert registry.lookup_long("--q").dest == "verbose"
    assert registry.lookup_long("--filt").dest == "filter"


def test_lookup_long_ambiguous(registry):
    with pytest.raises(AmbiguousOptionError) as excinfo:
        registry.lookup_long("--fil")
    assert excinfo.value.candidates == ["--file", "--filter"]
    assert excinfo.value.option == "--fil"


def test_lookup_long_unknown(registry):
    with pytest.raises(UnknownOptionError):
        registry.lookup_long("--nope")
    with pytest.raises(UnknownOptionError):
        registry.lookup_long("--")


def test_duplicate_flag_rejected_without_partial_registration(registry):
    with pytest.raises(DuplicateFlagError) as excinfo:
        registry.register(Option(("-x", "--file"), dest="other"))
    assert excinfo.value.flag == "--file"
    assert excinfo.value.existing == "filename"
    assert registry.lookup_short("-x") is None
    assert len(registry) == 3


def test_duplicate_short_flag(registry):
    with pytest.raises(DuplicateFlagError):
        registry.register(Option(("-q",), action="store_true", dest="quick"))


def test_duplicate_flag_within_option():
    registry = OptionRegistry()
    with pytest.raises(DuplicateFlagError):
        registry.register(Option(("-a", "-a")))
    assert len(registry) == 0


def test_introspection(registry):
    registry.register(Option(("--level",), default="3"))
    registry.register(Option(("--other-level",), dest="level", default="9"))
    assert registry.flags() == [
        "-f",
        "--file",
        "--filter",
        "-q",
        "--quiet",
        "--level",
        "--other-level",
    ]
    assert registry.defaults() == {"level": "3"}
    assert registry.get("verbose").flags == ("-q", "--quiet")
    assert registry.get("missing") is None
    assert [option.dest for option in registry] == [
        "filename",
        "filter",
        "verbose",
        "level",
        "level",
    ]
    assert str(registry) == "OptionRegistry(options=5, short=2, long=5)"
