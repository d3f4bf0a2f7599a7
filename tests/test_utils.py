import logging
import sys

import pytest
from pythonjsonlogger.json import JsonFormatter
from rich.logging import RichHandler

from optline.utils import get_program_invocation, setup_logging, verbosity_to_level


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.parametrize(
    "verbosity, level",
    [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (5, logging.DEBUG)],
)
def test_verbosity_to_level(verbosity, level):
    assert verbosity_to_level(verbosity) == level


def test_setup_logging_cli(monkeypatch):
    monkeypatch.delenv("OPTLINE_LOG_MODE", raising=False)
    handler = setup_logging(verbosity=1)
    assert isinstance(handler, RichHandler)
    assert handler.level == logging.INFO
    assert logging.getLogger().handlers == [handler]


def test_setup_logging_json_from_env(monkeypatch):
    monkeypatch.setenv("OPTLINE_LOG_MODE", "json")
    handler = setup_logging()
    assert isinstance(handler.formatter, JsonFormatter)
    assert handler.level == logging.WARNING


def test_setup_logging_replaces_previous_handler():
    first = setup_logging(mode="cli")
    second = setup_logging(mode="json")
    assert logging.getLogger().handlers == [second]
    assert first not in logging.getLogger().handlers


def test_setup_logging_invalid_mode():
    with pytest.raises(ValueError, match="Invalid log mode: xml"):
        setup_logging(mode="xml")


def test_get_program_invocation(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["/nowhere/report-tool"])
    assert get_program_invocation() == "report-tool"
    monkeypatch.setattr(sys, "argv", [])
    assert get_program_invocation() == "prog"
