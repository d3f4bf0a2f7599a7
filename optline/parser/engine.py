# Optline Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ParseEngine`, the state machine that turns a raw token
sequence into parsed `Values` and a list of positional leftovers.

The engine walks the tokens left to right and classifies each one:

- `--` ends option scanning; every later token is a leftover, verbatim.
- `--name` / `--name=value` is a long option, resolved by exact match or by
  unambiguous prefix.
- `-abc` is a cluster of short options. Flag-like options fire in turn; the
  first option that takes a value claims the rest of the token as its value.
- Anything else (including a bare `-`) is a positional leftover.

Options that take values consume them from an inline `=value`, an attached
short suffix, and then the following tokens. Values of `choice` options are
checked against the declared choices. Other types are checked only when the
engine runs with `strict_types=True`.

Any error aborts the parse with a single `OptionParseError`. The engine never
prints or exits; `help` and `version` options raise `HelpSignal` and
`VersionSignal` for the front end to handle.

Example:
    registry = OptionRegistry()
    registry.register(Option(("-f", "--file"), dest="filename"))
    engine = ParseEngine(registry)
    values, leftovers = engine.parse(["--fil=out.txt", "extra"])
    # values["filename"] == "out.txt", leftovers == ["extra"]
"""
from __future__ import annotations

from typing import Sequence

from optline.exceptions import (
    AmbiguousOptionError,
    InvalidChoiceError,
    InvalidValueError,
    MissingArgumentError,
    UnexpectedArgumentError,
    UnknownOptionError,
)
from optline.logger import logger
from optline.parser.option import Option
from optline.parser.option_action import OptionAction, OptionType
from optline.parser.registry import OptionRegistry
from optline.parser.utils import coerce_value
from optline.parser.values import Values
from optline.signals import HelpSignal, VersionSignal

STRICT_TYPES = (OptionType.INT, OptionType.FLOAT, OptionType.BOOL)


class ParseEngine:
    """
    Parses token sequences against an `OptionRegistry`.

    The registry is only read, so one engine can run any number of parses.
    Each parse writes to its own `Values` and leftover list.
    """

    def __init__(self, registry: OptionRegistry, strict_types: bool = False) -> None:
        self.registry: OptionRegistry = registry
        self.strict_types: bool = strict_types

    def parse(
        self, tokens: Sequence[str], values: Values | None = None
    ) -> tuple[Values, list[str]]:
        """
        Parse a token sequence (without the program name).

        Args:
            tokens (Sequence[str]): The raw argument tokens.
            values (Values | None): Values to write into. Declared defaults are
                seeded into it for any dest that is not set yet. A fresh
                `Values` is created when omitted.

        Returns:
            tuple[Values, list[str]]: The parsed values and the leftovers.

        Raises:
            OptionDeclarationError: If a registered option is incomplete.
            OptionParseError: On the first invalid token or value.
        """
        self.registry.validate()
        if values is None:
            values = Values()
        values.seed(self.registry.defaults())

        args = list(tokens)
        leftovers: list[str] = []
        i = 0
        while i < len(args):
            token = args[i]
            if token == "--":
                leftovers.extend(args[i + 1 :])
                break
            elif token.startswith("--"):
                i = self._handle_long(args, i, values)
            elif token.startswith("-") and len(token) > 1:
                i = self._handle_short(args, i, values)
            else:
                leftovers.append(token)
                i += 1

        logger.debug(
            "Parsed %d token(s) into %d value(s) and %d leftover(s)",
            len(args),
            len(values),
            len(leftovers),
        )
        return values, leftovers

    def parse_argv(
        self, argv: Sequence[str], values: Values | None = None
    ) -> tuple[Values, list[str]]:
        """Parse an `argv`-style list whose first element is the program path."""
        return self.parse(list(argv)[1:], values)

    def _handle_long(self, args: list[str], i: int, values: Values) -> int:
        token = args[i]
        flag, separator, inline = token.partition("=")
        try:
            option = self.registry.lookup_long(flag)
        except UnknownOptionError:
            raise UnknownOptionError(flag, token) from None
        except AmbiguousOptionError as error:
            raise AmbiguousOptionError(flag, error.candidates, token) from None

        if not option.takes_value:
            if separator:
                raise UnexpectedArgumentError(flag, inline, token)
            self._process(option, flag, token, [], values)
            return i + 1

        supplied = [inline] if separator else []
        raws, i = self._consume(args, i + 1, option, flag, token, supplied)
        self._process(option, flag, token, raws, values)
        return i

    def _handle_short(self, args: list[str], i: int, values: Values) -> int:
        token = args[i]
        for position in range(1, len(token)):
            flag = f"-{token[position]}"
            option = self.registry.lookup_short(flag)
            if option is None:
                raise UnknownOptionError(flag, token)

            if not option.takes_value:
                self._process(option, flag, token, [], values)
                continue

            # The rest of the cluster is this option's value, not more flags.
            suffix = token[position + 1 :]
            supplied = [suffix] if suffix else []
            raws, next_i = self._consume(args, i + 1, option, flag, token, supplied)
            self._process(option, flag, token, raws, values)
            return next_i
        return i + 1

    def _consume(
        self,
        args: list[str],
        start: int,
        option: Option,
        flag: str,
        token: str,
        supplied: list[str],
    ) -> tuple[list[str], int]:
        assert isinstance(option.nargs, int), "nargs should be validated"
        needed = option.nargs - len(supplied)
        taken = args[start : start + needed]
        if len(taken) < needed:
            raise MissingArgumentError(
                flag, option.nargs, needed - len(taken), token=token
            )
        return supplied + taken, start + needed

    def _check_value(self, option: Option, flag: str, token: str, raw: str) -> None:
        if option.value_type == OptionType.CHOICE:
            if raw not in option.choices:
                raise InvalidChoiceError(flag, raw, option.choices, token=token)
        elif self.strict_types and option.value_type in STRICT_TYPES:
            try:
                coerce_value(raw, option.value_type)
            except ValueError:
                raise InvalidValueError(
                    flag, raw, str(option.value_type), token=token
                ) from None

    def _process(
        self,
        option: Option,
        flag: str,
        token: str,
        raws: list[str],
        values: Values,
    ) -> None:
        action = option.action
        dest = option.dest
        logger.debug("Processing %s (%s) -> %s %r", flag, action, dest, raws)

        if action == OptionAction.STORE:
            for raw in raws:
                self._check_value(option, flag, token, raw)
            if len(raws) == 1:
                values.store(dest, raws[0])
            else:
                values.store_many(dest, raws)
        elif action == OptionAction.APPEND:
            for raw in raws:
                self._check_value(option, flag, token, raw)
            for raw in raws:
                values.append(dest, raw)
        elif action == OptionAction.STORE_CONST:
            assert option.const is not None, "const should be validated"
            values.store(dest, option.const)
        elif action == OptionAction.APPEND_CONST:
            assert option.const is not None, "const should be validated"
            values.append(dest, option.const)
        elif action == OptionAction.STORE_TRUE:
            values.store(dest, "1")
        elif action == OptionAction.STORE_FALSE:
            values.store(dest, "0")
        elif action == OptionAction.COUNT:
            values.increment(dest)
        elif action == OptionAction.HELP:
            raise HelpSignal()
        elif action == OptionAction.VERSION:
            raise VersionSignal()
        else:
            assert False, f"Unhandled action {action}: shouldn't happen"
