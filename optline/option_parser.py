# Optline Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `OptionParser`, the front end that ties option
declaration, parsing and rich-rendered help together.

`OptionParser` owns an `OptionRegistry` and a `ParseEngine`. It adds the
conventional `-h/--help` and `--version` options, seeds parser-level
defaults, and turns engine errors and flow signals into console output and
exit codes.

Public Interface:
- `add_option(...)`: Declare an option; returns it for fluent chaining.
- `set_defaults(...)`: Parser-level defaults, applied before option defaults.
- `parse_args(...)` / `parse_argv(...)`: Parse into `(Values, leftovers)`.
- `format_help()` / `print_help()`: Plain-text and rich help output.
- `error(...)` / `exit(...)`: Report a usage error or exit.

Example Usage:
    parser = OptionParser(description="just an example")
    parser.add_option("-f", "--file", dest="filename", metavar="FILE",
                      help="write report to FILE")
    parser.add_option("-q", "--quiet").set_action("store_false") \\
        .set_dest("verbose").set_default("1")

    values, args = parser.parse_args(["-f", "out.txt", "-q", "extra"])
    # values["filename"] == "out.txt", values["verbose"] == "0", args == ["extra"]
"""
from __future__ import annotations

import os
import sys
from typing import Any, Iterable, NoReturn, Sequence

from rich.console import Console
from rich.markup import escape

from optline.console import console, error_console
from optline.exceptions import OptionParseError
from optline.logger import logger
from optline.parser.engine import ParseEngine
from optline.parser.option import Option
from optline.parser.option_action import OptionAction, OptionType
from optline.parser.registry import OptionRegistry
from optline.parser.values import Values
from optline.signals import HelpSignal, VersionSignal
from optline.utils import get_program_invocation

HELP_COLUMN = 30


class OptionParser:
    """
    Declares options and parses command lines into `Values`.

    Features:
    - Short, long, clustered and abbreviated options.
    - store, store_const, store_true, store_false, append, append_const,
      count, help and version actions.
    - Choice validation and optional strict type checking.
    - Parser-level and per-option defaults.
    - Help, usage and version rendering using the Rich library.
    """

    def __init__(
        self,
        usage: str = "%prog [options]",
        version: str = "",
        description: str = "",
        prog: str | None = None,
        epilog: str = "",
        add_help_option: bool = True,
        add_version_option: bool = True,
        strict_types: bool = False,
        output_console: Console | None = None,
        stderr_console: Console | None = None,
    ) -> None:
        self.usage: str = usage
        self.version: str = version
        self.description: str = description
        self._prog: str | None = prog
        self.epilog: str = epilog
        self.add_help_option: bool = add_help_option
        self.add_version_option: bool = add_version_option
        self.console: Console = output_console or console
        self.error_console: Console = stderr_console or error_console
        self.registry: OptionRegistry = OptionRegistry()
        self.engine: ParseEngine = ParseEngine(self.registry, strict_types=strict_types)
        self._defaults: dict[str, Any] = {}
        self._leftovers: list[str] = []
        if add_help_option:
            self._add_help()

    def _add_help(self) -> None:
        """Add help option to the parser."""
        self.add_option(
            "-h",
            "--help",
            action=OptionAction.HELP,
            help="show this help message and exit",
        )

    def _add_version(self) -> None:
        """Add the version option once a version string is known."""
        if not (self.add_version_option and self.version):
            return
        if "--version" in self.registry:
            return
        self.add_option(
            "--version",
            action=OptionAction.VERSION,
            help="show program's version number and exit",
        )

    @property
    def prog(self) -> str:
        return self._prog or get_program_invocation()

    @prog.setter
    def prog(self, prog: str) -> None:
        self._prog = prog

    @property
    def strict_types(self) -> bool:
        return self.engine.strict_types

    @strict_types.setter
    def strict_types(self, strict: bool) -> None:
        self.engine.strict_types = strict

    @property
    def args(self) -> list[str]:
        """Leftover positional arguments of the last parse."""
        return list(self._leftovers)

    def add_option(
        self,
        *flags: str,
        action: str | OptionAction = OptionAction.STORE,
        type: str | OptionType = OptionType.STRING,
        dest: str | None = None,
        default: Any = None,
        nargs: int | None = None,
        const: Any = None,
        choices: Iterable[Any] | None = None,
        help: str = "",
        metavar: str = "",
    ) -> Option:
        """
        Declare a new option.

        Args:
            *flags (str): Short and long flags, e.g. `"-f", "--file"`.
            action (str | OptionAction): What to do on each occurrence.
            type (str | OptionType): Type the option's values are checked against.
            dest (str | None): Key in the parsed `Values`. Derived from the
                flags when omitted.
            default (Any): Default seeded before parsing.
            nargs (int | None): Values consumed per occurrence.
            const (Any): Value used by `store_const` and `append_const`.
            choices (Iterable | None): Allowed values; implies type `choice`.
            help (str): Help text. `%default` is replaced by the default.
            metavar (str): Placeholder for the value in help output.

        Returns:
            Option: The registered option, for fluent configuration.
        """
        option = Option(
            flags=tuple(flags),
            action=action,  # type: ignore[arg-type]
            value_type=type,  # type: ignore[arg-type]
            dest=dest or "",
            default=default,
            const=const,
            nargs=nargs,
            choices=list(choices) if choices is not None else [],
            help=help,
            metavar=metavar,
        )
        return self.registry.register(option)

    def get_option(self, flag: str) -> Option | None:
        """Return the option registered for an exact flag."""
        if flag.startswith("--"):
            return next((o for o in self.registry if flag in o.long_flags), None)
        return self.registry.lookup_short(flag)

    def has_option(self, flag: str) -> bool:
        return flag in self.registry

    def set_defaults(self, **defaults: Any) -> OptionParser:
        """Set parser-level defaults. These take precedence over option defaults."""
        self._defaults.update(defaults)
        return self

    def get_default_values(self) -> Values:
        """Return a `Values` holding every parser-level and option default."""
        values = Values(self._defaults)
        values.seed(self.registry.defaults())
        return values

    def parse_args(
        self,
        args: Sequence[str] | None = None,
        values: Values | None = None,
        exit_on_error: bool = True,
    ) -> tuple[Values, list[str]]:
        """
        Parse a command line.

        Args:
            args (Sequence[str] | None): Tokens without the program name.
                Defaults to `sys.argv[1:]`.
            values (Values | None): Existing values to accumulate into.
            exit_on_error (bool): Report errors and exit (status 2), and exit
                after help/version output (status 0). If False, errors and
                signals propagate to the caller.

        Returns:
            tuple[Values, list[str]]: Parsed values and positional leftovers.
        """
        if args is None:
            args = sys.argv[1:]
        self._add_version()
        if values is None:
            values = Values()
        values.seed(self._defaults)

        try:
            values, leftovers = self.engine.parse(args, values)
        except OptionParseError as error:
            if not exit_on_error:
                raise
            self.error(error.message)
        except HelpSignal:
            if not exit_on_error:
                raise
            self.print_help()
            self.exit()
        except VersionSignal:
            if not exit_on_error:
                raise
            self.print_version()
            self.exit()

        self._leftovers = list(leftovers)
        return values, leftovers

    def parse_argv(
        self,
        argv: Sequence[str],
        values: Values | None = None,
        exit_on_error: bool = True,
    ) -> tuple[Values, list[str]]:
        """Parse an `argv`-style list. `argv[0]` names the program if `prog` is unset."""
        argv = list(argv)
        if argv and self._prog is None:
            self._prog = os.path.basename(argv[0])
        return self.parse_args(argv[1:], values, exit_on_error)

    def get_usage(self) -> str:
        """Return the usage line with `%prog` expanded, or "" if suppressed."""
        if not self.usage:
            return ""
        return f"Usage: {self.usage.replace('%prog', self.prog)}"

    def get_version(self) -> str:
        return self.version.replace("%prog", self.prog)

    def _expand_default(self, option: Option) -> str:
        default = self._defaults.get(option.dest, option.default)
        return option.help.replace("%default", "none" if default is None else str(default))

    def format_option_help(self) -> str:
        """
        Render all declared options as help lines.

        Returns:
            str: An "Options:" block with one entry per option.
        """
        lines = ["Options:"]
        for option in self.registry:
            flags = option.get_flags_text()
            line = f"  {flags:<{HELP_COLUMN}} "
            help_text = self._expand_default(option)
            if help_text and len(flags) > HELP_COLUMN:
                help_text = f"\n{'':<{HELP_COLUMN + 3}}{help_text}"
            lines.append(f"{line}{help_text}".rstrip())
        return "\n".join(lines)

    def format_help(self) -> str:
        """Render the full plain-text help: usage, description, options, epilog."""
        sections = []
        usage = self.get_usage()
        if usage:
            sections.append(usage)
        if self.description:
            sections.append(self.description)
        if len(self.registry):
            sections.append(self.format_option_help())
        if self.epilog:
            sections.append(self.epilog)
        return "\n\n".join(sections) + "\n"

    def print_usage(self, output_console: Console | None = None) -> None:
        usage = self.get_usage()
        if usage:
            (output_console or self.console).print(f"[usage]{escape(usage)}[/usage]")

    def print_help(self) -> None:
        """
        Print formatted help text using Rich output.

        Includes usage, description, options and optional epilog.
        """
        self.print_usage()
        if self.description:
            self.console.print(f"\n{escape(self.description)}")
        if len(self.registry):
            self.console.print("\n[heading]Options:[/heading]")
            for line in self.format_option_help().splitlines()[1:]:
                self.console.print(escape(line))
        if self.epilog:
            self.console.print("\n" + escape(self.epilog), style="epilog")

    def print_version(self) -> None:
        if self.version:
            self.console.print(escape(self.get_version()))

    def error(self, message: str) -> NoReturn:
        """Print the usage and an error message to stderr, then exit with status 2."""
        logger.debug("Usage error: %s", message)
        self.print_usage(self.error_console)
        self.error_console.print(f"[error]{escape(self.prog)}: error:[/error] {escape(message)}")
        raise SystemExit(2)

    def exit(self, status: int = 0) -> NoReturn:
        raise SystemExit(status)

    def __str__(self) -> str:
        return (
            f"OptionParser(prog={self.prog!r}, options={len(self.registry)}, "
            f"strict_types={self.strict_types})"
        )

    def __repr__(self) -> str:
        return str(self)
