# Optline Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Option` dataclass used by `OptionRegistry` and `ParseEngine` to
represent one declared command-line option.

An `Option` bundles its short and long flags with the action to perform, the
type its values are checked against, the destination key, and the optional
default, const, arity, choices, help text and metavar.

Options can be configured through constructor keywords or through fluent
`set_*` setters that return the option itself:

    option = Option(("-q", "--quiet"))
    option.set_action("store_false").set_dest("verbose").set_default("1")

Key Attributes:
- `flags`: One or more short/long flags (e.g. `-v`, `--verbose`)
- `dest`: Key used in the parsed `Values`, derived from the flags if not given
- `action`: `OptionAction` describing what happens on each occurrence
- `value_type`: `OptionType` used to check values
- `nargs`: Number of values consumed per occurrence (0 for flag-like actions)
- `choices`: Allowed values for `choice` options
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from optline.exceptions import OptionDeclarationError
from optline.parser.option_action import OptionAction, OptionType
from optline.parser.utils import to_raw


def validate_flags(flags: tuple[str, ...]) -> None:
    """Validate the flags provided for an option."""
    if not flags:
        raise OptionDeclarationError("No flags provided")
    for flag in flags:
        if not isinstance(flag, str):
            raise OptionDeclarationError(f"Flag '{flag}' must be a string")
        if not flag.startswith("-"):
            raise OptionDeclarationError(
                f"Flag '{flag}' must start with '-' or '--'"
            )
        if flag.startswith("--"):
            if len(flag) < 3:
                raise OptionDeclarationError(
                    f"Flag '{flag}' must be at least 3 characters long"
                )
            if "=" in flag:
                raise OptionDeclarationError(f"Flag '{flag}' must not contain '='")
        elif len(flag) != 2:
            raise OptionDeclarationError(
                f"Flag '{flag}' must be a single character or start with '--'"
            )


def dest_from_flags(flags: tuple[str, ...]) -> str:
    """Derive a destination name, preferring the first long flag."""
    for flag in flags:
        if flag.startswith("--"):
            return flag[2:].replace("-", "_")
    return flags[0][1:]


@dataclass(eq=False)
class Option:
    """
    Represents a declared command-line option.

    Attributes:
        flags (tuple[str, ...]): Short and long flags for the option.
        action (OptionAction): What to do when the option is encountered.
        value_type (OptionType): Type the option's values are checked against.
        dest (str): The destination name for the option.
        default (str | None): Raw default seeded before parsing.
        const (str | None): Raw value stored by `store_const`/`append_const`.
        nargs (int): Number of values consumed per occurrence.
        choices (list[str]): Allowed values for `choice` options.
        help (str): Help text for the option.
        metavar (str): Placeholder for the option's value in help output.
    """

    flags: tuple[str, ...]
    action: OptionAction = OptionAction.STORE
    value_type: OptionType = OptionType.STRING
    dest: str = ""
    default: str | None = None
    const: str | None = None
    nargs: int | None = None
    choices: list[str] = field(default_factory=list)
    help: str = ""
    metavar: str = ""

    def __post_init__(self) -> None:
        self.flags = tuple(self.flags)
        validate_flags(self.flags)
        if not self.dest:
            self.dest = dest_from_flags(self.flags)
        self.set_action(self.action)
        if self.choices:
            self.set_choices(self.choices)
        else:
            self.set_type(self.value_type)
        if self.default is not None:
            self.set_default(self.default)
        if self.const is not None:
            self.set_const(self.const)

    @property
    def short_flags(self) -> tuple[str, ...]:
        return tuple(flag for flag in self.flags if not flag.startswith("--"))

    @property
    def long_flags(self) -> tuple[str, ...]:
        return tuple(flag for flag in self.flags if flag.startswith("--"))

    @property
    def takes_value(self) -> bool:
        return self.action.takes_value

    def set_action(self, action: OptionAction | str) -> Option:
        """Set the action. Actions that take no value force `nargs` to 0."""
        was_flag = isinstance(self.action, OptionAction) and not self.action.takes_value
        try:
            self.action = OptionAction(action)
        except ValueError as error:
            raise OptionDeclarationError(str(error)) from error
        if not self.action.takes_value:
            self.nargs = 0
        elif self.nargs is None or (was_flag and self.nargs == 0):
            self.nargs = 1
        return self

    def set_type(self, value_type: OptionType | str) -> Option:
        try:
            self.value_type = OptionType(value_type)
        except ValueError as error:
            raise OptionDeclarationError(str(error)) from error
        return self

    def set_dest(self, dest: str) -> Option:
        self.dest = dest
        return self

    def set_default(self, default: Any) -> Option:
        self.default = None if default is None else to_raw(default)
        return self

    def set_nargs(self, nargs: int) -> Option:
        self.nargs = nargs
        return self

    def set_const(self, const: Any) -> Option:
        self.const = None if const is None else to_raw(const)
        return self

    def set_choices(self, choices: Iterable[Any]) -> Option:
        """Set the allowed values. This also sets the type to `choice`."""
        if isinstance(choices, (str, dict)):
            raise OptionDeclarationError("choices must be a list, tuple or set")
        self.choices = [to_raw(choice) for choice in choices]
        self.value_type = OptionType.CHOICE
        return self

    def set_help(self, help_text: str) -> Option:
        self.help = help_text
        return self

    def set_metavar(self, metavar: str) -> Option:
        self.metavar = metavar
        return self

    def validate(self) -> None:
        """
        Check that the option is fully populated and consistent.

        Raises:
            OptionDeclarationError: If the option cannot be parsed.
        """
        name = "/".join(self.flags)
        if not self.dest or not self.dest.replace("_", "").replace("-", "").isalnum():
            raise OptionDeclarationError(
                f"Option {name} has an invalid dest: '{self.dest}'"
            )
        if self.takes_value:
            if not isinstance(self.nargs, int) or self.nargs < 1:
                raise OptionDeclarationError(
                    f"Option {name} with action '{self.action}' "
                    "needs a positive integer nargs"
                )
        elif self.nargs:
            raise OptionDeclarationError(
                f"nargs cannot be specified for '{self.action}' options ({name})"
            )
        if self.action in (OptionAction.STORE_CONST, OptionAction.APPEND_CONST):
            if self.const is None:
                raise OptionDeclarationError(
                    f"Option {name} with action '{self.action}' needs a const value"
                )
        if self.value_type == OptionType.CHOICE:
            if not self.choices:
                raise OptionDeclarationError(
                    f"Option {name} of type 'choice' needs at least one choice"
                )
            if self.default is not None and self.default not in self.choices:
                raise OptionDeclarationError(
                    f"Default value '{self.default}' for {name} not in allowed "
                    f"choices: {self.choices}"
                )
        elif self.choices:
            raise OptionDeclarationError(
                f"Option {name} has choices but type '{self.value_type}'"
            )

    def get_metavar(self) -> str:
        """Get the placeholder shown for this option's value."""
        if not self.takes_value:
            return ""
        if self.metavar:
            return self.metavar
        if self.choices:
            return f"{{{','.join(self.choices)}}}"
        return self.dest.upper()

    def get_flags_text(self) -> str:
        """Get the flags with their metavar, e.g. `-f FILE, --file=FILE`."""
        metavar = self.get_metavar()
        if self.nargs and self.nargs > 1:
            metavar = " ".join([metavar] * self.nargs)
        parts = []
        for flag in self.short_flags:
            parts.append(f"{flag} {metavar}" if metavar else flag)
        for flag in self.long_flags:
            parts.append(f"{flag}={metavar}" if metavar else flag)
        return ", ".join(parts)

    def __str__(self) -> str:
        return f"Option({'/'.join(self.flags)}, dest={self.dest!r}, action={self.action})"
