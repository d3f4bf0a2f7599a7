# Optline Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionAction` and `OptionType`, the closed enumerations that describe
what an option does when it is encountered and how its values are checked.

Both enums accept their string values and a few config-friendly aliases, so
options can be declared with either `OptionAction.STORE_TRUE` or
`"store_true"` (or `"true"`).

Exports:
    - OptionAction: Enum of option actions.
    - OptionType: Enum of value types.

Example:
    OptionAction("store_true") → OptionAction.STORE_TRUE
    OptionAction("true")       → OptionAction.STORE_TRUE (via alias)
    OptionType("str")          → OptionType.STRING (via alias)
"""
from __future__ import annotations

from enum import Enum


class OptionAction(Enum):
    """
    Defines the action to be taken when an option is encountered.

    Members:
        STORE: Store the supplied value (default).
        STORE_CONST: Store the option's const value.
        STORE_TRUE: Store `"1"`.
        STORE_FALSE: Store `"0"`.
        APPEND: Append the supplied value to a list.
        APPEND_CONST: Append the option's const value to a list.
        COUNT: Count the number of occurrences.
        HELP: Request help output.
        VERSION: Request version output.

    Aliases:
        - "true" → "store_true"
        - "false" → "store_false"
        - "const" → "store_const"
    """

    STORE = "store"
    STORE_CONST = "store_const"
    STORE_TRUE = "store_true"
    STORE_FALSE = "store_false"
    APPEND = "append"
    APPEND_CONST = "append_const"
    COUNT = "count"
    HELP = "help"
    VERSION = "version"

    @classmethod
    def choices(cls) -> list[OptionAction]:
        """Return a list of all option actions."""
        return list(cls)

    @property
    def takes_value(self) -> bool:
        """True if the action consumes values from the command line."""
        return self in (OptionAction.STORE, OptionAction.APPEND)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "true": "store_true",
            "false": "store_false",
            "const": "store_const",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> OptionAction:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        """Return the string representation of the option action."""
        return self.value


class OptionType(Enum):
    """
    Defines how the values of an option are checked.

    `CHOICE` values are always checked against the option's choices. Numeric and
    boolean values are only checked when the engine runs in strict mode;
    otherwise conversion is left to the `Value` accessors.
    """

    STRING = "string"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    CHOICE = "choice"

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "str": "string",
            "integer": "int",
            "long": "int",
            "double": "float",
            "boolean": "bool",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> OptionType:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        alias = cls._get_alias(value.strip().lower())
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        return self.value
