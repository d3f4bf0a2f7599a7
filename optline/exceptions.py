# Optline Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Optline.

Declaration errors are raised while options are being added to a registry.
Parse errors are raised while a token sequence is being parsed and carry
enough structured detail (offending token, option flag, counts, candidates,
choices) for a front end to format its own message.

Exception Hierarchy:
- OptlineError
    ├── OptionDeclarationError
    │    └── DuplicateFlagError
    └── OptionParseError
         ├── UnknownOptionError
         ├── AmbiguousOptionError
         ├── MissingArgumentError
         ├── InvalidChoiceError
         ├── UnexpectedArgumentError
         └── InvalidValueError
"""
from __future__ import annotations

from typing import Sequence


class OptlineError(Exception):
    """Base exception for Optline."""


class OptionDeclarationError(OptlineError):
    """Exception raised when an option is declared with invalid settings."""


class DuplicateFlagError(OptionDeclarationError):
    """Exception raised when a flag is already registered by another option."""

    def __init__(self, flag: str, existing: str):
        self.flag = flag
        self.existing = existing
        super().__init__(f"Flag '{flag}' is already used by option '{existing}'")


class OptionParseError(OptlineError):
    """Base exception for errors in user-supplied arguments.

    Attributes:
        option (str): The flag as the user wrote it (e.g. `-f` or `--file`).
        token (str): The raw argument token that triggered the error.
    """

    def __init__(self, message: str, option: str = "", token: str = ""):
        self.option = option
        self.token = token or option
        self.message = message
        super().__init__(message)


class UnknownOptionError(OptionParseError):
    """Exception raised when a flag does not match any declared option."""

    def __init__(self, option: str, token: str = ""):
        message = f"no such option: {option}"
        if token and token != option:
            message = f"{message} (in '{token}')"
        super().__init__(message, option=option, token=token)


class AmbiguousOptionError(OptionParseError):
    """Exception raised when a long option prefix matches several flags."""

    def __init__(self, option: str, candidates: Sequence[str], token: str = ""):
        self.candidates = list(candidates)
        super().__init__(
            f"ambiguous option: {option} ({', '.join(self.candidates)}?)",
            option=option,
            token=token,
        )


class MissingArgumentError(OptionParseError):
    """Exception raised when an option has fewer values than it requires."""

    def __init__(self, option: str, expected: int, missing: int, token: str = ""):
        self.expected = expected
        self.missing = missing
        if expected == 1:
            message = f"{option} option requires an argument"
        else:
            message = (
                f"{option} option requires {expected} arguments "
                f"({missing} missing)"
            )
        super().__init__(message, option=option, token=token)


class InvalidChoiceError(OptionParseError):
    """Exception raised when a value is not one of the option's choices."""

    def __init__(self, option: str, value: str, choices: Sequence[str], token: str = ""):
        self.value = value
        self.choices = list(choices)
        choices_text = ", ".join(f"'{choice}'" for choice in self.choices)
        super().__init__(
            f"option {option}: invalid choice: '{value}' (choose from {choices_text})",
            option=option,
            token=token,
        )


class UnexpectedArgumentError(OptionParseError):
    """Exception raised when a value is attached to an option that takes none."""

    def __init__(self, option: str, value: str, token: str = ""):
        self.value = value
        super().__init__(
            f"{option} option does not take a value", option=option, token=token
        )


class InvalidValueError(OptionParseError):
    """Exception raised in strict mode when a value cannot be converted."""

    def __init__(self, option: str, value: str, value_type: str, token: str = ""):
        self.value = value
        self.value_type = value_type
        super().__init__(
            f"option {option}: invalid {value_type} value: '{value}'",
            option=option,
            token=token,
        )
