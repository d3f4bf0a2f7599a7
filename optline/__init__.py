"""
Optline Option Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .exceptions import (
    AmbiguousOptionError,
    DuplicateFlagError,
    InvalidChoiceError,
    InvalidValueError,
    MissingArgumentError,
    OptionDeclarationError,
    OptionParseError,
    OptlineError,
    UnexpectedArgumentError,
    UnknownOptionError,
)
from .logger import logger
from .option_parser import OptionParser
from .parser import (
    Option,
    OptionAction,
    OptionRegistry,
    OptionType,
    ParseEngine,
    Value,
    Values,
)
from .version import __version__

__all__ = [
    "OptionParser",
    "Option",
    "OptionAction",
    "OptionType",
    "OptionRegistry",
    "ParseEngine",
    "Value",
    "Values",
    "OptlineError",
    "OptionDeclarationError",
    "DuplicateFlagError",
    "OptionParseError",
    "UnknownOptionError",
    "AmbiguousOptionError",
    "MissingArgumentError",
    "InvalidChoiceError",
    "UnexpectedArgumentError",
    "InvalidValueError",
    "logger",
    "__version__",
]
