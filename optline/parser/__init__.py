"""
Optline Option Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .engine import ParseEngine
from .option import Option
from .option_action import OptionAction, OptionType
from .registry import OptionRegistry
from .values import Value, Values

__all__ = [
    "Option",
    "OptionAction",
    "OptionType",
    "OptionRegistry",
    "ParseEngine",
    "Value",
    "Values",
]
