# Optline Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Contains value coercion helpers for Optline option values.

Option values are kept as raw strings in `Values`. These helpers convert them
to Python types on demand and turn declared defaults back into raw strings.

Functions:
- coerce_bool: Convert a string to a boolean.
- coerce_value: Convert a string to a target type, raising on failure.
- to_raw: Convert a Python value to the raw string form stored in `Values`.
"""
from typing import Any

from optline.parser.option_action import OptionType

TRUE_STRINGS = {"true", "t", "1", "yes", "y", "on"}
FALSE_STRINGS = {"false", "f", "0", "no", "n", "off", ""}

TYPE_MAP: dict[OptionType, type] = {
    OptionType.STRING: str,
    OptionType.CHOICE: str,
    OptionType.INT: int,
    OptionType.FLOAT: float,
    OptionType.BOOL: bool,
}


def coerce_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Accepts various truthy and falsy representations such as 'true', 'yes', '0',
    'off', etc.

    Args:
        value (str): The input string or boolean.

    Returns:
        bool: Parsed boolean result.

    Raises:
        ValueError: If the text is not a recognised boolean.
    """
    if isinstance(value, bool):
        return value
    value = value.strip().lower()
    if value in TRUE_STRINGS:
        return True
    elif value in FALSE_STRINGS:
        return False
    raise ValueError(f"Value '{value}' is not a valid boolean")


def coerce_value(value: str, target_type: type | OptionType) -> Any:
    """
    Convert a raw option string to the given target type.

    Args:
        value (str): The raw string.
        target_type (type | OptionType): A Python type or an `OptionType`.

    Returns:
        Any: The coerced value.

    Raises:
        ValueError: If the value cannot be converted.
    """
    if isinstance(target_type, OptionType):
        target_type = TYPE_MAP[target_type]

    if target_type is bool:
        return coerce_bool(value)

    if target_type is int:
        try:
            return int(value.strip())
        except ValueError:
            raise ValueError(f"Value '{value}' is not a valid integer") from None

    if target_type is float:
        try:
            return float(value.strip())
        except ValueError:
            raise ValueError(
                f"Value '{value}' is not a valid floating-point number"
            ) from None

    return target_type(value)


def to_raw(value: Any) -> str:
    """Return the raw string stored for a declared default or const value."""
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)
