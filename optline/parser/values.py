# Optline Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Values`, the result mapping of a parse, and `Value`, a typed accessor
over one raw entry.

`Values` maps each destination name to the raw string the user supplied (or
its declared default). Options that collect several strings (`append`,
`append_const` and multi-value `store`) also keep the full list, available via
`Values.all()`.

`Value` converts a raw string on demand. Its `as_*` accessors are best-effort:
malformed input yields `False`, `0` or `0.0` rather than an exception. The
whole string must parse, so `"12abc"` and `"3.7"` both read as the int `0`.
Use `Value.convert(..., strict=True)` for a raising conversion.

Example:
    values = Values({"verbose": "1"})
    values.store("filename", "out.txt")
    values.get_value("verbose").as_bool()  # True
    values.all("filename")                 # ["out.txt"]
"""
from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from optline.parser.option_action import OptionType
from optline.parser.utils import TYPE_MAP, coerce_value, to_raw


class Value:
    """Typed, read-only view over one raw option string."""

    __slots__ = ("raw",)

    def __init__(self, raw: str = "") -> None:
        self.raw: str = raw

    def as_str(self) -> str:
        return self.raw

    def as_bool(self) -> bool:
        return self.convert(bool)

    def as_int(self, default: int = 0) -> int:
        return self.convert(int, default=default)

    def as_float(self, default: float = 0.0) -> float:
        return self.convert(float, default=default)

    def convert(
        self,
        target_type: type | OptionType,
        strict: bool = False,
        default: Any = None,
    ) -> Any:
        """
        Convert the raw string to `target_type`.

        Args:
            target_type (type | OptionType): Desired type.
            strict (bool): Raise `ValueError` instead of falling back.
            default (Any): Fallback for malformed input. When omitted the
                target type's zero value is used.

        Returns:
            Any: The converted value or the fallback.
        """
        try:
            return coerce_value(self.raw, target_type)
        except ValueError:
            if strict:
                raise
            if default is not None:
                return default
            if isinstance(target_type, OptionType):
                target_type = TYPE_MAP[target_type]
            return target_type()

    def __str__(self) -> str:
        return self.raw

    def __bool__(self) -> bool:
        return self.as_bool()

    def __int__(self) -> int:
        return self.as_int()

    def __float__(self) -> float:
        return self.as_float()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Value):
            return self.raw == other.raw
        if isinstance(other, str):
            return self.raw == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.raw)

    def __repr__(self) -> str:
        return f"Value({self.raw!r})"


class Values(Mapping[str, str]):
    """
    Mapping of destination name to raw string value.

    Created fresh for each parse (or passed in again to accumulate results
    across several argument vectors). Only the parse engine and the caller
    write to it.
    """

    def __init__(self, defaults: Mapping[str, Any] | None = None) -> None:
        self._map: dict[str, str] = {}
        self._lists: dict[str, list[str]] = {}
        if defaults:
            self.seed(defaults)

    def seed(self, defaults: Mapping[str, Any]) -> None:
        """Fill in defaults for every dest that has no value yet."""
        for dest, default in defaults.items():
            if default is not None and dest not in self._map:
                self._map[dest] = to_raw(default)

    def __getitem__(self, dest: str) -> str:
        return self._map[dest]

    def __setitem__(self, dest: str, value: Any) -> None:
        self.store(dest, to_raw(value))

    def __iter__(self) -> Iterator[str]:
        return iter(self._map)

    def __len__(self) -> int:
        return len(self._map)

    def is_set(self, dest: str) -> bool:
        """Return True if `dest` has a value, parsed or default."""
        return dest in self._map

    def get_value(self, dest: str) -> Value:
        """Return a typed accessor for `dest`, empty if it has no value."""
        return Value(self._map.get(dest, ""))

    def all(self, dest: str) -> list[str]:
        """
        Return every raw string collected for `dest`, in order.

        For a dest that was only stored once (or only has a default) this is
        a one-element list. A dest with no value gives an empty list.
        """
        if dest in self._lists:
            return list(self._lists[dest])
        if dest in self._map:
            return [self._map[dest]]
        return []

    def store(self, dest: str, raw: str) -> None:
        self._map[dest] = raw
        self._lists.pop(dest, None)

    def store_many(self, dest: str, raws: list[str]) -> None:
        """Store a multi-value occurrence, replacing any earlier one."""
        self._map[dest] = " ".join(raws)
        self._lists[dest] = list(raws)

    def append(self, dest: str, raw: str) -> None:
        """Append one entry. The first append replaces a seeded default."""
        self._lists.setdefault(dest, []).append(raw)
        self._map[dest] = raw

    def increment(self, dest: str) -> int:
        count = self.get_value(dest).as_int() + 1
        self.store(dest, str(count))
        return count

    def as_dict(self) -> dict[str, str | list[str]]:
        """Return a plain dict, with lists for multi-value dests."""
        result: dict[str, str | list[str]] = dict(self._map)
        for dest, raws in self._lists.items():
            result[dest] = list(raws)
        return result

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Values):
            return self._map == other._map and self._lists == other._lists
        if isinstance(other, Mapping):
            return self.as_dict() == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Values({self.as_dict()!r})"
