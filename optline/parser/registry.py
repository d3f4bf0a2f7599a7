# Optline Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionRegistry`, the owner of all declared options and of the two
flag indexes the parse engine resolves against.

The registry is append-only while options are being declared and read-only
while parsing, so one registry can serve any number of sequential parses.

Lookups:
- `lookup_short("-f")`: exact match only.
- `lookup_long("--fil")`: exact match, else the single long flag that the
  token is a prefix of. Several matches raise `AmbiguousOptionError`, none
  raises `UnknownOptionError`.
"""
from __future__ import annotations

from typing import Any, Iterator

from optline.exceptions import (
    AmbiguousOptionError,
    DuplicateFlagError,
    UnknownOptionError,
)
from optline.logger import logger
from optline.parser.option import Option


class OptionRegistry:
    """Ordered collection of options with short and long flag indexes."""

    def __init__(self) -> None:
        self._options: list[Option] = []
        self._short: dict[str, Option] = {}
        self._long: dict[str, Option] = {}

    def register(self, option: Option) -> Option:
        """
        Add an option to the registry.

        Every flag is checked before anything is inserted, so a rejected
        option leaves the registry untouched.

        Raises:
            DuplicateFlagError: If any flag of `option` is already registered.
        """
        for flag in option.flags:
            existing = self._short.get(flag) or self._long.get(flag)
            if existing is not None:
                raise DuplicateFlagError(flag, existing.dest)
        if len(set(option.flags)) != len(option.flags):
            duplicate = next(f for f in option.flags if option.flags.count(f) > 1)
            raise DuplicateFlagError(duplicate, option.dest)

        for flag in option.short_flags:
            self._short[flag] = option
        for flag in option.long_flags:
            self._long[flag] = option
        self._options.append(option)
        logger.debug("Registered %s", option)
        return option

    def lookup_short(self, flag: str) -> Option | None:
        """Return the option registered for a short flag such as `-f`."""
        return self._short.get(flag)

    def lookup_long(self, flag: str) -> Option:
        """
        Resolve a long flag, accepting any unambiguous prefix.

        Args:
            flag (str): The flag as written, e.g. `--fil`.

        Returns:
            Option: The matching option.

        Raises:
            UnknownOptionError: If no long flag starts with `flag`.
            AmbiguousOptionError: If more than one long flag starts with `flag`.
        """
        option = self._long.get(flag)
        if option is not None:
            return option
        if len(flag) <= 2:
            raise UnknownOptionError(flag)

        candidates = sorted(
            candidate for candidate in self._long if candidate.startswith(flag)
        )
        if len(candidates) == 1:
            logger.debug("Resolved abbreviation '%s' to '%s'", flag, candidates[0])
            return self._long[candidates[0]]
        if candidates:
            raise AmbiguousOptionError(flag, candidates)
        raise UnknownOptionError(flag)

    def get(self, dest: str) -> Option | None:
        """Return the first option storing into `dest`, if any."""
        return next((option for option in self._options if option.dest == dest), None)

    def flags(self) -> list[str]:
        """Return every registered flag in declaration order."""
        return [flag for option in self._options for flag in option.flags]

    def defaults(self) -> dict[str, Any]:
        """Return the declared defaults keyed by dest. The first one wins."""
        defaults: dict[str, Any] = {}
        for option in self._options:
            if option.default is not None and option.dest not in defaults:
                defaults[option.dest] = option.default
        return defaults

    def validate(self) -> None:
        """Check every option is ready for parsing."""
        for option in self._options:
            option.validate()

    @property
    def options(self) -> list[Option]:
        return list(self._options)

    def __contains__(self, flag: object) -> bool:
        return flag in self._short or flag in self._long

    def __iter__(self) -> Iterator[Option]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    def __str__(self) -> str:
        return (
            f"OptionRegistry(options={len(self._options)}, "
            f"short={len(self._short)}, long={len(self._long)})"
        )

    def __repr__(self) -> str:
        return str(self)
