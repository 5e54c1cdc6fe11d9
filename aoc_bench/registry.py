"""Static year -> day -> part registry of solvers."""

from __future__ import annotations

import importlib
import pkgutil
import re
from typing import Iterable, Tuple

from aoc_bench.logging import get_logger
from aoc_bench.solve import Solve

FIRST_YEAR = 2021
"""Absolute year number of the first entry of every registry."""

_YEAR_MODULE = re.compile(r"^year_(\d{4})$")

Day = Tuple[Solve, ...]
Year = Tuple[Day, ...]

logger = get_logger(__name__)


class RegistryError(ValueError):
    """Raised when a registry cannot be composed from its parts."""


class Registry:
    """Immutable, index-addressable composition of solvers.

    Year ``i`` (0-based) is the absolute year ``first_year + i``; day ``j``
    (0-based) inside a year is day ``j + 1``. A day may hold no parts.
    """

    _years: Tuple[Year, ...]
    """Year entries in ascending order."""

    _first_year: int
    """Absolute year number of the first entry."""

    def __init__(self, years: Tuple[Year, ...], first_year: int = FIRST_YEAR) -> None:
        self._years = years
        self._first_year = first_year

    @classmethod
    def from_nested(
        cls, nested: Iterable[Iterable[Iterable[Solve]]], first_year: int = FIRST_YEAR
    ) -> "Registry":
        """Freeze nested year/day/part iterables into a registry.

        Parameters
        ----------
        nested : Iterable[Iterable[Iterable[Solve]]]
            Years in order, each an iterable of days in order, each an iterable of parts.
        first_year : int
            Absolute number of the first year.

        Raises
        ------
        RegistryError
            If any part does not implement :class:`Solve`.
        """
        years = []
        for year_offset, days in enumerate(nested):
            frozen_days = []
            for day_offset, parts in enumerate(days):
                frozen_parts = tuple(parts)
                for part in frozen_parts:
                    if not isinstance(part, Solve):
                        raise RegistryError(
                            f"year {first_year + year_offset}, day {day_offset + 1}: "
                            f"{part!r} does not implement Solve"
                        )
                frozen_days.append(frozen_parts)
            years.append(tuple(frozen_days))
        return cls(tuple(years), first_year=first_year)

    @property
    def years(self) -> Tuple[Year, ...]:
        return self._years

    @property
    def first_year(self) -> int:
        return self._first_year

    @property
    def last_year(self) -> int:
        return self._first_year + len(self._years) - 1

    def year(self, number: int) -> Year:
        """Return the days of an absolute year number."""
        offset = number - self._first_year
        if offset < 0 or offset >= len(self._years):
            raise KeyError(number)
        return self._years[offset]

    def part_count(self) -> int:
        return sum(len(day) for year in self._years for day in year)

    def __len__(self) -> int:
        return len(self._years)

    def __repr__(self) -> str:
        return (
            f"Registry(first_year={self._first_year}, years={len(self._years)}, "
            f"parts={self.part_count()})"
        )


def load_registry(package: str, first_year: int = FIRST_YEAR) -> Registry:
    """Compose a registry from the ``year_<YYYY>`` modules of a package.

    Every year module exposes ``days()``, returning one sequence of parts per
    day, day 1 first. Years must be contiguous from ``first_year``.

    Raises
    ------
    RegistryError
        If the package cannot be imported, a year is missing or lies before
        ``first_year``, or a year module has no ``days()``.
    """
    try:
        pkg = importlib.import_module(package)
    except ImportError as e:
        raise RegistryError(f"cannot import solver package {package!r}: {e}") from e

    found = {}
    for info in pkgutil.iter_modules(getattr(pkg, "__path__", [])):
        match = _YEAR_MODULE.match(info.name)
        if match:
            found[int(match.group(1))] = f"{package}.{info.name}"

    if not found:
        logger.warning(f"No year modules found in {package}")
        return Registry((), first_year=first_year)

    expected = list(range(first_year, max(found) + 1))
    if sorted(found) != expected:
        missing = sorted(set(expected) - set(found))
        early = sorted(set(found) - set(expected))
        raise RegistryError(
            f"year modules of {package} must be contiguous from {first_year} "
            f"(missing: {missing}, before first year: {early})"
        )

    nested = []
    for year in expected:
        module = importlib.import_module(found[year])
        days = getattr(module, "days", None)
        if not callable(days):
            raise RegistryError(f"{found[year]} does not define days()")
        nested.append(days())
        logger.debug(f"Loaded {found[year]}")

    return Registry.from_nested(nested, first_year=first_year)
