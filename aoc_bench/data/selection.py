"""Selection tokens and their resolution against registry bounds."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Sequence, Tuple

from pydantic import Field, NonNegativeInt, model_validator

from aoc_bench.errors import SelectionOutOfRange

from .utils import BaseModelWithDocstrings

MAX_INDEX = 2**64 - 1
"""Largest index a selection token may name."""


class ParseError(ValueError):
    """Raised when a selection token is neither a wildcard nor a non-negative integer."""


class SelectionKind(str, Enum):
    """Which entries of a year or day sequence a selection refers to."""

    ALL = "all"
    """Every entry, in order."""
    LATEST = "latest"
    """Only the last entry."""
    SINGLE = "single"
    """Exactly one entry, addressed by its absolute number."""


class Selection(BaseModelWithDocstrings):
    """A parsed selection token.

    Years are addressed by their absolute number (e.g. 2022), days by their
    1-based number inside a year.
    """

    kind: SelectionKind
    """The selection variant."""
    index: Optional[NonNegativeInt] = Field(default=None)
    """The selected absolute number. Only set for SINGLE selections."""

    @model_validator(mode="after")
    def _validate_index(self) -> "Selection":
        if self.kind == SelectionKind.SINGLE and self.index is None:
            raise ValueError("a single selection requires an index")
        if self.kind != SelectionKind.SINGLE and self.index is not None:
            raise ValueError(f"a {self.kind.value} selection does not take an index")
        return self

    @classmethod
    def all(cls) -> "Selection":
        return cls(kind=SelectionKind.ALL)

    @classmethod
    def latest(cls) -> "Selection":
        return cls(kind=SelectionKind.LATEST)

    @classmethod
    def single(cls, index: int) -> "Selection":
        return cls(kind=SelectionKind.SINGLE, index=index)

    @classmethod
    def parse(cls, text: str) -> "Selection":
        """Parse a selection token.

        Parameters
        ----------
        text : str
            ``"*"`` for all entries, ``"."`` for the latest one, or a
            non-negative integer (optionally prefixed with ``+``) for a single
            entry. Surrounding whitespace is not accepted.

        Returns
        -------
        Selection
            The parsed selection.

        Raises
        ------
        ParseError
            If the token is none of the accepted shapes.
        """
        if text == "*":
            return cls.all()
        if text == ".":
            return cls.latest()
        # int() would also accept whitespace, "-", underscores and non-ASCII digits
        digits = text[1:] if text.startswith("+") else text
        if not digits.isascii() or not digits.isdigit():
            raise ParseError(f"invalid selection {text!r}: expected '*', '.' or a number")
        index = int(digits)
        if index > MAX_INDEX:
            raise ParseError(f"invalid selection {text!r}: number too large")
        return cls.single(index)

    @property
    def is_all(self) -> bool:
        return self.kind == SelectionKind.ALL

    @property
    def is_latest(self) -> bool:
        return self.kind == SelectionKind.LATEST

    @property
    def is_single(self) -> bool:
        return self.kind == SelectionKind.SINGLE

    def __str__(self) -> str:
        if self.is_all:
            return "*"
        if self.is_latest:
            return "."
        return str(self.index)


class ResolvedScope(BaseModelWithDocstrings):
    """The entries of one sequence picked by a selection."""

    start: int
    """Absolute number of the first resolved entry."""
    offsets: Tuple[int, ...]
    """Positions of the resolved entries inside the sequence, ascending."""

    def numbered(self, entries: Sequence) -> list:
        """Pair each resolved entry with its absolute number.

        Absolute numbers count up from ``start`` by the entry's offset from the
        first resolved entry.
        """
        if not self.offsets:
            return []
        first = self.offsets[0]
        return [(self.start + offset - first, entries[offset]) for offset in self.offsets]


def resolve(selection: Selection, length: int, first_valid: int) -> Optional[ResolvedScope]:
    """Map a selection onto a sequence of ``length`` entries.

    The first entry has absolute number ``first_valid``. Returns ``None`` when a
    SINGLE selection falls outside ``[first_valid, first_valid + length - 1]``.
    ALL and LATEST over an empty sequence resolve to no entries.
    """
    if selection.is_all:
        return ResolvedScope(start=first_valid, offsets=tuple(range(length)))
    if selection.is_latest:
        if length == 0:
            return ResolvedScope(start=first_valid, offsets=())
        return ResolvedScope(start=first_valid + length - 1, offsets=(length - 1,))
    index = selection.index
    if index < first_valid or index - first_valid >= length:
        return None
    return ResolvedScope(start=index, offsets=(index - first_valid,))


def resolve_years(selection: Selection, year_count: int, first_year: int) -> ResolvedScope:
    """Resolve a year selection; years are numbered from ``first_year``.

    Raises
    ------
    SelectionOutOfRange
        If a single year lies outside the registered years.
    """
    scope = resolve(selection, year_count, first_year)
    if scope is None:
        raise SelectionOutOfRange("year", selection.index)
    return scope


def resolve_days(selection: Selection, day_count: int, year: int) -> ResolvedScope:
    """Resolve a day selection within ``year``; days are numbered from 1.

    Raises
    ------
    SelectionOutOfRange
        If a single day lies outside the year's days.
    """
    scope = resolve(selection, day_count, 1)
    if scope is None:
        raise SelectionOutOfRange("day", selection.index, year=year)
    return scope
