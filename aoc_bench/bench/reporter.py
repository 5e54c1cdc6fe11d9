"""Formatting and emission of progress and result lines."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from aoc_bench.data import Selection
from aoc_bench.logging import get_logger

logger = get_logger(__name__)

PASS_MARK = "\x1b[32m✔\x1b[0m"
FAIL_MARK = "\x1b[31m✘\x1b[0m"

_UNITS = ((1_000_000_000, 9, "s"), (1_000_000, 6, "ms"), (1_000, 3, "µs"))


def format_duration(ns: int) -> str:
    """Render a duration in nanoseconds with the largest unit that keeps a non-zero whole part.

    The fraction is exact, with trailing zeros trimmed: ``1234567`` -> ``1.234567ms``.
    """
    if ns < 0:
        raise ValueError("duration must be non-negative")
    for scale, digits, unit in _UNITS:
        if ns >= scale:
            whole, frac = divmod(ns, scale)
            frac_text = f"{frac:0{digits}d}".rstrip("0")
            return f"{whole}.{frac_text}{unit}" if frac_text else f"{whole}{unit}"
    return f"{ns}ns"


def check_mark(passed: bool, color: bool = True) -> str:
    if color:
        return PASS_MARK if passed else FAIL_MARK
    return "✔" if passed else "✘"


def describe_selection(
    year_selection: Selection, day_selection: Selection, latest_year: int
) -> str:
    if year_selection.is_all:
        year_text = "all years"
    elif year_selection.is_latest:
        year_text = f"latest year ({latest_year})"
    else:
        year_text = f"year {year_selection.index}"

    if day_selection.is_all:
        day_text = "all days"
    elif day_selection.is_latest:
        day_text = "latest day"
    else:
        day_text = f"day {day_selection.index}"

    return f"solving {day_text} of {year_text}"


class Reporter:
    """Writes diagnostics to ``err`` and one result line per part to ``out``.

    Streams default to the process's stderr and stdout at emission time, so
    redirections made after construction are honoured.
    """

    def __init__(
        self, out: Optional[TextIO] = None, err: Optional[TextIO] = None, color: bool = True
    ) -> None:
        self._out = out
        self._err = err
        self.color = color

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    @property
    def err(self) -> TextIO:
        return self._err if self._err is not None else sys.stderr

    def selection(
        self, year_selection: Selection, day_selection: Selection, latest_year: int
    ) -> None:
        self.diagnostic(describe_selection(year_selection, day_selection, latest_year))

    def diagnostic(self, message: str) -> None:
        logger.debug(message)
        print(message, file=self.err, flush=True)

    def result(self, year: int, day: int, part: int, outcome: str) -> str:
        line = f"year {year}, day {day}, part {part}: {outcome}"
        logger.debug(line)
        print(line, file=self.out, flush=True)
        return line
