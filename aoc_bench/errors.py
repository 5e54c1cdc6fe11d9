from __future__ import annotations

from pathlib import Path
from typing import Optional


class RunnerError(RuntimeError):
    """A condition that skips part of a run; sibling scopes continue."""


class RunnerFatalError(RunnerError):
    """A setup defect that must stop the whole run."""


class SelectionOutOfRange(RunnerError):
    def __init__(self, scope: str, index: int, year: Optional[int] = None) -> None:
        self.scope = scope
        self.index = index
        self.year = year
        if scope == "year":
            message = f"no solutions available for year {index}"
        else:
            message = f"no solution available for day {index} of year {year}"
        super().__init__(message)


class FixtureError(RunnerFatalError):
    def __init__(self, year: int, day: int, path: Path, reason: str) -> None:
        self.year = year
        self.day = day
        self.path = path
        super().__init__(
            f"input file for year_{year}/day_{day} not found or unreadable ({path}): {reason}"
        )
