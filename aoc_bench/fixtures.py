"""Per-day input fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import List, Union

from aoc_bench.errors import FixtureError
from aoc_bench.logging import get_logger

logger = get_logger(__name__)


class FixtureStore:
    """Loads the input lines of a day from ``<root>/year_<Y>/day_<D>/input.txt``.

    All parts of a day share one fixture.
    """

    def __init__(self, root: Union[str, Path] = "src") -> None:
        self.root = Path(root)

    def path_for(self, year: int, day: int) -> Path:
        return self.root / f"year_{year}" / f"day_{day}" / "input.txt"

    def load(self, year: int, day: int) -> List[str]:
        """Read the fixture as a list of lines without line terminators.

        Raises
        ------
        FixtureError
            If the file is missing, unreadable, or not valid UTF-8.
        """
        path = self.path_for(year, day)
        try:
            with path.open(encoding="utf-8", newline="") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise FixtureError(year, day, path, str(e)) from e
        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        lines = [line[:-1] if line.endswith("\r") else line for line in lines]
        logger.debug(f"Loaded {len(lines)} lines from {path}")
        return lines
