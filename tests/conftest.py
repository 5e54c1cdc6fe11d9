import logging
from pathlib import Path
from typing import Callable, List, Optional

import pytest

from aoc_bench import FIRST_YEAR, FixtureStore, Registry, Reporter, Solve


class ConstantPart(Solve):
    """Test part that returns a fixed answer and records what it was given."""

    def __init__(self, expected: str, answer: Optional[str] = None) -> None:
        self.expected = expected
        self.answer = expected if answer is None else answer
        self.calls: List[List[str]] = []

    def correct_solution(self) -> str:
        return self.expected

    def solve(self, lines: List[str]) -> str:
        self.calls.append(list(lines))
        lines.clear()
        return self.answer


@pytest.fixture
def constant_part() -> Callable[..., ConstantPart]:
    return ConstantPart


@pytest.fixture
def fixture_root(tmp_path: Path) -> Callable[..., Path]:
    """Write ``input.txt`` files under ``tmp_path`` in the year_<Y>/day_<D> layout."""

    def write(year: int, day: int, text: str = "1\n2\n3\n") -> Path:
        path = tmp_path / f"year_{year}" / f"day_{day}" / "input.txt"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return tmp_path

    return write


@pytest.fixture
def store(tmp_path: Path) -> FixtureStore:
    return FixtureStore(tmp_path)


@pytest.fixture
def reporter() -> Reporter:
    return Reporter(color=False)


@pytest.fixture
def base_year() -> int:
    return FIRST_YEAR


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Keep handlers installed by configure_logging from leaking between tests."""
    logger = logging.getLogger("aoc_bench")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)


@pytest.fixture
def make_registry() -> Callable[..., Registry]:
    """Build a registry from years given as positional day lists."""

    def make(*years) -> Registry:
        return Registry.from_nested(years)

    return make
