"""Walks the registry according to year/day selections and runs the selected parts."""

from __future__ import annotations

from typing import List, Optional, Sequence

from aoc_bench.data import Selection, resolve_days, resolve_years
from aoc_bench.errors import SelectionOutOfRange
from aoc_bench.fixtures import FixtureStore
from aoc_bench.logging import get_logger
from aoc_bench.registry import Registry
from aoc_bench.solve import Solve

from .config import BenchmarkConfig
from .reporter import Reporter
from .results import PartReport
from .timing import benchmark_part, verify_part

logger = get_logger(__name__)


class Runner:
    """Runs registry parts in verification or benchmark mode.

    Parameters
    ----------
    registry : Registry
        The solvers to choose from.
    config : BenchmarkConfig
        Loop count, fixture location and output options.
    fixtures : Optional[FixtureStore]
        Input source; defaults to a store rooted at ``config.fixture_root``.
    reporter : Optional[Reporter]
        Output sink; defaults to stdout/stderr.
    """

    def __init__(
        self,
        registry: Registry,
        config: BenchmarkConfig = BenchmarkConfig(),
        fixtures: Optional[FixtureStore] = None,
        reporter: Optional[Reporter] = None,
    ) -> None:
        self._registry = registry
        self._config = config
        self._fixtures = fixtures or FixtureStore(config.fixture_root)
        self._reporter = reporter or Reporter(color=config.color)

    def run(self, year_selection: Selection, day_selection: Selection) -> List[PartReport]:
        """Run every part picked by the two selections, years then days then parts ascending.

        An out-of-range year stops the run before anything executes; an
        out-of-range day skips only that year. Days without parts are skipped
        silently.

        Raises
        ------
        FixtureError
            If the input of a selected day cannot be loaded.
        """
        registry = self._registry
        reports: List[PartReport] = []

        try:
            years = resolve_years(year_selection, len(registry), registry.first_year)
        except SelectionOutOfRange as e:
            self._reporter.diagnostic(str(e))
            return reports
        if not years.offsets:
            logger.warning("No years registered, nothing to run")
            return reports

        self._reporter.selection(year_selection, day_selection, years.start)

        for year_n, days_of_year in years.numbered(registry.years):
            try:
                days = resolve_days(day_selection, len(days_of_year), year_n)
            except SelectionOutOfRange as e:
                self._reporter.diagnostic(str(e))
                continue

            for day_n, parts in days.numbered(days_of_year):
                if not parts:
                    continue
                reports.extend(self.run_day(parts, year_n, day_n))

        return reports

    def run_day(self, parts: Sequence[Solve], year: int, day: int) -> List[PartReport]:
        """Load the day's input once and run each part on its own copy of it."""
        lines = self._fixtures.load(year, day)
        loop_count = self._config.loop_count
        reports: List[PartReport] = []

        for part_n, part in enumerate(parts, start=1):
            if loop_count is not None:
                outcome = benchmark_part(part, lines, loop_count).summary()
                passed = None
            else:
                result = verify_part(part, lines)
                outcome = result.summary(color=self._reporter.color)
                passed = result.passed
                if not passed:
                    logger.warning(
                        f"year {year}, day {day}, part {part_n}: expected "
                        f"{result.expected!r}, got {result.output!r}"
                    )

            self._reporter.result(year, day, part_n, outcome)
            reports.append(
                PartReport(year=year, day=day, part=part_n, outcome=outcome, passed=passed)
            )

        return reports


def run_solutions(
    registry: Registry,
    year_selection: Selection,
    day_selection: Selection,
    loop_count: Optional[int] = None,
    fixtures: Optional[FixtureStore] = None,
    reporter: Optional[Reporter] = None,
) -> List[PartReport]:
    """Run the selected parts; a ``loop_count`` switches from verification to benchmarking."""
    config = BenchmarkConfig(loop_count=loop_count)
    runner = Runner(registry, config, fixtures=fixtures, reporter=reporter)
    return runner.run(year_selection, day_selection)
