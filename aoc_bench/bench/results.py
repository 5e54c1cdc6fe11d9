"""Result records produced by verification and benchmark runs."""

from __future__ import annotations

from typing import Optional, Tuple

from pydantic import Field, NonNegativeInt, PositiveInt

from aoc_bench.data.utils import BaseModelWithDocstrings

from .reporter import check_mark, format_duration


class PartResult(BaseModelWithDocstrings):
    """Outcome of a single verified run of a part."""

    passed: bool
    """Whether the computed output equals the known-correct answer exactly."""
    output: str
    """The computed output."""
    expected: str
    """The known-correct answer."""
    duration_ns: NonNegativeInt
    """Wall-clock duration of the solve call in nanoseconds."""

    def summary(self, color: bool = True) -> str:
        duration = format_duration(self.duration_ns)
        return f"{check_mark(self.passed, color)} {self.output} ({duration})"


class BenchmarkResult(BaseModelWithDocstrings):
    """Outcome of a repeated benchmark of a part."""

    loop_count: PositiveInt
    """Number of timed solve calls."""
    timings_ns: Tuple[NonNegativeInt, ...]
    """Recorded durations in nanoseconds, sorted ascending."""
    latency_ns: NonNegativeInt
    """The reported top-5% latency: ``timings_ns[loop_count // 20]``."""

    def summary(self) -> str:
        return f"{self.loop_count} loops, top 5%: {format_duration(self.latency_ns)} per loop"


class PartReport(BaseModelWithDocstrings):
    """One emitted result line."""

    year: int
    day: int
    part: int
    outcome: str
    """The formatted outcome appended to the line."""
    passed: Optional[bool] = Field(default=None)
    """Verification outcome; ``None`` in benchmark mode."""
