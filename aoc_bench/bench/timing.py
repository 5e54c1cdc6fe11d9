"""Timing utilities for running and benchmarking solvers."""

from __future__ import annotations

from time import perf_counter_ns
from typing import List, Sequence, Tuple

from aoc_bench.solve import Solve

from .results import BenchmarkResult, PartResult

TOP_PERCENT_DIVISOR = 20
"""``loop_count // 20`` is the sorted index of the reported top-5% latency."""


def time_solve(part: Solve, lines: Sequence[str]) -> Tuple[str, int]:
    """Run ``part`` once on a fresh copy of ``lines``.

    Returns
    -------
    Tuple[str, int]
        The computed output and the wall-clock duration in nanoseconds. Copying
        the input is not included in the duration.
    """
    owned = list(lines)
    start = perf_counter_ns()
    result = part.solve(owned)
    duration = perf_counter_ns() - start
    return result, duration


def verify_part(part: Solve, lines: Sequence[str]) -> PartResult:
    """Run ``part`` once and compare its output with its known-correct answer."""
    output, duration = time_solve(part, lines)
    expected = part.correct_solution()
    return PartResult(
        passed=output == expected, output=output, expected=expected, duration_ns=duration
    )


def top_percentile_index(loop_count: int) -> int:
    """Index of the top-5% latency in an ascending sample of ``loop_count`` timings.

    Below 20 loops this is 0, the single fastest run.
    """
    return loop_count // TOP_PERCENT_DIVISOR


def benchmark_part(part: Solve, lines: Sequence[str], loop_count: int) -> BenchmarkResult:
    """Time ``loop_count`` back-to-back runs of ``part`` and pick the top-5% latency.

    Each run gets its own copy of ``lines``; outputs are discarded.

    Raises
    ------
    ValueError
        If ``loop_count`` is not positive.
    """
    if loop_count <= 0:
        raise ValueError("loop_count must be > 0")

    timings: List[int] = []
    for _ in range(loop_count):
        _, duration = time_solve(part, lines)
        timings.append(duration)

    timings.sort()
    return BenchmarkResult(
        loop_count=loop_count,
        timings_ns=tuple(timings),
        latency_ns=timings[top_percentile_index(loop_count)],
    )
