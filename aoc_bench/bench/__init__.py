from aoc_bench.errors import FixtureError, RunnerError, RunnerFatalError, SelectionOutOfRange

from .config import BenchmarkConfig
from .reporter import Reporter, describe_selection, format_duration
from .results import BenchmarkResult, PartReport, PartResult
from .runner import Runner, run_solutions
from .timing import benchmark_part, time_solve, top_percentile_index, verify_part

__all__ = [
    "BenchmarkConfig",
    "BenchmarkResult",
    "FixtureError",
    "PartReport",
    "PartResult",
    "Reporter",
    "Runner",
    "RunnerError",
    "RunnerFatalError",
    "SelectionOutOfRange",
    "benchmark_part",
    "describe_selection",
    "format_duration",
    "run_solutions",
    "time_solve",
    "top_percentile_index",
    "verify_part",
]
