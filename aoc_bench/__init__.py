from aoc_bench.bench import (
    BenchmarkConfig,
    BenchmarkResult,
    FixtureError,
    PartReport,
    PartResult,
    Reporter,
    Runner,
    RunnerError,
    RunnerFatalError,
    SelectionOutOfRange,
    benchmark_part,
    run_solutions,
    verify_part,
)
from aoc_bench.data import ParseError, ResolvedScope, Selection, SelectionKind
from aoc_bench.fixtures import FixtureStore
from aoc_bench.logging import configure_logging, get_logger
from aoc_bench.registry import FIRST_YEAR, Registry, RegistryError, load_registry
from aoc_bench.solve import Solution, Solve, solution

__all__ = [
    # Main entry points
    "Runner",
    "run_solutions",
    "BenchmarkConfig",
    # Solver capability
    "Solve",
    "Solution",
    "solution",
    # Registry
    "FIRST_YEAR",
    "Registry",
    "RegistryError",
    "load_registry",
    # Selection types
    "Selection",
    "SelectionKind",
    "ResolvedScope",
    "ParseError",
    # Execution
    "FixtureStore",
    "Reporter",
    "benchmark_part",
    "verify_part",
    "PartResult",
    "BenchmarkResult",
    "PartReport",
    # Errors
    "RunnerError",
    "RunnerFatalError",
    "SelectionOutOfRange",
    "FixtureError",
    "configure_logging",
    "get_logger",
]
