import argparse
import sys
from pathlib import Path
from typing import List, Optional

from aoc_bench.bench import BenchmarkConfig, FixtureError, Reporter, Runner
from aoc_bench.data import ParseError, Selection
from aoc_bench.logging import configure_logging, get_logger
from aoc_bench.registry import RegistryError, load_registry

logger = get_logger(__name__)


def _selection(text: str) -> Selection:
    try:
        return Selection.parse(text)
    except ParseError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid loop count {text!r}") from e
    if value <= 0:
        raise argparse.ArgumentTypeError("loop count must be > 0")
    return value


def run(args: argparse.Namespace) -> int:
    """Resolve the selections and run the solvers."""
    config = BenchmarkConfig(
        loop_count=args.loops,
        fixture_root=args.inputs,
        color=args.color,
        log_level=args.log_level,
    )
    configure_logging(config.log_level)

    try:
        registry = load_registry(args.package)
    except RegistryError as e:
        logger.error(str(e))
        return 1
    logger.info(f"Loaded {registry!r} from {args.package}")

    runner = Runner(registry, config, reporter=Reporter(color=config.color))
    try:
        runner.run(args.year, args.day)
    except FixtureError as e:
        logger.error(str(e))
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run, verify and benchmark puzzle solvers",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "year",
        nargs="?",
        type=_selection,
        default=Selection.latest(),
        help="'*' for all years, '.' for the latest (default), or a year number",
    )
    parser.add_argument(
        "day",
        nargs="?",
        type=_selection,
        default=Selection.latest(),
        help="'*' for all days, '.' for the latest (default), or a day number",
    )
    parser.add_argument(
        "--loops",
        type=_positive_int,
        default=None,
        help="Benchmark every part this many times instead of verifying it once",
    )
    parser.add_argument(
        "--package",
        default="solutions",
        help="Importable package holding year_<YYYY> modules",
    )
    parser.add_argument("--inputs", type=Path, default=Path("src"), help="Root of the input files")
    parser.add_argument("--color", action=argparse.BooleanOptionalAction, default=True)
    parser.add_argument(
        "--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"]
    )
    parser.set_defaults(func=run)
    return parser


def cli(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


def main() -> int:
    """Console entry point; solver packages in the working directory become importable."""
    cwd = str(Path.cwd())
    if "" not in sys.path and cwd not in sys.path:
        sys.path.insert(0, cwd)
    return cli()
