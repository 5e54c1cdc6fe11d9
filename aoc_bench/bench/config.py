from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, Optional


@dataclass
class BenchmarkConfig:
    """Configuration for a harness run.

    Without ``loop_count`` every part runs once and is checked against its
    known answer. With it, every part is benchmarked ``loop_count`` times.
    """

    loop_count: Optional[int] = field(default=None)
    fixture_root: Path = field(default=Path("src"))
    color: bool = field(default=True)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = field(default="WARNING")

    def __post_init__(self):
        if self.loop_count is not None:
            if isinstance(self.loop_count, bool) or not isinstance(self.loop_count, int):
                raise ValueError("loop_count must be an int")
            if self.loop_count <= 0:
                raise ValueError("loop_count must be > 0")
        self.fixture_root = Path(self.fixture_root)
        if self.log_level not in ["DEBUG", "INFO", "WARNING", "ERROR"]:
            raise ValueError(f"Invalid log_level: {self.log_level}")

    @property
    def benchmark_mode(self) -> bool:
        return self.loop_count is not None
