import sys
import textwrap
from pathlib import Path

import pytest

from aoc_bench import FIRST_YEAR, Registry, RegistryError, Solution, load_registry


def _part(answer: str) -> Solution:
    return Solution(lambda lines: answer, answer)


def test_from_nested_freezes_structure():
    registry = Registry.from_nested([[[_part("1"), _part("2")], []], [[_part("3")]]])

    assert len(registry) == 2
    assert registry.first_year == FIRST_YEAR
    assert registry.last_year == FIRST_YEAR + 1
    assert isinstance(registry.years, tuple)
    assert all(isinstance(day, tuple) for year in registry.years for day in year)
    assert registry.year(FIRST_YEAR)[1] == ()
    assert registry.part_count() == 3


def test_from_nested_rejects_non_solvers():
    with pytest.raises(RegistryError, match="day 2"):
        Registry.from_nested([[[_part("1")], [lambda lines: "x"]]])


def test_year_lookup_out_of_range():
    registry = Registry.from_nested([[[_part("1")]]])
    with pytest.raises(KeyError):
        registry.year(FIRST_YEAR + 1)
    with pytest.raises(KeyError):
        registry.year(FIRST_YEAR - 1)


def test_custom_first_year():
    registry = Registry.from_nested([[], []], first_year=2015)
    assert registry.last_year == 2016


def _write_package(root: Path, name: str, modules: dict) -> None:
    pkg = root / name
    pkg.mkdir()
    (pkg / "__init__.py").write_text("")
    for mod_name, source in modules.items():
        (pkg / f"{mod_name}.py").write_text(textwrap.dedent(source))


_YEAR_SOURCE = """
from aoc_bench import Solution

def days():
    return [
        [Solution(lambda lines: str(len(lines)), "{answer}")],
        [],
    ]
"""


def test_load_registry_discovers_year_modules(tmp_path, monkeypatch):
    _write_package(
        tmp_path,
        "solvers_ok",
        {
            "year_2021": _YEAR_SOURCE.format(answer="a"),
            "year_2022": _YEAR_SOURCE.format(answer="b"),
            "helpers": "X = 1\n",
        },
    )
    monkeypatch.syspath_prepend(str(tmp_path))

    registry = load_registry("solvers_ok")

    assert len(registry) == 2
    assert registry.year(2022)[0][0].correct_solution() == "b"
    assert registry.year(2022)[1] == ()


def test_load_registry_rejects_gaps(tmp_path, monkeypatch):
    _write_package(
        tmp_path,
        "solvers_gap",
        {
            "year_2021": _YEAR_SOURCE.format(answer="a"),
            "year_2023": _YEAR_SOURCE.format(answer="c"),
        },
    )
    monkeypatch.syspath_prepend(str(tmp_path))

    with pytest.raises(RegistryError, match="missing: \\[2022\\]"):
        load_registry("solvers_gap")


def test_load_registry_requires_days(tmp_path, monkeypatch):
    _write_package(tmp_path, "solvers_nodays", {"year_2021": "PARTS = []\n"})
    monkeypatch.syspath_prepend(str(tmp_path))

    with pytest.raises(RegistryError, match="days\\(\\)"):
        load_registry("solvers_nodays")


def test_load_registry_empty_package(tmp_path, monkeypatch):
    _write_package(tmp_path, "solvers_empty", {})
    monkeypatch.syspath_prepend(str(tmp_path))

    assert len(load_registry("solvers_empty")) == 0


def test_load_registry_missing_package():
    assert "solvers_does_not_exist" not in sys.modules
    with pytest.raises(RegistryError, match="cannot import"):
        load_registry("solvers_does_not_exist")
