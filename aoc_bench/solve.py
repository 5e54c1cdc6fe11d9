"""Solver capability consumed by the harness."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, List, Optional


class Solve(ABC):
    """A single puzzle part.

    The harness only ever asks a part for its known-correct answer and for the
    answer it computes from the day's input lines. ``solve`` owns the list it is
    given and may consume or mutate it.
    """

    @abstractmethod
    def correct_solution(self) -> str: ...

    @abstractmethod
    def solve(self, lines: List[str]) -> str: ...


class Solution(Solve):
    """A part backed by a plain function.

    Parameters
    ----------
    func : Callable[[List[str]], object]
        Computes the answer from the input lines. Non-string return values are
        converted with ``str``.
    expected : str
        The known-correct answer.
    name : Optional[str]
        Display name, defaults to the function's ``__name__``.
    """

    def __init__(
        self, func: Callable[[List[str]], object], expected: str, name: Optional[str] = None
    ) -> None:
        self._func = func
        self._expected = expected
        self.name = name or getattr(func, "__name__", type(self).__name__)

    def correct_solution(self) -> str:
        return self._expected

    def solve(self, lines: List[str]) -> str:
        result = self._func(lines)
        return result if isinstance(result, str) else str(result)

    def __repr__(self) -> str:
        return f"Solution(name={self.name!r}, expected={self._expected!r})"


def solution(expected: str, name: Optional[str] = None) -> Callable[[Callable], Solution]:
    """Decorator form of :class:`Solution`.

    ::

        @solution("12460")
        def part_1(lines):
            ...
    """

    def wrap(func: Callable[[List[str]], object]) -> Solution:
        return Solution(func, expected, name=name)

    return wrap
