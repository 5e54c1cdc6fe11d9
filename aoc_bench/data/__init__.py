"""Data layer with strongly-typed models for the solver harness."""

from .selection import (
    ParseError,
    ResolvedScope,
    Selection,
    SelectionKind,
    resolve,
    resolve_days,
    resolve_years,
)

__all__ = [
    "ParseError",
    "ResolvedScope",
    "Selection",
    "SelectionKind",
    "resolve",
    "resolve_days",
    "resolve_years",
]
