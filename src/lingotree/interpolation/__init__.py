"""Placeholder grammar and interpolators."""

from lingotree.interpolation.grammar import Declaration, find_declarations
from lingotree.interpolation.interpolator import (
    FunctionInterpolator,
    NoErrorInterpolator,
    PlaceholderInterpolator,
)

__all__ = [
    "Declaration",
    "FunctionInterpolator",
    "NoErrorInterpolator",
    "PlaceholderInterpolator",
    "find_declarations",
]
