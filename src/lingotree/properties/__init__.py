"""Property sources feeding values to interpolation."""

from lingotree.properties.sources import (
    ChainPropertySource,
    DefaultedPropertySource,
    FunctionPropertySource,
    MapPropertySource,
)

__all__ = [
    "ChainPropertySource",
    "DefaultedPropertySource",
    "FunctionPropertySource",
    "MapPropertySource",
]
