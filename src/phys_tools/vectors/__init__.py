"""
Vector Decomposition Module

This module converts 2D vectors between magnitude/direction form and
Cartesian (x, y) components.

Main functions:
- vector_components: (magnitude, direction) -> (x, y)
- vector_magnitude_direction: (x, y) -> (magnitude, direction in [0, 360))
- add_polar_components: Add magnitude and direction to an xarray Dataset
"""

from .components import (
    vector_components,
    vector_magnitude_direction,
    add_polar_components,
)

__all__ = [
    'vector_components',
    'vector_magnitude_direction',
    'add_polar_components',
]
