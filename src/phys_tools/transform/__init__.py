"""
Coordinate Transformation Module

This module provides functions to transform 3D vectors between Cartesian
(x, y, z) and spherical (radius, polar angle, azimuthal angle) coordinates.

Main functions:
- cartesian_to_spherical: (x, y, z) -> (r, θ, φ)
- spherical_to_cartesian: (r, θ, φ) -> (x, y, z)
- add_spherical_coordinates: Add (r, θ, φ) to an xarray Dataset
"""

from .coordinates import (
    cartesian_to_spherical,
    spherical_to_cartesian,
    add_spherical_coordinates,
)

__all__ = [
    'cartesian_to_spherical',
    'spherical_to_cartesian',
    'add_spherical_coordinates',
]
