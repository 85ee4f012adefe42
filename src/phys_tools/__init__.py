"""
Phys Tools - Closed-form Vector and Oscillation Formulas

A Python package of stateless physics helpers for vector decomposition,
coordinate conversion and simple harmonic motion. Every function works on
plain floats; the vector and coordinate functions also accept numpy arrays
and xarray objects element-wise.

Main modules:
- vectors: 2D magnitude/direction <-> (x, y) components
- transform: 3D Cartesian <-> spherical coordinates
- oscillation: Simple harmonic motion of an ideal spring
- utils: Angle normalisation and degenerate-input warnings

Numerical policy:
Out-of-domain inputs (the origin for spherical conversion, a non-positive
spring constant) return NaN or inf with a DegenerateInputWarning. Pass
strict=True to get a ValueError instead.
"""

__version__ = "0.1.0"

# Import main functions for convenient access
from .vectors import (
    vector_components,
    vector_magnitude_direction,
    add_polar_components,
)

from .transform import (
    cartesian_to_spherical,
    spherical_to_cartesian,
    add_spherical_coordinates,
)

from .oscillation import (
    spring_harmonic_motion,
    format_harmonic_equation,
)

from .utils import (
    DegenerateInputWarning,
    normalize_degrees,
    normalize_radians,
)

__all__ = [
    # Vector decomposition
    'vector_components',
    'vector_magnitude_direction',
    'add_polar_components',

    # Coordinate transformation
    'cartesian_to_spherical',
    'spherical_to_cartesian',
    'add_spherical_coordinates',

    # Harmonic motion
    'spring_harmonic_motion',
    'format_harmonic_equation',

    # Utilities
    'DegenerateInputWarning',
    'normalize_degrees',
    'normalize_radians',
]
