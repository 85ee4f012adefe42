"""
Two-dimensional vector decomposition

This module converts 2D vectors between polar form (magnitude, direction) and
Cartesian components (x, y).

Direction convention:
- Measured from the positive x-axis, counterclockwise positive (degrees)
- Returned directions are normalised into [0, 360)
  * 0° = +x, 90° = +y, 180° = -x, 270° = -y
"""

from typing import Tuple, Union
import numpy as np
import numpy.typing as npt
import xarray as xr

from ..utils.angles import normalize_degrees


def vector_components(
    magnitude: Union[float, npt.NDArray[np.floating]],
    direction: Union[float, npt.NDArray[np.floating]]
) -> Tuple[Union[float, npt.NDArray[np.floating]], Union[float, npt.NDArray[np.floating]]]:
    """
    Calculate the x and y components of a vector from its magnitude and direction.

    Parameters
    ----------
    magnitude : float or array-like
        Magnitude of the vector (typically >= 0)
    direction : float or array-like
        Direction of the vector in degrees, measured from the positive x-axis

    Returns
    -------
    x : float or array-like
        x-component, magnitude * cos(direction)
    y : float or array-like
        y-component, magnitude * sin(direction)

    Examples
    --------
    >>> from phys_tools import vector_components
    >>> x, y = vector_components(1.0, 90.0)
    >>> print(f"({x:.1f}, {y:.1f})")  # (0.0, 1.0)

    Notes
    -----
    - Any real direction is accepted; no normalisation is applied on input
    - Degrees are converted with the factor π/180
    """
    radians = np.deg2rad(direction)
    x = magnitude * np.cos(radians)
    y = magnitude * np.sin(radians)
    return x, y


def vector_magnitude_direction(
    x: Union[float, npt.NDArray[np.floating]],
    y: Union[float, npt.NDArray[np.floating]]
) -> Tuple[Union[float, npt.NDArray[np.floating]], Union[float, npt.NDArray[np.floating]]]:
    """
    Calculate the magnitude and direction of a vector from its components.

    Parameters
    ----------
    x : float or array-like
        x-component of the vector
    y : float or array-like
        y-component of the vector

    Returns
    -------
    magnitude : float or array-like
        Length of the vector, sqrt(x^2 + y^2)
    direction : float or array-like
        Angle from the positive x-axis in degrees, in [0, 360)

    Examples
    --------
    >>> from phys_tools import vector_magnitude_direction
    >>> magnitude, direction = vector_magnitude_direction(-1.0, 0.0)
    >>> print(f"{magnitude:.1f} at {direction:.1f} deg")  # 1.0 at 180.0 deg

    Notes
    -----
    - The zero vector gives magnitude 0 and direction 0 (arctan2(0, 0) = 0)
    - Negative angles from arctan2 are shifted up by 360°
    """
    magnitude = np.sqrt(x * x + y * y)
    direction = normalize_degrees(np.rad2deg(np.arctan2(y, x)))
    return magnitude, direction


def add_polar_components(
    ds: xr.Dataset,
    x_var: str = 'x',
    y_var: str = 'y'
) -> xr.Dataset:
    """
    Add magnitude and direction of a 2D vector field to a dataset.

    Parameters
    ----------
    ds : xarray.Dataset
        Input dataset containing the Cartesian components of a vector field
    x_var : str, optional
        Name of the x-component variable. Default: 'x'
    y_var : str, optional
        Name of the y-component variable. Default: 'y'

    Returns
    -------
    ds_out : xarray.Dataset
        Copy of ``ds`` with added data variables:
        - magnitude : Length of the vector (units of the components)
        - direction : Angle from +x, counterclockwise (degrees, 0-360)

    Raises
    ------
    ValueError
        If x_var or y_var not found in dataset

    Examples
    --------
    >>> import numpy as np
    >>> import xarray as xr
    >>> import phys_tools as pt
    >>>
    >>> ds = xr.Dataset({
    ...     'u': ('point', np.array([1.0, 0.0, -3.0])),
    ...     'v': ('point', np.array([0.0, 2.0, -4.0])),
    ... })
    >>> ds_polar = pt.add_polar_components(ds, x_var='u', y_var='v')
    >>> print(ds_polar['magnitude'].values)  # [1. 2. 5.]
    """
    for var in (x_var, y_var):
        if var not in ds:
            raise ValueError(
                f"Variable '{var}' not found in dataset. "
                f"Available variables: {', '.join(map(str, ds.data_vars))}"
            )

    x = ds[x_var]
    y = ds[y_var]

    magnitude, direction = vector_magnitude_direction(x, y)

    ds_out = ds.copy()
    ds_out['magnitude'] = magnitude
    ds_out['direction'] = direction

    ds_out['magnitude'].attrs = {
        'long_name': 'vector magnitude',
        'units': x.attrs.get('units', ''),
        'source_variables': f'{x_var}, {y_var}'
    }
    ds_out['direction'].attrs = {
        'long_name': 'vector direction',
        'units': 'degrees',
        'convention': 'from +x axis, counterclockwise positive',
        'valid_range': (0, 360)
    }

    return ds_out


__all__ = [
    'vector_components',
    'vector_magnitude_direction',
    'add_polar_components',
]
