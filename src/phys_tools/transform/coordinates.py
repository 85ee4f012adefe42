"""
Cartesian and spherical coordinate transformations

This module provides functions to transform 3D vectors between Cartesian
(x, y, z) and spherical (radius, polar angle, azimuthal angle) coordinates.

Coordinate definitions (physics convention):
- radius: Distance from the origin (>= 0)
- polar angle: Angle from the positive z-axis (radians, 0-π)
- azimuthal angle: Angle from the positive x-axis in the xy-plane,
  counterclockwise (radians, 0-2π)
"""

from typing import Tuple, Union
import numpy as np
import numpy.typing as npt
import xarray as xr

from ..utils.angles import normalize_radians
from ..utils.errors import report_degenerate


def _spherical_components(x, y, z, strict, stacklevel):
    # stacklevel counts from report_degenerate up to the user's call site
    radius = np.sqrt(x * x + y * y + z * z)

    if np.any(radius == 0):
        report_degenerate(
            "cartesian_to_spherical received the origin; "
            "polar angle is undefined and returned as NaN.",
            strict=strict,
            stacklevel=stacklevel
        )

    with np.errstate(divide='ignore', invalid='ignore'):
        polar_angle = np.arccos(z / radius)

    azimuthal_angle = normalize_radians(np.arctan2(y, x))

    return radius, polar_angle, azimuthal_angle


def cartesian_to_spherical(
    x: Union[float, npt.NDArray[np.floating]],
    y: Union[float, npt.NDArray[np.floating]],
    z: Union[float, npt.NDArray[np.floating]],
    strict: bool = False
) -> Tuple[
    Union[float, npt.NDArray[np.floating]],
    Union[float, npt.NDArray[np.floating]],
    Union[float, npt.NDArray[np.floating]],
]:
    """
    Convert Cartesian components into spherical coordinates.

    Parameters
    ----------
    x, y, z : float or array-like
        Cartesian components of the vector(s)
    strict : bool, optional
        Raise ValueError if any point is at the origin instead of returning
        NaN with a DegenerateInputWarning. Default: False

    Returns
    -------
    radius : float or array-like
        sqrt(x^2 + y^2 + z^2)
    polar_angle : float or array-like
        arccos(z / radius), in [0, π] (radians)
    azimuthal_angle : float or array-like
        arctan2(y, x) shifted into [0, 2π) (radians)

    Raises
    ------
    ValueError
        If ``strict`` is True and any point is at the origin

    Examples
    --------
    >>> from phys_tools import cartesian_to_spherical
    >>> r, theta, phi = cartesian_to_spherical(0.0, 0.0, 1.0)
    >>> print(r, theta, phi)  # 1.0 0.0 0.0
    >>>
    >>> # The origin has no defined polar angle
    >>> r, theta, phi = cartesian_to_spherical(0.0, 0.0, 0.0)  # warns
    >>> print(theta)  # nan

    Notes
    -----
    - At the origin z / radius is 0/0, so the polar angle is NaN; the NaN is
      returned rather than special-cased
    - Inverse of spherical_to_cartesian up to angle normalisation and rounding
    """
    return _spherical_components(x, y, z, strict, stacklevel=4)


def spherical_to_cartesian(
    radius: Union[float, npt.NDArray[np.floating]],
    polar_angle: Union[float, npt.NDArray[np.floating]],
    azimuthal_angle: Union[float, npt.NDArray[np.floating]]
) -> Tuple[
    Union[float, npt.NDArray[np.floating]],
    Union[float, npt.NDArray[np.floating]],
    Union[float, npt.NDArray[np.floating]],
]:
    """
    Convert spherical coordinates into Cartesian components.

    Parameters
    ----------
    radius : float or array-like
        Distance from the origin
    polar_angle : float or array-like
        Angle from the positive z-axis (radians)
    azimuthal_angle : float or array-like
        Angle from the positive x-axis in the xy-plane (radians)

    Returns
    -------
    x, y, z : float or array-like
        Cartesian components

    Examples
    --------
    >>> import numpy as np
    >>> from phys_tools import spherical_to_cartesian
    >>> x, y, z = spherical_to_cartesian(2.0, np.pi / 2, np.pi)
    >>> print(f"({x:.1f}, {y:.1f}, {z:.1f})")  # (-2.0, 0.0, 0.0)

    Notes
    -----
    The transformation is:
        x = r * sin(θ) * cos(φ)
        y = r * sin(θ) * sin(φ)
        z = r * cos(θ)
    where θ is the polar angle and φ the azimuthal angle
    """
    sin_polar = np.sin(polar_angle)
    x = radius * sin_polar * np.cos(azimuthal_angle)
    y = radius * sin_polar * np.sin(azimuthal_angle)
    z = radius * np.cos(polar_angle)
    return x, y, z


def add_spherical_coordinates(
    ds: xr.Dataset,
    x_var: str = 'x',
    y_var: str = 'y',
    z_var: str = 'z'
) -> xr.Dataset:
    """
    Add spherical coordinates of a 3D vector field to a dataset.

    Parameters
    ----------
    ds : xarray.Dataset
        Input dataset containing Cartesian components
    x_var, y_var, z_var : str, optional
        Names of the component variables. Default: 'x', 'y', 'z'

    Returns
    -------
    ds_out : xarray.Dataset
        Copy of ``ds`` with added data variables:
        - radius : Distance from origin (units of the components)
        - polar_angle : Angle from +z (radians, 0-π)
        - azimuthal_angle : Angle from +x in the xy-plane (radians, 0-2π)

    Raises
    ------
    ValueError
        If any component variable is not found in dataset

    Examples
    --------
    >>> import phys_tools as pt
    >>> ds_sph = pt.add_spherical_coordinates(ds, x_var='px', y_var='py', z_var='pz')
    >>> print(ds_sph['polar_angle'])

    Notes
    -----
    - Points at the origin get a NaN polar angle and a DegenerateInputWarning
    """
    for var in (x_var, y_var, z_var):
        if var not in ds:
            raise ValueError(
                f"Variable '{var}' not found in dataset. "
                f"Available variables: {', '.join(map(str, ds.data_vars))}"
            )

    x = ds[x_var]
    radius, polar_angle, azimuthal_angle = _spherical_components(
        x, ds[y_var], ds[z_var], strict=False, stacklevel=4
    )

    ds_out = ds.copy()
    ds_out['radius'] = radius
    ds_out['polar_angle'] = polar_angle
    ds_out['azimuthal_angle'] = azimuthal_angle

    ds_out['radius'].attrs = {
        'long_name': 'distance from origin',
        'units': x.attrs.get('units', ''),
        'source_variables': f'{x_var}, {y_var}, {z_var}'
    }
    ds_out['polar_angle'].attrs = {
        'long_name': 'polar angle from +z axis',
        'units': 'radians',
        'valid_range': (0, np.pi)
    }
    ds_out['azimuthal_angle'].attrs = {
        'long_name': 'azimuthal angle from +x axis',
        'units': 'radians',
        'convention': 'counterclockwise positive in the xy-plane',
        'valid_range': (0, 2 * np.pi)
    }

    return ds_out


__all__ = [
    'cartesian_to_spherical',
    'spherical_to_cartesian',
    'add_spherical_coordinates',
]
