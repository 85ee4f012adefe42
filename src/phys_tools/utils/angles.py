"""
Angle normalisation utilities

This module provides helpers that fold angles of any size into
a single non-negative turn.
"""

from typing import Union
import numpy as np
import numpy.typing as npt


FULL_TURN_DEGREES = 360.0
FULL_TURN_RADIANS = 2 * np.pi


def _fold_into_turn(
    angle: Union[float, npt.NDArray[np.floating]],
    full_turn: float
) -> Union[float, npt.NDArray[np.floating]]:
    """
    Fold any angle into [0, turn) (internal helper function).

    The angle is reduced modulo one full turn. A tiny negative angle can
    round up to exactly one full turn; it is folded back to 0.

    Parameters
    ----------
    angle : float or array-like
        Angle in the units of ``full_turn``, any number of turns
    full_turn : float
        Length of one turn in the units of ``angle``

    Returns
    -------
    folded : float or array-like
        Angle in [0, full_turn)
    """
    # Boolean mask keeps DataArray dims; NaN passes through
    folded = angle % full_turn
    folded = folded - full_turn * (folded >= full_turn)
    return folded


def normalize_degrees(
    angle: Union[float, npt.NDArray[np.floating]]
) -> Union[float, npt.NDArray[np.floating]]:
    """
    Normalise an angle in degrees into [0, 360).

    Parameters
    ----------
    angle : float or array-like
        Angle in degrees, any number of turns (e.g. as produced by
        ``np.degrees(np.arctan2(y, x))``)

    Returns
    -------
    angle : float or array-like
        Angle in [0, 360)

    Examples
    --------
    >>> from phys_tools.utils import normalize_degrees
    >>> print(normalize_degrees(-90.0))
    270.0
    >>> print(normalize_degrees(45.0))
    45.0
    """
    return _fold_into_turn(angle, FULL_TURN_DEGREES)


def normalize_radians(
    angle: Union[float, npt.NDArray[np.floating]]
) -> Union[float, npt.NDArray[np.floating]]:
    """
    Normalise an angle in radians into [0, 2π).

    Parameters
    ----------
    angle : float or array-like
        Angle in radians, any number of turns

    Returns
    -------
    angle : float or array-like
        Angle in [0, 2π)

    See Also
    --------
    normalize_degrees : Same folding rule for degrees
    """
    return _fold_into_turn(angle, FULL_TURN_RADIANS)


__all__ = [
    'FULL_TURN_DEGREES',
    'FULL_TURN_RADIANS',
    'normalize_degrees',
    'normalize_radians',
]
