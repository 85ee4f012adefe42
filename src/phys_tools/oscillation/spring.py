"""
Simple harmonic motion of an ideal spring

This module computes the parameters of the motion x(t) = A * cos(ω t + φ)
of an ideal spring released from rest at displacement x0.

The spring constant is taken as ω² directly (k/m with unit mass), so
ω = sqrt(spring_constant). A negative initial displacement is expressed as a
phase shift of π rather than a negative amplitude.
"""

import numpy as np

from ..utils.errors import report_degenerate


def _format_number(value: float) -> str:
    # Shortest round-trip repr: 2.0, 3.141592653589793, nan, inf
    return repr(float(value))


def format_harmonic_equation(
    amplitude: float,
    omega: float,
    phase: float = 0.0
) -> str:
    """
    Render the displacement equation of a harmonic oscillator as text.

    Parameters
    ----------
    amplitude : float
        Amplitude of the motion
    omega : float
        Angular frequency (rad/s)
    phase : float, optional
        Phase lag (radians). Any phase other than zero, NaN included, is
        written as ``- phase`` inside the cosine and is not simplified or
        wrapped. Default: 0.0

    Returns
    -------
    equation : str
        e.g. ``"f(x) = 2.0 * cos(2.0 * t)"`` or
        ``"f(x) = 2.0 * cos(2.0 * t - 3.141592653589793)"``
    """
    equation = f"f(x) = {_format_number(amplitude)} * cos({_format_number(omega)} * t"
    if phase != 0:
        equation += f" - {_format_number(phase)}"
    return equation + ")"


def spring_harmonic_motion(
    spring_constant: float,
    x0: float,
    strict: bool = False
) -> tuple[float, float, str]:
    """
    Compute amplitude, period and equation of a spring's harmonic motion.

    Parameters
    ----------
    spring_constant : float
        Spring constant, used as ω² (expected > 0)
    x0 : float
        Displacement from equilibrium at t = 0 (m)
    strict : bool, optional
        Raise ValueError for a non-positive spring constant instead of
        returning NaN/inf with a DegenerateInputWarning. Default: False

    Returns
    -------
    amplitude : float
        |x0| (m)
    period : float
        2π / ω (s)
    equation : str
        Displacement as a function of time, see format_harmonic_equation()

    Raises
    ------
    ValueError
        If ``strict`` is True and spring_constant <= 0

    Examples
    --------
    >>> from phys_tools import spring_harmonic_motion
    >>> amplitude, period, equation = spring_harmonic_motion(4.0, -2.0)
    >>> print(amplitude, period)  # 2.0 3.141592653589793
    >>> print(equation)  # f(x) = 2.0 * cos(2.0 * t - 3.141592653589793)

    Notes
    -----
    - spring_constant < 0 gives ω = NaN and period = NaN
    - spring_constant == 0 gives ω = 0 and period = inf
    - Scalar inputs only, since the equation is a single string
    """
    if not spring_constant > 0:
        report_degenerate(
            f"spring_harmonic_motion received spring_constant={spring_constant!r}; "
            "expected > 0, period is returned as NaN or inf.",
            strict=strict
        )

    with np.errstate(divide='ignore', invalid='ignore'):
        omega = np.sqrt(np.float64(spring_constant))
        period = 2 * np.pi / omega

    amplitude = abs(float(x0))
    phase = np.pi if x0 < 0 else 0.0
    equation = format_harmonic_equation(amplitude, omega, phase)

    return amplitude, float(period), equation


__all__ = [
    'spring_harmonic_motion',
    'format_harmonic_equation',
]
