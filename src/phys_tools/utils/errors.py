"""
Warnings and input checks shared by the formula modules

Formulas never raise on out-of-domain numbers by default: NaN and inf are
returned as floating-point arithmetic produces them, and a
DegenerateInputWarning is emitted. Passing ``strict=True`` to a formula turns
the warning into a ValueError.
"""

import warnings


class DegenerateInputWarning(RuntimeWarning):
    """Input lies where a formula is undefined; the result holds NaN or inf."""


def report_degenerate(message: str, strict: bool = False, stacklevel: int = 3) -> None:
    """
    Warn about (or, when strict, reject) a degenerate input.

    Parameters
    ----------
    message : str
        Description of the degenerate input and what the result contains
    strict : bool, optional
        Raise ValueError instead of warning. Default: False
    stacklevel : int, optional
        Passed to warnings.warn. The default points at the caller of the
        formula that calls this function. Default: 3

    Raises
    ------
    ValueError
        If ``strict`` is True
    """
    if strict:
        raise ValueError(message)
    warnings.warn(message, DegenerateInputWarning, stacklevel=stacklevel)


__all__ = [
    'DegenerateInputWarning',
    'report_degenerate',
]
