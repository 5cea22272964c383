"""Bias adaptation and digit threshold functions (RFC 3492, sections 3.4 and 6.1)."""

from .constants import BASE, DAMP, SKEW, TMAX, TMIN


def threshold(k: int, bias: int) -> int:
    """Return the threshold ``t`` for digit position ``k`` under ``bias``."""
    if k <= bias + TMIN:
        return TMIN
    if k >= bias + TMAX:
        return TMAX
    return k - bias


def adapt(delta: int, n_points: int, is_first: bool) -> int:
    """Compute the bias that follows an encoded or decoded delta.

    Args:
        delta: The delta that was just written or read.
        n_points: Number of code points handled so far, including this one.
        is_first: True for the first delta of a label, which is damped harder.

    Returns:
        int: The new bias.
    """
    delta //= DAMP if is_first else 2
    delta += delta // n_points

    k = 0
    while delta > ((BASE - TMIN) * TMAX) // 2:
        delta //= BASE - TMIN
        k += BASE

    return k + ((BASE - TMIN + 1) * delta) // (delta + SKEW)
