"""Equality and ordering rules for batsman records.

Equality spans all four fields while ordering looks at runs only, so the
two are kept as separate functions.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from batsmen import Batsman

# Single-precision machine epsilon, used as both absolute and relative threshold
DEFAULT_EPSILON = 2.0**-23
DEFAULT_MAX_RELATIVE = 2.0**-23


def relative_eq(
    a: float,
    b: float,
    epsilon: float = DEFAULT_EPSILON,
    max_relative: float = DEFAULT_MAX_RELATIVE,
) -> bool:
    """Compare two floats with a relative tolerance.

    Values closer than ``epsilon`` are always equal (this covers values
    near zero). Otherwise the absolute difference must not exceed
    ``max_relative`` times the larger magnitude. Infinities are only equal
    to themselves and NaN never compares equal.

    Args:
        a: First value.
        b: Second value.
        epsilon: Absolute difference below which the values are equal.
        max_relative: Allowed difference relative to the larger magnitude.

    Returns:
        True if the values are considered equal.
    """
    if a == b:
        return True
    if math.isinf(a) or math.isinf(b):
        return False

    abs_diff = abs(a - b)
    if abs_diff <= epsilon:
        return True

    largest = max(abs(a), abs(b))
    return abs_diff <= largest * max_relative


def records_equal(a: Batsman, b: Batsman) -> bool:
    """Check two batsmen for equality.

    Names and runs must match exactly, the average within tolerance.
    """
    return (
        a.initials == b.initials
        and a.surname == b.surname
        and a.runs == b.runs
        and relative_eq(a.average, b.average)
    )


def compare_by_runs(a: Batsman, b: Batsman) -> int:
    """Three-way comparison on runs alone.

    Returns:
        Negative if ``a`` has fewer runs, zero if equal, positive otherwise.
    """
    return (a.runs > b.runs) - (a.runs < b.runs)
