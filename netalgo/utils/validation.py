"""Eager argument checks shared by the graph store and the algorithms.

Each helper raises before any caller-visible state is touched, so a rejected
call has no side effects.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Any, Optional

from netalgo.exceptions import InvalidCapacityError, InvalidIndexError


def is_index(value: Any) -> bool:
    """Return True for plain integers (``bool`` excluded)."""
    return isinstance(value, int) and not isinstance(value, bool)


def check_index(value: Any, bound: int, kind: str = "vertex") -> int:
    """Validate that ``value`` is an integer in ``[0, bound)``.

    Args:
        value: Candidate index.
        bound: Exclusive upper bound.
        kind: Label used in the error message.

    Returns:
        int: The validated index.

    Raises:
        InvalidIndexError: If ``value`` is not an integer in range.
    """
    if not is_index(value) or not 0 <= value < bound:
        raise InvalidIndexError(value, bound, kind)
    return value


def check_count(value: Any, kind: str = "vertex") -> int:
    """Validate a declared element count (non-negative integer)."""
    if not is_index(value) or value < 0:
        raise ValueError(f"{kind} count must be a non-negative integer, got {value!r}")
    return value


def check_weight(value: Any, edge: Optional[int] = None) -> Real:
    """Validate that ``value`` is a finite real number.

    Raises:
        ValueError: If the value is not numeric, is a bool, or is NaN/infinite.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        where = f" on edge {edge}" if edge is not None else ""
        raise ValueError(f"Edge weight{where} must be a real number, got {value!r}")
    if not math.isfinite(value):
        where = f" on edge {edge}" if edge is not None else ""
        raise ValueError(f"Edge weight{where} must be finite, got {value!r}")
    return value


def check_capacity(value: Real, edge: Optional[int] = None) -> Real:
    """Validate that a weight used as a capacity is non-negative.

    Raises:
        InvalidCapacityError: If ``value`` is negative.
    """
    if value < 0:
        raise InvalidCapacityError(value, edge)
    return value
