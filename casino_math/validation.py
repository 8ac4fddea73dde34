"""Boundary checks shared by the probability engine."""

import math

from casino_math.errors import InvalidParameterError


def require_finite(name: str, value: float) -> float:
    """Reject NaN and infinities before they reach a formula."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidParameterError(name, value, "must be a number")
    if not math.isfinite(value):
        raise InvalidParameterError(name, value, "must be finite")
    return value


def require_positive(name: str, value: float) -> float:
    require_finite(name, value)
    if value <= 0:
        raise InvalidParameterError(name, value, "must be greater than 0")
    return value


def require_non_negative(name: str, value: float) -> float:
    require_finite(name, value)
    if value < 0:
        raise InvalidParameterError(name, value, "must not be negative")
    return value


def require_probability(name: str, value: float) -> float:
    require_finite(name, value)
    if not 0.0 <= value <= 1.0:
        raise InvalidParameterError(name, value, "must be between 0 and 1")
    return value


def require_count(name: str, value: int) -> int:
    """Validate a non-negative whole number of rounds, hands or spins."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameterError(name, value, "must be an integer")
    if value < 0:
        raise InvalidParameterError(name, value, "must not be negative")
    return value


def require_house_edge(name: str, value: float) -> float:
    """House edges may be negative (player advantage) but never exceed 100%."""
    require_finite(name, value)
    if value > 100:
        raise InvalidParameterError(name, value, "must not exceed 100")
    return value
