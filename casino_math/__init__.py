"""Casino math engine - house edge tables and bankroll statistics, UI-agnostic."""

from casino_math.errors import InvalidParameterError, UnknownGameError
from casino_math.formatting import format_currency, format_percent

__all__ = [
    "InvalidParameterError",
    "UnknownGameError",
    "format_currency",
    "format_percent",
]
