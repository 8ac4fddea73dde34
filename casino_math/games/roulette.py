"""Roulette wheel variants and their bet tables."""

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from casino_math.errors import InvalidParameterError, UnknownGameError
from casino_math.statistics.expected_value import (
    bet_house_edge,
    calculate_expected_value,
    calculate_rtp,
)
from casino_math.validation import require_count, require_non_negative, require_probability

# Tolerance when matching a bet's probability to its pocket count
_PROBABILITY_TOLERANCE = 1e-9


@dataclass(frozen=True)
class Bet:
    """A wheel bet: payout multiple and the pockets that win it."""

    name: str
    payout: float  # X:1
    probability: float
    numbers: int  # Winning pockets

    def __post_init__(self) -> None:
        """Validate payout, probability and pocket count."""
        require_non_negative("payout", self.payout)
        require_probability("probability", self.probability)
        require_count("numbers", self.numbers)
        if self.numbers == 0:
            raise InvalidParameterError("numbers", self.numbers, "must be at least 1")

    @property
    def house_edge(self) -> float:
        """House edge of this bet as a percentage."""
        return bet_house_edge(self.probability, self.payout)

    @property
    def rtp(self) -> float:
        """Return to player of this bet as a percentage."""
        return calculate_rtp(self.probability, self.payout)

    def expected_value(self, bet_amount: float) -> float:
        """Expected result of staking bet_amount on this bet."""
        return calculate_expected_value(bet_amount, self.probability, self.payout)


@dataclass(frozen=True)
class RouletteVariant:
    """
    A roulette wheel layout.

    The zero pockets are the whole source of the house edge, so the edge of
    the standard bets equals zero_pockets / total_pockets.
    """

    key: str
    name: str
    total_pockets: int
    zero_pockets: int
    bets: tuple[Bet, ...]

    def __post_init__(self) -> None:
        """Validate the pocket counts and that every bet matches the wheel."""
        require_count("total_pockets", self.total_pockets)
        if self.total_pockets == 0:
            raise InvalidParameterError("total_pockets", self.total_pockets, "must be at least 1")
        require_count("zero_pockets", self.zero_pockets)
        if self.zero_pockets >= self.total_pockets:
            raise InvalidParameterError(
                "zero_pockets", self.zero_pockets, "must be fewer than total_pockets"
            )

        for bet in self.bets:
            if bet.numbers > self.total_pockets:
                raise InvalidParameterError(
                    f"{bet.name} numbers", bet.numbers, "must not exceed total_pockets"
                )
            expected = bet.numbers / self.total_pockets
            if not math.isclose(bet.probability, expected, abs_tol=_PROBABILITY_TOLERANCE):
                raise InvalidParameterError(
                    f"{bet.name} probability",
                    bet.probability,
                    f"must equal {bet.numbers}/{self.total_pockets}",
                )

    @property
    def house_edge(self) -> float:
        """House edge of the wheel as a percentage."""
        return self.zero_pockets / self.total_pockets * 100

    def bet(self, name: str) -> Bet:
        """Look up a bet on this wheel by name."""
        for bet in self.bets:
            if bet.name == name:
                return bet
        raise UnknownGameError(f"{self.key} roulette bet", name)


# (name, payout, winning pockets)
_STANDARD_BETS = (
    ("Straight Up", 35, 1),
    ("Split", 17, 2),
    ("Street", 11, 3),
    ("Corner", 8, 4),
    ("Six Line", 5, 6),
    ("Dozen", 2, 12),
    ("Column", 2, 12),
    ("Red/Black", 1, 18),
    ("Even/Odd", 1, 18),
    ("Low/High", 1, 18),
)

# 0-00-1-2-3, the worst bet on the American wheel
_FIVE_NUMBER = ("Five Number", 6, 5)


def _wheel_bets(total_pockets: int, layout: tuple[tuple[str, int, int], ...]) -> tuple[Bet, ...]:
    return tuple(
        Bet(name=name, payout=payout, probability=numbers / total_pockets, numbers=numbers)
        for name, payout, numbers in layout
    )


EUROPEAN = RouletteVariant(
    key="european",
    name="European Roulette",
    total_pockets=37,  # 0-36
    zero_pockets=1,
    bets=_wheel_bets(37, _STANDARD_BETS),
)

AMERICAN = RouletteVariant(
    key="american",
    name="American Roulette",
    total_pockets=38,  # 0, 00, 1-36
    zero_pockets=2,
    bets=_wheel_bets(38, _STANDARD_BETS + (_FIVE_NUMBER,)),
)

ROULETTE_VARIANTS: Mapping[str, RouletteVariant] = MappingProxyType({
    EUROPEAN.key: EUROPEAN,
    AMERICAN.key: AMERICAN,
})


def get_roulette_variant(key: str) -> RouletteVariant:
    """
    Get a roulette variant by key.

    Raises:
        UnknownGameError: If the key is not a known variant
    """
    try:
        return ROULETTE_VARIANTS[key]
    except KeyError:
        raise UnknownGameError("roulette variant", key) from None
