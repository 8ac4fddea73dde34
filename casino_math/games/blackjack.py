"""Blackjack player strategy profiles."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from casino_math.errors import UnknownGameError
from casino_math.statistics.expected_value import expected_loss
from casino_math.validation import require_count, require_house_edge, require_positive


@dataclass(frozen=True)
class StrategyProfile:
    """
    How well a player plays, expressed as the resulting house edge.

    A negative edge means the player has the advantage.
    """

    key: str
    name: str
    house_edge: float
    description: str

    def __post_init__(self) -> None:
        """Validate the house edge (negative means player advantage)."""
        require_house_edge("house_edge", self.house_edge)

    def expected_loss(self, hands: int, bet_size: float) -> float:
        """Expected loss over a number of flat-bet hands (negative = expected win)."""
        require_count("hands", hands)
        require_positive("bet_size", bet_size)
        return expected_loss(hands * bet_size, self.house_edge)


BLACKJACK_STRATEGIES: Mapping[str, StrategyProfile] = MappingProxyType({
    "perfect_strategy": StrategyProfile(
        key="perfect_strategy",
        name="Perfect Basic Strategy",
        house_edge=0.5,
        description="Using mathematically optimal decisions",
    ),
    "average": StrategyProfile(
        key="average",
        name="Average Player",
        house_edge=2.0,
        description="Typical player without strategy",
    ),
    "poor": StrategyProfile(
        key="poor",
        name="Poor Strategy",
        house_edge=4.0,
        description="Making sub-optimal decisions",
    ),
    "counting": StrategyProfile(
        key="counting",
        name="Card Counting (Skilled)",
        house_edge=-0.5,  # Player advantage
        description="Advanced technique (banned in most casinos)",
    ),
})


def get_blackjack_strategy(key: str) -> StrategyProfile:
    """
    Get a blackjack strategy profile by key.

    Raises:
        UnknownGameError: If the key is not a known strategy
    """
    try:
        return BLACKJACK_STRATEGIES[key]
    except KeyError:
        raise UnknownGameError("blackjack strategy", key) from None


def compare_strategies(hands: int, bet_size: float) -> list[tuple[StrategyProfile, float]]:
    """
    Expected loss of every strategy for the same session.

    Returns:
        (profile, expected loss) pairs in table order
    """
    return [
        (profile, profile.expected_loss(hands, bet_size))
        for profile in BLACKJACK_STRATEGIES.values()
    ]
