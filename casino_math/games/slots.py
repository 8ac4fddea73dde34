"""Slot machine payout profiles."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from casino_math.errors import UnknownGameError
from casino_math.statistics.expected_value import expected_loss
from casino_math.validation import require_count, require_house_edge, require_positive


@dataclass(frozen=True)
class SlotOutcome:
    """Expected money flow of a slot session."""

    total_wagered: float
    expected_return: float
    expected_loss: float


@dataclass(frozen=True)
class SlotProfile:
    """A class of slot machine, characterized by its house edge."""

    key: str
    name: str
    house_edge: float
    description: str

    def __post_init__(self) -> None:
        require_house_edge("house_edge", self.house_edge)

    @property
    def rtp(self) -> float:
        """Return to player as a percentage."""
        return 100 - self.house_edge

    def session_outcome(self, spins: int, bet_per_spin: float) -> SlotOutcome:
        """
        Expected result of playing a number of spins at a flat stake.

        Args:
            spins: Number of spins
            bet_per_spin: Stake per spin

        Returns:
            SlotOutcome with total wagered, expected return and loss
        """
        require_count("spins", spins)
        require_positive("bet_per_spin", bet_per_spin)
        total_wagered = spins * bet_per_spin
        loss = expected_loss(total_wagered, self.house_edge)
        return SlotOutcome(
            total_wagered=total_wagered,
            expected_return=total_wagered - loss,
            expected_loss=loss,
        )


SLOT_PROFILES: Mapping[str, SlotProfile] = MappingProxyType({
    "loose": SlotProfile(
        key="loose",
        name="Loose Slots",
        house_edge=2.0,
        description="Best payout slots (rare)",
    ),
    "average": SlotProfile(
        key="average",
        name="Average Slots",
        house_edge=5.0,
        description="Typical slot machine",
    ),
    "tight": SlotProfile(
        key="tight",
        name="Tight Slots",
        house_edge=10.0,
        description="Low payout slots",
    ),
    "airport": SlotProfile(
        key="airport",
        name="Airport/Grocery Slots",
        house_edge=15.0,
        description="Worst odds (convenience locations)",
    ),
})


def get_slot_profile(key: str) -> SlotProfile:
    """
    Get a slot profile by key.

    Raises:
        UnknownGameError: If the key is not a known profile
    """
    try:
        return SLOT_PROFILES[key]
    except KeyError:
        raise UnknownGameError("slot profile", key) from None
