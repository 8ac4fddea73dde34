"""Craps bets and their house edges."""

from dataclasses import dataclass

from casino_math.validation import require_house_edge, require_non_negative


@dataclass(frozen=True)
class CrapsBet:
    """A craps wager with its published house edge."""

    name: str
    house_edge: float
    description: str

    def __post_init__(self) -> None:
        """Validate the house edge is between 0 and 100."""
        require_non_negative("house_edge", self.house_edge)
        require_house_edge("house_edge", self.house_edge)


CRAPS_BETS: tuple[CrapsBet, ...] = (
    CrapsBet("Pass Line", 1.41, "Most common bet"),
    CrapsBet("Don't Pass", 1.36, "Slightly better odds"),
    CrapsBet("Pass Line + Odds", 0.85, "With maximum odds"),
    CrapsBet("Field", 5.56, "One-roll bet"),
    CrapsBet("Any 7", 16.67, "Worst bet in craps"),
    CrapsBet("Hardways", 11.11, "Poor odds"),
)

# Bets at or above this edge are flagged as ones to avoid
SUCKER_BET_THRESHOLD = 10.0


def craps_bets_by_edge() -> list[CrapsBet]:
    """All craps bets, best (lowest edge) first."""
    return sorted(CRAPS_BETS, key=lambda bet: bet.house_edge)


def worst_craps_bets(threshold: float = SUCKER_BET_THRESHOLD) -> list[CrapsBet]:
    """Bets whose house edge is at least threshold, in table order."""
    return [bet for bet in CRAPS_BETS if bet.house_edge >= threshold]
