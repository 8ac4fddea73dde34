"""Catalog of the games the calculator covers."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GameSummary:
    """One entry of the game menu."""

    id: str
    name: str
    edge_range: str
    description: str


GAME_CATALOG: tuple[GameSummary, ...] = (
    GameSummary("roulette", "Roulette", "2.7% - 5.26%", "Wheel of fortune"),
    GameSummary("blackjack", "Blackjack", "0.5% - 4%", "Card counting possible"),
    GameSummary("slots", "Slot Machines", "2% - 15%", "Pure chance"),
    GameSummary("craps", "Craps", "1.4% - 16.7%", "Dice game"),
    GameSummary("simulator", "Bankroll Simulator", "Variable", "See your money over time"),
)
