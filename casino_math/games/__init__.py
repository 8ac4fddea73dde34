"""Static house edge tables for each game."""

from casino_math.games.blackjack import (
    BLACKJACK_STRATEGIES,
    StrategyProfile,
    compare_strategies,
    get_blackjack_strategy,
)
from casino_math.games.catalog import GAME_CATALOG, GameSummary
from casino_math.games.craps import (
    CRAPS_BETS,
    CrapsBet,
    craps_bets_by_edge,
    worst_craps_bets,
)
from casino_math.games.roulette import (
    ROULETTE_VARIANTS,
    Bet,
    RouletteVariant,
    get_roulette_variant,
)
from casino_math.games.slots import (
    SLOT_PROFILES,
    SlotOutcome,
    SlotProfile,
    get_slot_profile,
)

__all__ = [
    "BLACKJACK_STRATEGIES",
    "StrategyProfile",
    "compare_strategies",
    "get_blackjack_strategy",
    "GAME_CATALOG",
    "GameSummary",
    "CRAPS_BETS",
    "CrapsBet",
    "craps_bets_by_edge",
    "worst_craps_bets",
    "ROULETTE_VARIANTS",
    "Bet",
    "RouletteVariant",
    "get_roulette_variant",
    "SLOT_PROFILES",
    "SlotOutcome",
    "SlotProfile",
    "get_slot_profile",
]
