"""Bankruptcy risk heuristic."""

import math

from casino_math.validation import (
    require_count,
    require_house_edge,
    require_non_negative,
    require_positive,
)

# Risk factor at or above which the estimate reports no risk
_SAFE_RISK_FACTOR = 3.0


def bankruptcy_risk(
    starting_bankroll: float,
    bet_amount: float,
    house_edge: float,
    rounds: int,
) -> float:
    """
    Estimate the chance of going broke over a session, as a percentage.

    This is a rough heuristic, not a ruin probability. The expected ending
    bankroll is divided by a spread proxy of bet * sqrt(rounds) (the
    win probability does not enter it), and the resulting risk factor is
    mapped linearly onto 100..0 between factors 0 and 3.

    Args:
        starting_bankroll: Bankroll at the start of the session
        bet_amount: Flat bet per round
        house_edge: House edge percentage
        rounds: Number of rounds played

    Returns:
        Risk percentage between 0 and 100
    """
    require_non_negative("starting_bankroll", starting_bankroll)
    require_positive("bet_amount", bet_amount)
    require_house_edge("house_edge", house_edge)
    require_count("rounds", rounds)

    expected_loss = bet_amount * (house_edge / 100) * rounds
    expected_bankroll = starting_bankroll - expected_loss

    if expected_bankroll <= 0:
        return 100.0

    if rounds == 0:
        # No rounds, no spread: nothing can be lost
        return 0.0

    variance = bet_amount * math.sqrt(rounds)
    risk_factor = expected_bankroll / variance

    if risk_factor <= 0:
        return 100.0
    if risk_factor >= _SAFE_RISK_FACTOR:
        return 0.0

    return max(0.0, min(100.0, (1 - risk_factor / _SAFE_RISK_FACTOR) * 100))
