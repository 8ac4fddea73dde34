"""Expected value, return-to-player and house edge formulas."""

from casino_math.validation import (
    require_house_edge,
    require_non_negative,
    require_positive,
    require_probability,
)


def calculate_expected_value(
    bet_amount: float,
    win_probability: float,
    payout: float,
) -> float:
    """
    Calculate the expected value of a single bet.

    EV = bet * payout * p - bet * (1 - p)

    Args:
        bet_amount: Amount staked (must be positive)
        win_probability: Probability of winning, 0 to 1
        payout: Payout multiple for a win ("X:1")

    Returns:
        Expected monetary result (negative = expected loss)

    Raises:
        InvalidParameterError: If any input is out of range or non-finite
    """
    require_positive("bet_amount", bet_amount)
    require_probability("win_probability", win_probability)
    require_non_negative("payout", payout)

    win_amount = bet_amount * payout
    lose_amount = -bet_amount
    return win_amount * win_probability + lose_amount * (1 - win_probability)


def calculate_rtp(probability: float, payout: float) -> float:
    """
    Calculate return to player for a bet.

    A winning bet returns the stake plus the payout, so
    RTP = p * (payout + 1) * 100.

    Returns:
        RTP as a percentage (e.g., 97.30 for 97.30%)
    """
    require_probability("probability", probability)
    require_non_negative("payout", payout)
    return probability * (payout + 1) * 100


def bet_house_edge(probability: float, payout: float) -> float:
    """House edge of a single bet as a percentage (100 - RTP)."""
    require_probability("probability", probability)
    require_non_negative("payout", payout)
    return (1 - probability * (payout + 1)) * 100


def expected_loss(total_wagered: float, house_edge: float) -> float:
    """
    Expected amount lost on a total wager at a given house edge.

    Args:
        total_wagered: Sum of all stakes
        house_edge: House edge percentage (negative = player advantage)

    Returns:
        Expected loss (negative = expected win)
    """
    require_non_negative("total_wagered", total_wagered)
    require_house_edge("house_edge", house_edge)
    return total_wagered * (house_edge / 100)
