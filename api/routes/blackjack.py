"""Blackjack API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Query

from api.schemas import BlackjackResponse, StrategyResponse
from casino_math.games import StrategyProfile, compare_strategies, get_blackjack_strategy
from config import config

router = APIRouter()

_limits = config.simulation


def _strategy_response(profile: StrategyProfile, loss: float) -> StrategyResponse:
    return StrategyResponse(
        key=profile.key,
        name=profile.name,
        house_edge_percent=profile.house_edge,
        description=profile.description,
        expected_loss=loss,
    )


@router.get("")
async def compare_blackjack_strategies(
    hands: Annotated[int, Query(ge=_limits.min_hands, le=_limits.max_hands)] = _limits.default_hands,
    bet_size: Annotated[float, Query(ge=_limits.min_bet, le=_limits.max_bet)] = _limits.default_bet,
    strategy: str = "perfect_strategy",
) -> BlackjackResponse:
    """Compare expected losses of every strategy for one session."""
    selected = get_blackjack_strategy(strategy)

    return BlackjackResponse(
        hands=hands,
        bet_size=bet_size,
        total_wagered=hands * bet_size,
        selected=_strategy_response(selected, selected.expected_loss(hands, bet_size)),
        strategies=[
            _strategy_response(profile, loss)
            for profile, loss in compare_strategies(hands, bet_size)
        ],
    )
