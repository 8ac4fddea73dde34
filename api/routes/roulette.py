"""Roulette API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Query

from api.schemas import RouletteBetResponse, RouletteResponse
from casino_math.formatting import format_currency, format_percent
from casino_math.games import ROULETTE_VARIANTS, get_roulette_variant
from config import config

router = APIRouter()


@router.get("/variants")
async def list_variants() -> list[str]:
    """List the available wheel variants."""
    return list(ROULETTE_VARIANTS)


@router.get("/{variant}")
async def analyze_roulette(
    variant: str,
    bet_amount: Annotated[
        float, Query(gt=0, le=config.simulation.max_roulette_bet)
    ] = config.simulation.default_roulette_bet,
) -> RouletteResponse:
    """Expected value, house edge and RTP of every bet on a wheel."""
    wheel = get_roulette_variant(variant)

    bets = []
    for bet in wheel.bets:
        ev = bet.expected_value(bet_amount)
        bets.append(
            RouletteBetResponse(
                name=bet.name,
                payout=bet.payout,
                probability=bet.probability,
                numbers=bet.numbers,
                expected_value=ev,
                expected_value_display=format_currency(ev),
                house_edge_percent=bet.house_edge,
                rtp_percent=bet.rtp,
            )
        )

    return RouletteResponse(
        variant=wheel.key,
        name=wheel.name,
        total_pockets=wheel.total_pockets,
        zero_pockets=wheel.zero_pockets,
        house_edge_percent=wheel.house_edge,
        house_edge_display=format_percent(wheel.house_edge),
        bet_amount=bet_amount,
        bets=bets,
    )
