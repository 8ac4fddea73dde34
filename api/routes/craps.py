"""Craps API endpoints."""

from fastapi import APIRouter

from api.schemas import CrapsBetResponse, CrapsResponse
from casino_math.games import CrapsBet, craps_bets_by_edge, worst_craps_bets

router = APIRouter()


def _bet_response(bet: CrapsBet) -> CrapsBetResponse:
    return CrapsBetResponse(
        name=bet.name,
        house_edge_percent=bet.house_edge,
        description=bet.description,
    )


@router.get("")
async def list_craps_bets() -> CrapsResponse:
    """Craps bets ranked from best to worst, plus the ones to avoid."""
    return CrapsResponse(
        bets=[_bet_response(bet) for bet in craps_bets_by_edge()],
        worst_bets=[_bet_response(bet) for bet in worst_craps_bets()],
    )
