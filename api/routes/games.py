"""Game catalog endpoint."""

from fastapi import APIRouter

from api.schemas import GameSummaryResponse
from casino_math.games import GAME_CATALOG

router = APIRouter()


@router.get("")
async def list_games() -> list[GameSummaryResponse]:
    """List the games with their house edge ranges."""
    return [GameSummaryResponse.model_validate(game) for game in GAME_CATALOG]
