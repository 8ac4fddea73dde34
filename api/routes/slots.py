"""Slot machine API endpoints."""

from random import Random
from typing import Annotated

from fastapi import APIRouter, Query

from api.schemas import SlotProfileResponse, SlotSessionPointResponse, SlotsResponse
from casino_math.games import SLOT_PROFILES, SlotProfile, get_slot_profile
from casino_math.statistics import simulate_slot_session
from config import config

router = APIRouter()

_limits = config.simulation


def _profile_response(profile: SlotProfile) -> SlotProfileResponse:
    return SlotProfileResponse(
        key=profile.key,
        name=profile.name,
        house_edge_percent=profile.house_edge,
        rtp_percent=profile.rtp,
        description=profile.description,
    )


@router.get("")
async def analyze_slots(
    slot_type: str = "average",
    spins: Annotated[int, Query(ge=_limits.min_spins, le=_limits.max_spins)] = _limits.default_spins,
    bet_per_spin: Annotated[
        float, Query(ge=_limits.min_bet_per_spin, le=_limits.max_bet_per_spin)
    ] = _limits.default_bet_per_spin,
    seed: int | None = None,
) -> SlotsResponse:
    """Expected outcome and a sampled session for a slot machine type."""
    profile = get_slot_profile(slot_type)
    outcome = profile.session_outcome(spins, bet_per_spin)
    rng = Random(seed if seed is not None else _limits.seed)
    session = simulate_slot_session(spins, bet_per_spin, profile.house_edge, rng)

    return SlotsResponse(
        slot=_profile_response(profile),
        spins=spins,
        bet_per_spin=bet_per_spin,
        total_wagered=outcome.total_wagered,
        expected_return=outcome.expected_return,
        expected_loss=outcome.expected_loss,
        comparison=[_profile_response(p) for p in SLOT_PROFILES.values()],
        session=[SlotSessionPointResponse.model_validate(point) for point in session],
    )
