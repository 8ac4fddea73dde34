"""Bankroll simulator API endpoints."""

import logging
from random import Random

from fastapi import APIRouter

from api.schemas import (
    RiskRequest,
    RiskResponse,
    SimulationPointResponse,
    SimulationRequest,
    SimulationResponse,
    SimulationSummaryResponse,
)
from casino_math.formatting import format_currency, format_percent
from casino_math.statistics import (
    AggregateEdgeSimulator,
    bankruptcy_risk,
    expected_loss,
    summarize_simulation,
)
from config import config

logger = logging.getLogger("house_edge.api.simulator")

router = APIRouter()


@router.post("/run")
async def run_simulation(request: SimulationRequest) -> SimulationResponse:
    """Simulate a bankroll over a session of flat bets."""
    seed = request.seed if request.seed is not None else config.simulation.seed
    simulator = AggregateEdgeSimulator(rng=Random(seed))

    points = simulator.run(
        request.starting_bankroll,
        request.bet_amount,
        request.house_edge,
        request.rounds,
    )
    summary = summarize_simulation(
        points,
        request.starting_bankroll,
        request.bet_amount,
        request.house_edge,
        request.rounds,
    )

    if summary.went_broke:
        logger.info(
            "Simulation went broke after %d of %d rounds", summary.rounds_played, request.rounds
        )

    return SimulationResponse(
        points=[SimulationPointResponse.model_validate(point) for point in points],
        summary=SimulationSummaryResponse(
            starting_bankroll=summary.starting_bankroll,
            final_bankroll=summary.final_bankroll,
            final_bankroll_display=format_currency(summary.final_bankroll),
            total_wagered=summary.total_wagered,
            net_result=summary.net_result,
            net_result_display=format_currency(summary.net_result),
            expected_loss=summary.expected_loss,
            expected_bankroll=summary.expected_bankroll,
            bankruptcy_risk_percent=summary.bankruptcy_risk,
            bankruptcy_risk_display=format_percent(summary.bankruptcy_risk),
            rounds_played=summary.rounds_played,
            went_broke=summary.went_broke,
        ),
    )


@router.post("/risk")
async def estimate_risk(request: RiskRequest) -> RiskResponse:
    """Estimate bankruptcy risk without running a simulation."""
    loss = expected_loss(request.bet_amount * request.rounds, request.house_edge)
    risk = bankruptcy_risk(
        request.starting_bankroll,
        request.bet_amount,
        request.house_edge,
        request.rounds,
    )

    return RiskResponse(
        expected_loss=loss,
        expected_bankroll=request.starting_bankroll - loss,
        bankruptcy_risk_percent=risk,
        bankruptcy_risk_display=format_percent(risk),
    )
