"""Probability engine: expected value, simulation and risk estimates."""

from casino_math.statistics.expected_value import (
    bet_house_edge,
    calculate_expected_value,
    calculate_rtp,
    expected_loss,
)
from casino_math.statistics.risk import bankruptcy_risk
from casino_math.statistics.simulation import (
    AggregateEdgeSimulator,
    BankrollSimulator,
    SimulationPoint,
    SimulationSummary,
    SlotSessionPoint,
    iter_simulation,
    simulate_games,
    simulate_slot_session,
    summarize_simulation,
)

__all__ = [
    "bet_house_edge",
    "calculate_expected_value",
    "calculate_rtp",
    "expected_loss",
    "bankruptcy_risk",
    "AggregateEdgeSimulator",
    "BankrollSimulator",
    "SimulationPoint",
    "SimulationSummary",
    "SlotSessionPoint",
    "iter_simulation",
    "simulate_games",
    "simulate_slot_session",
    "summarize_simulation",
]
