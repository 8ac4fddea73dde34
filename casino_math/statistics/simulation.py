"""Bankroll simulation over repeated flat bets."""

import logging
import math
from dataclasses import dataclass
from decimal import Decimal
from random import Random
from typing import Iterator, Protocol, Sequence

from casino_math.statistics.expected_value import expected_loss
from casino_math.statistics.risk import bankruptcy_risk
from casino_math.validation import (
    require_count,
    require_house_edge,
    require_positive,
)

logger = logging.getLogger("house_edge.simulation")

# Slot session paths are thinned to about this many points
_SLOT_SAMPLE_POINTS = 50


@dataclass(frozen=True)
class SimulationPoint:
    """Bankroll after a given round (round 0 is the starting state)."""

    round: int
    bankroll: float


@dataclass(frozen=True)
class SimulationSummary:
    """Headline numbers for a finished simulation run."""

    starting_bankroll: float
    final_bankroll: float
    total_wagered: float
    net_result: float
    expected_loss: float
    expected_bankroll: float
    bankruptcy_risk: float
    rounds_played: int
    went_broke: bool


@dataclass(frozen=True)
class SlotSessionPoint:
    """Sampled slot balance next to the mathematical expectation."""

    spin: int
    bankroll: float
    expected: float


class BankrollSimulator(Protocol):
    """Anything that can produce a bankroll walk for a flat-bet session."""

    def run(
        self,
        starting_bankroll: float,
        bet_amount: float,
        house_edge: float,
        number_of_rounds: int,
    ) -> list[SimulationPoint]:
        ...


def iter_simulation(
    starting_bankroll: float,
    bet_amount: float,
    house_edge: float,
    number_of_rounds: int,
    rng: Random | None = None,
) -> Iterator[SimulationPoint]:
    """
    Lazily walk a bankroll through flat even-money bets.

    Every round is a single Bernoulli trial won with probability
    1 - house_edge/100; a win adds the bet and a loss takes it. The game's
    real payout structure is collapsed into that one aggregate probability.

    The starting state is always yielded as round 0. Once the bankroll
    drops to zero or below it is clamped to 0, that point is yielded, and
    the walk ends.

    Args:
        starting_bankroll: Initial bankroll
        bet_amount: Flat bet per round
        house_edge: House edge percentage
        number_of_rounds: Rounds to play after the starting state
        rng: Random source (unseeded when not provided)

    Yields:
        SimulationPoint for each round, in order

    Raises:
        InvalidParameterError: If any input is out of range
    """
    require_positive("starting_bankroll", starting_bankroll)
    require_positive("bet_amount", bet_amount)
    require_house_edge("house_edge", house_edge)
    require_count("number_of_rounds", number_of_rounds)
    return _walk(starting_bankroll, bet_amount, house_edge, number_of_rounds, rng or Random())


def _walk(
    starting_bankroll: float,
    bet_amount: float,
    house_edge: float,
    number_of_rounds: int,
    rng: Random,
) -> Iterator[SimulationPoint]:
    # Money in Decimal: fractional stakes must land on exactly zero
    bankroll = Decimal(str(starting_bankroll))
    stake = Decimal(str(bet_amount))
    player_win_chance = 1 - house_edge / 100

    yield SimulationPoint(round=0, bankroll=starting_bankroll)

    for round_number in range(1, number_of_rounds + 1):
        if rng.random() < player_win_chance:
            bankroll += stake
        else:
            bankroll -= stake

        if bankroll <= 0:
            yield SimulationPoint(round=round_number, bankroll=0.0)
            return

        yield SimulationPoint(round=round_number, bankroll=float(bankroll))


def simulate_games(
    starting_bankroll: float,
    bet_amount: float,
    house_edge: float,
    number_of_rounds: int,
    rng: Random | None = None,
) -> list[SimulationPoint]:
    """Run a full bankroll simulation and return every point (see iter_simulation)."""
    run = list(
        iter_simulation(starting_bankroll, bet_amount, house_edge, number_of_rounds, rng)
    )
    logger.debug(
        "Simulated %d/%d rounds: %.2f -> %.2f",
        run[-1].round,
        number_of_rounds,
        starting_bankroll,
        run[-1].bankroll,
    )
    return run


class AggregateEdgeSimulator:
    """
    Default simulator using a single aggregate win probability per round.

    Holds its own random source so repeated runs continue one stream;
    pass a seed for reproducible sequences.
    """

    def __init__(self, seed: int | None = None, rng: Random | None = None) -> None:
        self.rng = rng if rng is not None else Random(seed)

    def run(
        self,
        starting_bankroll: float,
        bet_amount: float,
        house_edge: float,
        number_of_rounds: int,
    ) -> list[SimulationPoint]:
        return simulate_games(
            starting_bankroll, bet_amount, house_edge, number_of_rounds, self.rng
        )


def summarize_simulation(
    run: Sequence[SimulationPoint],
    starting_bankroll: float,
    bet_amount: float,
    house_edge: float,
    number_of_rounds: int,
) -> SimulationSummary:
    """
    Summarize a simulation run against its mathematical expectation.

    Total wagered is the planned bet * rounds, even when the run ended
    early on ruin, so the expected figures describe the full session.
    """
    final_bankroll = run[-1].bankroll if run else starting_bankroll
    total_wagered = bet_amount * number_of_rounds
    loss = expected_loss(total_wagered, house_edge)

    return SimulationSummary(
        starting_bankroll=starting_bankroll,
        final_bankroll=final_bankroll,
        total_wagered=total_wagered,
        net_result=final_bankroll - starting_bankroll,
        expected_loss=loss,
        expected_bankroll=starting_bankroll - loss,
        bankruptcy_risk=bankruptcy_risk(
            starting_bankroll, bet_amount, house_edge, number_of_rounds
        ),
        rounds_played=run[-1].round if run else 0,
        went_broke=bool(run) and run[-1].bankroll == 0,
    )


def simulate_slot_session(
    spins: int,
    bet_per_spin: float,
    house_edge: float,
    rng: Random | None = None,
) -> list[SlotSessionPoint]:
    """
    Sample a slot session's balance against its expected decline.

    The player starts with the whole session stake (spins * bet). Points are
    taken every max(1, spins // 50) spins; each is the expected balance plus
    uniform noise scaled by sqrt(spin) * bet * 2, floored at zero. Samples
    are independent, this is an illustration of spread rather than a walk.

    Args:
        spins: Number of spins in the session
        bet_per_spin: Stake per spin
        house_edge: House edge percentage of the machine
        rng: Random source (unseeded when not provided)

    Returns:
        Sampled points from spin 0 up to the last step not beyond spins
    """
    require_count("spins", spins)
    require_positive("bet_per_spin", bet_per_spin)
    require_house_edge("house_edge", house_edge)
    rng = rng or Random()

    total_wagered = spins * bet_per_spin
    step = max(1, spins // _SLOT_SAMPLE_POINTS)
    points = []

    for spin in range(0, spins + 1, step):
        expected = total_wagered - spin * bet_per_spin * (house_edge / 100)
        spread = math.sqrt(spin) * bet_per_spin * 2
        noise = (rng.random() - 0.5) * spread
        points.append(
            SlotSessionPoint(
                spin=spin,
                bankroll=max(0.0, expected + noise),
                expected=max(0.0, expected),
            )
        )

    return points
