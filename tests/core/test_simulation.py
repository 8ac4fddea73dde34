"""Tests for the bankroll and slot session simulations."""

import math
from random import Random

import pytest

from casino_math.errors import InvalidParameterError
from casino_math.statistics import (
    AggregateEdgeSimulator,
    SimulationPoint,
    iter_simulation,
    simulate_games,
    simulate_slot_session,
    summarize_simulation,
)


def assert_valid_run(run, starting_bankroll, number_of_rounds):
    """Check the invariants every simulation run must satisfy."""
    assert run[0] == SimulationPoint(round=0, bankroll=starting_bankroll)
    assert len(run) <= number_of_rounds + 1
    assert [p.round for p in run] == list(range(len(run)))
    assert all(p.bankroll >= 0 for p in run)
    for point in run[:-1]:
        assert point.bankroll > 0


class TestSimulateGames:
    """Tests for the flat-bet bankroll walk."""

    def test_invariants_seeded(self, rng, session_params):
        starting, bet, edge, rounds = session_params
        run = simulate_games(starting, bet, edge, rounds, rng)
        assert_valid_run(run, starting, rounds)

    def test_invariants_unseeded(self, session_params):
        """Unseeded runs differ but always respect the invariants."""
        starting, bet, edge, rounds = session_params
        for _ in range(25):
            run = simulate_games(starting, bet, edge, rounds)
            assert_valid_run(run, starting, rounds)

    def test_small_bankroll_invariants(self):
        """Runs likely to go broke still stop cleanly at zero."""
        for seed in range(50):
            run = simulate_games(50, 25, 20, 200, Random(seed))
            assert_valid_run(run, 50, 200)
            if len(run) < 201:
                assert run[-1].bankroll == 0

    def test_steps_by_bet_amount(self, rng):
        """Each round moves the bankroll by exactly one bet."""
        run = simulate_games(1000, 25, 2.7, 200, rng)
        for before, after in zip(run, run[1:]):
            if after.bankroll > 0:
                assert abs(after.bankroll - before.bankroll) == 25

    def test_seeded_runs_reproducible(self):
        first = simulate_games(1000, 25, 2.7, 200, Random(7))
        second = simulate_games(1000, 25, 2.7, 200, Random(7))
        assert first == second

    def test_zero_edge_always_wins(self, rng):
        """With no house edge the aggregate win chance is 1."""
        run = simulate_games(100, 10, 0.0, 10, rng)
        assert len(run) == 11
        assert run[-1].bankroll == 200

    def test_full_edge_goes_broke(self, rng):
        """A 100% edge loses every round; ruin ends the run."""
        run = simulate_games(25, 25, 100.0, 50, rng)
        assert run == [
            SimulationPoint(round=0, bankroll=25),
            SimulationPoint(round=1, bankroll=0.0),
        ]

    def test_clamps_overshoot_to_zero(self, rng):
        """A loss bigger than the bankroll stops at exactly zero."""
        run = simulate_games(10, 25, 100.0, 5, rng)
        assert run[-1] == SimulationPoint(round=1, bankroll=0.0)

    def test_fractional_stakes_reach_zero(self, rng):
        """Ten losing $0.10 bets empty a $1.00 bankroll at exactly round 10."""
        run = simulate_games(1.0, 0.1, 100.0, 20, rng)

        assert len(run) == 11
        assert run[-1] == SimulationPoint(round=10, bankroll=0.0)
        assert run[9].bankroll == 0.1

    def test_fractional_stakes_add_exactly(self, rng):
        run = simulate_games(0.3, 0.1, 0.0, 3, rng)
        assert [p.bankroll for p in run] == [0.3, 0.4, 0.5, 0.6]

    def test_zero_rounds(self, rng):
        assert simulate_games(500, 10, 2.7, 0, rng) == [SimulationPoint(0, 500)]

    @pytest.mark.parametrize(
        "args",
        [
            (0, 25, 2.7, 200),
            (1000, 0, 2.7, 200),
            (1000, 25, math.nan, 200),
            (1000, 25, 2.7, -1),
            (1000, 25, 2.7, 2.5),
            (1000, 25, 101, 200),
        ],
    )
    def test_invalid_parameters(self, args):
        with pytest.raises(InvalidParameterError):
            simulate_games(*args)


class TestIterSimulation:
    """Tests for the lazy walk."""

    def test_lazy(self, rng):
        walk = iter_simulation(1000, 25, 2.7, 1000, rng)
        assert next(walk) == SimulationPoint(0, 1000)
        assert next(walk).round == 1

    def test_validates_before_iterating(self):
        """Bad input fails on the call, not on first iteration."""
        with pytest.raises(InvalidParameterError):
            iter_simulation(1000, -5, 2.7, 10)

    def test_not_restartable(self, rng):
        walk = iter_simulation(100, 10, 0.0, 3, rng)
        assert len(list(walk)) == 4
        assert list(walk) == []


class TestAggregateEdgeSimulator:
    """Tests for the default simulator implementation."""

    def test_seed_matches_function(self):
        simulator = AggregateEdgeSimulator(seed=3)
        assert simulator.run(1000, 25, 2.7, 100) == simulate_games(
            1000, 25, 2.7, 100, Random(3)
        )

    def test_continues_stream(self):
        """Successive runs draw from the same generator."""
        simulator = AggregateEdgeSimulator(seed=3)
        first = simulator.run(1000, 25, 2.7, 100)
        second = simulator.run(1000, 25, 2.7, 100)
        assert first != second


class TestSummarizeSimulation:
    """Tests for simulation summaries."""

    def test_winning_run(self, rng):
        run = simulate_games(100, 10, 0.0, 10, rng)
        summary = summarize_simulation(run, 100, 10, 0.0, 10)

        assert summary.final_bankroll == 200
        assert summary.net_result == 100
        assert summary.total_wagered == 100
        assert summary.expected_loss == 0
        assert summary.rounds_played == 10
        assert not summary.went_broke

    def test_broke_run_uses_planned_wager(self, rng):
        """Expected figures cover the whole planned session."""
        run = simulate_games(25, 25, 100.0, 50, rng)
        summary = summarize_simulation(run, 25, 25, 100.0, 50)

        assert summary.went_broke
        assert summary.rounds_played == 1
        assert summary.final_bankroll == 0
        assert summary.net_result == -25
        assert summary.total_wagered == 1250
        assert summary.expected_loss == pytest.approx(1250)
        assert summary.bankruptcy_risk == 100.0

    def test_expected_bankroll(self, rng, session_params):
        starting, bet, edge, rounds = session_params
        run = simulate_games(starting, bet, edge, rounds, rng)
        summary = summarize_simulation(run, starting, bet, edge, rounds)

        assert summary.expected_loss == pytest.approx(135.0)
        assert summary.expected_bankroll == pytest.approx(865.0)


class TestSlotSession:
    """Tests for sampled slot sessions."""

    def test_sampling_step(self, rng):
        """1000 spins are sampled every 20 spins."""
        session = simulate_slot_session(1000, 1, 5.0, rng)

        assert len(session) == 51
        assert [p.spin for p in session[:3]] == [0, 20, 40]
        assert session[-1].spin == 1000

    def test_starts_at_full_stake(self, rng):
        """Spin 0 has no spread, so balance equals the stake."""
        first = simulate_slot_session(1000, 1, 5.0, rng)[0]
        assert first.bankroll == pytest.approx(1000)
        assert first.expected == pytest.approx(1000)

    def test_expected_line(self, rng):
        """Expected balance after 1000 spins at 5% is 950."""
        assert simulate_slot_session(1000, 1, 5.0, rng)[-1].expected == pytest.approx(950)

    def test_noise_bounded(self, rng):
        for point in simulate_slot_session(5000, 2, 10.0, rng):
            spread = math.sqrt(point.spin) * 2 * 2
            assert point.bankroll >= 0
            assert abs(point.bankroll - point.expected) <= spread / 2 + 1e-9

    def test_short_session_step_one(self, rng):
        session = simulate_slot_session(10, 1, 5.0, rng)
        assert [p.spin for p in session] == list(range(11))

    def test_invalid_bet(self):
        with pytest.raises(InvalidParameterError):
            simulate_slot_session(100, 0, 5.0)
