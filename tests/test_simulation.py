from __future__ import annotations

import random

import pytest

from candyland import simulation
from candyland.state import NUM_PLAYERS, CandyLandConfig, Difficulty


def test_run_simulation_reports_every_game() -> None:
    report = simulation.run_simulation(3, seed=7)

    assert len(report.history.games) == 3
    assert sum(report.win_counts) == 3
    assert len(report.win_rates) == NUM_PLAYERS
    assert sum(report.win_rates) == pytest.approx(1.0)
    assert report.max_rounds >= report.mean_rounds > 0
    assert [total.wins for total in report.history.totals()] == list(report.win_counts)


def test_run_simulation_is_deterministic_for_a_seed() -> None:
    first = simulation.run_simulation(4, seed=11, difficulty=Difficulty.EXTREME)
    second = simulation.run_simulation(4, seed=11, difficulty=Difficulty.EXTREME)

    assert first.history.games == second.history.games
    assert first.win_counts == second.win_counts


def test_play_game_finishes_with_a_winner() -> None:
    config = CandyLandConfig(token_selection=3)
    summary = simulation.play_game(1, config, random.Random(5))

    assert 0 <= summary.winner_index < NUM_PLAYERS
    assert summary.rounds >= 1


def test_play_game_raises_when_round_limit_is_hit() -> None:
    with pytest.raises(RuntimeError):
        simulation.play_game(1, CandyLandConfig(), random.Random(5), round_limit=1)


def test_run_simulation_rejects_empty_batch() -> None:
    with pytest.raises(ValueError):
        simulation.run_simulation(0)
