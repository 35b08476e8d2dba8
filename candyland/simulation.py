"""Headless simulation harness for batches of Candy Land games."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

import numpy as np

from . import scoreboard
from .state import NUM_PLAYERS, CandyLandConfig, Difficulty
from .turns import GameSession, RoundReport

logger = logging.getLogger("candyland.simulation")

__all__ = ["SimulationReport", "play_game", "run_simulation"]

ROUND_LIMIT = 1000


@dataclass(frozen=True, slots=True)
class SimulationReport:
    """Aggregated outcome of a batch of simulated games."""

    history: scoreboard.MatchHistory
    win_counts: tuple[int, ...]
    win_rates: tuple[float, ...]
    mean_rounds: float
    max_rounds: int


def _tally(report: RoundReport, shortcuts: list[int], skips: list[int]) -> None:
    for turn in report.turns:
        if turn.move is None:
            skips[turn.player_index] += 1
        elif turn.move.took_shortcut:
            shortcuts[turn.player_index] += 1


def play_game(
    game_number: int,
    config: CandyLandConfig,
    rng: random.Random,
    *,
    round_limit: int = ROUND_LIMIT,
) -> scoreboard.GameSummary:
    """Play one game to completion, drawing automatically for the human seat."""

    session = GameSession(config, rng=rng)
    shortcuts = [0] * NUM_PLAYERS
    skips = [0] * NUM_PLAYERS
    for _ in range(round_limit):
        report = session.draw_card()
        if report is None:
            break
        _tally(report, shortcuts, skips)
        if session.winner >= 0:
            break
    if session.winner < 0:
        raise RuntimeError(f"game {game_number} did not finish within {round_limit} rounds")

    return scoreboard.GameSummary(
        game_number=game_number,
        winner_index=session.winner,
        rounds=session.state.round_number,
        shortcuts=tuple(shortcuts),
        skips=tuple(skips),
    )


def run_simulation(
    games: int,
    *,
    difficulty: Difficulty = Difficulty.NORMAL,
    seed: int | None = None,
    token_selection: int = 0,
) -> SimulationReport:
    """Play ``games`` complete games and summarise who won and how long it took."""

    if games <= 0:
        raise ValueError("games must be positive")

    rng = random.Random(seed)
    config = CandyLandConfig(difficulty=difficulty, token_selection=token_selection, seed=seed)
    history = scoreboard.MatchHistory(num_players=NUM_PLAYERS)
    for game_number in range(1, games + 1):
        summary = play_game(game_number, config, rng)
        history.record(summary)
        logger.debug("Game %d won by player %d in %d rounds", game_number, summary.winner_index, summary.rounds)

    winners = np.array([summary.winner_index for summary in history.games], dtype=np.int64)
    rounds = np.array([summary.rounds for summary in history.games], dtype=np.int64)
    counts = np.bincount(winners, minlength=NUM_PLAYERS)
    rates = counts / counts.sum()

    return SimulationReport(
        history=history,
        win_counts=tuple(int(value) for value in counts),
        win_rates=tuple(float(value) for value in rates),
        mean_rounds=float(rounds.mean()),
        max_rounds=int(rounds.max()),
    )
