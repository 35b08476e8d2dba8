"""Helpers for tracking results across several Candy Land games."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

__all__ = ["GameSummary", "PlayerTotals", "MatchHistory"]


@dataclass(frozen=True, slots=True)
class GameSummary:
    """Summary statistics captured after a single finished game."""

    game_number: int
    winner_index: int
    rounds: int
    shortcuts: Sequence[int]
    skips: Sequence[int]


@dataclass(frozen=True, slots=True)
class PlayerTotals:
    """Aggregate totals for one seat across all recorded games."""

    player_index: int
    wins: int
    shortcuts: int
    skips: int


@dataclass(slots=True)
class MatchHistory:
    """Mutable tracker that accumulates game summaries."""

    num_players: int
    games: list[GameSummary] = field(default_factory=list)
    _wins: list[int] = field(init=False, repr=False)
    _shortcuts: list[int] = field(init=False, repr=False)
    _skips: list[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.num_players <= 0:
            raise ValueError("num_players must be positive")
        self._wins = [0 for _ in range(self.num_players)]
        self._shortcuts = [0 for _ in range(self.num_players)]
        self._skips = [0 for _ in range(self.num_players)]

    def record(self, summary: GameSummary) -> None:
        """Record ``summary`` and update cumulative totals."""

        if len(summary.shortcuts) != self.num_players or len(summary.skips) != self.num_players:
            raise ValueError("summary does not match number of players")
        if not 0 <= summary.winner_index < self.num_players:
            raise ValueError("winner index out of range")
        self.games.append(summary)
        self._wins[summary.winner_index] += 1
        for idx in range(self.num_players):
            self._shortcuts[idx] += summary.shortcuts[idx]
            self._skips[idx] += summary.skips[idx]

    def totals(self) -> list[PlayerTotals]:
        """Return the cumulative totals for each seat in index order."""

        return [
            PlayerTotals(
                player_index=idx,
                wins=self._wins[idx],
                shortcuts=self._shortcuts[idx],
                skips=self._skips[idx],
            )
            for idx in range(self.num_players)
        ]
