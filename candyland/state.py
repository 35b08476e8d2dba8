"""Core game state data structures for Candy Land."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Final, List

from .cards import Card
from .deck import Deck
from .layout import Placement, starting_placements

NUM_PLAYERS: Final[int] = 4
HUMAN_INDEX: Final[int] = 0
TOKEN_NAMES: Final[tuple[str, ...]] = ("Cookie", "Sucker", "Candy Cane", "Pink Candy")


class Difficulty(str, Enum):
    """How many cards a computer draws per turn."""

    NORMAL = "normal"
    EXTREME = "extreme"


class TurnPhase(str, Enum):
    """States of the turn sequencer."""

    AWAITING_HUMAN_INPUT = "awaiting_human_input"
    RESOLVING_HUMAN_DRAW = "resolving_human_draw"
    RESOLVING_COMPUTER_DRAW = "resolving_computer_draw"
    ROUND_COMPLETE = "round_complete"
    GAME_OVER = "game_over"


@dataclass(slots=True)
class CandyLandConfig:
    """Runtime configuration for a single game session."""

    difficulty: Difficulty = Difficulty.NORMAL
    token_selection: int = 0
    seed: int | None = None
    save_dir: Path = field(default_factory=Path)

    def __post_init__(self) -> None:
        if not 0 <= self.token_selection < NUM_PLAYERS:
            raise ValueError("token_selection must be between 0 and 3")


@dataclass(slots=True)
class PlayerState:
    """State tracked for each seat at the table."""

    position: int = 0
    skip_next_turn: bool = False
    skip_current_turn_display: bool = False
    token_index: int = 0
    shortcut_taken: bool = False
    drawn_cards: List[Card] = field(default_factory=list)


@dataclass(slots=True)
class GameState:
    """Mutable aggregate owned by a :class:`~candyland.turns.GameSession`."""

    players: List[PlayerState] = field(default_factory=list)
    deck: Deck = field(default_factory=Deck)
    turn_index: int = 0
    winner_index: int | None = None
    active: bool = False
    phase: TurnPhase = TurnPhase.AWAITING_HUMAN_INPUT
    round_number: int = 0
    loaded: bool = False
    placements: List[Placement] = field(default_factory=list)

    @property
    def positions(self) -> list[int]:
        return [player.position for player in self.players]

    def reset_round_flags(self) -> None:
        """Clear the per-round drawn cards and shortcut markers."""

        for player in self.players:
            player.drawn_cards.clear()
            player.shortcut_taken = False

    def advance_turn(self) -> int:
        """Move the turn to the next seat, wrapping to the human."""

        self.turn_index = (self.turn_index + 1) % len(self.players)
        return self.turn_index


def assign_tokens(selection: int) -> list[int]:
    """Return each seat's token index for the human's ``selection``.

    A computer whose default token was taken by the human receives token 0.
    """

    if not 0 <= selection < NUM_PLAYERS:
        raise ValueError("token selection must be between 0 and 3")
    tokens = [selection]
    for idx in range(1, NUM_PLAYERS):
        tokens.append(0 if selection == idx else idx)
    return tokens


def token_name(token_index: int) -> str:
    if not 0 <= token_index < len(TOKEN_NAMES):
        return TOKEN_NAMES[0]
    return TOKEN_NAMES[token_index]


def new_game_state(config: CandyLandConfig, rng: random.Random | None = None) -> GameState:
    """Return a fresh game with a shuffled deck and every piece at the start."""

    players = [PlayerState(token_index=token) for token in assign_tokens(config.token_selection)]
    deck = Deck.fresh(rng or random.Random(config.seed))
    return GameState(players=players, deck=deck, placements=starting_placements(NUM_PLAYERS))
