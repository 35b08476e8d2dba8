"""Turn sequencing for a four-seat Candy Land game.

One human draw starts a round. The three computer seats then resolve one at
a time, each fully committing its move and winner check before the next
begins. When play wraps back to the human with a pending licorice skip, that
skip is spent automatically and the computers go again before the human is
asked for input.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from . import board, layout, rules, saves
from .cards import Card, Color
from .state import (
    HUMAN_INDEX,
    NUM_PLAYERS,
    CandyLandConfig,
    Difficulty,
    GameState,
    PlayerState,
    TurnPhase,
    new_game_state,
)

logger = logging.getLogger("candyland.turns")

__all__ = ["TurnRecord", "RoundReport", "GameSession"]


@dataclass(frozen=True, slots=True)
class TurnRecord:
    """Everything that happened on one seat's turn."""

    player_index: int
    drawn: tuple[Card, ...] = ()
    chosen: Card | None = None
    move: rules.MoveResult | None = None

    @property
    def skipped(self) -> bool:
        return self.move is None


@dataclass(slots=True)
class RoundReport:
    """Turns resolved after a single human action."""

    round_number: int
    turns: list[TurnRecord] = field(default_factory=list)
    winner_index: int | None = None


class GameSession:
    """Owns a :class:`GameState` and drives it through the turn state machine."""

    def __init__(self, config: CandyLandConfig | None = None, rng: random.Random | None = None) -> None:
        self.config = config or CandyLandConfig()
        self._rng = rng or random.Random(self.config.seed)
        self.state: GameState = new_game_state(self.config, self._rng)
        self._report: RoundReport | None = None

    # Accessors consumed by presentation layers.

    @property
    def phase(self) -> TurnPhase:
        return self.state.phase

    @property
    def positions(self) -> list[int]:
        return self.state.positions

    @property
    def placements(self) -> list[layout.Placement]:
        return list(self.state.placements)

    @property
    def winner(self) -> int:
        """Return the winning seat, or -1 while the game is undecided."""

        return -1 if self.state.winner_index is None else self.state.winner_index

    @property
    def accepting_input(self) -> bool:
        return self.state.phase == TurnPhase.AWAITING_HUMAN_INPUT and self.state.winner_index is None

    @property
    def current_player(self) -> int:
        return self.state.turn_index

    def player(self, index: int) -> PlayerState:
        if not 0 <= index < NUM_PLAYERS:
            raise ValueError("player index out of range")
        return self.state.players[index]

    def color_at(self, index: int) -> Color:
        return board.color_at(self.player(index).position)

    # Game lifecycle.

    def new_game(self) -> None:
        """Discard the current game and deal a fresh one."""

        self.state = new_game_state(self.config, self._rng)
        self._report = None

    def draw_card(self, *, resolve: bool = True) -> RoundReport | None:
        """Play the human's turn and, by default, the computer turns after it.

        Returns ``None`` when the session is not waiting for the human.
        """

        if not self.accepting_input:
            logger.debug("Ignoring draw request in phase %s", self.state.phase.value)
            return None

        state = self.state
        state.active = True
        state.round_number += 1
        state.reset_round_flags()
        for player in state.players:
            player.skip_current_turn_display = False
        self._report = RoundReport(round_number=state.round_number)

        state.phase = TurnPhase.RESOLVING_HUMAN_DRAW
        human = state.players[HUMAN_INDEX]
        if human.skip_next_turn:
            record = self._skip_turn(HUMAN_INDEX)
        else:
            record = self._play_turn(HUMAN_INDEX, cards_to_draw=1)
        self._finish_turn(record)

        if resolve:
            self.resolve_round()
        return self._report

    def advance(self) -> TurnRecord | None:
        """Resolve the next pending turn, returning ``None`` when nothing is pending."""

        state = self.state
        if state.phase == TurnPhase.ROUND_COMPLETE:
            return self._complete_round()
        if state.phase != TurnPhase.RESOLVING_COMPUTER_DRAW:
            return None

        index = state.turn_index
        if state.players[index].skip_next_turn:
            record = self._skip_turn(index)
        else:
            cards = 2 if self.config.difficulty == Difficulty.EXTREME else 1
            record = self._play_turn(index, cards_to_draw=cards)
        self._finish_turn(record)
        return record

    def resolve_round(self) -> RoundReport | None:
        """Advance until the human is asked to draw or the game ends."""

        while self.state.phase in (TurnPhase.RESOLVING_COMPUTER_DRAW, TurnPhase.ROUND_COMPLETE):
            self.advance()
        return self._report

    # Persistence.

    def save(self, slot: int) -> bool:
        """Write the current game to ``slot``; failures are logged and return ``False``."""

        record = saves.SaveRecord.from_state(self.state)
        return saves.write_slot(slot, record, self.config.save_dir)

    def load(self, slot: int) -> bool:
        """Replace the current game with the one stored in ``slot``."""

        record = saves.read_slot(slot, self.config.save_dir)
        if record is None:
            return False
        if len(record.players) != NUM_PLAYERS:
            logger.info("Slot %d holds %d players; treating it as empty", slot, len(record.players))
            return False

        state = new_game_state(self.config, self._rng)
        record.apply_to(state)
        state.loaded = True
        for idx in range(NUM_PLAYERS):
            state.placements = layout.place_piece(state.positions, idx, state.placements)
        self.state = state
        self._report = None
        logger.info("Slot %d loaded", slot)
        return True

    # Internal helpers.

    def _draw(self) -> Card:
        self.state.deck.ensure_non_empty()
        return self.state.deck.draw()

    def _play_turn(self, index: int, *, cards_to_draw: int) -> TurnRecord:
        state = self.state
        player = state.players[index]
        drawn = [self._draw() for _ in range(cards_to_draw)]
        player.drawn_cards = list(drawn)
        if len(drawn) == 2:
            chosen, steps = rules.choose_card(drawn[0], drawn[1], player.position)
            logger.debug("Player %d drew %s and %s, chose %s", index, drawn[0], drawn[1], chosen)
        else:
            chosen = drawn[0]
            steps = rules.steps_for(chosen, player.position)
            logger.debug("Player %d drew %s", index, chosen)
        move = rules.apply_movement(state, index, chosen, steps)
        state.placements = layout.place_piece(state.positions, index, state.placements)
        rules.check_winner(state)
        return TurnRecord(player_index=index, drawn=tuple(drawn), chosen=chosen, move=move)

    def _skip_turn(self, index: int) -> TurnRecord:
        state = self.state
        rules.resolve_skip(state, index)
        state.placements = layout.place_piece(state.positions, index, state.placements)
        return TurnRecord(player_index=index)

    def _finish_turn(self, record: TurnRecord) -> None:
        state = self.state
        if self._report is not None:
            self._report.turns.append(record)
            self._report.winner_index = state.winner_index
        state.advance_turn()
        if state.winner_index is not None:
            state.phase = TurnPhase.GAME_OVER
        elif state.turn_index == HUMAN_INDEX:
            state.phase = TurnPhase.ROUND_COMPLETE
        else:
            state.phase = TurnPhase.RESOLVING_COMPUTER_DRAW

    def _complete_round(self) -> TurnRecord | None:
        state = self.state
        human = state.players[HUMAN_INDEX]
        if not human.skip_next_turn:
            state.phase = TurnPhase.AWAITING_HUMAN_INPUT
            return None
        state.reset_round_flags()
        record = self._skip_turn(HUMAN_INDEX)
        self._finish_turn(record)
        return record
