"""Movement and win rules for Candy Land."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from . import board
from .cards import Card, Color

if TYPE_CHECKING:
    from .state import GameState

logger = logging.getLogger("candyland.rules")

__all__ = [
    "MoveResult",
    "steps_from_color",
    "steps_for",
    "choose_card",
    "apply_movement",
    "resolve_skip",
    "check_winner",
]


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Outcome of moving a single piece for a drawn card."""

    player_index: int
    card: Card
    steps: int
    start: int
    landing: int
    position: int
    shortcut_from: int | None = None
    landed_on_skip: bool = False

    @property
    def took_shortcut(self) -> bool:
        return self.shortcut_from is not None

    @property
    def finished(self) -> bool:
        return self.position >= board.FINISH_POSITION


def steps_from_color(color: Color, position: int) -> int:
    """Return how far ``position`` is from the next square of ``color``.

    A piece already standing on ``color`` travels a full cycle of six.
    """

    drawn_value = color.card_value
    current_value = max(board.card_value(position), 0)
    if current_value > drawn_value:
        return board.COLOR_COUNT - current_value + drawn_value
    if current_value == drawn_value:
        return board.COLOR_COUNT
    return drawn_value - current_value


def steps_for(card: Card, position: int) -> int:
    """Return the movement value of ``card`` for a piece at ``position``.

    Special cards return their absolute target square rather than a
    distance; :func:`apply_movement` sets the position to it directly.
    """

    if card.landmark is not None:
        return card.landmark.target
    assert card.color is not None
    steps = steps_from_color(card.color, position)
    if card.is_double:
        steps += board.COLOR_COUNT
    return steps


def choose_card(first: Card, second: Card, position: int) -> tuple[Card, int]:
    """Pick the card that carries a piece further, favouring ``second`` on ties."""

    first_steps = steps_for(first, position)
    second_steps = steps_for(second, position)
    if first_steps <= second_steps:
        return second, second_steps
    return first, first_steps


def apply_movement(state: "GameState", player_index: int, card: Card, steps: int) -> MoveResult:
    """Move ``player_index`` for ``card`` and resolve shortcuts and licorice.

    The landing square is checked for a shortcut first; the square reached
    after any shortcut is then checked for licorice before the position is
    clamped to the finish.
    """

    player = state.players[player_index]
    start = player.position
    if card.is_special:
        player.position = steps
    else:
        player.position = start + steps
    landing = player.position
    logger.debug(
        "Player %d moved to position %d/%d: %s",
        player_index,
        landing,
        board.FINISH_POSITION,
        board.color_at(landing).value,
    )

    shortcut_from: int | None = None
    destination = board.shortcut_destination(landing)
    if destination is not None:
        shortcut_from = landing
        player.position = destination
        player.shortcut_taken = True
        logger.debug(
            "Player %d took the %s shortcut to position %d",
            player_index,
            board.SHORTCUT_NAMES[landing],
            destination,
        )

    landed_on_skip = board.is_skip_space(player.position)
    if landed_on_skip:
        player.skip_next_turn = True
        logger.debug("Player %d landed on licorice; next turn will be skipped", player_index)

    if player.position >= board.FINISH_POSITION:
        player.position = board.FINISH_POSITION

    return MoveResult(
        player_index=player_index,
        card=card,
        steps=steps,
        start=start,
        landing=landing,
        position=player.position,
        shortcut_from=shortcut_from,
        landed_on_skip=landed_on_skip,
    )


def resolve_skip(state: "GameState", player_index: int) -> None:
    """Spend a pending licorice skip for ``player_index`` without drawing."""

    player = state.players[player_index]
    player.skip_current_turn_display = True
    player.skip_next_turn = False
    logger.debug(
        "Player %d is on licorice and skips this turn at position %d",
        player_index,
        player.position,
    )


def check_winner(state: "GameState") -> int | None:
    """Record and return the winner, scanning seats in index order.

    The lowest seat at the finish wins even if a higher seat got there first
    in the same round. An existing winner is never replaced.
    """

    if state.winner_index is not None:
        return state.winner_index
    for idx, player in enumerate(state.players):
        if player.position >= board.FINISH_POSITION:
            state.winner_index = idx
            state.active = False
            logger.debug("Player %d has won the game", idx)
            break
    return state.winner_index
