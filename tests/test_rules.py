"""Tests covering movement, shortcut, licorice and winner rules."""

from __future__ import annotations

import pytest

from candyland import rules
from candyland.cards import Card, Color, Landmark
from candyland.layout import starting_placements
from candyland.state import GameState, PlayerState


def _state(*positions: int) -> GameState:
    return GameState(
        players=[PlayerState(position=pos) for pos in positions],
        placements=starting_placements(len(positions)),
    )


def test_single_and_double_step_ranges() -> None:
    for color in Color:
        for position in range(0, 137):
            assert 1 <= rules.steps_for(Card.single(color), position) <= 6
            assert 7 <= rules.steps_for(Card.double(color), position) <= 12


@pytest.mark.parametrize(
    ("color", "position", "expected"),
    [
        (Color.PURPLE, 0, 1),
        (Color.RED, 0, 6),
        (Color.PURPLE, 56, 5),
        (Color.YELLOW, 56, 6),
        (Color.RED, 61, 5),
        (Color.BLUE, 135, 6),
    ],
)
def test_steps_from_color(color: Color, position: int, expected: int) -> None:
    assert rules.steps_from_color(color, position) == expected


def test_special_card_steps_are_absolute_targets() -> None:
    assert rules.steps_for(Card.special(Landmark.PEPPERMINT_FOREST), 90) == 20
    assert rules.steps_for(Card.special(Landmark.LOLLIPOP_WOODS), 0) == 99


def test_single_purple_from_yellow_square() -> None:
    state = _state(56, 0, 0, 0)
    card = Card.single(Color.PURPLE)

    result = rules.apply_movement(state, 0, card, rules.steps_for(card, 56))

    assert result.steps == 5
    assert state.players[0].position == 61


def test_double_red_from_purple_square() -> None:
    state = _state(61, 0, 0, 0)
    card = Card.double(Color.RED)

    result = rules.apply_movement(state, 0, card, rules.steps_for(card, 61))

    assert result.steps == 11
    assert state.players[0].position == 72


def test_special_card_can_move_backwards() -> None:
    state = _state(90, 0, 0, 0)
    card = Card.special(Landmark.PEPPERMINT_FOREST)

    result = rules.apply_movement(state, 0, card, rules.steps_for(card, 90))

    assert result.start == 90
    assert state.players[0].position == 20


@pytest.mark.parametrize(("landing", "destination"), [(27, 56), (49, 74)])
def test_shortcuts_relocate_within_the_move(landing: int, destination: int) -> None:
    state = _state(0, 0, 0, 0)

    result = rules.apply_movement(state, 0, Card.single(Color.RED), landing)

    assert result.landing == landing
    assert result.shortcut_from == landing
    assert result.took_shortcut
    assert state.players[0].position == destination
    assert state.players[0].shortcut_taken
    assert not state.players[0].skip_next_turn


@pytest.mark.parametrize("square", [12, 44, 82])
def test_licorice_flags_the_next_turn(square: int) -> None:
    state = _state(square - 3, 0, 0, 0)

    result = rules.apply_movement(state, 0, Card.single(Color.BLUE), 3)

    assert result.landed_on_skip
    assert state.players[0].position == square
    assert state.players[0].skip_next_turn
    assert not state.players[0].skip_current_turn_display


def test_move_past_finish_is_clamped() -> None:
    state = _state(130, 0, 0, 0)

    result = rules.apply_movement(state, 0, Card.double(Color.RED), 12)

    assert result.landing == 142
    assert result.position == 136
    assert result.finished
    assert state.players[0].position == 136


def test_resolve_skip_clears_flag_and_marks_display() -> None:
    state = _state(12, 0, 0, 0)
    state.players[0].skip_next_turn = True

    rules.resolve_skip(state, 0)

    assert state.players[0].position == 12
    assert not state.players[0].skip_next_turn
    assert state.players[0].skip_current_turn_display


def test_choose_card_prefers_larger_move() -> None:
    first = Card.double(Color.GREEN)
    second = Card.single(Color.RED)

    chosen, steps = rules.choose_card(first, second, 0)

    assert chosen is first
    assert steps == 10


def test_choose_card_tie_goes_to_second_card() -> None:
    first = Card.single(Color.YELLOW)
    second = Card.single(Color.YELLOW)

    chosen, steps = rules.choose_card(first, second, 0)

    assert chosen is second
    assert steps == 2


def test_check_winner_is_index_ordered() -> None:
    state = _state(136, 136, 0, 0)
    state.active = True

    assert rules.check_winner(state) == 0
    assert state.winner_index == 0
    assert not state.active


def test_check_winner_never_replaces_existing_winner() -> None:
    state = _state(0, 136, 0, 0)
    assert rules.check_winner(state) == 1

    state.players[0].position = 136
    assert rules.check_winner(state) == 1


def test_check_winner_without_finisher() -> None:
    state = _state(135, 100, 0, 0)

    assert rules.check_winner(state) is None
