from __future__ import annotations

import pytest

from candyland import board
from candyland.cards import Color


@pytest.mark.parametrize(
    ("position", "expected"),
    [
        (0, Color.RED),
        (1, Color.PURPLE),
        (2, Color.YELLOW),
        (6, Color.RED),
        (56, Color.YELLOW),
        (61, Color.PURPLE),
        (136, Color.GREEN),
    ],
)
def test_color_at(position: int, expected: Color) -> None:
    assert board.color_at(position) == expected


def test_colors_repeat_every_six_squares() -> None:
    for position in range(0, board.FINISH_POSITION - 5):
        assert board.color_at(position) == board.color_at(position + 6)


def test_card_value_matches_color() -> None:
    assert board.card_value(0) == 0
    for position in range(1, board.TRACK_LENGTH):
        value = board.card_value(position)
        assert 1 <= value <= 6
        assert board.color_at(position).card_value == value


def test_special_squares() -> None:
    assert board.shortcut_destination(27) == 56
    assert board.shortcut_destination(49) == 74
    assert board.shortcut_destination(56) is None
    assert all(board.is_skip_space(pos) for pos in (12, 44, 82))
    assert not board.is_skip_space(13)
