"""Board topology for the Candy Land track."""

from __future__ import annotations

from typing import Final

from .cards import Color

START_POSITION: Final[int] = 0
FINISH_POSITION: Final[int] = 136
TRACK_LENGTH: Final[int] = FINISH_POSITION + 1
COLOR_COUNT: Final[int] = len(Color.ordered())

SHORTCUTS: Final[dict[int, int]] = {27: 56, 49: 74}
SHORTCUT_NAMES: Final[dict[int, str]] = {27: "Rainbow Trail", 49: "Gumdrop Pass"}
SKIP_SPACES: Final[frozenset[int]] = frozenset({12, 44, 82})

__all__ = [
    "START_POSITION",
    "FINISH_POSITION",
    "TRACK_LENGTH",
    "COLOR_COUNT",
    "SHORTCUTS",
    "SHORTCUT_NAMES",
    "SKIP_SPACES",
    "card_value",
    "color_at",
    "is_skip_space",
    "shortcut_destination",
]


def card_value(position: int) -> int:
    """Return the 1..6 distance code of ``position`` (0 at the start)."""

    if position <= START_POSITION:
        return 0
    remainder = position % COLOR_COUNT
    return COLOR_COUNT if remainder == 0 else remainder


def color_at(position: int) -> Color:
    """Return the color of the square at ``position``.

    The start square shares the last palette color, as does every multiple
    of six.
    """

    value = card_value(position)
    if value == 0:
        value = COLOR_COUNT
    return Color.ordered()[value - 1]


def is_skip_space(position: int) -> bool:
    return position in SKIP_SPACES


def shortcut_destination(position: int) -> int | None:
    return SHORTCUTS.get(position)
