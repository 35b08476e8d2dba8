"""Card abstractions and helpers for Candy Land."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final, Iterable

SINGLE_COPIES: Final[int] = 8
DOUBLE_COPIES: Final[int] = 2
DECK_SIZE: Final[int] = 64


class Color(str, Enum):
    """The six board colors, declared in palette order."""

    PURPLE = "Purple"
    YELLOW = "Yellow"
    BLUE = "Blue"
    GREEN = "Green"
    ORANGE = "Orange"
    RED = "Red"

    @classmethod
    def ordered(cls) -> tuple["Color", ...]:
        """Return colors in palette order for step and board calculations."""

        return (cls.PURPLE, cls.YELLOW, cls.BLUE, cls.GREEN, cls.ORANGE, cls.RED)

    @property
    def card_value(self) -> int:
        """Return the 1-based palette index of the color."""

        return Color.ordered().index(self) + 1


class Landmark(str, Enum):
    """Special cards that send a piece to a fixed square."""

    PEPPERMINT_FOREST = "Peppermint Forest"
    GUMDROP_MOUNTAINS = "Gumdrop Mountains"
    PEANUT_ACRES = "Peanut Acres"
    LOLLIPOP_WOODS = "Lollipop Woods"

    @property
    def target(self) -> int:
        return LANDMARK_TARGETS[self]


LANDMARK_TARGETS: Final[dict[Landmark, int]] = {
    Landmark.PEPPERMINT_FOREST: 20,
    Landmark.GUMDROP_MOUNTAINS: 36,
    Landmark.PEANUT_ACRES: 72,
    Landmark.LOLLIPOP_WOODS: 99,
}


class CardKind(str, Enum):
    SINGLE = "single"
    DOUBLE = "double"
    SPECIAL = "special"


@dataclass(frozen=True, slots=True)
class Card:
    """Value object describing a physical Candy Land card."""

    kind: CardKind
    color: Color | None = None
    landmark: Landmark | None = None

    def __post_init__(self) -> None:
        if self.kind == CardKind.SPECIAL:
            if self.landmark is None or self.color is not None:
                raise ValueError("special cards carry a landmark and no color")
        elif self.color is None or self.landmark is not None:
            raise ValueError("color cards carry a color and no landmark")

    @classmethod
    def single(cls, color: Color) -> "Card":
        return cls(CardKind.SINGLE, color=color)

    @classmethod
    def double(cls, color: Color) -> "Card":
        return cls(CardKind.DOUBLE, color=color)

    @classmethod
    def special(cls, landmark: Landmark) -> "Card":
        return cls(CardKind.SPECIAL, landmark=landmark)

    @property
    def is_special(self) -> bool:
        """Return ``True`` when the card moves to an absolute square."""

        return self.kind == CardKind.SPECIAL

    @property
    def is_double(self) -> bool:
        return self.kind == CardKind.DOUBLE

    def label(self) -> str:
        """Create a display label such as ``"Double Red"``."""

        if self.landmark is not None:
            return self.landmark.value
        assert self.color is not None
        if self.kind == CardKind.DOUBLE:
            return f"Double {self.color.value}"
        return self.color.value

    def __str__(self) -> str:
        return self.label()


def iter_full_deck() -> Iterable[Card]:
    """Yield all 64 cards of a fresh deck in construction order."""

    for color in Color.ordered():
        for _ in range(SINGLE_COPIES):
            yield Card.single(color)
    for _ in range(DOUBLE_COPIES):
        for color in Color.ordered():
            yield Card.double(color)
    for landmark in Landmark:
        yield Card.special(landmark)
