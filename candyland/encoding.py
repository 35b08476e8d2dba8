"""Single-letter card symbols used by the save-file format."""

from __future__ import annotations

from typing import Final, Iterable

from .cards import Card, Color, Landmark

SAVE_ALPHABET: Final[str] = "ABCDEFGHIJKLMNOP"

# Save files list colors red-first; gameplay order is purple-first.
SAVE_COLOR_ORDER: Final[tuple[Color, ...]] = (
    Color.RED,
    Color.ORANGE,
    Color.YELLOW,
    Color.GREEN,
    Color.BLUE,
    Color.PURPLE,
)
SAVE_LANDMARK_ORDER: Final[tuple[Landmark, ...]] = (
    Landmark.PEPPERMINT_FOREST,
    Landmark.GUMDROP_MOUNTAINS,
    Landmark.PEANUT_ACRES,
    Landmark.LOLLIPOP_WOODS,
)


def _symbol_table() -> list[Card]:
    cards = [Card.single(color) for color in SAVE_COLOR_ORDER]
    cards.extend(Card.double(color) for color in SAVE_COLOR_ORDER)
    cards.extend(Card.special(landmark) for landmark in SAVE_LANDMARK_ORDER)
    return cards


SYMBOL_TO_CARD: Final[dict[str, Card]] = dict(zip(SAVE_ALPHABET, _symbol_table()))
CARD_TO_SYMBOL: Final[dict[Card, str]] = {card: symbol for symbol, card in SYMBOL_TO_CARD.items()}


def encode_card(card: Card) -> str:
    """Return the save symbol for ``card``."""

    return CARD_TO_SYMBOL[card]


def decode_symbol(symbol: str) -> Card | None:
    """Return the card for ``symbol`` or ``None`` when it is not in the alphabet."""

    return SYMBOL_TO_CARD.get(symbol)


def encode_cards(cards: Iterable[Card]) -> str:
    """Encode a deck, front card first."""

    return "".join(encode_card(card) for card in cards)


def decode_cards(symbols: str) -> list[Card]:
    """Decode a run of symbols, silently dropping unknown ones."""

    cards: list[Card] = []
    for symbol in symbols:
        card = decode_symbol(symbol)
        if card is not None:
            cards.append(card)
    return cards
