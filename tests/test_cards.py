from __future__ import annotations

from collections import Counter

import pytest

from candyland import encoding
from candyland.cards import DECK_SIZE, Card, CardKind, Color, Landmark, iter_full_deck


def test_full_deck_composition() -> None:
    cards = list(iter_full_deck())
    counts = Counter(cards)

    assert len(cards) == DECK_SIZE == 64
    for color in Color:
        assert counts[Card.single(color)] == 8
        assert counts[Card.double(color)] == 2
    for landmark in Landmark:
        assert counts[Card.special(landmark)] == 1


def test_full_deck_construction_order() -> None:
    cards = list(iter_full_deck())

    assert cards[0] == Card.single(Color.PURPLE)
    assert cards[47] == Card.single(Color.RED)
    assert cards[48] == Card.double(Color.PURPLE)
    assert cards[54] == Card.double(Color.PURPLE)
    assert [card.landmark for card in cards[60:]] == list(Landmark)


@pytest.mark.parametrize(
    ("color", "value"),
    [
        (Color.PURPLE, 1),
        (Color.YELLOW, 2),
        (Color.BLUE, 3),
        (Color.GREEN, 4),
        (Color.ORANGE, 5),
        (Color.RED, 6),
    ],
)
def test_color_card_values(color: Color, value: int) -> None:
    assert color.card_value == value


def test_landmark_targets() -> None:
    assert [landmark.target for landmark in Landmark] == [20, 36, 72, 99]


def test_card_labels() -> None:
    assert Card.single(Color.BLUE).label() == "Blue"
    assert Card.double(Color.RED).label() == "Double Red"
    assert str(Card.special(Landmark.PEANUT_ACRES)) == "Peanut Acres"


def test_card_rejects_mismatched_payload() -> None:
    with pytest.raises(ValueError):
        Card(CardKind.SPECIAL, color=Color.RED)
    with pytest.raises(ValueError):
        Card(CardKind.SINGLE, landmark=Landmark.LOLLIPOP_WOODS)


def test_save_alphabet_covers_every_card_kind() -> None:
    distinct = set(iter_full_deck())

    assert len(encoding.SYMBOL_TO_CARD) == 16
    assert set(encoding.SYMBOL_TO_CARD.values()) == distinct
    assert encoding.encode_card(Card.single(Color.RED)) == "A"
    assert encoding.encode_card(Card.single(Color.PURPLE)) == "F"
    assert encoding.encode_card(Card.double(Color.RED)) == "G"
    assert encoding.encode_card(Card.double(Color.PURPLE)) == "L"
    assert encoding.encode_card(Card.special(Landmark.PEPPERMINT_FOREST)) == "M"
    assert encoding.encode_card(Card.special(Landmark.LOLLIPOP_WOODS)) == "P"


def test_decode_cards_drops_unknown_symbols() -> None:
    assert encoding.decode_cards("AZq?B") == [Card.single(Color.RED), Card.single(Color.ORANGE)]
