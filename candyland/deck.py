"""Draw pile management for Candy Land."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Iterable

from .cards import Card, iter_full_deck

logger = logging.getLogger("candyland.deck")


@dataclass(slots=True)
class Deck:
    """Ordered draw pile; the first card is the next one drawn."""

    cards: list[Card] = field(default_factory=list)
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

    @classmethod
    def fresh(cls, rng: random.Random | None = None) -> "Deck":
        """Return a freshly built and shuffled 64-card deck."""

        deck = cls(rng=rng or random.Random())
        deck.initialize()
        deck.shuffle()
        return deck

    def __len__(self) -> int:
        return len(self.cards)

    def initialize(self) -> None:
        """Replace the pile with the full deck in construction order."""

        self.cards = list(iter_full_deck())

    def shuffle(self) -> None:
        if self.cards:
            self.rng.shuffle(self.cards)

    def ensure_non_empty(self) -> None:
        """Rebuild and shuffle the deck when it has run out."""

        if self.cards:
            return
        logger.debug("Deck exhausted, building and shuffling a new deck")
        self.initialize()
        self.shuffle()

    def draw(self) -> Card:
        """Remove and return the front card.

        Callers run :meth:`ensure_non_empty` first; an empty pile raises
        ``IndexError``.
        """

        return self.cards.pop(0)

    def replace(self, cards: Iterable[Card]) -> None:
        """Install ``cards`` as the pile, front card first."""

        self.cards = list(cards)
