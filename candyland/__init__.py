"""Top-level package for the Candy Land rules engine."""

from . import board, cards, deck, encoding, layout, rules, saves, state, turns

__all__ = [
    "board",
    "cards",
    "deck",
    "encoding",
    "layout",
    "rules",
    "saves",
    "state",
    "turns",
]
