"""Saving and loading games to numbered slot files.

A save is a single ASCII line::

    0.<token><skip><position>.<token><skip><position>. ... <deck symbols>

The leading ``0.`` is a difficulty marker that is written but never read
back. Each player field is a token digit, a ``0``/``1`` skip flag and the
board position, terminated by ``.``. The remaining deck follows immediately,
one letter per card, front card first (see :mod:`candyland.encoding`).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Final

from . import encoding
from .cards import Card

if TYPE_CHECKING:
    from .state import GameState

logger = logging.getLogger("candyland.saves")

DIFFICULTY_PREFIX: Final[str] = "0."
VALID_SLOTS: Final[range] = range(1, 4)
SAVE_FILE_TEMPLATE: Final[str] = "saved_game_data_{slot}.txt"

__all__ = [
    "DIFFICULTY_PREFIX",
    "VALID_SLOTS",
    "SavedPlayer",
    "SaveRecord",
    "encode_save",
    "decode_save",
    "save_path",
    "write_slot",
    "read_slot",
]


@dataclass(frozen=True, slots=True)
class SavedPlayer:
    token_index: int
    skip_next_turn: bool
    position: int


@dataclass(frozen=True, slots=True)
class SaveRecord:
    """Inter-round game state captured by a save slot."""

    players: tuple[SavedPlayer, ...]
    deck: tuple[Card, ...]

    @classmethod
    def from_state(cls, state: "GameState") -> "SaveRecord":
        players = tuple(
            SavedPlayer(
                token_index=player.token_index,
                skip_next_turn=player.skip_next_turn,
                position=player.position,
            )
            for player in state.players
        )
        return cls(players=players, deck=tuple(state.deck.cards))

    def apply_to(self, state: "GameState") -> None:
        """Copy tokens, skip flags, positions and deck onto ``state``."""

        if len(self.players) != len(state.players):
            raise ValueError("save record does not match the number of players")
        for saved, player in zip(self.players, state.players):
            player.token_index = saved.token_index
            player.skip_next_turn = saved.skip_next_turn
            player.position = saved.position
        state.deck.replace(self.deck)


def encode_save(record: SaveRecord) -> str:
    """Return the single-line text form of ``record``."""

    parts = [DIFFICULTY_PREFIX]
    for player in record.players:
        if not 0 <= player.token_index <= 9:
            raise ValueError("token index must be a single digit")
        if player.position < 0:
            raise ValueError("position must not be negative")
        skip_flag = "1" if player.skip_next_turn else "0"
        parts.append(f"{player.token_index}{skip_flag}{player.position}.")
    parts.append(encoding.encode_cards(record.deck))
    return "".join(parts)


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_symbol(char: str) -> bool:
    return "A" <= char <= "Z"


def decode_save(line: str) -> SaveRecord | None:
    """Parse a save line, returning ``None`` for empty or malformed input.

    Letters outside the save alphabet are dropped from the deck without
    failing the decode.
    """

    if not line:
        return None

    first_symbol = next((idx for idx, char in enumerate(line) if _is_symbol(char)), len(line))
    player_count = line[:first_symbol].count(".") - 1
    if player_count <= 0:
        return None

    tokens = [-1] * player_count
    skips: list[bool | None] = [None] * player_count
    positions = [0] * player_count
    position_digits = [0] * player_count
    deck: list[Card] = []

    current = 0
    for char in line[len(DIFFICULTY_PREFIX) :]:
        if _is_digit(char):
            if current >= player_count:
                continue
            digit = ord(char) - ord("0")
            if tokens[current] < 0:
                tokens[current] = digit
            elif skips[current] is None:
                skips[current] = char == "1"
            else:
                positions[current] = positions[current] * 10 + digit
                position_digits[current] += 1
        elif char == ".":
            current += 1
        elif _is_symbol(char):
            card = encoding.decode_symbol(char)
            if card is not None:
                deck.append(card)

    if any(token < 0 for token in tokens) or not all(position_digits):
        return None

    players = tuple(
        SavedPlayer(token_index=token, skip_next_turn=bool(skip), position=position)
        for token, skip, position in zip(tokens, skips, positions)
    )
    return SaveRecord(players=players, deck=tuple(deck))


def save_path(slot: int, directory: str | os.PathLike[str] = ".") -> Path:
    return Path(directory) / SAVE_FILE_TEMPLATE.format(slot=slot)


def write_slot(slot: int, record: SaveRecord, directory: str | os.PathLike[str] = ".") -> bool:
    """Replace the contents of ``slot`` with ``record``.

    The line is written to a temporary file and renamed into place so a
    reader never sees a partial save. I/O errors are logged and swallowed.
    """

    if slot not in VALID_SLOTS:
        logger.warning("Invalid slot number %s", slot)
        return False

    path = save_path(slot, directory)
    tmp_path = path.with_name(path.name + ".tmp")
    try:
        tmp_path.write_text(encode_save(record), encoding="ascii")
        os.replace(tmp_path, path)
    except OSError as exc:
        logger.error("Error writing to %s: %s", path, exc)
        tmp_path.unlink(missing_ok=True)
        return False
    logger.info("Game saved in slot %d", slot)
    return True


def read_slot(slot: int, directory: str | os.PathLike[str] = ".") -> SaveRecord | None:
    """Return the record stored in ``slot``, or ``None`` when there is none.

    Missing files, empty first lines and malformed lines all read as an
    empty slot. Slot numbers outside 1..3 never touch the filesystem.
    """

    if slot not in VALID_SLOTS:
        logger.warning("Invalid slot number %s", slot)
        return None

    path = save_path(slot, directory)
    try:
        with path.open("r", encoding="ascii", errors="replace") as handle:
            line = handle.readline().rstrip("\r\n")
    except OSError:
        logger.info("Slot %d is empty", slot)
        return None

    record = decode_save(line)
    if record is None:
        logger.info("Slot %d is empty", slot)
    return record
