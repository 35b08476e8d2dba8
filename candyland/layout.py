"""Placement of pieces that share a square on the board.

Offsets are pixel displacements from the anchor point of a square, using
the board's 32px squares drawn at a 1/1.2 render scale. A single piece sits
on the anchor. Two pieces stand side by side. Three or more pieces are sent
to the square's corners by seat index: even seats right, odd seats left,
seats 0-1 on the top row and seats 2-3 on the bottom row.

Only seats with a lower index than the piece that just moved count as
already being on the square. When the lowest seat arrives last it is
therefore centred even if others share its square.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Sequence

SQUARE_SIZE: Final[int] = 32
RENDER_SCALE: Final[float] = 1 / 1.2

_HALF: Final[float] = SQUARE_SIZE / 2 * RENDER_SCALE
_LIFT: Final[float] = SQUARE_SIZE / (SQUARE_SIZE / 2)

Offset = tuple[float, float]

CENTER: Final[Offset] = (0.0, 0.0)
PAIR_OFFSETS: Final[dict[str, Offset]] = {
    "mover": (SQUARE_SIZE / 2 - 2, -_LIFT + 1),
    "predecessor": (-(SQUARE_SIZE / 2 - 3), -_LIFT),
}
# (even seat, top row) -> offset
CORNER_OFFSETS: Final[dict[tuple[bool, bool], Offset]] = {
    (True, True): (_HALF, _HALF - _LIFT),
    (False, True): (-_HALF, _HALF - _LIFT),
    (True, False): (_HALF, -_HALF - _LIFT),
    (False, False): (-_HALF, -_HALF - _LIFT),
}

__all__ = [
    "Placement",
    "CENTER",
    "PAIR_OFFSETS",
    "CORNER_OFFSETS",
    "corner_offset",
    "count_overlaps",
    "place_piece",
    "starting_placements",
]


@dataclass(frozen=True, slots=True)
class Placement:
    """Square index plus the pixel offset a piece is drawn at."""

    position: int
    dx: float = 0.0
    dy: float = 0.0

    @property
    def offset(self) -> Offset:
        return (self.dx, self.dy)


def corner_offset(index: int) -> Offset:
    return CORNER_OFFSETS[(index % 2 == 0, index // 2 == 0)]


def starting_placements(num_players: int) -> list[Placement]:
    """Return every piece parked in its own corner of the start square."""

    return [Placement(0, *corner_offset(idx)) for idx in range(num_players)]


def count_overlaps(positions: Sequence[int], mover: int) -> tuple[int, int | None]:
    """Count pieces on the mover's square, including the mover.

    Returns the count and the highest lower-indexed seat found there.
    """

    target = positions[mover]
    count = 1
    predecessor: int | None = None
    for idx in range(mover):
        if positions[idx] == target:
            count += 1
            predecessor = idx
    return count, predecessor


def place_piece(
    positions: Sequence[int],
    mover: int,
    placements: Sequence[Placement],
) -> list[Placement]:
    """Return updated placements after ``mover`` settled on its square.

    Pieces on other squares keep their previous placement.
    """

    if not 0 <= mover < len(positions):
        raise ValueError("mover index out of range")
    target = positions[mover]
    updated = list(placements)
    if len(updated) < len(positions):
        updated.extend(Placement(pos) for pos in positions[len(updated) :])

    count, predecessor = count_overlaps(positions, mover)
    if count == 1:
        updated[mover] = Placement(target, *CENTER)
    elif count == 2:
        assert predecessor is not None
        updated[mover] = Placement(target, *PAIR_OFFSETS["mover"])
        updated[predecessor] = Placement(target, *PAIR_OFFSETS["predecessor"])
    else:
        for idx, position in enumerate(positions):
            if position == target:
                updated[idx] = Placement(target, *corner_offset(idx))
    return updated
