from __future__ import annotations

import pytest

from candyland import layout
from candyland.layout import Placement


def test_starting_placements_use_four_distinct_corners() -> None:
    placements = layout.starting_placements(4)

    assert all(placement.position == 0 for placement in placements)
    assert len({placement.offset for placement in placements}) == 4


def test_lone_piece_is_centred() -> None:
    placements = layout.place_piece([5, 0, 0, 0], 0, layout.starting_placements(4))

    assert placements[0] == Placement(5, 0.0, 0.0)
    assert placements[1:] == layout.starting_placements(4)[1:]


def test_two_pieces_stand_side_by_side() -> None:
    placements = layout.place_piece([5, 5, 0, 0], 1, layout.starting_placements(4))

    mover = placements[1]
    predecessor = placements[0]
    assert mover.offset == layout.PAIR_OFFSETS["mover"]
    assert predecessor.offset == layout.PAIR_OFFSETS["predecessor"]
    assert mover.offset != predecessor.offset
    assert mover.offset != layout.CENTER
    assert predecessor.offset != layout.CENTER
    assert mover.position == predecessor.position == 5


def test_only_lower_seats_count_as_already_there() -> None:
    positions = [5, 5, 5, 0]

    assert layout.count_overlaps(positions, 0) == (1, None)
    assert layout.count_overlaps(positions, 1) == (2, 0)
    assert layout.count_overlaps(positions, 2) == (3, 1)

    placements = layout.place_piece(positions, 0, layout.starting_placements(4))
    assert placements[0] == Placement(5, 0.0, 0.0)


def test_three_pieces_move_to_corners() -> None:
    start = layout.starting_placements(4)
    placements = layout.place_piece([5, 5, 5, 0], 2, start)

    for idx in range(3):
        assert placements[idx] == Placement(5, *layout.corner_offset(idx))
    assert placements[3] == start[3]


@pytest.mark.parametrize(
    ("index", "horizontal", "vertical"),
    [(0, 1, 1), (1, -1, 1), (2, 1, -1), (3, -1, -1)],
)
def test_corner_parity(index: int, horizontal: int, vertical: int) -> None:
    dx, dy = layout.corner_offset(index)

    assert (dx > 0) == (horizontal > 0)
    assert (dy > 0) == (vertical > 0)


def test_recompute_recentres_piece_left_alone() -> None:
    placements = layout.place_piece([5, 5, 0, 0], 1, layout.starting_placements(4))
    placements = layout.place_piece([5, 9, 0, 0], 1, placements)

    assert placements[0].offset == layout.PAIR_OFFSETS["predecessor"]

    placements = layout.place_piece([5, 9, 0, 0], 0, placements)
    assert placements[0] == Placement(5, 0.0, 0.0)


def test_place_piece_rejects_unknown_mover() -> None:
    with pytest.raises(ValueError):
        layout.place_piece([0, 0, 0, 0], 4, layout.starting_placements(4))
