"""Equality checks for Skewb states."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from .actions import CORNER_FACES, CORNER_SLOTS, ORIENTATION_PERMUTATIONS, center_sticker, corner_sticker

if TYPE_CHECKING:
    from .engine import Skewb

# Center sticker each corner sticker must match in a solved state.
_HOME_CENTERS = np.array(
    [center_sticker(face) for slot in CORNER_SLOTS for face in CORNER_FACES[slot]],
    dtype=np.int32,
)
_CORNER_STICKERS = np.array(
    [corner_sticker(slot, p) for slot in CORNER_SLOTS for p in range(3)],
    dtype=np.int32,
)


def exact_equal(a: Skewb, b: Skewb) -> bool:
    """Slot-by-slot comparison of all corner triples and centers, orientation included."""
    return bool(np.array_equal(a.get_stickers(), b.get_stickers()))


def equal(a: Skewb, b: Skewb) -> bool:
    """Equality up to spinning ``b`` about the vertical axis.

    ``b`` is first turned so that ``a``'s down color is at the bottom, then
    compared in each of its four spins. The search runs on a copy, so ``b``
    keeps its orientation. Raises ``ColorNotFoundError`` when ``a``'s down
    color is on none of ``b``'s centers.
    """
    other = b.copy(keep_history=False)
    other.center_down(a.center_color("D"))

    if exact_equal(a, other):
        return True

    for _ in range(3):
        other.apply_wca_moves("y")
        if exact_equal(a, other):
            return True

    return False


def is_solved(skewb: Skewb) -> bool:
    """Every corner sticker shows the color of the center of the face it sits on."""
    stickers = skewb.get_stickers()
    return bool(np.array_equal(stickers[_CORNER_STICKERS], stickers[_HOME_CENTERS]))


def canonical_key(skewb: Skewb) -> tuple:
    """Orientation-independent key: the smallest sticker tuple over all 24 orientations.

    Two states share a key iff one is a whole-puzzle rotation of the other.
    Colors must be mutually orderable (e.g. all strings).
    """
    stickers = skewb.get_stickers()
    return min(tuple(stickers[perm]) for perm in ORIENTATION_PERMUTATIONS)
