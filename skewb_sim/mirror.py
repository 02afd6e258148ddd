"""Mirror checks: layer patterns and whole-puzzle signatures independent of color values."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import numpy as np

from .actions import (
    CORNER_SLOTS,
    FACE_INDEX,
    FACE_ORDER,
    MIRROR_ROTATIONS,
    SIGNATURE_CELLS,
    SIGNATURE_SHAPE,
    SPIN_ROTATIONS,
)
from .notation import reverse_moves

if TYPE_CHECKING:
    from .engine import Skewb

LAYER_COLOR = 0
FIRST_COLOR = 1
SECOND_COLOR = 2
OTHER_COLOR = -1

# Codes of the reference corner, by position of the layer color in its triple.
_REFERENCE_CODES = (
    (LAYER_COLOR, FIRST_COLOR, SECOND_COLOR),
    (FIRST_COLOR, LAYER_COLOR, SECOND_COLOR),
    (FIRST_COLOR, SECOND_COLOR, LAYER_COLOR),
)


def layer_slots(skewb: Skewb, layer_color: Any) -> list[str]:
    """Corner slots of ``skewb`` holding ``layer_color`` on one of their stickers."""
    return [slot for slot in CORNER_SLOTS if layer_color in skewb.corner_colors(slot)]


def layer_pattern(corners: list[tuple], layer_color: Any) -> tuple[tuple[int, ...], ...] | None:
    """Relative color pattern of a layer's corners.

    The first corner is the reference: its stickers are coded by where the
    layer color sits in it. Every sticker of the other corners gets the code of
    the reference sticker with the same color, or ``OTHER_COLOR``. Returns
    ``None`` when the reference corner does not touch the layer.
    """
    if not corners:
        return ()
    reference = corners[0]
    if layer_color not in reference:
        return None

    codes = _REFERENCE_CODES[reference.index(layer_color)]
    by_color: dict[Any, int] = {}
    for color, code in reversed(list(zip(reference, codes))):
        by_color[color] = code

    pattern = [codes]
    for corner in corners[1:]:
        pattern.append(tuple(by_color.get(color, OTHER_COLOR) for color in corner))
    return tuple(pattern)


def _same_layer(a: Skewb, b: Skewb, layer_color: Any) -> bool:
    slots = layer_slots(a, layer_color)
    a_pattern = layer_pattern([a.corner_colors(slot) for slot in slots], layer_color)
    b_pattern = layer_pattern([b.corner_colors(slot) for slot in slots], layer_color)
    return a_pattern is not None and a_pattern == b_pattern


def one_layer_mirror(a: Skewb, b: Skewb, layer_color: Any) -> bool:
    """Whether the layer of ``a`` centered on ``layer_color`` matches ``b``'s up to spin.

    Both states are compared from copies brought to the same down face, so
    neither argument is changed. ``ColorNotFoundError`` propagates when the
    layer color (or ``a``'s resulting down color, for ``b``) is on no center.
    """
    a = a.copy(keep_history=False)
    other = b.copy(keep_history=False)
    a.center_down(layer_color)
    other.center_down(a.center_color("D"))

    if _same_layer(a, other, layer_color):
        return True

    for rotation in SPIN_ROTATIONS:
        other.apply_wca_moves(rotation)
        matched = _same_layer(a, other, layer_color)
        other.apply_wca_moves(reverse_moves(rotation))
        if matched:
            return True

    return False


def relative_signature(skewb: Skewb) -> np.ndarray:
    """Face-by-face table of which face each corner sticker's color belongs to.

    Row ``f`` starts with ``f`` itself, followed by the four corner stickers
    touching face ``f``. Colors are replaced by the index of the center that
    currently holds them (``-1`` when no center does), so the table does not
    depend on the actual color values.
    """
    face_of: dict[Any, int] = {}
    for face in reversed(FACE_ORDER):
        face_of[skewb.center_color(face)] = FACE_INDEX[face]

    signature = np.full(SIGNATURE_SHAPE, -1, dtype=np.int8)
    signature[:, 0] = np.arange(len(FACE_ORDER))
    for slot in CORNER_SLOTS:
        for color, (face, column) in zip(skewb.corner_colors(slot), SIGNATURE_CELLS[slot]):
            signature[FACE_INDEX[face], column] = face_of.get(color, -1)
    return signature


def full_mirror(a: Skewb, b: Skewb) -> bool:
    """Whether ``b`` equals ``a`` up to a whole-puzzle rotation and a consistent recoloring.

    ``a``'s signature is computed once; ``b``'s is recomputed on a working copy
    after each of the 24 rotations in ``MIRROR_ROTATIONS``, undoing each trial
    before the next. ``b`` itself is not changed.
    """
    target = relative_signature(a)
    other = b.copy(keep_history=False)

    for rotation in MIRROR_ROTATIONS:
        other.apply_wca_moves(rotation)
        matched = np.array_equal(target, relative_signature(other))
        other.apply_wca_moves(reverse_moves(rotation))
        if matched:
            return True

    return False
