"""Core Skewb state and move engine."""

from __future__ import annotations

from typing import Any

import numpy as np

from . import equivalence, mirror
from .actions import (
    CENTER_DOWN_ROTATIONS,
    CORNER_INDEX,
    CORNER_SLOTS,
    DEFAULT_COLORS,
    FACE_ORDER,
    NOTATIONS,
    STICKERS_PER_CORNER,
    center_sticker,
    solved_stickers,
)
from .notation import split_moves
from .state_codec import (
    ColorNotFoundError,
    StateValidationError,
    UnsupportedMoveError,
    stickers_to_payload,
    validate_stickers,
)


class Skewb:
    """Skewb puzzle: 8 corner slots holding color triples and 6 center slots.

    Slots never move; moves permute which stickers occupy them. The state is a
    plain mutable value owned by the caller. Comparison helpers work on copies
    of their arguments and never change them.
    """

    def __init__(
        self,
        up: Any = DEFAULT_COLORS[0],
        front: Any = DEFAULT_COLORS[1],
        right: Any = DEFAULT_COLORS[2],
        back: Any = DEFAULT_COLORS[3],
        left: Any = DEFAULT_COLORS[4],
        down: Any = DEFAULT_COLORS[5],
    ):
        self.colors = (up, front, right, back, left, down)
        self._stickers = solved_stickers(self.colors)
        self.step_count = 0
        self.history: list[str] = []

    @classmethod
    def from_stickers(cls, stickers: list | np.ndarray, colors: tuple | None = None) -> "Skewb":
        """Build a state from a flat sticker array; ``colors`` defaults to its centers."""
        arr = validate_stickers(stickers)
        if colors is None:
            colors = tuple(arr[center_sticker(face)] for face in FACE_ORDER)
        skewb = cls(*colors)
        skewb._stickers = arr
        return skewb

    def copy(self, keep_history: bool = True) -> "Skewb":
        """Independent copy; with ``keep_history=False`` the copy starts with an empty history."""
        other = type(self)(*self.colors)
        other._stickers = self._stickers.copy()
        if keep_history:
            other.step_count = self.step_count
            other.history = list(self.history)
        return other

    def reset(self) -> None:
        """Return to the solved state of the construction colors."""
        self._stickers = solved_stickers(self.colors)
        self.step_count = 0
        self.history = []

    def get_stickers(self) -> np.ndarray:
        """Return a copy of the flat sticker array (8 corners x 3, then 6 centers)."""
        return self._stickers.copy()

    def corner_colors(self, slot: str) -> tuple[Any, Any, Any]:
        if slot not in CORNER_INDEX:
            raise StateValidationError(f"Unknown corner slot {slot!r}; valid slots are {', '.join(CORNER_SLOTS)}")
        start = CORNER_INDEX[slot] * STICKERS_PER_CORNER
        return tuple(self._stickers[start : start + STICKERS_PER_CORNER])

    def center_color(self, face: str) -> Any:
        if face not in FACE_ORDER:
            raise StateValidationError(f"Unknown center {face!r}; valid centers are {', '.join(FACE_ORDER)}")
        return self._stickers[center_sticker(face)]

    def corners(self) -> dict[str, tuple[Any, Any, Any]]:
        return {slot: self.corner_colors(slot) for slot in CORNER_SLOTS}

    def centers(self) -> dict[str, Any]:
        return {face: self.center_color(face) for face in FACE_ORDER}

    def apply_moves(self, moves: str, notation: str = "wca") -> None:
        """Apply whitespace-separated tokens in order.

        Application stops at the first unsupported token with
        ``UnsupportedMoveError``; tokens before it stay applied.
        """
        if notation not in NOTATIONS:
            raise StateValidationError(f"Unknown notation {notation!r}; expected one of {', '.join(NOTATIONS)}")
        names, perms = NOTATIONS[notation]
        for token in split_moves(moves):
            perm = perms.get(token)
            if perm is None:
                raise UnsupportedMoveError(token, notation, names)
            self._stickers = self._stickers[perm]
            self.step_count += 1
            self.history.append(token)

    def apply_wca_moves(self, moves: str) -> None:
        self.apply_moves(moves, notation="wca")

    def apply_rubiskewb_moves(self, moves: str) -> None:
        self.apply_moves(moves, notation="rubiskewb")

    def center_down(self, color: Any) -> None:
        """Rotate the whole puzzle so the center holding ``color`` is at the bottom."""
        for face, rotation in CENTER_DOWN_ROTATIONS:
            if self.center_color(face) == color:
                self.apply_wca_moves(rotation)
                return
        raise ColorNotFoundError(color)

    def exact_equal(self, other: "Skewb") -> bool:
        return equivalence.exact_equal(self, other)

    def equal(self, other: "Skewb") -> bool:
        return equivalence.equal(self, other)

    def is_solved(self) -> bool:
        return equivalence.is_solved(self)

    def one_layer_mirror(self, other: "Skewb", layer_color: Any) -> bool:
        return mirror.one_layer_mirror(self, other, layer_color)

    def full_mirror(self, other: "Skewb") -> bool:
        return mirror.full_mirror(self, other)

    def draw(self, file_name: str):
        from .render import draw

        return draw(self, file_name)

    def state_payload(self) -> dict[str, Any]:
        payload = stickers_to_payload(self._stickers)
        payload["step_count"] = self.step_count
        payload["solved"] = equivalence.is_solved(self)
        return payload

    def __repr__(self) -> str:
        return f"Skewb(step_count={self.step_count}, history={' '.join(self.history)!r})"
