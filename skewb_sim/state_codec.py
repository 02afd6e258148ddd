"""Errors, state validation and codec helpers."""

from __future__ import annotations

from typing import Any

import numpy as np

from .actions import CENTER_OFFSET, CORNER_SLOTS, FACE_ORDER, STATE_SIZE, STICKERS_PER_CORNER


class SkewbError(ValueError):
    """Base class for Skewb simulator errors."""


class UnsupportedMoveError(SkewbError):
    """Raised when a move token is not part of the active notation."""

    def __init__(self, move: str, notation: str, vocabulary: tuple[str, ...]):
        self.move = move
        self.notation = notation
        self.vocabulary = tuple(vocabulary)
        allowed = ", ".join(f'"{name}"' for name in self.vocabulary)
        super().__init__(f"{move!r} {notation} move is not supported; valid types are: {allowed}")


class ColorNotFoundError(SkewbError):
    """Raised when a color is on none of the six centers."""

    def __init__(self, color: Any):
        self.color = color
        super().__init__(f"{color!r} color is not part of Skewb")


class StateValidationError(SkewbError):
    """Raised when an input state or slot name is invalid."""


def validate_stickers(stickers: list | np.ndarray) -> np.ndarray:
    """Validate a flat sticker sequence and return a fresh object array (length 30)."""
    arr = np.empty(STATE_SIZE, dtype=object)
    values = list(stickers)
    if len(values) != STATE_SIZE:
        raise StateValidationError(f"State must have {STATE_SIZE} stickers, got {len(values)}")
    if any(v is None for v in values):
        raise StateValidationError("State contains empty stickers")
    for i, value in enumerate(values):
        arr[i] = value
    return arr


def stickers_to_payload(stickers: np.ndarray) -> dict[str, Any]:
    corners = {
        slot: list(stickers[i * STICKERS_PER_CORNER : (i + 1) * STICKERS_PER_CORNER])
        for i, slot in enumerate(CORNER_SLOTS)
    }
    centers = {face: stickers[CENTER_OFFSET + j] for j, face in enumerate(FACE_ORDER)}
    return {"corners": corners, "centers": centers}


def payload_to_stickers(payload: dict[str, Any]) -> np.ndarray:
    """Inverse of :func:`stickers_to_payload`."""
    if not isinstance(payload, dict):
        raise StateValidationError("State payload must be an object")
    corners = payload.get("corners")
    centers = payload.get("centers")
    if not isinstance(corners, dict) or not isinstance(centers, dict):
        raise StateValidationError("State payload needs 'corners' and 'centers' objects")

    values: list[Any] = []
    for slot in CORNER_SLOTS:
        triple = corners.get(slot)
        if not isinstance(triple, (list, tuple)) or len(triple) != STICKERS_PER_CORNER:
            raise StateValidationError(f"Corner {slot} must be a list of 3 colors")
        values.extend(triple)
    for face in FACE_ORDER:
        if face not in centers:
            raise StateValidationError(f"Missing center color for face {face}")
        values.append(centers[face])
    return validate_stickers(values)
