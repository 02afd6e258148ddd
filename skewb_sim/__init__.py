"""Skewb simulator package."""

from .engine import Skewb
from .equivalence import equal, exact_equal, is_solved
from .mirror import full_mirror, one_layer_mirror
from .notation import reverse_moves
from .state_codec import ColorNotFoundError, SkewbError, StateValidationError, UnsupportedMoveError

__all__ = [
    "Skewb",
    "equal",
    "exact_equal",
    "is_solved",
    "full_mirror",
    "one_layer_mirror",
    "reverse_moves",
    "ColorNotFoundError",
    "SkewbError",
    "StateValidationError",
    "UnsupportedMoveError",
]
