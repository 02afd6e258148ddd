"""Move-string helpers: tokenizing and reversing sequences."""

from __future__ import annotations


def split_moves(moves: str) -> list[str]:
    """Split a move sequence on whitespace; blank input yields no tokens."""
    return moves.split()


def join_moves(tokens) -> str:
    return " ".join(t for t in tokens if t)


def reverse_token(token: str) -> str:
    if token.endswith("'"):
        return token[:-1]
    if token.endswith("2"):
        return token
    return token + "'"


def reverse_moves(moves: str) -> str:
    """Return the sequence that undoes ``moves``.

    Tokens are taken in reverse order; a trailing ``'`` is stripped, a ``2``
    turn is kept as is, and any other token gets a ``'`` appended.
    """
    return join_moves(reverse_token(t) for t in reversed(split_moves(moves)))


def move_layer(token: str) -> str:
    """Layer a token turns: the token without its ``'``/``2`` suffix."""
    return token.rstrip("'2")


def same_layer(previous: str, token: str) -> bool:
    """True when ``token`` turns the same layer as the last token of ``previous``."""
    tokens = split_moves(previous)
    if not tokens:
        return False
    return move_layer(tokens[-1]) == move_layer(token)
