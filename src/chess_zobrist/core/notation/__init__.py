"""Notation package: FEN syntax checks and field decoding."""

from chess_zobrist.core.notation.fen import (
    STARTING_FEN,
    FenFields,
    is_valid_fen_syntax,
    parse_en_passant,
    split_fields,
)

__all__ = [
    "STARTING_FEN",
    "FenFields",
    "is_valid_fen_syntax",
    "parse_en_passant",
    "split_fields",
]
