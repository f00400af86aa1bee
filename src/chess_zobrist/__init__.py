"""Polyglot-compatible Zobrist hashing for chess positions in FEN.

Quick start::

    from chess_zobrist import PositionHasher, STARTING_FEN

    hasher = PositionHasher()
    print(hasher.hash_position(STARTING_FEN))  # 463b96181691fc9c
"""

from chess_zobrist.core import (
    STARTING_FEN,
    ConstantTable,
    ConstantTableError,
    ZobristHash,
    load_table,
    polyglot_table,
)
from chess_zobrist.hasher import (
    WRONG_POSITION,
    HashError,
    InvalidPositionError,
    PositionHasher,
    default_hasher,
    hash_position,
)

__all__ = [
    "STARTING_FEN",
    "WRONG_POSITION",
    "ConstantTable",
    "ConstantTableError",
    "HashError",
    "InvalidPositionError",
    "PositionHasher",
    "ZobristHash",
    "default_hasher",
    "hash_position",
    "load_table",
    "polyglot_table",
]
