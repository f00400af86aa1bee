"""Core domain layer: pure chess data with zero external dependencies.

Quick start::

    from chess_zobrist.core import STARTING_FEN, polyglot_table, split_fields

    table = polyglot_table()
    fields = split_fields(STARTING_FEN)
    print(table.side_to_move().hex())
"""

from chess_zobrist.core.enums import CastlingRights, Color, PieceType
from chess_zobrist.core.notation import (
    STARTING_FEN,
    FenFields,
    is_valid_fen_syntax,
    parse_en_passant,
    split_fields,
)
from chess_zobrist.core.piece import Piece
from chess_zobrist.core.types import (
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)
from chess_zobrist.core.zobrist import (
    EMPTY_HASH,
    TABLE_SIZE,
    ConstantTable,
    ConstantTableError,
    ZobristHash,
    decode_hex,
    encode_hex,
    load_table,
    polyglot_table,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "PieceType",
    # Types / helpers
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Piece",
    # Zobrist keys
    "EMPTY_HASH",
    "TABLE_SIZE",
    "ConstantTable",
    "ConstantTableError",
    "ZobristHash",
    "decode_hex",
    "encode_hex",
    "load_table",
    "polyglot_table",
    # Notation
    "STARTING_FEN",
    "FenFields",
    "is_valid_fen_syntax",
    "parse_en_passant",
    "split_fields",
]
