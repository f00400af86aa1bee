"""Polyglot-compatible Zobrist hashing of FEN positions.

The hash is the XOR of one table constant per piece on the board, plus the
castling, en passant and side-to-move constants that apply.  The en passant
file is only hashed when a pawn of the side that just moved past could be
captured, i.e. an enemy pawn stands right beside it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from functools import cache
from typing import Final

from chess_zobrist.core.enums import CastlingRights, Color, PieceType
from chess_zobrist.core.notation import (
    is_valid_fen_syntax,
    parse_en_passant,
    split_fields,
)
from chess_zobrist.core.piece import Piece
from chess_zobrist.core.types import file_of, make_square, rank_of, square_name
from chess_zobrist.core.zobrist import (
    EMPTY_HASH,
    ConstantTable,
    ZobristHash,
    polyglot_table,
)

_LOGGER = logging.getLogger(__name__)

_EMPTY_RUN_DIGITS: Final = "12345678"

_CASTLING_SYMBOLS: Final[dict[str, CastlingRights]] = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}

# Pawn colour -> (rank the pawn stands on, en passant target rank it captures to)
_EN_PASSANT_RANKS: Final[dict[Color, tuple[int, int]]] = {
    Color.BLACK: (3, 2),
    Color.WHITE: (4, 5),
}


class HashError(StrEnum):
    """Why a position could not be hashed."""

    INVALID_POSITION = "Wrong position"


WRONG_POSITION: Final[str] = HashError.INVALID_POSITION.value


class InvalidPositionError(ValueError):
    """Raised when a FEN string does not describe a hashable position."""


@dataclass(slots=True)
class _ParseState:
    """State for one hash computation; created fresh on every call."""

    error: bool = False
    ep_rank: int = -1
    ep_file: int = -1
    pawn_adjacent: bool = False


class PositionHasher:
    """Computes Polyglot Zobrist hashes for FEN strings.

    The hasher only holds a read-only :class:`ConstantTable`, so one
    instance can be shared freely between threads.
    """

    __slots__ = ("_table",)

    def __init__(self, table: ConstantTable | None = None) -> None:
        self._table = table if table is not None else polyglot_table()

    @property
    def table(self) -> ConstantTable:
        return self._table

    # ── Public API ───────────────────────────────────────────────────────

    def compute(self, fen: str) -> ZobristHash | HashError:
        """Hash *fen*, returning the hash or :attr:`HashError.INVALID_POSITION`."""
        if not is_valid_fen_syntax(fen):
            _LOGGER.debug("FEN rejected by syntax check: %r", fen)
            return HashError.INVALID_POSITION

        fields = split_fields(fen)
        state = _ParseState()
        key = EMPTY_HASH

        self._parse_en_passant(state, fields.en_passant)
        key = self._hash_pieces(state, key, fields.placement)

        if state.pawn_adjacent:
            key ^= self._table.en_passant(state.ep_file)

        key = self._hash_side(key, fields.side)
        key = self._hash_castling(key, fields.castling)

        if state.error:
            _LOGGER.debug("FEN rejected by field decoding: %r", fen)
            return HashError.INVALID_POSITION
        return key

    def hash_position(self, fen: str) -> str:
        """Hash *fen* as 16 lowercase hex digits, or ``"Wrong position"``."""
        result = self.compute(fen)
        if isinstance(result, HashError):
            return WRONG_POSITION
        return result.hex()

    def hash_key(self, fen: str) -> int:
        """Hash *fen* as an unsigned 64-bit integer (Polyglot book entry key)."""
        result = self.compute(fen)
        if isinstance(result, HashError):
            raise InvalidPositionError(f"Invalid FEN position: {fen!r}")
        return result.value

    # ── Stages ───────────────────────────────────────────────────────────

    def _parse_en_passant(self, state: _ParseState, field: str) -> None:
        try:
            target = parse_en_passant(field)
        except ValueError as exc:
            _LOGGER.debug("%s", exc)
            state.error = True
            return
        if target is None:
            return
        _LOGGER.debug("En passant target %s", square_name(target))
        state.ep_rank = rank_of(target)
        state.ep_file = file_of(target)

    def _hash_pieces(
        self, state: _ParseState, key: ZobristHash, placement: str
    ) -> ZobristHash:
        """XOR in one key per piece, ranks listed from 8 down to 1.

        A rank that does not add up to eight files marks the position
        invalid but decoding carries on; an unknown character stops it.
        """
        ranks = placement.split("/")
        if len(ranks) != 8:
            state.error = True
            return key

        for rank_idx, rank_text in enumerate(ranks):
            rank = 7 - rank_idx
            file = 0
            for ch in rank_text:
                if ch in _EMPTY_RUN_DIGITS:
                    file += int(ch)
                    continue
                try:
                    piece = Piece.from_char(ch)
                except ValueError:
                    state.error = True
                    return key
                if file >= 8:
                    state.error = True
                else:
                    key ^= self._table.piece(piece, make_square(file, rank))
                    if piece.piece_type == PieceType.PAWN and _can_capture_en_passant(
                        state, piece.color, rank, file
                    ):
                        state.pawn_adjacent = True
                file += 1
            if file != 8:
                state.error = True
        return key

    def _hash_side(self, key: ZobristHash, side: str) -> ZobristHash:
        return key ^ self._table.side_to_move() if side == "w" else key

    def _hash_castling(self, key: ZobristHash, castling: str) -> ZobristHash:
        if castling == "-":
            return key
        for symbol, right in _CASTLING_SYMBOLS.items():
            if symbol in castling:
                key ^= self._table.castling(right)
        return key


def _can_capture_en_passant(
    state: _ParseState, color: Color, rank: int, file: int
) -> bool:
    pawn_rank, target_rank = _EN_PASSANT_RANKS[color]
    return (
        state.ep_rank == target_rank
        and rank == pawn_rank
        and abs(file - state.ep_file) == 1
    )


@cache
def default_hasher() -> PositionHasher:
    """Shared hasher over the standard Polyglot table."""
    return PositionHasher()


def hash_position(fen: str) -> str:
    """Hash *fen* with the standard Polyglot table."""
    return default_hasher().hash_position(fen)
