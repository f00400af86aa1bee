"""Tests for FEN syntax checks and field decoding."""

import pytest

from chess_zobrist.core.notation import (
    STARTING_FEN,
    FenFields,
    is_valid_fen_syntax,
    parse_en_passant,
    split_fields,
)
from chess_zobrist.core.types import parse_square


class TestFenSyntax:
    @pytest.mark.parametrize(
        "fen",
        [
            STARTING_FEN,
            "8/8/8/8/8/8/8/8 w - - 0 1",
            "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w qkQK - 12 345",
            "4k3/8/8/8/8/8/8/4K3 b Kq - 0 1",
        ],
    )
    def test_valid(self, fen: str) -> None:
        assert is_valid_fen_syntax(fen)
        assert len(split_fields(fen)) == 6

    @pytest.mark.parametrize(
        "fen",
        [
            "",
            "invalid",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq -",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP w KQkq - 0 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR x KQkq - 0 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkx - 0 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KK - 0 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w K- - 0 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq e99 0 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - a 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR  w KQkq - 0 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1 ",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1\n",
            "rnbqkbnr/ppppxppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1",
            "rnbqkbnr/pppppppp/9/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1",
            "rnbqkbnr/pppppppp/0/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1",
        ],
    )
    def test_invalid(self, fen: str) -> None:
        assert not is_valid_fen_syntax(fen)

    def test_rank_width_not_checked(self) -> None:
        # Widths are the board decoder's job.
        assert is_valid_fen_syntax(
            "rnbqkbnr/ppppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
        )


class TestSplitFields:
    def test_starting_fields(self) -> None:
        fields = split_fields(STARTING_FEN)
        assert fields == FenFields(
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR", "w", "KQkq", "-", "0", "1"
        )
        assert fields.castling == "KQkq"
        assert fields.en_passant == "-"

    def test_missing_fields_raises(self) -> None:
        with pytest.raises(ValueError, match="need 6 fields"):
            split_fields("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR")

    def test_empty_field_raises(self) -> None:
        with pytest.raises(ValueError, match="need 6 fields"):
            split_fields("8/8/8/8/8/8/8/8 w  - 0 1")


class TestParseEnPassant:
    def test_none(self) -> None:
        assert parse_en_passant("-") is None

    def test_square(self) -> None:
        assert parse_en_passant("e3") == parse_square("e3")
        assert parse_en_passant("d6") == parse_square("d6")

    @pytest.mark.parametrize("field", ["e", "e9", "-e", "33", "--", "e33"])
    def test_invalid_raises(self, field: str) -> None:
        with pytest.raises(ValueError, match="en-passant"):
            parse_en_passant(field)
