"""FEN syntax validation and field decoding."""

from __future__ import annotations

import re
from typing import Final, NamedTuple

from chess_zobrist.core.types import Square, parse_square

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_FEN_RE: Final = re.compile(
    r"(?P<placement>(?:[pnbrqkPNBRQK1-8]+/){7}[pnbrqkPNBRQK1-8]+)"
    r" (?P<side>[wb])"
    r" (?P<castling>-|[KQkq]{1,4})"
    r" (?P<en_passant>[a-h1-8-]{1,2})"
    r" (?P<halfmove>[0-9]+)"
    r" (?P<fullmove>[0-9]+)"
)


class FenFields(NamedTuple):
    """The six space-separated FEN fields, as written."""

    placement: str
    side: str
    castling: str
    en_passant: str
    halfmove: str
    fullmove: str


def is_valid_fen_syntax(fen: str) -> bool:
    """Check *fen* against the six-field FEN grammar.

    Only the shape of each field is checked: rank widths and en passant
    coordinates are left to the decoder.
    """
    match = _FEN_RE.fullmatch(fen)
    if match is None:
        return False
    castling = match["castling"]
    return len(set(castling)) == len(castling)


def split_fields(fen: str) -> FenFields:
    """Split a FEN string into its six fields."""
    parts = fen.split(" ")
    if len(parts) != 6 or not all(parts):
        raise ValueError(f"Invalid FEN (need 6 fields): {fen!r}")
    return FenFields(*parts)


def parse_en_passant(field: str) -> Square | None:
    """Parse the en passant target field; ``"-"`` means no target."""
    if field == "-":
        return None
    try:
        return parse_square(field)
    except ValueError:
        raise ValueError(f"Invalid FEN en-passant square: {field!r}") from None
