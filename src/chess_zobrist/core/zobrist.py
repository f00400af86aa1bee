"""Polyglot Zobrist keys: fixed-width hash values and the 781-entry table.

Table layout (indices are part of the Polyglot book format)::

    0   – 767   piece on square: kind * 64 + rank * 8 + file
    768 – 771   castling rights K, Q, k, q
    772 – 779   en passant file a – h
    780         white to move
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from functools import cache
from pathlib import Path
from typing import Final, overload

from chess_zobrist.core.enums import CastlingRights
from chess_zobrist.core.piece import Piece
from chess_zobrist.core.types import Square, is_valid_square
from chess_zobrist.runtime_assets import POLYGLOT_TABLE_ASSET, asset_path

_LOGGER = logging.getLogger(__name__)

HASH_BYTES: Final = 8
_MASK_64: Final = 0xFFFFFFFFFFFFFFFF

CASTLING_OFFSET: Final = 768
EN_PASSANT_OFFSET: Final = 772
SIDE_TO_MOVE_INDEX: Final = 780
TABLE_SIZE: Final = 781

_CASTLING_ORDER: Final = (
    CastlingRights.WHITE_KINGSIDE,
    CastlingRights.WHITE_QUEENSIDE,
    CastlingRights.BLACK_KINGSIDE,
    CastlingRights.BLACK_QUEENSIDE,
)

_HEX_RE: Final = re.compile(r"(?:[0-9A-Fa-f]{2})*")


class ConstantTableError(ValueError):
    """Raised when a constant table cannot be built from its source data."""


def decode_hex(text: str) -> bytes:
    """Decode two hex digits per byte, in order; either case is accepted."""
    if _HEX_RE.fullmatch(text) is None:
        raise ValueError(f"Invalid hex string: {text!r}")
    return bytes.fromhex(text)


def encode_hex(data: bytes) -> str:
    """Encode bytes as lowercase hex, two digits per byte."""
    return data.hex()


@dataclass(frozen=True, slots=True)
class ZobristHash:
    """Immutable 64-bit hash value.

    Combining two values with ``^`` is the same as XOR-ing their 8-byte
    big-endian encodings byte by byte.
    """

    value: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.value <= _MASK_64:
            raise ValueError(f"Hash value out of 64-bit range: {self.value!r}")

    @classmethod
    def from_bytes(cls, data: bytes) -> ZobristHash:
        """Build from exactly eight big-endian bytes."""
        if len(data) != HASH_BYTES:
            raise ValueError(f"Hash must be {HASH_BYTES} bytes, got {len(data)}")
        return cls(int.from_bytes(data, "big"))

    @classmethod
    def from_hex(cls, text: str) -> ZobristHash:
        """Build from a 16-digit hex string, e.g. ``"463b96181691fc9c"``."""
        return cls.from_bytes(decode_hex(text))

    def to_bytes(self) -> bytes:
        return self.value.to_bytes(HASH_BYTES, "big")

    def hex(self) -> str:
        """Lowercase 16-digit hex encoding."""
        return encode_hex(self.to_bytes())

    def __xor__(self, other: ZobristHash) -> ZobristHash:
        if not isinstance(other, ZobristHash):
            return NotImplemented
        return ZobristHash(self.value ^ other.value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return self.hex()


EMPTY_HASH: Final = ZobristHash()


class ConstantTable(Sequence[ZobristHash]):
    """Read-only sequence of the 781 Polyglot random constants."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[ZobristHash]) -> None:
        self._entries: tuple[ZobristHash, ...] = tuple(entries)
        if len(self._entries) != TABLE_SIZE:
            raise ConstantTableError(
                f"Constant table needs {TABLE_SIZE} entries, got {len(self._entries)}"
            )

    @classmethod
    def from_hex_strings(cls, values: Iterable[str]) -> ConstantTable:
        """Build a table from 16-digit hex strings, in index order."""
        entries: list[ZobristHash] = []
        for index, text in enumerate(values):
            try:
                entries.append(ZobristHash.from_hex(text))
            except ValueError as exc:
                raise ConstantTableError(
                    f"Invalid constant at index {index}: {text!r}"
                ) from exc
        return cls(entries)

    # ── Sequence protocol ────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._entries)

    @overload
    def __getitem__(self, index: int) -> ZobristHash: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[ZobristHash, ...]: ...

    def __getitem__(
        self, index: int | slice
    ) -> ZobristHash | tuple[ZobristHash, ...]:
        return self._entries[index]

    def __iter__(self) -> Iterator[ZobristHash]:
        return iter(self._entries)

    # ── Polyglot lookups ─────────────────────────────────────────────────

    def piece(self, piece: Piece, sq: Square) -> ZobristHash:
        """Key for *piece* standing on *sq*."""
        if not is_valid_square(sq):
            raise IndexError(f"Square out of range: {sq!r}")
        return self._entries[piece.kind_index * 64 + sq]

    def castling(self, right: CastlingRights) -> ZobristHash:
        """Key for a single castling right."""
        try:
            offset = _CASTLING_ORDER.index(right)
        except ValueError:
            raise ValueError(f"Expected a single castling right: {right!r}") from None
        return self._entries[CASTLING_OFFSET + offset]

    def en_passant(self, file: int) -> ZobristHash:
        """Key for an en passant capture on *file* (0–7)."""
        if not 0 <= file < 8:
            raise IndexError(f"File out of range: {file!r}")
        return self._entries[EN_PASSANT_OFFSET + file]

    def side_to_move(self) -> ZobristHash:
        """Key XOR-ed in when white is to move."""
        return self._entries[SIDE_TO_MOVE_INDEX]


def _hex_lines(text: str) -> Iterator[str]:
    for line in text.splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            yield line


def load_table(path: str | Path) -> ConstantTable:
    """Load a table file: one hex constant per line, ``#`` lines ignored."""
    path = Path(path)
    _LOGGER.debug("Loading Zobrist constant table from %s", path)
    try:
        text = path.read_text(encoding="ascii")
    except UnicodeDecodeError as exc:
        raise ConstantTableError(f"Constant table is not ASCII text: {path}") from exc
    return ConstantTable.from_hex_strings(_hex_lines(text))


@cache
def polyglot_table() -> ConstantTable:
    """The standard Polyglot table shipped with the package, loaded once."""
    return load_table(asset_path(POLYGLOT_TABLE_ASSET))
