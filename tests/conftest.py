"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chess_zobrist.core.zobrist import ConstantTable, polyglot_table
from chess_zobrist.hasher import PositionHasher


@pytest.fixture(scope="session")
def table() -> ConstantTable:
    """The packaged Polyglot constant table."""
    return polyglot_table()


@pytest.fixture
def hasher(table: ConstantTable) -> PositionHasher:
    """A fresh hasher over the Polyglot table."""
    return PositionHasher(table)
