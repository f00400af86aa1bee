"""Tests for the chess-zobrist command line."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from chess_zobrist.app import (
    EXIT_BAD_TABLE,
    EXIT_INVALID_POSITION,
    EXIT_OK,
    main,
    run,
)
from chess_zobrist.core.notation import STARTING_FEN

EMPTY_BOARD = "8/8/8/8/8/8/8/8 w - - 0 1"


class TestRun:
    def test_hashes_arguments(self) -> None:
        out = io.StringIO()
        status = run([STARTING_FEN, EMPTY_BOARD], stdout=out)
        assert status == EXIT_OK
        assert out.getvalue().splitlines() == [
            f"463b96181691fc9c  {STARTING_FEN}",
            f"f8d626aaaf278509  {EMPTY_BOARD}",
        ]

    def test_reads_stdin_when_no_arguments(self) -> None:
        out = io.StringIO()
        stdin = io.StringIO(f"{STARTING_FEN}\n\n  {EMPTY_BOARD}  \n")
        status = run([], stdin=stdin, stdout=out)
        assert status == EXIT_OK
        assert [line.split()[0] for line in out.getvalue().splitlines()] == [
            "463b96181691fc9c",
            "f8d626aaaf278509",
        ]

    def test_invalid_position_sets_status(self) -> None:
        out = io.StringIO()
        status = run(["8/8/8/8/8/8/8 w - - 0 1", STARTING_FEN], stdout=out)
        assert status == EXIT_INVALID_POSITION
        lines = out.getvalue().splitlines()
        assert lines[0].startswith("Wrong position  ")
        assert lines[1].startswith("463b96181691fc9c")

    def test_custom_table(self, tmp_path: Path) -> None:
        path = tmp_path / "table.txt"
        path.write_text("\n".join(f"{i:016x}" for i in range(781)), encoding="ascii")
        out = io.StringIO()
        assert run(["--table", str(path), EMPTY_BOARD], stdout=out) == EXIT_OK
        # Only the side-to-move key (index 780) applies to an empty board.
        assert out.getvalue().startswith(f"{780:016x}  ")

    def test_missing_table(self, tmp_path: Path) -> None:
        out = io.StringIO()
        status = run(["--table", str(tmp_path / "nope.txt"), EMPTY_BOARD], stdout=out)
        assert status == EXIT_BAD_TABLE
        assert out.getvalue() == ""

    def test_malformed_table(self, tmp_path: Path) -> None:
        path = tmp_path / "table.txt"
        path.write_text("0123\n", encoding="ascii")
        assert run(["--table", str(path), EMPTY_BOARD], stdout=io.StringIO()) == (
            EXIT_BAD_TABLE
        )


class TestMain:
    def test_exit_code(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.argv", ["chess-zobrist", EMPTY_BOARD])
        with pytest.raises(SystemExit) as excinfo:
            main()
        assert excinfo.value.code == EXIT_OK
