"""Helpers for locating packaged data files."""

from __future__ import annotations

from pathlib import Path

_PACKAGE_ASSETS_DIR = Path(__file__).resolve().parent / "assets"

POLYGLOT_TABLE_ASSET = "polyglot_random64.txt"


def assets_dir() -> Path:
    """Return the directory holding the packaged data files."""
    return _PACKAGE_ASSETS_DIR


def asset_path(*parts: str) -> Path:
    """Build an absolute path inside the packaged assets directory."""
    return assets_dir().joinpath(*parts)
