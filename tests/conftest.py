"""Shared fixtures: isolate settings and the JSON store per test."""

from __future__ import annotations

from pathlib import Path

import pytest

from beerstock.infrastructure.config import get_settings


@pytest.fixture
def data_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the application at a fresh JSON store under tmp_path."""
    path = tmp_path / "beers.json"
    monkeypatch.setenv("BEERSTOCK_DATA_FILE", str(path))
    monkeypatch.setenv("LOG_LEVEL", "CRITICAL")
    get_settings.cache_clear()
    yield path
    get_settings.cache_clear()
