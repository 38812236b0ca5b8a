"""Shared pytest fixtures for the dotconf test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from dotconf import Config, parse_json_file


@pytest.fixture
def fixtures_dir() -> Path:
    """Returns the absolute path to the tests/fixtures/ directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_data() -> dict[str, Any]:
    """The tree stored in fixtures/default.conf, as Python data."""
    return {
        "debug": True,
        "env": None,
        "age": 26,
        "name": "John",
        "height": 5.10,
        "hobbies": ["skateboard", "snowboard", "go", "music"],
        "clothes": {"pants": {"waist": 32.0, "height": 32.0}},
        "nested": {"1": {"2": {"3": [{"b": "c"}]}}},
    }


@pytest.fixture
def config(sample_data: dict[str, Any]) -> Config:
    return Config(sample_data)


@pytest.fixture
def default_config(fixtures_dir: Path) -> Config:
    return parse_json_file(fixtures_dir / "default.conf")


@pytest.fixture
def production_config(fixtures_dir: Path) -> Config:
    return parse_json_file(fixtures_dir / "production.conf")
