"""Shared fixtures for routegen tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def petstore_yaml() -> Path:
    return FIXTURES_DIR / "petstore.yaml"


@pytest.fixture
def petstore_json() -> Path:
    return FIXTURES_DIR / "petstore.json"


@pytest.fixture
def pets_spec() -> dict[str, Any]:
    """The two-path document used throughout the generated-code tests."""
    return {
        "paths": {
            "/pets/{petId}": {"get": {}, "post": {}},
            "/health": {"get": {}},
        }
    }
