"""Shared test fixtures for molgraph."""

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def ch4_xyz_path():
    """Return the path to the CH4 .xyz fixture file."""
    return FIXTURES_DIR / "ch4.xyz"


@pytest.fixture
def h2o_xyz_path():
    """Return the path to the H2O .xyz fixture file."""
    return FIXTURES_DIR / "h2o.xyz"
