"""Shared test fixtures for unit tests."""

import pytest

from tests.unit.process_fixtures import SCENARIO_A, FakePlatform


@pytest.fixture
def platform():
    """Fake Unix-like platform holding the four-process scenario tree."""
    return FakePlatform(SCENARIO_A)
