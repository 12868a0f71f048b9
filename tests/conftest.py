"""Shared pytest fixtures for test modules."""

import pytest

from tests.fakes.shaper import FakeShaper


@pytest.fixture
def shaper() -> FakeShaper:
    return FakeShaper()
