"""Pytest configuration and fixtures."""

import pytest

from tagvalidator import ValidationEngine


@pytest.fixture
def engine() -> ValidationEngine:
    """Fresh engine with an empty rule-table cache."""
    return ValidationEngine()
