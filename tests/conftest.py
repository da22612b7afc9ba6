"""Shared test fixtures: Basic-auth credentials of the demo accounts."""

import pytest


@pytest.fixture
def sarah() -> tuple[str, str]:
    """Card owner with seeded cards 99, 100, 101."""
    return ("sarah1", "abc123")


@pytest.fixture
def kumar() -> tuple[str, str]:
    """Card owner with seeded card 102."""
    return ("kumar2", "xyz789")


@pytest.fixture
def hank() -> tuple[str, str]:
    """Authenticated, but lacks the CARD-OWNER role."""
    return ("hank-owns-no-cards", "qrs456")
