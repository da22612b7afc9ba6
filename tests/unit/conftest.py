"""Unit-test fixtures.

The HTTP tests run the real app, auth and service against an in-memory
repository that follows CashCardRepositoryProtocol, so no database is needed.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import replace

import pytest
from httpx import ASGITransport, AsyncClient

from src.cc_cashcard.api.router import get_cash_card_service
from src.cc_cashcard.application.service import CashCardApplicationService
from src.cc_cashcard.domain.models import CashCard, PageRequest
from src.cc_common.database import get_db_session
from src.main import app


class InMemoryCashCardRepository:
    """Dict-backed stand-in for CashCardRepository. Ignores the db argument."""

    def __init__(self, cards: list[CashCard] | None = None) -> None:
        self.cards: dict[int, CashCard] = {c.id: c for c in cards or []}
        self._next_id = max(self.cards, default=0) + 1

    async def find_by_id_and_owner(self, db, cash_card_id, owner):
        card = self.cards.get(cash_card_id)
        if card is None or card.owner != owner:
            return None
        return replace(card)

    async def find_by_owner(self, db, owner, page_request: PageRequest):
        rows = sorted(
            (c for c in self.cards.values() if c.owner == owner), key=lambda c: c.id
        )
        # stable sorts, least significant key first
        for order in reversed(page_request.sort):
            rows.sort(key=lambda c: getattr(c, order.field), reverse=order.descending)
        start = page_request.offset
        return [replace(c) for c in rows[start:start + page_request.size]]

    async def save_new(self, db, amount, owner):
        card = CashCard(id=self._next_id, amount=amount, owner=owner)
        self.cards[card.id] = card
        self._next_id += 1
        return replace(card)

    async def update_amount(self, db, cash_card_id, owner, amount):
        card = self.cards.get(cash_card_id)
        if card is None or card.owner != owner:
            return False
        card.amount = amount
        return True

    async def delete_by_id_and_owner(self, db, cash_card_id, owner):
        card = self.cards.get(cash_card_id)
        if card is None or card.owner != owner:
            return False
        del self.cards[cash_card_id]
        return True


def seed_cards() -> list[CashCard]:
    """Same rows as alembic/versions/002_seed_cash_cards.py."""
    return [
        CashCard(99, 123.45, "sarah1"),
        CashCard(100, 1.00, "sarah1"),
        CashCard(101, 150.00, "sarah1"),
        CashCard(102, 200.00, "kumar2"),
    ]


class _FakeSession:
    @asynccontextmanager
    async def begin(self) -> AsyncGenerator["_FakeSession", None]:
        yield self


async def _fake_db_session() -> AsyncGenerator[_FakeSession, None]:
    yield _FakeSession()


@pytest.fixture
def repo() -> InMemoryCashCardRepository:
    return InMemoryCashCardRepository(seed_cards())


@pytest.fixture
async def client(repo: InMemoryCashCardRepository) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client for the app, wired to the in-memory repository."""
    service = CashCardApplicationService(repo=repo)
    app.dependency_overrides[get_db_session] = _fake_db_session
    app.dependency_overrides[get_cash_card_service] = lambda: service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
