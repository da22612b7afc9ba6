# src/cc_cashcard/domain/repository.py
"""Repository Protocol, for dependency inversion for testability.

Every lookup and mutation is scoped by (id, owner) in a single statement;
there is no unscoped get/update/delete.
"""

from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.cc_cashcard.domain.models import CashCard, PageRequest


class CashCardRepositoryProtocol(Protocol):
    async def find_by_id_and_owner(
        self, db: AsyncSession, cash_card_id: int, owner: str
    ) -> CashCard | None: ...

    async def find_by_owner(
        self, db: AsyncSession, owner: str, page_request: PageRequest
    ) -> list[CashCard]: ...

    async def save_new(self, db: AsyncSession, amount: float, owner: str) -> CashCard: ...

    async def update_amount(
        self, db: AsyncSession, cash_card_id: int, owner: str, amount: float
    ) -> bool: ...

    async def delete_by_id_and_owner(
        self, db: AsyncSession, cash_card_id: int, owner: str
    ) -> bool: ...
