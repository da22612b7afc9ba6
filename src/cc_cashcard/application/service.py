"""CashCardApplicationService: ownership rules on top of the repository.

The caller (router) passes the db session and opens the transaction for
writes via `async with db.begin()`. Every operation takes the caller's
username as `owner`; records of other owners are reported exactly like
missing ones.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from config.settings import settings
from src.cc_cashcard.application.schemas import CashCardRequest, parse_sort
from src.cc_cashcard.domain.models import CashCard, PageRequest
from src.cc_cashcard.domain.repository import CashCardRepositoryProtocol
from src.cc_cashcard.infrastructure.persistence import CashCardRepository
from src.cc_common.errors import CashCardNotFoundError

logger = logging.getLogger(__name__)


class CashCardApplicationService:
    def __init__(self, repo: CashCardRepositoryProtocol | None = None) -> None:
        self._repo: CashCardRepositoryProtocol = repo or CashCardRepository()

    async def get_cash_card(self, db: AsyncSession, cash_card_id: int, owner: str) -> CashCard:
        card = await self._repo.find_by_id_and_owner(db, cash_card_id, owner)
        if card is None:
            raise CashCardNotFoundError(cash_card_id)
        return card

    async def create_cash_card(
        self, db: AsyncSession, body: CashCardRequest, owner: str
    ) -> CashCard:
        # body.id and body.owner are ignored on purpose
        card = await self._repo.save_new(db, body.amount, owner)
        logger.info("Cash card created: id=%s owner=%s", card.id, owner)
        return card

    async def list_cash_cards(
        self,
        db: AsyncSession,
        owner: str,
        page: int,
        size: int,
        sort: list[str] | None,
    ) -> list[CashCard]:
        page_request = PageRequest.clamped(
            page,
            size,
            parse_sort(sort),
            default_size=settings.CASHCARDS_DEFAULT_PAGE_SIZE,
            max_size=settings.CASHCARDS_MAX_PAGE_SIZE,
        )
        return await self._repo.find_by_owner(db, owner, page_request)

    async def update_cash_card(
        self, db: AsyncSession, cash_card_id: int, body: CashCardRequest, owner: str
    ) -> None:
        updated = await self._repo.update_amount(db, cash_card_id, owner, body.amount)
        if not updated:
            raise CashCardNotFoundError(cash_card_id)
        logger.info("Cash card updated: id=%s owner=%s", cash_card_id, owner)

    async def delete_cash_card(self, db: AsyncSession, cash_card_id: int, owner: str) -> None:
        deleted = await self._repo.delete_by_id_and_owner(db, cash_card_id, owner)
        if not deleted:
            raise CashCardNotFoundError(cash_card_id)
        logger.info("Cash card deleted: id=%s owner=%s", cash_card_id, owner)
