"""CashCardRepository: concrete implementation of CashCardRepositoryProtocol.

All queries use raw text() SQL (no ORM).
Single-row writes match id AND owner inside one statement and report the
match through RETURNING, so ownership is never checked apart from the write.
"""

from sqlalchemy import TextClause, text
from sqlalchemy.ext.asyncio import AsyncSession

from src.cc_cashcard.domain.models import SORTABLE_FIELDS, CashCard, PageRequest

# ---------------------------------------------------------------------------
# SQL
# ---------------------------------------------------------------------------

_FIND_BY_ID_AND_OWNER_SQL = text("""
    SELECT id, amount, owner
    FROM cash_cards
    WHERE id = :id AND owner = :owner
""")

_INSERT_SQL = text("""
    INSERT INTO cash_cards (amount, owner)
    VALUES (:amount, :owner)
    RETURNING id, amount, owner
""")

_UPDATE_AMOUNT_SQL = text("""
    UPDATE cash_cards
    SET amount = :amount
    WHERE id = :id AND owner = :owner
    RETURNING id
""")

_DELETE_SQL = text("""
    DELETE FROM cash_cards
    WHERE id = :id AND owner = :owner
    RETURNING id
""")

# ORDER BY cannot be bound as a parameter; column names come from this
# whitelist only, never from request input.
_SORT_COLUMNS: dict[str, str] = {name: name for name in SORTABLE_FIELDS}


def _find_by_owner_sql(page_request: PageRequest) -> TextClause:
    terms = [
        f"{_SORT_COLUMNS[order.field]} {'DESC' if order.descending else 'ASC'}"
        for order in page_request.sort
    ]
    # id last makes the order total
    terms.append("id ASC")
    return text(f"""
        SELECT id, amount, owner
        FROM cash_cards
        WHERE owner = :owner
        ORDER BY {", ".join(terms)}
        LIMIT :limit OFFSET :offset
    """)


# ---------------------------------------------------------------------------
# Row mappers
# ---------------------------------------------------------------------------

def _row_to_cash_card(row: object) -> CashCard:
    return CashCard(
        id=int(row.id),  # type: ignore[attr-defined]
        amount=float(row.amount),  # type: ignore[attr-defined]
        owner=row.owner,  # type: ignore[attr-defined]
    )


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------

class CashCardRepository:
    """Concrete repository. Writes rely on the caller's transaction."""

    async def find_by_id_and_owner(
        self, db: AsyncSession, cash_card_id: int, owner: str
    ) -> CashCard | None:
        result = await db.execute(
            _FIND_BY_ID_AND_OWNER_SQL, {"id": cash_card_id, "owner": owner}
        )
        row = result.fetchone()
        return _row_to_cash_card(row) if row else None

    async def find_by_owner(
        self, db: AsyncSession, owner: str, page_request: PageRequest
    ) -> list[CashCard]:
        unknown = [o.field for o in page_request.sort if o.field not in _SORT_COLUMNS]
        if unknown:
            raise ValueError(f"Unsortable cash card fields: {unknown}")

        result = await db.execute(
            _find_by_owner_sql(page_request),
            {
                "owner": owner,
                "limit": page_request.size,
                "offset": page_request.offset,
            },
        )
        return [_row_to_cash_card(row) for row in result.fetchall()]

    async def save_new(self, db: AsyncSession, amount: float, owner: str) -> CashCard:
        result = await db.execute(_INSERT_SQL, {"amount": amount, "owner": owner})
        return _row_to_cash_card(result.fetchone())

    async def update_amount(
        self, db: AsyncSession, cash_card_id: int, owner: str, amount: float
    ) -> bool:
        result = await db.execute(
            _UPDATE_AMOUNT_SQL, {"id": cash_card_id, "owner": owner, "amount": amount}
        )
        return result.fetchone() is not None

    async def delete_by_id_and_owner(
        self, db: AsyncSession, cash_card_id: int, owner: str
    ) -> bool:
        result = await db.execute(_DELETE_SQL, {"id": cash_card_id, "owner": owner})
        return result.fetchone() is not None
