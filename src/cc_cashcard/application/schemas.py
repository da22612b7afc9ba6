"""Pydantic request/response schemas for cc_cashcard, plus sort parsing.

Record JSON is {"id": int|null, "amount": number, "owner": string|null} in
both directions. On input only `amount` is honoured; the service overwrites
id and owner.
"""

from pydantic import BaseModel, Field

from src.cc_cashcard.domain.models import SORTABLE_FIELDS, CashCard, SortOrder
from src.cc_common.errors import InvalidSortError

_DIRECTIONS = {"asc": False, "desc": True}

DEFAULT_SORT: tuple[SortOrder, ...] = (SortOrder("amount"),)


class CashCardRequest(BaseModel):
    id: int | None = None
    amount: float = Field(..., allow_inf_nan=False, description="Any finite number")
    owner: str | None = None


class CashCardResponse(BaseModel):
    id: int | None
    amount: float
    owner: str | None

    @classmethod
    def from_domain(cls, card: CashCard) -> "CashCardResponse":
        return cls(id=card.id, amount=card.amount, owner=card.owner)


def parse_sort(values: list[str] | None) -> tuple[SortOrder, ...]:
    """Parse repeated `sort=field[,field...][,asc|desc]` query values.

    Empty or missing input yields DEFAULT_SORT.
    Raises InvalidSortError for unknown fields or an empty field list.
    """
    orders: list[SortOrder] = []
    for raw in values or []:
        tokens = [t.strip() for t in raw.split(",") if t.strip()]
        if not tokens:
            continue

        descending = False
        if tokens[-1].lower() in _DIRECTIONS:
            descending = _DIRECTIONS[tokens.pop().lower()]
        if not tokens:
            raise InvalidSortError(f"no field in {raw!r}")

        for name in tokens:
            if name not in SORTABLE_FIELDS:
                raise InvalidSortError(
                    f"unknown field {name!r}, expected one of {sorted(SORTABLE_FIELDS)}"
                )
            orders.append(SortOrder(field=name, descending=descending))

    return tuple(orders) or DEFAULT_SORT
