"""cc_cashcard REST endpoints. Every route requires the CARD-OWNER role.

GET    /cashcards               — caller's cards, paged and sorted (default amount asc)
GET    /cashcards/{id}          — one card
POST   /cashcards               — create; 201 + Location, empty body
PUT    /cashcards/{id}          — replace amount; 204
DELETE /cashcards/{id}          — delete; 204
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from config.settings import settings
from src.cc_cashcard.application.schemas import CashCardRequest, CashCardResponse
from src.cc_cashcard.application.service import CashCardApplicationService
from src.cc_common.database import get_db_session
from src.cc_gateway.auth.dependencies import require_card_owner
from src.cc_gateway.auth.users import UserAccount

router = APIRouter(prefix="/cashcards", tags=["cashcards"])

_service = CashCardApplicationService()


def get_cash_card_service() -> CashCardApplicationService:
    return _service


CurrentOwner = Annotated[UserAccount, Depends(require_card_owner)]
Db = Annotated[AsyncSession, Depends(get_db_session)]
Service = Annotated[CashCardApplicationService, Depends(get_cash_card_service)]
# ids are BIGINT; anything outside int64 is a client error, not a driver failure
CashCardId = Annotated[int, Path(ge=-(2**63), le=2**63 - 1)]


@router.get("", response_model=list[CashCardResponse])
async def list_cash_cards(
    current_user: CurrentOwner,
    db: Db,
    service: Service,
    page: int = Query(0, description="Zero-based; negative values read as 0"),
    size: int = Query(
        settings.CASHCARDS_DEFAULT_PAGE_SIZE,
        description=f"Below 1 uses the default; capped at {settings.CASHCARDS_MAX_PAGE_SIZE}",
    ),
    sort: list[str] | None = Query(
        None, description="field[,asc|desc]; repeatable. Default: amount,asc"
    ),
) -> list[CashCardResponse]:
    cards = await service.list_cash_cards(db, current_user.username, page, size, sort)
    return [CashCardResponse.from_domain(c) for c in cards]


@router.get("/{requested_id}", response_model=CashCardResponse, name="get_cash_card")
async def get_cash_card(
    requested_id: CashCardId,
    current_user: CurrentOwner,
    db: Db,
    service: Service,
) -> CashCardResponse:
    card = await service.get_cash_card(db, requested_id, current_user.username)
    return CashCardResponse.from_domain(card)


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
async def create_cash_card(
    request: Request,
    body: CashCardRequest,
    current_user: CurrentOwner,
    db: Db,
    service: Service,
) -> Response:
    async with db.begin():
        card = await service.create_cash_card(db, body, current_user.username)

    location = request.url_for("get_cash_card", requested_id=str(card.id))
    return Response(
        status_code=status.HTTP_201_CREATED,
        headers={"Location": str(location)},
    )


@router.put("/{requested_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def put_cash_card(
    requested_id: CashCardId,
    body: CashCardRequest,
    current_user: CurrentOwner,
    db: Db,
    service: Service,
) -> Response:
    async with db.begin():
        await service.update_cash_card(db, requested_id, body, current_user.username)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{requested_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_cash_card(
    requested_id: CashCardId,
    current_user: CurrentOwner,
    db: Db,
    service: Service,
) -> Response:
    async with db.begin():
        await service.delete_cash_card(db, requested_id, current_user.username)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
