"""Party API Routes

Read-only routes for parties and their invoices.
"""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.use_cases.invoicing.dtos import PartyResponseDTO, InvoiceResponseDTO
from src.app.use_cases.invoicing import ListParties, ListPartyInvoices
from src.adapter.repositories import (
    SqlAlchemyPartyRepository,
    SqlAlchemyInvoiceRepository,
    SqlAlchemyInvoiceItemRepository,
)
from src.depends import get_session
from src.api.error import ClientError

router = APIRouter(prefix="/parties", tags=["Parties"])


@router.get(
    "",
    response_model=List[PartyResponseDTO],
    status_code=status.HTTP_200_OK,
)
async def list_parties(session: AsyncSession = Depends(get_session)):
    """
    List all parties with their running balance.

    **Returns:**
    - 200: List of parties (possibly empty)
    """
    use_case = ListParties(SqlAlchemyPartyRepository(session))
    result = await use_case.execute()

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get(
    "/{party_id}/invoices",
    response_model=List[InvoiceResponseDTO],
    status_code=status.HTTP_200_OK,
    responses={
        404: {
            "description": "Party not found",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "PARTY_NOT_FOUND",
                            "message": "Party with ID 7 not found"
                        }
                    }
                }
            }
        }
    }
)
async def list_party_invoices(
    party_id: int,
    session: AsyncSession = Depends(get_session)
):
    """
    List the invoices billed against one party.

    **Path parameters:**
    - `party_id` (required): Party ID

    **Returns:**
    - 200: Invoices of the party (possibly empty)
    - 404: Party not found
    """
    use_case = ListPartyInvoices(
        SqlAlchemyPartyRepository(session),
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceItemRepository(session),
    )
    result = await use_case.execute(party_id)

    if result.is_err():
        if result.error.code == "PARTY_NOT_FOUND":
            raise ClientError(result.error, status_code=status.HTTP_404_NOT_FOUND)
        raise ClientError(result.error)

    return result.value
