"""Invoice API Routes

FastAPI routes for creating, updating, deleting and reading invoices.
"""

from typing import List
from fastapi import APIRouter, Depends, status
from fastapi.responses import Response
from sqlmodel.ext.asyncio.session import AsyncSession

from libs.result import Error
from src.api.schemas.invoice_request import InvoiceRequestSchema, UpdateInvoiceRequestSchema
from src.app.use_cases.invoicing.dtos import (
    CreateInvoiceCommandDTO,
    UpdateInvoiceCommandDTO,
    PartyDescriptorDTO,
    InvoiceItemDTO,
    InvoiceResponseDTO,
)
from src.app.use_cases.invoicing import (
    CreateInvoice,
    UpdateInvoice,
    DeleteInvoice,
    GetInvoice,
    ListInvoices,
)
from src.adapter.repositories import (
    SqlAlchemyPartyRepository,
    SqlAlchemyInvoiceRepository,
    SqlAlchemyInvoiceItemRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.api.error import ClientError

router = APIRouter(prefix="/invoices", tags=["Invoices"])

NOT_FOUND_RESPONSE = {
    404: {
        "description": "Invoice not found",
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "INVOICE_NOT_FOUND",
                        "message": "Invoice with ID 123 not found"
                    }
                }
            }
        }
    }
}

INVALID_INPUT_RESPONSE = {
    400: {
        "description": "Calculation input missing or store failure",
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "INVALID_COMPUTATION_INPUT",
                        "message": "Received amount is required to compute the invoice balance"
                    }
                }
            }
        }
    }
}


def _to_item_dtos(items):
    if items is None:
        return None
    return [InvoiceItemDTO(**item.model_dump()) for item in items]


def _raise_for_error(error: Error):
    if error.code == "INVOICE_NOT_FOUND":
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    raise ClientError(error)


@router.get(
    "",
    response_model=List[InvoiceResponseDTO],
    status_code=status.HTTP_200_OK,
)
async def list_invoices(session: AsyncSession = Depends(get_session)):
    """
    List all invoices with their party and items.

    **Returns:**
    - 200: List of invoices (possibly empty)
    """
    use_case = ListInvoices(
        SqlAlchemyPartyRepository(session),
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceItemRepository(session),
    )
    result = await use_case.execute()

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get(
    "/{invoice_id}",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_200_OK,
    responses=NOT_FOUND_RESPONSE,
)
async def get_invoice(
    invoice_id: int,
    session: AsyncSession = Depends(get_session)
):
    """
    Get one invoice by its number.

    **Path parameters:**
    - `invoice_id` (required): Invoice number

    **Returns:**
    - 200: Invoice found
    - 404: Invoice not found
    """
    use_case = GetInvoice(
        SqlAlchemyPartyRepository(session),
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceItemRepository(session),
    )
    result = await use_case.execute(invoice_id)

    if result.is_err():
        raise ClientError(result.error)

    if result.value is None:
        raise ClientError(
            Error(
                code="INVOICE_NOT_FOUND",
                message=f"Invoice with ID {invoice_id} not found",
            ),
            status_code=status.HTTP_404_NOT_FOUND,
        )

    return result.value


@router.post(
    "",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_200_OK,
    responses=INVALID_INPUT_RESPONSE,
)
async def create_invoice(
    request: InvoiceRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Create an invoice against a party.

    The party is matched by name, ignoring case, or created when no party
    has that name. When items are given, the sub total, total and balance
    are computed and the party's running balance is replaced by the
    invoice balance.

    **Example request:**
    ```json
    {
      "party": {"name": "Acme Corp", "address": "12 Market Street"},
      "invoice_date": "2024-02-01",
      "received_amount": "50.00",
      "discount": "20.00",
      "items": [{"item_name": "Steel rod", "amount": "200.00"}]
    }
    ```

    **Returns:**
    - 200: Invoice created
    - 400: Missing received amount / item amount, or store failure
    """
    uow = SqlAlchemyUnitOfWork(session)

    command = CreateInvoiceCommandDTO(
        party=PartyDescriptorDTO(**request.party.model_dump()),
        invoice_date=request.invoice_date,
        received_amount=request.received_amount,
        discount=request.discount,
        amount_in_words=request.amount_in_words,
        items=_to_item_dtos(request.items),
    )

    use_case = CreateInvoice(
        uow,
        SqlAlchemyPartyRepository(session),
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceItemRepository(session),
    )
    result = await use_case.execute(command)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.put(
    "/{invoice_id}",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={**NOT_FOUND_RESPONSE, **INVALID_INPUT_RESPONSE},
)
async def update_invoice(
    invoice_id: int,
    request: UpdateInvoiceRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Update an invoice, replacing all of its items.

    The invoice keeps its party. Totals are recomputed from the new items
    and the party's running balance.

    **Returns:**
    - 200: Invoice updated
    - 400: Missing received amount / item amount, or store failure
    - 404: Invoice not found
    """
    uow = SqlAlchemyUnitOfWork(session)

    command = UpdateInvoiceCommandDTO(
        invoice_id=invoice_id,
        invoice_date=request.invoice_date,
        received_amount=request.received_amount,
        discount=request.discount,
        amount_in_words=request.amount_in_words,
        items=_to_item_dtos(request.items),
    )

    use_case = UpdateInvoice(
        uow,
        SqlAlchemyPartyRepository(session),
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceItemRepository(session),
    )
    result = await use_case.execute(command)

    if result.is_err():
        _raise_for_error(result.error)

    return result.value


@router.delete(
    "/{invoice_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=NOT_FOUND_RESPONSE,
)
async def delete_invoice(
    invoice_id: int,
    session: AsyncSession = Depends(get_session)
):
    """
    Delete an invoice and its items.

    The party's running balance is not changed.

    **Returns:**
    - 204: Invoice deleted
    - 404: Invoice not found
    """
    uow = SqlAlchemyUnitOfWork(session)
    use_case = DeleteInvoice(
        uow,
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceItemRepository(session),
    )
    result = await use_case.execute(invoice_id)

    if result.is_err():
        _raise_for_error(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
