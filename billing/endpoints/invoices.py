"""Invoice endpoints module."""
import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from billing.database.database import get_db
from billing.exceptions.api_exception import (
    APIException,
    BadRequestError,
    ConflictError,
    NotFoundError,
)
from billing.exceptions.billing_exception import LineItemMismatchError, OperationFailedError
from billing.schemas.invoice import InvoiceCreate, InvoiceResponse
from billing.services.invoice_service import create_invoice, get_invoice

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/invoices", tags=["invoices"])


@router.post("", response_model=InvoiceResponse, status_code=status.HTTP_201_CREATED)
async def create_new_invoice(
    data: InvoiceCreate,
    db: AsyncSession = Depends(get_db),
) -> InvoiceResponse:
    """
    Create an invoice with its lines in a single transaction.

    Required fields:
    - **customer_id**: Owning customer
    - **product_ids**: Product for each line
    - **quantities**: Quantity for each line (same length as product_ids)

    Each line's cost is the product's price at creation time.
    Nothing is stored if any line fails.
    """
    try:
        invoice_id = await create_invoice(
            db,
            customer_id=data.customer_id,
            product_ids=data.product_ids,
            quantities=data.quantities,
        )
    except LineItemMismatchError as e:
        raise BadRequestError(str(e))
    except IntegrityError as e:
        logger.warning(f"Invoice for customer {data.customer_id} rejected by the database: {e.orig}")
        raise ConflictError("Unknown customer or product, or invalid line values")
    except OperationFailedError as e:
        raise APIException(detail=e.detail)

    return await get_invoice(db, invoice_id)


@router.get("/{invoice_id}", response_model=InvoiceResponse)
async def get_invoice_by_id(
    invoice_id: int,
    db: AsyncSession = Depends(get_db),
) -> InvoiceResponse:
    """Get an invoice and its lines."""
    result = await get_invoice(db, invoice_id)

    if result is None:
        raise NotFoundError(f"Invoice {invoice_id} not found")

    return result
