"""Customer endpoints module."""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from billing.database.database import get_db
from billing.exceptions.api_exception import NotFoundError
from billing.schemas.customer import (
    CustomerResponse,
    CustomerNameResponse,
    CustomerCountResponse,
    CustomerRevenueResponse,
    CustomerInvoiceCountResponse,
)
from billing.services.customer_service import (
    name_of_customer,
    number_of_customers,
    find_customer,
    customers_in_city,
)
from billing.services.invoice_service import (
    total_for_customer,
    number_of_invoices_for_customer,
)

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("", response_model=list[CustomerResponse])
async def list_customers_in_city(
    city: str = Query(..., description="City to filter customers by"),
    db: AsyncSession = Depends(get_db),
) -> list[CustomerResponse]:
    """List customers located in a city."""
    return await customers_in_city(db, city)


@router.get("/count", response_model=CustomerCountResponse)
async def count_customers(
    db: AsyncSession = Depends(get_db),
) -> CustomerCountResponse:
    """Total number of customers."""
    return CustomerCountResponse(count=await number_of_customers(db))


@router.get("/{customer_id}", response_model=CustomerResponse)
async def get_customer(
    customer_id: int,
    db: AsyncSession = Depends(get_db),
) -> CustomerResponse:
    """Get a single customer by ID."""
    customer = await find_customer(db, customer_id)

    if customer is None:
        raise NotFoundError(f"Customer {customer_id} not found")

    return customer


@router.get("/{customer_id}/name", response_model=CustomerNameResponse)
async def get_customer_name(
    customer_id: int,
    db: AsyncSession = Depends(get_db),
) -> CustomerNameResponse:
    """Get a customer's last name."""
    last_name = await name_of_customer(db, customer_id)

    if last_name is None:
        raise NotFoundError(f"Customer {customer_id} not found")

    return CustomerNameResponse(id=customer_id, last_name=last_name)


@router.get("/{customer_id}/revenue", response_model=CustomerRevenueResponse)
async def get_customer_revenue(
    customer_id: int,
    db: AsyncSession = Depends(get_db),
) -> CustomerRevenueResponse:
    """
    Sum of all invoice totals for a customer.

    Returns 0 for customers without invoices, including unknown customers.
    """
    total = await total_for_customer(db, customer_id)
    return CustomerRevenueResponse(customer_id=customer_id, total=total)


@router.get("/{customer_id}/invoices/count", response_model=CustomerInvoiceCountResponse)
async def get_customer_invoice_count(
    customer_id: int,
    db: AsyncSession = Depends(get_db),
) -> CustomerInvoiceCountResponse:
    """Number of invoices owned by a customer."""
    count = await number_of_invoices_for_customer(db, customer_id)
    return CustomerInvoiceCountResponse(customer_id=customer_id, count=count)
