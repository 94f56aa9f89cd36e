"""Customer lookup service module.

Single-row and filtered reads against the Customer table. A missing
customer is reported as None (or an empty list), never as an error.
"""
from typing import Optional

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from billing.models.customer import Customer
from billing.schemas.customer import CustomerResponse


async def name_of_customer(db: AsyncSession, customer_id: int) -> Optional[str]:
    """Return the customer's last name, or None if the customer does not exist."""
    query = select(Customer.last_name).where(Customer.id == customer_id)
    result = await db.execute(query)
    return result.scalar_one_or_none()


async def number_of_customers(db: AsyncSession) -> int:
    """Count rows in the Customer table."""
    query = select(func.count().label("NUMBER")).select_from(Customer)
    result = await db.execute(query)
    return result.scalar() or 0


async def find_customer(
    db: AsyncSession, customer_id: int
) -> Optional[CustomerResponse]:
    """Get a single customer by ID."""
    query = select(Customer).where(Customer.id == customer_id)
    result = await db.execute(query)
    customer = result.scalar_one_or_none()

    if not customer:
        return None

    return CustomerResponse.model_validate(customer)


async def customers_in_city(db: AsyncSession, city: str) -> list[CustomerResponse]:
    """List customers located in a city. Empty list when nobody matches."""
    query = select(Customer).where(Customer.city == city).order_by(Customer.id)
    result = await db.execute(query)
    customers = result.scalars().all()
    return [CustomerResponse.model_validate(c) for c in customers]
