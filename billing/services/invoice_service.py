"""Invoice service module.

Provides:
- Revenue and invoice count queries per customer
- Invoice retrieval with its lines
- Transactional invoice creation

Invoice creation is all-or-nothing: the invoice header and every line are
written inside one unit of work, and any failure rolls all of them back.
Each line snapshots the product's current price into Item.Cost, so later
price changes never alter historical invoices. Invoice.Total is left to
the database trigger.
"""
import logging
from decimal import Decimal
from typing import Optional, Sequence

from sqlalchemy import select, func, insert
from sqlalchemy.ext.asyncio import AsyncSession

from billing.database.database import unit_of_work
from billing.exceptions.billing_exception import LineItemMismatchError, OperationFailedError
from billing.models.invoice import Invoice, Item
from billing.models.product import Product
from billing.schemas.invoice import InvoiceResponse, ItemResponse

logger = logging.getLogger(__name__)


async def total_for_customer(db: AsyncSession, customer_id: int) -> float:
    """Sum of invoice totals for a customer, 0.0 when there are none."""
    query = select(func.sum(Invoice.total).label("Amount")).where(
        Invoice.customer_id == customer_id
    )
    result = await db.execute(query)
    amount = result.scalar()
    return float(amount) if amount is not None else 0.0


async def number_of_invoices_for_customer(db: AsyncSession, customer_id: int) -> int:
    """Count invoices owned by a customer."""
    query = select(func.count().label("NUMBER")).select_from(Invoice).where(
        Invoice.customer_id == customer_id
    )
    result = await db.execute(query)
    return result.scalar() or 0


async def get_invoice(db: AsyncSession, invoice_id: int) -> Optional[InvoiceResponse]:
    """Get an invoice and its lines ordered by line index."""
    query = select(Invoice).where(Invoice.id == invoice_id)
    result = await db.execute(query)
    invoice = result.scalar_one_or_none()

    if not invoice:
        return None

    # Total is written by the trigger, never trust a cached value
    await db.refresh(invoice)

    items_query = select(Item).where(Item.invoice_id == invoice_id).order_by(Item.item)
    items_result = await db.execute(items_query)
    items = items_result.scalars().all()

    return InvoiceResponse(
        id=invoice.id,
        customer_id=invoice.customer_id,
        total=float(invoice.total),
        items=[ItemResponse.model_validate(i) for i in items],
    )


async def _insert_invoice(db: AsyncSession, customer_id: int) -> int:
    """Insert the invoice header and return the store-generated key."""
    stmt = insert(Invoice).values(customer_id=customer_id).returning(Invoice.id)
    result = await db.execute(stmt)
    invoice_id = result.scalar_one_or_none()
    if invoice_id is None:
        raise OperationFailedError("Invoice was not inserted")
    return invoice_id


async def _current_price(db: AsyncSession, product_id: int) -> Decimal:
    """Look up a product's price. Unknown products price at zero."""
    query = select(Product.price.label("PRIX")).where(Product.id == product_id)
    result = await db.execute(query)
    price = result.scalar_one_or_none()

    if price is None:
        logger.warning(f"No price found for product {product_id}, line cost defaults to 0")
        return Decimal("0")
    if price == 0:
        logger.debug(f"Product {product_id} has a zero price")
    return price


async def _insert_item(
    db: AsyncSession,
    invoice_id: int,
    line: int,
    product_id: int,
    quantity: int,
    cost: Decimal,
) -> None:
    """Insert one invoice line, failing unless exactly one row is written."""
    stmt = (
        insert(Item)
        .values(
            invoice_id=invoice_id,
            item=line,
            product_id=product_id,
            quantity=quantity,
            cost=cost,
        )
        .returning(Item.invoice_id, Item.item)
    )
    result = await db.execute(stmt)
    rows = result.all()
    if len(rows) != 1:
        raise OperationFailedError(
            f"Line {line} of invoice {invoice_id} was not inserted ({len(rows)} rows)"
        )


async def create_invoice(
    db: AsyncSession,
    customer_id: int,
    product_ids: Sequence[int],
    quantities: Sequence[int],
) -> int:
    """
    Create an invoice for a customer with one line per product.

    Algorithm:
    1. Check that product_ids and quantities pair up
    2. Insert the invoice header and read back its generated ID
    3. For each line i: snapshot the product price, insert Item(i)
    4. Commit, or roll back everything on the first failure

    Args:
        db: Database session
        customer_id: Owning customer (enforced by the foreign key)
        product_ids: Product ID for each line
        quantities: Quantity for each line, same length as product_ids

    Returns:
        The generated invoice ID

    Raises:
        LineItemMismatchError: If the two sequences differ in length
        OperationFailedError: If an insert did not write exactly one row
        sqlalchemy.exc.SQLAlchemyError: Store failures, propagated unchanged
    """
    if len(product_ids) != len(quantities):
        raise LineItemMismatchError(len(product_ids), len(quantities))

    async with unit_of_work(db):
        invoice_id = await _insert_invoice(db, customer_id)
        logger.debug(f"Inserted invoice header {invoice_id} for customer {customer_id}")

        for line, (product_id, quantity) in enumerate(zip(product_ids, quantities)):
            cost = await _current_price(db, product_id)
            await _insert_item(db, invoice_id, line, product_id, quantity, cost)

    logger.info(f"Committed invoice {invoice_id} with {len(product_ids)} line(s)")
    return invoice_id
