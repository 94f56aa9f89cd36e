"""Invoice and line item models module.

Invoice.total is owned by the database: an AFTER INSERT trigger on Item
adds Quantity * Cost to the parent invoice. The trigger is attached to the
Item table metadata so create_all builds it for PostgreSQL and SQLite.
"""
from decimal import Decimal

from sqlalchemy import (
    DDL,
    CheckConstraint,
    ForeignKey,
    Integer,
    Numeric,
    event,
    text,
)
from sqlalchemy.orm import Mapped, mapped_column

from billing.database.database import Base


class Invoice(Base):
    """Invoice header owned by a customer."""

    __tablename__ = "Invoice"

    id: Mapped[int] = mapped_column("ID", Integer, primary_key=True, autoincrement=True)
    customer_id: Mapped[int] = mapped_column(
        "CustomerID", Integer, ForeignKey("Customer.ID"), nullable=False, index=True
    )
    # Read-only: maintained by the item trigger
    total: Mapped[Decimal] = mapped_column(
        "Total", Numeric(10, 2), nullable=False, server_default=text("0")
    )


class Item(Base):
    """Invoice line. Cost is the product price captured at invoice creation."""

    __tablename__ = "Item"
    __table_args__ = (
        CheckConstraint('"Quantity" > 0', name="ck_item_quantity_positive"),
    )

    invoice_id: Mapped[int] = mapped_column(
        "InvoiceID", Integer, ForeignKey("Invoice.ID"), primary_key=True
    )
    item: Mapped[int] = mapped_column("Item", Integer, primary_key=True, autoincrement=False)
    product_id: Mapped[int] = mapped_column(
        "ProductID", Integer, ForeignKey("Product.ID"), nullable=False
    )
    quantity: Mapped[int] = mapped_column("Quantity", Integer, nullable=False)
    cost: Mapped[Decimal] = mapped_column("Cost", Numeric(10, 2), nullable=False)


POSTGRES_TOTAL_FUNCTION = DDL(
    """
    CREATE OR REPLACE FUNCTION item_update_invoice_total() RETURNS trigger AS $body$
    BEGIN
        UPDATE "Invoice" SET "Total" = "Total" + NEW."Quantity" * NEW."Cost"
        WHERE "ID" = NEW."InvoiceID";
        RETURN NEW;
    END;
    $body$ LANGUAGE plpgsql
    """
)

POSTGRES_TOTAL_TRIGGER = DDL(
    """
    CREATE TRIGGER trg_item_update_invoice_total
    AFTER INSERT ON "Item"
    FOR EACH ROW EXECUTE FUNCTION item_update_invoice_total()
    """
)

SQLITE_TOTAL_TRIGGER = DDL(
    """
    CREATE TRIGGER trg_item_update_invoice_total
    AFTER INSERT ON "Item"
    BEGIN
        UPDATE "Invoice" SET "Total" = "Total" + NEW."Quantity" * NEW."Cost"
        WHERE "ID" = NEW."InvoiceID";
    END
    """
)

event.listen(
    Item.__table__, "after_create", POSTGRES_TOTAL_FUNCTION.execute_if(dialect="postgresql")
)
event.listen(
    Item.__table__, "after_create", POSTGRES_TOTAL_TRIGGER.execute_if(dialect="postgresql")
)
event.listen(
    Item.__table__, "after_create", SQLITE_TOTAL_TRIGGER.execute_if(dialect="sqlite")
)
