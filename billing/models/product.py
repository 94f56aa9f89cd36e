"""Product model module."""
from decimal import Decimal

from sqlalchemy import String, Integer, Numeric
from sqlalchemy.orm import Mapped, mapped_column

from billing.database.database import Base


class Product(Base):
    """Sellable product with its current unit price."""

    __tablename__ = "Product"

    id: Mapped[int] = mapped_column("ID", Integer, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column("Name", String(256), nullable=True)
    price: Mapped[Decimal] = mapped_column("Price", Numeric(10, 2), nullable=False)
