"""Customer model module."""
from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column

from billing.database.database import Base


class Customer(Base):
    """Billed customer. Identifiers are assigned outside this service."""

    __tablename__ = "Customer"

    id: Mapped[int] = mapped_column("ID", Integer, primary_key=True, autoincrement=False)
    first_name: Mapped[str] = mapped_column("FirstName", String(64), nullable=True)
    last_name: Mapped[str] = mapped_column("LastName", String(64), nullable=True)
    street: Mapped[str] = mapped_column("Street", String(128), nullable=True)
    city: Mapped[str] = mapped_column("City", String(64), nullable=True, index=True)
