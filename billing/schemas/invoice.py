"""Invoice schemas module."""
from pydantic import BaseModel, Field, PositiveInt


class InvoiceCreate(BaseModel):
    """
    Request schema for creating an invoice.

    product_ids and quantities are paired by position: line i bills
    quantities[i] units of product_ids[i].
    """

    customer_id: int = Field(..., description="Owning customer ID")
    product_ids: list[int] = Field(
        default_factory=list, description="Product ID for each line"
    )
    quantities: list[PositiveInt] = Field(
        default_factory=list, description="Quantity for each line"
    )


class ItemResponse(BaseModel):
    """Schema for an invoice line."""

    item: int = Field(..., description="Line index within the invoice, from 0")
    product_id: int = Field(..., description="Product ID")
    quantity: int = Field(..., description="Units billed")
    cost: float = Field(..., description="Unit price captured at invoice creation")

    class Config:
        from_attributes = True


class InvoiceResponse(BaseModel):
    """Schema for an invoice with its lines."""

    id: int = Field(..., description="Invoice ID")
    customer_id: int = Field(..., description="Owning customer ID")
    total: float = Field(..., description="Invoice total, computed by the database")
    items: list[ItemResponse] = Field(default_factory=list, description="Invoice lines")
