"""Customer schemas module."""
from typing import Optional

from pydantic import BaseModel, Field


class CustomerResponse(BaseModel):
    """Customer summary: identifier, first name and street address."""

    id: int = Field(..., description="Customer ID")
    first_name: Optional[str] = Field(None, description="Customer first name")
    street: Optional[str] = Field(None, description="Street address")

    class Config:
        from_attributes = True


class CustomerNameResponse(BaseModel):
    """Schema for customer last name lookup."""

    id: int = Field(..., description="Customer ID")
    last_name: Optional[str] = Field(None, description="Customer last name")


class CustomerCountResponse(BaseModel):
    """Schema for customer count."""

    count: int = Field(..., description="Number of customers")


class CustomerRevenueResponse(BaseModel):
    """Schema for a customer's revenue total."""

    customer_id: int = Field(..., description="Customer ID")
    total: float = Field(..., description="Sum of invoice totals (0 if none)")


class CustomerInvoiceCountResponse(BaseModel):
    """Schema for a customer's invoice count."""

    customer_id: int = Field(..., description="Customer ID")
    count: int = Field(..., description="Number of invoices")
