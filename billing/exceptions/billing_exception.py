"""Billing domain exception module."""


class BillingError(Exception):
    """Base class for billing data-access failures."""


class OperationFailedError(BillingError):
    """A write did not affect exactly the expected number of rows."""

    def __init__(self, detail: str = "The values were not inserted"):
        super().__init__(detail)
        self.detail = detail


class LineItemMismatchError(BillingError, ValueError):
    """Product and quantity sequences do not pair up."""

    def __init__(self, product_count: int, quantity_count: int):
        self.product_count = product_count
        self.quantity_count = quantity_count
        super().__init__(
            f"Got {product_count} product id(s) but {quantity_count} quantity(ies); "
            "both sequences must have the same length"
        )
