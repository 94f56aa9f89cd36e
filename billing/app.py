"""FastAPI application setup module."""
import logging

from fastapi import FastAPI

from billing.settings import settings
from billing.endpoints.customers import router as customers_router
from billing.endpoints.invoices import router as invoices_router

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Billing API",
    description="Customer and invoice data access for the billing domain",
    version="1.0.0",
    debug=settings.DEBUG,
)

# Include routers
app.include_router(customers_router)
app.include_router(invoices_router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
