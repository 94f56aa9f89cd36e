"""Tests for customer service."""
import pytest

from billing.services.customer_service import (
    customers_in_city,
    find_customer,
    name_of_customer,
    number_of_customers,
)


@pytest.mark.asyncio
class TestCustomerLookups:
    """Tests for single-customer reads."""

    async def test_name_of_customer(self, db_session, sample_data):
        assert await name_of_customer(db_session, 5) == "Petit"

    async def test_name_of_unknown_customer_is_none(self, db_session, sample_data):
        """Absence is None, not an empty string."""
        assert await name_of_customer(db_session, 404) is None

    async def test_find_customer(self, db_session, sample_data):
        customer = await find_customer(db_session, 2)

        assert customer.id == 2
        assert customer.first_name == "Bruno"
        assert customer.street == "8 Quai Claude Bernard"

    async def test_find_unknown_customer(self, db_session, sample_data):
        assert await find_customer(db_session, 404) is None

    async def test_number_of_customers(self, db_session, sample_data):
        assert await number_of_customers(db_session) == 4

    async def test_number_of_customers_empty_db(self, db_session):
        assert await number_of_customers(db_session) == 0


@pytest.mark.asyncio
class TestCustomersInCity:
    """Tests for the city filter."""

    async def test_customers_in_city(self, db_session, sample_data):
        result = await customers_in_city(db_session, "Paris")

        assert [(c.id, c.first_name, c.street) for c in result] == [
            (1, "Alice", "1 Rue de Rivoli"),
            (5, "Chloe", "12 Avenue Foch"),
        ]

    async def test_no_match_returns_empty_list(self, db_session, sample_data):
        assert await customers_in_city(db_session, "Marseille") == []

    async def test_reads_are_repeatable(self, db_session, sample_data):
        first = await customers_in_city(db_session, "Paris")
        second = await customers_in_city(db_session, "Paris")
        assert first == second
