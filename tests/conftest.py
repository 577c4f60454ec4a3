"""Canonical test fixtures used across the engine tests.

Fixture: 3000 UAH purchase over 3 months, bought 2025-01-15.
"""

from datetime import date
from decimal import Decimal

import pytest

from loancalc.models.loan import LoanFlags, LoanRequest


@pytest.fixture
def purchase_date() -> date:
    return date(2025, 1, 15)


@pytest.fixture
def make_request(purchase_date):
    """Factory for a 3000 / 3-month request against any product."""

    def _factory(
        product_id: str,
        rate: str,
        amount: str = "3000",
        months: int = 3,
        start_date: date | None = None,
        **flags,
    ) -> LoanRequest:
        return LoanRequest(
            amount=Decimal(amount),
            monthly_rate=Decimal(rate),
            months=months,
            product_id=product_id,
            start_date=start_date or purchase_date,
            flags=LoanFlags(**flags),
        )

    return _factory
