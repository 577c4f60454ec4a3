"""Card loan product catalog.

Each variant is a parameter record consumed by the generic engine. Adding a
product means adding an entry here, not a new code path.
"""

from decimal import Decimal

from loancalc.models.product import DateRule, PenaltyRule, ProductVariant, Strategy

DEFAULT_PRODUCT_ID = "pumb_installment"


class UnknownProductError(KeyError):
    def __init__(self, product_id: str) -> None:
        super().__init__(product_id)
        self.product_id = product_id

    def __str__(self) -> str:
        return f"Unknown loan product: {self.product_id!r}"


PRODUCTS: dict[str, ProductVariant] = {
    p.id: p
    for p in (
        # 1.99%/mo on principal, 2.99% from 12 months
        ProductVariant(
            id="pumb_installment",
            title="Розстрочка від Банку ПУМБ",
            strategy=Strategy.FLAT_COMMISSION,
            base_rate=Decimal("1.99"),
            long_term_rate=Decimal("2.99"),
            long_term_threshold=12,
        ),
        # Statement due date is always the 30th of the following month
        ProductVariant(
            id="pumb_credit_card",
            title='Кредитна картка (ПУМБ "всеМОЖУ")',
            strategy=Strategy.REVOLVING_BALANCE,
            base_rate=Decimal("2.99"),
            cash_withdrawal_fee_pct=Decimal("3.99"),
            grace_preserved_on_withdrawal=True,
            penalty_rule=PenaltyRule.DAILY_TO_DUE_DATE,
            penalty_month=1,
            date_rule=DateRule.FIXED_DAY,
            due_day=30,
        ),
        ProductVariant(
            id="monobank_installment",
            title="Розстрочка на картку (Monobank)",
            strategy=Strategy.FLAT_COMMISSION,
            base_rate=Decimal("1.90"),
        ),
        # Grace period lapses after ~62 days: two months of interest hit month 2
        ProductVariant(
            id="monobank_black",
            title="Чорна картка (Monobank)",
            strategy=Strategy.REVOLVING_BALANCE,
            base_rate=Decimal("3.10"),
            cash_withdrawal_fee_pct=Decimal("4"),
            grace_preserved_on_withdrawal=False,
            penalty_rule=PenaltyRule.FLAT_MONTHS,
            penalty_months=2,
            penalty_month=2,
        ),
    )
}


def list_products() -> list[ProductVariant]:
    return list(PRODUCTS.values())


def get_product(product_id: str) -> ProductVariant:
    try:
        return PRODUCTS[product_id]
    except KeyError:
        raise UnknownProductError(product_id) from None
