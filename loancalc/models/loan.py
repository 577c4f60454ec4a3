"""Loan request and amortization result records.

Plain frozen dataclasses, built fresh for every calculation. Money values are
``Decimal`` rounded to cents by the engine.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from loancalc.models.product import ProductVariant


@dataclass(frozen=True)
class LoanFlags:
    grace_period_violation: bool = False
    cash_withdrawal: bool = False
    fee_amortized: bool = False  # only meaningful together with cash_withdrawal

    def normalized(self, product: ProductVariant) -> "LoanFlags":
        """Apply the form-level rules before handing flags to the engine.

        Products without special conditions never carry flags, and the fee
        can only be spread when there is a cash-withdrawal fee to spread.
        """
        if not product.supports_special_conditions:
            return LoanFlags()
        return LoanFlags(
            grace_period_violation=self.grace_period_violation,
            cash_withdrawal=self.cash_withdrawal,
            fee_amortized=self.fee_amortized and self.cash_withdrawal,
        )


@dataclass(frozen=True)
class LoanRequest:
    amount: Decimal
    monthly_rate: Decimal  # percentage points per month, 1.99 == 1.99%
    months: int
    product_id: str
    start_date: date
    flags: LoanFlags = field(default_factory=LoanFlags)

    @classmethod
    def for_product(
        cls,
        product: ProductVariant,
        amount: Decimal,
        months: int,
        start_date: date,
        flags: LoanFlags | None = None,
        monthly_rate: Decimal | None = None,
    ) -> "LoanRequest":
        """Build a request the way the calculator form does.

        Missing rate falls back to the product's nominal rate for the term;
        flags are normalized against the product.
        """
        rate = monthly_rate if monthly_rate is not None else product.nominal_rate(months)
        return cls(
            amount=amount,
            monthly_rate=rate,
            months=months,
            product_id=product.id,
            start_date=start_date,
            flags=(flags or LoanFlags()).normalized(product),
        )


@dataclass(frozen=True)
class AmortizationRow:
    month: int
    payment_date: date
    payment: Decimal
    interest: Decimal  # interest, commission, fee and penalty charged this month
    principal: Decimal
    balance: Decimal
    is_penalty_month: bool = False


@dataclass(frozen=True)
class LoanResult:
    monthly_payment: Decimal  # base installment, before penalty and fee
    total_payment: Decimal
    total_interest: Decimal
    schedule: list[AmortizationRow]

    @classmethod
    def empty(cls) -> "LoanResult":
        return cls(
            monthly_payment=Decimal("0"),
            total_payment=Decimal("0"),
            total_interest=Decimal("0"),
            schedule=[],
        )

    @property
    def peak_payment(self) -> Decimal:
        """Largest single installment (the first one when a penalty or lump fee applies)."""
        if not self.schedule:
            return Decimal("0")
        return max(row.payment for row in self.schedule)

    @property
    def total_principal(self) -> Decimal:
        return sum((row.principal for row in self.schedule), Decimal("0"))
