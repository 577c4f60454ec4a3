"""Loan product variants as data: strategy, rate rule, fee, penalty and date rules."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class Strategy(Enum):
    REVOLVING_BALANCE = "revolving_balance"  # interest on outstanding balance
    FLAT_COMMISSION = "flat_commission"      # commission on original principal


class DateRule(Enum):
    STANDARD = "standard"    # i calendar months after purchase
    FIXED_DAY = "fixed_day"  # contractual due day of the following months


class PenaltyRule(Enum):
    NONE = "none"
    DAILY_TO_DUE_DATE = "daily_to_due_date"  # r/30 per day until the first due date
    FLAT_MONTHS = "flat_months"              # r * penalty_months on the full amount


@dataclass(frozen=True)
class ProductVariant:
    id: str
    title: str
    strategy: Strategy
    base_rate: Decimal  # % per month
    long_term_rate: Decimal | None = None
    long_term_threshold: int | None = None  # months at which long_term_rate applies
    cash_withdrawal_fee_pct: Decimal = Decimal("0")  # % of principal
    grace_preserved_on_withdrawal: bool = True
    penalty_rule: PenaltyRule = PenaltyRule.NONE
    penalty_months: int = 0
    penalty_month: int = 1
    date_rule: DateRule = DateRule.STANDARD
    due_day: int | None = None

    @property
    def supports_special_conditions(self) -> bool:
        """Grace violation and cash withdrawal only exist for balance-accruing cards."""
        return self.strategy is Strategy.REVOLVING_BALANCE

    def nominal_rate(self, months: int) -> Decimal:
        """Monthly rate in percent for a term of ``months``."""
        if (
            self.long_term_rate is not None
            and self.long_term_threshold is not None
            and months >= self.long_term_threshold
        ):
            return self.long_term_rate
        return self.base_rate
