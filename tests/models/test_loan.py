from datetime import date
from decimal import Decimal

from loancalc.engine.products import get_product
from loancalc.models.loan import AmortizationRow, LoanFlags, LoanRequest, LoanResult


class TestLoanFlags:
    def test_defaults_off(self):
        flags = LoanFlags()
        assert not flags.grace_period_violation
        assert not flags.cash_withdrawal
        assert not flags.fee_amortized

    def test_installments_drop_all_flags(self):
        flags = LoanFlags(grace_period_violation=True, cash_withdrawal=True, fee_amortized=True)
        assert flags.normalized(get_product("pumb_installment")) == LoanFlags()

    def test_fee_amortized_requires_cash_withdrawal(self):
        flags = LoanFlags(grace_period_violation=True, fee_amortized=True)
        assert flags.normalized(get_product("monobank_black")) == LoanFlags(grace_period_violation=True)

    def test_card_keeps_flags(self):
        flags = LoanFlags(cash_withdrawal=True, fee_amortized=True)
        assert flags.normalized(get_product("pumb_credit_card")) == flags


class TestLoanRequestForProduct:
    def test_nominal_rate_by_term(self):
        product = get_product("pumb_installment")
        short = LoanRequest.for_product(product, Decimal("3000"), 6, date(2025, 1, 15))
        long = LoanRequest.for_product(product, Decimal("3000"), 12, date(2025, 1, 15))
        assert short.monthly_rate == Decimal("1.99")
        assert long.monthly_rate == Decimal("2.99")
        assert short.product_id == "pumb_installment"

    def test_explicit_rate_wins(self):
        req = LoanRequest.for_product(
            get_product("monobank_black"), Decimal("3000"), 3, date(2025, 1, 15), monthly_rate=Decimal("2.5")
        )
        assert req.monthly_rate == Decimal("2.5")

    def test_flags_normalized(self):
        req = LoanRequest.for_product(
            get_product("monobank_installment"),
            Decimal("3000"),
            3,
            date(2025, 1, 15),
            flags=LoanFlags(grace_period_violation=True),
        )
        assert req.flags == LoanFlags()


class TestLoanResult:
    def _row(self, month: int, payment: str, principal: str) -> AmortizationRow:
        return AmortizationRow(
            month=month,
            payment_date=date(2025, month + 1, 15),
            payment=Decimal(payment),
            interest=Decimal(payment) - Decimal(principal),
            principal=Decimal(principal),
            balance=Decimal("0"),
        )

    def test_empty(self):
        result = LoanResult.empty()
        assert result.schedule == []
        assert result.peak_payment == Decimal("0")
        assert result.total_principal == Decimal("0")

    def test_peak_and_principal(self):
        result = LoanResult(
            monthly_payment=Decimal("100"),
            total_payment=Decimal("330"),
            total_interest=Decimal("30"),
            schedule=[self._row(1, "120", "90"), self._row(2, "100", "95"), self._row(3, "110", "115")],
        )
        assert result.peak_payment == Decimal("120")
        assert result.total_principal == Decimal("300")
