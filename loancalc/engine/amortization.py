"""Card loan amortization engine.

Pure functions: Decimal in, dataclass out. No I/O.

Two strategies, selected by the product's ``strategy``:

* revolving balance: annuity payment, interest on the outstanding balance,
  with optional grace-violation penalty and cash-withdrawal fee folded into
  the interest of the month they are billed in;
* flat commission: a fixed share of the *original* principal is charged
  every month, regardless of how much has been repaid.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Callable

from loancalc.engine.dates import days_between, first_payment_date, row_date
from loancalc.engine.products import get_product
from loancalc.models.loan import AmortizationRow, LoanRequest, LoanResult
from loancalc.models.product import PenaltyRule, ProductVariant, Strategy

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")
ZERO = Decimal("0")
HUNDRED = Decimal("100")
DAYS_PER_MONTH = 30  # daily rate approximation for the penalty
BALANCE_SLACK = Decimal("0.01")


def _cents(value: Decimal) -> Decimal:
    if not value.is_finite():
        return value
    # quantize needs every integer digit to fit the context precision
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return value.quantize(TWO_PLACES, ROUND_HALF_UP)


def annuity_payment(principal: Decimal, rate: Decimal, months: int) -> Decimal:
    """Fixed installment that amortizes ``principal`` in ``months`` payments.

    ``rate`` is the monthly rate as a fraction (0.031 for 3.1%).
    """
    if principal <= 0 or months <= 0:
        return ZERO
    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    factor = (1 + rate) ** months
    if rate == 0 or factor == 1:
        return _cents(principal / months)
    return _cents(principal * rate * factor / (factor - 1))


def cash_withdrawal_fee(product: ProductVariant, amount: Decimal) -> Decimal:
    """One-time fee charged on a cash withdrawal, as a percentage of principal."""
    return _cents(amount * product.cash_withdrawal_fee_pct / HUNDRED)


def penalty_month_index(product: ProductVariant, months: int) -> int:
    """1-based month that carries the grace-violation penalty (0 when there is none)."""
    if product.penalty_rule is PenaltyRule.NONE:
        return 0
    if months < product.penalty_month:
        return 1
    return product.penalty_month


def penalty_interest(product: ProductVariant, request: LoanRequest, rate: Decimal) -> Decimal:
    """Interest owed for the lost grace period, always on the full amount."""
    if product.penalty_rule is PenaltyRule.DAILY_TO_DUE_DATE:
        days = days_between(request.start_date, first_payment_date(request.start_date, product))
        return _cents(request.amount * rate / DAYS_PER_MONTH * days)
    if product.penalty_rule is PenaltyRule.FLAT_MONTHS:
        return _cents(request.amount * rate * product.penalty_months)
    return ZERO


def revolving_schedule(request: LoanRequest, product: ProductVariant) -> LoanResult:
    amount = request.amount
    months = request.months
    flags = request.flags
    rate = request.monthly_rate / HUNDRED

    base_payment = annuity_payment(amount, rate, months)

    fee = cash_withdrawal_fee(product, amount) if flags.cash_withdrawal else ZERO
    fee_share = _cents(fee / months)

    penalty = penalty_interest(product, request, rate) if flags.grace_period_violation else ZERO
    penalty_month = penalty_month_index(product, months)
    if penalty > 0:
        logger.debug("Grace violation penalty %s in month %d", penalty, penalty_month)
    if fee > 0:
        logger.debug("Cash withdrawal fee %s (amortized=%s)", fee, flags.fee_amortized)

    rows: list[AmortizationRow] = []
    balance = amount
    total_interest = ZERO

    for month in range(1, months + 1):
        interest = _cents(balance * rate)
        payment = base_payment
        is_penalty_month = False

        if month == penalty_month and penalty > 0:
            interest += penalty
            payment += penalty
            is_penalty_month = True

        if fee > 0:
            if flags.fee_amortized:
                interest += fee_share
                payment += fee_share
            elif month == 1:
                interest += fee
                payment += fee

        principal = payment - interest

        # Final payment closes the loan exactly
        if month == months:
            principal = balance
            payment = principal + interest

        # Charges exceed the installment: pay interest only, balance holds
        if principal < 0:
            logger.debug("Month %d: charges %s exceed payment, principal clamped to 0", month, interest)
            principal = ZERO
            payment = interest

        balance -= principal
        if balance < BALANCE_SLACK:
            balance = ZERO
        total_interest += interest

        rows.append(AmortizationRow(
            month=month,
            payment_date=row_date(request.start_date, product, month),
            payment=_cents(payment),
            interest=_cents(interest),
            principal=_cents(principal),
            balance=_cents(balance),
            is_penalty_month=is_penalty_month,
        ))

    total_interest = _cents(total_interest)
    return LoanResult(
        monthly_payment=base_payment,
        total_payment=_cents(amount) + total_interest,
        total_interest=total_interest,
        schedule=rows,
    )


def flat_commission_schedule(request: LoanRequest, product: ProductVariant) -> LoanResult:
    amount = request.amount
    months = request.months
    rate = request.monthly_rate / HUNDRED

    total_commission = _cents(amount * rate * months)
    total_payment = amount + total_commission
    monthly_payment = _cents(total_payment / months)
    commission_share = total_commission / months

    rows: list[AmortizationRow] = []
    balance = amount
    accumulated_principal = ZERO

    for month in range(1, months + 1):
        if month == months:
            principal = amount - accumulated_principal
            commission = monthly_payment - principal
        else:
            commission = commission_share
            principal = monthly_payment - commission

        accumulated_principal += principal
        balance -= principal
        if balance < BALANCE_SLACK:
            balance = ZERO

        rows.append(AmortizationRow(
            month=month,
            payment_date=row_date(request.start_date, product, month),
            payment=monthly_payment,
            interest=_cents(commission),
            principal=_cents(principal),
            balance=_cents(balance),
        ))

    return LoanResult(
        monthly_payment=monthly_payment,
        total_payment=_cents(total_payment),
        total_interest=total_commission,
        schedule=rows,
    )


_STRATEGIES: dict[Strategy, Callable[[LoanRequest, ProductVariant], LoanResult]] = {
    Strategy.REVOLVING_BALANCE: revolving_schedule,
    Strategy.FLAT_COMMISSION: flat_commission_schedule,
}


def compute(request: LoanRequest) -> LoanResult:
    """Build the payment schedule and totals for a card loan.

    Total over numeric input: a non-positive amount or term gives an empty
    result, and rates are not range-checked. Raises ``UnknownProductError``
    only for a product id missing from the catalog.
    """
    if request.amount <= 0 or request.months <= 0:
        logger.debug("Degenerate request (amount=%s, months=%s)", request.amount, request.months)
        return LoanResult.empty()

    product = get_product(request.product_id)
    logger.debug("Computing %s schedule for %s", product.strategy.value, product.id)
    return _STRATEGIES[product.strategy](request, product)
