"""Terminal report for the card loan calculator.

Usage:
    python -m loancalc.cli 3000 --months 3 --product pumb_installment
    python -m loancalc.cli 3000 --months 6 --product monobank_black --grace-violation
    python -m loancalc.cli 5000 --months 12 --product pumb_credit_card --cash-withdrawal --fee-amortized
    python -m loancalc.cli --products
"""

import argparse
import logging
from datetime import date
from decimal import Decimal, InvalidOperation

from loancalc.config import configure_logging, settings
from loancalc.engine.amortization import compute
from loancalc.engine.products import PRODUCTS, UnknownProductError, get_product, list_products
from loancalc.models.loan import LoanFlags, LoanRequest, LoanResult

logger = logging.getLogger(__name__)


def _money(v: Decimal) -> str:
    return f"{v:,.2f}"


def _header(title: str) -> None:
    print(f"\n{'=' * 72}")
    print(f"  {title}")
    print(f"{'=' * 72}")


def print_products() -> None:
    _header("Loan Products")
    for p in list_products():
        rate = f"{p.base_rate}%"
        if p.long_term_rate is not None:
            rate += f" ({p.long_term_rate}% from {p.long_term_threshold} mo)"
        extras = ""
        if p.supports_special_conditions:
            grace = "kept" if p.grace_preserved_on_withdrawal else "lost"
            extras = f"cash fee {p.cash_withdrawal_fee_pct}%, grace {grace}"
        print(f"  {p.id:<22} {rate:<28} {extras}")
        print(f"  {'':<22} {p.title}")
    print()


def print_summary(request: LoanRequest, result: LoanResult) -> None:
    product = get_product(request.product_id)
    _header(f"Summary: {product.title}")
    print(f"  Amount:           {_money(request.amount)}")
    print(f"  Monthly rate:     {request.monthly_rate}%")
    print(f"  Term:             {request.months} mo")
    print(f"  Start date:       {request.start_date.isoformat()}")
    print(f"  Monthly payment:  {_money(result.monthly_payment)}")
    if result.peak_payment > result.monthly_payment:
        print(f"  First payment (peak): {_money(result.peak_payment)}")
    print(f"  Total interest:   {_money(result.total_interest)}")
    print(f"  Total payment:    {_money(result.total_payment)}")


def print_schedule(result: LoanResult) -> None:
    _header("Schedule")
    print(f"  {'#':>3}  {'Date':<10}  {'Payment':>12}  {'Interest':>12}  {'Principal':>12}  {'Balance':>12}")
    for row in result.schedule:
        mark = " *" if row.is_penalty_month else ""
        print(
            f"  {row.month:>3}  {row.payment_date.isoformat():<10}  {_money(row.payment):>12}"
            f"  {_money(row.interest):>12}  {_money(row.principal):>12}  {_money(row.balance):>12}{mark}"
        )
    if any(row.is_penalty_month for row in result.schedule):
        print("\n  * grace period violation interest charged")
    print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Card loan repayment calculator")
    parser.add_argument("amount", nargs="?", help="Purchase amount")
    parser.add_argument("--months", type=int, default=3, help="Term in months (default: 3)")
    parser.add_argument(
        "--product", default=settings.default_product, choices=sorted(PRODUCTS),
        help=f"Loan product (default: {settings.default_product})",
    )
    parser.add_argument("--rate", help="Monthly rate in percent (default: product nominal rate)")
    parser.add_argument("--start", type=date.fromisoformat, default=None, help="Purchase date YYYY-MM-DD (default: today)")
    parser.add_argument("--grace-violation", action="store_true", help="Grace period violated")
    parser.add_argument("--cash-withdrawal", action="store_true", help="Cash withdrawal (fee charged)")
    parser.add_argument("--fee-amortized", action="store_true", help="Spread the withdrawal fee over the term")
    parser.add_argument("--products", action="store_true", help="List loan products and exit")
    return parser


def main(argv: list[str] | None = None) -> None:
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.products:
        print_products()
        return

    if not args.amount:
        parser.error("amount is required (unless using --products)")

    try:
        amount = Decimal(args.amount.replace(",", ""))
        rate = Decimal(args.rate) if args.rate is not None else None
    except InvalidOperation:
        parser.error("amount and --rate must be numbers")
    if not amount.is_finite() or (rate is not None and not rate.is_finite()):
        parser.error("amount and --rate must be finite numbers")
    if amount > settings.max_amount:
        parser.error(f"amount exceeds {settings.max_amount}")
    if args.months > settings.max_term_months:
        parser.error(f"--months exceeds {settings.max_term_months}")

    try:
        product = get_product(args.product)
    except UnknownProductError as e:
        # a default taken from settings is not checked against --product choices
        parser.error(str(e))
    request = LoanRequest.for_product(
        product,
        amount=amount,
        months=args.months,
        start_date=args.start or date.today(),
        monthly_rate=rate,
        flags=LoanFlags(
            grace_period_violation=args.grace_violation,
            cash_withdrawal=args.cash_withdrawal,
            fee_amortized=args.fee_amortized,
        ),
    )
    if request.flags != LoanFlags(args.grace_violation, args.cash_withdrawal, args.fee_amortized):
        logger.warning("Some options do not apply to %s and were ignored", product.id)

    result = compute(request)
    print_summary(request, result)
    print_schedule(result)


if __name__ == "__main__":
    main()
