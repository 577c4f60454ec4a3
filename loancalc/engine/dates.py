"""Payment date scheduling.

Two rules: STANDARD puts payment ``i`` exactly ``i`` months after the purchase
date; FIXED_DAY puts every payment on the product's due day of the months
following the purchase, clamped to the month length.
"""

from datetime import date

from dateutil.relativedelta import relativedelta

from loancalc.models.product import DateRule, ProductVariant


def add_months(start: date, months: int) -> date:
    """Shift by whole months; the day clamps to the last day of short months."""
    return start + relativedelta(months=months)


def on_day(anchor: date, day: int) -> date:
    """``day`` of ``anchor``'s month, or the month's last day if it is shorter."""
    # relativedelta(day=N) clamps to the month length
    return anchor + relativedelta(day=day)


def days_between(start: date, end: date) -> int:
    return abs((end - start).days)


def row_date(start: date, product: ProductVariant, month: int) -> date:
    """Calendar date of the ``month``-th installment (1-based)."""
    if product.date_rule is DateRule.FIXED_DAY:
        target = add_months(start.replace(day=1), month)
        return on_day(target, product.due_day or 30)
    return add_months(start, month)


def first_payment_date(start: date, product: ProductVariant) -> date:
    return row_date(start, product, 1)
