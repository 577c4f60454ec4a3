from datetime import date

from loancalc.engine.dates import add_months, days_between, first_payment_date, on_day, row_date
from loancalc.engine.products import get_product


class TestAddMonths:
    def test_same_day_next_month(self):
        assert add_months(date(2025, 1, 15), 1) == date(2025, 2, 15)

    def test_jan_31_clamps_to_feb_28(self):
        assert add_months(date(2025, 1, 31), 1) == date(2025, 2, 28)

    def test_jan_31_leap_year(self):
        assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)

    def test_offset_from_start_not_chained(self):
        # Month 2 from Jan 31 is Mar 31, not Mar 28
        assert add_months(date(2025, 1, 31), 2) == date(2025, 3, 31)

    def test_year_rollover(self):
        assert add_months(date(2025, 11, 30), 3) == date(2026, 2, 28)


class TestOnDay:
    def test_31_day_month(self):
        assert on_day(date(2025, 1, 1), 30) == date(2025, 1, 30)

    def test_30_day_month(self):
        assert on_day(date(2025, 4, 1), 30) == date(2025, 4, 30)

    def test_february_clamps(self):
        assert on_day(date(2025, 2, 1), 30) == date(2025, 2, 28)

    def test_leap_february_clamps(self):
        assert on_day(date(2024, 2, 10), 30) == date(2024, 2, 29)


class TestStandardRule:
    def test_rows_follow_start_day(self):
        product = get_product("monobank_black")
        start = date(2025, 1, 15)
        assert [row_date(start, product, i) for i in (1, 2, 3)] == [
            date(2025, 2, 15),
            date(2025, 3, 15),
            date(2025, 4, 15),
        ]

    def test_first_payment_is_row_one(self):
        product = get_product("pumb_installment")
        assert first_payment_date(date(2025, 5, 31), product) == date(2025, 6, 30)


class TestFixedDayRule:
    def test_first_due_is_30th_of_next_month(self):
        product = get_product("pumb_credit_card")
        assert first_payment_date(date(2025, 3, 5), product) == date(2025, 4, 30)

    def test_purchase_late_in_month(self):
        product = get_product("pumb_credit_card")
        assert first_payment_date(date(2025, 3, 31), product) == date(2025, 4, 30)

    def test_february_in_sequence(self):
        product = get_product("pumb_credit_card")
        start = date(2024, 12, 20)
        assert [row_date(start, product, i) for i in (1, 2, 3, 4)] == [
            date(2025, 1, 30),
            date(2025, 2, 28),
            date(2025, 3, 30),
            date(2025, 4, 30),
        ]

    def test_leap_february(self):
        product = get_product("pumb_credit_card")
        assert first_payment_date(date(2024, 1, 10), product) == date(2024, 2, 29)


class TestDaysBetween:
    def test_forward(self):
        assert days_between(date(2025, 1, 15), date(2025, 2, 28)) == 44

    def test_absolute(self):
        assert days_between(date(2025, 2, 28), date(2025, 1, 15)) == 44
