from __future__ import annotations

from datetime import date

from budgetbook.services.periods import Period, month_key, shift_month, trailing_month_keys


class DescribeShiftMonth:
    def it_should_cross_year_boundaries(self):
        assert shift_month(date(2025, 1, 15), -1) == date(2024, 12, 15)
        assert shift_month(date(2024, 12, 15), 1) == date(2025, 1, 15)

    def it_should_clamp_to_the_last_day_of_shorter_months(self):
        assert shift_month(date(2025, 3, 31), -1) == date(2025, 2, 28)
        assert shift_month(date(2024, 3, 31), -1) == date(2024, 2, 29)

    def it_should_move_by_a_full_year(self):
        assert shift_month(date(2025, 10, 19), 12) == date(2026, 10, 19)


class DescribeTrailingMonthKeys:
    def it_should_end_at_the_current_month_oldest_first(self):
        assert trailing_month_keys(3, date(2025, 2, 10)) == ["2024-12", "2025-01", "2025-02"]

    def it_should_return_only_the_current_month_for_one(self):
        assert trailing_month_keys(1, date(2025, 2, 10)) == ["2025-02"]


class DescribePeriod:
    def it_should_cover_the_whole_calendar_month(self):
        period = Period.month_of(date(2024, 2, 10))

        assert period.start == date(2024, 2, 1)
        assert period.end == date(2024, 2, 29)
        assert period.month_key == "2024-02"

    def it_should_include_both_ends(self):
        period = Period(start=date(2025, 1, 1), end=date(2025, 1, 31))

        assert period.contains(date(2025, 1, 1))
        assert period.contains(date(2025, 1, 31))
        assert not period.contains(date(2025, 2, 1))
        assert not period.contains(date(2024, 12, 31))

    def it_should_build_a_trailing_window(self):
        period = Period.trailing_months(3, date(2025, 2, 10))

        assert period.start == date(2024, 12, 1)
        assert period.end == date(2025, 2, 28)

    def it_should_derive_month_key(self):
        assert month_key(date(2025, 7, 4)) == "2025-07"
