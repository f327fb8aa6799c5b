"""Tests for the straight-line depreciation calculator."""
from datetime import date
from decimal import Decimal

import pytest

from assetdesk.core.depreciation import age_in_months, compute_depreciation, summarize_portfolio

AS_OF = date(2025, 1, 1)


class TestAgeInMonths:
    def test_whole_years(self):
        assert age_in_months(date(2023, 1, 15), AS_OF) == 24

    def test_day_of_month_is_ignored(self):
        """Bought on the 28th, checked on the 1st of the next month: one month."""
        assert age_in_months(date(2025, 1, 28), date(2025, 2, 1)) == 1

    def test_same_month(self):
        assert age_in_months(date(2025, 1, 31), date(2025, 1, 1)) == 0

    def test_future_purchase_is_zero(self):
        assert age_in_months(date(2026, 6, 1), AS_OF) == 0

    def test_missing_purchase_date_is_zero(self):
        assert age_in_months(None, AS_OF) == 0


class TestComputeDepreciation:
    def test_two_years_into_five(self):
        """1200 over 5 years, 24 months old."""
        snap = compute_depreciation(Decimal("1200"), date(2023, 1, 15), 5, as_of=AS_OF)
        assert snap.age_in_months == 24
        assert snap.monthly_depreciation == Decimal("20.00")
        assert snap.accumulated_depreciation == Decimal("480.00")
        assert snap.current_book_value == Decimal("720.00")
        assert snap.remaining_months == 36
        assert snap.depreciation_percent == Decimal("40.00")
        assert snap.is_fully_depreciated is False

    def test_bought_today(self):
        """3200 over 10 years, purchased on the valuation date."""
        snap = compute_depreciation(Decimal("3200"), AS_OF, 10, as_of=AS_OF)
        assert snap.age_in_months == 0
        assert snap.current_book_value == Decimal("3200.00")
        assert snap.monthly_depreciation == Decimal("26.67")
        assert snap.accumulated_depreciation == Decimal("0.00")

    def test_past_end_of_life_is_capped(self):
        """300 over 3 years, 40 months old: 36 months of life exhausted."""
        snap = compute_depreciation(Decimal("300"), date(2022, 1, 1), 3, as_of=date(2025, 5, 1))
        assert snap.age_in_months == 40
        assert snap.accumulated_depreciation == Decimal("300.00")
        assert snap.current_book_value == Decimal("0.00")
        assert snap.is_fully_depreciated is True
        assert snap.remaining_months == 0
        assert snap.is_near_end_of_life is False

    def test_exactly_at_end_of_life(self):
        """No rounding residue once age reaches the full life."""
        snap = compute_depreciation(Decimal("1000"), date(2022, 1, 1), 3, as_of=date(2025, 1, 1))
        assert snap.accumulated_depreciation == Decimal("1000.00")
        assert snap.current_book_value == Decimal("0.00")
        assert snap.is_fully_depreciated is True

    def test_zero_life_does_not_depreciate(self):
        snap = compute_depreciation(Decimal("500"), date(2015, 1, 1), 0, as_of=AS_OF)
        assert snap.monthly_depreciation == Decimal("0.00")
        assert snap.current_book_value == Decimal("500.00")
        assert snap.is_fully_depreciated is False
        assert snap.is_near_end_of_life is False

    def test_missing_life_treated_as_zero(self):
        snap = compute_depreciation(Decimal("500"), date(2015, 1, 1), None, as_of=AS_OF)
        assert snap.useful_life_years == 0
        assert snap.current_book_value == Decimal("500.00")

    def test_zero_cost(self):
        snap = compute_depreciation(Decimal("0"), date(2024, 1, 1), 5, as_of=AS_OF)
        assert snap.current_book_value == Decimal("0.00")
        assert snap.depreciation_percent == Decimal("0.00")
        assert snap.is_low_value is False

    def test_negative_cost_rejected(self):
        with pytest.raises(ValueError):
            compute_depreciation(Decimal("-1"), AS_OF, 5, as_of=AS_OF)

    def test_accepts_float_cost(self):
        snap = compute_depreciation(1200.0, date(2023, 1, 15), 5, as_of=AS_OF)
        assert snap.current_book_value == Decimal("720.00")

    def test_rounds_half_up_to_cents(self):
        snap = compute_depreciation(Decimal("1000"), date(2024, 12, 1), 3, as_of=AS_OF)
        assert snap.monthly_depreciation == Decimal("27.78")
        assert snap.current_book_value == Decimal("972.22")

    def test_near_end_of_life(self):
        """Five months left of a one year life."""
        snap = compute_depreciation(Decimal("1200"), date(2024, 1, 1), 1, as_of=date(2024, 8, 1))
        assert snap.remaining_months == 5
        assert snap.is_near_end_of_life is True
        assert snap.current_book_value == Decimal("500.00")

    def test_near_end_of_life_threshold_is_configurable(self):
        snap = compute_depreciation(
            Decimal("1200"), date(2024, 1, 1), 1, as_of=date(2024, 8, 1), near_end_of_life_months=3
        )
        assert snap.is_near_end_of_life is False

    def test_low_value(self):
        """Book value under 10% of cost but not yet zero."""
        snap = compute_depreciation(Decimal("1000"), date(2024, 1, 1), 1, as_of=date(2024, 12, 1))
        assert snap.current_book_value == Decimal("83.33")
        assert snap.is_low_value is True

    def test_not_low_value_when_fully_depreciated(self):
        snap = compute_depreciation(Decimal("1000"), date(2020, 1, 1), 1, as_of=AS_OF)
        assert snap.is_low_value is False


class TestDepreciationProperties:
    @pytest.mark.parametrize("cost,life", [(Decimal("1000"), 5), (Decimal("333.33"), 3), (Decimal("7"), 1)])
    def test_book_value_bounded_and_non_increasing(self, cost, life):
        previous = None
        for months in range(0, life * 12 + 13):
            as_of = date(2020 + months // 12, months % 12 + 1, 1)
            snap = compute_depreciation(cost, date(2020, 1, 1), life, as_of=as_of)
            assert Decimal("0") <= snap.current_book_value <= cost
            if previous is not None:
                assert snap.current_book_value <= previous
            previous = snap.current_book_value

    @pytest.mark.parametrize("life", [1, 2, 5, 10])
    def test_fully_depreciated_once_life_is_over(self, life):
        as_of = date(2020 + life, 1, 1)
        snap = compute_depreciation(Decimal("999.99"), date(2020, 1, 1), life, as_of=as_of)
        assert snap.is_fully_depreciated is True


class TestSummarizePortfolio:
    def test_totals(self):
        snaps = [
            compute_depreciation(Decimal("1200"), date(2023, 1, 15), 5, as_of=AS_OF),
            compute_depreciation(Decimal("3200"), AS_OF, 10, as_of=AS_OF),
            compute_depreciation(Decimal("100"), date(2020, 1, 1), 0, as_of=AS_OF),
        ]
        summary = summarize_portfolio(snaps)
        assert summary.asset_count == 3
        assert summary.total_cost == Decimal("4500.00")
        assert summary.total_accumulated_depreciation == Decimal("480.00")
        assert summary.total_book_value == Decimal("4020.00")
        assert summary.total_monthly_depreciation == Decimal("46.67")
        # the non-depreciating asset is left out of the average life
        assert summary.average_useful_life_years == Decimal("7.5")

    def test_empty(self):
        summary = summarize_portfolio([])
        assert summary.asset_count == 0
        assert summary.total_book_value == Decimal("0")
        assert summary.average_useful_life_years == Decimal("0")
