"""
Straight-line depreciation calculator.

Age is counted in whole calendar months (day-of-month is ignored), the cost is
spread evenly over useful_life_years * 12 months and the book value never
drops below zero.
"""
from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def _money(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class DepreciationSnapshot:
    """Valuation of one asset at a given date."""

    cost: Decimal
    useful_life_years: int
    age_in_months: int
    monthly_depreciation: Decimal
    accumulated_depreciation: Decimal
    current_book_value: Decimal
    remaining_months: int
    depreciation_percent: Decimal
    is_fully_depreciated: bool
    is_near_end_of_life: bool
    is_low_value: bool


@dataclass
class PortfolioSummary:
    asset_count: int = 0
    total_cost: Decimal = Decimal("0")
    total_accumulated_depreciation: Decimal = Decimal("0")
    total_book_value: Decimal = Decimal("0")
    total_monthly_depreciation: Decimal = Decimal("0")
    average_useful_life_years: Decimal = Decimal("0")


def age_in_months(purchase_date: date | None, as_of: date) -> int:
    """
    Whole months between purchase and as_of, from the year/month difference only.
    A missing purchase date or one in the future gives 0.
    """
    if purchase_date is None:
        return 0
    months = (as_of.year - purchase_date.year) * 12 + (as_of.month - purchase_date.month)
    return max(0, months)


def compute_depreciation(
    cost: Decimal,
    purchase_date: date | None,
    useful_life_years: int | None,
    as_of: date | None = None,
    near_end_of_life_months: int = 6,
    low_value_ratio: Decimal = Decimal("0.10"),
) -> DepreciationSnapshot:
    """
    Compute the straight-line valuation of an asset at as_of (default: today).

    A useful life of 0 (or None) means no depreciation accrues: the monthly
    amount is 0 and the book value stays at cost.
    """
    cost = Decimal(str(cost))
    if cost < 0:
        raise ValueError("Cost must be zero or positive.")
    if as_of is None:
        as_of = date.today()
    life = max(0, useful_life_years or 0)
    total_months = life * 12

    age = age_in_months(purchase_date, as_of)

    if total_months > 0:
        monthly = cost / Decimal(total_months)
        if age >= total_months:
            accumulated = cost
        else:
            accumulated = min(cost, monthly * age)
    else:
        monthly = Decimal("0")
        accumulated = Decimal("0")

    book_value = _money(max(Decimal("0"), cost - accumulated))
    remaining = max(0, total_months - age)
    fully_depreciated = book_value == 0
    percent = _money(accumulated / cost * 100) if cost > 0 else Decimal("0.00")

    return DepreciationSnapshot(
        cost=_money(cost),
        useful_life_years=life,
        age_in_months=age,
        monthly_depreciation=_money(monthly),
        accumulated_depreciation=_money(accumulated),
        current_book_value=book_value,
        remaining_months=remaining,
        depreciation_percent=percent,
        is_fully_depreciated=fully_depreciated,
        # non-depreciating assets have no end of life
        is_near_end_of_life=(
            life > 0 and not fully_depreciated and remaining <= near_end_of_life_months
        ),
        is_low_value=Decimal("0") < book_value < cost * Decimal(str(low_value_ratio)),
    )


def summarize_portfolio(snapshots: list[DepreciationSnapshot]) -> PortfolioSummary:
    """Totals over a set of snapshots; the average life ignores non-depreciating assets."""
    summary = PortfolioSummary(asset_count=len(snapshots))
    lives = []
    for snap in snapshots:
        summary.total_cost += snap.cost
        summary.total_accumulated_depreciation += snap.accumulated_depreciation
        summary.total_book_value += snap.current_book_value
        summary.total_monthly_depreciation += snap.monthly_depreciation
        if snap.useful_life_years > 0:
            lives.append(snap.useful_life_years)

    if lives:
        summary.average_useful_life_years = (
            Decimal(sum(lives)) / Decimal(len(lives))
        ).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return summary
