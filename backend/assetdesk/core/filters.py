"""In-memory filtering used by the listing endpoints."""
from datetime import date

ACQUISITION_WINDOWS = {"all", "this_year", "last_year"}


def matches_search(query: str | None, *values) -> bool:
    """Case-insensitive substring match against any of the given values."""
    if not query:
        return True
    needle = query.lower()
    return any(needle in str(v).lower() for v in values if v)


def acquired_in_window(purchase_date: date | None, window: str, as_of: date) -> bool:
    if window == "all":
        return True
    if purchase_date is None:
        return False
    if window == "this_year":
        return purchase_date.year == as_of.year
    if window == "last_year":
        return purchase_date.year == as_of.year - 1
    raise ValueError(f"Unknown acquisition window '{window}'. Valid: {sorted(ACQUISITION_WINDOWS)}")


def filter_assets(
    assets: list,
    status: str | None = None,
    category: str | None = None,
    room: str | None = None,
    search: str | None = None,
    acquired: str = "all",
    as_of: date | None = None,
) -> list:
    if acquired not in ACQUISITION_WINDOWS:
        raise ValueError(
            f"Unknown acquisition window '{acquired}'. Valid: {sorted(ACQUISITION_WINDOWS)}"
        )
    if as_of is None:
        as_of = date.today()
    result = []
    for asset in assets:
        if status and asset.status != status:
            continue
        if category and asset.category != category:
            continue
        if room and asset.room != room:
            continue
        if not matches_search(search, asset.id, asset.description):
            continue
        if not acquired_in_window(asset.purchase_date, acquired, as_of):
            continue
        result.append(asset)
    return result
