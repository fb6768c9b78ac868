# core/depreciation.py
"""
Straight-line depreciation.

`generate_schedule` builds the year-by-year schedule that gets persisted for
an asset. `current_book_value` and `depreciation_for_year` answer point in
time questions from the same inputs without a materialized schedule.

Any object exposing `id`, `cost`, `salvage_value`, `useful_life_years`,
`date_placed_in_service` and `disposed_date` can be passed in: ORM rows,
request models and import candidates all qualify. Dates may be `date`
objects or `YYYY-MM-DD` strings.
"""
import math
from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class ScheduleEntry:
    """One year of a depreciation schedule, rounded to cents."""
    asset_id: int | None
    year: int
    beginning_book_value: float
    depreciation_expense: float
    accumulated_depreciation: float
    ending_book_value: float


def round_money(value: float) -> float:
    """Round to cents, halves away from zero."""
    return math.copysign(math.floor(abs(value) * 100.0 + 0.5), value) / 100.0


def year_of(value: date | str) -> int:
    """Calendar year of a date or a YYYY-MM-DD string."""
    if isinstance(value, (date, datetime)):
        return value.year
    return int(str(value).strip().split("-", 1)[0])


def annual_depreciation(asset) -> float:
    """Unrounded flat annual expense."""
    return (asset.cost - asset.salvage_value) / asset.useful_life_years


def generate_schedule(asset) -> list[ScheduleEntry]:
    """
    Build the full straight-line schedule for a validated asset.

    The unrounded book value carries between years; each stored field is
    rounded on its own. The last year takes whatever is left above salvage
    so the final ending value lands on salvage exactly.
    """
    life = asset.useful_life_years
    annual = annual_depreciation(asset)
    start_year = year_of(asset.date_placed_in_service)

    schedule: list[ScheduleEntry] = []
    accumulated = 0.0
    book_value = float(asset.cost)

    for i in range(life):
        beginning = book_value
        if i == life - 1:
            expense = book_value - asset.salvage_value
        else:
            expense = annual

        accumulated += expense
        if i == life - 1:
            book_value = float(asset.salvage_value)
        else:
            book_value -= expense

        schedule.append(
            ScheduleEntry(
                asset_id=asset.id,
                year=start_year + i,
                beginning_book_value=round_money(beginning),
                depreciation_expense=round_money(expense),
                accumulated_depreciation=round_money(accumulated),
                ending_book_value=round_money(book_value),
            )
        )

    return schedule


def current_book_value(asset, as_of_year: int) -> float:
    """
    Book value at the end of `as_of_year`, floored at salvage value.

    Years before service return cost; years after the useful life return
    salvage value.
    """
    start_year = year_of(asset.date_placed_in_service)
    years_elapsed = max(0, min(as_of_year - start_year + 1, asset.useful_life_years))
    accumulated = annual_depreciation(asset) * years_elapsed
    return round_money(max(asset.cost - accumulated, asset.salvage_value))


def depreciation_for_year(asset, year: int) -> float:
    """
    Flat annual expense for `year`, or 0 outside the service span and for
    years after the disposal year.

    No final-year plug is applied here, so the last service year can differ
    from the persisted schedule by a few cents.
    """
    start_year = year_of(asset.date_placed_in_service)
    end_year = start_year + asset.useful_life_years - 1
    if year < start_year or year > end_year:
        return 0.0

    disposed_date = getattr(asset, "disposed_date", None)
    if disposed_date and year > year_of(disposed_date):
        return 0.0

    return round_money(annual_depreciation(asset))
