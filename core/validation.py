# core/validation.py
"""
Field and cross-field rules for assets, categories, disposals and
spreadsheet import rows.

Every rule is checked and every violation is reported together. The
`collect_*` functions return the list of messages; the `validate_*`
functions raise `ValidationError` with that list when it is not empty.

Future-date checks compare against `today`, which callers pass in. When it
is omitted the local date is used.
"""
import math
from datetime import date, datetime

from core.errors import ValidationError

VALID_PROPERTY_CLASSES = ("3", "5", "7", "10", "15", "20", "27.5", "39")

ASSET_NAME_MAX = 200
CATEGORY_NAME_MAX = 100
DESCRIPTION_MAX = 500
NOTES_MAX = 2000


def parse_date(value) -> date | None:
    """Parse a `date` or a YYYY-MM-DD string. Returns None when unparseable."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except ValueError:
        return None


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _invalid_property_class(value) -> str | None:
    """Return the trimmed class when it is set but not in the closed set."""
    if value is None:
        return None
    trimmed = str(value).strip()
    if trimmed and trimmed not in VALID_PROPERTY_CLASSES:
        return trimmed
    return None


def _disposal_errors(disposed_date, disposed_value, service_date, today: date) -> list[str]:
    errors = []

    if _is_blank(disposed_date):
        errors.append("Disposal date is required")
    else:
        parsed = parse_date(disposed_date)
        if parsed is None:
            errors.append("Invalid disposal date format (use YYYY-MM-DD)")
        else:
            if parsed > today:
                errors.append("Disposal date cannot be in the future")
            placed = parse_date(service_date)
            if placed is not None and parsed < placed:
                errors.append("Disposal date must be on or after the date placed in service")

    if disposed_value is not None:
        if not math.isfinite(disposed_value):
            errors.append("Disposal value must be a finite amount")
        elif disposed_value < 0:
            errors.append("Disposal value cannot be negative")

    return errors


def collect_asset_errors(asset, today: date | None = None) -> list[str]:
    today = today or date.today()
    errors = []

    name = (asset.name or "").strip()
    if not name:
        errors.append("Asset name is required")
    elif len(name) > ASSET_NAME_MAX:
        errors.append(f"Asset name must be {ASSET_NAME_MAX} characters or less")

    if _is_blank(asset.date_placed_in_service):
        errors.append("Date placed in service is required")
    else:
        placed = parse_date(asset.date_placed_in_service)
        if placed is None:
            errors.append("Invalid date format for date placed in service (use YYYY-MM-DD)")
        elif placed > today:
            errors.append("Date placed in service cannot be in the future")

    if not math.isfinite(asset.cost):
        errors.append("Cost must be a finite amount")
    elif asset.cost <= 0:
        errors.append("Cost must be greater than $0")

    if not math.isfinite(asset.salvage_value):
        errors.append("Salvage value must be a finite amount")
    elif asset.salvage_value < 0:
        errors.append("Salvage value cannot be negative")
    elif math.isfinite(asset.cost) and asset.salvage_value > asset.cost:
        errors.append("Salvage value cannot exceed cost")

    if asset.useful_life_years is None or asset.useful_life_years < 1:
        errors.append("Useful life must be at least 1 year")

    bad_class = _invalid_property_class(asset.property_class)
    if bad_class is not None:
        errors.append(f"Invalid property class: {bad_class}")

    if asset.description is not None and len(asset.description) > DESCRIPTION_MAX:
        errors.append(f"Description must be {DESCRIPTION_MAX} characters or less")

    if asset.notes is not None and len(asset.notes) > NOTES_MAX:
        errors.append(f"Notes must be {NOTES_MAX} characters or less")

    # Disposal fields are checked together once either one is set.
    if not _is_blank(asset.disposed_date) or asset.disposed_value is not None:
        errors.extend(
            _disposal_errors(
                asset.disposed_date,
                asset.disposed_value,
                asset.date_placed_in_service,
                today,
            )
        )

    return errors


def collect_category_errors(category) -> list[str]:
    errors = []

    name = (category.name or "").strip()
    if not name:
        errors.append("Category name is required")
    elif len(name) > CATEGORY_NAME_MAX:
        errors.append(f"Category name must be {CATEGORY_NAME_MAX} characters or less")

    if category.default_useful_life is not None and category.default_useful_life < 1:
        errors.append("Default useful life must be at least 1 year")

    bad_class = _invalid_property_class(category.default_property_class)
    if bad_class is not None:
        errors.append(f"Invalid default property class: {bad_class}")

    return errors


def collect_disposal_errors(
    disposed_date,
    disposed_value: float | None,
    date_placed_in_service,
    today: date | None = None,
) -> list[str]:
    return _disposal_errors(disposed_date, disposed_value, date_placed_in_service, today or date.today())


def collect_import_row_errors(candidate, row_number: int, today: date | None = None) -> list[str]:
    """Asset rules for a spreadsheet row; every message starts with "Row <n>: "."""
    today = today or date.today()
    prefix = f"Row {row_number}"
    errors = []

    name = (candidate.name or "").strip()
    if not name:
        errors.append(f"{prefix}: Asset name is required")
    elif len(name) > ASSET_NAME_MAX:
        errors.append(f"{prefix}: Asset name must be {ASSET_NAME_MAX} characters or less")

    if _is_blank(candidate.date_placed_in_service):
        errors.append(f"{prefix}: Date placed in service is required")
    else:
        placed = parse_date(candidate.date_placed_in_service)
        if placed is None:
            errors.append(
                f"{prefix}: Invalid date format '{candidate.date_placed_in_service}' (use YYYY-MM-DD)"
            )
        elif placed > today:
            errors.append(f"{prefix}: Date cannot be in the future")

    if not math.isfinite(candidate.cost):
        errors.append(f"{prefix}: Cost must be a finite amount")
    elif candidate.cost <= 0:
        errors.append(f"{prefix}: Cost must be greater than $0")

    salvage = candidate.salvage_value
    if salvage is not None:
        if not math.isfinite(salvage):
            errors.append(f"{prefix}: Salvage value must be a finite amount")
        elif salvage < 0:
            errors.append(f"{prefix}: Salvage value cannot be negative")
        elif math.isfinite(candidate.cost) and salvage > candidate.cost:
            errors.append(
                f"{prefix}: Salvage value (${salvage:.2f}) cannot exceed cost (${candidate.cost:.2f})"
            )

    if candidate.useful_life_years < 1:
        errors.append(f"{prefix}: Useful life must be at least 1 year")

    bad_class = _invalid_property_class(candidate.property_class)
    if bad_class is not None:
        errors.append(f"{prefix}: Invalid property class '{bad_class}'")

    if candidate.description is not None and len(candidate.description) > DESCRIPTION_MAX:
        errors.append(f"{prefix}: Description must be {DESCRIPTION_MAX} characters or less")

    if candidate.notes is not None and len(candidate.notes) > NOTES_MAX:
        errors.append(f"{prefix}: Notes must be {NOTES_MAX} characters or less")

    return errors


def _raise_if_any(errors: list[str]) -> None:
    if errors:
        raise ValidationError(errors)


def validate_asset(asset, today: date | None = None) -> None:
    _raise_if_any(collect_asset_errors(asset, today))


def validate_category(category) -> None:
    _raise_if_any(collect_category_errors(category))


def validate_disposal(
    disposed_date,
    disposed_value: float | None,
    date_placed_in_service,
    today: date | None = None,
) -> None:
    _raise_if_any(collect_disposal_errors(disposed_date, disposed_value, date_placed_in_service, today))


def validate_import_row(candidate, row_number: int, today: date | None = None) -> None:
    _raise_if_any(collect_import_row_errors(candidate, row_number, today))
