# api/imports/parser.py
"""
Reading asset rows out of an .xlsx workbook.

Only the first sheet is read. Row 1 is the header; blank rows are skipped.
Columns, in order: Asset Name, Description, Category, Date Placed in
Service, Cost, Salvage Value, Useful Life (Years), Property Class, Notes.
"""
import math
import zipfile
from collections.abc import Iterator
from datetime import date, datetime
from io import BytesIO

from openpyxl import load_workbook
from openpyxl.utils.datetime import from_excel
from openpyxl.utils.exceptions import InvalidFileException

from core.errors import DepreciationError
from .models import AssetImport

TEMPLATE_HEADERS = [
    "Asset Name",
    "Description",
    "Category",
    "Date Placed in Service",
    "Cost",
    "Salvage Value",
    "Useful Life (Years)",
    "Property Class",
    "Notes",
]

NAME, DESCRIPTION, CATEGORY, SERVICE_DATE, COST, SALVAGE, USEFUL_LIFE, PROPERTY_CLASS, NOTES = range(9)


class ImportFileError(DepreciationError):
    """Raised when the upload is not a readable workbook."""
    pass


class RowParseError(DepreciationError):
    """Raised when a row is missing a required cell or has an unusable value."""
    pass


def iter_rows(content: bytes) -> Iterator[tuple[int, tuple]]:
    """
    Yield `(row_number, cells)` for each non-blank data row of the first
    sheet. Row numbers are 1-based sheet rows, so the first data row is 2.
    """
    try:
        workbook = load_workbook(BytesIO(content), read_only=True, data_only=True)
    except (InvalidFileException, zipfile.BadZipFile, KeyError, OSError) as exc:
        raise ImportFileError(f"Could not read workbook: {exc}") from exc

    try:
        if not workbook.worksheets:
            raise ImportFileError("No sheets found")
        sheet = workbook.worksheets[0]
        for row_number, cells in enumerate(sheet.iter_rows(min_row=2, values_only=True), start=2):
            if all(_is_empty(c) for c in cells):
                continue
            yield row_number, cells
    finally:
        workbook.close()


def _is_empty(value) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def _cell(cells: tuple, idx: int):
    return cells[idx] if idx < len(cells) else None


def _format_number(value: float) -> str:
    # 5.0 -> "5", 27.5 -> "27.5"
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def get_string(cells: tuple, idx: int) -> str | None:
    value = _cell(cells, idx)
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return _format_number(value)
    return None


def get_float(cells: tuple, idx: int) -> float | None:
    value = _cell(cells, idx)
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def get_int(cells: tuple, idx: int) -> int | None:
    value = _cell(cells, idx)
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            return None
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def get_date(cells: tuple, idx: int) -> str:
    """
    Normalize the service date cell to YYYY-MM-DD where possible.

    Spreadsheet dates and serial numbers are converted; "MM/DD/YYYY" text is
    reordered; any other text is passed through for validation to judge.
    """
    value = _cell(cells, idx)
    if value is None:
        raise RowParseError("Date Placed in Service is required")
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return from_excel(value).date().isoformat()
        except (OverflowError, ValueError) as exc:
            raise RowParseError("Invalid date format") from exc
    if isinstance(value, str):
        text = value.strip()
        parts = text.split("/")
        if len(parts) == 3 and all(p.strip().isdigit() for p in parts):
            month, day, year = (int(p) for p in parts)
            return f"{year:04d}-{month:02d}-{day:02d}"
        return text
    raise RowParseError("Invalid date format")


def parse_row(cells: tuple) -> AssetImport:
    """
    Turn one row into an import candidate.

    Raises:
        RowParseError: If a required cell is missing or unreadable
    """
    name = get_string(cells, NAME)
    if name is None:
        raise RowParseError("Asset Name is required")

    date_placed_in_service = get_date(cells, SERVICE_DATE)

    cost = get_float(cells, COST)
    if cost is None:
        raise RowParseError("Cost is required")

    useful_life_years = get_int(cells, USEFUL_LIFE)
    if useful_life_years is None:
        raise RowParseError("Useful Life is required")

    return AssetImport(
        name=name,
        description=get_string(cells, DESCRIPTION),
        category=get_string(cells, CATEGORY),
        date_placed_in_service=date_placed_in_service,
        cost=cost,
        salvage_value=get_float(cells, SALVAGE),
        useful_life_years=useful_life_years,
        property_class=get_string(cells, PROPERTY_CLASS),
        notes=get_string(cells, NOTES),
    )
