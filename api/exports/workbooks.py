# api/exports/workbooks.py
"""
openpyxl workbook builders for the import template and the depreciation
report.
"""
from io import BytesIO

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from api.imports.parser import TEMPLATE_HEADERS

MONEY_FORMAT = '"$"#,##0.00'
HEADER_FONT = Font(bold=True)


def _write_header(sheet, headers: list[str], widths: list[int]) -> None:
    for col, (header, width) in enumerate(zip(headers, widths), start=1):
        cell = sheet.cell(row=1, column=col, value=header)
        cell.font = HEADER_FONT
        sheet.column_dimensions[get_column_letter(col)].width = width


def _write_money(sheet, row: int, column: int, value: float) -> None:
    cell = sheet.cell(row=row, column=column, value=value)
    cell.number_format = MONEY_FORMAT


def _to_bytes(workbook: Workbook) -> bytes:
    buffer = BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


def build_template() -> bytes:
    """Blank import template with one example row."""
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = "Assets"
    _write_header(sheet, TEMPLATE_HEADERS, [25, 30, 20, 22, 15, 15, 20, 15, 35])

    sheet.append([
        "Example Computer",
        "Office workstation",
        "Equipment",
        "2024-01-15",
        2000.0,
        200.0,
        5,
        "5",
        "Main office",
    ])
    return _to_bytes(workbook)


def build_report(assets: list[dict], schedule_rows: list[tuple], yearly_totals: list[tuple]) -> bytes:
    """
    Three-sheet report: asset list with current book value, every schedule
    row, and scheduled depreciation per year.
    """
    workbook = Workbook()

    sheet = workbook.active
    sheet.title = "Assets"
    _write_header(
        sheet,
        ["Asset Name", "Category", "Cost", "Salvage Value", "Life (Yrs)",
         "Service Date", "Current Book Value", "Status"],
        [30, 20, 15, 15, 12, 15, 20, 12],
    )
    for row, asset in enumerate(assets, start=2):
        sheet.cell(row=row, column=1, value=asset["name"])
        sheet.cell(row=row, column=2, value=asset["category_name"] or "")
        _write_money(sheet, row, 3, asset["cost"])
        _write_money(sheet, row, 4, asset["salvage_value"])
        sheet.cell(row=row, column=5, value=asset["useful_life_years"])
        sheet.cell(row=row, column=6, value=asset["date_placed_in_service"])
        _write_money(sheet, row, 7, asset["book_value"])
        sheet.cell(row=row, column=8, value="Disposed" if asset["disposed"] else "Active")

    sheet = workbook.create_sheet("Depreciation Schedule")
    _write_header(
        sheet,
        ["Asset Name", "Year", "Beginning Value", "Depreciation", "Accumulated", "Ending Value"],
        [30, 10, 18, 15, 15, 15],
    )
    for row, (name, year, beginning, expense, accumulated, ending) in enumerate(schedule_rows, start=2):
        sheet.cell(row=row, column=1, value=name)
        sheet.cell(row=row, column=2, value=year)
        _write_money(sheet, row, 3, beginning)
        _write_money(sheet, row, 4, expense)
        _write_money(sheet, row, 5, accumulated)
        _write_money(sheet, row, 6, ending)

    sheet = workbook.create_sheet("Annual Summary")
    _write_header(sheet, ["Year", "Total Depreciation", "Asset Count"], [10, 20, 15])
    for row, (year, total, count) in enumerate(yearly_totals, start=2):
        sheet.cell(row=row, column=1, value=year)
        _write_money(sheet, row, 2, total)
        sheet.cell(row=row, column=3, value=count)

    return _to_bytes(workbook)
