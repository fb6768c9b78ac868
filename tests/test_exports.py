from io import BytesIO

import pytest
from openpyxl import load_workbook

from api.imports.parser import TEMPLATE_HEADERS

XLSX = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _load(content: bytes):
    return load_workbook(BytesIO(content))


@pytest.mark.anyio
async def test_download_template(async_client):
    resp = await async_client.get("/api/v1/exports/template")
    assert resp.status_code == 200, resp.text
    assert resp.headers["content-type"] == XLSX
    assert "asset_import_template.xlsx" in resp.headers["content-disposition"]

    sheet = _load(resp.content).active
    assert [c.value for c in sheet[1]] == TEMPLATE_HEADERS
    assert sheet["A2"].value == "Example Computer"


@pytest.mark.anyio
async def test_template_can_be_imported(async_client):
    resp = await async_client.get("/api/v1/exports/template")

    resp = await async_client.post(
        "/api/v1/imports/assets",
        files={"file": ("template.xlsx", resp.content, XLSX)},
    )
    assert resp.status_code == 200, resp.text
    assert resp.json() == {"imported": 1, "errors": []}


@pytest.mark.anyio
async def test_download_report(async_client, asset_payload):
    resp = await async_client.post("/api/v1/assets", json=asset_payload(name="Report Plotter"))
    assert resp.status_code == 201, resp.text

    resp = await async_client.get("/api/v1/exports/report", params={"year": 2026})
    assert resp.status_code == 200, resp.text
    assert resp.headers["content-type"] == XLSX

    workbook = _load(resp.content)
    assert workbook.sheetnames == ["Assets", "Depreciation Schedule", "Annual Summary"]

    assets = workbook["Assets"]
    rows = [r for r in assets.iter_rows(min_row=2, values_only=True) if r[0] == "Report Plotter"]
    assert len(rows) == 1
    assert rows[0][2] == 2000.0
    assert rows[0][6] == 920.0
    assert rows[0][7] == "Active"

    schedule = workbook["Depreciation Schedule"]
    plotter_rows = [r for r in schedule.iter_rows(min_row=2, values_only=True) if r[0] == "Report Plotter"]
    assert [r[1] for r in plotter_rows] == [2024, 2025, 2026, 2027, 2028]
    assert plotter_rows[-1][5] == 200.0

    summary = workbook["Annual Summary"]
    years = [r[0] for r in summary.iter_rows(min_row=2, values_only=True)]
    assert 2024 in years
    assert years == sorted(years)
