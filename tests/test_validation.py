from datetime import date

import pytest

from api.assets.models import AssetCreate
from api.categories.models import CategoryCreate
from api.imports.models import AssetImport
from core import validation
from core.errors import ValidationError

TODAY = date(2025, 6, 30)


def make_asset(**overrides):
    fields = {
        "name": "Test Computer",
        "date_placed_in_service": "2024-01-15",
        "cost": 2000.0,
        "salvage_value": 200.0,
        "useful_life_years": 5,
        "property_class": "5",
    }
    fields.update(overrides)
    return AssetCreate(**fields)


def make_row(**overrides):
    fields = {
        "name": "Imported Printer",
        "date_placed_in_service": "2023-03-01",
        "cost": 500.0,
        "salvage_value": 50.0,
        "useful_life_years": 3,
    }
    fields.update(overrides)
    return AssetImport(**fields)


def test_valid_asset_has_no_errors():
    assert validation.collect_asset_errors(make_asset(), today=TODAY) == []
    validation.validate_asset(make_asset(), today=TODAY)


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"name": "   "}, "Asset name is required"),
        ({"name": "x" * 201}, "Asset name must be 200 characters or less"),
        ({"cost": 0.0, "salvage_value": 0.0}, "Cost must be greater than $0"),
        ({"salvage_value": -1.0}, "Salvage value cannot be negative"),
        ({"salvage_value": 2000.01}, "Salvage value cannot exceed cost"),
        ({"useful_life_years": 0}, "Useful life must be at least 1 year"),
        ({"useful_life_years": None}, "Useful life must be at least 1 year"),
        ({"property_class": "12"}, "Invalid property class: 12"),
        ({"date_placed_in_service": "2025-07-01"}, "Date placed in service cannot be in the future"),
        ({"date_placed_in_service": "01/15/2024"},
         "Invalid date format for date placed in service (use YYYY-MM-DD)"),
        ({"description": "d" * 501}, "Description must be 500 characters or less"),
        ({"notes": "n" * 2001}, "Notes must be 2000 characters or less"),
    ],
)
def test_single_asset_rule(overrides, message):
    errors = validation.collect_asset_errors(make_asset(**overrides), today=TODAY)
    assert errors == [message]

    with pytest.raises(ValidationError) as exc_info:
        validation.validate_asset(make_asset(**overrides), today=TODAY)
    assert str(exc_info.value) == message
    assert exc_info.value.errors == [message]


@pytest.mark.parametrize("property_class", ["3", "5", "7", "10", "15", "20", "27.5", "39", "", None])
def test_accepted_property_classes(property_class):
    errors = validation.collect_asset_errors(make_asset(property_class=property_class), today=TODAY)
    assert errors == []


def test_service_date_today_is_allowed():
    errors = validation.collect_asset_errors(make_asset(date_placed_in_service="2025-06-30"), today=TODAY)
    assert errors == []


def test_salvage_equal_to_cost_is_allowed():
    errors = validation.collect_asset_errors(make_asset(salvage_value=2000.0), today=TODAY)
    assert errors == []


def test_all_violations_reported_together():
    asset = make_asset(cost=0.0, salvage_value=-5.0, useful_life_years=0, property_class="12")

    with pytest.raises(ValidationError) as exc_info:
        validation.validate_asset(asset, today=TODAY)

    error = exc_info.value
    assert error.errors == [
        "Cost must be greater than $0",
        "Salvage value cannot be negative",
        "Useful life must be at least 1 year",
        "Invalid property class: 12",
    ]
    assert str(error) == (
        "Validation failed: Cost must be greater than $0; Salvage value cannot be negative; "
        "Useful life must be at least 1 year; Invalid property class: 12"
    )


def test_asset_disposal_fields_checked_when_present():
    errors = validation.collect_asset_errors(
        make_asset(disposed_date="2023-12-31", disposed_value=-1.0), today=TODAY
    )
    assert errors == [
        "Disposal date must be on or after the date placed in service",
        "Disposal value cannot be negative",
    ]


def test_valid_disposal():
    assert validation.collect_disposal_errors("2025-03-01", 150.0, "2024-01-15", today=TODAY) == []
    # Same day as service start
    assert validation.collect_disposal_errors("2024-01-15", None, date(2024, 1, 15), today=TODAY) == []


@pytest.mark.parametrize(
    "disposed_date, disposed_value, message",
    [
        ("", None, "Disposal date is required"),
        (None, None, "Disposal date is required"),
        ("2025/03/01", None, "Invalid disposal date format (use YYYY-MM-DD)"),
        ("2025-07-01", None, "Disposal date cannot be in the future"),
        ("2023-06-01", None, "Disposal date must be on or after the date placed in service"),
        ("2025-03-01", -0.01, "Disposal value cannot be negative"),
    ],
)
def test_disposal_rules(disposed_date, disposed_value, message):
    errors = validation.collect_disposal_errors(disposed_date, disposed_value, "2024-01-15", today=TODAY)
    assert errors == [message]

    with pytest.raises(ValidationError):
        validation.validate_disposal(disposed_date, disposed_value, "2024-01-15", today=TODAY)


def test_valid_category():
    category = CategoryCreate(name="Computer Equipment", default_useful_life=5, default_property_class="5")
    assert validation.collect_category_errors(category) == []


def test_category_rules():
    category = CategoryCreate(name=" ", default_useful_life=0, default_property_class="4")

    with pytest.raises(ValidationError) as exc_info:
        validation.validate_category(category)

    assert exc_info.value.errors == [
        "Category name is required",
        "Default useful life must be at least 1 year",
        "Invalid default property class: 4",
    ]


def test_category_name_length():
    errors = validation.collect_category_errors(CategoryCreate(name="c" * 101))
    assert errors == ["Category name must be 100 characters or less"]


def test_valid_import_row():
    assert validation.collect_import_row_errors(make_row(), 2, today=TODAY) == []


def test_import_row_messages_carry_row_number():
    with pytest.raises(ValidationError) as exc_info:
        validation.validate_import_row(make_row(cost=0.0, salvage_value=None), 7, today=TODAY)

    error = exc_info.value
    assert error.errors == ["Row 7: Cost must be greater than $0"]
    assert "Row 7" in str(error)
    assert "Cost must be greater than" in str(error)


def test_import_row_salvage_message_reports_amounts():
    errors = validation.collect_import_row_errors(make_row(salvage_value=600.0), 4, today=TODAY)
    assert errors == ["Row 4: Salvage value ($600.00) cannot exceed cost ($500.00)"]


def test_import_row_date_and_class_messages():
    errors = validation.collect_import_row_errors(
        make_row(date_placed_in_service="2030-01-01", property_class="8"), 3, today=TODAY
    )
    assert errors == [
        "Row 3: Date cannot be in the future",
        "Row 3: Invalid property class '8'",
    ]

    errors = validation.collect_import_row_errors(
        make_row(date_placed_in_service="March 2023"), 5, today=TODAY
    )
    assert errors == ["Row 5: Invalid date format 'March 2023' (use YYYY-MM-DD)"]


def test_parse_date():
    assert validation.parse_date("2024-01-15") == date(2024, 1, 15)
    assert validation.parse_date(" 2024-01-15 ") == date(2024, 1, 15)
    assert validation.parse_date(date(2024, 1, 15)) == date(2024, 1, 15)
    assert validation.parse_date("2024-02-30") is None
    assert validation.parse_date("15/01/2024") is None
    assert validation.parse_date(None) is None


@pytest.mark.parametrize(
    "field, value, message",
    [
        ("cost", float("inf"), "Cost must be a finite amount"),
        ("cost", float("nan"), "Cost must be a finite amount"),
        ("salvage_value", float("inf"), "Salvage value must be a finite amount"),
        ("salvage_value", float("nan"), "Salvage value must be a finite amount"),
    ],
)
def test_non_finite_amounts_are_rejected(field, value, message):
    # model_copy skips field validation, like a record built outside the API
    asset = make_asset().model_copy(update={field: value})
    assert validation.collect_asset_errors(asset, today=TODAY) == [message]


def test_non_finite_disposal_value_is_rejected():
    errors = validation.collect_disposal_errors("2025-03-01", float("inf"), "2024-01-15", today=TODAY)
    assert errors == ["Disposal value must be a finite amount"]


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"cost": float("inf")}, "Row 2: Cost must be a finite amount"),
        ({"cost": float("nan")}, "Row 2: Cost must be a finite amount"),
        ({"salvage_value": float("nan")}, "Row 2: Salvage value must be a finite amount"),
    ],
)
def test_import_row_non_finite_amounts(overrides, message):
    errors = validation.collect_import_row_errors(make_row(**overrides), 2, today=TODAY)
    assert errors == [message]


def test_blank_disposal_date_means_not_disposed():
    assert validation.collect_asset_errors(make_asset(disposed_date=""), today=TODAY) == []

    errors = validation.collect_asset_errors(
        make_asset(disposed_date="  ", disposed_value=100.0), today=TODAY
    )
    assert errors == ["Disposal date is required"]
