"""
Unit tests for field validators.

Includes property-based testing with hypothesis for validators.
"""

from datetime import date, datetime, timezone
from decimal import Decimal

import pandas as pd
import pytest
from hypothesis import given
from hypothesis import strategies as st

from complaint_pipeline.core.validators import (
    DateValidator,
    LenderValidator,
    RequiredFieldValidator,
    UPBValidator,
    ValidationError,
)
from complaint_pipeline.core.validators.upb_validator import parse_leading_float

NOW = datetime(2025, 3, 20, 12, 0, 0)


def messages(result, severity=None):
    return [
        issue.message
        for issue in result.issues
        if severity is None or issue.severity == severity
    ]


class TestRequiredFieldValidator:
    """Tests for RequiredFieldValidator"""

    def test_present_value_passes(self):
        """Test a present value has no issues"""
        validator = RequiredFieldValidator("propertyAddress", {"label": "property address"})
        result = validator.validate("123 Main St", {})
        assert result.issues == []

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_missing_or_blank_is_error(self, value):
        """Test missing and whitespace-only values are errors"""
        validator = RequiredFieldValidator("propertyAddress", {"label": "property address"})
        result = validator.validate(value, {})
        assert messages(result, "error") == ["Missing or empty property address"]

    def test_short_value_is_warning(self):
        """Test values below min_length produce a warning, not an error"""
        validator = RequiredFieldValidator(
            "propertyAddress", {"label": "property address", "min_length": 5}
        )
        result = validator.validate(" 1 A ", {})
        assert result.errors == []
        assert messages(result, "warning") == ["Property address seems too short"]

    def test_label_defaults_to_field_name(self):
        """Test messages fall back to the field name"""
        result = RequiredFieldValidator("county").validate(None, {})
        assert messages(result) == ["Missing or empty county"]

    def test_check_raises_on_error(self):
        """Test the strict variant raises ValidationError"""
        validator = RequiredFieldValidator("county")
        with pytest.raises(ValidationError) as exc_info:
            validator.check(None, {})
        assert exc_info.value.field_name == "county"
        assert exc_info.value.rule_name == "required_field"

    @given(st.text(min_size=1).filter(lambda s: s.strip() != ""))
    def test_property_any_nonempty_string_passes(self, value):
        """Property test: any non-empty, non-whitespace string has no error"""
        result = RequiredFieldValidator("county").validate(value, {})
        assert result.errors == []


class TestLenderValidator:
    """Tests for LenderValidator"""

    def test_lender_present(self):
        """Test a lender string passes"""
        result = LenderValidator().validate("Wells Fargo", {"lender": "Wells Fargo"})
        assert result.issues == []

    def test_plaintiff_fallback(self):
        """Test plaintiff satisfies the rule when lender is missing"""
        row = {"plaintiff": "JPMorgan Chase Bank"}
        result = LenderValidator().validate(None, row)
        assert result.issues == []

    def test_both_missing(self):
        """Test missing lender and plaintiff is an error"""
        result = LenderValidator().validate(None, {"plaintiff": "  "})
        assert messages(result) == ["Missing or empty lender/plaintiff"]

    @pytest.mark.parametrize("value", [datetime(2024, 1, 15), date(2024, 1, 15)])
    def test_date_value_is_error(self, value):
        """Test a date in the lender column is rejected"""
        result = LenderValidator().validate(value, {"lender": value})
        assert messages(result) == ["Invalid lender/plaintiff value: date"]

    def test_date_plaintiff_fallback_is_error(self):
        """Test a date plaintiff is rejected when the lender is missing"""
        row = {"plaintiff": datetime(2024, 1, 15)}
        result = LenderValidator().validate(None, row)
        assert messages(result) == ["Invalid lender/plaintiff value: date"]

    def test_non_string_value_is_error(self):
        """Test numbers are rejected with their type name"""
        result = LenderValidator().validate(12345, {"lender": 12345})
        assert messages(result) == ["Invalid lender/plaintiff value type: int"]


class TestUPBValidator:
    """Tests for UPBValidator"""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (250000, 250000.0),
            (250000.5, 250000.5),
            ("250000", 250000.0),
            ("$250,000.00", 250000.0),
            (" 1,234.56 USD", 1234.56),
            (Decimal("99.5"), 99.5),
            # Integer column values as pandas yields them (numpy.int64)
            (pd.Series([250000]).iloc[0], 250000.0),
            (pd.Series([1234.5]).iloc[0], 1234.5),
        ],
    )
    def test_coerces_numbers(self, value, expected):
        """Test numeric and currency-formatted values coerce to float"""
        result = UPBValidator("upb").validate(value, {})
        assert result.errors == []
        assert result.coerced["upb"] == expected

    def test_missing_is_warning(self):
        """Test a missing UPB is a warning and leaves upb unset"""
        result = UPBValidator("upb").validate(None, {})
        assert messages(result, "warning") == ["UPB is missing"]
        assert "upb" not in result.coerced

    @pytest.mark.parametrize("value", ["", "N/A", "   "])
    def test_no_digits_is_error(self, value):
        """Test text without digits is an error"""
        result = UPBValidator("upb").validate(value, {})
        assert messages(result, "error") == ["UPB is empty or contains no numbers"]

    def test_unparseable_is_error(self):
        """Test dashes without digits are a format error"""
        result = UPBValidator("upb").validate("--", {})
        assert messages(result, "error") == ['Invalid UPB format: "--"']

    def test_dots_only_is_format_error(self):
        """Test a cleaned value with no numeric prefix is a format error"""
        result = UPBValidator("upb").validate("$.", {})
        assert messages(result, "error") == ['Invalid UPB format: "$."']

    @pytest.mark.parametrize("value", [float("nan"), float("inf")])
    def test_non_finite_is_error(self, value):
        """Test NaN and infinity are rejected"""
        result = UPBValidator("upb").validate(value, {})
        assert result.errors
        assert "upb" not in result.coerced

    @pytest.mark.parametrize("value, type_name", [(True, "bool"), ([1], "list"), ({}, "dict")])
    def test_wrong_type_is_error(self, value, type_name):
        """Test non-numeric types are rejected with their type name"""
        result = UPBValidator("upb").validate(value, {})
        assert messages(result, "error") == [f"Invalid UPB type: {type_name}"]

    @pytest.mark.parametrize(
        "value, warning",
        [
            (-5, "UPB is negative"),
            (0, "UPB is zero"),
            ("$2,000,000,000", "UPB seems unusually high"),
        ],
    )
    def test_magnitude_warnings(self, value, warning):
        """Test negative, zero and very large values warn but still coerce"""
        result = UPBValidator("upb").validate(value, {})
        assert result.errors == []
        assert messages(result, "warning") == [warning]
        assert "upb" in result.coerced

    def test_custom_max_value(self):
        """Test the unusually-high threshold is configurable"""
        result = UPBValidator("upb", {"max_value": 1000}).validate(5000, {})
        assert messages(result, "warning") == ["UPB seems unusually high"]

    def test_parse_leading_float(self):
        """Test lenient prefix parsing"""
        assert parse_leading_float("12.5.3") == 12.5
        assert parse_leading_float("-7") == -7.0
        assert parse_leading_float(".5") == 0.5
        assert parse_leading_float("-") is None

    @given(st.integers(min_value=1, max_value=1_000_000_000))
    def test_property_formatted_currency_round_trips(self, amount):
        """Property test: "$1,234" style text coerces to the same amount"""
        result = UPBValidator("upb").validate(f"${amount:,}", {})
        assert result.coerced["upb"] == float(amount)


class TestDateValidator:
    """Tests for DateValidator"""

    def make(self, **params):
        return DateValidator("complaintDate", {"now": NOW, **params})

    @pytest.mark.parametrize(
        "value",
        ["2025-01-15", "01/15/2025", "Jan 15, 2025", "January 15 2025"],
    )
    def test_parses_strings(self, value):
        """Test common date strings coerce to a naive datetime"""
        result = self.make().validate(value, {})
        assert result.issues == []
        assert result.coerced["complaint_date"] == datetime(2025, 1, 15)

    def test_accepts_date_objects(self):
        """Test date and datetime values are accepted"""
        assert self.make().validate(date(2025, 1, 15), {}).coerced["complaint_date"] == datetime(2025, 1, 15)
        assert self.make().validate(datetime(2025, 1, 15, 9), {}).coerced["complaint_date"] == datetime(2025, 1, 15, 9)

    def test_aware_datetime_becomes_naive(self):
        """Test timezone-aware values are converted to naive local time"""
        value = datetime(2025, 1, 15, 12, tzinfo=timezone.utc)
        parsed = self.make().validate(value, {}).coerced["complaint_date"]
        assert parsed.tzinfo is None

    @pytest.mark.parametrize("value", [None, ""])
    def test_missing_is_warning(self, value):
        """Test a missing date is a warning"""
        result = self.make().validate(value, {})
        assert messages(result, "warning") == ["Complaint date is missing"]
        assert result.errors == []

    def test_whitespace_is_error(self):
        """Test whitespace-only text is an error"""
        result = self.make().validate("   ", {})
        assert messages(result, "error") == ["Complaint date is empty string"]

    def test_unparseable_is_error(self):
        """Test garbage text is an error quoting the trimmed value"""
        result = self.make().validate(" not a date ", {})
        assert messages(result, "error") == ['Invalid date format: "not a date"']

    def test_nat_is_error(self):
        """Test pandas NaT is rejected as an invalid date object"""
        result = self.make().validate(pd.NaT, {})
        assert messages(result, "error") == ["Invalid Date object"]
        assert "complaint_date" not in result.coerced

    def test_wrong_type_is_error(self):
        """Test non-date types are rejected"""
        result = self.make().validate(20250115, {})
        assert messages(result, "error") == ["Invalid date type: int"]

    def test_future_date_warns(self):
        """Test dates after now are flagged but kept"""
        result = self.make().validate("2025-06-01", {})
        assert messages(result, "warning") == ["Complaint date is in the future"]
        assert result.coerced["complaint_date"] == datetime(2025, 6, 1)

    def test_old_date_warns(self):
        """Test dates beyond the age limit are flagged"""
        result = self.make().validate("2010-01-01", {})
        assert messages(result, "warning") == ["Complaint date is more than 10 years old"]

    def test_age_boundary(self):
        """Test exactly ten years back is not yet too old"""
        result = self.make().validate(datetime(2015, 3, 20, 12, 0, 0), {})
        assert result.issues == []

    def test_custom_label_and_age(self):
        """Test label and max_age_years parameters"""
        validator = self.make(label="Default date", max_age_years=1)
        result = validator.validate("2023-01-01", {})
        assert messages(result, "warning") == ["Default date is more than 1 years old"]
