"""
Unit tests for multi-strategy duplicate detection.

Includes property-based testing with hypothesis for detection determinism.
"""

from datetime import datetime

from hypothesis import given, settings
from hypothesis import strategies as st

from complaint_pipeline.core.dedup import (
    KEY_STRATEGIES,
    DuplicateDetector,
    create_row_keys,
    detect_duplicates,
    normalize_for_comparison,
)
from complaint_pipeline.core.models import ProcessedRecord

DAY = datetime(2025, 3, 10)


class TestNormalizeForComparison:
    """Tests for normalize_for_comparison"""

    def test_lowercases_and_strips_punctuation(self):
        """Test case, whitespace and punctuation are ignored"""
        assert normalize_for_comparison("  123 Main  St. ") == "123 main st"
        assert normalize_for_comparison("Apt #4-B") == "apt 4b"

    def test_empty_values(self):
        """Test falsy values compare as empty"""
        assert normalize_for_comparison(None) == ""
        assert normalize_for_comparison("") == ""

    def test_numbers_are_stringified(self):
        """Test numeric addresses still produce keys"""
        assert normalize_for_comparison(42) == "42"


class TestCreateRowKeys:
    """Tests for create_row_keys"""

    def test_key_layout(self, make_record):
        """Test each strategy key combines the expected components"""
        record = make_record(complaint_date=DAY, upb=100000.0)
        keys = create_row_keys(record)

        assert list(keys) == list(KEY_STRATEGIES)
        assert keys["exact"] == "1 test ave|new york|abc mortgage company|2025-03-10|100000"
        assert keys["without_upb"] == "1 test ave|new york|abc mortgage company|2025-03-10"
        assert keys["address_date"] == "1 test ave|2025-03-10"
        assert keys["fuzzy_address"] == "1 test ave|new york|abc mortgage company|2025-03-10"

    def test_fractional_upb_and_missing_values(self, make_record):
        """Test fractional UPB keeps its decimals and missing parts are empty"""
        keys = create_row_keys(make_record(upb=1500.25, complaint_date=None, address=None))
        assert keys["exact"] == "|new york|abc mortgage company||1500.25"
        assert keys["address_date"] == "|"

    def test_unnormalized_records_fall_back_to_normalizers(self, make_record):
        """Test raw county/lender are normalized when canonical names are unset"""
        record = make_record(county="NYC", lender="ABC Mortgage Co.", complaint_date=DAY, normalized=False)
        assert create_row_keys(record)["without_upb"] == (
            "1 test ave|new york|abc mortgage company|2025-03-10"
        )


class TestDuplicateDetector:
    """Tests for DuplicateDetector"""

    def test_exact_duplicate(self, make_record):
        """Test identical rows match on the exact key"""
        records = [make_record(complaint_date=DAY), make_record(complaint_date=DAY)]
        matches = DuplicateDetector().detect(records)

        assert matches[0].is_duplicate is False
        assert matches[1].is_duplicate is True
        assert matches[1].duplicate_of == 0
        assert matches[1].strategy == "exact"

    def test_punctuation_variant_is_exact_duplicate(self, make_record):
        """Test "123 Main St" and "123 Main St." are the same address"""
        records = [
            make_record(address="123 Main St", complaint_date=DAY),
            make_record(address="123 Main St.", complaint_date=DAY),
        ]
        assert detect_duplicates(records)[1].strategy == "exact"

    def test_without_upb(self, make_record):
        """Test a differing UPB still matches on the remaining fields"""
        records = [
            make_record(upb=100000.0, complaint_date=DAY),
            make_record(upb=100500.0, complaint_date=DAY),
        ]
        assert detect_duplicates(records)[1].strategy == "without_upb"

    def test_address_date(self, make_record):
        """Test same address and day match across county and lender spellings"""
        records = [
            make_record(county="Broward", lender="Wells Fargo", complaint_date=DAY),
            make_record(county="Palm Beach", lender="JPMorgan", complaint_date=DAY),
        ]
        assert detect_duplicates(records)[1].strategy == "address_date"

    def test_fuzzy_address(self, make_record):
        """Test long addresses sharing a 20-character prefix match"""
        records = [
            make_record(address="1234 Northwest Boulevard Apt 1", upb=1.0, complaint_date=DAY),
            make_record(address="1234 Northwest Boulevard Apt 2", upb=2.0, complaint_date=DAY),
        ]
        match = detect_duplicates(records)[1]
        assert match.is_duplicate is True
        assert match.strategy == "fuzzy_address"

    def test_different_day_is_not_duplicate(self, make_record):
        """Test the same property on another day is a new complaint"""
        records = [
            make_record(complaint_date=DAY),
            make_record(complaint_date=datetime(2025, 3, 11)),
        ]
        assert detect_duplicates(records)[1].is_duplicate is False

    def test_time_of_day_is_ignored(self, make_record):
        """Test keys use the calendar day only"""
        records = [
            make_record(complaint_date=datetime(2025, 3, 10, 9)),
            make_record(complaint_date=datetime(2025, 3, 10, 17)),
        ]
        assert detect_duplicates(records)[1].is_duplicate is True

    def test_invalid_records_are_exempt(self, make_record):
        """Test invalid records are never flagged and never claim keys"""
        records = [
            make_record(complaint_date=DAY, is_valid=False),
            make_record(complaint_date=DAY),
            make_record(complaint_date=DAY, is_valid=False),
        ]
        matches = detect_duplicates(records)

        assert matches[0].is_duplicate is False
        assert matches[1].is_duplicate is False
        assert matches[2].is_duplicate is False

    def test_first_seen_wins(self, make_record):
        """Test later copies point at the first occurrence"""
        records = [make_record(complaint_date=DAY) for _ in range(3)]
        matches = detect_duplicates(records)
        assert [matches[i].duplicate_of for i in range(3)] == [None, 0, 0]

    def test_duplicates_do_not_claim_keys(self, make_record):
        """Test a duplicate's extra keys are not registered"""
        records = [
            make_record(address="10 Elm St", upb=1.0, complaint_date=DAY),
            # duplicate of 0 via without_upb; its exact key stays unclaimed
            make_record(address="10 Elm St", upb=2.0, complaint_date=DAY),
            make_record(address="10 Elm St", upb=2.0, complaint_date=DAY),
        ]
        matches = detect_duplicates(records)
        assert matches[2].duplicate_of == 0
        assert matches[2].strategy == "without_upb"

    def test_empty_input(self):
        """Test no records yields no matches"""
        assert detect_duplicates([]) == {}

    @settings(max_examples=50)
    @given(
        st.lists(
            st.tuples(
                st.sampled_from(["1 Oak St", "1 Oak St.", "2 Pine Rd", "3 Elm Ave"]),
                st.sampled_from([100.0, 200.0, None]),
                st.integers(min_value=1, max_value=3),
                st.booleans(),
            ),
            max_size=12,
        )
    )
    def test_property_detection_is_deterministic(self, rows):
        """Property test: detection is repeatable and points backwards at originals"""
        records = [
            ProcessedRecord(
                row_index=index,
                raw={"propertyAddress": address, "county": "Broward", "lender": "Wells Fargo"},
                upb=upb,
                complaint_date=datetime(2025, 3, day),
                is_valid=valid,
            )
            for index, (address, upb, day, valid) in enumerate(rows)
        ]
        first = detect_duplicates(records)
        second = detect_duplicates(records)

        assert first == second
        for index, match in first.items():
            if match.is_duplicate:
                assert match.duplicate_of < index
                assert records[index].is_valid
                assert records[match.duplicate_of].is_valid
                assert not first[match.duplicate_of].is_duplicate
