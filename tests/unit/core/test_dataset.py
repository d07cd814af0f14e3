"""Unit tests for dataset loading."""

import json
from unittest.mock import patch

import pytest

from wasteflow.core.dataset import (
    available_years,
    load_records,
    parse_records,
    records_per_year,
)
from wasteflow.core.errors import DatasetError, DatasetFormatError, DatasetNotFoundError


class TestLoadRecords:
    def test_load_from_json(self, tmp_path):
        f = tmp_path / "data.json"
        f.write_text(json.dumps([
            {"country": "Germany", "year": 2016, "generated": 1000, "incinerated": 300, "recycled": 200},
            {"country": "Italy", "year": 2004, "generated": 500, "incinerated": 100},
        ]))

        records = load_records(f)

        assert [r.country for r in records] == ["Germany", "Italy"]
        assert records[0].recycled == 200
        assert records[1].recycled == 0.0

    def test_missing_file(self, tmp_path):
        with pytest.raises(DatasetNotFoundError) as exc_info:
            load_records(tmp_path / "missing.json")

        assert "Dataset not found" in str(exc_info.value)
        assert exc_info.value.path == tmp_path / "missing.json"

    def test_invalid_json(self, tmp_path):
        f = tmp_path / "data.json"
        f.write_text("[{not json")

        with pytest.raises(DatasetFormatError, match="not valid JSON"):
            load_records(f)

    def test_not_utf8(self, tmp_path):
        f = tmp_path / "data.json"
        f.write_bytes(b"\xff\xfe[]")

        with pytest.raises(DatasetFormatError, match="not valid JSON"):
            load_records(f)

    def test_unreadable_file(self, tmp_path):
        f = tmp_path / "data.json"
        f.write_text("[]")

        with patch("pathlib.Path.read_text", side_effect=PermissionError("denied")):
            with pytest.raises(DatasetError, match="Failed to read dataset"):
                load_records(f)

    def test_nan_amount_rejected(self, tmp_path):
        f = tmp_path / "data.json"
        f.write_text('[{"country": "Malta", "year": 2016, "generated": NaN}]')

        with pytest.raises(DatasetFormatError, match="index 0"):
            load_records(f)

    def test_errors_share_base_class(self, tmp_path):
        with pytest.raises(DatasetError):
            load_records(tmp_path / "missing.json")


class TestParseRecords:
    def test_null_amounts_default_to_zero(self):
        records = parse_records([
            {"country": "Poland", "year": 2006, "generated": 10, "incinerated": None, "recycled": None},
        ])
        assert records[0].incinerated == 0.0
        assert records[0].recycled == 0.0
        assert records[0].residual == 10.0

    def test_extra_fields_ignored(self):
        records = parse_records([
            {"country": "Poland", "year": 2006, "generated": 10, "incinerated": 2, "unit": "t"},
        ])
        assert records[0].generated == 10.0

    def test_top_level_must_be_array(self):
        with pytest.raises(DatasetFormatError, match="Expected a JSON array"):
            parse_records({"country": "Poland"})

    def test_invalid_record_names_index(self):
        payload = [
            {"country": "Poland", "year": 2006, "generated": 10},
            {"country": "Spain", "year": 2006, "generated": "lots"},
        ]
        with pytest.raises(DatasetFormatError, match="index 1"):
            parse_records(payload)

    def test_missing_required_key(self):
        with pytest.raises(DatasetFormatError):
            parse_records([{"country": "Spain", "year": 2006}])

    def test_infinite_amount_rejected(self):
        with pytest.raises(DatasetFormatError):
            parse_records([
                {"country": "Malta", "year": 2016, "generated": 10, "incinerated": float("inf")},
            ])

    def test_negative_values_load(self):
        """Inconsistent amounts are left to the builder's residual policy."""
        records = parse_records([
            {"country": "Malta", "year": 2016, "generated": 10, "incinerated": 8, "recycled": 4},
        ])
        assert records[0].residual == -2.0


class TestYears:
    @pytest.fixture
    def records(self):
        return parse_records([
            {"country": "A", "year": 2016, "generated": 1},
            {"country": "B", "year": 2004, "generated": 1},
            {"country": "C", "year": 2016, "generated": 1},
        ])

    def test_available_years_sorted(self, records):
        assert available_years(records) == [2004, 2016]

    def test_records_per_year(self, records):
        assert records_per_year(records) == {2004: 1, 2016: 2}

    def test_empty(self):
        assert available_years([]) == []
        assert records_per_year([]) == {}
