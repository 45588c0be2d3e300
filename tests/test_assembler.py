"""
Tests for assembling TimeseriesObjects.
"""

import warnings

import numpy as np
import pandas as pd
import pytest

from rawsmet.assembler import add_century, assemble, distinct_data
from rawsmet.exceptions import MalformedTimestampError, MissingTimezoneOffsetError
from rawsmet.models import STANDARD_DATA_COLUMNS, TimeseriesObject
from rawsmet.timezones import TimezoneOffsetTable
from rawsmet.wrcc.parser import parse_data


class TestAddCentury:
    def test_two_digit_years(self):
        """Test the century pivot."""
        assert add_century("0801010000", pivot=30) == "200801010000"
        assert add_century("9912312300", pivot=30) == "199912312300"
        assert add_century("3001010000", pivot=30) == "203001010000"

    def test_four_digit_years_unchanged(self):
        """Test that four-digit years are unchanged."""
        assert add_century("200801010000") == "200801010000"


class TestAssemble:
    def test_local_standard_time_to_utc(self, meta):
        """Test conversion from local standard time."""
        raws = assemble(meta, [{"datetime": "0801010000", "temperature": 1.0}])
        assert raws.data.loc[0, "datetime"] == pd.Timestamp("2008-01-01 08:00", tz="UTC")

    def test_no_daylight_saving_shift(self, meta):
        """Test that summer times use the standard offset."""
        # LST is UTC-8 in July as well
        raws = assemble(meta, [{"datetime": "200807011200"}])
        assert raws.data.loc[0, "datetime"] == pd.Timestamp("2008-07-01 20:00", tz="UTC")

    def test_east_of_greenwich(self, meta):
        """Test a positive UTC offset."""
        meta.timezone = "Asia/Kolkata"
        raws = assemble(meta, [{"datetime": "200801010000"}])
        expected = pd.Timestamp("2007-12-31 18:30", tz="UTC")
        assert raws.data.loc[0, "datetime"] == expected

    def test_explicit_offset_table(self, meta):
        """Test an explicit offset table."""
        offsets = TimezoneOffsetTable({"America/Los_Angeles": -7})
        raws = assemble(meta, [{"datetime": "0801010000"}], offsets=offsets)
        assert raws.data.loc[0, "datetime"] == pd.Timestamp("2008-01-01 07:00", tz="UTC")

    def test_unknown_timezone(self, meta):
        """Test an unknown timezone."""
        meta.timezone = "Mars/Olympus_Mons"
        with pytest.raises(MissingTimezoneOffsetError):
            assemble(meta, [{"datetime": "0801010000"}])

    def test_missing_timezone(self, meta):
        """Test a missing timezone."""
        meta.timezone = ""
        with pytest.raises(MissingTimezoneOffsetError):
            assemble(meta, [{"datetime": "0801010000"}])

    @pytest.mark.parametrize("value", ["08010100", "2008-01-01", "0813010000"])
    def test_malformed_timestamp(self, meta, value):
        """Test malformed timestamps."""
        with pytest.raises(MalformedTimestampError):
            assemble(meta, [{"datetime": value}])

    def test_standard_columns(self, meta):
        """Test the standard output columns."""
        raws = assemble(meta, [{"datetime": "0801010000", "temperature": 1.0}])
        assert isinstance(raws, TimeseriesObject)
        assert list(raws.data.columns) == STANDARD_DATA_COLUMNS
        assert np.isnan(raws.data.loc[0, "humidity"])

    def test_selected_columns(self, meta):
        """Test selected output columns."""
        records = [{"datetime": "0801010000", "temperature": 1.0, "snowDepth": 20.0}]
        raws = assemble(meta, records, columns=["datetime", "temperature", "snowDepth"])
        assert list(raws.data.columns) == ["datetime", "temperature", "snowDepth"]

    def test_rounding(self, meta):
        """Test rounding."""
        records = [
            {
                "datetime": "0801010000",
                "temperature": 22.2222,
                "humidity": 35.6,
                "windSpeed": 1.78816,
                "windDirection": 261.4,
                "precipitation": 0.5080001,
            }
        ]
        row = assemble(meta, records).data.loc[0]
        assert row["temperature"] == 22.2
        assert row["humidity"] == 36
        assert row["windSpeed"] == 1.79
        assert row["windDirection"] == 261
        assert row["precipitation"] == 0.51

    def test_sorted_and_distinct(self, meta):
        """Test sorting and de-duplication."""
        records = [
            {"datetime": "0801010200", "temperature": 3.0},
            {"datetime": "0801010000", "temperature": 1.0},
            {"datetime": "0801010100", "temperature": 2.0},
            {"datetime": "0801010000", "temperature": 1.0},
        ]
        data = assemble(meta, records).data
        assert list(data["temperature"]) == [1.0, 2.0, 3.0]
        assert data["datetime"].is_monotonic_increasing

    def test_conflicting_duplicates_warn(self, meta):
        """Test the warning for conflicting records."""
        records = [
            {"datetime": "0801010000", "temperature": 1.0},
            {"datetime": "0801010000", "temperature": 1.5},
        ]
        with pytest.warns(UserWarning, match="more than one distinct record"):
            data = assemble(meta, records).data
        assert len(data) == 2

    def test_records_without_timestamp_dropped(self, meta):
        """Test that records without a timestamp are dropped."""
        records = [
            {"datetime": "0801010000", "temperature": 1.0},
            {"datetime": None, "temperature": 2.0},
        ]
        assert len(assemble(meta, records).data) == 1

    def test_empty_records(self, meta):
        """Test assembling no records."""
        raws = assemble(meta, [])
        assert len(raws.data) == 0
        assert list(raws.data.columns) == STANDARD_DATA_COLUMNS

    def test_wrcc_export(self, meta, type1_blob):
        """Test assembling a parsed WRCC export."""
        raws = assemble(meta, parse_data(type1_blob))
        data = raws.data
        assert len(data) == 3
        assert data.loc[0, "datetime"] == pd.Timestamp("2008-01-01 08:00", tz="UTC")
        assert data.loc[2, "precipitation"] == 0.3
        assert (data["monitorType"] == "WRCC_TYPE1").all()


class TestDistinct:
    def test_idempotent(self, meta):
        """Test that assembling twice gives the same result."""
        records = [
            {"datetime": "0801010200", "temperature": 3.0},
            {"datetime": "0801010000", "temperature": 1.0},
            {"datetime": "0801010000", "temperature": 1.0},
        ]
        data = assemble(meta, records).data
        once = distinct_data(data)
        twice = distinct_data(once)
        assert once.equals(twice)
        assert once.equals(data)

    def test_no_warning_for_exact_duplicates(self, meta):
        """Test that exact duplicates do not warn."""
        data = assemble(meta, [{"datetime": "0801010000", "temperature": 1.0}]).data
        doubled = pd.concat([data, data], ignore_index=True)
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert len(distinct_data(doubled)) == 1
