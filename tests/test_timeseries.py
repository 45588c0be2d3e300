"""
Tests for TimeseriesObject utilities.
"""

import math
from datetime import date

import numpy as np
import pandas as pd
import pytest

from rawsmet import timeseries
from rawsmet.exceptions import RAWSError
from rawsmet.models import TimeseriesObject

from conftest import make_timeseries


@pytest.fixture
def raws(meta):
    """Two local days of hourly data: temperature 1 on day one, 3 on day two."""
    temperature = [1.0] * 24 + [3.0] * 24
    return make_timeseries(
        meta,
        temperature=temperature,
        humidity=50.0,
        windSpeed=2.0,
        windDirection=180.0,
    )


class TestChecks:
    def test_is_valid(self, raws):
        """Test a valid TimeseriesObject."""
        assert timeseries.is_valid(raws)

    def test_not_a_timeseries(self, raws):
        """Test objects that are not timeseries."""
        assert not timeseries.is_valid(raws.data)
        assert not timeseries.is_valid(None)

    def test_missing_column(self, raws):
        """Test data without a standard column."""
        broken = TimeseriesObject(meta=raws.meta, data=raws.data.drop(columns="humidity"))
        assert not timeseries.is_valid(broken)

    def test_naive_datetimes(self, raws):
        """Test naive datetimes."""
        data = raws.data.copy()
        data["datetime"] = data["datetime"].dt.tz_localize(None)
        assert not timeseries.is_valid(TimeseriesObject(meta=raws.meta, data=data))

    def test_missing_timezone(self, raws):
        """Test metadata without a timezone."""
        raws.meta.timezone = ""
        assert not timeseries.is_valid(raws)

    def test_is_empty(self, raws, meta):
        """Test is_empty."""
        assert not timeseries.is_empty(raws)
        assert timeseries.is_empty(make_timeseries(meta, periods=0))


class TestAccessors:
    def test_get_data_copy(self, raws):
        """Test that get_data returns a copy."""
        data = timeseries.get_data(raws)
        data.loc[0, "temperature"] = 99.0
        assert raws.data.loc[0, "temperature"] == 1.0

    def test_get_data_for_openair(self, raws):
        """Test the openair columns."""
        data = timeseries.get_data(raws, for_openair=True)
        assert (data["date"] == data["datetime"]).all()
        assert (data["ws"] == 2.0).all()
        assert (data["wd"] == 180.0).all()

    def test_get_meta(self, raws):
        """Test get_meta."""
        meta = timeseries.get_meta(raws)
        assert len(meta) == 1
        assert meta.loc[0, "wrccID"] == "waWENU"
        assert meta.loc[0, "timezone"] == "America/Los_Angeles"


class TestFilter:
    def test_query_string(self, raws):
        """Test filtering with a query string."""
        result = timeseries.filter(raws, "temperature > 2")
        assert len(result.data) == 24
        assert result.meta is raws.meta

    def test_callable(self, raws):
        """Test filtering with a callable."""
        result = timeseries.filter(raws, lambda df: df["temperature"] < 2)
        assert len(result.data) == 24
        assert result.data.index[0] == 0

    def test_input_unchanged(self, raws):
        """Test that filtering leaves the input unchanged."""
        timeseries.filter(raws, "temperature > 2")
        assert len(raws.data) == 48


class TestFilterDate:
    def test_single_local_day(self, raws):
        """Test a single local day."""
        result = timeseries.filter_date(raws, "20200101", "20200101")
        assert len(result.data) == 24
        assert result.data["datetime"].iloc[0] == pd.Timestamp("2020-01-01 08:00", tz="UTC")

    def test_end_is_exclusive_with_hours(self, raws):
        """Test that an end with hours is exclusive."""
        result = timeseries.filter_date(raws, "2020010100", "2020010106")
        assert len(result.data) == 6

    def test_start_only(self, raws):
        """Test filtering with only a start."""
        result = timeseries.filter_date(raws, start="20200102")
        assert len(result.data) == 24
        assert (result.data["temperature"] == 3.0).all()

    def test_utc_timezone(self, raws):
        """Test filtering in UTC."""
        result = timeseries.filter_date(raws, "20200101", "20200101", timezone="UTC")
        assert len(result.data) == 16

    def test_datetime_arguments(self, raws):
        """Test Timestamp arguments."""
        start = pd.Timestamp("2020-01-01 08:00", tz="UTC")
        end = pd.Timestamp("2020-01-01 10:00", tz="UTC")
        assert len(timeseries.filter_date(raws, start, end).data) == 2

    def test_requires_a_date(self, raws):
        """Test that a start or end is required."""
        with pytest.raises(ValueError):
            timeseries.filter_date(raws)

    def test_bad_date_string(self, raws):
        """Test an invalid date string."""
        with pytest.raises(ValueError):
            timeseries.filter_date(raws, "202001")

    def test_spring_forward_day(self, meta):
        """Test that a date-only end covers the 23 hours of a spring DST day."""
        raws = make_timeseries(meta, periods=72, start="2020-03-07 08:00")
        result = timeseries.filter_date(raws, "20200308", "20200308")
        local = result.data["datetime"].dt.tz_convert(meta.timezone)
        assert len(result.data) == 23
        assert (local.dt.day == 8).all()
        assert local.iloc[-1] == pd.Timestamp("2020-03-08 23:00", tz=meta.timezone)

    def test_fall_back_day(self, meta):
        """Test that a date-only end covers the 25 hours of a fall DST day."""
        raws = make_timeseries(meta, periods=72, start="2020-10-31 07:00")
        result = timeseries.filter_date(raws, "20201101", "20201101")
        local = result.data["datetime"].dt.tz_convert(meta.timezone)
        assert len(result.data) == 25
        assert (local.dt.day == 1).all()
        assert result.data["datetime"].iloc[-1] == pd.Timestamp(
            "2020-11-02 07:00", tz="UTC"
        )

    def test_date_object_end(self, raws):
        """Test that a date object end includes the whole local day."""
        result = timeseries.filter_date(raws, date(2020, 1, 1), date(2020, 1, 1))
        assert len(result.data) == 24


class TestTidy:
    def test_meta_columns(self, raws):
        """Test metadata columns in the tidy table."""
        df = timeseries.to_tidy_dataframe(raws)
        assert len(df) == 48
        assert (df["wrccID"] == "waWENU").all()
        assert (df["elevation"] == 1292.0).all()

    def test_vpd(self, raws):
        """Test vapor pressure deficit."""
        df = timeseries.to_tidy_dataframe(raws)
        expected = 0.5 * 6.1094 * math.exp(17.625 * 1.0 / (1.0 + 243.04))
        assert df.loc[0, "VPD"] == pytest.approx(expected)

    def test_saturated_air_has_no_deficit(self, meta):
        """Test VPD at 100% humidity."""
        raws = make_timeseries(meta, periods=2, temperature=20.0, humidity=100.0, windSpeed=0.0)
        df = timeseries.to_tidy_dataframe(raws)
        assert df.loc[0, "VPD"] == pytest.approx(0.0)

    @pytest.mark.parametrize(
        "humidity,m",
        [
            (5.0, 0.03229 + 0.281073 * 5 - 0.000578 * 5 * 20),
            (30.0, 2.22749 + 0.160107 * 30 - 0.01478 * 20),
            (80.0, 21.0606 + 0.005565 * 80**2 - 0.00035 * 80 * 20 - 0.483199 * 80),
        ],
    )
    def test_ffwi(self, meta, humidity, m):
        """Test the Fosberg Fire Weather Index."""
        raws = make_timeseries(
            meta, periods=1, temperature=20.0, humidity=humidity, windSpeed=5.0
        )
        df = timeseries.to_tidy_dataframe(raws)
        r = m / 30
        n = 1 - 2 * r + 1.5 * r**2 - 0.5 * r**3
        expected = n * math.sqrt(1 + (2.23694 * 5.0) ** 2) / 0.3002
        assert df.loc[0, "FFWI"] == pytest.approx(expected)

    def test_missing_humidity(self, meta):
        """Test FFWI without humidity."""
        raws = make_timeseries(meta, periods=1, temperature=20.0, windSpeed=5.0)
        df = timeseries.to_tidy_dataframe(raws)
        assert np.isnan(df.loc[0, "FFWI"])

    def test_size_limit(self, raws):
        """Test the size limit."""
        with pytest.raises(ValueError, match="size_max"):
            timeseries.to_tidy_dataframe(raws, size_max=0.0001)

    def test_empty(self, meta):
        """Test a tidy table without data."""
        with pytest.raises(RAWSError):
            timeseries.to_tidy_dataframe(make_timeseries(meta, periods=0))


class TestSummarize:
    def test_daily_mean(self, raws):
        """Test daily means."""
        daily = timeseries.summarize(raws, unit="day")
        assert list(daily.data["temperature"]) == [1.0, 3.0]
        assert daily.data.loc[0, "datetime"] == pd.Timestamp("2020-01-01 08:00", tz="UTC")
        assert daily.data.loc[0, "monitorType"] == "WRCC_TYPE1"

    def test_daily_max_callable(self, raws):
        """Test a callable reduction."""
        daily = timeseries.summarize(raws, unit="day", fun=lambda x: x.max())
        assert list(daily.data["temperature"]) == [1.0, 3.0]

    def test_min_count(self, raws):
        """Test the minimum count."""
        daily = timeseries.summarize(raws, unit="day", min_count=30)
        assert daily.data["temperature"].isna().all()

    def test_all_missing_column(self, raws):
        """Test a column without values."""
        daily = timeseries.summarize(raws, unit="day")
        assert daily.data["precipitation"].isna().all()

    def test_month(self, raws):
        """Test monthly summaries."""
        monthly = timeseries.summarize(raws, unit="month")
        assert len(monthly.data) == 1
        assert monthly.data.loc[0, "temperature"] == 2.0

    def test_bad_unit(self, raws):
        """Test an invalid summary unit."""
        with pytest.raises(ValueError):
            timeseries.summarize(raws, unit="fortnight")


class TestCollections:
    def test_is_timeseries_list(self, raws, meta):
        """Test is_timeseries_list."""
        assert timeseries.is_timeseries_list([raws])
        assert timeseries.is_timeseries_list({"waWENU": raws})
        assert not timeseries.is_timeseries_list([])
        assert not timeseries.is_timeseries_list([raws, "not a timeseries"])

    def test_remove_empty(self, raws, meta):
        """Test remove_empty."""
        empty = make_timeseries(meta, periods=0)
        assert timeseries.remove_empty([raws, empty]) == [raws]
        assert list(timeseries.remove_empty({"a": raws, "b": empty})) == ["a"]

    def test_filter_list(self, raws):
        """Test filter_list."""
        result = timeseries.filter_list({"a": raws}, "temperature > 2")
        assert len(result["a"].data) == 24

    def test_filter_date_list(self, raws):
        """Test filter_date_list."""
        result = timeseries.filter_date_list([raws, raws], "20200102")
        assert [len(obj.data) for obj in result] == [24, 24]

    def test_list_to_tidy_dataframe(self, raws, meta):
        """Test list_to_tidy_dataframe."""
        empty = make_timeseries(meta, periods=0)
        df = timeseries.list_to_tidy_dataframe([raws, empty, raws])
        assert len(df) == 96
        assert "FFWI" in df.columns
