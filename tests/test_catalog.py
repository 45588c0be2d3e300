"""
Tests for the WRCC column layout catalog.
"""

import pytest

from rawsmet.exceptions import UnknownSchemaError
from rawsmet.wrcc.catalog import (
    CATALOG,
    CHARACTER,
    NUMERIC,
    UNKNOWN,
    build_schema,
    get_schema,
    list_monitor_types,
)


class TestCatalog:
    """Catalog structure."""

    def test_catalog_size(self):
        """Test the number of layouts."""
        assert len(CATALOG) == 46
        assert list_monitor_types()[0] == "WRCC_TYPE1"
        assert list_monitor_types()[-1] == "WRCC_TYPE46"

    def test_monitor_types_unique(self):
        """Test that monitor types are unique."""
        types = list_monitor_types()
        assert len(types) == len(set(types))

    def test_headers_unique(self):
        """Test that headers are unique."""
        headers = [schema.header for schema in CATALOG]
        assert len(headers) == len(set(headers))

    @pytest.mark.parametrize("schema", CATALOG, ids=lambda s: s.monitor_type)
    def test_sequences_have_equal_length(self, schema):
        """Test that column sequences line up."""
        n = len(schema.canonical_column_names)
        assert len(schema.raw_column_names) == n
        assert len(schema.column_types) == n
        assert len(schema.units) == n

    @pytest.mark.parametrize("schema", CATALOG, ids=lambda s: s.monitor_type)
    def test_datetime_is_first_character_column(self, schema):
        """Test that datetime comes first."""
        assert schema.canonical_column_names[0] == "datetime"
        assert schema.column_types[0] == CHARACTER
        assert set(schema.column_types[1:]) <= {NUMERIC}

    @pytest.mark.parametrize("schema", CATALOG, ids=lambda s: s.monitor_type)
    def test_canonical_names_unique(self, schema):
        """Test that canonical names are unique."""
        names = schema.canonical_column_names
        assert len(names) == len(set(names))

    def test_type1_columns(self):
        """Test the WRCC_TYPE1 columns."""
        schema = get_schema("WRCC_TYPE1")
        assert schema.canonical_column_names == (
            "datetime",
            "precipitation",
            "windSpeed",
            "windDirection",
            "temperature",
            "fuelTemperature",
            "humidity",
            "batteryVoltage",
            "fuelMoisture",
            "maxGustDirection",
            "maxGustSpeed",
            "solarRadiation",
        )
        assert schema.raw_column_names[0] == "Date/TimeYYMMDDhhmm"
        assert schema.units[:3] == ("LST", "mm", "m/s")

    def test_blank_names_get_placeholders(self):
        """Test placeholders for blank names."""
        schema = get_schema("WRCC_TYPE27")
        assert "_1" in schema.canonical_column_names
        assert "_2" in schema.canonical_column_names

    def test_repeated_names_get_suffixes(self):
        """Test suffixes for repeated names."""
        schema = get_schema("WRCC_TYPE23")
        names = schema.canonical_column_names
        assert "soilMoisture" in names
        assert "soilMoisture2" in names
        assert "soilMoisture3" in names

    def test_columns_out_of_usual_order(self):
        """Test a layout with columns out of the usual order."""
        # Precipitation is the last column in this layout
        schema = get_schema("WRCC_TYPE18")
        assert schema.canonical_column_names[-1] == "precipitation"
        assert schema.canonical_column_names[1] == "misc1"

    def test_unknown_monitor_type(self):
        """Test an unknown monitor type."""
        with pytest.raises(UnknownSchemaError):
            get_schema("WRCC_TYPE999")

    def test_unknown_sentinel(self):
        """Test the unknown layout."""
        assert UNKNOWN.is_unknown
        assert len(UNKNOWN) == 0
        assert not CATALOG[0].is_unknown

    def test_index_of(self):
        """Test column lookup."""
        schema = get_schema("WRCC_TYPE2")
        assert schema.index_of("windSpeed") == 2
        assert schema.index_of("fuelTemperature") is None


class TestBuildSchema:
    """Deriving layouts from header text."""

    def test_unmapped_name_falls_back_to_camel_case(self):
        """Test camelCase names for unmapped columns."""
        schema = build_schema(
            "TEST",
            (
                ":       LST\t mm  ",
                ": Date/Time\t New   ",
                ":YYMMDDhhmm\t Sensor",
            ),
        )
        assert schema.canonical_column_names == ("datetime", "newSensor")

    def test_mismatched_column_counts(self):
        """Test headers with mismatched column counts."""
        with pytest.raises(ValueError):
            build_schema(
                "TEST",
                (":       LST\t mm  ", ": Date/Time", ":YYMMDDhhmm\t x"),
            )
