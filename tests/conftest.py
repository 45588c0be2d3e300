"""
Shared fixtures for rawsmet tests.
"""

import pandas as pd
import pytest

from rawsmet.models import STANDARD_DATA_COLUMNS, StationMetadata, TimeseriesObject
from rawsmet.wrcc.catalog import get_schema


def make_wrcc_blob(schema, rows, station="WENATCHEE  WASHINGTON"):
    """Build a WRCC export with the header of ``schema`` and the given rows."""
    lines = [station, *schema.header, *rows]
    return "\n".join(lines) + "\n"


def make_wrcc_row(schema, datetime="0801010000", value="1.0", **overrides):
    """A tab-delimited data row for ``schema`` keyed by canonical name."""
    values = []
    for name in schema.canonical_column_names:
        if name in overrides:
            values.append(str(overrides[name]))
        elif name == "datetime":
            values.append(datetime)
        else:
            values.append(value)
    return "\t".join(values)


def make_timeseries(meta, periods=48, start="2020-01-01 08:00", **columns):
    """Hourly TimeseriesObject with the standard columns."""
    data = pd.DataFrame(
        {"datetime": pd.date_range(start, periods=periods, freq="60min", tz="UTC")}
    )
    for name in STANDARD_DATA_COLUMNS[1:]:
        if name == "monitorType":
            data[name] = "WRCC_TYPE1"
        else:
            data[name] = columns.get(name, float("nan"))
    return TimeseriesObject(meta=meta, data=data)


@pytest.fixture
def meta():
    """Metadata for a station in the Pacific timezone."""
    return StationMetadata(
        device_deployment_id="a1b2c3d4e5f6_waWENU",
        location_name="Wenatchee",
        longitude=-120.3103,
        latitude=47.4166,
        timezone="America/Los_Angeles",
        elevation=1292.0,
        state_code="WA",
        nws_id="452805",
        wrcc_id="waWENU",
        agency_name="USFS",
    )


@pytest.fixture
def type1():
    return get_schema("WRCC_TYPE1")


@pytest.fixture
def type1_blob(type1):
    """Three hours of WRCC_TYPE1 data with a precipitation counter reset."""
    rows = [
        make_wrcc_row(type1, "0801010000", precipitation="5.0"),
        make_wrcc_row(type1, "0801010100", precipitation="5.5"),
        make_wrcc_row(type1, "0801010200", precipitation="0.3"),
    ]
    return make_wrcc_blob(type1, rows)
