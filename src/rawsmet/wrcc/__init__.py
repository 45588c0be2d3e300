"""
WRCC hourly RAWS data.

The Western Regional Climate Center serves hourly observations as
tab-delimited text whose columns depend on the station hardware. The
catalog module lists every known column layout; the parser matches an
export against it and returns records with canonical column names.

Data service: https://wrcc.dri.edu/cgi-bin/wea_list2.pl
"""

from .catalog import (
    CATALOG,
    UNKNOWN,
    SchemaDefinition,
    get_schema,
    list_monitor_types,
)
from .client import WRCCClient
from .convenience import (
    create_timeseries_object,
    load_multiple,
    load_year,
    timeseries_from_text,
)
from .matcher import identify
from .parser import parse_data, parse_records

__all__ = [
    "CATALOG",
    "UNKNOWN",
    "SchemaDefinition",
    "get_schema",
    "list_monitor_types",
    "identify",
    "parse_data",
    "parse_records",
    "WRCCClient",
    "create_timeseries_object",
    "timeseries_from_text",
    "load_year",
    "load_multiple",
]
