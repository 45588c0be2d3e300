"""
FW13 fire weather records from the CEFA RAWS archive.

FW13 is a fixed-width format with one hourly observation per line.
Record layout: https://fam.nwcg.gov/fam-web/weatherfirecd/13.htm
"""

from .client import FW13Client
from .convenience import (
    create_timeseries_object,
    load_multiple,
    load_station,
    timeseries_from_text,
)
from .parser import FW13_FIELDS, harmonize, parse_data

__all__ = [
    "FW13Client",
    "FW13_FIELDS",
    "parse_data",
    "harmonize",
    "create_timeseries_object",
    "timeseries_from_text",
    "load_station",
    "load_multiple",
]
