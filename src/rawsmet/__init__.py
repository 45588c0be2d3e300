"""
Python client for RAWS (Remote Automatic Weather Stations) data.

Download hourly observations from the WRCC and CEFA/FW13 archives and
harmonize them into TimeseriesObjects with UTC timestamps and metric units.
"""

try:
    from importlib import metadata

    __version__ = metadata.version(__name__)
except Exception:
    __version__ = "unknown"

from . import cache, fw13, timeseries, wrcc
from .assembler import assemble
from .config import RAWSConfig
from .exceptions import (
    EmptySourceError,
    MalformedTimestampError,
    MissingTimezoneOffsetError,
    RAWSConnectionError,
    RAWSError,
    RAWSQueryError,
    UnknownSchemaError,
    UnsupportedUnitError,
)
from .models import STANDARD_DATA_COLUMNS, StationMetadata, TimeseriesObject
from .precipitation import de_precipitate
from .timezones import TimezoneOffsetTable
from .units import UnitHarmonizer, harmonize_unit, validate_units
from .wrcc import WRCCClient, identify
from .fw13 import FW13Client

__all__ = [
    # Modules
    "cache",
    "fw13",
    "timeseries",
    "wrcc",
    # Configuration and models
    "RAWSConfig",
    "StationMetadata",
    "TimeseriesObject",
    "STANDARD_DATA_COLUMNS",
    # Processing
    "identify",
    "assemble",
    "de_precipitate",
    "harmonize_unit",
    "validate_units",
    "UnitHarmonizer",
    "TimezoneOffsetTable",
    # Clients
    "WRCCClient",
    "FW13Client",
    # Exceptions
    "RAWSError",
    "RAWSConnectionError",
    "RAWSQueryError",
    "EmptySourceError",
    "UnknownSchemaError",
    "UnsupportedUnitError",
    "MalformedTimestampError",
    "MissingTimezoneOffsetError",
]
