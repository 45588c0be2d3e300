"""
Assemble station metadata and parsed records into a TimeseriesObject.
"""

import logging
import warnings
from datetime import date
from typing import Any, Dict, List, Optional, Sequence, Union

import numpy as np
import pandas as pd

from .exceptions import MalformedTimestampError
from .models import STANDARD_DATA_COLUMNS, StationMetadata, TimeseriesObject
from .timezones import TimezoneOffsetTable, default_offsets

logger = logging.getLogger(__name__)

# Decimal places kept for each column
ROUNDING: Dict[str, int] = {
    "temperature": 1,
    "fuelTemperature": 1,
    "humidity": 0,
    "windSpeed": 2,
    "maxGustSpeed": 2,
    "windDirection": 0,
    "maxGustDirection": 0,
    "precipitation": 2,
    "solarRadiation": 0,
    "fuelMoisture": 1,
    "batteryVoltage": 1,
}


def add_century(value: str, pivot: Optional[int] = None) -> str:
    """
    Expand a ``YYMMDDhhmm`` string to ``YYYYMMDDhhmm``.

    Two-digit years after ``pivot`` (default: the current two-digit year)
    belong to the 1900s, all others to the 2000s. Longer strings are returned
    unchanged.
    """
    if len(value) != 10:
        return value
    if pivot is None:
        pivot = date.today().year % 100
    century = "19" if int(value[:2]) > pivot else "20"
    return century + value


def parse_local_standard_time(
    values: pd.Series, utc_offset: float, pivot: Optional[int] = None
) -> pd.Series:
    """
    Convert local standard time strings to UTC timestamps.

    The strings are parsed as if they were UTC and then shifted by the
    station's standard offset, e.g. 00:00 LST at UTC-8 is 08:00 UTC.

    Raises:
        MalformedTimestampError: If any value cannot be parsed
    """
    text = values.astype(str).str.strip()
    bad = ~text.str.fullmatch(r"\d{10}|\d{12}")
    if bad.any():
        raise MalformedTimestampError(
            f"Unparseable local time value: '{text[bad].iloc[0]}'"
        )
    try:
        expanded = text.map(lambda value: add_century(value, pivot))
        parsed = pd.to_datetime(expanded, format="%Y%m%d%H%M", utc=True)
    except ValueError as e:
        raise MalformedTimestampError(f"Unparseable local time value: {e}") from e
    return parsed - pd.Timedelta(hours=utc_offset)


def distinct_data(df: pd.DataFrame) -> pd.DataFrame:
    """Sort by datetime and drop rows that are identical in every column."""
    result = (
        df.sort_values("datetime", kind="stable")
        .drop_duplicates()
        .reset_index(drop=True)
    )
    duplicated = result["datetime"].duplicated()
    if duplicated.any():
        warnings.warn(
            f"{int(duplicated.sum())} timestamps have more than one distinct record",
            UserWarning,
            stacklevel=2,
        )
    return result


def round_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Round numeric columns to their documented precision."""
    for name, digits in ROUNDING.items():
        if name in df.columns:
            df[name] = pd.to_numeric(df[name], errors="coerce").round(digits)
    return df


def assemble(
    meta: StationMetadata,
    records: Union[pd.DataFrame, Sequence[Dict[str, Any]]],
    offsets: Optional[TimezoneOffsetTable] = None,
    columns: Optional[List[str]] = None,
) -> TimeseriesObject:
    """
    Build a TimeseriesObject from one station's metadata and parsed records.

    Args:
        meta: Station metadata; ``meta.timezone`` selects the UTC offset
        records: Parsed records with a ``datetime`` column of local standard
            time strings (``YYMMDDhhmm`` or ``YYYYMMDDhhmm``)
        offsets: Timezone offset table, defaults to the Olson database
        columns: Output columns, defaults to the standard data columns

    Returns:
        TimeseriesObject with UTC timestamps, sorted and de-duplicated

    Raises:
        MissingTimezoneOffsetError: If no offset is known for the timezone
        MalformedTimestampError: If a datetime string cannot be parsed
    """
    if offsets is None:
        offsets = default_offsets
    if columns is None:
        columns = STANDARD_DATA_COLUMNS

    utc_offset = offsets.lookup(meta.timezone)

    df = records.copy() if isinstance(records, pd.DataFrame) else pd.DataFrame(records)
    if "datetime" not in df.columns:
        df["datetime"] = pd.Series(dtype=object)

    for name in columns:
        if name not in df.columns:
            df[name] = None if name == "monitorType" else np.nan

    df = df[list(columns)].copy()
    missing = df["datetime"].isna()
    if missing.any():
        logger.warning(
            f"{meta.device_deployment_id}: dropping {int(missing.sum())} records "
            "without a timestamp"
        )
        df = df[~missing].copy()

    df["datetime"] = parse_local_standard_time(df["datetime"], utc_offset)
    df = round_columns(df)
    df = distinct_data(df)

    logger.debug(
        f"Assembled {len(df)} records for {meta.device_deployment_id} "
        f"(UTC offset {utc_offset})"
    )
    return TimeseriesObject(meta=meta, data=df)
