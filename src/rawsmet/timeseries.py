"""
Utilities for working with TimeseriesObjects and collections of them.

Collections are plain lists or dicts of TimeseriesObject. Functions that
change ``data`` return a new TimeseriesObject sharing the original ``meta``.
"""

import logging
from datetime import date, datetime
from typing import Any, Callable, Dict, List, Optional, Union

import numpy as np
import pandas as pd

from .assembler import distinct_data
from .exceptions import RAWSError
from .models import STANDARD_DATA_COLUMNS, TimeseriesObject
from .units import mps_to_mph

logger = logging.getLogger(__name__)

DateLike = Union[str, date, datetime, pd.Timestamp]
Condition = Union[str, Callable[[pd.DataFrame], Any]]
TimeseriesCollection = Union[List[TimeseriesObject], Dict[str, TimeseriesObject]]

# Metadata carried onto every row by to_tidy_dataframe
TIDY_META_COLUMNS = [
    "nwsID",
    "wrccID",
    "locationName",
    "longitude",
    "latitude",
    "timezone",
    "elevation",
]

SUMMARY_UNITS = ("day", "week", "month", "year")


def is_valid(obj: Any) -> bool:
    """Check that ``obj`` is a well formed TimeseriesObject."""
    if not isinstance(obj, TimeseriesObject):
        return False
    if not isinstance(obj.data, pd.DataFrame):
        return False

    meta = obj.meta
    for value in (meta.device_deployment_id, meta.timezone):
        if not value:
            return False
    if meta.longitude is None or meta.latitude is None:
        return False

    if any(name not in obj.data.columns for name in STANDARD_DATA_COLUMNS):
        return False

    dtype = obj.data["datetime"].dtype
    return isinstance(dtype, pd.DatetimeTZDtype) and str(dtype.tz) == "UTC"


def is_empty(obj: TimeseriesObject) -> bool:
    return len(obj.data) == 0


def distinct(obj: TimeseriesObject) -> TimeseriesObject:
    """Sort by datetime and remove exact duplicate records."""
    return TimeseriesObject(meta=obj.meta, data=distinct_data(obj.data))


def get_data(obj: TimeseriesObject, for_openair: bool = False) -> pd.DataFrame:
    """
    Return a copy of the data table.

    Args:
        obj: TimeseriesObject
        for_openair: Add the ``date``, ``ws`` and ``wd`` columns expected by
            openair-style wind analysis tools
    """
    data = obj.data.copy()
    if for_openair:
        data["date"] = data["datetime"]
        data["ws"] = data["windSpeed"]
        data["wd"] = data["windDirection"]
    return data


def get_meta(obj: TimeseriesObject) -> pd.DataFrame:
    """Return the station metadata as a one-row DataFrame."""
    return pd.DataFrame([obj.meta.to_dict()])


def filter(obj: TimeseriesObject, condition: Condition) -> TimeseriesObject:
    """
    Keep records matching ``condition``.

    Args:
        obj: TimeseriesObject
        condition: A ``DataFrame.query`` expression such as
            ``"temperature > 30"``, or a callable returning a boolean mask

    Returns:
        New TimeseriesObject with the matching records
    """
    if isinstance(condition, str):
        data = obj.data.query(condition)
    else:
        data = obj.data[condition(obj.data)]
    return TimeseriesObject(meta=obj.meta, data=data.reset_index(drop=True))


def _parse_date(
    value: DateLike, timezone: str, next_day: bool = False
) -> pd.Timestamp:
    if isinstance(value, str) and value.strip().isdigit():
        text = value.strip()
        formats = {8: "%Y%m%d", 10: "%Y%m%d%H", 12: "%Y%m%d%H%M"}
        if len(text) not in formats:
            raise ValueError(f"Cannot interpret '{value}' as a date")
        timestamp = pd.to_datetime(text, format=formats[len(text)])
    else:
        timestamp = pd.Timestamp(value)

    # Add the day on the wall clock; DST days are 23 or 25 hours long
    if next_day:
        timestamp = timestamp + pd.Timedelta(days=1)
    if timestamp.tzinfo is None:
        timestamp = timestamp.tz_localize(timezone)
    return timestamp.tz_convert("UTC")


def _is_date_only(value: DateLike) -> bool:
    if isinstance(value, str):
        return len(value.strip()) == 8 and value.strip().isdigit()
    return isinstance(value, date) and not isinstance(value, datetime)


def filter_date(
    obj: TimeseriesObject,
    start: Optional[DateLike] = None,
    end: Optional[DateLike] = None,
    timezone: Optional[str] = None,
) -> TimeseriesObject:
    """
    Keep records between ``start`` (inclusive) and ``end`` (exclusive).

    Dates may be ``YYYYMMDD``, ``YYYYMMDDHH`` or ``YYYYMMDDHHMM`` strings, ISO
    strings or datetimes. Naive values are interpreted in ``timezone``, which
    defaults to the station timezone. A date-only ``end`` includes that
    whole day.

    Raises:
        ValueError: If neither ``start`` nor ``end`` is given
    """
    if start is None and end is None:
        raise ValueError("At least one of 'start' or 'end' must be specified")

    timezone = timezone or obj.meta.timezone
    obj = distinct(obj)
    datetimes = obj.data["datetime"]

    mask = pd.Series(True, index=obj.data.index)
    if start is not None:
        mask &= datetimes >= _parse_date(start, timezone)
    if end is not None:
        end_time = _parse_date(end, timezone, next_day=_is_date_only(end))
        mask &= datetimes < end_time

    return TimeseriesObject(meta=obj.meta, data=obj.data[mask].reset_index(drop=True))


def _equilibrium_moisture(humidity: pd.Series, temperature: pd.Series) -> pd.Series:
    h, t = humidity, temperature
    m = np.select(
        [h < 10, h <= 50, h > 50],
        [
            0.03229 + 0.281073 * h - 0.000578 * h * t,
            2.22749 + 0.160107 * h - 0.01478 * t,
            21.0606 + 0.005565 * h**2 - 0.00035 * h * t - 0.483199 * h,
        ],
        default=np.nan,
    )
    return pd.Series(m, index=humidity.index)


def add_fire_weather(data: pd.DataFrame) -> pd.DataFrame:
    """
    Add vapor pressure deficit (``VPD``, hPa) and the Fosberg Fire Weather
    Index (``FFWI``) computed from temperature, humidity and wind speed.
    """
    h = data["humidity"].astype("float64")
    t = data["temperature"].astype("float64")

    data["VPD"] = (1 - h / 100) * 6.1094 * np.exp(17.625 * t / (t + 243.04))

    m = _equilibrium_moisture(h, t) / 30
    n = 1 - 2 * m + 1.5 * m**2 - 0.5 * m**3
    wind_mph = mps_to_mph(data["windSpeed"].astype("float64"))
    data["FFWI"] = n * np.sqrt(1 + wind_mph**2) / 0.3002
    return data


def to_tidy_dataframe(obj: TimeseriesObject, size_max: float = 100) -> pd.DataFrame:
    """
    Flatten a TimeseriesObject into one table with station metadata repeated
    on every row, plus ``VPD`` and ``FFWI`` columns.

    Args:
        obj: TimeseriesObject
        size_max: Largest allowed result size in MB

    Raises:
        RAWSError: If ``obj`` has no data
        ValueError: If the result would be larger than ``size_max``
    """
    if is_empty(obj):
        raise RAWSError(f"{obj.meta.device_deployment_id} has no data")

    meta = {key: obj.meta.to_dict()[key] for key in TIDY_META_COLUMNS}
    meta_size = pd.DataFrame([meta]).memory_usage(deep=True, index=False).sum()
    tidy_size = obj.data.memory_usage(deep=True).sum() + meta_size * len(obj.data)
    if tidy_size > size_max * 1e6:
        raise ValueError(
            f"Resulting table will be {tidy_size / 1e6:.1f} MB. "
            "Adjust 'size_max' or consider filtering by datetime."
        )

    data = obj.data.copy()
    for key, value in meta.items():
        data[key] = value
    return add_fire_weather(data)


def _period_start(local: pd.Series, unit: str) -> pd.Series:
    naive = local.dt.tz_localize(None)
    if unit == "day":
        return naive.dt.floor("D")
    if unit == "week":
        # Weeks start on Sunday
        days = (naive.dt.dayofweek + 1) % 7
        return naive.dt.floor("D") - pd.to_timedelta(days, unit="D")
    if unit == "month":
        return naive.dt.to_period("M").dt.start_time
    return naive.dt.to_period("Y").dt.start_time


def summarize(
    obj: TimeseriesObject,
    unit: str = "day",
    fun: Union[str, Callable[[pd.Series], float]] = "mean",
    min_count: int = 1,
) -> TimeseriesObject:
    """
    Aggregate numeric columns over calendar periods in the station timezone.

    Args:
        obj: TimeseriesObject
        unit: One of 'day', 'week', 'month' or 'year'
        fun: Name of a pandas reduction ('mean', 'max', 'sum', ...) or a
            callable applied to the non-missing values of each period
        min_count: Periods with fewer non-missing values are set to missing

    Returns:
        TimeseriesObject whose ``datetime`` marks the start of each period
    """
    if unit not in SUMMARY_UNITS:
        raise ValueError(f"unit must be one of {SUMMARY_UNITS}, got {unit!r}")
    if is_empty(obj):
        raise RAWSError(f"{obj.meta.device_deployment_id} has no data")

    timezone = obj.meta.timezone
    data = obj.data
    local = data["datetime"].dt.tz_convert(timezone)
    period = _period_start(local, unit)

    def reduce(values: pd.Series) -> float:
        values = values.dropna()
        if len(values) < min_count:
            return np.nan
        if isinstance(fun, str):
            return getattr(values, fun)()
        return fun(values)

    numeric = [
        name
        for name in data.columns
        if name != "datetime" and pd.api.types.is_numeric_dtype(data[name])
    ]
    summary = data[numeric].groupby(period.values).agg(reduce)
    summary = summary.replace([np.inf, -np.inf], np.nan)
    if "monitorType" in data.columns:
        summary["monitorType"] = data["monitorType"].groupby(period.values).first()

    starts = pd.DatetimeIndex(summary.index).tz_localize(
        timezone, ambiguous="NaT", nonexistent="shift_forward"
    )
    summary = summary.reset_index(drop=True)
    summary.insert(0, "datetime", pd.Series(starts.tz_convert("UTC")))

    return TimeseriesObject(meta=obj.meta, data=summary)


# ----- Collections -----------------------------------------------------------


def _apply(objs: TimeseriesCollection, fn: Callable[[TimeseriesObject], Any]) -> Any:
    if isinstance(objs, dict):
        return {key: fn(obj) for key, obj in objs.items()}
    return [fn(obj) for obj in objs]


def _values(objs: TimeseriesCollection) -> List[TimeseriesObject]:
    return list(objs.values()) if isinstance(objs, dict) else list(objs)


def is_timeseries_list(objs: Any) -> bool:
    """Check that ``objs`` is a non-empty list or dict of valid objects."""
    if not isinstance(objs, (list, dict)) or len(objs) == 0:
        return False
    return all(is_valid(obj) for obj in _values(objs))


def remove_empty(objs: TimeseriesCollection) -> TimeseriesCollection:
    """Drop objects without data, keeping the collection type."""
    if isinstance(objs, dict):
        return {key: obj for key, obj in objs.items() if not is_empty(obj)}
    return [obj for obj in objs if not is_empty(obj)]


def filter_list(objs: TimeseriesCollection, condition: Condition) -> TimeseriesCollection:
    """Apply :func:`filter` to every object in a collection."""
    return _apply(objs, lambda obj: filter(obj, condition))


def filter_date_list(
    objs: TimeseriesCollection,
    start: Optional[DateLike] = None,
    end: Optional[DateLike] = None,
    timezone: Optional[str] = None,
) -> TimeseriesCollection:
    """Apply :func:`filter_date` to every object in a collection."""
    return _apply(objs, lambda obj: filter_date(obj, start, end, timezone))


def list_to_tidy_dataframe(
    objs: TimeseriesCollection, size_max: float = 100
) -> pd.DataFrame:
    """Concatenate :func:`to_tidy_dataframe` output for every non-empty object."""
    frames = [
        to_tidy_dataframe(obj, size_max=size_max)
        for obj in _values(remove_empty(objs))
    ]
    if not frames:
        logger.warning("No non-empty timeseries to combine")
        return pd.DataFrame()
    return pd.concat(frames, ignore_index=True)
