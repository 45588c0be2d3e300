"""
High-level functions for loading WRCC station data.
"""

import logging
from typing import Dict, Iterable, Optional

import pandas as pd

from .. import cache
from ..assembler import assemble
from ..config import RAWSConfig
from ..exceptions import RAWSError
from ..models import StationMetadata, TimeseriesObject
from ..timeseries import filter_date
from ..timezones import TimezoneOffsetTable
from ..utils import add_sync_version
from .client import DateLike, WRCCClient
from .parser import parse_data

logger = logging.getLogger(__name__)


def timeseries_from_text(
    blob: str,
    meta: StationMetadata,
    offsets: Optional[TimezoneOffsetTable] = None,
) -> TimeseriesObject:
    """
    Build a TimeseriesObject from WRCC text that has already been downloaded.

    Raises:
        EmptySourceError: If ``blob`` is empty
        UnknownSchemaError: If the header matches no known layout
        UnsupportedUnitError: If a column is not in metric units
        MissingTimezoneOffsetError: If the station timezone is unknown
    """
    return assemble(meta, parse_data(blob), offsets=offsets)


@add_sync_version
async def create_timeseries_object(
    meta: StationMetadata,
    start: DateLike,
    end: DateLike,
    password: Optional[str] = None,
    client: Optional[WRCCClient] = None,
    offsets: Optional[TimezoneOffsetTable] = None,
) -> TimeseriesObject:
    """
    Download WRCC data for one station and assemble a TimeseriesObject.

    Args:
        meta: Station metadata; ``meta.wrcc_id`` selects the station
        start: Start of the request (UTC), e.g. '20200101'
        end: End of the request (UTC)
        password: WRCC password for data older than the public window
        client: WRCC client (required for the async version)
        offsets: Timezone offset table

    Returns:
        TimeseriesObject with hourly observations
    """
    if client is None:
        raise TypeError("client parameter is required")
    if not meta.wrcc_id:
        raise ValueError(f"Station {meta.device_deployment_id} has no wrcc_id")

    blob = await client.download(meta.wrcc_id, start, end, password=password)
    return timeseries_from_text(blob, meta, offsets=offsets)


def _cache_name(meta: StationMetadata, year: int) -> str:
    return f"wrcc_{meta.wrcc_id}_{year}"


@add_sync_version
async def load_year(
    meta: StationMetadata,
    year: int,
    config: RAWSConfig,
    force_download: bool = False,
    client: Optional[WRCCClient] = None,
    offsets: Optional[TimezoneOffsetTable] = None,
) -> TimeseriesObject:
    """
    Load one calendar year of WRCC data for a station.

    Data are read from the cache in ``config.data_dir`` when present.
    Otherwise the year is downloaded with one extra day on each side, trimmed
    to the calendar year in the station's timezone and saved to the cache.

    Args:
        meta: Station metadata
        year: Calendar year
        config: Data directory and service settings
        force_download: Ignore any cached copy
        client: WRCC client, needed when the year is not cached
        offsets: Timezone offset table
    """
    if not isinstance(year, int):
        raise TypeError("Parameter 'year' must be an integer")

    name = _cache_name(meta, year)
    if not force_download:
        cached = cache.load_cached(config, name)
        if cached is not None:
            return cached

    if client is None:
        raise TypeError("client parameter is required")

    first_day = pd.Timestamp(year=year, month=1, day=1, tz="UTC")
    start = first_day - pd.Timedelta(days=1)
    end = first_day + pd.DateOffset(years=1) + pd.Timedelta(days=1)

    logger.info(f"Downloading WRCC data for {meta.wrcc_id} {year}")
    raws = await create_timeseries_object(
        meta,
        start.strftime("%Y%m%d%H"),
        end.strftime("%Y%m%d%H"),
        password=config.password,
        client=client,
        offsets=offsets,
    )
    raws = filter_date(raws, f"{year}0101", f"{year}1231")

    cache.save_cached(raws, config, name)
    return raws


@add_sync_version
async def load_multiple(
    metas: Iterable[StationMetadata],
    year: int,
    config: RAWSConfig,
    force_download: bool = False,
    client: Optional[WRCCClient] = None,
    offsets: Optional[TimezoneOffsetTable] = None,
) -> Dict[str, TimeseriesObject]:
    """
    Load a year of data for several stations.

    Stations that fail with a RAWSError are logged and left out of the
    result instead of aborting the batch.

    Returns:
        Dict of TimeseriesObject keyed by WRCC station id
    """
    result: Dict[str, TimeseriesObject] = {}
    for meta in metas:
        try:
            result[meta.wrcc_id] = await load_year(
                meta,
                year,
                config,
                force_download=force_download,
                client=client,
                offsets=offsets,
            )
        except RAWSError as e:
            logger.warning(f"Skipping {meta.wrcc_id}: {e}")
            continue
    return result
