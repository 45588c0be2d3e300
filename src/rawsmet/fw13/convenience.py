"""
High-level functions for loading FW13 station data.
"""

import logging
from typing import Dict, Iterable, Optional

from .. import cache
from ..assembler import assemble
from ..config import RAWSConfig
from ..exceptions import RAWSError
from ..models import StationMetadata, TimeseriesObject
from ..timezones import TimezoneOffsetTable
from ..utils import add_sync_version
from .client import FW13Client
from .parser import harmonize, parse_data

logger = logging.getLogger(__name__)


def timeseries_from_text(
    blob: str,
    meta: StationMetadata,
    offsets: Optional[TimezoneOffsetTable] = None,
) -> TimeseriesObject:
    """Build a TimeseriesObject from FW13 text that is already downloaded."""
    return assemble(meta, harmonize(parse_data(blob)), offsets=offsets)


@add_sync_version
async def create_timeseries_object(
    meta: StationMetadata,
    client: Optional[FW13Client] = None,
    offsets: Optional[TimezoneOffsetTable] = None,
) -> TimeseriesObject:
    """
    Download the complete FW13 record of a station.

    Args:
        meta: Station metadata; ``meta.nws_id`` selects the station
        client: FW13 client (required for the async version)
        offsets: Timezone offset table
    """
    if client is None:
        raise TypeError("client parameter is required")
    if not meta.nws_id:
        raise ValueError(f"Station {meta.device_deployment_id} has no nws_id")

    blob = await client.download(meta.nws_id)
    return timeseries_from_text(blob, meta, offsets=offsets)


@add_sync_version
async def load_station(
    meta: StationMetadata,
    config: RAWSConfig,
    force_download: bool = False,
    client: Optional[FW13Client] = None,
    offsets: Optional[TimezoneOffsetTable] = None,
) -> TimeseriesObject:
    """
    Load the FW13 record of a station, using the cache when possible.

    The cache file is ``fw13_{nwsID}`` in ``config.data_dir``.
    """
    name = f"fw13_{meta.nws_id}"
    if not force_download:
        cached = cache.load_cached(config, name)
        if cached is not None:
            return cached

    raws = await create_timeseries_object(meta, client=client, offsets=offsets)
    cache.save_cached(raws, config, name)
    return raws


@add_sync_version
async def load_multiple(
    metas: Iterable[StationMetadata],
    config: RAWSConfig,
    force_download: bool = False,
    client: Optional[FW13Client] = None,
    offsets: Optional[TimezoneOffsetTable] = None,
) -> Dict[str, TimeseriesObject]:
    """
    Load several stations, skipping any that fail with a RAWSError.

    Returns:
        Dict of TimeseriesObject keyed by NWS station id
    """
    result: Dict[str, TimeseriesObject] = {}
    for meta in metas:
        try:
            result[meta.nws_id] = await load_station(
                meta, config, force_download=force_download, client=client, offsets=offsets
            )
        except RAWSError as e:
            logger.warning(f"Skipping {meta.nws_id}: {e}")
            continue
    return result
