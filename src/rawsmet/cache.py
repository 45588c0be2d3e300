"""
On-disk cache of TimeseriesObjects.

Objects are stored as pandas pickle files under the configured data
directory, so dtypes and timezones survive a round trip unchanged.
"""

import logging
from pathlib import Path
from typing import Optional, Union

import pandas as pd

from .config import RAWSConfig
from .exceptions import RAWSError
from .models import StationMetadata, TimeseriesObject

logger = logging.getLogger(__name__)

CACHE_SUFFIX = ".pkl"


def cache_path(config: RAWSConfig, name: str) -> Path:
    """Path of the cache file ``name`` in the configured data directory."""
    return Path(config.data_dir) / f"{name}{CACHE_SUFFIX}"


def save(obj: TimeseriesObject, path: Union[str, Path]) -> Path:
    """Write a TimeseriesObject to ``path``."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    pd.to_pickle({"meta": obj.meta.to_dict(), "data": obj.data}, path)
    logger.debug(f"Saved {obj!r} to {path}")
    return path


def load(path: Union[str, Path]) -> TimeseriesObject:
    """
    Read a TimeseriesObject written by :func:`save`.

    Raises:
        FileNotFoundError: If ``path`` does not exist
        RAWSError: If the file does not hold a cached TimeseriesObject
    """
    content = pd.read_pickle(Path(path))
    if not isinstance(content, dict) or not {"meta", "data"} <= set(content):
        raise RAWSError(f"{path} does not contain a cached timeseries")
    return TimeseriesObject(
        meta=StationMetadata.from_dict(content["meta"]), data=content["data"]
    )


def load_cached(config: RAWSConfig, name: str) -> Optional[TimeseriesObject]:
    """Return the cached object ``name``, or None if it is not cached."""
    path = cache_path(config, name)
    if not path.exists():
        return None
    logger.info(f"Loading data from {path}")
    return load(path)


def save_cached(obj: TimeseriesObject, config: RAWSConfig, name: str) -> Path:
    """Save ``obj`` as ``name`` in the configured data directory."""
    config.ensure_data_dir()
    return save(obj, cache_path(config, name))
