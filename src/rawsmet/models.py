"""
Data models for RAWS station metadata and timeseries.
"""

import math
from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, Optional

import pandas as pd

# Column names used when metadata is shown as a table
META_COLUMNS = {
    "device_deployment_id": "deviceDeploymentID",
    "device_id": "deviceID",
    "location_id": "locationID",
    "location_name": "locationName",
    "longitude": "longitude",
    "latitude": "latitude",
    "elevation": "elevation",
    "country_code": "countryCode",
    "state_code": "stateCode",
    "timezone": "timezone",
    "nws_id": "nwsID",
    "wrcc_id": "wrccID",
    "agency_name": "agencyName",
}


@dataclass
class StationMetadata:
    """Information about a single RAWS station deployment."""

    device_deployment_id: str
    location_name: str
    longitude: float
    latitude: float
    timezone: str  # Olson name, e.g. 'America/Los_Angeles'
    elevation: Optional[float] = None
    device_id: Optional[str] = None
    location_id: Optional[str] = None
    country_code: Optional[str] = "US"
    state_code: Optional[str] = None
    nws_id: Optional[str] = None
    wrcc_id: Optional[str] = None
    agency_name: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return the metadata keyed by the camelCase table column names."""
        return {META_COLUMNS[key]: value for key, value in asdict(self).items()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StationMetadata":
        """Build metadata from camelCase or snake_case keys."""
        reverse = {camel: snake for snake, camel in META_COLUMNS.items()}
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in data.items():
            name = reverse.get(key, key)
            if name in known:
                if isinstance(value, float) and math.isnan(value):
                    value = None
                kwargs[name] = value
        return cls(**kwargs)


@dataclass(eq=False)
class TimeseriesObject:
    """
    Hourly observations for one station.

    ``data`` is sorted by ``datetime`` (UTC) and described by exactly one
    ``meta`` record. Collections of stations are plain lists or dicts of
    TimeseriesObject.
    """

    meta: StationMetadata
    data: pd.DataFrame = field(default_factory=pd.DataFrame)

    def __len__(self) -> int:
        return len(self.data)

    def equals(self, other: Any) -> bool:
        """Field-by-field equality of metadata and data."""
        if not isinstance(other, TimeseriesObject):
            return False
        if self.meta.to_dict() != other.meta.to_dict():
            return False
        return bool(self.data.equals(other.data))

    def __repr__(self) -> str:
        return (
            f"TimeseriesObject(station='{self.meta.device_deployment_id}', "
            f"rows={len(self.data)})"
        )


# Data columns present on every TimeseriesObject, in output order
STANDARD_DATA_COLUMNS = [
    "datetime",
    "temperature",
    "humidity",
    "windSpeed",
    "windDirection",
    "maxGustSpeed",
    "maxGustDirection",
    "precipitation",
    "solarRadiation",
    "fuelMoisture",
    "fuelTemperature",
    "monitorType",
]

NUMERIC_DATA_COLUMNS = [
    name for name in STANDARD_DATA_COLUMNS if name not in ("datetime", "monitorType")
]
