"""
Client for the WRCC RAWS hourly data service.
"""

import logging
from datetime import datetime
from typing import Dict, Optional, Union

import httpx
import pandas as pd

from ..client import BaseRAWSClient
from ..config import WRCC_URL
from ..exceptions import EmptySourceError, RAWSConnectionError, RAWSQueryError

logger = logging.getLogger(__name__)

DateLike = Union[str, datetime, pd.Timestamp]


def parse_request_date(value: DateLike) -> pd.Timestamp:
    """Parse ``YYYYMMDD[HH]`` strings, ISO strings or datetimes as UTC."""
    if isinstance(value, str):
        text = value.strip()
        if text.isdigit() and len(text) in (8, 10):
            fmt = "%Y%m%d%H" if len(text) == 10 else "%Y%m%d"
            return pd.to_datetime(text, format=fmt, utc=True)
    timestamp = pd.Timestamp(value)
    if timestamp.tzinfo is None:
        return timestamp.tz_localize("UTC")
    return timestamp.tz_convert("UTC")


def wrcc_station_code(wrcc_id: str) -> str:
    """Return the four-character WRCC station code, dropping any state prefix."""
    code = wrcc_id.strip()
    if len(code) == 6:
        code = code[2:]
    return code.upper()


class WRCCClient(BaseRAWSClient):
    """
    Client for the WRCC ``wea_list2`` hourly data form.

    Requests are made for metric units, tab delimited columns, ``-9999``
    missing values and two-digit-year LST timestamps, which is the format
    the WRCC parser expects.
    """

    BASE_URL = WRCC_URL

    def build_params(
        self,
        wrcc_id: str,
        start: DateLike,
        end: DateLike,
        password: Optional[str] = None,
    ) -> Dict[str, str]:
        """Form fields for a station and date range."""
        start_time = parse_request_date(start)
        end_time = parse_request_date(end)

        params = {
            "stn": wrcc_station_code(wrcc_id),
            "smon": start_time.strftime("%m"),
            "sday": start_time.strftime("%d"),
            "syea": start_time.strftime("%y"),
            "emon": end_time.strftime("%m"),
            "eday": end_time.strftime("%d"),
            "eyea": end_time.strftime("%y"),
            "Submit Info": "Submit Info",
            "dfor": "04",
            "src": "W",
            "miss": "08",  # -9999
            "flag": "N",
            "Dfmt": "01",
            "Tfmt": "01",
            "Head": "01",
            "Deli": "01",  # tab
            "unit": "M",  # metric
            "WsMon": "01",
            "WsDay": "01",
            "WeMon": "12",
            "WeDay": "12",
            "WsHou": "00",
            "WeHou": "24",
            ".cgifields": ["unit", "flag", "srce"],
        }
        if password is not None:
            params["secret"] = password
        return params

    async def download(
        self,
        wrcc_id: str,
        start: DateLike,
        end: DateLike,
        password: Optional[str] = None,
    ) -> str:
        """
        Download hourly data for one station.

        Args:
            wrcc_id: WRCC station identifier, e.g. 'waWENU' or 'WENU'
            start: Start of the request (UTC)
            end: End of the request (UTC)
            password: Password for data older than the public window

        Returns:
            The text export, or an empty string if the service returned an
            HTTP error status

        Raises:
            RAWSConnectionError: On timeouts and network errors
            RAWSQueryError: If the archive requires a password
            EmptySourceError: If the station has no data for the window
        """
        params = self.build_params(wrcc_id, start, end, password)
        logger.debug(f"Downloading WRCC data for {params['stn']}")

        try:
            response = await self._client.post(self.base_url, data=params)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            raise RAWSConnectionError(f"Request timeout after {self.timeout}s") from e
        except httpx.HTTPStatusError as e:
            logger.error(
                f"WRCC data service failed for {wrcc_id} with status "
                f"{e.response.status_code}"
            )
            return ""
        except httpx.RequestError as e:
            raise RAWSConnectionError(f"Network error: {e}") from e

        text = response.text
        if "Access to WRCC historical" in text:
            raise RAWSQueryError(
                "Access to WRCC historical raws data is limited to the last 30 days. "
                "Did you specify a password?"
            )

        if len(text.splitlines()) < 4:
            raise EmptySourceError(
                f"No data was found for station {params['stn']} between "
                f"{parse_request_date(start)} and {parse_request_date(end)}"
            )

        return text
