"""
Client for FW13 files published by the CEFA RAWS archive.
"""

import logging

import httpx

from ..client import BaseRAWSClient
from ..config import FW13_URL
from ..exceptions import RAWSConnectionError, RAWSQueryError

logger = logging.getLogger(__name__)


class FW13Client(BaseRAWSClient):
    """Downloads complete station histories as ``{nwsID}.fw13`` files."""

    BASE_URL = FW13_URL

    def station_url(self, nws_id: str) -> str:
        base = self.base_url if self.base_url.endswith("/") else self.base_url + "/"
        return f"{base}{nws_id}.fw13"

    async def download(self, nws_id: str) -> str:
        """
        Download the FW13 file for one station.

        Args:
            nws_id: Six-digit NWS station identifier

        Returns:
            File contents as text

        Raises:
            RAWSQueryError: If the station file does not exist
            RAWSConnectionError: On timeouts, network errors and server errors
        """
        url = self.station_url(nws_id)
        logger.debug(f"Downloading FW13 data from {url}")

        try:
            response = await self._client.get(url)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            raise RAWSConnectionError(f"Request timeout after {self.timeout}s") from e
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                raise RAWSQueryError(f"No FW13 file for station {nws_id}") from e
            elif e.response.status_code >= 500:
                raise RAWSConnectionError("CEFA service temporarily unavailable") from e
            else:
                raise RAWSConnectionError(
                    f"HTTP error {e.response.status_code}: {e}"
                ) from e
        except httpx.RequestError as e:
            raise RAWSConnectionError(f"Network error: {e}") from e

        return response.text
