"""
Shared HTTP client plumbing for the RAWS data services.
"""

from typing import Any, Optional

import httpx

from . import __version__


class BaseRAWSClient:
    """
    Async HTTP client base for the WRCC and CEFA archives.

    Subclasses set ``BASE_URL`` and implement their own download method.
    """

    BASE_URL = ""

    def __init__(self, timeout: int = 30, base_url: Optional[str] = None):
        self.timeout = timeout
        self.base_url = base_url or self.BASE_URL
        self._client = httpx.AsyncClient(
            timeout=timeout,
            follow_redirects=True,
            headers={"User-Agent": f"rawsmet/{__version__}"},
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "BaseRAWSClient":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
