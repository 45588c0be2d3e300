"""
Configuration for loaders that download and cache RAWS data.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

WRCC_URL = "https://wrcc.dri.edu/cgi-bin/wea_list2.pl"
FW13_URL = "https://cefa.dri.edu/raws/fw13/"


@dataclass
class RAWSConfig:
    """
    Settings shared by the load_* functions.

    The data directory is always passed explicitly; there is no process-wide
    default location. Service URLs and timeouts belong to the clients.
    """

    data_dir: Union[str, Path]
    password: Optional[str] = None

    def __post_init__(self) -> None:
        self.data_dir = Path(self.data_dir).expanduser()

    def ensure_data_dir(self) -> Path:
        """Create the data directory if needed and return it."""
        path = Path(self.data_dir)
        path.mkdir(parents=True, exist_ok=True)
        return path
