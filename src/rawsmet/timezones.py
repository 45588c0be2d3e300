"""
Standard (non-daylight) UTC offsets for station timezones.

RAWS archives report observations in local standard time, which is a fixed
offset all year. Offsets are taken from the Olson database via pytz.
"""

import logging
from datetime import datetime
from typing import Dict, Optional

import pytz

from .exceptions import MissingTimezoneOffsetError

logger = logging.getLogger(__name__)

# Any date works as long as the zone's standard offset did not change since.
REFERENCE_DATE = datetime(2009, 1, 1)


class TimezoneOffsetTable:
    """
    Lookup from timezone name to signed UTC offset hours.

    Args:
        overrides: Optional explicit ``{timezone: offset_hours}`` entries that
            take precedence over the Olson database.
    """

    def __init__(self, overrides: Optional[Dict[str, float]] = None):
        self._offsets: Dict[str, float] = dict(overrides or {})

    def lookup(self, timezone: Optional[str]) -> float:
        """
        Return the standard UTC offset in hours for ``timezone``.

        Raises:
            MissingTimezoneOffsetError: If the timezone is missing or unknown
        """
        if not timezone:
            raise MissingTimezoneOffsetError("Station metadata has no timezone")

        if timezone not in self._offsets:
            try:
                tz = pytz.timezone(timezone)
            except pytz.UnknownTimeZoneError as e:
                raise MissingTimezoneOffsetError(
                    f"No UTC offset available for timezone '{timezone}'"
                ) from e
            standard = tz.utcoffset(REFERENCE_DATE) - tz.dst(REFERENCE_DATE)
            self._offsets[timezone] = standard.total_seconds() / 3600.0
            logger.debug(f"UTC offset for {timezone}: {self._offsets[timezone]}")

        return self._offsets[timezone]

    def __contains__(self, timezone: str) -> bool:
        try:
            self.lookup(timezone)
        except MissingTimezoneOffsetError:
            return False
        return True


default_offsets = TimezoneOffsetTable()
