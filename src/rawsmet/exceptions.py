"""
Exceptions for RAWS data access and processing.
"""


class RAWSError(Exception):
    """Base exception for rawsmet errors."""

    pass


class RAWSConnectionError(RAWSError):
    """Error connecting to a RAWS data service."""

    pass


class RAWSQueryError(RAWSError):
    """The data service answered with content that cannot be used."""

    pass


class EmptySourceError(RAWSError):
    """The data source returned no observations for the requested window."""

    pass


class UnknownSchemaError(RAWSError):
    """No known WRCC header layout matches the incoming text."""

    pass


class UnsupportedUnitError(RAWSError):
    """A column was reported in a unit other than the expected metric unit."""

    def __init__(self, column: str, unit: str):
        self.column = column
        self.unit = unit
        super().__init__(f"Unhandled unit '{unit}' for column '{column}'")


class MalformedTimestampError(RAWSError):
    """A local standard time string could not be parsed."""

    pass


class MissingTimezoneOffsetError(RAWSError):
    """No UTC offset is known for a station timezone."""

    pass
