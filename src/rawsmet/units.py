"""
Unit harmonization and conversion.
"""

from typing import TYPE_CHECKING, Dict, Sequence, Union

from .exceptions import UnsupportedUnitError

if TYPE_CHECKING:
    from .wrcc.catalog import SchemaDefinition

# Known spellings, keyed by lower-cased token with spaces removed
UNIT_VARIATIONS: Dict[str, str] = {
    "mm": "mm",
    "in": "in",
    "in.": "in",
    "m/s": "m/s",
    "mph": "mph",
    "deg": "deg",
    "degc": "degC",
    "degf": "degF",
}

# Unit every WRCC export must report for these columns
EXPECTED_UNITS: Dict[str, str] = {
    "precipitation": "mm",
    "temperature": "degC",
    "fuelTemperature": "degC",
    "windSpeed": "m/s",
    "maxGustSpeed": "m/s",
}


def harmonize_unit(token: str) -> str:
    """Collapse spelling and spacing variants of a unit token."""
    cleaned = token.replace(":", "").replace(" ", "").strip()
    return UNIT_VARIATIONS.get(cleaned.lower(), cleaned)


class UnitHarmonizer:
    """Checks that unit-bearing columns are reported in metric units."""

    def __init__(self, expected_units: Dict[str, str] = EXPECTED_UNITS):
        self.expected_units = expected_units

    def validate(
        self, unit_tokens: Union[str, Sequence[str]], schema: "SchemaDefinition"
    ) -> None:
        """
        Validate the units line of a WRCC header against ``schema``.

        Args:
            unit_tokens: The units header line, or its tab-separated tokens
            schema: The layout the header was matched to

        Raises:
            UnsupportedUnitError: If a column is reported in an unexpected unit
        """
        if isinstance(unit_tokens, str):
            unit_tokens = unit_tokens.split("\t")
        tokens = list(unit_tokens)

        for column, expected in self.expected_units.items():
            index = schema.index_of(column)
            if index is None:
                continue
            raw = tokens[index] if index < len(tokens) else ""
            unit = harmonize_unit(raw)
            if unit != expected:
                raise UnsupportedUnitError(column, unit)


def validate_units(
    unit_tokens: Union[str, Sequence[str]], schema: "SchemaDefinition"
) -> None:
    """Module-level shortcut for ``UnitHarmonizer().validate``."""
    UnitHarmonizer().validate(unit_tokens, schema)


# Conversions used for FW13 records reported in U.S. units


def fahrenheit_to_celsius(temp):
    return 5.0 / 9.0 * (temp - 32)


def mph_to_mps(speed):
    return 1609.344 * speed / 3600


def kph_to_mps(speed):
    return 1000 * speed / 3600


def mps_to_mph(speed):
    return 2.23694 * speed


def inches_to_mm(amount):
    return 25.4 * amount
