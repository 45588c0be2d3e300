"""
Parse WRCC tab-delimited exports into typed records.
"""

import logging
from typing import Any, Iterable, Optional

import numpy as np
import pandas as pd

from ..assembler import add_century
from ..exceptions import EmptySourceError, UnknownSchemaError
from ..models import NUMERIC_DATA_COLUMNS
from ..precipitation import de_precipitate
from ..units import validate_units
from .catalog import NUMERIC, SchemaDefinition, normalize_header_line
from .matcher import identify, split_lines

logger = logging.getLogger(__name__)

# Missing-value code requested from the WRCC service
MISSING_VALUE = -9999


def _clean_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    if text == "" or text == str(MISSING_VALUE):
        return None
    return text


def parse_records(lines: Iterable[str], schema: SchemaDefinition) -> pd.DataFrame:
    """
    Parse WRCC data lines using the column layout in ``schema``.

    Blank lines and lines starting with ':' (header repeats) are skipped.
    Short rows are padded with missing values and long rows are truncated.
    ``-9999`` becomes missing in every column. Standard numeric columns the
    layout does not report are added as all-missing so every layout produces
    the same core shape.

    Args:
        lines: Data lines, without the station name and header lines
        schema: Layout matched from the header

    Returns:
        DataFrame with one row per observation and canonical column names.
        ``datetime`` holds the raw local standard time strings.

    Raises:
        UnknownSchemaError: If ``schema`` is the UNKNOWN sentinel
    """
    if schema.is_unknown:
        raise UnknownSchemaError("Cannot parse records without a known layout")

    columns = list(schema.canonical_column_names)
    rows = []
    for line in lines:
        line = normalize_header_line(line)
        if not line.strip() or line.startswith(":"):
            continue
        values = line.split("\t")
        padded_row = values + [None] * (len(columns) - len(values))
        rows.append(padded_row[: len(columns)])

    df = pd.DataFrame(rows, columns=columns, dtype=object)

    bad_values = 0
    for name, column_type in zip(columns, schema.column_types):
        text = df[name].map(_clean_text)
        if column_type == NUMERIC:
            converted = pd.to_numeric(text, errors="coerce").astype("float64")
            bad_values += int((converted.isna() & text.notna()).sum())
            df[name] = converted.mask(converted == MISSING_VALUE)
        else:
            df[name] = text

    if bad_values:
        logger.warning(
            f"{schema.monitor_type}: {bad_values} non-numeric values set to missing"
        )

    for name in NUMERIC_DATA_COLUMNS:
        if name not in df.columns:
            df[name] = np.nan

    return df


def parse_data(blob: str) -> pd.DataFrame:
    """
    Parse a complete WRCC text export.

    The header is matched against the catalog, units are checked, records are
    parsed, a ``monitorType`` column is added and the cumulative precipitation
    counter is converted to hourly amounts in timestamp order.

    Args:
        blob: Text returned by the WRCC service

    Returns:
        DataFrame of records with canonical column names

    Raises:
        EmptySourceError: If ``blob`` is empty
        UnknownSchemaError: If the header matches no known layout
        UnsupportedUnitError: If a column is not reported in metric units
    """
    if blob is None or not blob.strip():
        raise EmptySourceError("No WRCC data to parse")

    lines = split_lines(blob)
    schema = identify(lines)
    if schema.is_unknown:
        station = lines[0] if lines else ""
        raise UnknownSchemaError(
            f"Unrecognized WRCC header for station '{station}'; "
            f"header lines: {lines[1:4]!r}"
        )

    validate_units(lines[1], schema)

    df = parse_records(lines[4:], schema)
    df["monitorType"] = schema.monitor_type
    stamps = df["datetime"].map(
        lambda value: add_century(value) if isinstance(value, str) else None
    )
    df["precipitation"] = de_precipitate(df["precipitation"], order=stamps)

    logger.debug(f"Parsed {len(df)} {schema.monitor_type} records")
    return df
