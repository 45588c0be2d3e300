"""
Identify which catalog layout a WRCC text export uses.
"""

import logging
from typing import List, Sequence, Union

from .catalog import CATALOG, UNKNOWN, SchemaDefinition, normalize_header_line

logger = logging.getLogger(__name__)


def split_lines(blob: str) -> List[str]:
    """Split a text export into lines with surrounding spaces removed."""
    return [normalize_header_line(line) for line in blob.splitlines()]


def identify(blob: Union[str, Sequence[str]]) -> SchemaDefinition:
    """
    Match the three header lines of a WRCC export against the catalog.

    The first line holds the station name and is ignored. Lines two to four
    are compared by exact string equality with each catalog header, in
    catalog order.

    Args:
        blob: Full text of the export, or its lines

    Returns:
        The matching SchemaDefinition, or UNKNOWN when nothing matches
    """
    if isinstance(blob, str):
        lines = split_lines(blob)
    else:
        lines = [normalize_header_line(line) for line in blob]

    if len(lines) < 4:
        logger.debug("Text has fewer than four lines; no header to match")
        return UNKNOWN

    header = tuple(lines[1:4])
    for schema in CATALOG:
        if schema.header == header:
            logger.debug(f"Matched WRCC header to {schema.monitor_type}")
            return schema

    logger.debug(f"No WRCC layout matches header: {header!r}")
    return UNKNOWN
