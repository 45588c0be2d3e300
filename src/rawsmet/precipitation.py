"""
Hourly precipitation from cumulative gauge counters.
"""

from typing import Any, Optional, Sequence, Union

import numpy as np
import pandas as pd


def _differences(series: pd.Series) -> pd.Series:
    hourly = series - series.shift(1)

    # delta + previous == current
    reset = hourly < 0
    return hourly.where(~reset, series)


def de_precipitate(
    cumulative: Union[pd.Series, Sequence[float]],
    order: Optional[Sequence[Any]] = None,
) -> pd.Series:
    """
    Convert a cumulative precipitation counter into hourly amounts.

    WRCC gauges accumulate over the water year and FW13 records over the LST
    day. When the counter resets, the first difference goes negative; the
    amount for that hour is then ``delta + previous``, which is simply the
    current counter value.

    Args:
        cumulative: Cumulative precipitation; missing values as None or NaN
        order: Optional sort keys (e.g. timestamps), one per value. Differences
            are taken in key order and returned in the input order. Without
            it the input is assumed to be in time order.

    Returns:
        Float Series of the same length (and index) whose earliest element is
        NaN. Any difference involving a missing value is NaN.
    """
    if isinstance(cumulative, pd.Series):
        series = pd.to_numeric(cumulative, errors="coerce").astype("float64")
    else:
        series = pd.Series(
            [np.nan if value is None else value for value in cumulative],
            dtype="float64",
        )

    if order is None:
        return _differences(series)

    keys = pd.Series(list(order), dtype="object")
    if len(keys) != len(series):
        raise ValueError(
            f"order has {len(keys)} keys for {len(series)} precipitation values"
        )

    positions = keys.sort_values(kind="mergesort").index.to_numpy()
    hourly = _differences(series.iloc[positions]).to_numpy()

    result = pd.Series(np.nan, index=series.index, dtype="float64")
    result.iloc[positions] = hourly
    return result
