"""
Parse fixed-width FW13 weather records.

Record layout: https://fam.nwcg.gov/fam-web/weatherfirecd/13.htm
"""

import io
import logging

import numpy as np
import pandas as pd

from ..exceptions import EmptySourceError
from ..models import STANDARD_DATA_COLUMNS
from ..precipitation import de_precipitate
from ..units import fahrenheit_to_celsius, kph_to_mps, mph_to_mps

logger = logging.getLogger(__name__)

# (name, width, is_numeric)
FW13_FIELDS = [
    ("recordType", 3, False),
    ("nwsID", 6, False),
    ("observationDate", 8, False),
    ("observationTime", 4, False),
    ("observationType", 1, False),
    ("weatherCode", 1, False),
    ("dryBulbTemp", 3, True),
    ("atmosMoisture", 3, True),
    ("windDirection", 3, True),
    ("avWindSpeed", 3, True),
    ("fuelMoisture", 2, True),
    ("maxTemp", 3, True),
    ("minTemp", 3, True),
    ("maxRelHumidity", 3, True),
    ("minRelHumidity", 3, True),
    ("precipDuration", 2, True),
    ("precipAmount", 5, True),
    ("wetFlag", 1, False),
    ("herbaceousGreenness", 2, True),
    ("shrubGreenness", 2, True),
    ("moistureType", 1, False),
    ("measurementType", 1, False),
    ("seasonCode", 1, False),
    ("solarRadiation", 4, True),
    ("maxGustDirection", 3, True),
    ("maxGustSpeed", 3, True),
    ("snowFlag", 1, False),
]

FW13_NAMES = [name for name, _, _ in FW13_FIELDS]
FW13_WIDTHS = [width for _, width, _ in FW13_FIELDS]

# measurementType codes
US_UNITS = "1"
# moistureType code for relative humidity
RELATIVE_HUMIDITY = "2"


def _pad_time(value):
    if value is None or (isinstance(value, float) and np.isnan(value)):
        return value
    text = str(value).strip()
    if len(text) == 1:
        return "0000"
    return text.zfill(4)


def parse_data(blob: str) -> pd.DataFrame:
    """
    Parse FW13 text into a DataFrame of raw fields.

    Args:
        blob: Contents of a ``.fw13`` file

    Returns:
        DataFrame with one column per FW13 field

    Raises:
        EmptySourceError: If ``blob`` holds no records
    """
    if blob is None or not blob.strip():
        raise EmptySourceError("No FW13 data to parse")

    df = pd.read_fwf(
        io.StringIO(blob),
        widths=FW13_WIDTHS,
        names=FW13_NAMES,
        dtype=str,
        header=None,
    )

    weather = df["recordType"] == "W13"
    if not weather.all():
        logger.warning(f"Skipping {int((~weather).sum())} non-W13 FW13 records")
        df = df[weather].reset_index(drop=True)

    for name, _, is_numeric in FW13_FIELDS:
        if is_numeric:
            df[name] = pd.to_numeric(df[name], errors="coerce").astype("float64")

    df["observationTime"] = df["observationTime"].map(_pad_time)
    return df


def harmonize(raw: pd.DataFrame) -> pd.DataFrame:
    """
    Convert raw FW13 fields to the standard metric record shape.

    Temperatures are converted to degC, wind speeds to m/s and the daily
    cumulative precipitation to hourly mm.
    """
    us = raw["measurementType"] == US_UNITS

    temperature = raw["dryBulbTemp"].where(
        ~us, fahrenheit_to_celsius(raw["dryBulbTemp"])
    )
    wind_speed = mph_to_mps(raw["avWindSpeed"]).where(
        us, kph_to_mps(raw["avWindSpeed"])
    )
    gust_speed = mph_to_mps(raw["maxGustSpeed"]).where(
        us, kph_to_mps(raw["maxGustSpeed"])
    )

    # U.S. amounts are inches with an implied nn.nnn decimal
    precip_mm = (25.4 * raw["precipAmount"] / 1000).where(us, raw["precipAmount"])

    humidity = raw["atmosMoisture"].where(
        raw["moistureType"] == RELATIVE_HUMIDITY,
        (raw["minRelHumidity"] + raw["maxRelHumidity"]) / 2,
    )

    stamp = raw["observationDate"].astype(str) + raw["observationTime"].astype(str)
    stamp = stamp.where(raw["observationDate"].notna() & raw["observationTime"].notna())

    data = pd.DataFrame(
        {
            "datetime": stamp,
            "temperature": temperature,
            "humidity": humidity,
            "windSpeed": wind_speed,
            "windDirection": raw["windDirection"],
            "maxGustSpeed": gust_speed,
            "maxGustDirection": raw["maxGustDirection"],
            "precipitation": de_precipitate(precip_mm, order=stamp),
            "solarRadiation": raw["solarRadiation"],
            "fuelMoisture": raw["fuelMoisture"],
            "fuelTemperature": np.nan,
            "monitorType": "FW13",
        }
    )
    return data[STANDARD_DATA_COLUMNS]
