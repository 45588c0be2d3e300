"""
Catalog of known WRCC column layouts.

WRCC hourly exports begin with a station name line followed by three header
lines: per-column units, then the column display names wrapped over two lines.
Each station hardware generation produces its own header, so the catalog below
records every layout seen in the archive as data. Column names, canonical
names and types are derived from the header text when the module is imported.
"""

import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ..exceptions import UnknownSchemaError

CHARACTER = "character"
NUMERIC = "numeric"

# Raw display names (header lines 2 and 3 joined, ':' and spaces removed)
# mapped onto the package vocabulary.
RAW_NAME_MAP: Dict[str, str] = {
    "Date/TimeYYMMDDhhmm": "datetime",
    "Precip": "precipitation",
    "WindSpeed": "windSpeed",
    "WindDirec": "windDirection",
    "AvAirTemp": "temperature",
    "FuelTemp": "fuelTemperature",
    "RelHumidty": "humidity",
    "BatteryVoltage": "batteryVoltage",
    "AvFuelMoistr": "fuelMoisture",
    "AvFuelMoistur": "fuelMoisture",
    "AvAvFuelMoistr": "fuelMoisture",
    "FuelMoistr": "fuelMoisture",
    "FuelMoistur": "fuelMoisture",
    "DirMxGust": "maxGustDirection",
    "MxGustSpeed": "maxGustSpeed",
    "SolarRad.": "solarRadiation",
    "SoilMoistr": "soilMoisture",
    "SoilM": "soilMoisture",
    "SoilM@8in.": "soilMoisture8in",
    "SoilM#2": "soilMoisture2",
    '4"SoilAvTemp': "soilTemperature",
    '8"SoilAvTemp': "soilTemperature8in",
    '20"SoilAvTemp': "soilTemperature20in",
    "SoilTemp1": "soilTemperature",
    "SoilT2ndSen": "soilTemperature2",
    "SoilC1stSen": "soilConductivity",
    "SoilC2ndSen": "soilConductivity2",
    "BaromPress": "barometricPressure",
    "#2RainGauge": "precipitation2",
    "Av.AirTemp#2": "temperature2",
    "AveRelHumd#2": "humidity2",
    "24hrMxAir": "maxTemperature24hr",
    "24hrMnAir": "minTemperature24hr",
    "24hrMxRel": "maxHumidity24hr",
    "24hrMnRel": "minHumidity24hr",
    "12hrMxAir": "maxTemperature12hr",
    "12hrMnAir": "minTemperature12hr",
    "12hrMxRel": "maxHumidity12hr",
    "12hrMnRel": "minHumidity12hr",
    "SnowDepth": "snowDepth",
    "WindSpd#2": "windSpeed2",
    "AveAirTmp217": "temperature217",
    "Altimtr": "altimeter",
    "Vis.": "visibility",
    "StateofWx": "weatherState",
    "DewPtTemp": "dewpoint",
    "CloudLayer1": "cloudLayer1",
    "CloudLayer2": "cloudLayer2",
    "CloudLayer3": "cloudLayer3",
    "Misc#1": "misc1",
    "Misc#2": "misc2",
    "Misc#3": "misc3",
}

# (monitorType, (units line, names line, names continuation line))
_HEADERS: List[Tuple[str, Tuple[str, str, str]]] = [
    (
        "WRCC_TYPE1",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\tDeg C\t  %  \tvolts\t  %  \t Deg \t m/s \t W/m2",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Fuel \t  Rel  \tBattery\tAv Fuel\t   Dir \tMx Gust\t Solar ",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \t  Temp \tHumidty\tVoltage\t Moistr\t MxGust\t Speed \t  Rad. ",
        ),
    ),
    (
        "WRCC_TYPE2",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\t  %  \tvolts\t Deg \t m/s \t W/m2",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Rel  \tBattery\t   Dir \tMx Gust\t Solar ",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \tHumidty\tVoltage\t MxGust\t Speed \t  Rad. ",
        ),
    ),
    (
        "WRCC_TYPE3",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\tDeg C\t  %  \tvolts\t  %  \t Deg \t m/s \t W/m2",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Fuel \t  Rel  \tBattery\t  Fuel \t   Dir \tMx Gust\t Solar ",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \t  Temp \tHumidty\tVoltage\tMoistur\t MxGust\t Speed \t  Rad. ",
        ),
    ),
    (
        "WRCC_TYPE4",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\tDeg C\t  %  \tvolts\t Deg \t m/s \t W/m2",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Fuel \t  Rel  \tBattery\t   Dir \tMx Gust\t Solar ",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \t  Temp \tHumidty\tVoltage\t MxGust\t Speed \t  Rad. ",
        ),
    ),
    (
        "WRCC_TYPE5",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\tDeg C\t  %  \tvolts\t  %  \tcbars\tDeg C\t Deg \t m/s \t W/m2",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Fuel \t  Rel  \tBattery\tAv Fuel\t Soil  \t4\" Soil\t   Dir \tMx Gust\t Solar ",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \t  Temp \tHumidty\tVoltage\t Moistr\tMoistr\tAv Temp\t MxGust\t Speed \t  Rad. ",
        ),
    ),
    (
        "WRCC_TYPE6",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\tDeg C\t  %  \tvolts\t Deg \t m/s \t  %  \t W/m2",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Fuel \t  Rel  \tBattery\t   Dir \tMx Gust\tAv Fuel\t Solar ",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \t  Temp \tHumidty\tVoltage\t MxGust\t Speed \t Moistr\t  Rad. ",
        ),
    ),
    (
        "WRCC_TYPE7",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\tDeg C\t  %  \tvolts\t  %  \tcbars\tDeg C\t Deg \t m/s ",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Fuel \t  Rel  \tBattery\t  Fuel \t Soil  \t4\" Soil\t   Dir \tMx Gust",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \t  Temp \tHumidty\tVoltage\tMoistr\tMoistr\tAv Temp\t MxGust\t Speed ",
        ),
    ),
    (
        "WRCC_TYPE8",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\tDeg C\t  %  \tvolts\tmbar \t  %  \t Deg \t m/s \t W/m2",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Fuel \t  Rel  \tBattery\t Barom \tAv Fuel\t   Dir \tMx Gust\t Solar ",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \t  Temp \tHumidty\tVoltage\t Press \t Moistr\t MxGust\t Speed \t  Rad. ",
        ),
    ),
    (
        "WRCC_TYPE9",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\t  %  \tvolts\tmbar \t Deg \t m/s \t W/m2\t m/s \tDeg C\tmbar \t mi. \t     \tDeg C\tf/100\t Unk \tf/100\t Unk \tf/100\t Unk ",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Rel  \tBattery\t Barom \t   Dir \tMx Gust\t Solar \t  Wind \tAve Air\tAltimtr\t Vis.  \t State \tDew Pt \t Cloud \t Misc  \t Cloud \t Misc  \t Cloud \t Misc  ",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \tHumidty\tVoltage\t Press \t MxGust\t Speed \t  Rad. \t Spd #2\tTmp 217\t       \t       \t of Wx \t Temp  \tLayer 1\t  #1   \tLayer 2\t  #2   \tLayer 3\t  #3   ",
        ),
    ),
    (
        "WRCC_TYPE10",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\tDeg C\t  %  \tvolts\t  %  \t Deg \t m/s \t W/m2\tcbars\tDeg C",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Fuel \t  Rel  \tBattery\tAv Fuel\t   Dir \tMx Gust\t Solar \t Soil  \t4\" Soil",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \t  Temp \tHumidty\tVoltage\t Moistr\t MxGust\t Speed \t  Rad. \tMoistr\tAv Temp",
        ),
    ),
    (
        "WRCC_TYPE11",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\tDeg C\t  %  \tvolts\t  %  \t Deg \t m/s \t mm  \t W/m2",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Fuel \t  Rel  \tBattery\t  Fuel \t   Dir \tMx Gust\t#2 Rain\t Solar ",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \t  Temp \tHumidty\tVoltage\tMoistr\t MxGust\t Speed \t Gauge \t  Rad. ",
        ),
    ),
    (
        "WRCC_TYPE12",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\tDeg C\t  %  \tvolts\t  %  \t Deg \t m/s \tcbars\tDeg C\t W/m2",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Fuel \t  Rel  \tBattery\t  Fuel \t   Dir \tMx Gust\t Soil  \t4\" Soil\t Solar ",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \t  Temp \tHumidty\tVoltage\tMoistr\t MxGust\t Speed \tMoistr\tAv Temp\t  Rad. ",
        ),
    ),
    (
        "WRCC_TYPE13",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\tDeg C\t  %  \tvolts\t  %  \t Deg \t m/s \t W/m2\tDeg C\t  %  ",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Fuel \t  Rel  \tBattery\t  Fuel \t   Dir \tMx Gust\t Solar \tAv. Air\tAve Rel",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \t  Temp \tHumidty\tVoltage\tMoistr\t MxGust\t Speed \t  Rad. \tTemp #2\tHumd #2",
        ),
    ),
    (
        "WRCC_TYPE14",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\tDeg C\t  %  \tvolts\t  %  \t Deg \t m/s \tDeg C\tDeg C\t  %  \t  %  \t W/m2",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Fuel \t  Rel  \tBattery\t  Fuel \t   Dir \tMx Gust\t 24 hr \t 24 hr \t 24 hr \t 24 hr \t Solar ",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \t  Temp \tHumidty\tVoltage\tMoistr\t MxGust\t Speed \tMx Air \tMn Air \tMx Rel \tMn Rel \t  Rad. ",
        ),
    ),
    (
        "WRCC_TYPE15",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\tDeg C\t  %  \tvolts\t Deg \t m/s \t  %  \tDeg C\tDeg C\t  %  \t  %  \t W/m2",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Fuel \t  Rel  \tBattery\t   Dir \tMx Gust\t  Fuel \t 24 hr \t 24 hr \t 24 hr \t 24 hr \t Solar ",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \t  Temp \tHumidty\tVoltage\t MxGust\t Speed \tMoistr\tMx Air \tMn Air \tMx Rel \tMn Rel \t  Rad. ",
        ),
    ),
    (
        "WRCC_TYPE16",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\tDeg C\t  %  \tvolts\t  %  \t Deg \t m/s \t W/m2\t mm  ",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Fuel \t  Rel  \tBattery\t  Fuel \t   Dir \tMx Gust\t Solar \t#2 Rain",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \t  Temp \tHumidty\tVoltage\tMoistr\t MxGust\t Speed \t  Rad. \t Gauge ",
        ),
    ),
    (
        "WRCC_TYPE17",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\tDeg C\t  %  \tvolts\t  %  \t Deg \t m/s \t mm  \t W/m2\t mm  \t  %  \t     \tDeg C\t  %  \t     \tDeg C",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Fuel \t  Rel  \tBattery\tAv Fuel\t   Dir \tMx Gust\t Snow  \t Solar \t Snow  \tSoil M \t Soil C\t  Soil \tSoil M \t Soil C\t Soil T",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \t  Temp \tHumidty\tVoltage\t Moistr\t MxGust\t Speed \t Depth \t  Rad. \t Depth \t       \t1st Sen\t Temp 1\t   #2  \t2nd Sen\t2nd Sen",
        ),
    ),
    (
        "WRCC_TYPE18",
        (
            ":       LST\t Unk \t m/s \t Deg \tDeg C\tDeg C\t  %  \tvolts\tmbar \tcbars\t W/m2\t Deg \t m/s \t mm  ",
            ": Date/Time\t Misc  \t  Wind \t Wind  \t Av Air\t  Fuel \t  Rel  \tBattery\t Barom \t Soil  \t Solar \t   Dir \tMx Gust\t Precip",
            ":YYMMDDhhmm\t  #1   \t  Speed\t Direc \t  Temp \t  Temp \tHumidty\tVoltage\t Press \tMoistr\t  Rad. \t MxGust\t Speed \t       ",
        ),
    ),
    (
        "WRCC_TYPE19",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\tDeg C\t  %  \tvolts\t Deg \t m/s \t  %  \t W/m2",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Fuel \t  Rel  \tBattery\t   Dir \tMx Gust\t  Fuel \t Solar ",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \t  Temp \tHumidty\tVoltage\t MxGust\t Speed \tMoistr\t  Rad. ",
        ),
    ),
    (
        "WRCC_TYPE20",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\tDeg C\t  %  \tvolts\tcbars\tDeg C\t  %  \t Deg \t m/s \t W/m2",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Fuel \t  Rel  \tBattery\t Soil  \t4\" Soil\tAv Fuel\t   Dir \tMx Gust\t Solar ",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \t  Temp \tHumidty\tVoltage\tMoistr\tAv Temp\t Moistr\t MxGust\t Speed \t  Rad. ",
        ),
    ),
    (
        "WRCC_TYPE21",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\tDeg C\t  %  \tvolts\t  %  \t Deg \t m/s \tcbars\tDeg C\t W/m2",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Fuel \t  Rel  \tBattery\tAv Fuel\t   Dir \tMx Gust\t Soil  \t4\" Soil\t Solar ",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \t  Temp \tHumidty\tVoltage\t Moistr\t MxGust\t Speed \tMoistr\tAv Temp\t  Rad. ",
        ),
    ),
    (
        "WRCC_TYPE22",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\tDeg C\t  %  \tvolts\t  %  \tcbars\tDeg C\t Deg \t m/s ",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Fuel \t  Rel  \tBattery\tAv Fuel\t Soil  \t4\" Soil\t   Dir \tMx Gust",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \t  Temp \tHumidty\tVoltage\t Moistr\tMoistr\tAv Temp\t MxGust\t Speed ",
        ),
    ),
    (
        "WRCC_TYPE23",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\tDeg C\t  %  \tvolts\t W/m2\tcbars\tDeg C\tcbars\tcbars\t Deg \t m/s \t mm  \t  %  ",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Fuel \t  Rel  \tBattery\t Solar \t Soil  \t4\" Soil\t Soil  \t Soil  \t   Dir \tMx Gust\t#2 Rain\tAv Fuel",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \t  Temp \tHumidty\tVoltage\t  Rad. \tMoistr\tAv Temp\tMoistr\tMoistr\t MxGust\t Speed \t Gauge \t Moistr",
        ),
    ),
    (
        "WRCC_TYPE24",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\t  %  \t W/m2",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Rel  \t Solar ",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \tHumidty\t  Rad. ",
        ),
    ),
    (
        "WRCC_TYPE25",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\tDeg C\t  %  \tvolts\tmbar \t Deg \t m/s \t  %  \t W/m2",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Fuel \t  Rel  \tBattery\t Barom \t   Dir \tMx Gust\tAv Fuel\t Solar ",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \t  Temp \tHumidty\tVoltage\t Press \t MxGust\t Speed \t Moistr\t  Rad. ",
        ),
    ),
    (
        "WRCC_TYPE26",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\tDeg C\t  %  \tvolts\t Deg \t m/s \tDeg C\tDeg C\t  %  \t  %  \t W/m2",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Fuel \t  Rel  \tBattery\t   Dir \tMx Gust\t 12 hr \t 12 hr \t 12 hr \t 12 hr \t Solar ",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \t  Temp \tHumidty\tVoltage\t MxGust\t Speed \tMx Air \tMn Air \tMx Rel \tMn Rel \t  Rad. ",
        ),
    ),
    (
        "WRCC_TYPE27",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\tDeg C\t  %  \tvolts\t  %  \t Deg \t m/s \t W/m2\t     \tDeg C\tDeg C",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Fuel \t  Rel  \tBattery\tAv Fuel\t   Dir \tMx Gust\t Solar \t       \t       \t20\"Soil",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \t  Temp \tHumidty\tVoltage\t Moistr\t MxGust\t Speed \t  Rad. \t       \t       \tAv Temp",
        ),
    ),
    (
        "WRCC_TYPE28",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\tDeg C\t  %  \tvolts\tmbar \t  %  \t Deg \t m/s \t W/m2",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Fuel \t  Rel  \tBattery\t Barom \t  Fuel \t   Dir \tMx Gust\t Solar ",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \t  Temp \tHumidty\tVoltage\t Press \tMoistr\t MxGust\t Speed \t  Rad. ",
        ),
    ),
    (
        "WRCC_TYPE29",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\tDeg C\t  %  \tvolts\t  %  \t Deg \t m/s \t W/m2\t mm  ",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Fuel \t  Rel  \tBattery\tAv Fuel\t   Dir \tMx Gust\t Solar \t Snow  ",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \t  Temp \tHumidty\tVoltage\t Moistr\t MxGust\t Speed \t  Rad. \t Depth ",
        ),
    ),
    (
        "WRCC_TYPE30",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\tDeg C\t  %  \tvolts\t  %  \t Deg \t m/s \tDeg C\tDeg C\t  %  \t  %  \t W/m2",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Fuel \t  Rel  \tBattery\tAv Fuel\t   Dir \tMx Gust\t 24 hr \t 24 hr \t 24 hr \t 24 hr \t Solar ",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \t  Temp \tHumidty\tVoltage\t Moistr\t MxGust\t Speed \tMx Air \tMn Air \tMx Rel \tMn Rel \t  Rad. ",
        ),
    ),
    (
        "WRCC_TYPE31",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\tDeg C\t  %  \tvolts\tmbar \t  %  \t Deg \t m/s \tDeg C\t W/m2",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Fuel \t  Rel  \tBattery\t Barom \tAv Fuel\t   Dir \tMx Gust\t4\" Soil\t Solar ",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \t  Temp \tHumidty\tVoltage\t Press \t Moistr\t MxGust\t Speed \tAv Temp\t  Rad. ",
        ),
    ),
    (
        "WRCC_TYPE32",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\tDeg C\t  %  \tvolts\tmbar \t Deg \t m/s \tDeg C\tDeg C\tDeg C\t  %  \t  %  \t W/m2",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Fuel \t  Rel  \tBattery\t Barom \t   Dir \tMx Gust\t4\" Soil\t 12 hr \t 12 hr \t 12 hr \t 12 hr \t Solar ",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \t  Temp \tHumidty\tVoltage\t Press \t MxGust\t Speed \tAv Temp\tMx Air \tMn Air \tMx Rel \tMn Rel \t  Rad. ",
        ),
    ),
    (
        "WRCC_TYPE33",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\tDeg C\t  %  \tvolts\t Deg \t m/s \t mm  \t W/m2",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Fuel \t  Rel  \tBattery\t   Dir \tMx Gust\t#2 Rain\t Solar ",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \t  Temp \tHumidty\tVoltage\t MxGust\t Speed \t Gauge \t  Rad. ",
        ),
    ),
    (
        "WRCC_TYPE34",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\tDeg C\t  %  \tvolts\tmbar \t Deg \t m/s \t W/m2",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Fuel \t  Rel  \tBattery\t Barom \t   Dir \tMx Gust\t Solar ",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \t  Temp \tHumidty\tVoltage\t Press \t MxGust\t Speed \t  Rad. ",
        ),
    ),
    (
        "WRCC_TYPE35",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\tDeg C\t  %  \tvolts\t Deg \t m/s \t  %  \t W/m2\t VWC \tDeg C",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Fuel \t  Rel  \tBattery\t   Dir \tMx Gust\tAv Fuel\t Solar \tSoil M \t8\" Soil",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \t  Temp \tHumidty\tVoltage\t MxGust\t Speed \t Moistr\t  Rad. \t@ 8 in.\tAv Temp",
        ),
    ),
    (
        "WRCC_TYPE36",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\tDeg C\t  %  \tvolts\tmbar \t  %  \tDeg C\t Deg \t m/s \t W/m2",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Fuel \t  Rel  \tBattery\t Barom \tAv Fuel\t4\" Soil\t   Dir \tMx Gust\t Solar ",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \t  Temp \tHumidty\tVoltage\t Press \t Moistr\tAv Temp\t MxGust\t Speed \t  Rad. ",
        ),
    ),
    (
        "WRCC_TYPE37",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\tDeg C\t  %  \tvolts\tmbar \t  %  \t Deg \t m/s \tDeg C\t W/m2",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Fuel \t  Rel  \tBattery\t Barom \t  Fuel \t   Dir \tMx Gust\t4\" Soil\t Solar ",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \t  Temp \tHumidty\tVoltage\t Press \tMoistr\t MxGust\t Speed \tAv Temp\t  Rad. ",
        ),
    ),
    (
        "WRCC_TYPE38",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\tDeg C\t  %  \tvolts\t Deg \t m/s \t  %  \t W/m2\t VWC \tDeg C",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Fuel \t  Rel  \tBattery\t   Dir \tMx Gust\t  Fuel \t Solar \tSoil M \t8\" Soil",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \t  Temp \tHumidty\tVoltage\t MxGust\t Speed \tMoistr\t  Rad. \t@ 8 in.\tAv Temp",
        ),
    ),
    (
        "WRCC_TYPE39",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\tDeg C\t  %  \tvolts\t Deg \t m/s \tDeg C\tDeg C\t  %  \t  %  \t     \t     \tDeg C\t     \t W/m2",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Fuel \t  Rel  \tBattery\t   Dir \tMx Gust\t 12 hr \t 12 hr \t 12 hr \t 12 hr \t       \t       \t       \t       \t Solar ",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \t  Temp \tHumidty\tVoltage\t MxGust\t Speed \tMx Air \tMn Air \tMx Rel \tMn Rel \t       \t       \t       \t       \t  Rad. ",
        ),
    ),
    (
        "WRCC_TYPE40",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\tDeg C\t  %  \tvolts\t  %  \t m/s \t Deg \tDeg C\tDeg C\t  %  \t  %  \t W/m2",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Fuel \t  Rel  \tBattery\tAv Fuel\tMx Gust\t   Dir \t 24 hr \t 24 hr \t 24 hr \t 24 hr \t Solar ",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \t  Temp \tHumidty\tVoltage\t Moistr\t Speed \t MxGust\tMx Air \tMn Air \tMx Rel \tMn Rel \t  Rad. ",
        ),
    ),
    (
        "WRCC_TYPE41",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\tDeg C\t  %  \tvolts\t  %  \t Deg \t m/s \t W/m2\t VWC \tDeg C",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Fuel \t  Rel  \tBattery\t  Fuel \t   Dir \tMx Gust\t Solar \tSoil M \t8\" Soil",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \t  Temp \tHumidty\tVoltage\tMoistr\t MxGust\t Speed \t  Rad. \t@ 8 in.\tAv Temp",
        ),
    ),
    (
        "WRCC_TYPE42",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\tDeg C\t  %  \tvolts\t  %  \tDeg C\t Deg \t m/s \t W/m2",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Fuel \t  Rel  \tBattery\tSoil M \t4\" Soil\t   Dir \tMx Gust\t Solar ",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \t  Temp \tHumidty\tVoltage\t       \tAv Temp\t MxGust\t Speed \t  Rad. ",
        ),
    ),
    (
        "WRCC_TYPE43",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\tDeg C\t  %  \tvolts\t Deg \t m/s \t  %  \t mm  \t W/m2",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Fuel \t  Rel  \tBattery\t   Dir \tMx Gust\t  Fuel \t#2 Rain\t Solar ",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \t  Temp \tHumidty\tVoltage\t MxGust\t Speed \tMoistr\t Gauge \t  Rad. ",
        ),
    ),
    (
        "WRCC_TYPE44",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\tDeg C\t  %  \tvolts\t  %  \t  %  \tDeg C\t Deg \t m/s \t W/m2",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Fuel \t  Rel  \tBattery\t  Fuel \tSoil M \t4\" Soil\t   Dir \tMx Gust\t Solar ",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \t  Temp \tHumidty\tVoltage\tMoistr\t       \tAv Temp\t MxGust\t Speed \t  Rad. ",
        ),
    ),
    (
        "WRCC_TYPE45",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\tDeg C\t  %  \tvolts\t Deg \t m/s \t W/m2\t  %  \tDeg C",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Fuel \t  Rel  \tBattery\t   Dir \tMx Gust\t Solar \tSoil M \t  Soil ",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \t  Temp \tHumidty\tVoltage\t MxGust\t Speed \t  Rad. \t       \t Temp 1",
        ),
    ),
    (
        "WRCC_TYPE46",
        (
            ":       LST\t mm  \t m/s \t Deg \tDeg C\tDeg C\t  %  \tvolts\t W/m2\t Deg \t m/s \t  %  \tDeg C",
            ": Date/Time\t Precip\t  Wind \t Wind  \t Av Air\t  Fuel \t  Rel  \tBattery\t Solar \t   Dir \tMx Gust\tSoil M \t  Soil ",
            ":YYMMDDhhmm\t       \t  Speed\t Direc \t  Temp \t  Temp \tHumidty\tVoltage\t  Rad. \t MxGust\t Speed \t       \t Temp 1",
        ),
    ),
]


@dataclass(frozen=True)
class SchemaDefinition:
    """One known WRCC column layout."""

    monitor_type: str
    header: Tuple[str, ...]
    raw_column_names: Tuple[str, ...]
    canonical_column_names: Tuple[str, ...]
    column_types: Tuple[str, ...]
    units: Tuple[str, ...]

    @property
    def is_unknown(self) -> bool:
        return self.monitor_type == ""

    def __len__(self) -> int:
        return len(self.canonical_column_names)

    def index_of(self, column: str) -> Optional[int]:
        """Position of a canonical column, or None if the layout lacks it."""
        try:
            return self.canonical_column_names.index(column)
        except ValueError:
            return None


UNKNOWN = SchemaDefinition(
    monitor_type="",
    header=(),
    raw_column_names=(),
    canonical_column_names=(),
    column_types=(),
    units=(),
)


def normalize_header_line(line: str) -> str:
    """Strip surrounding spaces only; tabs delimit columns and must survive."""
    return line.strip(" ")


def _clean_token(token: str) -> str:
    return token.replace(":", "").replace(" ", "")


def _fallback_name(raw_name: str) -> str:
    words = re.findall(r"[A-Za-z0-9]+", raw_name)
    if not words:
        return ""
    name = "".join(word[:1].upper() + word[1:] for word in words)
    return name[:1].lower() + name[1:]


def build_schema(monitor_type: str, header: Tuple[str, str, str]) -> SchemaDefinition:
    """Derive a SchemaDefinition from a three-line header."""
    lines = tuple(normalize_header_line(line) for line in header)
    unit_tokens = lines[0].split("\t")
    first = lines[1].split("\t")
    second = lines[2].split("\t")
    if not len(unit_tokens) == len(first) == len(second):
        raise ValueError(f"{monitor_type}: header lines have different column counts")

    raw_names = tuple(_clean_token(a) + _clean_token(b) for a, b in zip(first, second))

    canonical: List[str] = []
    blank_count = 0
    for raw_name in raw_names:
        name = RAW_NAME_MAP.get(raw_name) or _fallback_name(raw_name)
        if not name:
            blank_count += 1
            name = f"_{blank_count}"
        if name in canonical:
            suffix = 2
            while f"{name}{suffix}" in canonical:
                suffix += 1
            name = f"{name}{suffix}"
        canonical.append(name)

    if canonical[0] != "datetime":
        raise ValueError(f"{monitor_type}: first column is not the timestamp")

    types = tuple(CHARACTER if name == "datetime" else NUMERIC for name in canonical)

    return SchemaDefinition(
        monitor_type=monitor_type,
        header=lines,
        raw_column_names=raw_names,
        canonical_column_names=tuple(canonical),
        column_types=types,
        units=tuple(_clean_token(token) for token in unit_tokens),
    )


CATALOG: Tuple[SchemaDefinition, ...] = tuple(
    build_schema(monitor_type, header) for monitor_type, header in _HEADERS
)

_BY_TYPE: Dict[str, SchemaDefinition] = {
    schema.monitor_type: schema for schema in CATALOG
}


def list_monitor_types() -> List[str]:
    """Monitor types in catalog order."""
    return [schema.monitor_type for schema in CATALOG]


def get_schema(monitor_type: str) -> SchemaDefinition:
    """
    Look up a catalog entry by monitor type.

    Raises:
        UnknownSchemaError: If the monitor type is not in the catalog
    """
    try:
        return _BY_TYPE[monitor_type]
    except KeyError as e:
        raise UnknownSchemaError(f"Unknown WRCC monitor type: {monitor_type}") from e
