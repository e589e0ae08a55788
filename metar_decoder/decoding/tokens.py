"""
Token decoders.

One function per token category, each turning a raw METAR group into an
explanatory sentence. Decoders assume the token was matched by the
corresponding classifier rule.

Example:
    decode_wind("04011KT")
    # 'Wind: The wind blows from 040 degrees at 11 knots (20.37 km/h).'
"""

import logging
import re
from typing import Optional

from ..lookup import LookupTables, get_lookup_tables
from ..utils.units import (
    UnitConverter, KNOTS_TO_KMH, FEET_TO_METERS, HPA_TO_INHG, INHG_TO_HPA,
)
from .runway_state import RunwayStateGroupDecoder

logger = logging.getLogger(__name__)

CALM_WIND = "00000KT"
VISIBILITY_UNLIMITED = "9999"
VISIBILITY_MINIMAL = "0000"
TEMPERATURE_MISSING = "/////"
PRESSURE_MISSING = "////"
MISSING_VALUE = "//"

UNKNOWN_TOKEN = "{token}: Unknown token."

RVR_PATTERN = re.compile(
    r'R(?P<runway>\d{2}[LCR]?)/'
    r'(?:(?P<low_modifier>[PM])?(?P<low>\d{4})V)?'
    r'(?P<modifier>[PM])?(?P<value>\d{4})(?P<unit>FT)?/?(?P<trend>[DNU])?'
)
TEMPERATURE_PATTERN = re.compile(r'(?P<temperature>M?\d{2}|//)?/(?P<dewpoint>M?\d{2}|//)?')

RVR_MODIFIERS = {'P': "more than ", 'M': "less than "}
RVR_TRENDS = {'U': "rising", 'D': "falling"}
CLOUD_APPENDICES = {
    'CB': ", cumulonimbus.",
    'TCU': ", towering cumulus.",
    '///': ", cloud type convection is unknown.",
}


def _tables(tables: Optional[LookupTables]) -> LookupTables:
    return tables if tables is not None else get_lookup_tables()


def unknown_token(token: str, tables: Optional[LookupTables] = None) -> str:
    logger.debug(f"Unknown token '{token}'")
    return UNKNOWN_TOKEN.format(token=token)


def decode_wind(token: str, tables: Optional[LookupTables] = None) -> str:
    """
    Decode wind direction and speed, e.g. 24015G25KT or VRB03MPS.

    Speeds in knots get a km/h conversion, MPS speeds are left as is.
    """
    if token.upper() == CALM_WIND:
        return f"{token}: The wind is calm."

    knots = 'KT' in token
    if knots:
        unit = _tables(tables).lookup('KT') or "knots"
    else:
        unit = "meters per second"

    if token.startswith('VRB'):
        direction = "is variable"
    else:
        direction = f"blows from {token[0:3]} degrees"

    speed = token[3:5]
    conversion = UnitConverter.conversion(speed, KNOTS_TO_KMH, "km/h", knots)

    gusts = ""
    if 'G' in token:
        gust_speed = token[6:8]
        gust_conversion = UnitConverter.conversion(gust_speed, KNOTS_TO_KMH, "km/h", knots)
        gusts = f" with gusts of {gust_speed} {unit}{gust_conversion}"

    return f"Wind: The wind {direction} at {speed} {unit}{conversion}{gusts}."


def decode_wind_variation(token: str, tables: Optional[LookupTables] = None) -> str:
    first, _, second = token.partition('V')
    return (
        f"Variable wind: The wind direction varies between {first} degrees and {second} degrees.\n"
        "The wind direction has varied by 60 degrees or more in last 10 minutes "
        "with the mean speed exceeding 3 knots."
    )


def decode_visibility(token: str, tables: Optional[LookupTables] = None) -> str:
    """
    Decode horizontal visibility in meters (0600) or statute miles (1 1/2SM).

    9999 and 0000 are the "10 km or more" and "50 meters or less" sentinels.
    """
    if token == VISIBILITY_UNLIMITED:
        return "Visibility: The visibility is 10 km or more."
    if token == VISIBILITY_MINIMAL:
        return "Visibility: The visibility is 50 meters or less."

    if 'SM' in token:
        unit = _tables(tables).lookup('SM') or "statute miles"
        visibility = f"{token[:token.index('SM')]} {unit}"
    else:
        visibility = f"{token[1:] if token.startswith('0') else token} meters"

    return f"Maximum horizontal visibility: {visibility}."


def decode_runway_visual_range(token: str, tables: Optional[LookupTables] = None) -> str:
    """
    Decode runway visual range, e.g. R04R/P1500N or R22/1000V1500FT/U.

    P and M modifiers apply to each bound independently; feet values get a
    meters conversion.
    """
    match = RVR_PATTERN.fullmatch(token)
    if match is None:
        return unknown_token(token)

    feet = match.group('unit') is not None
    unit = "feet" if feet else "meters"
    trend = RVR_TRENDS.get(match.group('trend'), "no change")

    def bound(modifier: Optional[str], value: str) -> str:
        conversion = UnitConverter.conversion(value, FEET_TO_METERS, "meters", feet)
        return f"{RVR_MODIFIERS.get(modifier, '')}{int(value)} {unit}{conversion}"

    upper = bound(match.group('modifier'), match.group('value'))
    if match.group('low') is not None:
        lower = bound(match.group('low_modifier'), match.group('low'))
        visual_range = f"variable between {lower} and {upper}"
    else:
        visual_range = upper

    return (
        f"Runway {match.group('runway')}, touchdown zone visual range is "
        f"{visual_range} and {trend} is expected."
    )


def decode_vertical_visibility(token: str, tables: Optional[LookupTables] = None) -> str:
    feet = int(token[2:5]) * 100
    conversion = UnitConverter.conversion(feet, FEET_TO_METERS, "meters")
    return f"Vertical visibility: {feet} feet{conversion}."


def decode_weather(token: str, tables: Optional[LookupTables] = None) -> str:
    """
    Decode present or recent weather, e.g. +SHRA, -DZ, VCFG or RETS.

    A whole-token dictionary entry wins; otherwise every two-letter group is
    looked up and the phrases are joined. If any group is unknown the whole
    token is reported as unknown.
    """
    tables = _tables(tables)
    phenomena = token
    recent = phenomena.startswith('RE') and len(phenomena) > 2
    if recent:
        phenomena = phenomena[2:]

    intensity = ""
    if phenomena[:1] in ('+', '-'):
        intensity = tables.lookup(phenomena[0]) or ""
        phenomena = phenomena[1:]

    description = tables.lookup(phenomena)
    if description is None:
        phrases = []
        for i in range(0, len(phenomena), 2):
            phrase = tables.lookup(phenomena[i:i + 2])
            if phrase is None:
                return unknown_token(token)
            phrases.append(phrase)
        description = " ".join(phrases)

    label = "Recent weather" if recent else "Weather"
    text = " ".join(part for part in (intensity, description) if part)
    return f"{label}: {token} = {text}."


def decode_cloud_layer(token: str, tables: Optional[LookupTables] = None) -> str:
    """Decode a cloud layer, e.g. BKN030CB (height in hundreds of feet)."""
    layer = _tables(tables).lookup(token[0:3]) or "unknown layer type"
    height = int(token[3:6]) * 100
    conversion = UnitConverter.conversion(height, FEET_TO_METERS, "meters")
    appendix = CLOUD_APPENDICES.get(token[6:], ".")
    return f"Clouds: A {layer} detected at {height} feet{conversion} above aerodrome level{appendix}"


def _temperature_value(value: Optional[str], missing: str) -> str:
    if not value or value == MISSING_VALUE:
        return missing
    return f"{value.replace('M', '-')} degrees."


def decode_temperature(token: str, tables: Optional[LookupTables] = None) -> str:
    """
    Decode temperature and dewpoint, e.g. M05/M02.

    Either half can be blank or // and is then reported as not available.
    """
    if token == TEMPERATURE_MISSING:
        return "Temperature: Temperature is not available."

    match = TEMPERATURE_PATTERN.fullmatch(token)
    if match is None:
        return unknown_token(token)

    temperature = _temperature_value(match.group('temperature'), "Temperature not available.")
    dewpoint = _temperature_value(match.group('dewpoint'), "Dewpoint not available.")
    return f"Temperature: {temperature}\nDewpoint   : {dewpoint}"


def decode_pressure(token: str, tables: Optional[LookupTables] = None) -> str:
    """
    Decode QNH given in hPa (Q1013) or inches of mercury (A2992).
    """
    value = token[1:]
    if value == PRESSURE_MISSING:
        return "Sea-level pressure (QNH): Pressure not available."

    if token.startswith('Q'):
        conversion = UnitConverter.conversion(value, HPA_TO_INHG, "inches")
        return f"Sea-level pressure (QNH): {value} hPa{conversion}."

    conversion = UnitConverter.conversion(value, INHG_TO_HPA, "hPa")
    return f"Sea-level pressure (QNH): {value[:2]}.{value[2:]} inches{conversion}."


def decode_windshear(token: str, tables: Optional[LookupTables] = None) -> str:
    if 'ALL' in token:
        runway = "all runways"
    else:
        runway = f"runway {token[token.index('RWY') + 3:]}"
    return f"WARNING! WINDSHEAR was detected on {runway}."


def decode_sea_level_pressure(token: str, tables: Optional[LookupTables] = None) -> str:
    """
    Decode the remarks sea-level pressure, e.g. SLP134 -> 1013.4 hPa.

    The group only carries tens, units and tenths of hPa. Values of 50.0
    and above are read as 9xx.x hPa, values below 10 as 100x.x hPa and the
    rest as 10xx.x hPa.
    """
    tenths = int(token[3:6]) / 10
    if tenths >= 50.0:
        pressure = f"9{tenths}"
    elif tenths < 10:
        pressure = f"100{tenths}"
    else:
        pressure = f"10{tenths}"

    conversion = UnitConverter.conversion(pressure.split('.')[0], HPA_TO_INHG, "inches")
    return f"Sea-level pressure: {pressure} hPa{conversion}. Beware of the possible difference with QNH!"


def decode_runway_state_group(token: str, tables: Optional[LookupTables] = None) -> str:
    return RunwayStateGroupDecoder(_tables(tables)).decode(token)


def decode_dictionary_word(token: str, tables: Optional[LookupTables] = None) -> Optional[str]:
    """
    Look a plain word up in the terminology dictionary.

    Returns:
        "<token>: <meaning>." or None when the word is not in the dictionary
    """
    meaning = _tables(tables).lookup(token)
    if meaning is None:
        logger.debug(f"Skipping word '{token}' missing from the dictionary")
        return None
    return f"{token}: {meaning}."
