from .classifier import TokenClassifier, TokenCategory, ClassifiedToken
from .runway_state import RunwayStateGroupDecoder
from .tokens import (
    decode_wind,
    decode_wind_variation,
    decode_visibility,
    decode_runway_visual_range,
    decode_vertical_visibility,
    decode_weather,
    decode_cloud_layer,
    decode_temperature,
    decode_pressure,
    decode_windshear,
    decode_sea_level_pressure,
    decode_runway_state_group,
    decode_dictionary_word,
    unknown_token,
)

__all__ = [
    'TokenClassifier',
    'TokenCategory',
    'ClassifiedToken',
    'RunwayStateGroupDecoder',
    'decode_wind',
    'decode_wind_variation',
    'decode_visibility',
    'decode_runway_visual_range',
    'decode_vertical_visibility',
    'decode_weather',
    'decode_cloud_layer',
    'decode_temperature',
    'decode_pressure',
    'decode_windshear',
    'decode_sea_level_pressure',
    'decode_runway_state_group',
    'decode_dictionary_word',
    'unknown_token',
]
