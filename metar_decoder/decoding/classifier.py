"""Priority-ordered METAR token classification."""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterator, List, Optional, Pattern, Sequence, Tuple

from ..lookup import LookupTables, get_lookup_tables
from ..models import Record
from ..utils import section_separator
from . import tokens as decoders

logger = logging.getLogger(__name__)


class TokenCategory(Enum):
    """Category of a METAR group."""

    WIND = "wind"
    WIND_VARIATION = "wind_variation"
    VISIBILITY = "visibility"
    RUNWAY_VISUAL_RANGE = "runway_visual_range"
    VERTICAL_VISIBILITY = "vertical_visibility"
    WEATHER_PHENOMENON = "weather_phenomenon"
    CLOUD_LAYER = "cloud_layer"
    TEMPERATURE = "temperature"
    PRESSURE = "pressure"
    WINDSHEAR = "windshear"
    SEA_LEVEL_PRESSURE = "sea_level_pressure"
    RUNWAY_STATE_GROUP = "runway_state_group"
    DICTIONARY_WORD = "dictionary_word"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ClassifiedToken:
    """
    A token with its category.

    Attributes:
        category: Matched category
        text: Token text to decode (two tokens joined by a space when merged)
        consumed: Number of raw tokens covered (1, or 2 for 1 1/2SM)
    """

    category: TokenCategory
    text: str
    consumed: int = 1


Decoder = Callable[[str, Optional[LookupTables]], Optional[str]]

DECODERS: Dict[TokenCategory, Decoder] = {
    TokenCategory.WIND: decoders.decode_wind,
    TokenCategory.WIND_VARIATION: decoders.decode_wind_variation,
    TokenCategory.VISIBILITY: decoders.decode_visibility,
    TokenCategory.RUNWAY_VISUAL_RANGE: decoders.decode_runway_visual_range,
    TokenCategory.VERTICAL_VISIBILITY: decoders.decode_vertical_visibility,
    TokenCategory.WEATHER_PHENOMENON: decoders.decode_weather,
    TokenCategory.CLOUD_LAYER: decoders.decode_cloud_layer,
    TokenCategory.TEMPERATURE: decoders.decode_temperature,
    TokenCategory.PRESSURE: decoders.decode_pressure,
    TokenCategory.WINDSHEAR: decoders.decode_windshear,
    TokenCategory.SEA_LEVEL_PRESSURE: decoders.decode_sea_level_pressure,
    TokenCategory.RUNWAY_STATE_GROUP: decoders.decode_runway_state_group,
    TokenCategory.DICTIONARY_WORD: decoders.decode_dictionary_word,
    TokenCategory.UNKNOWN: decoders.unknown_token,
}


class TokenClassifier:
    """
    Classify and decode the body tokens of a METAR.

    Rules are tried in order and the first match wins. A rule with a
    lookahead pattern only matches when the next token matches it too, and
    then consumes both tokens.
    """

    SM_VISIBILITY = r'[0-9 /.]{1,5}SM'

    # Format: (pattern, category, lookahead pattern)
    RULES: List[Tuple[str, TokenCategory, Optional[str]]] = [
        (r'((VRB)\d{2}|\d{5})(G\d{2})?(KT|MPS)', TokenCategory.WIND, None),
        (r'\d{3}V\d{3}', TokenCategory.WIND_VARIATION, None),
        (r'\d{4}|' + SM_VISIBILITY, TokenCategory.VISIBILITY, None),
        # 1 1/2SM
        (r'\d+', TokenCategory.VISIBILITY, SM_VISIBILITY),
        (r'R\d{2}[LCR]?/([PM]?\d{4}V)?[PM]?\d{4}(FT)?/?[DNU]?', TokenCategory.RUNWAY_VISUAL_RANGE, None),
        (r'VV\d{3}', TokenCategory.VERTICAL_VISIBILITY, None),
        (r'(RE)?[+-]?[A-Za-z]{2,}', TokenCategory.WEATHER_PHENOMENON, None),
        (r'(SKC|FEW|BKN|SCT|OVC|CLR)\d{3}(CB|TCU|///)?', TokenCategory.CLOUD_LAYER, None),
        (r'(M?\d{2}|//)/(M?\d{2}|//)|M?\d{2}/|/M?\d{2}', TokenCategory.TEMPERATURE, None),
        (r'[AQ](\d{4}|////)', TokenCategory.PRESSURE, None),
        (r'WS (ALL RWY|RWY\d{2}[LCR]?)', TokenCategory.WINDSHEAR, None),
        (r'SLP\d{3}', TokenCategory.SEA_LEVEL_PRESSURE, None),
        (r'\d{2}([0-9/]{4}|CLRD)[0-9/]{2}', TokenCategory.RUNWAY_STATE_GROUP, None),
        (r'[A-Za-z]+', TokenCategory.DICTIONARY_WORD, None),
    ]

    def __init__(self, tables: Optional[LookupTables] = None, token_print: bool = False):
        """
        Args:
            tables: Lookup tables, the shared instance by default
            token_print: Precede each decoded text with a separator naming the token
        """
        self.tables = tables if tables is not None else get_lookup_tables()
        self.token_print = token_print
        self._compiled_rules: List[Tuple[Pattern, TokenCategory, Optional[Pattern]]] = [
            (re.compile(pattern), category, re.compile(lookahead) if lookahead else None)
            for pattern, category, lookahead in self.RULES
        ]

    def classify(self, tokens: Sequence[str], index: int) -> ClassifiedToken:
        """
        Classify the token at a position.

        Args:
            tokens: Token sequence
            index: Position of the token to classify

        Returns:
            The first matching category, UNKNOWN if none matches
        """
        token = tokens[index]
        for pattern, category, lookahead in self._compiled_rules:
            if not pattern.fullmatch(token):
                continue
            if lookahead is None:
                return ClassifiedToken(category, token)
            if index + 1 < len(tokens) and lookahead.fullmatch(tokens[index + 1]):
                return ClassifiedToken(category, f"{token} {tokens[index + 1]}", consumed=2)
        return ClassifiedToken(TokenCategory.UNKNOWN, token)

    def decode_token(self, classified: ClassifiedToken) -> Optional[str]:
        """Decode a classified token, None for words missing from the dictionary."""
        text = DECODERS[classified.category](classified.text, self.tables)
        if text is not None and self.token_print:
            text = f"{section_separator(classified.text)}\n{text}"
        return text

    def decode(self, tokens: Sequence[str], start: int = Record.FIRST_DECODED_INDEX) -> Iterator[str]:
        """
        Decode tokens into explanatory texts, in token order.

        Args:
            tokens: Record token sequence
            start: First position to decode (positions before it hold metadata)

        Yields:
            One explanatory text per decoded token
        """
        index = start
        while index < len(tokens):
            classified = self.classify(tokens, index)
            text = self.decode_token(classified)
            if text is not None:
                yield text
            index += classified.consumed

    def decode_record(self, record: Record) -> Iterator[str]:
        return self.decode(record.tokens)
