"""
METAR/SPECI decoder.

Turns downloaded METAR and SPECI report blobs into human readable
explanations, with unit conversions.
"""

from .exceptions import (
    MetarDecoderError,
    FormatError,
    UnresolvedAirportError,
    DecoderIOError,
    ReportDownloadError,
)
from .models import AirportInfo, RawReportBlob, Record, ReportType
from .lookup import LookupTables, load_terminology_dictionary, get_lookup_tables
from .decoding import TokenClassifier, TokenCategory, ClassifiedToken
from .extraction import RecordNormalizer, extract_records, extract_sections
from .session import DecodeSession, DecodeSummary, always_continue
from .sinks import StreamSink, ListSink
from .sources import StaticAirportResolver, OgimetSource, WorldAirportsResolver

__version__ = '0.1.0'

__all__ = [
    'MetarDecoderError',
    'FormatError',
    'UnresolvedAirportError',
    'DecoderIOError',
    'ReportDownloadError',
    'AirportInfo',
    'RawReportBlob',
    'Record',
    'ReportType',
    'LookupTables',
    'load_terminology_dictionary',
    'get_lookup_tables',
    'TokenClassifier',
    'TokenCategory',
    'ClassifiedToken',
    'RecordNormalizer',
    'extract_records',
    'extract_sections',
    'DecodeSession',
    'DecodeSummary',
    'always_continue',
    'StreamSink',
    'ListSink',
    'StaticAirportResolver',
    'OgimetSource',
    'WorldAirportsResolver',
]
