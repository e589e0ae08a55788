"""
Extraction of raw records from a downloaded report blob.

Two layouts are supported. The sectioned layout is made of regions framed
by lines of a repeated marker character:

    ##########################################################
    # Query made at 04/25/2020 14:25:00 UTC
    # Time interval: from 04/24/2020 14:00  to 04/25/2020 14:00  UTC
    ##########################################################

    ##########################################################
    # LZKZ, Kosice (Slovakia)
    ##########################################################

    ###################################
    # METAR/SPECI from LZKZ
    ###################################
    202004251330 METAR LZKZ 251330Z 34015KT CAVOK 13/06 Q1002 NOSIG=

The flat layout has one comma separated record per line:

    LZKZ,2020,04,25,13,30,METAR LZKZ 251330Z 34015KT CAVOK 13/06 Q1002 NOSIG=
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Optional

from dateutil import parser as date_parser

from ..config import NO_REPORTS_PREFIX, RECORD_TERMINATOR
from ..exceptions import DecoderIOError, FormatError
from ..models import Section

logger = logging.getLogger(__name__)

QUERY_TIME_PATTERN = re.compile(r'Query made at\s+(?P<time>.+)$', re.IGNORECASE)
RANGE_PATTERN = re.compile(r'from\s+(?P<start>.+?)\s+to\s+(?P<end>.+?)\s*(?P<zone>UTC)?\s*$', re.IGNORECASE)
DISPLAY_TIME_FORMAT = "%d-%m-%Y %H:%M"


class ItemKind(Enum):
    """Kind of item produced by the extractor."""

    QUERY_META = "query_meta"
    LOCATION = "location"
    RECORD = "record"
    NO_REPORTS = "no_reports"


@dataclass(frozen=True)
class ExtractedItem:
    kind: ItemKind
    text: str


def _format_time(text: str) -> str:
    """Render a provider timestamp as dd-mm-yyyy HH:MM, or unchanged if unparseable."""
    try:
        return date_parser.parse(text, fuzzy=True).strftime(DISPLAY_TIME_FORMAT)
    except (ValueError, OverflowError):
        logger.debug(f"Keeping unparseable timestamp '{text}' as is")
        return text.strip()


def describe_query_line(line: str) -> str:
    """
    Turn a query metadata line into a sentence.

    Args:
        line: Metadata line with the comment marker removed

    Returns:
        Download time or time range sentence, or the line itself
    """
    match = QUERY_TIME_PATTERN.search(line)
    if match:
        return f"The weather information has been downloaded at: {_format_time(match.group('time'))}."

    match = RANGE_PATTERN.search(line)
    if match:
        zone = " UTC" if match.group('zone') else ""
        return (
            f"The weather information ranges from {_format_time(match.group('start'))} "
            f"to {_format_time(match.group('end'))}{zone}."
        )

    return line


def _read_lines(lines: Iterable[str]) -> Iterator[str]:
    iterator = iter(lines)
    while True:
        try:
            line = next(iterator)
        except StopIteration:
            return
        except OSError as e:
            raise DecoderIOError(f"Reading the report blob failed: {e}") from e
        yield line.rstrip('\r\n')


def _strip_comment(line: str, marker_char: str) -> str:
    return line.lstrip(marker_char).strip()


def _is_boundary(line: str, marker_char: str) -> bool:
    return len(line) >= 3 and line == marker_char * len(line)


def extract_sections(lines: Iterable[str]) -> Iterator[ExtractedItem]:
    """
    Extract items from a sectioned report blob.

    The boundary marker is the first character of the first non-blank line.
    Content is routed by the number of regions opened so far: query
    metadata, location header, body records, trailer.

    Args:
        lines: Blob lines (a file object or a list of strings)

    Yields:
        ExtractedItem for query metadata, the location line, each record,
        or the single no-reports message

    Raises:
        FormatError: Content found outside the four known regions
        DecoderIOError: The underlying line source failed
    """
    marker_char: Optional[str] = None
    inside = False
    section_index = 0
    location_seen = False
    buffer: List[str] = []

    for line in _read_lines(lines):
        if line.startswith(NO_REPORTS_PREFIX):
            yield ExtractedItem(ItemKind.NO_REPORTS, line[line.index("No "):].strip())
            return

        if not line.strip():
            continue

        if marker_char is None:
            marker_char = line.lstrip()[0]

        if _is_boundary(line.strip(), marker_char):
            inside = not inside
            if inside:
                section_index += 1
            continue

        if section_index == Section.QUERY_META.value:
            yield ExtractedItem(ItemKind.QUERY_META, describe_query_line(_strip_comment(line, marker_char)))
        elif section_index == Section.LOCATION_HEADER.value:
            if not location_seen:
                location_seen = True
                yield ExtractedItem(ItemKind.LOCATION, _strip_comment(line, marker_char))
        elif section_index == Section.BODY.value:
            if line.startswith(marker_char):
                logger.debug(f"Skipping section title '{_strip_comment(line, marker_char)}'")
                continue
            buffer.append(line.strip())
            if RECORD_TERMINATOR in line:
                yield ExtractedItem(ItemKind.RECORD, " ".join(buffer))
                buffer = []
        elif section_index == Section.TRAILER.value:
            continue
        else:
            raise FormatError(f"Unexpected content in section {section_index}: '{line.strip()}'")

    if buffer:
        logger.debug(f"Dropping incomplete record at end of blob: '{' '.join(buffer)}'")


def extract_flat_records(lines: Iterable[str]) -> Iterator[ExtractedItem]:
    """
    Extract records from a flat, one record per line blob, newest first.

    Records are collected with the same continuation rule as the sectioned
    layout and yielded in reverse file order.
    """
    records: List[str] = []
    buffer: List[str] = []
    for line in _read_lines(lines):
        if line.startswith(NO_REPORTS_PREFIX):
            yield ExtractedItem(ItemKind.NO_REPORTS, line[line.index("No "):].strip())
            return
        if not line.strip():
            continue
        buffer.append(line.strip())
        if RECORD_TERMINATOR in line:
            records.append(" ".join(buffer))
            buffer = []

    if buffer:
        logger.debug(f"Dropping incomplete record at end of blob: '{' '.join(buffer)}'")

    for record in reversed(records):
        yield ExtractedItem(ItemKind.RECORD, record)


def is_flat_layout(text: str) -> bool:
    """True when the first non-blank line starts with a letter or a digit."""
    for line in text.splitlines():
        if line.strip():
            return line.lstrip()[0].isalnum()
    return False


def extract_records(text: str) -> Iterator[ExtractedItem]:
    """
    Extract items from a report blob of either layout.

    Args:
        text: Full blob text

    Returns:
        Iterator over the extracted items
    """
    lines = text.splitlines()
    if is_flat_layout(text):
        logger.debug("Extracting records from a flat report blob")
        return extract_flat_records(lines)
    return extract_sections(lines)
