"""Normalization of raw records into Record objects."""

import logging
import re
from datetime import datetime
from typing import Callable, List, Optional, Tuple

from ..config import ISSUE_TIME_FORMAT, RECORD_TERMINATOR
from ..exceptions import FormatError, UnresolvedAirportError
from ..models import AirportInfo, Record, ReportType

logger = logging.getLogger(__name__)

TOKEN_PATTERN = re.compile(r'WS (?:ALL RWY|RWY\d{2}[LCR]?)|\S+')
ISSUE_TIME_PATTERN = re.compile(r'\d{12}')
OBSERVATION_GROUP_PATTERN = re.compile(r'\d{6}Z')

AUTO_KEYWORD = "AUTO"
AUTO_DESCRIPTION = "automatically, with no human intervention or oversight "
CORRECTION_KEYWORD = "COR"
CORRECTED_DESCRIPTION = "corrected "
CSV_METADATA_FIELDS = 6

AirportLookup = Callable[[str], Optional[AirportInfo]]


def tokenize(text: str) -> List[str]:
    """
    Split report text on whitespace, keeping windshear groups whole.

    Example:
        tokenize("WS RWY24L 9999") -> ['WS RWY24L', '9999']
    """
    return TOKEN_PATTERN.findall(text)


class RecordNormalizer:
    """
    Turn a raw record string into a Record.

    Two record layouts are accepted and produce the same token layout
    (timestamp, report type, airport code, body groups):

        202004251330 METAR LZKZ 251330Z 34015KT CAVOK 13/06 Q1002 NOSIG=
        LZKZ,2020,04,25,13,30,METAR LZKZ 251330Z 34015KT CAVOK 13/06 Q1002 NOSIG=
    """

    def __init__(self, resolve_airport: AirportLookup):
        """
        Args:
            resolve_airport: Callable returning AirportInfo for an ICAO code, or None
        """
        self.resolve_airport = resolve_airport

    def normalize(self, raw: str) -> Record:
        """
        Normalize one raw record.

        Args:
            raw: Raw record text, possibly terminated by '='

        Returns:
            The Record with its header text

        Raises:
            FormatError: If the record metadata is malformed
            UnresolvedAirportError: If the airport cannot be resolved
        """
        text = raw.replace(RECORD_TERMINATOR, "").strip()
        csv_airport = None
        if ',' in text.split(' ', 1)[0]:
            csv_airport, issue_time, published = self._split_csv(text)
        else:
            issue_time, published = self._split_timestamped(text)

        tokens = tokenize(published)
        auto = AUTO_KEYWORD in tokens
        if auto:
            tokens.remove(AUTO_KEYWORD)

        if len(tokens) < 2:
            raise FormatError(f"Record has no report type or airport code: '{raw}'")

        try:
            report_type = ReportType(tokens[0])
        except ValueError:
            raise FormatError(f"Unknown report type '{tokens[0]}' in record '{raw}'")

        report_text = " ".join(tokens)

        # METAR COR LZKZ ...
        corrected = tokens[1] == CORRECTION_KEYWORD
        if corrected:
            del tokens[1]
            if len(tokens) < 2:
                raise FormatError(f"Record has no airport code: '{raw}'")

        airport_code = csv_airport or tokens[1]
        body = tokens[2:]
        observation_group = None
        if body and OBSERVATION_GROUP_PATTERN.fullmatch(body[0]):
            observation_group = body.pop(0)

        issued_at = self._parse_issue_time(issue_time)

        airport = self.resolve_airport(airport_code)
        if airport is None:
            raise UnresolvedAirportError(airport_code)

        record = Record(
            issued_at=issued_at,
            report_type=report_type,
            airport_code=airport_code,
            auto=auto,
            corrected=corrected,
            tokens=[issue_time, report_type.value, airport_code] + body,
            observation_group=observation_group,
            report_text=report_text,
        )
        record.header_text = self.header_text(record, airport)
        logger.debug(f"Normalized {record!r}")
        return record

    @staticmethod
    def header_text(record: Record, airport: AirportInfo) -> str:
        """Location block followed by the issue sentence."""
        corrected = CORRECTED_DESCRIPTION if record.corrected else ""
        auto = AUTO_DESCRIPTION if record.auto else ""
        return (
            f"{airport.describe()}"
            f"The {corrected}{record.report_type.value} was issued {auto}"
            f"the {record.issued_at:%d-%m-%Y} at {record.issued_at:%H:%M} UTC time."
        )

    @staticmethod
    def _split_csv(text: str) -> Tuple[str, str, str]:
        fields = text.split(',', CSV_METADATA_FIELDS)
        if len(fields) <= CSV_METADATA_FIELDS:
            raise FormatError(f"Expected {CSV_METADATA_FIELDS} metadata fields before the report: '{text}'")
        airport, year, month, day, hour, minute = (field.strip() for field in fields[:CSV_METADATA_FIELDS])
        return airport.upper(), f"{year}{month}{day}{hour}{minute}", fields[CSV_METADATA_FIELDS].strip()

    @staticmethod
    def _split_timestamped(text: str) -> Tuple[str, str]:
        issue_time, _, report_text = text.partition(' ')
        if not ISSUE_TIME_PATTERN.fullmatch(issue_time):
            raise FormatError(f"Record does not start with a yyyyMMddHHmm timestamp: '{text}'")
        return issue_time, report_text

    @staticmethod
    def _parse_issue_time(issue_time: str) -> datetime:
        try:
            return datetime.strptime(issue_time, ISSUE_TIME_FORMAT)
        except ValueError:
            raise FormatError(f"Invalid issue time '{issue_time}'")
