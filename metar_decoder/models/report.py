"""Report data models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, List


class ReportType(Enum):
    """Type of weather report."""

    METAR = "METAR"
    SPECI = "SPECI"


class Section(Enum):
    """
    Logical regions of a raw report blob, in order of appearance.

    The value is the 1-based position of the delimiter-bounded region.
    """

    QUERY_META = 1
    LOCATION_HEADER = 2
    BODY = 3
    TRAILER = 4


@dataclass(frozen=True)
class RawReportBlob:
    """
    Raw report text as downloaded for one airport and time range.

    Attributes:
        text: Full downloaded text
        icao: Airport the reports were requested for
        time_from: Start of the requested range (UTC)
        time_to: End of the requested range (UTC)
    """

    text: str
    icao: str = ""
    time_from: Optional[datetime] = None
    time_to: Optional[datetime] = None


@dataclass
class Record:
    """
    One normalized report.

    The token sequence keeps the record layout of the downloaded file:
    index 0 is the issue timestamp, 1 the report type and 2 the airport
    code. Only tokens from index 3 onwards are classified and decoded.

    Attributes:
        issued_at: Issue time parsed from the yyyyMMddHHmm field
        report_type: METAR or SPECI
        airport_code: ICAO code of the reporting airport
        auto: True when the report carried the AUTO keyword
        corrected: True when the report carried the COR keyword
        header_text: Location and issue description printed before decoding
        tokens: Raw tokens, AUTO and COR removed
        observation_group: The ddhhmmZ group, if present
        report_text: The report as published (used for previews)
    """

    issued_at: datetime
    report_type: ReportType
    airport_code: str
    auto: bool = False
    corrected: bool = False
    header_text: str = ""
    tokens: List[str] = field(default_factory=list)
    observation_group: Optional[str] = None
    report_text: str = ""

    FIRST_DECODED_INDEX = 3

    @property
    def body_tokens(self) -> List[str]:
        """Tokens to be classified (index 3 onwards)."""
        return self.tokens[self.FIRST_DECODED_INDEX:]

    @property
    def is_nil(self) -> bool:
        """True for a NIL report (no observation available)."""
        return self.report_text.rstrip().endswith("NIL")

    def __repr__(self) -> str:
        return f"Record({self.report_type.value} {self.airport_code} {self.issued_at:%Y-%m-%d %H:%M})"
