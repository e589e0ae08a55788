from abc import ABC, abstractmethod
from datetime import datetime
from typing import Mapping, Optional

from ..models import AirportInfo, RawReportBlob


class ReportSource(ABC):
    """
    Base interface for raw report providers.

    A source returns the downloaded text untouched; extracting and decoding
    the reports is left to DecodeSession.
    """

    @abstractmethod
    def fetch_raw_report_blob(self, icao: str,
                              time_from: Optional[datetime] = None,
                              time_to: Optional[datetime] = None) -> RawReportBlob:
        """
        Download the reports of an airport for a time range.

        Args:
            icao: ICAO airport code
            time_from: Start of the range (UTC)
            time_to: End of the range (UTC)

        Returns:
            The raw report blob

        Raises:
            ReportDownloadError: If the download fails
        """
        pass


class AirportResolver(ABC):
    """Base interface for airport reference data lookups."""

    @abstractmethod
    def resolve_airport(self, icao: str) -> Optional[AirportInfo]:
        """
        Look an airport up by ICAO code.

        Returns:
            AirportInfo, or None if the airport is unknown
        """
        pass

    def __call__(self, icao: str) -> Optional[AirportInfo]:
        return self.resolve_airport(icao)


class StaticAirportResolver(AirportResolver):
    """Resolve airports from an in-memory mapping of ICAO code to AirportInfo."""

    def __init__(self, airports: Mapping[str, AirportInfo]):
        self.airports = {icao.upper(): info for icao, info in airports.items()}

    def resolve_airport(self, icao: str) -> Optional[AirportInfo]:
        return self.airports.get(icao.upper())
