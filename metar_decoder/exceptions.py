"""Exceptions raised while extracting and decoding METAR reports."""


class MetarDecoderError(Exception):
    """Base class for all decoder failures."""


class FormatError(MetarDecoderError):
    """
    The raw blob or a record does not follow the expected layout.

    Raised for content found in an unexpected section, malformed record
    metadata, or an unparseable issue timestamp.
    """


class UnresolvedAirportError(MetarDecoderError):
    """The airport code of a record could not be resolved."""

    def __init__(self, icao: str):
        super().__init__(f"Airport {icao} not found, record metadata unresolved")
        self.icao = icao


class DecoderIOError(MetarDecoderError):
    """Reading the report blob or the terminology dictionary failed."""


class ReportDownloadError(DecoderIOError):
    """Retrieving a raw report blob from the provider failed."""
