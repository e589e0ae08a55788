"""
Decode session: drives extraction, normalization and decoding of a blob.

Example:
    from metar_decoder import AirportInfo, DecodeSession, StreamSink, StaticAirportResolver

    resolver = StaticAirportResolver({'LZKZ': AirportInfo('LZKZ', 'Kosice Airport')})
    session = DecodeSession(resolver.resolve_airport, StreamSink())
    summary = session.decode(blob)
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Union

from .config import MAX_PREVIEW_LENGTH
from .decoding import TokenClassifier
from .extraction import ItemKind, RecordNormalizer, extract_records
from .extraction.normalizer import AirportLookup
from .lookup import LookupTables
from .models import RawReportBlob, Record
from .utils import section_separator

logger = logging.getLogger(__name__)

TOO_LONG_PREVIEW = "METAR too long to display"
NOTHING_ACCESSIBLE = "No METAR was accessible for the specified period and airport."
END_OF_REPORT = "END OF METAR"


def always_continue(preview: str) -> bool:
    """Continuation policy decoding every report."""
    return True


@dataclass
class DecodeSummary:
    """
    Outcome of a decode session.

    Attributes:
        available: Number of records found in the blob
        decoded: Number of records decoded and written
        skipped_nil: Number of NIL records skipped
        messages: Informational lines surfaced from the blob
    """

    available: int = 0
    decoded: int = 0
    skipped_nil: int = 0
    messages: List[str] = field(default_factory=list)


class DecodeSession:
    """
    Decode every record of a raw report blob into a sink.

    Any FormatError, UnresolvedAirportError or DecoderIOError aborts the
    whole session and propagates to the caller. Lines already written to
    the sink stay there.
    """

    def __init__(self,
                 resolve_airport: AirportLookup,
                 sink: Any,
                 continue_decoding: Callable[[str], bool] = always_continue,
                 tables: Optional[LookupTables] = None,
                 token_print: bool = False):
        """
        Args:
            resolve_airport: Callable returning AirportInfo for an ICAO code, or None
            sink: Object with a write_line(str) method
            continue_decoding: Called with a preview of each record, decoding stops when it returns False
            tables: Lookup tables, the shared instance by default
            token_print: Precede each decoded token with a separator naming it
        """
        self.sink = sink
        self.continue_decoding = continue_decoding
        self.normalizer = RecordNormalizer(resolve_airport)
        self.classifier = TokenClassifier(tables, token_print=token_print)

    @staticmethod
    def preview(report_text: str) -> str:
        if len(report_text) > MAX_PREVIEW_LENGTH:
            return TOO_LONG_PREVIEW
        return report_text

    def decode(self, blob: Union[RawReportBlob, str]) -> DecodeSummary:
        """
        Decode a blob.

        Args:
            blob: Raw report blob or its text

        Returns:
            DecodeSummary with record counts and surfaced messages
        """
        text = blob.text if isinstance(blob, RawReportBlob) else blob
        items = list(extract_records(text))
        summary = DecodeSummary()

        no_reports = [item for item in items if item.kind is ItemKind.NO_REPORTS]
        if no_reports:
            message = no_reports[0].text
            summary.messages.append(message)
            self.sink.write_line(message)
            logger.info(message)
            return summary

        raw_records = []
        for item in items:
            if item.kind is ItemKind.RECORD:
                raw_records.append(item.text)
                continue
            if item.kind is ItemKind.LOCATION:
                message = f"Airport in question: {item.text}."
            else:
                message = item.text
            summary.messages.append(message)
            self.sink.write_line(message)

        summary.available = len(raw_records)
        if not raw_records:
            summary.messages.append(NOTHING_ACCESSIBLE)
            self.sink.write_line(NOTHING_ACCESSIBLE)
            return summary

        logger.info(f"Decoding {summary.available} reports")
        for raw in raw_records:
            record = self.normalizer.normalize(raw)
            if record.is_nil:
                logger.debug(f"Skipping NIL report {record!r}")
                summary.skipped_nil += 1
                continue

            if not self.continue_decoding(self.preview(record.report_text)):
                logger.info("Decoding stopped on request")
                break

            self._write_record(record)
            summary.decoded += 1

        self.sink.write_line(f"METARs available: {summary.available}")
        self.sink.write_line(f"METARs decoded  : {summary.decoded}")
        logger.info(f"Decoded {summary.decoded} of {summary.available} reports")
        return summary

    def _write_record(self, record: Record) -> None:
        self.sink.write_line(section_separator(record.report_text))
        self.sink.write_line(record.header_text)
        for line in self.classifier.decode_record(record):
            self.sink.write_line(line)
        self.sink.write_line(section_separator(END_OF_REPORT))
        self.sink.write_line("")
