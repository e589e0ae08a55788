#!/usr/bin/env python3

import sys
import argparse
import logging
from pathlib import Path
from typing import List, Optional
from datetime import datetime

from dateutil import parser as date_parser
from dateutil import tz

from metar_decoder import (
    DecodeSession,
    MetarDecoderError,
    OgimetSource,
    StreamSink,
    WorldAirportsResolver,
    always_continue,
)
from metar_decoder.models import RawReportBlob
from metar_decoder.utils import section_separator

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def ask_to_decode(preview: str) -> bool:
    """Ask on the terminal whether a report should be decoded."""
    answer = input(f'Do you want "{preview}" to be decoded? [Y/n]: ').strip().lower()
    return answer in ('', 'y', 'yes')


def parse_time(value: Optional[str]) -> Optional[datetime]:
    """Parse a command line time, assumed UTC when no zone is given."""
    if value is None:
        return None
    parsed = date_parser.parse(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=tz.tzutc())
    return parsed


class MetarDecodeTool:
    """Download or read report blobs and decode them."""

    def __init__(self, args):
        self.args = args
        self.resolver = WorldAirportsResolver(args.cache_dir, args.airports_csv)
        self.continue_decoding = ask_to_decode if args.interactive else always_continue

    def blobs(self) -> List[RawReportBlob]:
        if self.args.file:
            logger.info(f"Reading reports from {self.args.file}")
            return [RawReportBlob(text=Path(self.args.file).read_text(encoding='utf-8'))]

        source = OgimetSource()
        time_from = parse_time(self.args.time_from)
        time_to = parse_time(self.args.time_to)
        return [source.fetch_raw_report_blob(icao, time_from, time_to) for icao in self.args.airports]

    def decode(self, sink: StreamSink) -> None:
        for blob in self.blobs():
            sink.write_line(section_separator("METAR DECODING"))
            session = DecodeSession(
                self.resolver.resolve_airport,
                sink,
                continue_decoding=self.continue_decoding,
                token_print=self.args.token_print,
            )
            summary = session.decode(blob)
            sink.write_line(section_separator("END OF METAR DECODING"))
            logger.info(f"{blob.icao or self.args.file}: {summary.decoded} of {summary.available} reports decoded")

    def run(self) -> None:
        if self.args.output:
            with open(self.args.output, 'w', encoding='utf-8') as f:
                self.decode(StreamSink(f))
            logger.info(f"METAR decoding was successfully written to {self.args.output}")
        else:
            self.decode(StreamSink(sys.stdout))


def main():
    parser = argparse.ArgumentParser(description='METAR/SPECI Decoding Tool')

    parser.add_argument('airports', help='ICAO codes of the airports to download reports for', nargs='*')
    parser.add_argument('--from', dest='time_from', help='Start of the time range (UTC), default 24 hours ago')
    parser.add_argument('--to', dest='time_to', help='End of the time range (UTC), default now')
    parser.add_argument('-f', '--file', help='Decode a previously downloaded report file instead of downloading')
    parser.add_argument('-o', '--output', help='Write the decoded reports to this file')
    parser.add_argument('-i', '--interactive', help='Ask before decoding each report', action='store_true')
    parser.add_argument('-t', '--token-print', help='Print each token before its explanation', action='store_true')
    parser.add_argument('--airports-csv', help='OurAirports airports.csv file to use instead of downloading it')
    parser.add_argument('-c', '--cache-dir', help='Directory to cache files', default='cache')
    parser.add_argument('-v', '--verbose', help='Verbose output', action='store_true')

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if not args.airports and not args.file:
        logger.error("Either airports or a report file must be specified")
        sys.exit(2)

    try:
        MetarDecodeTool(args).run()
    except MetarDecoderError as e:
        logger.error(f"Decoding failed: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
