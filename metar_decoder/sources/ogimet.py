"""Ogimet (ogimet.com) source for historical METAR/SPECI reports."""

import logging
from datetime import datetime
from typing import Optional

import requests
from dateutil import tz
from dateutil.relativedelta import relativedelta

from ..config import DEFAULT_RANGE_HOURS, DEFAULT_TIMEOUT, OGIMET_TIME_FORMAT, OGIMET_URL, USER_AGENT
from ..exceptions import ReportDownloadError
from ..models import RawReportBlob
from .base import ReportSource

logger = logging.getLogger(__name__)


class OgimetSource(ReportSource):
    """
    Download raw METAR/SPECI blobs from the Ogimet getmetar service.

    Example:
        source = OgimetSource()
        blob = source.fetch_raw_report_blob("LZKZ")
        DecodeSession(resolver, StreamSink()).decode(blob)
    """

    def __init__(self, session: Optional[requests.Session] = None,
                 timeout: int = DEFAULT_TIMEOUT, url: str = OGIMET_URL):
        """
        Args:
            session: Optional requests.Session for dependency injection (testing).
            timeout: HTTP request timeout in seconds.
            url: getmetar endpoint
        """
        self._session = session or requests.Session()
        self._timeout = timeout
        self._url = url
        self._session.headers.setdefault("User-Agent", USER_AGENT)

    @staticmethod
    def default_range(now: Optional[datetime] = None):
        """The last DEFAULT_RANGE_HOURS hours, in UTC."""
        end = now or datetime.now(tz.tzutc())
        return end - relativedelta(hours=DEFAULT_RANGE_HOURS), end

    def fetch_raw_report_blob(self, icao: str,
                              time_from: Optional[datetime] = None,
                              time_to: Optional[datetime] = None) -> RawReportBlob:
        icao = icao.strip().upper()
        if time_from is None or time_to is None:
            default_from, default_to = self.default_range(time_to)
            time_from = time_from or default_from
            time_to = time_to or default_to

        params = {
            "icao": icao,
            "begin": time_from.strftime(OGIMET_TIME_FORMAT),
            "end": time_to.strftime(OGIMET_TIME_FORMAT),
        }
        logger.info(f"Downloading reports for {icao} from {params['begin']} to {params['end']}")
        try:
            response = self._session.get(self._url, params=params, timeout=self._timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise ReportDownloadError(f"Ogimet download failed for {icao}: {e}") from e

        return RawReportBlob(text=response.text, icao=icao, time_from=time_from, time_to=time_to)
