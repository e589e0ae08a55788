from .report import ReportType, Section, RawReportBlob, Record
from .airport import AirportInfo

__all__ = [
    'ReportType',
    'Section',
    'RawReportBlob',
    'Record',
    'AirportInfo',
]
