from .base import ReportSource, AirportResolver, StaticAirportResolver
from .ogimet import OgimetSource
from .worldairports import WorldAirportsResolver

__all__ = [
    'ReportSource',
    'AirportResolver',
    'StaticAirportResolver',
    'OgimetSource',
    'WorldAirportsResolver',
]
