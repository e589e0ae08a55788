from .units import UnitConverter, format_number
from .formatting import section_separator, is_between

__all__ = [
    'UnitConverter',
    'format_number',
    'section_separator',
    'is_between',
]
