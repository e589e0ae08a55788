"""
Unit conversion utilities.

All conversions are fixed multiplications rendered with at most two
decimals, trailing zeros dropped (e.g. 11 kt -> "20.37", 1500 ft -> "457.2").
"""

from typing import Union
import logging

logger = logging.getLogger(__name__)

KNOTS_TO_KMH = 1.852
FEET_TO_METERS = 0.3048
INHG_TO_HPA = 1 / 2.953           # applied to hundredths of inches (A2992)
HPA_TO_INHG = 1 / (100 * INHG_TO_HPA)


def format_number(value: float) -> str:
    """
    Render a number with at most two decimals.

    Args:
        value: Number to render

    Returns:
        The rounded value without trailing zeros, e.g. 457.2 or 20.37
    """
    text = f"{round(value, 2):.2f}".rstrip('0').rstrip('.')
    return "0" if text == "-0" else text


class UnitConverter:
    """Fixed-multiplier conversions used by the token decoders."""

    @staticmethod
    def convert(value: Union[str, float], factor: float) -> str:
        """
        Multiply a value by a factor and render the result.

        Args:
            value: Numeric value or numeric string (e.g. "030")
            factor: Conversion multiplier

        Returns:
            Formatted result, or "NaN" if the value is not numeric
        """
        try:
            number = float(value)
        except (TypeError, ValueError):
            logger.debug(f"Cannot convert non numeric value '{value}'")
            return "NaN"
        return format_number(number * factor)

    @classmethod
    def conversion(cls, value: Union[str, float], factor: float, unit: str, needed: bool = True) -> str:
        """
        Build a parenthesised conversion clause.

        Args:
            value: Value to convert
            factor: Conversion multiplier
            unit: Unit name of the converted value
            needed: When False, no clause is produced

        Returns:
            " (<converted> <unit>)" or an empty string
        """
        if not needed:
            return ""
        return f" ({cls.convert(value, factor)} {unit})"
