"""Text helpers shared by the decoders and the session output."""

from ..config import SEPARATOR_FILL


def section_separator(name: str) -> str:
    """
    Build the separator line framing a section of decoded output.

    Args:
        name: Text placed in the middle of the separator

    Returns:
        The separator line
    """
    return f"{SEPARATOR_FILL} {name} {SEPARATOR_FILL}-"


def is_between(number: int, lower: int, upper: int) -> bool:
    """Inclusive range check."""
    return lower <= number <= upper
