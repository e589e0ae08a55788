from .sections import (
    ExtractedItem,
    ItemKind,
    extract_sections,
    extract_flat_records,
    extract_records,
    describe_query_line,
)
from .normalizer import RecordNormalizer, tokenize

__all__ = [
    'ExtractedItem',
    'ItemKind',
    'extract_sections',
    'extract_flat_records',
    'extract_records',
    'describe_query_line',
    'RecordNormalizer',
    'tokenize',
]
