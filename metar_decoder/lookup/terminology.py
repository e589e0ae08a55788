"""
Lookup tables used by the token decoders.

The terminology dictionary maps METAR abbreviations to phrases
(KT=knots, BKN=broken clouds layer, ...). It is read from a KEY=VALUE text
resource the first time a decoder needs it, then shared read-only.
"""

import logging
import threading
from functools import partial
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Dict, Mapping, Optional, Union

from ..config import DEFAULT_DICTIONARY_PATH
from ..exceptions import DecoderIOError
from . import runway_state

logger = logging.getLogger(__name__)


def load_terminology_dictionary(path: Union[str, Path] = DEFAULT_DICTIONARY_PATH) -> Dict[str, str]:
    """
    Read a terminology dictionary file.

    Each line holds one KEY=VALUE entry, split on the first '='. Blank
    lines and lines starting with '#' are ignored.

    Args:
        path: Path to the dictionary file

    Returns:
        Dictionary of abbreviation -> phrase

    Raises:
        DecoderIOError: If the file cannot be read
    """
    entries: Dict[str, str] = {}
    try:
        with open(path, 'r', encoding='utf-8') as f:
            for line_number, line in enumerate(f, start=1):
                line = line.rstrip('\n')
                if not line.strip() or line.startswith('#'):
                    continue
                key, sep, value = line.partition('=')
                if not sep or not key:
                    logger.warning(f"Ignoring malformed dictionary line {line_number} in {path}: '{line}'")
                    continue
                entries[key] = value
    except OSError as e:
        raise DecoderIOError(f"Cannot read METAR dictionary {path}: {e}") from e

    logger.debug(f"Read {len(entries)} entries from {path}")
    return entries


class LookupTables:
    """
    Terminology dictionary plus the fixed runway state group tables.

    The terminology is populated once, on first access, under a lock, and
    published as a read-only mapping so that concurrent readers never see
    a partially filled table.

    Example:
        tables = LookupTables()
        tables.lookup('KT')  # 'knots'
    """

    def __init__(self,
                 loader: Optional[Callable[[], Mapping[str, str]]] = None,
                 dictionary_path: Optional[Union[str, Path]] = None):
        """
        Args:
            loader: Callable returning the terminology mapping. Defaults to
                    reading the dictionary file.
            dictionary_path: Dictionary file used by the default loader
        """
        if loader is None:
            loader = partial(load_terminology_dictionary, dictionary_path or DEFAULT_DICTIONARY_PATH)
        self._loader = loader
        self._terminology: Optional[Mapping[str, str]] = None
        self._lock = threading.Lock()

        self.runway_deposits = MappingProxyType(runway_state.RUNWAY_DEPOSITS)
        self.contamination_extents = MappingProxyType(runway_state.CONTAMINATION_EXTENTS)
        self.deposit_depths = MappingProxyType(runway_state.DEPOSIT_DEPTHS)
        self.braking_actions = MappingProxyType(runway_state.BRAKING_ACTIONS)

    @classmethod
    def from_mapping(cls, terminology: Mapping[str, str]) -> 'LookupTables':
        """Build tables around an already available terminology mapping."""
        return cls(loader=lambda: terminology)

    @property
    def is_loaded(self) -> bool:
        return self._terminology is not None

    @property
    def terminology(self) -> Mapping[str, str]:
        """
        The terminology dictionary, loaded on first access.

        Raises:
            DecoderIOError: If the dictionary resource cannot be read
        """
        if self._terminology is None:
            with self._lock:
                if self._terminology is None:
                    entries = dict(self._loader())
                    self._terminology = MappingProxyType(entries)
                    logger.info(f"METAR terminology loaded with {len(entries)} entries")
        return self._terminology

    def lookup(self, key: str) -> Optional[str]:
        """Return the phrase for an abbreviation, or None if unknown."""
        return self.terminology.get(key)


_shared_tables: Optional[LookupTables] = None
_shared_lock = threading.Lock()


def get_lookup_tables() -> LookupTables:
    """
    Return the process-wide LookupTables instance, creating it once.

    Returns:
        The shared LookupTables
    """
    global _shared_tables
    if _shared_tables is None:
        with _shared_lock:
            if _shared_tables is None:
                _shared_tables = LookupTables()
    return _shared_tables
