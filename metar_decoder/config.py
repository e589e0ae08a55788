#!/usr/bin/env python3

"""
Configuration for the METAR decoder.
"""

import os
from pathlib import Path

# Report retrieval
OGIMET_URL = os.getenv("OGIMET_URL", "http://www.ogimet.com/cgi-bin/getmetar")
OGIMET_TIME_FORMAT = "%Y%m%d%H%M"
DEFAULT_TIMEOUT = 30  # seconds
USER_AGENT = "metar-decoder/0.1 (aviation weather tool)"
DEFAULT_RANGE_HOURS = 24

# Airport reference data
OURAIRPORTS_URL = "https://davidmegginson.github.io/ourairports-data/airports.csv"
CACHE_DIR = os.getenv("METAR_CACHE_DIR", "cache")

# Terminology dictionary
_PACKAGE_DATA = Path(__file__).parent / "data"
DEFAULT_DICTIONARY_PATH = os.getenv(
    "METAR_DICTIONARY",
    str(_PACKAGE_DATA / "metar_dictionary.txt"),
)

# Raw report layout
NO_REPORTS_PREFIX = "# No METAR/SPECI reports"
RECORD_TERMINATOR = "="
ISSUE_TIME_FORMAT = "%Y%m%d%H%M"

# Session output
MAX_PREVIEW_LENGTH = 80
SEPARATOR_FILL = "-" * 47
