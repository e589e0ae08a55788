import logging
import urllib.request
from pathlib import Path
from typing import Any, Optional, Union

import pandas as pd

from ..config import CACHE_DIR, OURAIRPORTS_URL
from ..models import AirportInfo
from .base import AirportResolver

logger = logging.getLogger(__name__)


class WorldAirportsResolver(AirportResolver):
    """Resolve airports from the OurAirports airports.csv file."""

    def __init__(self, cache_dir: Union[str, Path] = CACHE_DIR,
                 airports_file: Optional[Union[str, Path]] = None):
        """
        Args:
            cache_dir: Directory the airports file is downloaded into
            airports_file: Use this airports.csv instead of downloading one
        """
        self.cache_dir = Path(cache_dir)
        self.airports_file = Path(airports_file) if airports_file else self.cache_dir / 'airports.csv'
        self._airports: Optional[pd.DataFrame] = None

    def _download_file(self, url: str, target: Path) -> None:
        """Download a file if it doesn't exist."""
        if not target.exists():
            target.parent.mkdir(parents=True, exist_ok=True)
            logger.info(f"Downloading {url} to {target}")
            urllib.request.urlretrieve(url, target)

    def fetch_airports(self) -> pd.DataFrame:
        """
        Load the airports table, downloading it on first use.

        Returns:
            DataFrame containing airport data
        """
        if self._airports is None:
            self._download_file(OURAIRPORTS_URL, self.airports_file)
            self._airports = pd.read_csv(self.airports_file, encoding='utf-8-sig', keep_default_na=False,
                                         na_values=[''])
            logger.debug(f"Loaded {len(self._airports)} airports from {self.airports_file}")
        return self._airports

    @staticmethod
    def _safe_get(row: pd.Series, key: str) -> Any:
        """Get a value from a row, converting nan to None."""
        value = row.get(key)
        if pd.isna(value):
            return None
        return value

    def resolve_airport(self, icao: str) -> Optional[AirportInfo]:
        icao = icao.strip().upper()
        df = self.fetch_airports()

        matches = df[df['ident'] == icao]
        if matches.empty and 'gps_code' in df.columns:
            matches = df[df['gps_code'] == icao]
        if matches.empty:
            logger.debug(f"Airport {icao} not found in {self.airports_file}")
            return None

        row = matches.iloc[0]
        latitude = self._safe_get(row, 'latitude_deg')
        longitude = self._safe_get(row, 'longitude_deg')
        return AirportInfo(
            icao=icao,
            name=self._safe_get(row, 'name'),
            municipality=self._safe_get(row, 'municipality'),
            country_code=self._safe_get(row, 'iso_country'),
            latitude=float(latitude) if latitude is not None else None,
            longitude=float(longitude) if longitude is not None else None,
        )
