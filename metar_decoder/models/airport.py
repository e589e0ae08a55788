from dataclasses import dataclass
from typing import Optional


@dataclass
class AirportInfo:
    """Airport reference data needed to attribute a report."""

    icao: str
    name: Optional[str] = None
    municipality: Optional[str] = None
    country_code: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    def describe(self) -> str:
        """
        Build the location block printed before each decoded report.

        Returns:
            Multi-line description ending with a newline
        """
        location = ", ".join(str(part) for part in (self.name, self.municipality, self.country_code) if part)
        return (
            f"Location: {self.icao}\n"
            f"\t{location}\n"
            f"\tLatitude: {self.latitude}\n"
            f"\tLongitude: {self.longitude}\n"
        )
