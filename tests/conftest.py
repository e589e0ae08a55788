import pytest
from pathlib import Path

from metar_decoder.lookup import LookupTables
from metar_decoder.models import AirportInfo
from metar_decoder.sources import StaticAirportResolver


@pytest.fixture
def test_assets_dir() -> Path:
    """Return the path to the test assets directory."""
    return Path(__file__).parent / 'assets'


@pytest.fixture
def tables() -> LookupTables:
    """Lookup tables backed by the packaged dictionary."""
    return LookupTables()


@pytest.fixture
def lzkz() -> AirportInfo:
    return AirportInfo(
        icao='LZKZ',
        name='Kosice International Airport',
        municipality='Kosice',
        country_code='SK',
        latitude=48.663101,
        longitude=21.2411,
    )


@pytest.fixture
def resolver(lzkz) -> StaticAirportResolver:
    return StaticAirportResolver({'LZKZ': lzkz})


@pytest.fixture
def sectioned_blob(test_assets_dir) -> str:
    """Ogimet style blob with four LZKZ reports, one of them NIL."""
    return (test_assets_dir / 'ogimet_lzkz.txt').read_text(encoding='utf-8')


@pytest.fixture
def no_reports_blob(test_assets_dir) -> str:
    return (test_assets_dir / 'ogimet_no_reports.txt').read_text(encoding='utf-8')


@pytest.fixture
def flat_blob(test_assets_dir) -> str:
    return (test_assets_dir / 'lzkz_reports.csv').read_text(encoding='utf-8')


@pytest.fixture
def airports_csv(test_assets_dir) -> Path:
    return test_assets_dir / 'airports_test.csv'
