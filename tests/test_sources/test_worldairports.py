import pytest

from metar_decoder.sources import WorldAirportsResolver


@pytest.fixture
def world_airports(test_cache_dir, airports_csv):
    """Resolver reading the test airports file instead of downloading."""
    return WorldAirportsResolver(test_cache_dir, airports_file=airports_csv)


@pytest.fixture
def test_cache_dir(tmp_path):
    return tmp_path / 'cache'


class TestWorldAirportsResolver:

    def test_resolve_by_ident(self, world_airports):
        airport = world_airports.resolve_airport("LZKZ")

        assert airport.icao == "LZKZ"
        assert airport.name == "Košice International Airport"
        assert airport.municipality == "Košice"
        assert airport.country_code == "SK"
        assert airport.latitude == pytest.approx(48.663101)
        assert airport.longitude == pytest.approx(21.2411)

    def test_resolve_by_gps_code(self, world_airports):
        airport = world_airports.resolve_airport("lzxx")

        assert airport.icao == "LZXX"
        assert airport.name == "Test Strip"
        assert airport.municipality is None

    def test_namibia_country_code_is_not_missing(self, world_airports):
        assert world_airports.resolve_airport("FYWH").country_code == "NA"

    def test_unknown_airport(self, world_airports):
        assert world_airports.resolve_airport("XXXX") is None

    def test_callable_as_lookup(self, world_airports):
        assert world_airports("LZKZ").icao == "LZKZ"

    def test_existing_file_is_not_downloaded(self, world_airports, monkeypatch):
        def fail(*args, **kwargs):
            raise AssertionError("download attempted")

        monkeypatch.setattr("urllib.request.urlretrieve", fail)
        assert world_airports.resolve_airport("LZKZ") is not None

    def test_describe(self, world_airports):
        text = world_airports.resolve_airport("LZKZ").describe()
        assert text.startswith("Location: LZKZ\n\tKošice International Airport, Košice, SK\n")
