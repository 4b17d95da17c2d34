import pytest
from pathlib import Path

from ourairports_api.sources import LocalFileSource


@pytest.fixture
def test_assets_dir() -> Path:
    """Return the path to the test assets directory."""
    return Path(__file__).parent / 'assets'


@pytest.fixture
def csv_dir(test_assets_dir) -> Path:
    """Return the directory holding a small copy of every dataset."""
    return test_assets_dir / 'csv'


@pytest.fixture
def local_source(csv_dir) -> LocalFileSource:
    return LocalFileSource(csv_dir)


@pytest.fixture
def airport_row():
    """Factory for a raw airports.csv row, Heathrow unless overridden."""
    def make(**overrides) -> dict:
        row = {
            'id': '2434',
            'ident': 'EGLL',
            'type': 'large_airport',
            'name': 'London Heathrow Airport',
            'latitude_deg': '51.4706',
            'longitude_deg': '-0.461941',
            'elevation_ft': '83',
            'continent': 'EU',
            'iso_country': 'GB',
            'iso_region': 'GB-ENG',
            'municipality': 'London',
            'scheduled_service': 'yes',
            'gps_code': 'EGLL',
            'iata_code': 'LHR',
            'local_code': '',
            'home_link': 'http://www.heathrowairport.com/',
            'wikipedia_link': 'https://en.wikipedia.org/wiki/Heathrow_Airport',
            'keywords': 'LON, Londres',
        }
        row.update(overrides)
        return row
    return make


@pytest.fixture
def runway_row():
    """Factory for a raw runways.csv row, Heathrow 09L/27R unless overridden."""
    def make(**overrides) -> dict:
        row = {
            'id': '232758',
            'airport_ref': '2434',
            'airport_ident': 'EGLL',
            'length_ft': '12799',
            'width_ft': '164',
            'surface': 'ASP',
            'lighted': '1',
            'closed': '0',
            'le_ident': '09L',
            'le_latitude_deg': '51.4775',
            'le_longitude_deg': '-0.484703',
            'le_elevation_ft': '79',
            'le_heading_degT': '89.6',
            'le_displaced_threshold_ft': '1001',
            'he_ident': '27R',
            'he_latitude_deg': '51.4777',
            'he_longitude_deg': '-0.433258',
            'he_elevation_ft': '78',
            'he_heading_degT': '269.6',
            'he_displaced_threshold_ft': '',
        }
        row.update(overrides)
        return row
    return make


@pytest.fixture
def navaid_row():
    """Factory for a raw navaids.csv row, the Christchurch VOR-DME unless overridden."""
    def make(**overrides) -> dict:
        row = {
            'id': '86738',
            'filename': 'Christchurch_VOR-DME_NZ',
            'ident': 'CH',
            'name': 'Christchurch',
            'type': 'VOR-DME',
            'frequency_khz': '113500',
            'latitude_deg': '-43.496899',
            'longitude_deg': '172.538605',
            'elevation_ft': '120',
            'iso_country': 'NZ',
            'dme_frequency_khz': '113500',
            'dme_channel': '082X',
            'dme_latitude_deg': '',
            'dme_longitude_deg': '',
            'dme_elevation_ft': '',
            'slaved_variation_deg': '23',
            'magnetic_variation_deg': '23.471',
            'usageType': 'BOTH',
            'power': 'HIGH',
            'associated_airport': 'NZCH',
        }
        row.update(overrides)
        return row
    return make
