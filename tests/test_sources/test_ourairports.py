"""Tests for OurAirportsSource, the HTTP source of the published CSV files."""

from unittest.mock import MagicMock

import pytest
import requests

from ourairports_api.errors import DecodeError, FetchError
from ourairports_api.models import Airport, AirportFrequency
from ourairports_api.sources import Dataset, OurAirportsSource


class MockResponse:
    """Minimal mock for requests.Response."""

    def __init__(self, text="", status_code=200):
        self.text = text
        self.status_code = status_code
        self.encoding = None

    def raise_for_status(self):
        if self.status_code >= 400:
            from requests.exceptions import HTTPError
            raise HTTPError(f"{self.status_code} Client Error: Not Found")


def make_session(response_text="", status_code=200):
    """Create a mock session returning a fixed response."""
    session = MagicMock()
    session.get.return_value = MockResponse(response_text, status_code)
    return session


def make_mirror_session(csv_dir):
    """Create a mock session serving every dataset from the test assets."""
    session = MagicMock()

    def get(url, timeout=None):
        filename = url.rsplit("/", 1)[-1]
        return MockResponse((csv_dir / filename).read_text(encoding="utf-8"))

    session.get.side_effect = get
    return session


class TestUrls:

    def test_default_urls(self):
        source = OurAirportsSource(session=make_session())
        assert source.url(Dataset.AIRPORTS) == "https://davidmegginson.github.io/ourairports-data/airports.csv"
        assert source.url(Dataset.AIRPORT_FREQUENCIES) == (
            "https://davidmegginson.github.io/ourairports-data/airport-frequencies.csv"
        )

    def test_custom_base_url(self):
        source = OurAirportsSource(session=make_session(), base_url="http://mirror.local/data/")
        assert source.url(Dataset.REGIONS) == "http://mirror.local/data/regions.csv"

    def test_own_session_sends_user_agent(self):
        source = OurAirportsSource()
        request = source._session.prepare_request(requests.Request("GET", source.url(Dataset.COUNTRIES)))
        assert request.headers["User-Agent"] == OurAirportsSource.USER_AGENT

    def test_injected_session_keeps_its_headers(self):
        session = requests.Session()
        session.headers["User-Agent"] = "custom/1.0"
        source = OurAirportsSource(session=session)
        request = session.prepare_request(requests.Request("GET", source.url(Dataset.COUNTRIES)))
        assert request.headers["User-Agent"] == "custom/1.0"


class TestFetch:

    def test_request_uses_timeout(self):
        session = make_session("id,code\n")
        source = OurAirportsSource(session=session)

        source.fetch_text(Dataset.COUNTRIES)

        session.get.assert_called_once_with(
            "https://davidmegginson.github.io/ourairports-data/countries.csv", timeout=300
        )

    def test_custom_timeout(self):
        session = make_session("id,code\n")
        source = OurAirportsSource(session=session, timeout=12)

        source.fetch_text(Dataset.COUNTRIES)

        assert session.get.call_args.kwargs["timeout"] == 12
        assert source.timeout == 12

    def test_response_decoded_as_utf8(self):
        session = make_session("id,code\n")
        OurAirportsSource(session=session).fetch_text(Dataset.COUNTRIES)
        assert session.get.return_value.encoding == "utf-8"

    def test_timeout_is_fetch_error(self):
        session = make_session()
        session.get.side_effect = requests.Timeout("read timed out")
        source = OurAirportsSource(session=session, timeout=5)

        with pytest.raises(FetchError) as exc_info:
            source.load(Dataset.AIRPORTS)

        assert exc_info.value.url.endswith("/airports.csv")
        assert "timed out after 5s" in str(exc_info.value)

    def test_connection_error_is_fetch_error(self):
        session = make_session()
        session.get.side_effect = requests.ConnectionError("Name or service not known")
        source = OurAirportsSource(session=session)

        with pytest.raises(FetchError) as exc_info:
            source.load(Dataset.RUNWAYS)

        assert "Name or service not known" in exc_info.value.reason

    def test_http_error_status(self):
        session = make_session("Not Found", status_code=404)
        source = OurAirportsSource(session=session)

        with pytest.raises(FetchError) as exc_info:
            source.load(Dataset.NAVAIDS)

        assert "404" in str(exc_info.value)


class TestLoad:

    def test_load_airports(self, csv_dir):
        text = (csv_dir / "airports.csv").read_text(encoding="utf-8")
        source = OurAirportsSource(session=make_session(text))

        airports = source.load_airports()

        assert list(airports) == [2434, 3632, 4185, 6090, 6523, 307143]
        assert isinstance(airports[2434], Airport)
        assert airports[2434].iata_code == "LHR"

    def test_load_by_name(self, csv_dir):
        text = (csv_dir / "airport-frequencies.csv").read_text(encoding="utf-8")
        source = OurAirportsSource(session=make_session(text))

        frequencies = source.load("airport-frequencies")

        assert list(frequencies) == [60917, 60920, 70508]
        assert isinstance(frequencies[60917], AirportFrequency)

    def test_decode_error_returns_no_table(self):
        text = "id,ident,type\n1,AAAA,ufo_pad\n"
        source = OurAirportsSource(session=make_session(text))

        with pytest.raises(DecodeError):
            source.load_airports()

    def test_load_all(self, csv_dir):
        source = OurAirportsSource(session=make_mirror_session(csv_dir))

        tables = source.load_all()

        assert list(tables) == list(Dataset)
        assert len(tables[Dataset.AIRPORTS]) == 6
        assert len(tables[Dataset.RUNWAYS]) == 4
        assert len(tables[Dataset.NAVAIDS]) == 3
        assert len(tables[Dataset.AIRPORT_FREQUENCIES]) == 3
        assert len(tables[Dataset.COUNTRIES]) == 5
        assert len(tables[Dataset.REGIONS]) == 4

    def test_load_all_subset(self, csv_dir):
        session = make_mirror_session(csv_dir)
        source = OurAirportsSource(session=session)

        tables = source.load_all([Dataset.COUNTRIES, Dataset.REGIONS])

        assert set(tables) == {Dataset.COUNTRIES, Dataset.REGIONS}
        assert session.get.call_count == 2

    def test_load_all_raises_first_failure(self, csv_dir):
        session = make_mirror_session(csv_dir)
        get = session.get.side_effect

        def failing_get(url, timeout=None):
            if url.endswith("/navaids.csv"):
                raise requests.ConnectionError("connection reset")
            return get(url, timeout=timeout)

        session.get.side_effect = failing_get
        source = OurAirportsSource(session=session)

        with pytest.raises(FetchError) as exc_info:
            source.load_all()

        assert exc_info.value.url.endswith("/navaids.csv")
