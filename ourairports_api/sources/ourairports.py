import logging
from typing import Optional

import requests

from ..errors import FetchError
from .base import DatasetSource
from .datasets import Dataset

logger = logging.getLogger(__name__)


class OurAirportsSource(DatasetSource):
    """
    Fetch the OurAirports CSV files from the published data mirror.

    Each load is a fresh, full, blocking download; nothing is cached.

    Example:
        source = OurAirportsSource()
        airports = source.load_airports()
        print(airports.get(2434).ident)
    """

    BASE_URL = "https://davidmegginson.github.io/ourairports-data"
    # Upper bound for downloading one file, in seconds
    DEFAULT_TIMEOUT = 300
    USER_AGENT = "ourairports-api/0.1 (aviation data service)"

    def __init__(self, session: Optional[requests.Session] = None,
                 timeout: float = DEFAULT_TIMEOUT, base_url: Optional[str] = None):
        """
        Args:
            session: Optional requests.Session for dependency injection (testing).
                An injected session keeps its own headers.
            timeout: HTTP request timeout in seconds.
            base_url: Location of the CSV files, defaults to BASE_URL.
        """
        if session is None:
            session = requests.Session()
            session.headers["User-Agent"] = self.USER_AGENT
        self._session = session
        self._timeout = timeout
        self._base_url = (base_url or self.BASE_URL).rstrip('/')

    @property
    def timeout(self) -> float:
        return self._timeout

    def url(self, dataset: Dataset) -> str:
        return f"{self._base_url}/{dataset.filename}"

    def describe(self, dataset: Dataset) -> str:
        return self.url(dataset)

    def fetch_text(self, dataset: Dataset) -> str:
        """
        Download the CSV text of a dataset.

        Raises:
            FetchError: On connection failure, timeout or HTTP error status
        """
        url = self.url(dataset)
        logger.debug(f"requesting data from {url}")
        try:
            response = self._session.get(url, timeout=self._timeout)
            response.raise_for_status()
        except requests.Timeout:
            raise FetchError(url, f"timed out after {self._timeout}s") from None
        except requests.RequestException as e:
            raise FetchError(url, str(e)) from e
        # The mirror serves text/csv without a charset; the files are UTF-8
        response.encoding = 'utf-8'
        return response.text
