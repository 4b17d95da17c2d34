import logging
from pathlib import Path
from typing import Union

from ..errors import FetchError
from .base import DatasetSource
from .datasets import Dataset

logger = logging.getLogger(__name__)


class LocalFileSource(DatasetSource):
    """
    Read the OurAirports CSV files from a local directory.

    The directory is expected to hold the files under their upstream names
    (``airports.csv``, ``airport-frequencies.csv``, ...), e.g. a mirror
    downloaded earlier or a set of test fixtures.
    """

    def __init__(self, data_dir: Union[str, Path]):
        """
        Args:
            data_dir: Directory containing the CSV files
        """
        self.data_dir = Path(data_dir)

    def path(self, dataset: Dataset) -> Path:
        return self.data_dir / dataset.filename

    def describe(self, dataset: Dataset) -> str:
        return str(self.path(dataset))

    def fetch_text(self, dataset: Dataset) -> str:
        path = self.path(dataset)
        try:
            return path.read_text(encoding='utf-8-sig')
        except OSError as e:
            raise FetchError(str(path), e.strerror or str(e)) from e
