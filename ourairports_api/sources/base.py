from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor
import csv
import io
import logging
from typing import Dict, Iterable, List, Optional, Union

import pandas as pd

from ..errors import DecodeError, FieldDecodeError
from ..models.table import Table
from .datasets import Dataset

logger = logging.getLogger(__name__)

_BOM = '\ufeff'


def _check_field_counts(text: str, dataset: str):
    """
    Reject rows whose field count differs from the header's.

    pandas pads short rows and turns a surplus leading field into an index,
    so the counts are checked on the raw records first. Blank lines are
    skipped the same way pandas skips them.
    """
    reader = csv.reader(io.StringIO(text))
    header = None
    number = 0
    try:
        for fields in reader:
            if not fields:
                continue
            if header is None:
                header = fields
                continue
            number += 1
            if len(fields) != len(header):
                raise DecodeError(
                    f"{dataset} row {number}: expected {len(header)} fields, found {len(fields)}",
                    dataset=dataset, row=number,
                )
    except csv.Error as e:
        raise DecodeError(f"{dataset}: malformed CSV: {e}", dataset=dataset) from e


def parse_csv(text: str, dataset: str = 'csv') -> List[Dict[str, str]]:
    """
    Parse header-driven CSV text into one dict per data row.

    Every cell is kept as a string; empty cells stay empty strings. Column
    order is not significant since rows are keyed by header name.

    Raises:
        DecodeError: If the text is not a well-formed CSV table, including
                     any row with more or fewer fields than the header
    """
    if text.startswith(_BOM):
        text = text[len(_BOM):]
    _check_field_counts(text, dataset)
    try:
        df = pd.read_csv(io.StringIO(text), dtype=str, index_col=False,
                         keep_default_na=False, na_filter=False)
    except pd.errors.EmptyDataError:
        raise DecodeError(f"{dataset}: no header row", dataset=dataset) from None
    except (pd.errors.ParserError, ValueError) as e:
        raise DecodeError(f"{dataset}: malformed CSV: {e}", dataset=dataset) from e
    return df.to_dict('records')


def build_table(dataset: Dataset, text: str) -> Table:
    """
    Decode CSV text into a Table of the dataset's record type.

    Any row that fails to decode aborts the whole table.

    Raises:
        DecodeError: If the CSV is malformed or a cell cannot be decoded
    """
    record_type = dataset.record_type
    logger.debug(f"parsing {dataset.value}")
    rows = parse_csv(text, dataset.value)

    records = []
    for number, row in enumerate(rows, start=1):
        try:
            records.append(record_type.from_row(row))
        except FieldDecodeError as e:
            raise DecodeError.from_field_error(e, dataset.value, number) from None

    table = Table(records)
    if len(table) != len(records):
        logger.debug(f"{dataset.value}: {len(records) - len(table)} repeated ids replaced")
    return table


class DatasetSource(ABC):
    """
    Base class for everything that can provide the raw OurAirports CSV text.

    Subclasses only implement ``fetch_text``; fetching, parsing and table
    construction are shared by all six datasets through ``load``.
    """

    @abstractmethod
    def fetch_text(self, dataset: Dataset) -> str:
        """
        Retrieve the complete CSV text of a dataset.

        Raises:
            FetchError: If the text cannot be retrieved
        """
        pass

    def describe(self, dataset: Dataset) -> str:
        """Where the dataset comes from, for log messages."""
        return dataset.filename

    def get_source_name(self) -> str:
        return self.__class__.__name__.lower()

    def load(self, dataset: Union[Dataset, str]) -> Table:
        """
        Fetch and decode one dataset.

        Args:
            dataset: Dataset member or its file stem (e.g. "airport-frequencies")

        Returns:
            Table of records keyed by id, ascending by id

        Raises:
            FetchError: If the raw text cannot be retrieved
            DecodeError: If the text cannot be decoded
        """
        if not isinstance(dataset, Dataset):
            dataset = Dataset.from_name(dataset)
        logger.info(f"Fetching {dataset.value} from {self.describe(dataset)}")
        text = self.fetch_text(dataset)
        table = build_table(dataset, text)
        logger.info(f"Loaded {len(table)} {dataset.value}")
        return table

    def load_all(self, datasets: Optional[Iterable[Dataset]] = None,
                 max_workers: int = len(Dataset)) -> Dict[Dataset, Table]:
        """
        Load several datasets in parallel.

        The loads are independent; all of them run to completion and the
        first failure (in dataset order) is then raised.

        Returns:
            Dictionary of dataset to Table
        """
        datasets = list(datasets) if datasets is not None else list(Dataset)
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = {dataset: executor.submit(self.load, dataset) for dataset in datasets}
        return {dataset: future.result() for dataset, future in futures.items()}

    def load_airports(self) -> Table:
        return self.load(Dataset.AIRPORTS)

    def load_runways(self) -> Table:
        return self.load(Dataset.RUNWAYS)

    def load_navaids(self) -> Table:
        return self.load(Dataset.NAVAIDS)

    def load_airport_frequencies(self) -> Table:
        return self.load(Dataset.AIRPORT_FREQUENCIES)

    def load_countries(self) -> Table:
        return self.load(Dataset.COUNTRIES)

    def load_regions(self) -> Table:
        return self.load(Dataset.REGIONS)
