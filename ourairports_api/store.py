"""
All six OurAirports tables of one load cycle.

The store is what a hosting process keeps in memory: it is loaded once at
startup, read concurrently without locking, and replaced wholesale when a
refresh succeeds.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
import logging
from typing import Dict

from .errors import OurAirportsError
from .models.table import Table
from .sources.base import DatasetSource
from .sources.datasets import Dataset

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    """The tables of one successful load and when it completed."""

    tables: Dict[Dataset, Table]
    loaded_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class OurAirportsData:
    """Holder of the current Snapshot of every dataset."""

    def __init__(self, snapshot: Snapshot):
        self._snapshot = snapshot

    @classmethod
    def load(cls, source: DatasetSource) -> 'OurAirportsData':
        """
        Load every dataset from source, in parallel.

        Raises:
            FetchError: If any dataset cannot be retrieved
            DecodeError: If any dataset cannot be decoded
        """
        logger.info(f"Downloading OurAirports data using {source.get_source_name()}")
        return cls(Snapshot(source.load_all()))

    def refresh(self, source: DatasetSource) -> bool:
        """
        Reload every dataset and swap in the new tables.

        When the reload fails the current tables are kept and the failure is
        logged.

        Returns:
            True if the tables were replaced
        """
        try:
            tables = source.load_all()
        except OurAirportsError as e:
            logger.error(f"Refresh failed, keeping data loaded at {self.loaded_at.isoformat()}: {e}")
            return False
        self._snapshot = Snapshot(tables)
        logger.info("Refresh complete")
        return True

    @property
    def loaded_at(self) -> datetime:
        return self._snapshot.loaded_at

    def table(self, dataset: Dataset) -> Table:
        return self._snapshot.tables[dataset]

    def counts(self) -> Dict[str, int]:
        """Number of records per dataset."""
        return {dataset.value: len(table) for dataset, table in self._snapshot.tables.items()}

    @property
    def airports(self) -> Table:
        return self.table(Dataset.AIRPORTS)

    @property
    def runways(self) -> Table:
        return self.table(Dataset.RUNWAYS)

    @property
    def navaids(self) -> Table:
        return self.table(Dataset.NAVAIDS)

    @property
    def airport_frequencies(self) -> Table:
        return self.table(Dataset.AIRPORT_FREQUENCIES)

    @property
    def countries(self) -> Table:
        return self.table(Dataset.COUNTRIES)

    @property
    def regions(self) -> Table:
        return self.table(Dataset.REGIONS)
