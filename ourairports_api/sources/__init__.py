"""
Data sources for the ourairports_api library.

A source provides the raw CSV text of the OurAirports datasets; the shared
loader in ``base`` turns that text into typed, id-indexed tables.
"""

from .base import DatasetSource, build_table, parse_csv
from .datasets import Dataset
from .local import LocalFileSource
from .ourairports import OurAirportsSource

__all__ = [
    'Dataset',
    'DatasetSource',
    'LocalFileSource',
    'OurAirportsSource',
    'build_table',
    'parse_csv',
]
