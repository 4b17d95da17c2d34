"""
Error types for the ourairports_api library.

Two errors are terminal for a load operation:

- FetchError: the dataset source could not be reached (network failure,
  timeout, HTTP error status, unreadable local file).
- DecodeError: the CSV text is malformed or one of its cells cannot be
  decoded into the typed record.

FieldDecodeError is raised by the individual field decoders and carries the
offending raw value; the loader wraps it into a DecodeError that also names
the dataset and the row.
"""

from typing import Any, Optional


class OurAirportsError(Exception):
    """Base class for all errors raised by this library."""


class FieldDecodeError(ValueError):
    """Raised when a single CSV cell cannot be decoded."""

    def __init__(self, message: str, value: Any = None, column: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.value = value
        self.column = column

    def with_column(self, column: str) -> 'FieldDecodeError':
        """Return a copy of this error bound to a column name."""
        return FieldDecodeError(self.message, self.value, column)

    def __str__(self) -> str:
        if self.column is not None:
            return f"{self.column}: {self.message} (value: {self.value!r})"
        return f"{self.message} (value: {self.value!r})"


class FetchError(OurAirportsError):
    """Raised when the raw dataset text cannot be retrieved."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Failed to fetch {url}: {reason}")
        self.url = url
        self.reason = reason


class DecodeError(OurAirportsError):
    """Raised when a dataset cannot be decoded into records."""

    def __init__(
        self,
        message: str,
        dataset: Optional[str] = None,
        row: Optional[int] = None,
        column: Optional[str] = None,
        value: Any = None,
    ):
        """
        Initialize decode error.

        Args:
            message: Error message
            dataset: Name of the dataset being decoded
            row: 1-based data row number (header excluded), if row-level
            column: CSV column that failed, if field-level
            value: Raw cell value that failed, if field-level
        """
        super().__init__(message)
        self.dataset = dataset
        self.row = row
        self.column = column
        self.value = value

    @classmethod
    def from_field_error(cls, error: FieldDecodeError, dataset: str, row: int) -> 'DecodeError':
        """Wrap a field-level error with the dataset and row it occurred in."""
        return cls(
            f"{dataset} row {row}: {error}",
            dataset=dataset,
            row=row,
            column=error.column,
            value=error.value,
        )
