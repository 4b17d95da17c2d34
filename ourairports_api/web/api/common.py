#!/usr/bin/env python3

from typing import Iterable, Optional

from fastapi import HTTPException
from fastapi.responses import JSONResponse

from ...models.base import Record
from ...models.table import Table
from ...sources.datasets import Dataset
from ...store import OurAirportsData
from .models import ErrorResponse

# Global data reference
data: Optional[OurAirportsData] = None


def set_data(d: Optional[OurAirportsData]):
    """Set the global data reference shared by every router."""
    global data
    data = d


def get_table(dataset: Dataset) -> Table:
    if not data:
        raise HTTPException(status_code=503, detail="Data not loaded")
    return data.table(dataset)


def records_response(records: Iterable[Record]) -> JSONResponse:
    return JSONResponse(content=[record.to_dict() for record in records])


def record_response(table: Table, record_id: int, not_found: str) -> JSONResponse:
    """Return one record, or a 404 with the given message."""
    record = table.get(record_id)
    if record is None:
        return JSONResponse(status_code=404, content=ErrorResponse(error=not_found).model_dump())
    return JSONResponse(content=record.to_dict())
