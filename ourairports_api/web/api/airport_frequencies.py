#!/usr/bin/env python3

from fastapi import APIRouter, Query
from typing import Optional

from ...sources.datasets import Dataset
from . import common

router = APIRouter()


@router.get("")
async def get_airport_frequencies(
    airport_ref: Optional[int] = Query(None, description="Filter by airport id", ge=0),
    airport_ident: Optional[str] = Query(None, description="Filter by airport ident", max_length=16),
):
    """List airport frequencies ascending by id, matching any given filter."""
    table = common.get_table(Dataset.AIRPORT_FREQUENCIES)
    frequencies = table.where_any(case_sensitive=False, airport_ref=airport_ref, airport_ident=airport_ident)
    return common.records_response(frequencies)


@router.get("/{frequency_id}")
async def get_airport_frequency(frequency_id: int):
    """Get one airport frequency by id."""
    return common.record_response(
        common.get_table(Dataset.AIRPORT_FREQUENCIES), frequency_id,
        "No airport frequency with the specified ID."
    )
