#!/usr/bin/env python3

from fastapi import APIRouter, Query
from typing import Optional

from ...sources.datasets import Dataset
from . import common

router = APIRouter()


@router.get("")
async def get_runways(
    airport_ref: Optional[int] = Query(None, description="Filter by airport id", ge=0),
    airport_ident: Optional[str] = Query(None, description="Filter by airport ident", max_length=16),
):
    """List runways ascending by id, matching any given filter."""
    table = common.get_table(Dataset.RUNWAYS)
    runways = table.where_any(case_sensitive=False, airport_ref=airport_ref, airport_ident=airport_ident)
    return common.records_response(runways)


@router.get("/{runway_id}")
async def get_runway(runway_id: int):
    """Get one runway by id."""
    return common.record_response(
        common.get_table(Dataset.RUNWAYS), runway_id, "No runway with the specified ID."
    )
