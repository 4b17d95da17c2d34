#!/usr/bin/env python3

from fastapi import APIRouter, Query
from typing import Optional

from ...sources.datasets import Dataset
from . import common

router = APIRouter()


@router.get("")
async def get_navaids(
    filename: Optional[str] = Query(None, description="Filter by OurAirports file name", max_length=100),
    ident: Optional[str] = Query(None, description="Filter by navaid ident", max_length=16),
    iso_country: Optional[str] = Query(None, description="Filter by ISO country code", max_length=3),
    associated_airport: Optional[str] = Query(None, description="Filter by associated airport ident", max_length=16),
):
    """List navaids ascending by id, matching any given filter."""
    table = common.get_table(Dataset.NAVAIDS)
    navaids = table.where_any(
        case_sensitive=False,
        filename=filename,
        ident=ident,
        iso_country=iso_country,
        associated_airport=associated_airport,
    )
    return common.records_response(navaids)


@router.get("/{navaid_id}")
async def get_navaid(navaid_id: int):
    """Get one navaid by id."""
    return common.record_response(
        common.get_table(Dataset.NAVAIDS), navaid_id, "No navaid with the specified ID."
    )
