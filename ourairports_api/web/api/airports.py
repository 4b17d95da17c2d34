#!/usr/bin/env python3

from fastapi import APIRouter, Query
from typing import Optional

from ...sources.datasets import Dataset
from . import common

router = APIRouter()


@router.get("")
async def get_airports(
    ident: Optional[str] = Query(None, description="Filter by ident (ICAO code when available)", max_length=16),
    iso_country: Optional[str] = Query(None, description="Filter by ISO country code", max_length=3),
    iso_region: Optional[str] = Query(None, description="Filter by region code (e.g. GB-ENG)", max_length=16),
    gps_code: Optional[str] = Query(None, description="Filter by GPS code", max_length=16),
    iata_code: Optional[str] = Query(None, description="Filter by IATA code", max_length=3),
    local_code: Optional[str] = Query(None, description="Filter by local code", max_length=16),
):
    """
    List airports ascending by id.

    When filters are given, an airport is returned if it matches any of them
    (case-insensitive).
    """
    table = common.get_table(Dataset.AIRPORTS)
    airports = table.where_any(
        case_sensitive=False,
        ident=ident,
        iso_country=iso_country,
        iso_region=iso_region,
        gps_code=gps_code,
        iata_code=iata_code,
        local_code=local_code,
    )
    return common.records_response(airports)


@router.get("/{airport_id}")
async def get_airport(airport_id: int):
    """Get one airport by id."""
    return common.record_response(
        common.get_table(Dataset.AIRPORTS), airport_id, "No airport with the specified ID."
    )
