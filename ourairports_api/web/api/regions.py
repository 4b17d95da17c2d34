#!/usr/bin/env python3

from fastapi import APIRouter, Query
from typing import Optional

from ...sources.datasets import Dataset
from . import common

router = APIRouter()


@router.get("")
async def get_regions(
    iso_country: Optional[str] = Query(None, description="Filter by ISO country code", max_length=3),
    code: Optional[str] = Query(None, description="Filter by region code (e.g. GB-ENG)", max_length=16),
    local_code: Optional[str] = Query(None, description="Filter by local region code", max_length=16),
):
    """List regions ascending by id, matching any given filter."""
    table = common.get_table(Dataset.REGIONS)
    regions = table.where_any(case_sensitive=False, iso_country=iso_country, code=code, local_code=local_code)
    return common.records_response(regions)


@router.get("/{region_id}")
async def get_region(region_id: int):
    """Get one region by id."""
    return common.record_response(
        common.get_table(Dataset.REGIONS), region_id, "No region with the specified ID."
    )
