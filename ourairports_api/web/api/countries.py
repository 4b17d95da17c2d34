#!/usr/bin/env python3

from fastapi import APIRouter, Query
from typing import Optional

from ...sources.datasets import Dataset
from . import common

router = APIRouter()


@router.get("")
async def get_countries(
    code: Optional[str] = Query(None, description="Filter by country code", max_length=3),
    continent: Optional[str] = Query(None, description="Filter by continent code (AF, AN, AS, EU, NA, OC, SA)", max_length=2),
):
    """List countries ascending by id, matching any given filter."""
    table = common.get_table(Dataset.COUNTRIES)
    return common.records_response(table.where_any(case_sensitive=False, code=code, continent=continent))


@router.get("/{country_id}")
async def get_country(country_id: int):
    """Get one country by id."""
    return common.record_response(
        common.get_table(Dataset.COUNTRIES), country_id, "No country with the specified ID."
    )
