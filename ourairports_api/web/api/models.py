#!/usr/bin/env python3

"""
Pydantic models for API responses that are not records.

Record bodies are produced by ``Record.to_dict`` so that their keys follow
the CSV column names exactly.
"""

from typing import Dict

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body of a 4xx/5xx response."""

    error: str


class HealthResponse(BaseModel):
    """Pydantic model for the health check response."""

    status: str
    loaded_at: str
    counts: Dict[str, int]
