#!/usr/bin/env python3

"""
Configuration for the OurAirports API server, read from the environment.
"""

import os
from typing import Optional

from ..sources import DatasetSource, LocalFileSource, OurAirportsSource

# Data source Configuration
OURAIRPORTS_BASE_URL = os.getenv("OURAIRPORTS_BASE_URL", OurAirportsSource.BASE_URL)
OURAIRPORTS_TIMEOUT = float(os.getenv("OURAIRPORTS_TIMEOUT", str(OurAirportsSource.DEFAULT_TIMEOUT)))
OURAIRPORTS_DATA_DIR: Optional[str] = os.getenv("OURAIRPORTS_DATA_DIR") or None

# Server Configuration
HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "8080"))

# CORS Configuration
ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "ALLOWED_ORIGINS",
        "http://localhost:3000,http://localhost:8080,http://127.0.0.1:8080",
    ).split(",")
    if origin.strip()
]

# Responses smaller than this are not compressed
GZIP_MINIMUM_SIZE = 1000

# Security Headers
SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}

# Logging Configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def build_source() -> DatasetSource:
    """Create the dataset source described by the environment."""
    if OURAIRPORTS_DATA_DIR:
        return LocalFileSource(OURAIRPORTS_DATA_DIR)
    return OurAirportsSource(timeout=OURAIRPORTS_TIMEOUT, base_url=OURAIRPORTS_BASE_URL)
