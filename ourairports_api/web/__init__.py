"""Read-only HTTP JSON API over the OurAirports tables."""
