"""Key-hiding proxy for The Odds API."""

__version__ = "0.1.0"
