"""Stockboard: quote caching and portfolio aggregation backend."""

__version__ = "0.1.0"
