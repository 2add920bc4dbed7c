"""Badger sett account valuation."""

__version__ = "0.1.0"
