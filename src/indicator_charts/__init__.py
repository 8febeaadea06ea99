"""Responsive multi-series economic indicator charts."""

__version__ = "0.1.0"
