"""Whisk -- interactive Go project creator."""

__version__ = "0.1.0"
