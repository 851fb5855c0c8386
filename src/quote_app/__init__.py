"""Quoting engine for IT/telecom sales, rentals and service contracts."""

__version__ = "0.1.0"
