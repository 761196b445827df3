"""Helpers for game launch arguments, address ranges, rolling statistics, listeners and cleanup."""

__version__ = "0.1.0"