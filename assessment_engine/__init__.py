"""Founder assessment engines."""

__version__ = "1.0.0"
