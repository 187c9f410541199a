"""Prefix-based category suggestions with year-relevance filtering."""

__version__ = "0.1.0"
