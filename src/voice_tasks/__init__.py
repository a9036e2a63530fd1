"""Keyword-based task extraction for transcript-processing pipelines."""

__version__ = "0.1.0"
