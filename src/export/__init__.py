"""CSV serialization and export.

This module turns report rows into escaped CSV text and local files.
It performs no aggregation of its own.
"""
