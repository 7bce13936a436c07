"""Source ingestion.

This module fetches raw feeds, parses their wire formats, and caches
parsed datasets for the report layer.
"""
