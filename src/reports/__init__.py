"""Dashboard report builders.

This module turns parsed feeds into view models and CSV export rows
for the immigration, mobility, and analytics dashboards.
"""
