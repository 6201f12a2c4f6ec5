"""Aggregation module for catalogue reports.

- Reads winners from the catalogue and produces producer interval reports
- Forbidden: catalogue mutation, database access
"""
