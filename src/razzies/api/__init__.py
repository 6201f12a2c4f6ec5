"""API module for Razzies.

API layer:
- Validates query parameters, reads the catalogue
- Returns JSON payloads
- Forbidden: CSV parsing, interval computation
"""
