"""Catalogue module.

- store: immutable in-memory snapshot with filter/paginate queries
- listing: page payloads for the API
- loader: CSV movie list parsing
- bootstrap: startup seeding through the database
"""
