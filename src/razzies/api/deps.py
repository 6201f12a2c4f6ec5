"""FastAPI dependencies shared by the app and its routers."""

from __future__ import annotations

from fastapi import Request

from razzies.catalogue.store import CatalogueStore


def get_catalogue(request: Request) -> CatalogueStore:
    """Dependency to get the application's catalogue.

    Returns:
        CatalogueStore created with the app.
    """
    return request.app.state.catalogue
