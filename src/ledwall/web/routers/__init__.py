"""API routers for the REST API."""

from ledwall.web.routers.calculate import router as calculate_router
from ledwall.web.routers.catalog import router as catalog_router

__all__ = [
    "calculate_router",
    "catalog_router",
]
