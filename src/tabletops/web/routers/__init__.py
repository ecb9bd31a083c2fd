"""API routers for the REST API."""

from tabletops.web.routers.configurations import router as configurations_router
from tabletops.web.routers.outline import router as outline_router
from tabletops.web.routers.price import router as price_router

__all__ = [
    "configurations_router",
    "outline_router",
    "price_router",
]
