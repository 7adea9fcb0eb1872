"""API routers for the REST API."""

from mezzanine.web.routers.accessories import router as accessories_router
from mezzanine.web.routers.configuration import router as configuration_router

__all__ = ["accessories_router", "configuration_router"]
