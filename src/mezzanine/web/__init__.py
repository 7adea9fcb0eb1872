"""REST API for the mezzanine configurator."""

from mezzanine.web.app import create_app

__all__ = ["create_app"]
