"""Request and response schemas for the REST API."""

from mezzanine.web.schemas.requests import (
    AccessoryAddRequest,
    AccessoryUpdateRequest,
    ConfigurationRequest,
    DimensionsUpdateRequest,
)
from mezzanine.web.schemas.responses import (
    MutationResponseSchema,
    PerimeterSchema,
    PlacementSchema,
    PricingSchema,
    RailingLayoutSchema,
)

__all__ = [
    "AccessoryAddRequest",
    "AccessoryUpdateRequest",
    "ConfigurationRequest",
    "DimensionsUpdateRequest",
    "MutationResponseSchema",
    "PerimeterSchema",
    "PlacementSchema",
    "PricingSchema",
    "RailingLayoutSchema",
]
