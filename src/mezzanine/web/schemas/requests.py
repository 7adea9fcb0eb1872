"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from mezzanine.application.config import MezzanineConfiguration
from mezzanine.domain import AccessoryKind


class ConfigurationRequest(BaseModel):
    """Request carrying a configuration to evaluate."""

    config: MezzanineConfiguration = Field(..., description="Configuration record")


class AccessoryAddRequest(BaseModel):
    """Request for adding an accessory."""

    config: MezzanineConfiguration = Field(..., description="Configuration record")
    kind: AccessoryKind = Field(..., description="Accessory kind")
    params: dict[str, Any] = Field(
        default_factory=dict,
        description="id, quantity and variant / segment_length / opening_width",
    )


class AccessoryUpdateRequest(BaseModel):
    """Request for changing an accessory."""

    config: MezzanineConfiguration = Field(..., description="Configuration record")
    patch: dict[str, Any] = Field(..., min_length=1, description="Fields to change")


class DimensionsUpdateRequest(BaseModel):
    """Request for resizing the platform or changing its load class."""

    config: MezzanineConfiguration = Field(..., description="Configuration record")
    length: int | None = Field(default=None, gt=0, description="Length in mm")
    width: int | None = Field(default=None, gt=0, description="Depth in mm")
    height: int | None = Field(default=None, gt=0, description="Height in mm")
    load_class: int | None = Field(default=None, description="Load class in kg/m²")
