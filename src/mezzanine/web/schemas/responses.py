"""Pydantic response schemas for the REST API."""

from pydantic import BaseModel, Field

from mezzanine.application.config import MezzanineConfiguration


class MutationResponseSchema(BaseModel):
    """Response for a successful mutation."""

    config: MezzanineConfiguration = Field(..., description="Updated configuration")
    note: str | None = Field(default=None, description="Informational note")
    railing_reduction: float = Field(default=0.0, description="Railing meters trimmed")
    removed_railings: list[str] = Field(
        default_factory=list, description="Railings removed by auto-fit"
    )


class PricingSchema(BaseModel):
    """Price breakdown, excluding VAT."""

    base_price: float
    dimension_price: float
    load_price: float
    accessories_price: float
    total_price: float
    price_per_square_meter: float
    square_meters: float
    leasing_3_years: float = Field(..., description="Monthly amount over 36 months")
    leasing_5_years: float = Field(..., description="Monthly amount over 60 months")


class PerimeterSchema(BaseModel):
    """Perimeter figures in meters."""

    perimeter: float
    available: float
    stair_occupancy: float
    gate_occupancy: float
    railing_length: float


class PlacementSchema(BaseModel):
    """A single railing segment."""

    edge: str = Field(..., description="Edge id")
    center: float = Field(..., description="Center along the edge in meters")
    length: float = Field(..., description="Segment length in meters")


class RailingLayoutSchema(BaseModel):
    """Railing placements for the 3D preview."""

    placements: list[PlacementSchema] = Field(default_factory=list)
    requested: float
    placed: float
    placeable: float = Field(..., description="Perimeter meters that can hold railings")
    capped: bool = Field(..., description="More railing requested than placeable")
    complete: bool = Field(..., description="Every requested meter was placed")
