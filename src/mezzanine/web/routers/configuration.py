"""Read-only evaluation endpoints: pricing, perimeter and placements."""

from dataclasses import asdict

from fastapi import APIRouter

from mezzanine.application import (
    compute_available_perimeter,
    compute_pricing,
    compute_railing_placements,
)
from mezzanine.application.config import config_to_domain
from mezzanine.domain import gate_occupancy, perimeter, stair_occupancy
from mezzanine.web.schemas import (
    ConfigurationRequest,
    PerimeterSchema,
    PlacementSchema,
    PricingSchema,
    RailingLayoutSchema,
)

router = APIRouter(tags=["configuration"])


@router.post("/pricing", response_model=PricingSchema)
async def pricing(request: ConfigurationRequest) -> PricingSchema:
    """Price breakdown for a configuration."""
    result = compute_pricing(config_to_domain(request.config))
    return PricingSchema(**asdict(result))


@router.post("/perimeter", response_model=PerimeterSchema)
async def perimeter_figures(request: ConfigurationRequest) -> PerimeterSchema:
    """Total and available perimeter with the occupancy behind it."""
    config = config_to_domain(request.config)
    return PerimeterSchema(
        perimeter=perimeter(config.length, config.width, config.has_corner_stair),
        available=compute_available_perimeter(config),
        stair_occupancy=stair_occupancy(config.accessories),
        gate_occupancy=gate_occupancy(config.accessories),
        railing_length=config.total_railing_length,
    )


@router.post("/placements", response_model=RailingLayoutSchema)
async def placements(request: ConfigurationRequest) -> RailingLayoutSchema:
    """Railing segments around the perimeter."""
    layout = compute_railing_placements(config_to_domain(request.config))
    return RailingLayoutSchema(
        placements=[
            PlacementSchema(edge=p.edge_id.value, center=p.center, length=p.length)
            for p in layout.placements
        ],
        requested=layout.requested,
        placed=layout.placed,
        placeable=layout.placeable,
        capped=layout.capped,
        complete=layout.complete,
    )
