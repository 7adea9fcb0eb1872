"""Domain layer - geometry, occupancy, railing fit and pricing."""

from .auto_fit import AutoFitResult, auto_fit, shrink_railing
from .geometry import (
    EXTENSION_AREA_M2,
    EXTENSION_DEPTH_MM,
    EXTENSION_PERIMETER_GAIN_MM,
    EXTENSION_WIDTH_MM,
    STAIR_WIDTH_MM,
    Edge,
    EdgeId,
    floor_area,
    perimeter,
    perimeter_edges,
)
from .occupancy import (
    ReservedRange,
    available_perimeter,
    front_reserved_ranges,
    gate_occupancy,
    stair_occupancy,
)
from .perimeter_walker import (
    MAX_CHUNK_LENGTH,
    MAX_WALK_ITERATIONS,
    Placement,
    RailingLayout,
    compute_railing_placements,
    walk_perimeter,
)
from .pricing import Pricing, PricingEngine
from .value_objects import (
    Accessory,
    AccessoryKind,
    Configuration,
    GateWidth,
    LoadClass,
    PalletGate,
    Railing,
    Stair,
    StairVariant,
    new_accessory_id,
)

__all__ = [
    "Accessory",
    "AccessoryKind",
    "AutoFitResult",
    "Configuration",
    "EXTENSION_AREA_M2",
    "EXTENSION_DEPTH_MM",
    "EXTENSION_PERIMETER_GAIN_MM",
    "EXTENSION_WIDTH_MM",
    "Edge",
    "EdgeId",
    "GateWidth",
    "LoadClass",
    "MAX_CHUNK_LENGTH",
    "MAX_WALK_ITERATIONS",
    "PalletGate",
    "Placement",
    "Pricing",
    "PricingEngine",
    "RailingLayout",
    "Railing",
    "ReservedRange",
    "STAIR_WIDTH_MM",
    "Stair",
    "StairVariant",
    "auto_fit",
    "available_perimeter",
    "compute_railing_placements",
    "floor_area",
    "front_reserved_ranges",
    "gate_occupancy",
    "new_accessory_id",
    "perimeter",
    "perimeter_edges",
    "shrink_railing",
    "stair_occupancy",
    "walk_perimeter",
]
