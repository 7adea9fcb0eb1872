"""Application layer - caller-facing operations and configuration records."""

from .commands import (
    AccessoryNotFoundError,
    AccessoryRejectedError,
    MutationResult,
    RejectionCode,
    apply_accessory_add,
    apply_accessory_remove,
    apply_accessory_update,
    apply_dimensions_update,
    compute_available_perimeter,
    compute_pricing,
    compute_railing_placements,
)

__all__ = [
    "AccessoryNotFoundError",
    "AccessoryRejectedError",
    "MutationResult",
    "RejectionCode",
    "apply_accessory_add",
    "apply_accessory_remove",
    "apply_accessory_update",
    "apply_dimensions_update",
    "compute_available_perimeter",
    "compute_pricing",
    "compute_railing_placements",
]
