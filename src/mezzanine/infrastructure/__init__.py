"""Infrastructure layer - output formatting."""

from .formatters import (
    PlacementFormatter,
    PricingFormatter,
    SummaryFormatter,
    describe_accessory,
)

__all__ = [
    "PlacementFormatter",
    "PricingFormatter",
    "SummaryFormatter",
    "describe_accessory",
]
