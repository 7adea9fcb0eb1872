"""Text formatters for mezzanine summaries."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mezzanine.domain import (
    EXTENSION_DEPTH_MM,
    EXTENSION_WIDTH_MM,
    PalletGate,
    Railing,
    Stair,
)

if TYPE_CHECKING:
    from mezzanine.domain import Accessory, Configuration, Pricing, RailingLayout


def _whole(value: float) -> str:
    return f"{value:,.0f}"


def describe_accessory(accessory: Accessory, height: int) -> str:
    """One-line catalogue description of an accessory."""
    if isinstance(accessory, Stair):
        if accessory.is_corner:
            return (
                f"Corner stairs {accessory.variant.value} H{height}mm with "
                f"{EXTENSION_WIDTH_MM}x{EXTENSION_DEPTH_MM}mm extension platform"
            )
        return f"Stairs 38° H{height}xL3840xB1000mm ({accessory.variant.value})"
    if isinstance(accessory, Railing):
        return (
            f"Railings H1100mm with kick plate, "
            f"{accessory.quantity} x {accessory.segment_length:g} meters"
        )
    if isinstance(accessory, PalletGate):
        return f"Pallet gate with spring-loaded doors, {accessory.opening_width.value}mm"
    return ""


class SummaryFormatter:
    """Formats dimensions and accessories for display."""

    def format(self, config: Configuration, available_perimeter: float, area: float) -> str:
        lines = [
            "MEZZANINE",
            "=" * 60,
            f"{'Length:':<24}{_whole(config.length)} mm",
            f"{'Depth:':<24}{_whole(config.width)} mm",
            f"{'Height (top floor):':<24}{_whole(config.height)} mm",
            f"{'Load:':<24}{config.load_class.value} kg/m²",
            f"{'Square meter:':<24}{area:,.1f} m²",
            f"{'Free perimeter:':<24}{available_perimeter:,.1f} m",
            "",
            "ACCESSORIES",
            "-" * 60,
        ]
        if not config.accessories:
            lines.append("No accessories added")
        for accessory in config.accessories:
            lines.append(
                f"{accessory.quantity}x {describe_accessory(accessory, config.height)}"
                f"  [{accessory.id}]"
            )
        return "\n".join(lines)


class PricingFormatter:
    """Formats a price breakdown. Amounts exclude VAT."""

    def format(self, pricing: Pricing) -> str:
        rows = [
            ("Base price", _whole(pricing.base_price)),
            ("Dimension price", _whole(pricing.dimension_price)),
            ("Load price", _whole(pricing.load_price)),
            ("Accessories price", _whole(pricing.accessories_price)),
            ("Total price", f"{_whole(pricing.total_price)} excl. VAT"),
            ("Price per m²", f"{_whole(pricing.price_per_square_meter)} excl. VAT"),
            ("Leasing 3 years", f"{_whole(pricing.leasing_3_years)} / month"),
            ("Leasing 5 years", f"{_whole(pricing.leasing_5_years)} / month"),
        ]
        lines = ["PRICING", "=" * 60]
        lines += [f"{label + ':':<24}{value}" for label, value in rows]
        return "\n".join(lines)


class PlacementFormatter:
    """Formats railing placements as a table."""

    def format(self, layout: RailingLayout) -> str:
        if not layout.placements:
            return "No railings to place."

        lines = [
            "RAILING PLACEMENTS",
            "=" * 60,
            f"{'Edge':<20} {'Center (m)':<12} {'Length (m)':<12}",
            "-" * 60,
        ]
        for placement in layout.placements:
            lines.append(
                f"{placement.edge_id.value:<20} {placement.center:<12.2f} "
                f"{placement.length:<12.2f}"
            )
        lines.append("-" * 60)
        lines.append(f"{'TOTAL':<20} {'':<12} {layout.placed:<12.2f}")
        if layout.capped:
            lines.append(
                f"Warning: {layout.requested - layout.placeable:.2f} m of railing "
                f"exceed the {layout.placeable:.2f} m of placeable perimeter"
            )
        if layout.exhausted:
            lines.append(
                f"Warning: placement stopped early, "
                f"{layout.target - layout.placed:.2f} m not placed"
            )
        return "\n".join(lines)
