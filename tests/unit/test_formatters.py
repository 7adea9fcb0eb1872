"""Unit tests for the text formatters."""

from mezzanine.domain import (
    Configuration,
    EdgeId,
    GateWidth,
    PalletGate,
    Placement,
    PricingEngine,
    Railing,
    RailingLayout,
    Stair,
    StairVariant,
)
from mezzanine.infrastructure import (
    PlacementFormatter,
    PricingFormatter,
    SummaryFormatter,
    describe_accessory,
)


class TestDescribeAccessory:
    def test_straight_stair(self) -> None:
        text = describe_accessory(Stair(id="s", variant=StairVariant.STRAIGHT_2M), 3000)
        assert text == "Stairs 38° H3000xL3840xB1000mm (straight-2m)"

    def test_corner_stair(self) -> None:
        text = describe_accessory(Stair(id="c", variant=StairVariant.CORNER_1M), 2500)
        assert text == "Corner stairs corner-1m H2500mm with 3000x1400mm extension platform"

    def test_railing(self) -> None:
        text = describe_accessory(Railing(id="r", segment_length=2.5, quantity=4), 3000)
        assert text == "Railings H1100mm with kick plate, 4 x 2.5 meters"

    def test_pallet_gate(self) -> None:
        text = describe_accessory(PalletGate(id="g", opening_width=GateWidth.MM_3000), 3000)
        assert text == "Pallet gate with spring-loaded doors, 3000mm"


class TestSummaryFormatter:
    def test_empty_configuration(self, platform: Configuration) -> None:
        output = SummaryFormatter().format(platform, 26.8, 37.6)
        assert output.startswith("MEZZANINE")
        assert "9,400 mm" in output
        assert "26.8 m" in output
        assert "No accessories added" in output

    def test_lists_accessories_with_ids(self, busy_platform: Configuration) -> None:
        output = SummaryFormatter().format(busy_platform, 24.8, 37.6)
        assert "1x Stairs 38°" in output
        assert "[gate-1]" in output
        assert "No accessories added" not in output


class TestPricingFormatter:
    def test_amounts(self) -> None:
        config = Configuration(length=10000, width=5000, height=3000)
        output = PricingFormatter().format(PricingEngine().calculate(config))
        assert output.startswith("PRICING")
        assert "80,000 excl. VAT" in output
        assert "1,600 excl. VAT" in output


class TestPlacementFormatter:
    def test_no_placements(self) -> None:
        assert PlacementFormatter().format(RailingLayout()) == "No railings to place."

    def test_table(self) -> None:
        layout = RailingLayout(
            placements=(Placement(EdgeId.FRONT, 1.5, 3.0),),
            requested=3.0,
            placed=3.0,
            placeable=26.8,
        )
        output = PlacementFormatter().format(layout)
        assert "front" in output
        assert "1.50" in output
        assert "Warning" not in output

    def test_exhausted_warning(self) -> None:
        layout = RailingLayout(
            placements=(Placement(EdgeId.RIGHT, 0.5, 1.0),),
            requested=5.0,
            placed=1.0,
            placeable=20.0,
            exhausted=True,
        )
        assert "4.00 m not placed" in PlacementFormatter().format(layout)

    def test_capped_request(self) -> None:
        layout = RailingLayout(
            placements=(Placement(EdgeId.FRONT, 1.5, 3.0),),
            requested=32.0,
            placed=26.6,
            placeable=26.6,
        )
        output = PlacementFormatter().format(layout)
        assert "5.40 m of railing exceed the 26.60 m of placeable perimeter" in output
        assert "not placed" not in output

    def test_exhausted_after_capping_counts_only_placeable_metres(self) -> None:
        layout = RailingLayout(
            placements=(Placement(EdgeId.FRONT, 1.5, 3.0),),
            requested=40.0,
            placed=10.0,
            placeable=30.0,
            exhausted=True,
        )
        output = PlacementFormatter().format(layout)
        assert "20.00 m not placed" in output
        assert "30.00 m not placed" not in output
