"""Unit tests for stair/gate occupancy and available perimeter."""

import math

import pytest

from mezzanine.domain import (
    Configuration,
    GateWidth,
    PalletGate,
    Railing,
    Stair,
    StairVariant,
    available_perimeter,
    front_reserved_ranges,
    gate_occupancy,
    stair_occupancy,
)


def _config(*accessories, length: int = 9400, width: int = 4000) -> Configuration:
    return Configuration(length=length, width=width, height=3000, accessories=accessories)


class TestStairOccupancy:
    """Tests for stair_occupancy()."""

    def test_straight_stairs_take_one_meter_each(self) -> None:
        assert stair_occupancy([Stair(id="a", quantity=3)]) == pytest.approx(3.0)

    def test_variant_does_not_change_width(self) -> None:
        stairs = [Stair(id="a", variant=StairVariant.STRAIGHT_2M)]
        assert stair_occupancy(stairs) == pytest.approx(1.0)

    def test_corner_stair_adds_extension_depth(self) -> None:
        stairs = [Stair(id="c", variant=StairVariant.CORNER_1M)]
        assert stair_occupancy(stairs) == pytest.approx(2.4)

    def test_other_accessories_ignored(self) -> None:
        assert stair_occupancy([Railing(id="r"), PalletGate(id="g")]) == 0


class TestGateOccupancy:
    """Tests for gate_occupancy()."""

    def test_nominal_width_per_unit(self) -> None:
        gates = [
            PalletGate(id="a", opening_width=GateWidth.MM_2500, quantity=2),
            PalletGate(id="b", opening_width=GateWidth.MM_3000),
        ]
        assert gate_occupancy(gates) == pytest.approx(8.0)


class TestAvailablePerimeter:
    """Tests for available_perimeter()."""

    def test_empty_platform(self) -> None:
        assert available_perimeter(_config()) == pytest.approx(26.8)

    def test_one_straight_stair(self) -> None:
        assert available_perimeter(_config(Stair(id="s"))) == pytest.approx(25.8)

    def test_stairs_and_gates(self) -> None:
        config = _config(
            Stair(id="s", quantity=2),
            PalletGate(id="g", opening_width=GateWidth.MM_2500, quantity=2),
        )
        assert available_perimeter(config) == pytest.approx(26.8 - 2 - 5)

    def test_floored_at_zero(self) -> None:
        config = _config(
            PalletGate(id="g", opening_width=GateWidth.MM_3000, quantity=3),
            length=2000,
            width=2000,
        )
        assert available_perimeter(config) == 0

    def test_railings_do_not_consume_perimeter(self) -> None:
        config = _config(Railing(id="r", segment_length=20))
        assert available_perimeter(config) == pytest.approx(26.8)

    def test_corner_stair_uses_full_perimeter_rounded_down(self) -> None:
        config = _config(Stair(id="c", variant=StairVariant.CORNER_1_2M))
        assert available_perimeter(config) == 32
        assert available_perimeter(config) == math.floor(2 * (9.4 + 4.0) + 5.8)

    def test_corner_stair_ignores_other_occupancy(self) -> None:
        config = _config(
            Stair(id="c", variant=StairVariant.CORNER_1M),
            Stair(id="s", quantity=2),
            PalletGate(id="g"),
        )
        assert available_perimeter(config) == 32

    @pytest.mark.parametrize(
        ("length", "width", "stairs", "gates"),
        [
            (2000, 2000, 1, 0),
            (9400, 4000, 3, 2),
            (20000, 20000, 5, 4),
            (12345, 6789, 0, 1),
        ],
    )
    def test_formula_without_corner_stair(
        self, length: int, width: int, stairs: int, gates: int
    ) -> None:
        accessories = []
        if stairs:
            accessories.append(Stair(id="s", quantity=stairs))
        if gates:
            accessories.append(PalletGate(id="g", quantity=gates))
        config = _config(*accessories, length=length, width=width)
        expected = max(0.0, 2 * (length + width) / 1000 - stairs * 1.0 - gates * 2.0)
        assert available_perimeter(config) == pytest.approx(expected)


class TestFrontReservedRanges:
    """Tests for the stair/gate layout on the front edge."""

    def test_no_front_accessories(self) -> None:
        assert front_reserved_ranges(_config(Railing(id="r"))) == []

    def test_single_stair_is_centred(self) -> None:
        (rng,) = front_reserved_ranges(_config(Stair(id="s")))
        assert rng.start == pytest.approx(4.2)
        assert rng.end == pytest.approx(5.2)
        assert rng.accessory_id == "s"

    def test_stairs_are_two_meters_apart(self) -> None:
        ranges = front_reserved_ranges(_config(Stair(id="s", quantity=2)))
        assert [(r.start, r.end) for r in ranges] == [
            pytest.approx((3.2, 4.2)),
            pytest.approx((5.2, 6.2)),
        ]

    def test_gates_follow_stairs_with_wider_gap(self) -> None:
        ranges = front_reserved_ranges(_config(PalletGate(id="g"), Stair(id="s")))
        assert [r.accessory_id for r in ranges] == ["s", "g"]
        assert (ranges[0].start, ranges[0].end) == pytest.approx((1.7, 2.7))
        assert (ranges[1].start, ranges[1].end) == pytest.approx((5.7, 7.7))

    def test_ranges_never_overlap(self) -> None:
        config = _config(
            Stair(id="s", quantity=2),
            PalletGate(id="g1", opening_width=GateWidth.MM_3000),
            PalletGate(id="g2", opening_width=GateWidth.MM_2500),
            length=20000,
        )
        ranges = front_reserved_ranges(config)
        for left, right in zip(ranges, ranges[1:]):
            assert left.end <= right.start

    def test_corner_stair_shifts_group_right_of_extension(self) -> None:
        config = _config(Stair(id="c", variant=StairVariant.CORNER_1M), Stair(id="s"))
        (rng,) = front_reserved_ranges(config)
        assert (rng.start, rng.end) == pytest.approx((5.7, 6.7))

    def test_ranges_clipped_to_edge(self) -> None:
        config = _config(Stair(id="s", quantity=3), length=2000)
        ranges = front_reserved_ranges(config)
        assert [(r.start, r.end) for r in ranges] == [pytest.approx((0.5, 1.5))]
