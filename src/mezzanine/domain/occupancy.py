"""Perimeter occupancy of stairs and pallet gates.

Occupancy is always derived from the current accessory list; nothing here is
cached between calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .geometry import (
    EXTENSION_DEPTH_MM,
    EXTENSION_WIDTH_MM,
    STAIR_WIDTH_MM,
    mm_to_m,
    perimeter_mm,
)
from .value_objects import Accessory, Configuration, PalletGate, Stair

__all__ = [
    "ReservedRange",
    "available_perimeter",
    "front_reserved_ranges",
    "gate_occupancy",
    "stair_occupancy",
]

# Clear gap between two neighbouring straight stairs.
STAIR_GAP_M = 1.0
# A gap next to a pallet gate is at least this wide.
MIN_GATE_GAP_M = 2.0


def _stair_occupancy_mm(accessories: Iterable[Accessory]) -> int:
    total = 0
    for accessory in accessories:
        if not isinstance(accessory, Stair):
            continue
        total += accessory.quantity * STAIR_WIDTH_MM
        if accessory.is_corner:
            # The corner stair footprint straddles the extension's side edge.
            total += EXTENSION_DEPTH_MM
    return total


def _gate_occupancy_mm(accessories: Iterable[Accessory]) -> int:
    return sum(
        a.quantity * a.opening_width.value
        for a in accessories
        if isinstance(a, PalletGate)
    )


def stair_occupancy(accessories: Iterable[Accessory]) -> float:
    """Perimeter metres consumed by stairs.

    Each straight stair unit takes one stair width (1.0 m). A corner stair
    takes its stair width plus the extension depth edge (1.4 m).
    """
    return mm_to_m(_stair_occupancy_mm(accessories))


def gate_occupancy(accessories: Iterable[Accessory]) -> float:
    """Perimeter metres consumed by pallet gate openings."""
    return mm_to_m(_gate_occupancy_mm(accessories))


def available_perimeter(config: Configuration) -> float:
    """Perimeter metres left over for railings.

    Without a corner stair this is the perimeter minus stair and gate
    occupancy, floored at zero. With a corner stair the occupancy is already
    part of the extension geometry, so the full perimeter is used, rounded
    down to whole metres.
    """
    total_mm = perimeter_mm(config.length, config.width, config.has_corner_stair)
    if config.has_corner_stair:
        return float(total_mm // 1000)
    accessories = config.accessories
    free_mm = total_mm - _stair_occupancy_mm(accessories) - _gate_occupancy_mm(accessories)
    return mm_to_m(max(0, free_mm))


@dataclass(frozen=True)
class ReservedRange:
    """A stretch of the front edge taken by a stair or gate, in metres from
    the front-left corner."""

    start: float
    end: float
    accessory_id: str

    @property
    def length(self) -> float:
        return self.end - self.start

    def contains(self, position: float) -> bool:
        return self.start <= position < self.end


def _front_items(config: Configuration) -> list[tuple[str, float, bool]]:
    """(accessory id, width in m, is_gate) for every unit on the front edge."""
    items: list[tuple[str, float, bool]] = []
    for stair in config.stairs:
        if stair.is_corner:
            continue
        items += [(stair.id, mm_to_m(STAIR_WIDTH_MM), False)] * stair.quantity
    for gate in config.pallet_gates:
        items += [(gate.id, gate.opening_width.meters, True)] * gate.quantity
    return items


def _gap(previous: tuple[str, float, bool], current: tuple[str, float, bool]) -> float:
    if previous[2] or current[2]:
        return max(max(previous[1], current[1]) + 1, MIN_GATE_GAP_M)
    return STAIR_GAP_M


def front_reserved_ranges(config: Configuration) -> list[ReservedRange]:
    """Lay straight stairs then pallet gates out along the front edge.

    The units form one group centred on the usable front span (the whole edge,
    or the part right of the extension). Ranges are clipped to that span and
    returned left to right.

    Examples:
        A single straight stair on a 9.4 m front edge occupies 4.2 m to 5.2 m.
    """
    items = _front_items(config)
    if not items:
        return []

    length_m = mm_to_m(config.length)
    span_start = min(mm_to_m(EXTENSION_WIDTH_MM), length_m) if config.has_corner_stair else 0.0
    span_center = (span_start + length_m) / 2

    group_width = sum(width for _, width, _ in items)
    group_width += sum(_gap(items[i - 1], items[i]) for i in range(1, len(items)))

    ranges: list[ReservedRange] = []
    cursor = span_center - group_width / 2
    for index, item in enumerate(items):
        if index > 0:
            cursor += _gap(items[index - 1], item)
        start, end = cursor, cursor + item[1]
        cursor = end
        clipped_start = max(start, span_start)
        clipped_end = min(end, length_m)
        if clipped_end > clipped_start:
            ranges.append(ReservedRange(clipped_start, clipped_end, item[0]))
    return ranges
