"""Railing placement along the platform perimeter.

A single cursor walks the ordered edge list, dropping railing chunks of at
most ``MAX_CHUNK_LENGTH`` metres. The reserved extension edge is skipped as a
whole and stair/gate ranges on the front edge are jumped over, so no chunk
ever overlaps them. The walk is bounded by ``MAX_WALK_ITERATIONS``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .geometry import Edge, EdgeId, perimeter_edges
from .occupancy import ReservedRange, front_reserved_ranges
from .value_objects import Configuration

logger = logging.getLogger(__name__)

__all__ = [
    "MAX_CHUNK_LENGTH",
    "MAX_WALK_ITERATIONS",
    "Placement",
    "RailingLayout",
    "compute_railing_placements",
    "placeable_length",
    "walk_perimeter",
]

MAX_CHUNK_LENGTH = 3.0
MAX_WALK_ITERATIONS = 1000

_EPSILON = 1e-9


@dataclass(frozen=True)
class Placement:
    """One railing segment to render.

    Attributes:
        edge_id: Side the segment runs along.
        center: Centre of the segment, in metres from the start corner of
            that side.
        length: Segment length in metres.
    """

    edge_id: EdgeId
    center: float
    length: float

    @property
    def start(self) -> float:
        return self.center - self.length / 2

    @property
    def end(self) -> float:
        return self.center + self.length / 2


@dataclass(frozen=True)
class RailingLayout:
    """Placements for all railings plus bookkeeping about the walk.

    Attributes:
        placements: Segments in walk order.
        requested: Total railing metres ordered.
        placed: Metres actually placed.
        placeable: Metres of perimeter a railing may occupy at all.
        exhausted: The iteration cap stopped the walk early.
    """

    placements: tuple[Placement, ...] = field(default_factory=tuple)
    requested: float = 0.0
    placed: float = 0.0
    placeable: float = 0.0
    exhausted: bool = False

    @property
    def target(self) -> float:
        """Metres the walk tries to place: the request, capped at ``placeable``."""
        return min(self.requested, self.placeable)

    @property
    def capped(self) -> bool:
        """True when more railing was requested than the perimeter can hold."""
        return self.requested > self.placeable + _EPSILON

    @property
    def complete(self) -> bool:
        """True when every requested metre was placed."""
        return not self.exhausted and self.placed >= self.requested - _EPSILON


def _merged(ranges: list[ReservedRange]) -> list[tuple[float, float]]:
    merged: list[tuple[float, float]] = []
    for rng in sorted(ranges, key=lambda r: r.start):
        if merged and rng.start <= merged[-1][1]:
            merged[-1] = (merged[-1][0], max(merged[-1][1], rng.end))
        else:
            merged.append((rng.start, rng.end))
    return merged


def placeable_length(edges: list[Edge], reserved: list[ReservedRange]) -> float:
    """Perimeter metres a railing may actually occupy."""
    total = sum(edge.length for edge in edges if not edge.reserved)
    return total - sum(end - start for start, end in _merged(reserved))


def _locate(edges: list[Edge], cursor: float) -> tuple[Edge, float, float]:
    """Return (edge, offset within edge, cursor position of edge start)."""
    start = 0.0
    for edge in edges:
        if cursor < start + edge.length - _EPSILON:
            return edge, cursor - start, start
        start += edge.length
    last = edges[-1]
    return last, last.length, start - last.length


def walk_perimeter(
    edges: list[Edge],
    reserved: list[ReservedRange],
    requested: float,
) -> RailingLayout:
    """Place ``requested`` metres of railing around ``edges``.

    Args:
        edges: Ordered perimeter runs, as returned by ``perimeter_edges``.
        reserved: Occupied stretches of the front edge, measured from the
            front-left corner.
        requested: Total railing length to place.

    Returns:
        The placements in walk order. A request longer than the placeable
        length is capped (``capped``) and ``exhausted`` is set when the
        iteration cap stopped the walk before the capped request was placed.
        Either way ``complete`` is False.
    """
    capacity = placeable_length(edges, reserved) if edges else 0.0
    if not edges or requested <= 0:
        return RailingLayout(requested=max(requested, 0.0), placeable=capacity)

    lap = sum(edge.length for edge in edges)
    remaining = min(requested, capacity)
    if requested > capacity + _EPSILON:
        logger.warning(
            f"Requested {requested:g} m of railing but only {capacity:g} m "
            f"of perimeter can hold railings"
        )
    ranges = sorted(reserved, key=lambda r: r.start)

    placements: list[Placement] = []
    cursor = 0.0
    iterations = 0
    exhausted = False

    while remaining > _EPSILON:
        if iterations >= MAX_WALK_ITERATIONS:
            exhausted = True
            break
        iterations += 1

        edge, offset, edge_start = _locate(edges, cursor)
        space = edge.length - offset

        if edge.reserved or space <= _EPSILON:
            cursor = edge_start + edge.length
        else:
            limit = space
            position = edge.offset + offset
            blocked = None
            if edge.edge_id is EdgeId.FRONT:
                blocked = next(
                    (r for r in ranges if r.contains(position + _EPSILON)), None
                )
                upcoming = [r.start for r in ranges if r.start > position + _EPSILON]
                if upcoming:
                    limit = min(limit, upcoming[0] - position)

            if blocked is not None:
                cursor += blocked.end - position
            else:
                chunk = min(remaining, limit, MAX_CHUNK_LENGTH)
                placements.append(Placement(edge.edge_id, position + chunk / 2, chunk))
                cursor += chunk
                remaining -= chunk

        if cursor >= lap - _EPSILON:
            cursor = 0.0

    if exhausted:
        logger.warning(
            f"Railing placement stopped after {MAX_WALK_ITERATIONS} iterations "
            f"with {remaining:.2f} m unplaced"
        )

    placed = sum(p.length for p in placements)
    return RailingLayout(
        placements=tuple(placements),
        requested=requested,
        placed=placed,
        placeable=capacity,
        exhausted=exhausted,
    )


def compute_railing_placements(config: Configuration) -> RailingLayout:
    """Lay out every railing of ``config`` as one continuous run."""
    edges = perimeter_edges(config.length, config.width, config.has_corner_stair)
    reserved = front_reserved_ranges(config)
    return walk_perimeter(edges, reserved, config.total_railing_length)
