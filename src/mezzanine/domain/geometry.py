"""Perimeter geometry for the platform and its corner extension.

The extension is a fixed 3.0 m x 1.4 m platform that exists only while a
corner stair is configured. It sits at the left end of the front edge. All
derived figures (perimeter gain, area) come from the two declared dimensions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "EXTENSION_AREA_M2",
    "EXTENSION_DEPTH_MM",
    "EXTENSION_PERIMETER_GAIN_MM",
    "EXTENSION_WIDTH_MM",
    "Edge",
    "EdgeId",
    "STAIR_WIDTH_MM",
    "floor_area",
    "mm_to_m",
    "perimeter",
    "perimeter_edges",
    "perimeter_mm",
]

EXTENSION_WIDTH_MM = 3000  # along the front edge
EXTENSION_DEPTH_MM = 1400  # outward from the front edge
STAIR_WIDTH_MM = 1000

# Both side edges plus the outward front edge. The replaced stretch of the
# platform's own front edge is not subtracted.
EXTENSION_PERIMETER_GAIN_MM = 2 * EXTENSION_DEPTH_MM + EXTENSION_WIDTH_MM
EXTENSION_AREA_M2 = (EXTENSION_WIDTH_MM * EXTENSION_DEPTH_MM) / 1_000_000


def mm_to_m(value: float) -> float:
    """Convert millimetres to metres."""
    return value / 1000


def perimeter_mm(length: int, width: int, has_corner_stair: bool) -> int:
    """Perimeter in millimetres, including the extension gain when present."""
    base = 2 * (length + width)
    if has_corner_stair:
        base += EXTENSION_PERIMETER_GAIN_MM
    return base


def perimeter(length: int, width: int, has_corner_stair: bool) -> float:
    """Perimeter in metres for a ``length`` x ``width`` mm platform.

    Examples:
        >>> perimeter(9400, 4000, False)
        26.8
        >>> perimeter(9400, 4000, True)
        32.6
    """
    return mm_to_m(perimeter_mm(length, width, has_corner_stair))


def floor_area(length: int, width: int, has_corner_stair: bool) -> float:
    """Floor area in m², adding the extension platform when present."""
    area = (length * width) / 1_000_000
    if has_corner_stair:
        area += EXTENSION_AREA_M2
    return area


class EdgeId(str, Enum):
    """Identifiers of the edges walked when laying out railings."""

    EXTENSION_LEFT = "extension_left"
    EXTENSION_FRONT = "extension_front"
    EXTENSION_RIGHT = "extension_right"
    FRONT = "front"
    RIGHT = "right"
    BACK = "back"
    LEFT = "left"


@dataclass(frozen=True)
class Edge:
    """One straight run of the walkable perimeter, in metres.

    Attributes:
        edge_id: Which side this is.
        length: Walkable length of the run.
        offset: Where the run starts along its physical side. Only the front
            remainder has a non-zero offset (it begins where the extension ends).
        reserved: True when no railing may ever be placed on the run.
    """

    edge_id: EdgeId
    length: float
    offset: float = 0.0
    reserved: bool = False


def perimeter_edges(length: int, width: int, has_corner_stair: bool) -> list[Edge]:
    """Ordered edges for one lap around the platform.

    With a corner stair the lap starts on the extension (left, outward front,
    right), then continues along the front remainder, right, back and left
    edges. Zero-length runs are dropped.
    """
    length_m = mm_to_m(length)
    width_m = mm_to_m(width)
    edges: list[Edge] = []

    if has_corner_stair:
        ext_width = mm_to_m(EXTENSION_WIDTH_MM)
        ext_depth = mm_to_m(EXTENSION_DEPTH_MM)
        front_start = min(ext_width, length_m)
        edges += [
            Edge(EdgeId.EXTENSION_LEFT, ext_depth),
            Edge(EdgeId.EXTENSION_FRONT, ext_width, reserved=True),
            Edge(EdgeId.EXTENSION_RIGHT, ext_depth),
            Edge(EdgeId.FRONT, length_m - front_start, offset=front_start),
        ]
    else:
        edges.append(Edge(EdgeId.FRONT, length_m))

    edges += [
        Edge(EdgeId.RIGHT, width_m),
        Edge(EdgeId.BACK, length_m),
        Edge(EdgeId.LEFT, width_m),
    ]
    return [edge for edge in edges if edge.length > 0]
