"""Value objects for mezzanine configurations.

Accessories form a tagged union (``Stair | Railing | PalletGate``) so that a
railing can never carry a stair variant and vice versa. Every object here is
immutable; mutations elsewhere produce new values with ``dataclasses.replace``.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum


class LoadClass(int, Enum):
    """Floor load rating in kg/m²."""

    KG_250 = 250
    KG_350 = 350
    KG_500 = 500


class AccessoryKind(str, Enum):
    """Discriminator for the accessory union."""

    STAIR = "stair"
    RAILING = "railing"
    PALLET_GATE = "pallet_gate"


class StairVariant(str, Enum):
    """Stair models offered for a mezzanine."""

    STRAIGHT_1M = "straight-1m"
    STRAIGHT_1_5M = "straight-1.5m"
    STRAIGHT_2M = "straight-2m"
    CORNER_1M = "corner-1m"
    CORNER_1_2M = "corner-1.2m"

    @property
    def is_corner(self) -> bool:
        """Corner stairs land on the extension platform."""
        return self.value.startswith("corner")


class GateWidth(int, Enum):
    """Nominal pallet gate opening width in millimetres."""

    MM_2000 = 2000
    MM_2500 = 2500
    MM_3000 = 3000

    @property
    def meters(self) -> float:
        return self.value / 1000


def new_accessory_id(kind: AccessoryKind) -> str:
    """Generate an accessory id such as ``railing-3f2a9c1d``."""
    return f"{kind.value}-{uuid.uuid4().hex[:8]}"


@dataclass(frozen=True)
class Stair:
    """A staircase giving access to the platform."""

    id: str
    variant: StairVariant = StairVariant.STRAIGHT_1M
    quantity: int = 1
    kind: AccessoryKind = field(default=AccessoryKind.STAIR, init=False)

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError("Quantity must be at least 1")
        if self.variant.is_corner and self.quantity != 1:
            raise ValueError("A corner stair always has quantity 1")

    @property
    def is_corner(self) -> bool:
        return self.variant.is_corner


@dataclass(frozen=True)
class Railing:
    """Perimeter railing ordered as ``quantity`` units of ``segment_length`` metres."""

    id: str
    segment_length: float = 10
    quantity: int = 1
    kind: AccessoryKind = field(default=AccessoryKind.RAILING, init=False)

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError("Quantity must be at least 1")
        if self.segment_length < 1:
            raise ValueError("Railing segment length must be at least 1 meter")

    @property
    def total_length(self) -> float:
        """Linear metres of railing this entry consumes."""
        return self.segment_length * self.quantity


@dataclass(frozen=True)
class PalletGate:
    """A pallet gate opening on the front edge."""

    id: str
    opening_width: GateWidth = GateWidth.MM_2000
    quantity: int = 1
    kind: AccessoryKind = field(default=AccessoryKind.PALLET_GATE, init=False)

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError("Quantity must be at least 1")


Accessory = Stair | Railing | PalletGate


@dataclass(frozen=True)
class Configuration:
    """Root aggregate describing one mezzanine and its accessories.

    Dimensions are integer millimetres. ``accessories`` keeps insertion order,
    which decides front-edge placement and auto-fit priority.
    """

    length: int
    width: int
    height: int
    load_class: LoadClass = LoadClass.KG_250
    accessories: tuple[Accessory, ...] = ()

    def __post_init__(self) -> None:
        if self.length <= 0 or self.width <= 0 or self.height <= 0:
            raise ValueError("All dimensions must be positive")
        if not isinstance(self.accessories, tuple):
            object.__setattr__(self, "accessories", tuple(self.accessories))
        ids = [a.id for a in self.accessories]
        if len(ids) != len(set(ids)):
            raise ValueError("Accessory ids must be unique")
        if sum(1 for a in self.stairs if a.is_corner) > 1:
            raise ValueError("At most one corner stair is allowed")

    @classmethod
    def default(cls) -> Configuration:
        """The starting platform: 9400 x 4000 x 3000 mm rated 250 kg/m²."""
        return cls(length=9400, width=4000, height=3000)

    @property
    def stairs(self) -> tuple[Stair, ...]:
        return tuple(a for a in self.accessories if isinstance(a, Stair))

    @property
    def railings(self) -> tuple[Railing, ...]:
        return tuple(a for a in self.accessories if isinstance(a, Railing))

    @property
    def pallet_gates(self) -> tuple[PalletGate, ...]:
        return tuple(a for a in self.accessories if isinstance(a, PalletGate))

    @property
    def corner_stair(self) -> Stair | None:
        return next((s for s in self.stairs if s.is_corner), None)

    @property
    def has_corner_stair(self) -> bool:
        return self.corner_stair is not None

    @property
    def total_railing_length(self) -> float:
        return sum(r.total_length for r in self.railings)

    def find(self, accessory_id: str) -> Accessory | None:
        """Return the accessory with ``accessory_id`` or None."""
        return next((a for a in self.accessories if a.id == accessory_id), None)
