"""Pydantic models for the persisted configuration record.

The record is the plain structure an external store keeps for a
configuration. Accessories are a discriminated union on ``kind``.

Example record::

    {
        "length": 9400,
        "width": 4000,
        "height": 3000,
        "load_class": 250,
        "accessories": [
            {"kind": "stair", "id": "stair-1", "variant": "straight-1m", "quantity": 1},
            {"kind": "railing", "id": "railing-1", "segment_length": 10, "quantity": 2},
            {"kind": "pallet_gate", "id": "gate-1", "opening_width": 2000, "quantity": 1}
        ]
    }

Records written by the browser configurator use camelCase names
(``loadClass``, ``segmentLengthMeters``, ``openingWidth`` and the
``palletGate`` kind). Those are accepted as aliases; records are always
written back in snake_case.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from mezzanine.domain.value_objects import GateWidth, LoadClass, StairVariant


class StairConfig(BaseModel):
    """Stair accessory record.

    The corner stair quantity rule is checked on the whole record (see
    ``MezzanineConfiguration``) so this model can also validate partial
    updates.
    """

    model_config = ConfigDict(extra="forbid")

    kind: Literal["stair"] = "stair"
    id: str = Field(..., min_length=1)
    variant: StairVariant = StairVariant.STRAIGHT_1M
    quantity: int = Field(default=1, ge=1)


class RailingConfig(BaseModel):
    """Railing accessory record. ``segment_length`` is in metres."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    kind: Literal["railing"] = "railing"
    id: str = Field(..., min_length=1)
    segment_length: float = Field(default=10, ge=1, validation_alias="segmentLengthMeters")
    quantity: int = Field(default=1, ge=1)


class PalletGateConfig(BaseModel):
    """Pallet gate accessory record. ``opening_width`` is in millimetres."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    kind: Literal["pallet_gate", "palletGate"] = "pallet_gate"
    id: str = Field(..., min_length=1)
    opening_width: GateWidth = Field(default=GateWidth.MM_2000, validation_alias="openingWidth")
    quantity: int = Field(default=1, ge=1)

    @field_validator("kind")
    @classmethod
    def normalize_kind(cls, v: str) -> str:
        return "pallet_gate"


AccessoryConfig = Annotated[
    StairConfig | RailingConfig | PalletGateConfig,
    Field(discriminator="kind"),
]


class MezzanineConfiguration(BaseModel):
    """Root configuration record.

    Attributes:
        length: Platform length in mm (front and back edges).
        width: Platform depth in mm (left and right edges).
        height: Floor height in mm.
        load_class: Rated load in kg/m².
        accessories: Accessories in insertion order.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    length: int = Field(default=9400, gt=0)
    width: int = Field(default=4000, gt=0)
    height: int = Field(default=3000, gt=0)
    load_class: LoadClass = Field(default=LoadClass.KG_250, validation_alias="loadClass")
    accessories: list[AccessoryConfig] = Field(default_factory=list)

    @field_validator("accessories")
    @classmethod
    def validate_unique_ids(cls, v: list[AccessoryConfig]) -> list[AccessoryConfig]:
        """Accessory ids must be unique."""
        ids = [a.id for a in v]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"Duplicate accessory ids: {', '.join(duplicates)}")
        return v

    @model_validator(mode="after")
    def validate_corner_stair(self) -> "MezzanineConfiguration":
        """At most one corner stair, always with quantity 1."""
        corners = [
            a for a in self.accessories
            if isinstance(a, StairConfig) and a.variant.is_corner
        ]
        if len(corners) > 1:
            raise ValueError("At most one corner stair is allowed")
        if corners and corners[0].quantity != 1:
            raise ValueError("A corner stair always has quantity 1")
        return self
