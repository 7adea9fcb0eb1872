"""Caller-facing operations on a mezzanine configuration.

Every mutation takes a ``Configuration`` and returns a new one wrapped in a
``MutationResult``; the input is never modified. Railings are reconciled with
the available perimeter before the result is returned, so a mutation either
applies completely or raises ``AccessoryRejectedError`` and leaves the caller's
configuration as it was.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Mapping

from pydantic import ValidationError as PydanticValidationError

from mezzanine.application.config.schema import (
    PalletGateConfig,
    RailingConfig,
    StairConfig,
)
from mezzanine.domain import (
    Accessory,
    AccessoryKind,
    Configuration,
    LoadClass,
    PalletGate,
    Pricing,
    PricingEngine,
    Railing,
    RailingLayout,
    Stair,
    StairVariant,
    auto_fit,
    available_perimeter,
    new_accessory_id,
)
from mezzanine.domain import compute_railing_placements as _walk_railings

logger = logging.getLogger(__name__)

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


class RejectionCode:
    """Machine-readable reasons for a rejected mutation."""

    SECOND_CORNER_STAIR = "second_corner_stair"
    CORNER_STAIR_QUANTITY = "corner_stair_quantity"
    RAILING_EXCEEDS_PERIMETER = "railing_exceeds_perimeter"


class AccessoryRejectedError(Exception):
    """Raised when a mutation is refused and the configuration stays as it was.

    Attributes:
        reason: Human-readable explanation.
        code: One of the ``RejectionCode`` values.
        available: Available perimeter in metres, when relevant.
        requested: Requested railing metres, when relevant.
    """

    def __init__(
        self,
        reason: str,
        code: str,
        available: float | None = None,
        requested: float | None = None,
    ) -> None:
        self.reason = reason
        self.code = code
        self.available = available
        self.requested = requested
        super().__init__(reason)

    @property
    def deficit(self) -> float | None:
        """Metres by which the request exceeds the available perimeter."""
        if self.available is None or self.requested is None:
            return None
        return round(max(0.0, self.requested - self.available), 6)


class AccessoryNotFoundError(LookupError):
    """Raised when an accessory id is not part of the configuration."""

    def __init__(self, accessory_id: str) -> None:
        self.accessory_id = accessory_id
        super().__init__(f"No accessory with id '{accessory_id}'")


@dataclass(frozen=True)
class MutationResult:
    """A successfully applied mutation.

    Attributes:
        configuration: The new configuration.
        railing_reduction: Railing metres removed by auto-fit (0 if none).
        removed_railings: Ids of railings auto-fit dropped entirely.
    """

    configuration: Configuration
    railing_reduction: float = 0.0
    removed_railings: tuple[str, ...] = ()

    @property
    def note(self) -> str | None:
        """Informational message when railings were adjusted."""
        if self.railing_reduction <= 0:
            return None
        return (
            f"Railings reduced by {self.railing_reduction:g} m "
            f"to fit the available perimeter"
        )


_PATCHABLE_FIELDS: dict[type, frozenset[str]] = {
    Stair: frozenset({"variant", "quantity"}),
    Railing: frozenset({"segment_length", "quantity"}),
    PalletGate: frozenset({"opening_width", "quantity"}),
}

_RECORDS = {
    AccessoryKind.STAIR: StairConfig,
    AccessoryKind.RAILING: RailingConfig,
    AccessoryKind.PALLET_GATE: PalletGateConfig,
}


def _validated_fields(
    kind: AccessoryKind, accessory_id: str, values: Mapping[str, Any]
) -> dict[str, Any]:
    """Validate raw parameter values against the accessory record.

    Returns the given fields converted to their value-object types.

    Raises:
        ValueError: A value has the wrong type or lies outside its domain.
    """
    record_cls = _RECORDS[kind]
    try:
        record = record_cls.model_validate({"id": accessory_id, **values})
    except PydanticValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        raise ValueError(f"Invalid {kind.value} parameters: {problems}") from e
    return {name: getattr(record, name) for name in values}


def _reconcile(config: Configuration) -> MutationResult:
    available = available_perimeter(config)
    fit = auto_fit(config.accessories, available)
    if not fit.changed:
        return MutationResult(configuration=config)

    logger.debug(
        f"Auto-fit reduced railings by {fit.reduction} m "
        f"(available {available} m)"
    )
    return MutationResult(
        configuration=replace(config, accessories=fit.accessories),
        railing_reduction=fit.reduction,
        removed_railings=fit.removed_ids,
    )


def _reject_second_corner_stair() -> AccessoryRejectedError:
    return AccessoryRejectedError(
        "Only one corner stair is allowed per mezzanine",
        RejectionCode.SECOND_CORNER_STAIR,
    )


def _reject_corner_quantity() -> AccessoryRejectedError:
    return AccessoryRejectedError(
        "The corner stair quantity is fixed at 1",
        RejectionCode.CORNER_STAIR_QUANTITY,
    )


def compute_available_perimeter(config: Configuration) -> float:
    """Perimeter metres available for railings."""
    return available_perimeter(config)


def compute_pricing(config: Configuration) -> Pricing:
    """Price breakdown for ``config``."""
    return PricingEngine().calculate(config)


def compute_railing_placements(config: Configuration) -> RailingLayout:
    """Railing segments for the 3D preview."""
    return _walk_railings(config)


def apply_accessory_add(
    config: Configuration,
    kind: AccessoryKind | str,
    params: Mapping[str, Any] | None = None,
) -> MutationResult:
    """Append a new accessory and reconcile railings.

    Args:
        config: Current configuration.
        kind: ``stair``, ``railing`` or ``pallet_gate``.
        params: Optional fields for the new accessory (``id``, ``quantity``
            and one of ``variant``, ``segment_length``, ``opening_width``).
            Omitted fields take the accessory defaults.

    Returns:
        The new configuration. A new railing longer than the remaining
        perimeter is trimmed and the trim is reported on the result.

    Raises:
        AccessoryRejectedError: A second corner stair, or a corner stair
            with a quantity other than 1.
        ValueError: Unknown parameters or values outside their domain.
    """
    kind = AccessoryKind(kind)
    cls = {
        AccessoryKind.STAIR: Stair,
        AccessoryKind.RAILING: Railing,
        AccessoryKind.PALLET_GATE: PalletGate,
    }[kind]

    values = dict(params or {})
    accessory_id = values.pop("id", None) or new_accessory_id(kind)
    unknown = set(values) - _PATCHABLE_FIELDS[cls]
    if unknown:
        raise ValueError(f"Unknown {kind.value} parameters: {', '.join(sorted(unknown))}")
    values = _validated_fields(kind, accessory_id, values)
    if config.find(accessory_id) is not None:
        raise ValueError(f"Accessory id '{accessory_id}' is already in use")

    if kind is AccessoryKind.STAIR and values.get("variant", StairVariant.STRAIGHT_1M).is_corner:
        if config.has_corner_stair:
            raise _reject_second_corner_stair()
        if values.get("quantity", 1) != 1:
            raise _reject_corner_quantity()

    accessory: Accessory = cls(id=accessory_id, **values)
    logger.debug(f"Adding {kind.value} {accessory_id}")
    return _reconcile(replace(config, accessories=config.accessories + (accessory,)))


def _updated_stair(config: Configuration, stair: Stair, patch: Mapping[str, Any]) -> Stair:
    variant = patch.get("variant", stair.variant)
    quantity = patch.get("quantity", stair.quantity)
    if stair.is_corner and quantity != 1:
        raise _reject_corner_quantity()
    if variant.is_corner and not stair.is_corner:
        if config.has_corner_stair:
            raise _reject_second_corner_stair()
        if quantity != 1:
            raise _reject_corner_quantity()
    return replace(stair, variant=variant, quantity=quantity)


def _check_railing_fits(config: Configuration, old: Railing, new: Railing) -> None:
    available = available_perimeter(config)
    requested = config.total_railing_length - old.total_length + new.total_length
    if round(requested - available, 6) > 0:
        raise AccessoryRejectedError(
            f"Railings would need {requested:g} m but only {available:g} m "
            f"of perimeter is available",
            RejectionCode.RAILING_EXCEEDS_PERIMETER,
            available=available,
            requested=requested,
        )


def apply_accessory_update(
    config: Configuration,
    accessory_id: str,
    patch: Mapping[str, Any],
) -> MutationResult:
    """Change fields of an existing accessory.

    A railing edit that would push the total railing length past the available
    perimeter is rejected instead of auto-fitted. Stair and gate edits
    reconcile railings the same way an add does.

    Raises:
        AccessoryNotFoundError: ``accessory_id`` does not exist.
        AccessoryRejectedError: Corner stair rules or railing overflow.
        ValueError: Fields that do not belong to the accessory kind.
    """
    current = config.find(accessory_id)
    if current is None:
        raise AccessoryNotFoundError(accessory_id)

    unknown = set(patch) - _PATCHABLE_FIELDS[type(current)]
    if unknown:
        raise ValueError(
            f"Cannot update {', '.join(sorted(unknown))} on a {current.kind.value}"
        )
    values = _validated_fields(current.kind, accessory_id, patch)

    updated: Accessory
    if isinstance(current, Stair):
        updated = _updated_stair(config, current, values)
    elif isinstance(current, Railing):
        updated = replace(current, **values)
        _check_railing_fits(config, current, updated)
    else:
        updated = replace(current, **values)

    logger.debug(f"Updating {current.kind.value} {accessory_id}: {dict(patch)}")
    accessories = tuple(updated if a.id == accessory_id else a for a in config.accessories)
    return _reconcile(replace(config, accessories=accessories))


def apply_accessory_remove(config: Configuration, accessory_id: str) -> MutationResult:
    """Remove an accessory.

    Removing the corner stair also removes the extension, which can shrink the
    available perimeter, so railings are reconciled here as well.

    Raises:
        AccessoryNotFoundError: ``accessory_id`` does not exist.
    """
    if config.find(accessory_id) is None:
        raise AccessoryNotFoundError(accessory_id)
    logger.debug(f"Removing accessory {accessory_id}")
    accessories = tuple(a for a in config.accessories if a.id != accessory_id)
    return _reconcile(replace(config, accessories=accessories))


def apply_dimensions_update(
    config: Configuration,
    length: int | None = None,
    width: int | None = None,
    height: int | None = None,
    load_class: LoadClass | int | None = None,
) -> MutationResult:
    """Resize the platform or change its load class, then reconcile railings."""
    changes: dict[str, Any] = {}
    if length is not None:
        changes["length"] = int(length)
    if width is not None:
        changes["width"] = int(width)
    if height is not None:
        changes["height"] = int(height)
    if load_class is not None:
        changes["load_class"] = LoadClass(int(load_class))
    if not changes:
        return MutationResult(configuration=config)
    return _reconcile(replace(config, **changes))
