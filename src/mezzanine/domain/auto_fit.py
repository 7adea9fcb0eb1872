"""Railing auto-fit.

When stairs or gates take perimeter away, railings are trimmed so that the
ordered railing length never exceeds what is left. Trimming starts from the
most recently added railing and walks backward.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace

from .value_objects import Accessory, Railing

logger = logging.getLogger(__name__)

__all__ = ["AutoFitResult", "auto_fit", "shrink_railing"]

# Lengths are rounded to this many decimals before flooring so that
# 26.8 - 0.0000000001 still floors to 26.
_PRECISION = 6
MIN_SEGMENT_LENGTH = 1


def _floor(value: float) -> int:
    return math.floor(round(value, _PRECISION))


@dataclass(frozen=True)
class AutoFitResult:
    """Outcome of an auto-fit pass."""

    accessories: tuple[Accessory, ...]
    reduction: float = 0.0
    removed_ids: tuple[str, ...] = ()

    @property
    def changed(self) -> bool:
        return self.reduction > 0


def shrink_railing(railing: Railing, target_total: float) -> Railing | None:
    """Shrink ``railing`` to consume at most ``target_total`` metres.

    The segment length is reduced first, keeping the quantity. If that would
    push a unit below 1 m, the quantity is reduced instead and the segment
    length recomputed from the new quantity. Returns None when not even a
    single 1 m unit fits.
    """
    if round(target_total, _PRECISION) < MIN_SEGMENT_LENGTH:
        return None

    segment = _floor(target_total / railing.quantity)
    if segment >= MIN_SEGMENT_LENGTH:
        return replace(railing, segment_length=segment)

    quantity = max(1, _floor(target_total / railing.segment_length))
    segment = max(MIN_SEGMENT_LENGTH, _floor(target_total / quantity))
    return replace(railing, quantity=quantity, segment_length=segment)


def auto_fit(accessories: tuple[Accessory, ...], available: float) -> AutoFitResult:
    """Trim railings so their total length fits within ``available`` metres.

    Returns the accessories unchanged when everything already fits. Otherwise
    railings are visited newest first: a railing no longer than the remaining
    excess is removed outright, a longer one is shrunk just enough to absorb
    it. Stops as soon as the excess is gone.
    """
    requested = sum(a.total_length for a in accessories if isinstance(a, Railing))
    excess = round(requested - available, _PRECISION)
    if excess <= 0:
        return AutoFitResult(tuple(accessories))

    updated: list[Accessory | None] = list(accessories)
    removed: list[str] = []
    for index in range(len(updated) - 1, -1, -1):
        if excess <= 0:
            break
        railing = updated[index]
        if not isinstance(railing, Railing):
            continue

        full = railing.total_length
        if full <= excess:
            updated[index] = None
            removed.append(railing.id)
            excess = round(excess - full, _PRECISION)
            logger.debug(f"Auto-fit removed railing {railing.id} ({full} m)")
            continue

        shrunk = shrink_railing(railing, full - excess)
        if shrunk is None:
            updated[index] = None
            removed.append(railing.id)
            excess = 0.0
            logger.debug(f"Auto-fit removed railing {railing.id}, below 1 m")
            continue

        updated[index] = shrunk
        excess = 0.0
        logger.debug(
            f"Auto-fit shrank railing {railing.id} from "
            f"{railing.quantity} x {railing.segment_length} m to "
            f"{shrunk.quantity} x {shrunk.segment_length} m"
        )

    result = tuple(a for a in updated if a is not None)
    remaining = sum(a.total_length for a in result if isinstance(a, Railing))
    return AutoFitResult(
        accessories=result,
        reduction=round(requested - remaining, _PRECISION),
        removed_ids=tuple(removed),
    )
