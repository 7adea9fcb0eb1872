"""Conversion between configuration records and domain objects."""

from __future__ import annotations

from mezzanine.application.config.schema import (
    AccessoryConfig,
    MezzanineConfiguration,
    PalletGateConfig,
    RailingConfig,
    StairConfig,
)
from mezzanine.domain import Accessory, Configuration, PalletGate, Railing, Stair

__all__ = ["config_to_domain", "domain_to_config"]


def _accessory_to_domain(record: AccessoryConfig) -> Accessory:
    if isinstance(record, StairConfig):
        return Stair(id=record.id, variant=record.variant, quantity=record.quantity)
    if isinstance(record, RailingConfig):
        return Railing(
            id=record.id,
            segment_length=record.segment_length,
            quantity=record.quantity,
        )
    return PalletGate(
        id=record.id,
        opening_width=record.opening_width,
        quantity=record.quantity,
    )


def _accessory_to_config(accessory: Accessory) -> AccessoryConfig:
    if isinstance(accessory, Stair):
        return StairConfig(
            id=accessory.id, variant=accessory.variant, quantity=accessory.quantity
        )
    if isinstance(accessory, Railing):
        return RailingConfig(
            id=accessory.id,
            segment_length=accessory.segment_length,
            quantity=accessory.quantity,
        )
    return PalletGateConfig(
        id=accessory.id,
        opening_width=accessory.opening_width,
        quantity=accessory.quantity,
    )


def config_to_domain(config: MezzanineConfiguration) -> Configuration:
    """Build a domain ``Configuration`` from a validated record."""
    return Configuration(
        length=config.length,
        width=config.width,
        height=config.height,
        load_class=config.load_class,
        accessories=tuple(_accessory_to_domain(a) for a in config.accessories),
    )


def domain_to_config(configuration: Configuration) -> MezzanineConfiguration:
    """Build a record from a domain ``Configuration``."""
    return MezzanineConfiguration(
        length=configuration.length,
        width=configuration.width,
        height=configuration.height,
        load_class=configuration.load_class,
        accessories=[_accessory_to_config(a) for a in configuration.accessories],
    )
