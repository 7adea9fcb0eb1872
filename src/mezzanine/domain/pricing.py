"""Price calculation for a mezzanine configuration."""

from __future__ import annotations

from dataclasses import dataclass

from .geometry import floor_area
from .value_objects import Configuration, LoadClass, PalletGate, Railing, Stair

__all__ = ["Pricing", "PricingEngine"]


@dataclass(frozen=True)
class Pricing:
    """Price breakdown. Currency amounts exclude VAT."""

    base_price: float
    dimension_price: float
    load_price: float
    accessories_price: float
    total_price: float
    price_per_square_meter: float
    square_meters: float
    leasing_3_years: float
    leasing_5_years: float


class PricingEngine:
    """Computes prices from platform size, load class and accessories.

    ``total = (base + dimension) * load_multiplier + accessories``, where the
    dimension price scales with the structure volume. Leasing figures are the
    monthly amounts over 36 and 60 months.
    """

    BASE_PRICE = 50_000
    PRICE_PER_SQUARE_METER_BASE = 2_000
    DIMENSION_MULTIPLIER = 0.001

    LOAD_MULTIPLIERS: dict[LoadClass, float] = {
        LoadClass.KG_250: 1.0,
        LoadClass.KG_350: 1.2,
        LoadClass.KG_500: 1.5,
    }

    STAIRS_PRICE = 15_000
    CORNER_STAIRS_PRICE = 25_000  # includes the extension platform
    RAILING_PRICE_PER_METER = 800
    PALLET_GATE_PRICE = 12_000

    LEASING_3_YEARS_RATE = 0.029
    LEASING_5_YEARS_RATE = 0.035

    def area(self, config: Configuration) -> float:
        """Floor area in m², including the extension when a corner stair exists."""
        return floor_area(config.length, config.width, config.has_corner_stair)

    def dimension_price(self, config: Configuration) -> float:
        volume_m3 = (config.length * config.width * config.height) / 1_000_000_000
        return volume_m3 * self.PRICE_PER_SQUARE_METER_BASE * self.DIMENSION_MULTIPLIER * 100

    def load_multiplier(self, load_class: LoadClass) -> float:
        return self.LOAD_MULTIPLIERS.get(load_class, 1.0)

    def accessories_price(self, config: Configuration) -> float:
        total = 0.0
        for accessory in config.accessories:
            if isinstance(accessory, Stair):
                unit = self.CORNER_STAIRS_PRICE if accessory.is_corner else self.STAIRS_PRICE
                total += unit * accessory.quantity
            elif isinstance(accessory, Railing):
                total += self.RAILING_PRICE_PER_METER * accessory.total_length
            elif isinstance(accessory, PalletGate):
                total += self.PALLET_GATE_PRICE * accessory.quantity
        return total

    def calculate(self, config: Configuration) -> Pricing:
        """Full price breakdown for ``config``."""
        square_meters = self.area(config)
        base_price = float(self.BASE_PRICE)
        dimension_price = self.dimension_price(config)
        multiplier = self.load_multiplier(config.load_class)
        accessories_price = self.accessories_price(config)

        structure = base_price + dimension_price
        total_price = structure * multiplier + accessories_price

        return Pricing(
            base_price=base_price,
            dimension_price=dimension_price,
            load_price=structure * (multiplier - 1),
            accessories_price=accessories_price,
            total_price=total_price,
            price_per_square_meter=total_price / square_meters if square_meters > 0 else 0.0,
            square_meters=square_meters,
            leasing_3_years=total_price * self.LEASING_3_YEARS_RATE / 36,
            leasing_5_years=total_price * self.LEASING_5_YEARS_RATE / 60,
        )
