"""Pytest configuration and shared fixtures for mezzanine tests."""

from __future__ import annotations

import pytest

from mezzanine.domain import Configuration, PalletGate, Railing, Stair, StairVariant


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


@pytest.fixture
def platform() -> Configuration:
    """The default 9400 x 4000 x 3000 mm platform without accessories."""
    return Configuration.default()


@pytest.fixture
def corner_platform() -> Configuration:
    """Default platform with a corner stair (and therefore the extension)."""
    return Configuration(
        length=9400,
        width=4000,
        height=3000,
        accessories=(Stair(id="corner", variant=StairVariant.CORNER_1_2M),),
    )


@pytest.fixture
def busy_platform() -> Configuration:
    """Default platform with a straight stair, a gate and a railing."""
    return Configuration(
        length=9400,
        width=4000,
        height=3000,
        accessories=(
            Stair(id="stair-1"),
            PalletGate(id="gate-1"),
            Railing(id="railing-1", segment_length=10),
        ),
    )
