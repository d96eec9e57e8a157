"""Fail-fast checks for numbers that feed a division or a product."""

from __future__ import annotations

import math

from carbonwise.config.vehicle import VehicleProfile
from carbonwise.errors import InvalidInput


def require_positive(name: str, value: float) -> float:
    if value is None or not math.isfinite(value) or value <= 0:
        raise InvalidInput(f"{name} must be a positive finite number, got {value!r}")
    return value


def require_non_negative(name: str, value: float) -> float:
    if value is None or not math.isfinite(value) or value < 0:
        raise InvalidInput(f"{name} must be a non-negative finite number, got {value!r}")
    return value


def require_efficiency(vehicle: VehicleProfile) -> float:
    """MIDC efficiency of ``vehicle``; every per-km formula divides by it."""
    efficiency = vehicle.midc_efficiency
    if efficiency is None:
        raise InvalidInput(f"{vehicle.display_name or 'vehicle'} has no MIDC efficiency figure")
    return require_positive("midc_efficiency", efficiency)


def require_finite(name: str, value: float) -> float:
    if not math.isfinite(value):
        raise InvalidInput(f"{name} is not finite ({value!r})")
    return value
