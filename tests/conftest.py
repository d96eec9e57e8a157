"""Shared test fixtures — one catalogue vehicle per fuel type."""

from __future__ import annotations

import pytest

from carbonwise.config import (
    FuelType,
    RegionProfile,
    UsagePattern,
    UsageProfile,
    VehicleProfile,
)


@pytest.fixture
def ev() -> VehicleProfile:
    return VehicleProfile(
        id="tata-nexon-ev-lr",
        make="Tata",
        model="Nexon EV",
        variant="Long Range",
        fuel_type=FuelType.ELECTRIC,
        midc_efficiency=6.0,
        midc_efficiency_unit="km/kWh",
        battery_capacity_kwh=40.5,
        kerb_weight_kg=1400,
        manufacturing_emissions_kg=7_000,
        has_recycling_program=True,
        data_source="ARAI MIDC",
        price_lakh=14.5,
        seating_capacity=5,
        body_type="SUV",
    )


@pytest.fixture
def petrol() -> VehicleProfile:
    return VehicleProfile(
        id="maruti-swift-vxi",
        make="Maruti Suzuki",
        model="Swift",
        variant="VXi",
        fuel_type=FuelType.PETROL,
        midc_efficiency=18.0,
        midc_efficiency_unit="km/L",
        kerb_weight_kg=920,
        manufacturing_emissions_kg=4_500,
        disposal_emissions_kg=200,
        data_source="ARAI MIDC",
        price_lakh=7.0,
        seating_capacity=5,
        body_type="Hatchback",
    )


@pytest.fixture
def diesel() -> VehicleProfile:
    return VehicleProfile(
        id="mahindra-xuv300-w8",
        make="Mahindra",
        model="XUV300",
        variant="W8 Diesel",
        fuel_type=FuelType.DIESEL,
        midc_efficiency=20.0,
        kerb_weight_kg=1_250,
        manufacturing_emissions_kg=6_000,
        price_lakh=12.0,
        seating_capacity=5,
    )


@pytest.fixture
def cng() -> VehicleProfile:
    return VehicleProfile(
        id="maruti-wagonr-cng",
        make="Maruti Suzuki",
        model="WagonR",
        variant="CNG LXi",
        fuel_type=FuelType.CNG,
        midc_efficiency=25.0,
        midc_efficiency_unit="km/kg",
        kerb_weight_kg=950,
        manufacturing_emissions_kg=4_200,
        price_lakh=6.5,
        seating_capacity=5,
    )


@pytest.fixture
def hybrid() -> VehicleProfile:
    return VehicleProfile(
        id="toyota-hyryder-strong",
        make="Toyota",
        model="Urban Cruiser Hyryder",
        variant="Strong Hybrid",
        fuel_type=FuelType.HYBRID,
        midc_efficiency=25.0,
        battery_capacity_kwh=1.6,
        kerb_weight_kg=1_300,
        manufacturing_emissions_kg=6_500,
        price_lakh=19.0,
        seating_capacity=5,
    )


@pytest.fixture
def usage() -> UsageProfile:
    return UsageProfile(daily_km=40, years=8, usage_pattern=UsagePattern.MIXED, grid_intensity=0.71)


@pytest.fixture
def catalog(ev, petrol, diesel, cng, hybrid) -> list[VehicleProfile]:
    return [ev, petrol, diesel, cng, hybrid]


@pytest.fixture
def karnataka() -> RegionProfile:
    return RegionProfile(
        state_name="Karnataka",
        grid_intensity=0.55,
        renewable_pct=48.0,
        fuel_prices={FuelType.PETROL: 102.9, FuelType.DIESEL: 88.9, FuelType.CNG: 85.0},
        electricity_price=7.5,
    )
