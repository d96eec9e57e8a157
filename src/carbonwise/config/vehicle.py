"""Vehicle profile — static attributes of one catalogued vehicle."""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field

from carbonwise.errors import UnknownFuelType

RUPEES_PER_LAKH = 100_000

_BLANK = (None, "", "NA", "null")


class FuelType(str, Enum):
    """Propulsion type. Closed set: every engine dispatch covers all five."""

    PETROL = "PETROL"
    DIESEL = "DIESEL"
    CNG = "CNG"
    ELECTRIC = "ELECTRIC"
    HYBRID = "HYBRID"

    @classmethod
    def parse(cls, value: object) -> FuelType:
        """Parse a stored fuel-type value; raise ``UnknownFuelType`` on anything else."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            if key in cls.__members__:
                return cls[key]
        raise UnknownFuelType(value)

    @property
    def is_combustion(self) -> bool:
        return self in (FuelType.PETROL, FuelType.DIESEL, FuelType.CNG)

    @property
    def efficiency_unit(self) -> str:
        """Unit of the MIDC efficiency figure for this fuel type."""
        if self is FuelType.CNG:
            return "km/kg"
        if self is FuelType.ELECTRIC:
            return "km/kWh"
        return "km/L"


class VehicleProfile(BaseModel):
    """One vehicle record as supplied by the catalogue. Read-only."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    # --- Identity (audit / explanation only) ---
    id: str | None = Field(default=None, description="Catalogue identifier")
    make: str = Field(default="", description="Manufacturer, e.g. 'Tata'")
    model: str = Field(default="", description="Model name, e.g. 'Nexon EV'")
    variant: str | None = Field(default=None, description="Trim / variant label")
    data_source: str | None = Field(
        default=None,
        description="Where the figures came from. Labels containing 'Estimated' "
                    "mark figures not measured on the MIDC cycle.",
    )

    # --- Propulsion & efficiency ---
    fuel_type: FuelType = Field(description="PETROL | DIESEL | CNG | ELECTRIC | HYBRID")
    midc_efficiency: float | None = Field(
        default=None, gt=0,
        description="MIDC efficiency: km/L (petrol, diesel, hybrid), km/kg (CNG) or km/kWh (electric)",
    )
    midc_efficiency_unit: str | None = Field(default=None, description="Unit label as stored")
    wltp_efficiency: float | None = Field(default=None, gt=0, description="WLTP figure, if marketed")

    # --- Physical ---
    battery_capacity_kwh: float | None = Field(default=None, ge=0, description="Traction battery (kWh)")
    kerb_weight_kg: float | None = Field(default=None, gt=0, description="Kerb weight (kg)")

    # --- Lab / manufacturer lifecycle figures ---
    manufacturing_emissions_kg: float | None = Field(
        default=None, ge=0,
        description="Cradle-to-gate emissions (kg CO₂). Estimated from weight and battery when absent.",
    )
    disposal_emissions_kg: float | None = Field(
        default=None, ge=0,
        description="End-of-life emissions (kg CO₂). Never estimated; absent means 0.",
    )
    has_recycling_program: bool = Field(default=False, description="Manufacturer runs a battery take-back scheme")

    # --- Market ---
    price_lakh: float | None = Field(default=None, ge=0, description="Ex-showroom price (₹ lakh)")
    seating_capacity: int | None = Field(default=None, ge=1)
    body_type: str | None = None
    segment: str | None = None
    manufacture_year: int | None = None

    @property
    def purchase_price(self) -> float | None:
        """Ex-showroom price in rupees."""
        if self.price_lakh is None:
            return None
        return self.price_lakh * RUPEES_PER_LAKH

    @property
    def display_name(self) -> str:
        return " ".join(part for part in (self.make, self.model, self.variant) if part)


def vehicle_from_record(record: Mapping[str, Any]) -> VehicleProfile:
    """Build a ``VehicleProfile`` from a plain data-store row.

    Handles the storage conventions of the catalogue: recycling flag stored
    as 0/1, blank strings for missing values, and extra columns that the
    engine does not use (ignored).

    Raises
    ------
    UnknownFuelType
        If the stored fuel type is not a recognised value.
    pydantic.ValidationError
        If any other field violates its constraints.
    """
    fuel_type = FuelType.parse(record.get("fuel_type"))

    values: dict[str, Any] = {}
    for name in VehicleProfile.model_fields:
        if name == "fuel_type" or name not in record:
            continue
        raw = record[name]
        if isinstance(raw, str):
            raw = raw.strip()
        if raw in _BLANK:
            continue
        values[name] = raw

    if "has_recycling_program" in values:
        flag = values["has_recycling_program"]
        if isinstance(flag, str):
            values["has_recycling_program"] = flag.lower() in ("true", "1", "yes")
        else:
            values["has_recycling_program"] = bool(flag)

    if "id" in values:
        values["id"] = str(values["id"])

    return VehicleProfile(fuel_type=fuel_type, **values)
