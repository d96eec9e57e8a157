"""Exception taxonomy for the lifecycle engine."""

from __future__ import annotations


class CarbonWiseError(Exception):
    """Lifecycle calculation failed.

    Attributes:
        message: Human-readable description of the error.
        error_code: Machine-readable code identifying the error type.
    """

    error_code: str = "carbonwise_error"

    def __init__(self, message: str | None = None):
        # Class docstring doubles as the default message
        default_msg = self.__class__.__doc__.strip().splitlines()[0] if self.__class__.__doc__ else ""
        self.message = message or default_msg
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class UnknownFuelType(CarbonWiseError):
    """Fuel type is not one of PETROL, DIESEL, CNG, ELECTRIC, HYBRID."""

    error_code = "unknown_fuel_type"

    def __init__(self, fuel_type: object):
        self.fuel_type = fuel_type
        super().__init__(f"Unknown fuel type: {fuel_type}")


class InvalidInput(CarbonWiseError):
    """Input would make the calculation non-finite."""

    error_code = "invalid_input"


__all__ = [
    "CarbonWiseError",
    "UnknownFuelType",
    "InvalidInput",
]
