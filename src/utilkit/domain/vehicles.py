"""Vehicle and car descriptions.

The two descriptions are independent: a car's model description adds to
its vehicle description rather than replacing it. Callers that want both
call each function on the shared record.
"""

from __future__ import annotations

from utilkit.domain.models import CarRecord, VehicleRecord


def describe_vehicle(vehicle: VehicleRecord) -> str:
    """Summarize make and year.

    Examples:
        >>> describe_vehicle(VehicleRecord(make="Toyota", year=2020))
        'Make: Toyota, Year: 2020'
    """
    return f"Make: {vehicle.make}, Year: {vehicle.year}"


def describe_car(car: CarRecord) -> str:
    """Summarize the car's model."""
    return f"Model: {car.model}"
