"""Value records consumed by the toolkit operations.

All records are frozen pydantic models with no identity beyond value
equality. Callers construct them, pass them in, and discard them.
"""

from __future__ import annotations

from pydantic import BaseModel


class RatedItem(BaseModel):
    """A titled item with a numeric rating."""

    model_config = {"frozen": True}

    title: str
    rating: float


class Product(BaseModel):
    """A named product with a price."""

    model_config = {"frozen": True}

    name: str
    price: float


class VehicleRecord(BaseModel):
    """Make and model year of a vehicle."""

    model_config = {"frozen": True}

    make: str
    year: int


class CarRecord(BaseModel):
    """A vehicle record plus model information.

    Holds a :class:`VehicleRecord` instead of extending it, so the vehicle
    and car descriptions stay two independent operations.
    """

    model_config = {"frozen": True}

    vehicle: VehicleRecord
    model: str

    @classmethod
    def build(cls, make: str, year: int, model: str) -> CarRecord:
        """Construct a car record from flat fields."""
        return cls(vehicle=VehicleRecord(make=make, year=year), model=model)
