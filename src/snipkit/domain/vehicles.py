"""Vehicle and car value objects with text descriptions.

A :class:`Car` embeds a :class:`Vehicle` rather than subclassing it, so the
shared make/year fields and their rendering live in one place.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vehicle:
    """Make and model year of a vehicle.

    Example:
        >>> Vehicle("Honda", 2018).info()
        'Make: Honda, Year: 2018'
    """

    make: str
    year: int

    def info(self) -> str:
        """Return the ``Make: ..., Year: ...`` description."""
        return f"Make: {self.make}, Year: {self.year}"


@dataclass(frozen=True, slots=True)
class Car:
    """A vehicle with a model name.

    Example:
        >>> car = Car.build("Toyota", 2020, "Corolla")
        >>> car.info()
        'Make: Toyota, Year: 2020'
        >>> car.model_info()
        'Model: Corolla'
        >>> car.describe()
        'Make: Toyota, Year: 2020, Model: Corolla'
    """

    vehicle: Vehicle
    model: str

    @classmethod
    def build(cls, make: str, year: int, model: str) -> Car:
        """Create a car from its flat make, year and model fields."""
        return cls(vehicle=Vehicle(make=make, year=year), model=model)

    @property
    def make(self) -> str:
        return self.vehicle.make

    @property
    def year(self) -> int:
        return self.vehicle.year

    def info(self) -> str:
        """Return the embedded vehicle's description unchanged."""
        return self.vehicle.info()

    def model_info(self) -> str:
        """Return the ``Model: ...`` description."""
        return f"Model: {self.model}"

    def describe(self) -> str:
        """Return the vehicle description followed by the model description."""
        return f"{self.info()}, {self.model_info()}"


__all__ = ["Car", "Vehicle"]
