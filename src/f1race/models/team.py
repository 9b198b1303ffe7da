"""Team and sponsor models."""

from pydantic import BaseModel, Field, model_validator

from .car import RaceCar
from .driver import Driver


class Sponsor(BaseModel):
    """A team's main sponsor."""

    name: str = Field(..., min_length=1, description="Sponsor name")
    amount: float = Field(..., ge=0.0, description="Sponsorship amount")


class Team(BaseModel):
    """A team entering drivers and cars into a race.

    Drivers and cars are paired by position: the first driver races the
    first car, and so on. A team does not have to have a main sponsor.
    """

    name: str = Field(..., min_length=1, description="Team name")
    drivers: list[Driver] = Field(default_factory=list, description="Team drivers")
    cars: list[RaceCar] = Field(default_factory=list, description="Team cars")
    main_sponsor: Sponsor | None = Field(
        default=None,
        description="Main sponsor, None when the team has none",
    )

    @model_validator(mode="after")
    def _check_pairing(self) -> "Team":
        if len(self.drivers) != len(self.cars):
            raise ValueError(
                f"Team {self.name} has {len(self.drivers)} drivers "
                f"but {len(self.cars)} cars"
            )

        numbers = [car.car_number for car in self.cars]
        if len(set(numbers)) != len(numbers):
            raise ValueError(f"Team {self.name} has duplicate car numbers: {numbers}")

        if len({id(driver) for driver in self.drivers}) != len(self.drivers):
            raise ValueError(f"Team {self.name} lists the same driver twice")

        return self

    @property
    def has_sponsor(self) -> bool:
        """Whether the team has a main sponsor."""
        return self.main_sponsor is not None

    def driver_car_pairs(self) -> list[tuple[Driver, RaceCar]]:
        """Return each driver with the car they race."""
        return list(zip(self.drivers, self.cars))
