"""Single lap simulation."""

import logging
from dataclasses import dataclass
from typing import ClassVar

from f1race.models import Driver, RaceCar
from f1race.simulation.events import (
    DEFAULT_BREAKDOWN_PERCENT,
    DEFAULT_COLLISION_PERCENT,
    NumpyRandomness,
    RaceEvent,
    RandomnessProvider,
    generate_race_event,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LapCompleted:
    """The car completed the lap."""

    lap_time: float
    lap: int

    is_incident: ClassVar[bool] = False


@dataclass(frozen=True)
class Breakdown:
    """The car broke down and needs a pit stop. Yellow flag."""

    car_number: int
    message: str

    is_incident: ClassVar[bool] = True
    flag: ClassVar[str] = "Yellow flag raised."


@dataclass(frozen=True)
class Collision:
    """The car collided and needs a pit stop. Safety car."""

    car_number: int
    message: str

    is_incident: ClassVar[bool] = True
    flag: ClassVar[str] = "Safety car deployed."


LapOutcome = LapCompleted | Breakdown | Collision


class LapSimulator:
    """Runs one lap for one driver and car."""

    def __init__(
        self,
        randomness: RandomnessProvider | None = None,
        lap_time_range: tuple[float, float] = (1.0, 2.0),
        breakdown_percent: int = DEFAULT_BREAKDOWN_PERCENT,
        collision_percent: int = DEFAULT_COLLISION_PERCENT,
    ):
        """Initialize the lap simulator.

        Args:
            randomness: Source for events and lap times (creates new if None)
            lap_time_range: Lap time bounds in minutes, upper bound exclusive
            breakdown_percent: Chance of a breakdown when no event is given
            collision_percent: Chance of a collision when no event is given
        """
        self.randomness = randomness if randomness is not None else NumpyRandomness()
        self.lap_time_range = lap_time_range
        self.breakdown_percent = breakdown_percent
        self.collision_percent = collision_percent

    def simulate_lap(
        self,
        driver: Driver,
        car: RaceCar,
        event: RaceEvent | None = None,
    ) -> LapOutcome:
        """Simulate a lap.

        The car is updated before an incident outcome is returned, so its
        pit stop flag is already set when the caller sees the incident.

        Args:
            driver: Driver on the lap
            car: Car being driven
            event: Event for this lap (drawn from the randomness source if None)

        Returns:
            LapCompleted with the lap time, or Breakdown / Collision
        """
        if event is None:
            event = generate_race_event(
                self.breakdown_percent,
                self.collision_percent,
                self.randomness,
            )

        if event == RaceEvent.BREAKDOWN:
            car.is_pit_stop_needed = True
            return Breakdown(
                car_number=car.car_number,
                message=f"Car {car.car_number} broke down - pit stop!",
            )

        if event == RaceEvent.COLLISION:
            car.is_pit_stop_needed = True
            return Collision(
                car_number=car.car_number,
                message=f"Car #{car.car_number} collided - pit stop!",
            )

        car.current_lap += 1
        low, high = self.lap_time_range
        lap_time = self.randomness.next_double(low, high)
        car.add_lap_time(car.current_lap, lap_time)
        logger.debug("Driver %s completed lap: %s min", driver.name, lap_time)
        return LapCompleted(lap_time=lap_time, lap=car.current_lap)
