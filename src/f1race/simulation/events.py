"""Race events: normal laps, breakdowns and collisions."""

from enum import Enum
from typing import Protocol, runtime_checkable

import numpy as np

from f1race.exceptions import InvalidProbabilityError

DEFAULT_BREAKDOWN_PERCENT = 5
DEFAULT_COLLISION_PERCENT = 2


class RaceEvent(str, Enum):
    """What happens to a car on a single lap."""

    NORMAL = "normal"
    BREAKDOWN = "breakdown"
    COLLISION = "collision"


@runtime_checkable
class RandomnessProvider(Protocol):
    """Source of random numbers for event and lap time generation."""

    def next_int(self, until: int) -> int:
        """Return an integer in [0, until)."""
        ...

    def next_double(self, low: float, high: float) -> float:
        """Return a float in [low, high)."""
        ...


class NumpyRandomness:
    """Randomness provider backed by a numpy Generator."""

    def __init__(self, rng: np.random.Generator | None = None, seed: int | None = None):
        """Initialize the provider.

        Args:
            rng: Random number generator (creates new if None)
            seed: Seed used when a new generator is created
        """
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def next_int(self, until: int) -> int:
        return int(self.rng.integers(0, until))

    def next_double(self, low: float, high: float) -> float:
        return float(self.rng.uniform(low, high))


def generate_race_event(
    breakdown_percent: int = DEFAULT_BREAKDOWN_PERCENT,
    collision_percent: int = DEFAULT_COLLISION_PERCENT,
    randomness: RandomnessProvider | None = None,
) -> RaceEvent:
    """Pick the event for one lap of one car.

    A single draw in [0, 100) decides the event: values below
    ``breakdown_percent`` are breakdowns, the next ``collision_percent``
    values are collisions, everything else is a normal lap.

    Args:
        breakdown_percent: Chance of a breakdown (0-100)
        collision_percent: Chance of a collision (0-100)
        randomness: Source of the draw (a fresh NumpyRandomness if None)

    Returns:
        The event for this lap
    """
    if (
        not 0 <= breakdown_percent <= 100
        or not 0 <= collision_percent <= 100
        or breakdown_percent + collision_percent > 100
    ):
        raise InvalidProbabilityError(breakdown_percent, collision_percent)

    if randomness is None:
        randomness = NumpyRandomness()

    total_incident_percent = breakdown_percent + collision_percent
    roll = randomness.next_int(100)

    if roll < breakdown_percent:
        return RaceEvent.BREAKDOWN
    elif roll < total_incident_percent:
        return RaceEvent.COLLISION
    return RaceEvent.NORMAL
