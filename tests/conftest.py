"""Shared test fixtures and a scripted randomness source."""

import pytest

from f1race import Driver, RaceCar, Sponsor, Team


class ScriptedRandomness:
    """Randomness provider that replays fixed draws.

    Once a script runs out it keeps returning a normal-lap roll (50) and a
    1.5 minute lap time.
    """

    def __init__(self, ints: list[int] | None = None, doubles: list[float] | None = None):
        self.ints = list(ints or [])
        self.doubles = list(doubles or [])
        self.int_calls: list[int] = []
        self.double_calls: list[tuple[float, float]] = []

    def next_int(self, until: int) -> int:
        self.int_calls.append(until)
        return self.ints.pop(0) if self.ints else 50

    def next_double(self, low: float, high: float) -> float:
        self.double_calls.append((low, high))
        return self.doubles.pop(0) if self.doubles else 1.5


@pytest.fixture
def scripted():
    """Factory for ScriptedRandomness instances."""
    return ScriptedRandomness


@pytest.fixture
def driver():
    return Driver(name="Lewis Hamilton")


@pytest.fixture
def car():
    return RaceCar(car_number=7)


@pytest.fixture
def mercedes(driver, car):
    """Single-driver team without a main sponsor."""
    return Team(name="Mercedes", drivers=[driver], cars=[car])


@pytest.fixture
def aston_martin():
    """Two-driver team with a main sponsor."""
    return Team(
        name="Aston Martin",
        drivers=[Driver(name="Fernando Alonso"), Driver(name="Lance Stroll")],
        cars=[RaceCar(car_number=14), RaceCar(car_number=18)],
        main_sponsor=Sponsor(name="Cognizant", amount=150000.0),
    )
