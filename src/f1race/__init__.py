"""Toy F1 race simulator with driver and team leaderboards."""

from .config import POINTS_SYSTEM, RaceConfig
from .exceptions import F1RaceError, InvalidProbabilityError, RaceConfigurationError, RaceStateError
from .models import Driver, RaceCar, Sponsor, Team
from .simulation import Race, RaceEvent, RaceStatus, Result

__version__ = "0.1.0"

__all__ = [
    "POINTS_SYSTEM",
    "Driver",
    "F1RaceError",
    "InvalidProbabilityError",
    "Race",
    "RaceCar",
    "RaceConfig",
    "RaceConfigurationError",
    "RaceEvent",
    "RaceStateError",
    "RaceStatus",
    "Result",
    "Sponsor",
    "Team",
]
