"""Simulation engine components."""

from .events import NumpyRandomness, RaceEvent, RandomnessProvider, generate_race_event
from .lap import Breakdown, Collision, LapCompleted, LapOutcome, LapSimulator
from .race import Race, RaceStatus, Result

__all__ = [
    "Breakdown",
    "Collision",
    "LapCompleted",
    "LapOutcome",
    "LapSimulator",
    "NumpyRandomness",
    "Race",
    "RaceEvent",
    "RaceStatus",
    "RandomnessProvider",
    "Result",
    "generate_race_event",
]
