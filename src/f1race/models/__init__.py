"""Data models for race participants."""

from .car import RaceCar
from .driver import Driver
from .team import Sponsor, Team

__all__ = [
    "Driver",
    "RaceCar",
    "Sponsor",
    "Team",
]
