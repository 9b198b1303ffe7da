"""Custom exceptions for the race simulator."""


class F1RaceError(Exception):
    """Base exception for all race simulator errors."""


class RaceConfigurationError(F1RaceError):
    """Raised when a race is set up with invalid parameters."""


class InvalidProbabilityError(RaceConfigurationError, ValueError):
    """Raised when event percentages fall outside 0-100."""

    def __init__(self, breakdown_percent: int, collision_percent: int) -> None:
        self.breakdown_percent = breakdown_percent
        self.collision_percent = collision_percent
        super().__init__(
            f"Invalid event percentages: breakdown={breakdown_percent}, "
            f"collision={collision_percent} (each must be 0-100, sum at most 100)"
        )


class RaceStateError(F1RaceError):
    """Raised when a race step is called out of lifecycle order."""
