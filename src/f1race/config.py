"""Race configuration."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Points for finishing positions 1st through 10th
POINTS_SYSTEM: tuple[int, ...] = (25, 18, 15, 12, 10, 8, 6, 4, 2, 1)


class RaceConfig(BaseModel):
    """Tunable parameters for a race. All times are in minutes."""

    model_config = ConfigDict(frozen=True)

    pit_stop_time: float = Field(
        default=5.0,
        ge=0.0,
        description="Time added to a driver's total for a pit stop",
    )
    slowdown_time: float = Field(
        default=1.0,
        ge=0.0,
        description="Time added to every driver after a breakdown or collision",
    )
    breakdown_percent: int = Field(
        default=5,
        ge=0,
        le=100,
        description="Chance per lap that a car breaks down",
    )
    collision_percent: int = Field(
        default=2,
        ge=0,
        le=100,
        description="Chance per lap that a car is involved in a collision",
    )
    min_lap_time: float = Field(default=1.0, gt=0.0, description="Fastest possible lap")
    max_lap_time: float = Field(default=2.0, gt=0.0, description="Upper bound (exclusive) for a lap")
    points_system: tuple[int, ...] = Field(
        default=POINTS_SYSTEM,
        description="Points awarded per finishing position, best first",
    )
    seed: int | None = Field(default=None, description="Seed for the default random source")

    @model_validator(mode="after")
    def _check_ranges(self) -> "RaceConfig":
        if self.min_lap_time >= self.max_lap_time:
            raise ValueError(
                f"min_lap_time ({self.min_lap_time}) must be below max_lap_time ({self.max_lap_time})"
            )
        if self.breakdown_percent + self.collision_percent > 100:
            raise ValueError("breakdown_percent and collision_percent must sum to at most 100")
        if any(points < 0 for points in self.points_system):
            raise ValueError("points_system cannot contain negative values")
        return self

    @property
    def lap_time_range(self) -> tuple[float, float]:
        """Lap time bounds as a (low, high) pair."""
        return (self.min_lap_time, self.max_lap_time)
