"""Race car state model."""

from pydantic import BaseModel, Field


class RaceCar(BaseModel):
    """Represents a car and the state it accumulates during a race."""

    car_number: int = Field(..., ge=0, description="Number painted on the car")
    current_lap: int = Field(default=0, ge=0, description="Laps completed so far")
    lap_times: dict[int, float] = Field(
        default_factory=dict,
        description="Lap time in minutes keyed by lap number",
    )
    is_pit_stop_needed: bool = Field(
        default=False,
        description="Set after a breakdown or collision, cleared by the pit stop",
    )

    def add_lap_time(self, lap: int, time: float) -> None:
        """Record the time of a completed lap."""
        self.lap_times[lap] = time

    @property
    def best_lap_time(self) -> float | None:
        """Fastest recorded lap, or None before the first completed lap."""
        return min(self.lap_times.values()) if self.lap_times else None
