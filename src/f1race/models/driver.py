"""Driver model."""

from pydantic import BaseModel, Field


class Driver(BaseModel):
    """Represents a driver taking part in a race."""

    name: str = Field(..., min_length=1, description="Full name")
    points: int = Field(default=0, ge=0, description="Championship points accumulated")

    def add_points(self, points: int) -> None:
        """Add championship points awarded for a finishing position.

        Args:
            points: Points to add (must not be negative)
        """
        if points < 0:
            raise ValueError(f"Cannot award negative points to {self.name}: {points}")
        self.points += points
