"""Championship points per finishing position."""

from collections.abc import Sequence

from f1race.config import POINTS_SYSTEM


def points_for_position(position: int, points_system: Sequence[int] = POINTS_SYSTEM) -> int:
    """Points earned for a finishing position.

    Args:
        position: Finishing position, 1 for the winner
        points_system: Points per position, best first

    Returns:
        Points for the position, 0 outside the points table
    """
    if position < 1:
        raise ValueError(f"Finishing position must be 1 or higher, got {position}")
    if position > len(points_system):
        return 0
    return points_system[position - 1]
