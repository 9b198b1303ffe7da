"""Scoring: points and leaderboards."""

from .leaderboard import (
    NO_SPONSOR,
    TeamResult,
    award_points,
    format_driver_result,
    format_team_result,
    sort_results,
    sponsor_clause,
    to_sorted_team_results,
)
from .points import points_for_position

__all__ = [
    "NO_SPONSOR",
    "TeamResult",
    "award_points",
    "format_driver_result",
    "format_team_result",
    "points_for_position",
    "sort_results",
    "sponsor_clause",
    "to_sorted_team_results",
]
