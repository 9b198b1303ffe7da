"""Leaderboards: ranking, points and formatting of race results."""

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from f1race.config import POINTS_SYSTEM
from f1race.models import Driver, Team
from f1race.scoring.points import points_for_position

if TYPE_CHECKING:
    from f1race.simulation.race import Result

NO_SPONSOR = "No main sponsor"


@dataclass(frozen=True)
class TeamResult:
    """A team and the summed race time of its drivers."""

    team: Team
    total_time: float


def sort_results(results: Iterable["Result"]) -> list["Result"]:
    """Return results ordered by total time, fastest first."""
    return sorted(results, key=lambda r: r.total_lap_time)


def award_points(
    results: Iterable["Result"],
    points_system: Sequence[int] = POINTS_SYSTEM,
) -> list[tuple[Driver, int]]:
    """Award championship points to the top finishers.

    Args:
        results: Race results in any order
        points_system: Points per position, best first

    Returns:
        (driver, points) pairs in finishing order
    """
    awards = []
    for position, result in enumerate(sort_results(results)[: len(points_system)], 1):
        points = points_for_position(position, points_system)
        result.driver.add_points(points)
        awards.append((result.driver, points))
    return awards


def to_sorted_team_results(teams: Iterable[Team], results: Sequence["Result"]) -> list[TeamResult]:
    """Sum each team's race time and order teams fastest first."""
    team_results = [
        TeamResult(
            team=team,
            total_time=sum((r.total_lap_time for r in results if r.team is team), 0.0),
        )
        for team in teams
    ]
    return sorted(team_results, key=lambda tr: tr.total_time)


def sponsor_clause(team: Team) -> str:
    """Describe the team's main sponsor, or the lack of one."""
    sponsor = team.main_sponsor
    if sponsor is None:
        return NO_SPONSOR
    return f"Sponsored by {sponsor.name}"


def format_team_result(team_result: TeamResult, index: int) -> str:
    """Format one team leaderboard line.

    Args:
        team_result: Team and its total time
        index: 0-based position in the leaderboard

    Returns:
        e.g. "1. Team Mercedes with total time 0.0 minutes. No main sponsor"
    """
    team_position = f"{index + 1}. Team {team_result.team.name}"
    team_time = f"with total time {team_result.total_time} minutes"
    return f"{team_position} {team_time}. {sponsor_clause(team_result.team)}"


def format_driver_result(result: "Result", index: int) -> str:
    """Format one driver leaderboard line."""
    fastest = "n/a" if math.isinf(result.fastest_lap) else f"{result.fastest_lap} minutes"
    return (
        f"{index + 1}. Driver {result.driver.name} in car #{result.car.car_number} "
        f"from team {result.team.name} with total time {result.total_lap_time} minutes "
        f"(fastest lap: {fastest})"
    )
