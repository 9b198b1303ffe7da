"""Tests for points and leaderboards."""

import pytest

from f1race import POINTS_SYSTEM, Driver, RaceCar, Sponsor, Team
from f1race.output import ConsoleOutput
from f1race.scoring import (
    TeamResult,
    award_points,
    format_driver_result,
    format_team_result,
    points_for_position,
    sort_results,
    to_sorted_team_results,
)
from f1race.simulation import Result


def make_result(team: Team, index: int, total: float) -> Result:
    driver, car = team.driver_car_pairs()[index]
    return Result(team=team, driver=driver, car=car, total_lap_time=total)


def make_field(size: int) -> Team:
    return Team(
        name="Field",
        drivers=[Driver(name=f"Driver {i}") for i in range(size)],
        cars=[RaceCar(car_number=i) for i in range(size)],
    )


class TestPoints:
    """Test points table."""

    @pytest.mark.parametrize("position", range(1, 11))
    def test_points_positions(self, position):
        """Top ten score from the table."""
        expected = [25, 18, 15, 12, 10, 8, 6, 4, 2, 1][position - 1]
        assert points_for_position(position) == expected

    @pytest.mark.parametrize("position", [11, 12, 20, 100])
    def test_outside_points(self, position):
        """Positions past tenth score nothing."""
        assert points_for_position(position) == 0

    def test_invalid_position(self):
        """Positions start at 1."""
        with pytest.raises(ValueError):
            points_for_position(0)

    def test_custom_table(self):
        """A shorter table ends the points earlier."""
        assert points_for_position(2, (10, 5)) == 5
        assert points_for_position(3, (10, 5)) == 0


class TestAwardPoints:
    """Test awarding points to finishers."""

    def test_awarded_in_time_order(self):
        """Fastest total time wins."""
        team = make_field(3)
        results = [make_result(team, 0, 9.0), make_result(team, 1, 3.0), make_result(team, 2, 6.0)]

        awards = award_points(results)

        assert [(d.name, p) for d, p in awards] == [("Driver 1", 25), ("Driver 2", 18), ("Driver 0", 15)]
        assert team.drivers[1].points == 25
        assert team.drivers[2].points == 18
        assert team.drivers[0].points == 15

    def test_only_top_ten_scored(self):
        """Drivers past tenth get no award."""
        team = make_field(12)
        results = [make_result(team, i, float(i)) for i in range(12)]

        awards = award_points(results)

        assert len(awards) == 10
        assert sum(p for _, p in awards) == sum(POINTS_SYSTEM)
        assert team.drivers[10].points == 0
        assert team.drivers[11].points == 0

    def test_sort_results(self):
        """Results sort by total time ascending."""
        team = make_field(3)
        results = [make_result(team, 0, 2.5), make_result(team, 1, 1.5), make_result(team, 2, 2.0)]
        assert [r.total_lap_time for r in sort_results(results)] == [1.5, 2.0, 2.5]


class TestTeamLeaderboard:
    """Test team results and formatting."""

    def test_format_with_sponsor(self):
        """Sponsored team line."""
        team = Team(name="Aston Martin", main_sponsor=Sponsor(name="Cognizant", amount=150000.0))
        line = format_team_result(TeamResult(team=team, total_time=0.0), 0)
        assert line == "1. Team Aston Martin with total time 0.0 minutes. Sponsored by Cognizant"

    def test_format_without_sponsor(self):
        """Team without a sponsor degrades to the default clause."""
        team = Team(name="Mercedes")
        line = format_team_result(TeamResult(team=team, total_time=0.0), 0)
        assert line == "1. Team Mercedes with total time 0.0 minutes. No main sponsor"

    def test_team_totals_sorted(self, mercedes, aston_martin):
        """Team time is the sum of its drivers' times."""
        results = [
            make_result(aston_martin, 0, 3.0),
            make_result(aston_martin, 1, 4.0),
            make_result(mercedes, 0, 5.0),
        ]

        team_results = to_sorted_team_results([aston_martin, mercedes], results)

        assert [tr.team.name for tr in team_results] == ["Mercedes", "Aston Martin"]
        assert [tr.total_time for tr in team_results] == [5.0, 7.0]

    def test_team_without_results(self, mercedes, aston_martin):
        """A team with no results totals zero."""
        results = [make_result(aston_martin, 0, 3.0)]
        team_results = to_sorted_team_results([aston_martin, mercedes], results)
        assert team_results[0] == TeamResult(team=mercedes, total_time=0.0)

    def test_teams_matched_by_identity(self):
        """Teams with equal fields are still separate teams."""
        first = Team(name="Twin", drivers=[Driver(name="A")], cars=[RaceCar(car_number=1)])
        second = Team(name="Twin", drivers=[Driver(name="A")], cars=[RaceCar(car_number=1)])
        results = [make_result(first, 0, 2.0), make_result(second, 0, 3.0)]

        team_results = to_sorted_team_results([first, second], results)

        assert [tr.total_time for tr in team_results] == [2.0, 3.0]


class TestDriverLeaderboard:
    """Test driver leaderboard formatting and printing."""

    def test_format_driver_result(self, mercedes):
        """Driver line lists position, car, team and times."""
        result = make_result(mercedes, 0, 3.5)
        result.fastest_lap = 1.25
        assert format_driver_result(result, 0) == (
            "1. Driver Lewis Hamilton in car #7 from team Mercedes "
            "with total time 3.5 minutes (fastest lap: 1.25 minutes)"
        )

    def test_format_without_completed_lap(self, mercedes):
        """Fastest lap shows n/a before any completed lap."""
        result = make_result(mercedes, 0, 1.0)
        assert format_driver_result(result, 2).endswith("(fastest lap: n/a)")
        assert format_driver_result(result, 2).startswith("3. Driver")

    def test_print_leaderboards(self, capsys, mercedes):
        """Headers are followed by one line per entry."""
        ConsoleOutput.print_leaderboard([make_result(mercedes, 0, 1.0)])
        ConsoleOutput.print_team_leaderboard([TeamResult(team=mercedes, total_time=1.0)])

        lines = capsys.readouterr().out.splitlines()

        assert "--- LEADERBOARD ---" in lines
        assert "--- TEAM LEADERBOARD ---" in lines
        assert lines[-1] == "1. Team Mercedes with total time 1.0 minutes. No main sponsor"
