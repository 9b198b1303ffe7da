"""Console output formatting."""

from collections.abc import Sequence
from typing import TYPE_CHECKING

from f1race.scoring.leaderboard import TeamResult, format_driver_result, format_team_result

if TYPE_CHECKING:
    from f1race.simulation.race import Result


class ConsoleOutput:
    """Prints race progress and leaderboards to the console."""

    @staticmethod
    def print_lap_start(lap: int) -> None:
        print(f"Starting lap {lap}")

    @staticmethod
    def print_lap_completed(driver_name: str, lap_time: float) -> None:
        print(f"Driver {driver_name} completed lap: {lap_time} min")

    @staticmethod
    def print_pit_stop(car_number: int) -> None:
        print(f"Car {car_number} skips this lap.")

    @staticmethod
    def print_leaderboard(results: Sequence["Result"]) -> None:
        """Print the driver leaderboard.

        Args:
            results: Race results sorted by total time
        """
        print("\n--- LEADERBOARD ---")
        for index, result in enumerate(results):
            print(format_driver_result(result, index))

    @staticmethod
    def print_team_leaderboard(team_results: Sequence[TeamResult]) -> None:
        """Print the team leaderboard.

        Args:
            team_results: Team results sorted by total time
        """
        print("\n--- TEAM LEADERBOARD ---")
        for index, team_result in enumerate(team_results):
            print(format_team_result(team_result, index))
