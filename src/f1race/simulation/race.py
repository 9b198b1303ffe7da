"""Race simulation engine."""

import logging
from dataclasses import dataclass
from enum import Enum

from f1race.config import RaceConfig
from f1race.exceptions import RaceConfigurationError, RaceStateError
from f1race.models import Driver, RaceCar, Team
from f1race.output.console import ConsoleOutput
from f1race.scoring.leaderboard import (
    TeamResult,
    award_points,
    sort_results,
    to_sorted_team_results,
)
from f1race.simulation.events import NumpyRandomness, RandomnessProvider
from f1race.simulation.lap import LapOutcome, LapSimulator

logger = logging.getLogger(__name__)


class RaceStatus(str, Enum):
    """Race lifecycle status."""

    NOT_STARTED = "not_started"
    RUNNING = "running"
    FINISHED = "finished"


@dataclass(eq=False)
class Result:
    """Tracks a driver's accumulated time during the race."""

    team: Team
    driver: Driver
    car: RaceCar
    total_lap_time: float = 0.0
    fastest_lap: float = float("inf")
    pit_stops: int = 0
    incidents: int = 0

    def record_lap(self, lap_time: float) -> None:
        """Add a completed lap to the total and track the fastest lap."""
        self.total_lap_time += lap_time
        if lap_time < self.fastest_lap:
            self.fastest_lap = lap_time

    def add_penalty(self, minutes: float) -> None:
        """Add a time penalty (pit stop or slowdown)."""
        if minutes < 0:
            raise ValueError(f"Penalty cannot be negative: {minutes}")
        self.total_lap_time += minutes


class Race:
    """Runs a race for a set of teams over a fixed number of laps.

    Every lap, each driver either serves a pit stop owed from an earlier
    incident or drives the lap. A breakdown or collision slows the whole
    field down.
    """

    def __init__(
        self,
        number_of_laps: int,
        teams: list[Team],
        config: RaceConfig | None = None,
        randomness: RandomnessProvider | None = None,
    ):
        """Initialize the race.

        Args:
            number_of_laps: Laps to run, at least 1
            teams: Competing teams
            config: Race parameters (defaults if None)
            randomness: Source for events and lap times (seeded from config if None)
        """
        if number_of_laps < 1:
            raise RaceConfigurationError(f"A race needs at least one lap, got {number_of_laps}")

        self.number_of_laps = number_of_laps
        self.teams = list(teams)
        self.config = config if config is not None else RaceConfig()
        self.randomness = randomness if randomness is not None else NumpyRandomness(seed=self.config.seed)
        self.lap_simulator = LapSimulator(
            randomness=self.randomness,
            lap_time_range=self.config.lap_time_range,
            breakdown_percent=self.config.breakdown_percent,
            collision_percent=self.config.collision_percent,
        )

        self.current_lap = 0
        self.status = RaceStatus.NOT_STARTED
        self.race_results: list[Result] = []

    def run_race(self) -> None:
        """Run every lap, then award points and print the leaderboards."""
        self.start()
        self.end()

    def start(self) -> None:
        """Run all laps of the race."""
        if self.status != RaceStatus.NOT_STARTED:
            raise RaceStateError(f"Race cannot start, it is already {self.status.value}")

        self.status = RaceStatus.RUNNING
        for lap in range(1, self.number_of_laps + 1):
            self.current_lap = lap
            logger.debug("Starting lap %d", lap)
            ConsoleOutput.print_lap_start(lap)
            self.run_lap()
        self.status = RaceStatus.FINISHED

    def end(self) -> None:
        """Award points and print the driver and team leaderboards."""
        if self.status != RaceStatus.FINISHED:
            raise RaceStateError(f"Race cannot end, it is {self.status.value}")

        award_points(self.race_results, self.config.points_system)
        ConsoleOutput.print_leaderboard(self.leaderboard())
        ConsoleOutput.print_team_leaderboard(self.team_leaderboard())

    def run_lap(self) -> None:
        """Run one lap for every driver of every team."""
        for team in self.teams:
            for driver, car in team.driver_car_pairs():
                result = self.find_or_add_result(team, driver, car)
                if car.is_pit_stop_needed:
                    self._handle_pit_stop(result)
                else:
                    self._run_lap_for_driver(result)

    def find_or_add_result(self, team: Team, driver: Driver, car: RaceCar) -> Result:
        """Return the driver's result, creating it on the driver's first lap."""
        for result in self.race_results:
            if result.driver is driver:
                return result

        result = Result(team=team, driver=driver, car=car)
        self.race_results.append(result)
        return result

    def leaderboard(self) -> list[Result]:
        """Results ordered by total time, fastest first."""
        return sort_results(self.race_results)

    def team_leaderboard(self) -> list[TeamResult]:
        """Team totals ordered fastest first."""
        return to_sorted_team_results(self.teams, self.race_results)

    @property
    def winner(self) -> Result | None:
        """Fastest result so far, None before the first lap."""
        board = self.leaderboard()
        return board[0] if board else None

    def _handle_pit_stop(self, result: Result) -> None:
        logger.debug("Car %s skips this lap.", result.car.car_number)
        ConsoleOutput.print_pit_stop(result.car.car_number)
        result.car.is_pit_stop_needed = False
        result.pit_stops += 1
        result.add_penalty(self.config.pit_stop_time)

    def _run_lap_for_driver(self, result: Result) -> None:
        outcome: LapOutcome = self.lap_simulator.simulate_lap(result.driver, result.car)

        if not outcome.is_incident:
            result.record_lap(outcome.lap_time)
            ConsoleOutput.print_lap_completed(result.driver.name, outcome.lap_time)
            return

        result.incidents += 1
        logger.warning("%s %s", outcome.message, outcome.flag)
        self._slow_down_lap_times()

    def _slow_down_lap_times(self) -> None:
        # Field-wide caution period
        for result in self.race_results:
            result.add_penalty(self.config.slowdown_time)
