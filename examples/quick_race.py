#!/usr/bin/env python3
"""Quick race example with a small synthetic grid.

Runs a short race between four teams, one of them without a main sponsor,
and prints the driver and team leaderboards.

Usage:
    python examples/quick_race.py [--laps N] [--seed SEED]

Examples:
    python examples/quick_race.py --laps 10 --seed 42
    python examples/quick_race.py --breakdown 20 --collision 10 --verbose
"""

import argparse
import logging
import sys
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pydantic import ValidationError

from f1race import Driver, F1RaceError, Race, RaceCar, RaceConfig, Sponsor, Team
from f1race.log import configure_logging


def create_grid() -> list[Team]:
    """Create a small grid of teams."""

    # (team, sponsor or None, [(driver, car number), ...])
    teams_data = [
        ("Red Bull", ("Oracle", 250000.0), [("Max Verstappen", 1), ("Sergio Perez", 11)]),
        ("Aston Martin", ("Cognizant", 150000.0), [("Fernando Alonso", 14), ("Lance Stroll", 18)]),
        ("Mercedes", None, [("Lewis Hamilton", 44), ("George Russell", 63)]),
        ("Ferrari", ("Shell", 120000.0), [("Charles Leclerc", 16), ("Carlos Sainz", 55)]),
    ]

    teams = []
    for team_name, sponsor_data, entries in teams_data:
        sponsor = None
        if sponsor_data is not None:
            sponsor = Sponsor(name=sponsor_data[0], amount=sponsor_data[1])

        teams.append(Team(
            name=team_name,
            drivers=[Driver(name=name) for name, _ in entries],
            cars=[RaceCar(car_number=number) for _, number in entries],
            main_sponsor=sponsor,
        ))

    return teams


def main():
    parser = argparse.ArgumentParser(description="Run a quick F1 race simulation")
    parser.add_argument(
        "--laps",
        type=int,
        default=5,
        help="Number of laps (default: 5)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for a reproducible race",
    )
    parser.add_argument(
        "--breakdown",
        type=int,
        default=5,
        help="Breakdown chance per lap in percent (default: 5)",
    )
    parser.add_argument(
        "--collision",
        type=int,
        default=2,
        help="Collision chance per lap in percent (default: 2)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Also log lap events at debug level, not only incidents",
    )
    args = parser.parse_args()

    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        config = RaceConfig(
            breakdown_percent=args.breakdown,
            collision_percent=args.collision,
            seed=args.seed,
        )
        race = Race(number_of_laps=args.laps, teams=create_grid(), config=config)
    except (ValidationError, F1RaceError) as e:
        print(f"Invalid race configuration: {e}")
        return 1

    print(f"F1 Race Simulation - {args.laps} laps, {len(race.teams)} teams")
    print("=" * 50)

    race.run_race()

    winner = race.winner
    if winner is not None:
        print(f"\nWinner: {winner.driver.name} ({winner.driver.points} points)")

    return 0


if __name__ == "__main__":
    sys.exit(main())
