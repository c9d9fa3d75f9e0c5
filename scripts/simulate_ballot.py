"""Simulate a ballot from creation to final tally.

Opens a ballot on a manual clock, moves time into the voting window, has a
crowd of fake voters (generated with faker using a fixed seed) each cast one
vote for a random option, closes the window and prints the tally as JSON.

Requires the package to be installed first (`pip install -e .`).

Usage:
    python scripts/simulate_ballot.py
    python scripts/simulate_ballot.py --voters 25 --option Tea --option Coffee
    python scripts/simulate_ballot.py -q "Best editor?" --option vim --option emacs -v
"""

import argparse
import json
import logging
import random
import sys
from typing import Any

from faker import Faker

from ballots import BallotError, BallotRegistry, ManualClock

SEED = 20260201
START_TIME = 1_700_000_000
DEFAULT_QUESTION = "What is your favorite color?"
DEFAULT_OPTIONS = ["Red", "Green", "Blue"]

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def generate_voters(count: int, seed: int) -> list[str]:
    """Generate ``count`` distinct fake voter identities."""
    fake = Faker()
    Faker.seed(seed)
    return [fake.unique.user_name() for _ in range(count)]


def run_simulation(
    question: str,
    options: list[str],
    num_voters: int,
    duration: int = 400,
    seed: int = SEED,
) -> dict[str, Any]:
    """Run one ballot end to end and return a JSON-serializable summary.

    Raises:
        BallotError: If the ballot parameters are rejected
    """
    clock = ManualClock(START_TIME)
    registry = BallotRegistry(clock=clock)
    ballot_id = registry.create_ballot(question, options, START_TIME + 60, duration)

    clock.advance(90)
    rng = random.Random(seed)
    choices = {}
    for voter in generate_voters(num_voters, seed):
        option_index = rng.randrange(len(options))
        registry.vote(ballot_id, option_index, voter)
        choices[voter] = options[option_index]

    clock.set(registry.get_ballot(ballot_id).end_time)

    return {
        "ballot": registry.get_ballot(ballot_id).to_dict(),
        "status": registry.status(ballot_id).value,
        "votes": choices,
        "results": registry.results(ballot_id),
        "winners": registry.winners(ballot_id),
        "standings": [p.to_dict() for p in registry.standings(ballot_id)],
    }


def main():
    parser = argparse.ArgumentParser(
        description="Simulate a ballot with fake voters")
    parser.add_argument("-q", "--question", default=DEFAULT_QUESTION,
                        help="Question to ask")
    parser.add_argument("--option", action="append", dest="options",
                        help=f"Answer option, repeatable (default: {DEFAULT_OPTIONS})")
    parser.add_argument("-n", "--voters", type=int, default=10,
                        help="Number of voters (default: 10)")
    parser.add_argument("-d", "--duration", type=int, default=400,
                        help="Voting window in seconds (default: 400)")
    parser.add_argument("--seed", type=int, default=SEED,
                        help=f"Random seed (default: {SEED})")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log registry activity to stderr")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
    )

    try:
        summary = run_simulation(
            args.question,
            args.options or DEFAULT_OPTIONS,
            args.voters,
            duration=args.duration,
            seed=args.seed,
        )
    except BallotError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(json.dumps(summary, indent=2))


if __name__ == "__main__":
    main()
