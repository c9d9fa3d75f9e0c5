"""The ballot registry: creates ballots, records votes and reports tallies."""

import logging
import threading
from collections.abc import Sequence

from ballots import config
from ballots.clock import Clock, SystemClock
from ballots.errors import (
    DuplicateVote,
    InvalidArgument,
    InvalidBallot,
    NotFound,
    VotingClosed,
    VotingNotOpen,
)
from ballots.models import Ballot, BallotSnapshot, BallotStatus, Placement
from ballots.tally import build_standings, winner_flags

logger = logging.getLogger(__name__)


class BallotRegistry:
    """Owns an ordered collection of ballots.

    Every operation runs under one lock, so a vote's duplicate check, count
    increment and voter mark happen as a single step and readers never see
    half of a vote. Current time comes from the injected clock.

    Example:
        >>> from ballots.clock import ManualClock
        >>> clock = ManualClock(1_000)
        >>> registry = BallotRegistry(clock=clock)
        >>> ballot_id = registry.create_ballot("Color?", ["Red", "Blue"], 1_060, 400)
        >>> _ = clock.advance(90)
        >>> registry.vote(ballot_id, 0, "alice")
        >>> registry.results(ballot_id)
        [1, 0]
    """

    def __init__(self, clock: Clock | None = None):
        self.clock = clock if clock is not None else SystemClock()
        self._ballots: list[Ballot] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._ballots)

    def ballot_ids(self) -> list[int]:
        with self._lock:
            return [ballot.id for ballot in self._ballots]

    def create_ballot(
        self,
        question: str,
        options: Sequence[str],
        start_time: int,
        duration: int,
    ) -> int:
        """Open a new ballot and return its id.

        Args:
            question: The question being asked
            options: Answer labels, at least two
            start_time: Timestamp at which voting opens; must be in the future
            duration: Length of the voting window in seconds, at least 60

        Returns:
            The new ballot's id. Ids start at 0 and only successful
            creations consume one.

        Raises:
            InvalidBallot: If any of the checks above fails
        """
        with self._lock:
            now = self.clock.now()
            if len(options) < config.MIN_OPTIONS:
                raise InvalidBallot("Ballot must have a minimum of two options")
            if start_time <= now:
                raise InvalidBallot("Start time must be in the future")
            if duration < config.MIN_DURATION:
                raise InvalidBallot("Duration must be at least 1 minute")

            ballot = Ballot(
                id=len(self._ballots),
                question=question,
                options=tuple(options),
                start_time=start_time,
                duration=duration,
            )
            self._ballots.append(ballot)

        logger.info(
            "Created ballot %d with %d options, open %d-%d",
            ballot.id, ballot.num_options, ballot.start_time, ballot.end_time,
        )
        return ballot.id

    def vote(self, ballot_id: int, option_index: int, voter: str) -> None:
        """Cast ``voter``'s single vote on a ballot.

        Raises:
            NotFound: If the ballot does not exist
            InvalidArgument: If the option index is out of range
            VotingNotOpen: If the ballot's start time has not been reached
            VotingClosed: If the ballot's voting window has passed
            DuplicateVote: If ``voter`` already voted on this ballot
        """
        with self._lock:
            ballot = self._get(ballot_id)
            self._check_option(ballot, option_index)

            status = ballot.status_at(self.clock.now())
            if status is BallotStatus.PENDING:
                logger.debug("Rejected early vote on ballot %d", ballot_id)
                raise VotingNotOpen()
            if status is BallotStatus.CLOSED:
                logger.debug("Rejected late vote on ballot %d", ballot_id)
                raise VotingClosed()
            if voter in ballot.voted_addresses:
                logger.debug("Rejected repeat vote by %s on ballot %d", voter, ballot_id)
                raise DuplicateVote()

            ballot.vote_counts[option_index] += 1
            ballot.voted_addresses.add(voter)

        logger.info("Recorded vote on ballot %d for option %d", ballot_id, option_index)

    def connect(self, voter: str) -> "VoterSession":
        """Return a session that votes as ``voter``."""
        return VoterSession(self, voter)

    def get_ballot(self, ballot_id: int) -> BallotSnapshot:
        with self._lock:
            return self._get(ballot_id).snapshot()

    def has_voted(self, ballot_id: int, voter: str) -> bool:
        with self._lock:
            return voter in self._get(ballot_id).voted_addresses

    def get_votes(self, ballot_id: int, option_index: int) -> int:
        with self._lock:
            ballot = self._get(ballot_id)
            self._check_option(ballot, option_index)
            return ballot.vote_counts[option_index]

    def results(self, ballot_id: int) -> list[int]:
        """Vote counts per option, index-aligned with the ballot's options.

        Valid at any point in the ballot's life; counts may still grow while
        the ballot is open.
        """
        with self._lock:
            return list(self._get(ballot_id).vote_counts)

    def winners(self, ballot_id: int) -> list[bool]:
        """Flag each option that is tied for the highest count."""
        return winner_flags(self.results(ballot_id))

    def standings(self, ballot_id: int) -> list[Placement]:
        with self._lock:
            ballot = self._get(ballot_id)
            options, counts = ballot.options, list(ballot.vote_counts)
        return build_standings(options, counts)

    def status(self, ballot_id: int) -> BallotStatus:
        with self._lock:
            return self._get(ballot_id).status_at(self.clock.now())

    def _get(self, ballot_id: int) -> Ballot:
        # Callers must hold the lock
        if isinstance(ballot_id, bool) or not isinstance(ballot_id, int):
            raise NotFound(ballot_id)
        if not 0 <= ballot_id < len(self._ballots):
            raise NotFound(ballot_id)
        return self._ballots[ballot_id]

    @staticmethod
    def _check_option(ballot: Ballot, option_index: int) -> None:
        if not ballot.has_option(option_index):
            raise InvalidArgument(
                f"Option index {option_index} is out of range for ballot "
                f"{ballot.id} with {ballot.num_options} options"
            )


class VoterSession:
    """A registry bound to one caller identity."""

    def __init__(self, registry: BallotRegistry, voter: str):
        self.registry = registry
        self.voter = voter

    def vote(self, ballot_id: int, option_index: int) -> None:
        self.registry.vote(ballot_id, option_index, self.voter)

    def has_voted(self, ballot_id: int) -> bool:
        return self.registry.has_voted(ballot_id, self.voter)
