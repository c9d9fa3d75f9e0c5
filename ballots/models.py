"""Core data models for ballots and their tallies."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Self


class BallotStatus(Enum):
    """Where a ballot sits in its voting window at a given moment."""
    PENDING = "pending"
    OPEN = "open"
    CLOSED = "closed"


@dataclass
class Ballot:
    """A single poll with a question, fixed options and a running tally.

    Only ``vote_counts`` and ``voted_addresses`` change after creation. The
    registry owns every Ballot and never hands one out; readers get a
    ``BallotSnapshot`` or a copy of the counts instead.

    Attributes:
        id: Sequential handle assigned by the registry
        question: The question being asked
        options: Answer labels; their order defines the option indexes
        start_time: Timestamp (seconds) at which voting opens
        duration: Length of the voting window in seconds
        vote_counts: Votes per option, index-aligned with ``options``
        voted_addresses: Identities that have already voted on this ballot

    Example:
        >>> ballot = Ballot(
        ...     id=0,
        ...     question="What is your favorite color?",
        ...     options=("Red", "Green", "Blue"),
        ...     start_time=1_060,
        ...     duration=400,
        ... )
        >>> ballot.vote_counts
        [0, 0, 0]
    """
    id: int
    question: str
    options: tuple[str, ...]
    start_time: int
    duration: int
    vote_counts: list[int] = field(default_factory=list)
    voted_addresses: set[str] = field(default_factory=set)

    def __post_init__(self):
        self.options = tuple(self.options)
        if not self.vote_counts:
            self.vote_counts = [0] * len(self.options)

    @property
    def end_time(self) -> int:
        """First timestamp at which votes are no longer accepted."""
        return self.start_time + self.duration

    @property
    def num_options(self) -> int:
        return len(self.options)

    def status_at(self, now: int) -> BallotStatus:
        if now < self.start_time:
            return BallotStatus.PENDING
        if now < self.end_time:
            return BallotStatus.OPEN
        return BallotStatus.CLOSED

    def has_option(self, option_index: int) -> bool:
        if isinstance(option_index, bool) or not isinstance(option_index, int):
            return False
        return 0 <= option_index < len(self.options)

    def snapshot(self) -> "BallotSnapshot":
        return BallotSnapshot(
            id=self.id,
            question=self.question,
            options=self.options,
            start_time=self.start_time,
            duration=self.duration,
        )


@dataclass(frozen=True)
class BallotSnapshot:
    """Read-only view of a ballot's immutable fields."""
    id: int
    question: str
    options: tuple[str, ...]
    start_time: int
    duration: int

    @property
    def end_time(self) -> int:
        return self.start_time + self.duration

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "id": self.id,
            "question": self.question,
            "options": list(self.options),
            "start_time": self.start_time,
            "duration": self.duration,
            "end_time": self.end_time,
        }


@dataclass
class Placement:
    """An option's placement in a ballot's standings.

    Attributes:
        name: Option label
        rank: 1-indexed placement (tied options share the same rank)
        tied: Whether this option is tied with others at this rank
        votes: Number of votes the option received
    """
    name: str
    rank: int
    tied: bool
    votes: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "rank": self.rank,
            "tied": self.tied,
            "votes": self.votes,
        }

    @classmethod
    def build_ranking(
        cls, ordered: list[tuple[str, int] | list[tuple[str, int]]]
    ) -> list[Self]:
        """Build a list of Placements from an ordered list.

        Args:
            ordered: (name, votes) pairs in order from 1st to last place.
                Each element is either a single pair or a list of pairs
                for tied options.

        Returns:
            List of Placement objects with correct ranks and tied flags.
        """
        placements = []
        rank = 1
        for entry in ordered:
            if isinstance(entry, list):
                for name, votes in entry:
                    placements.append(cls(name=name, rank=rank, tied=True, votes=votes))
                rank += len(entry)
            else:
                name, votes = entry
                placements.append(cls(name=name, rank=rank, tied=False, votes=votes))
                rank += 1

        return placements
