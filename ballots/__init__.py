"""In-memory registry of time-boxed ballots."""

from .clock import Clock, ManualClock, SystemClock
from .errors import (
    BallotError,
    DuplicateVote,
    InvalidArgument,
    InvalidBallot,
    NotFound,
    VotingClosed,
    VotingNotOpen,
)
from .models import Ballot, BallotSnapshot, BallotStatus, Placement
from .registry import BallotRegistry, VoterSession

__all__ = [
    "Ballot",
    "BallotError",
    "BallotRegistry",
    "BallotSnapshot",
    "BallotStatus",
    "Clock",
    "DuplicateVote",
    "InvalidArgument",
    "InvalidBallot",
    "ManualClock",
    "NotFound",
    "Placement",
    "SystemClock",
    "VoterSession",
    "VotingClosed",
    "VotingNotOpen",
]
