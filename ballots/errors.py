"""Errors raised by the ballot registry.

The message of each error is part of the public contract: callers match on
``str(error)``, so the messages below must not change.
"""


class BallotError(Exception):
    """Base class for all ballot registry errors."""
    pass


class InvalidBallot(BallotError, ValueError):
    """Raised when a ballot fails validation at creation time."""
    pass


class NotFound(BallotError, LookupError):
    """Raised when a ballot id does not refer to an existing ballot."""

    def __init__(self, ballot_id: int):
        super().__init__(f"Ballot {ballot_id} does not exist")
        self.ballot_id = ballot_id


class InvalidArgument(BallotError, ValueError):
    """Raised when an option index is outside a ballot's options."""
    pass


class VotingNotOpen(BallotError):
    """Raised when a vote is cast before the ballot's start time."""

    def __init__(self, message: str = "Voting has not started yet"):
        super().__init__(message)


class VotingClosed(BallotError):
    """Raised when a vote is cast at or after the ballot's end time."""

    def __init__(self, message: str = "Voting has ended"):
        super().__init__(message)


class DuplicateVote(BallotError):
    """Raised when an identity votes a second time on the same ballot."""

    def __init__(
        self, message: str = "Address has already casted a vote for this question"
    ):
        super().__init__(message)
