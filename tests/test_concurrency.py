"""Tests for concurrent access to the registry."""

import threading
from concurrent.futures import ThreadPoolExecutor

from tests.conftest import open_ballot

from ballots.errors import DuplicateVote


class TestConcurrentVotes:
    def test_same_identity_records_exactly_one_vote(self, registry, clock):
        ballot_id = open_ballot(registry)
        clock.advance(90)
        barrier = threading.Barrier(16)

        def cast(option_index: int) -> bool:
            barrier.wait()
            try:
                registry.vote(ballot_id, option_index % 3, "owner")
            except DuplicateVote:
                return False
            return True

        with ThreadPoolExecutor(max_workers=16) as pool:
            accepted = list(pool.map(cast, range(16)))

        assert accepted.count(True) == 1
        assert sum(registry.results(ballot_id)) == 1
        assert registry.has_voted(ballot_id, "owner")

    def test_distinct_identities_all_counted(self, registry, clock):
        ballot_id = open_ballot(registry)
        clock.advance(90)
        voters = [f"voter{i}" for i in range(200)]

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(lambda v: registry.vote(ballot_id, hash(v) % 3, v), voters))

        assert sum(registry.results(ballot_id)) == len(voters)
        assert all(registry.has_voted(ballot_id, v) for v in voters)

    def test_readers_never_see_partial_votes(self, registry, clock):
        ballot_id = open_ballot(registry, options=["Yes", "No"])
        clock.advance(90)
        voters = [f"voter{i}" for i in range(300)]
        done = threading.Event()
        mismatches = []

        def read():
            while not done.is_set():
                # Count first: a voter marked after this read can only raise
                # the marked total, never lower it below the count.
                total = sum(registry.results(ballot_id))
                marked = sum(registry.has_voted(ballot_id, v) for v in voters)
                if marked < total:
                    mismatches.append((total, marked))

        reader = threading.Thread(target=read)
        reader.start()
        try:
            for i, voter in enumerate(voters):
                registry.vote(ballot_id, i % 2, voter)
        finally:
            done.set()
            reader.join()

        assert mismatches == []
        assert registry.results(ballot_id) == [150, 150]

    def test_concurrent_creation_assigns_unique_ids(self, registry):
        with ThreadPoolExecutor(max_workers=8) as pool:
            ids = list(pool.map(lambda _: open_ballot(registry), range(50)))

        assert sorted(ids) == list(range(50))
        assert registry.ballot_ids() == list(range(50))
