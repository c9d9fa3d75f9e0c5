"""Tally helpers that turn raw vote counts into winners and standings."""

from collections.abc import Sequence

from ballots.models import Placement


def winner_flags(counts: Sequence[int]) -> list[bool]:
    """Mark every option whose count equals the highest count.

    This is a maximum scan with multiple matches, not an argmax: tied options
    are all winners, and when nobody has voted every option is a winner.
    """
    if not counts:
        return []
    highest = max(counts)
    return [count == highest for count in counts]


def build_standings(options: Sequence[str], counts: Sequence[int]) -> list[Placement]:
    """Rank options by vote count, highest first.

    Options with equal counts share a rank and keep their option order.
    """
    # Group by count
    count_groups: dict[int, list[tuple[str, int]]] = {}
    for name, count in zip(options, counts):
        count_groups.setdefault(count, []).append((name, count))

    ordered: list[tuple[str, int] | list[tuple[str, int]]] = []
    for count in sorted(count_groups.keys(), reverse=True):
        group = count_groups[count]
        if len(group) == 1:
            ordered.append(group[0])
        else:
            ordered.append(group)

    return Placement.build_ranking(ordered)
