"""
Vote podium ranking
===================

Turns raw vote totals into the top-N ranking shown on the vote podium:
- Items are ordered by vote total, highest first
- Equal totals keep their input order (earlier item ranks higher)
- Ranks 1..n are assigned in that order
- The podium displays [2nd, 1st, 3rd]: winner in the center

Python's sorted() is guaranteed stable, including with reverse=True, which
is what makes the input-order tie-break deterministic.
"""

from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping
import logging

logger = logging.getLogger(__name__)

DEFAULT_PODIUM_SIZE = 3

# Display position of ranks 1-3 on the podium: left, center, right
PODIUM_ORDER = (2, 1, 3)


@dataclass(frozen=True)
class VoteItem:
    """A votable item as supplied by the vote data source."""

    id: Any
    vote_total: int

    @classmethod
    def from_payload(cls, payload: Mapping) -> 'VoteItem':
        """
        Build a VoteItem from an API record.

        Accepts 'vote_total' or the camel-case 'voteTotal' key.

        Raises:
            ValueError: missing id, missing/non-integer/negative total
        """
        if not isinstance(payload, Mapping):
            raise ValueError("Vote item must be an object.")
        if payload.get('id') is None:
            raise ValueError("Vote item is missing 'id'.")

        total = payload.get('vote_total', payload.get('voteTotal'))
        # bool is an int subclass; reject it explicitly
        if isinstance(total, bool) or not isinstance(total, int):
            raise ValueError(f"Vote item {payload['id']!r} has no integer vote total.")
        if total < 0:
            raise ValueError(f"Vote item {payload['id']!r} has a negative vote total.")

        return cls(id=payload['id'], vote_total=total)


@dataclass(frozen=True)
class RankedVoteItem:
    """A VoteItem with its rank for one render pass (1 = most votes)."""

    item: VoteItem
    rank: int

    @property
    def id(self):
        return self.item.id

    @property
    def vote_total(self):
        return self.item.vote_total

    def as_dict(self):
        return {'id': self.id, 'vote_total': self.vote_total, 'rank': self.rank}


def rank_top(items: Iterable[VoteItem], n: int = DEFAULT_PODIUM_SIZE) -> List[RankedVoteItem]:
    """
    Rank the n items with the most votes.

    Args:
        items: Vote items in source order (the order decides ties)
        n: Number of ranks to assign

    Returns:
        RankedVoteItems in rank order (rank 1 first). Shorter than n when
        fewer items exist; empty for no items or n <= 0.
    """
    if n <= 0:
        return []

    ordered = sorted(items, key=lambda item: item.vote_total, reverse=True)
    return [
        RankedVoteItem(item=item, rank=position)
        for position, item in enumerate(ordered[:n], start=1)
    ]


def arrange_podium(ranked: Iterable[RankedVoteItem]) -> List[RankedVoteItem]:
    """
    Arrange ranked items for podium display: [rank 2, rank 1, rank 3].

    Missing ranks are omitted, never padded. Ranks beyond 3 follow the
    podium in rank order.
    """
    by_rank = {entry.rank: entry for entry in ranked}
    podium = [by_rank[rank] for rank in PODIUM_ORDER if rank in by_rank]
    podium.extend(by_rank[rank] for rank in sorted(by_rank) if rank not in PODIUM_ORDER)
    return podium


def podium(items: Iterable[VoteItem], n: int = DEFAULT_PODIUM_SIZE) -> List[RankedVoteItem]:
    """Rank the top n items and arrange them for podium display."""
    arranged = arrange_podium(rank_top(items, n))
    logger.debug(f"Podium arranged: {[(entry.id, entry.rank) for entry in arranged]}")
    return arranged
