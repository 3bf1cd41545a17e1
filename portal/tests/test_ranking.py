"""Tests for podium ranking."""

from __future__ import annotations

from django.test import SimpleTestCase

from portal.ranking import (
    RankedVoteItem,
    VoteItem,
    arrange_podium,
    podium,
    rank_top,
)


def items(*totals):
    return [VoteItem(id=index, vote_total=total) for index, total in enumerate(totals, start=1)]


def summary(entries):
    return [(entry.id, entry.rank) for entry in entries]


class RankTopTests(SimpleTestCase):
    """Ranks follow vote totals; ties keep input order."""

    def test_ranks_by_vote_total(self) -> None:
        ranked = rank_top(items(10, 30, 20))
        self.assertEqual(summary(ranked), [(2, 1), (3, 2), (1, 3)])

    def test_takes_only_top_n(self) -> None:
        ranked = rank_top(items(5, 9, 1, 7, 3), n=2)
        self.assertEqual(summary(ranked), [(2, 1), (4, 2)])

    def test_ties_keep_input_order(self) -> None:
        ranked = rank_top(items(5, 5))
        self.assertEqual(summary(ranked), [(1, 1), (2, 2)])

    def test_all_equal_totals(self) -> None:
        ranked = rank_top(items(0, 0, 0, 0))
        self.assertEqual(summary(ranked), [(1, 1), (2, 2), (3, 3)])

    def test_tie_below_leader(self) -> None:
        ranked = rank_top(items(4, 8, 4))
        self.assertEqual(summary(ranked), [(2, 1), (1, 2), (3, 3)])

    def test_empty_input(self) -> None:
        self.assertEqual(rank_top([]), [])

    def test_non_positive_n(self) -> None:
        self.assertEqual(rank_top(items(1, 2), n=0), [])

    def test_accepts_iterators(self) -> None:
        ranked = rank_top(iter(items(1, 2)))
        self.assertEqual(summary(ranked), [(2, 1), (1, 2)])


class ArrangePodiumTests(SimpleTestCase):
    """Display order is [2nd, 1st, 3rd] with absent slots omitted."""

    def test_full_podium(self) -> None:
        arranged = podium(items(10, 30, 20))
        self.assertEqual(summary(arranged), [(3, 2), (2, 1), (1, 3)])

    def test_two_items(self) -> None:
        arranged = podium(items(5, 5))
        self.assertEqual(summary(arranged), [(2, 2), (1, 1)])

    def test_single_item(self) -> None:
        arranged = podium(items(7))
        self.assertEqual(summary(arranged), [(1, 1)])

    def test_empty(self) -> None:
        self.assertEqual(podium([]), [])

    def test_ranks_beyond_three_follow_podium(self) -> None:
        arranged = podium(items(50, 40, 30, 20, 10), n=5)
        self.assertEqual(
            summary(arranged), [(2, 2), (1, 1), (3, 3), (4, 4), (5, 5)])

    def test_arrange_ignores_input_order(self) -> None:
        ranked = [
            RankedVoteItem(item=VoteItem('c', 1), rank=3),
            RankedVoteItem(item=VoteItem('a', 9), rank=1),
        ]
        self.assertEqual(summary(arrange_podium(ranked)), [('a', 1), ('c', 3)])

    def test_ranked_item_as_dict(self) -> None:
        entry = RankedVoteItem(item=VoteItem('x', 12), rank=1)
        self.assertEqual(entry.as_dict(), {'id': 'x', 'vote_total': 12, 'rank': 1})


class VoteItemPayloadTests(SimpleTestCase):

    def test_snake_and_camel_case_totals(self) -> None:
        self.assertEqual(VoteItem.from_payload({'id': 1, 'vote_total': 3}), VoteItem(1, 3))
        self.assertEqual(VoteItem.from_payload({'id': 2, 'voteTotal': 4}), VoteItem(2, 4))

    def test_rejects_invalid_payloads(self) -> None:
        invalid = [
            {'vote_total': 1},
            {'id': 1},
            {'id': 1, 'vote_total': '3'},
            {'id': 1, 'vote_total': 2.5},
            {'id': 1, 'vote_total': True},
            {'id': 1, 'vote_total': -1},
            ['id', 1],
        ]
        for payload in invalid:
            with self.subTest(payload=payload):
                with self.assertRaises(ValueError):
                    VoteItem.from_payload(payload)
