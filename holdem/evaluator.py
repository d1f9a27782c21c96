"""Ranking of poker hands and selection of the winners of a game."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from functools import cmp_to_key
from itertools import combinations
from typing import Iterable, List, Sequence, Tuple

from holdem.deck import Card
from holdem.player import Player, PlayerStatus

HAND_SIZE = 5


class HandRank(IntEnum):
    """Strength category of a five-card hand."""

    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8

    def __str__(self) -> str:
        return _RANK_NAMES[self]


_RANK_NAMES = {
    HandRank.HIGH_CARD: "High Card",
    HandRank.ONE_PAIR: "One Pair",
    HandRank.TWO_PAIR: "Two Pair",
    HandRank.THREE_OF_A_KIND: "Three of a Kind",
    HandRank.STRAIGHT: "Straight",
    HandRank.FLUSH: "Flush",
    HandRank.FULL_HOUSE: "Full House",
    HandRank.FOUR_OF_A_KIND: "Four of a Kind",
    HandRank.STRAIGHT_FLUSH: "Straight Flush",
}


def _format_ints(numbers: Iterable[int]) -> str:
    return "[" + " ".join(str(n) for n in numbers) + "]"


@dataclass(frozen=True)
class Hand:
    """A ranked hand with the values that decide ties."""

    rank: HandRank
    values: Tuple[int, ...] = ()
    kickers: Tuple[int, ...] = ()

    def __str__(self) -> str:
        return (
            f"{self.rank} with {_format_ints(self.values)}, "
            f"kickers {_format_ints(self.kickers)}"
        )


def five_card_combinations(cards: Sequence[Card]) -> List[Tuple[Card, ...]]:
    """Return every five-card selection from the given cards."""
    if len(cards) < HAND_SIZE:
        raise ValueError(f"need at least {HAND_SIZE} cards, got {len(cards)}")
    return list(combinations(cards, HAND_SIZE))


def evaluate_five_card_hand(cards: Iterable[Card]) -> Hand:
    """Rank exactly five cards."""
    cards = list(cards)
    if len(cards) != HAND_SIZE:
        raise ValueError(f"a hand has {HAND_SIZE} cards, got {len(cards)}")

    is_flush = len({card.suit for card in cards}) == 1
    values = sorted((int(card.value) for card in cards), reverse=True)
    is_straight = all(high - low == 1 for high, low in zip(values, values[1:]))

    counts = Counter(values)
    groups = sorted(counts, key=lambda v: (counts[v], v), reverse=True)
    top_count = counts[groups[0]]
    second_count = counts[groups[1]] if len(groups) > 1 else 0

    if is_flush and is_straight:
        return Hand(HandRank.STRAIGHT_FLUSH, (values[0],))
    if top_count == 4:
        return Hand(HandRank.FOUR_OF_A_KIND, (groups[0],), (groups[1],))
    if top_count == 3 and second_count == 2:
        return Hand(HandRank.FULL_HOUSE, (groups[0], groups[1]))
    if is_flush:
        return Hand(HandRank.FLUSH, tuple(values))
    if is_straight:
        return Hand(HandRank.STRAIGHT, (values[0],))
    if top_count == 3:
        return Hand(HandRank.THREE_OF_A_KIND, (groups[0],), tuple(groups[1:3]))
    if top_count == 2 and second_count == 2:
        return Hand(HandRank.TWO_PAIR, (groups[0], groups[1]), (groups[2],))
    if top_count == 2:
        return Hand(HandRank.ONE_PAIR, (groups[0],), tuple(groups[1:4]))
    return Hand(HandRank.HIGH_CARD, tuple(values[:1]), tuple(values[1:]))


def _compare_sequences(first: Sequence[int], second: Sequence[int]) -> int:
    for a, b in zip(first, second):
        if a != b:
            return 1 if a > b else -1
    return 0


def compare_ranked_hands(first: Hand, second: Hand) -> int:
    """Return 1 if first wins, -1 if second wins and 0 on a tie."""
    if first.rank != second.rank:
        return 1 if first.rank > second.rank else -1
    return _compare_sequences(first.values, second.values) or _compare_sequences(
        first.kickers, second.kickers
    )


def best_hand(cards: Sequence[Card]) -> Hand:
    """Return the strongest five-card hand that can be made from the cards."""
    hands = (evaluate_five_card_hand(combo) for combo in five_card_combinations(cards))
    return max(hands, key=cmp_to_key(compare_ranked_hands))


def compare_hands(first_cards: Sequence[Card], second_cards: Sequence[Card]) -> int:
    """Compare the best hands of two card sets: 1, -1 or 0 on a tie."""
    return compare_ranked_hands(best_hand(first_cards), best_hand(second_cards))


def _combined_hand(player: Player, community: Iterable[Card]) -> List[Card]:
    return [*community, *player.hand]


def evaluate_game(players: Iterable[Player], community: Iterable[Card]) -> List[Player]:
    """Return the players, not folded, who hold the best hand with the community cards."""
    community = list(community)
    winners: List[Player] = []
    for player in players:
        if player.status == PlayerStatus.FOLDED:
            continue
        if not winners:
            winners = [player]
            continue
        result = compare_hands(
            _combined_hand(player, community), _combined_hand(winners[0], community)
        )
        if result > 0:
            winners = [player]
        elif result == 0:
            winners.append(player)
    return winners