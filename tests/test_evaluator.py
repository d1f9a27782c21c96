import pytest

from holdem.deck import Card, Suit, Value
from holdem.evaluator import (
    Hand,
    HandRank,
    best_hand,
    compare_hands,
    compare_ranked_hands,
    evaluate_five_card_hand,
    evaluate_game,
    five_card_combinations,
)
from holdem.player import Player


def card(value, suit):
    return Card(suit=suit, value=value)


V = Value
S = Suit

RANKING_CASES = [
    (
        "straight flush",
        [card(V.NINE, S.HEARTS), card(V.TEN, S.HEARTS), card(V.JACK, S.HEARTS),
         card(V.QUEEN, S.HEARTS), card(V.KING, S.HEARTS), card(V.ACE, S.SPADES),
         card(V.TWO, S.CLUBS)],
        HandRank.STRAIGHT_FLUSH,
    ),
    (
        "four of a kind",
        [card(V.TEN, S.SPADES), card(V.TEN, S.HEARTS), card(V.TEN, S.CLUBS),
         card(V.TEN, S.DIAMONDS), card(V.ACE, S.HEARTS), card(V.FIVE, S.SPADES),
         card(V.THREE, S.CLUBS)],
        HandRank.FOUR_OF_A_KIND,
    ),
    (
        "full house",
        [card(V.QUEEN, S.SPADES), card(V.QUEEN, S.HEARTS), card(V.QUEEN, S.CLUBS),
         card(V.JACK, S.DIAMONDS), card(V.JACK, S.HEARTS), card(V.TWO, S.SPADES),
         card(V.NINE, S.CLUBS)],
        HandRank.FULL_HOUSE,
    ),
    (
        "flush",
        [card(V.TWO, S.SPADES), card(V.FIVE, S.SPADES), card(V.EIGHT, S.SPADES),
         card(V.JACK, S.SPADES), card(V.KING, S.SPADES), card(V.THREE, S.CLUBS),
         card(V.FOUR, S.HEARTS)],
        HandRank.FLUSH,
    ),
    (
        "straight ace low",
        [card(V.ACE, S.DIAMONDS), card(V.TWO, S.SPADES), card(V.THREE, S.CLUBS),
         card(V.FOUR, S.HEARTS), card(V.FIVE, S.DIAMONDS), card(V.TEN, S.SPADES),
         card(V.KING, S.CLUBS)],
        HandRank.STRAIGHT,
    ),
    (
        "three of a kind",
        [card(V.NINE, S.SPADES), card(V.NINE, S.HEARTS), card(V.NINE, S.DIAMONDS),
         card(V.TWO, S.CLUBS), card(V.FIVE, S.HEARTS), card(V.SIX, S.SPADES),
         card(V.JACK, S.CLUBS)],
        HandRank.THREE_OF_A_KIND,
    ),
    (
        "two pair",
        [card(V.ACE, S.SPADES), card(V.ACE, S.CLUBS), card(V.KING, S.HEARTS),
         card(V.KING, S.DIAMONDS), card(V.FIVE, S.CLUBS), card(V.NINE, S.SPADES),
         card(V.THREE, S.HEARTS)],
        HandRank.TWO_PAIR,
    ),
    (
        "one pair",
        [card(V.QUEEN, S.SPADES), card(V.QUEEN, S.DIAMONDS), card(V.TEN, S.CLUBS),
         card(V.NINE, S.HEARTS), card(V.FOUR, S.SPADES), card(V.TWO, S.DIAMONDS),
         card(V.SIX, S.CLUBS)],
        HandRank.ONE_PAIR,
    ),
    (
        "high card",
        [card(V.TWO, S.CLUBS), card(V.FOUR, S.HEARTS), card(V.SIX, S.DIAMONDS),
         card(V.NINE, S.SPADES), card(V.JACK, S.CLUBS), card(V.QUEEN, S.HEARTS),
         card(V.ACE, S.DIAMONDS)],
        HandRank.HIGH_CARD,
    ),
]


@pytest.mark.parametrize(
    "cards, expected", [(c, e) for _, c, e in RANKING_CASES], ids=[n for n, _, _ in RANKING_CASES]
)
def test_best_hand_rankings(cards, expected):
    assert best_hand(cards).rank == expected


def test_compare_hands_trips_beat_pair():
    hand1 = [card(V.TEN, S.SPADES), card(V.TEN, S.HEARTS), card(V.TEN, S.DIAMONDS),
             card(V.THREE, S.CLUBS), card(V.FIVE, S.HEARTS), card(V.NINE, S.SPADES),
             card(V.KING, S.CLUBS)]
    hand2 = [card(V.ACE, S.SPADES), card(V.ACE, S.CLUBS), card(V.EIGHT, S.HEARTS),
             card(V.FOUR, S.DIAMONDS), card(V.SIX, S.SPADES), card(V.JACK, S.CLUBS),
             card(V.TWO, S.HEARTS)]
    assert compare_hands(hand1, hand2) == 1
    assert compare_hands(hand2, hand1) == -1


COMMUNITY = [card(V.TEN, S.SPADES), card(V.JACK, S.HEARTS), card(V.QUEEN, S.SPADES),
             card(V.KING, S.SPADES), card(V.NINE, S.SPADES)]


def make_player(name, *cards):
    player = Player(name, 1000)
    for c in cards:
        player.hand.push(c)
    return player


def test_evaluate_game_straight_flush_wins():
    alice = make_player("Alice", card(V.EIGHT, S.SPADES), card(V.SEVEN, S.SPADES))
    bob = make_player("Bob", card(V.ACE, S.DIAMONDS), card(V.TWO, S.CLUBS))
    winners = evaluate_game([alice, bob], COMMUNITY)
    assert [w.name for w in winners] == ["Alice"]


def test_evaluate_game_skips_folded_player():
    alice = make_player("Alice", card(V.EIGHT, S.SPADES), card(V.SEVEN, S.SPADES))
    bob = make_player("Bob", card(V.ACE, S.DIAMONDS), card(V.TWO, S.CLUBS))
    alice.fold()
    winners = evaluate_game([alice, bob], COMMUNITY)
    assert [w.name for w in winners] == ["Bob"]


def test_evaluate_game_tie_returns_all_winners():
    community = [card(V.TEN, S.SPADES), card(V.JACK, S.SPADES), card(V.QUEEN, S.SPADES),
                 card(V.KING, S.SPADES), card(V.NINE, S.SPADES)]
    alice = make_player("Alice", card(V.TWO, S.HEARTS), card(V.THREE, S.DIAMONDS))
    bob = make_player("Bob", card(V.FOUR, S.CLUBS), card(V.FIVE, S.HEARTS))
    winners = evaluate_game([alice, bob], community)
    assert [w.name for w in winners] == ["Alice", "Bob"]


def test_evaluate_game_no_players():
    assert evaluate_game([], COMMUNITY) == []


def test_ace_counts_low_so_broadway_is_not_a_straight():
    cards = [card(V.ACE, S.SPADES), card(V.KING, S.HEARTS), card(V.QUEEN, S.CLUBS),
             card(V.JACK, S.DIAMONDS), card(V.TEN, S.SPADES)]
    assert evaluate_five_card_hand(cards) == Hand(HandRank.HIGH_CARD, (13,), (12, 11, 10, 1))


def test_full_house_values():
    cards = [card(V.QUEEN, S.SPADES), card(V.QUEEN, S.HEARTS), card(V.QUEEN, S.CLUBS),
             card(V.JACK, S.DIAMONDS), card(V.JACK, S.HEARTS)]
    assert evaluate_five_card_hand(cards) == Hand(HandRank.FULL_HOUSE, (12, 11))


def test_one_pair_kickers():
    cards = [card(V.QUEEN, S.SPADES), card(V.QUEEN, S.DIAMONDS), card(V.TEN, S.CLUBS),
             card(V.NINE, S.HEARTS), card(V.FOUR, S.SPADES)]
    assert evaluate_five_card_hand(cards) == Hand(HandRank.ONE_PAIR, (12,), (10, 9, 4))


def test_best_high_card_hand():
    cards = RANKING_CASES[-1][1]
    assert best_hand(cards) == Hand(HandRank.HIGH_CARD, (12,), (11, 9, 6, 4))


def test_evaluate_five_card_hand_requires_five_cards():
    with pytest.raises(ValueError):
        evaluate_five_card_hand(COMMUNITY[:4])


def test_five_card_combinations_of_seven():
    cards = RANKING_CASES[0][1]
    combos = five_card_combinations(cards)
    assert len(combos) == 21
    assert all(len(combo) == 5 for combo in combos)
    assert len({frozenset(combo) for combo in combos}) == 21


def test_five_card_combinations_too_few_cards():
    with pytest.raises(ValueError):
        five_card_combinations(COMMUNITY[:3])


def test_compare_ranked_hands_kickers_decide():
    first = Hand(HandRank.ONE_PAIR, (12,), (10, 9, 5))
    second = Hand(HandRank.ONE_PAIR, (12,), (10, 9, 4))
    assert compare_ranked_hands(first, second) == 1
    assert compare_ranked_hands(second, first) == -1
    assert compare_ranked_hands(first, first) == 0


def test_compare_ranked_hands_rank_first():
    assert compare_ranked_hands(Hand(HandRank.FLUSH, (7, 5, 4, 3, 2)),
                                Hand(HandRank.STRAIGHT, (13,))) == 1


def test_hand_string():
    hand = Hand(HandRank.TWO_PAIR, (13, 1), (9,))
    assert str(hand) == "Two Pair with [13 1], kickers [9]"