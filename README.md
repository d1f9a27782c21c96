# holdem

A small Texas Hold'em engine. It models the deck, the players and their
betting actions, and the pots. It also ranks poker hands to pick out the
winners.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Cards and decks

`holdem.deck` provides `Suit`, `Value`, `Card`, `CardStack`, `Deck` and
`EmptyDeckError`.

```python
from holdem.deck import Card, Deck, Suit, Value

deck = Deck.full()          # 52 cards, unshuffled, Ace of Spades first
deck.shuffle()
card = deck.pop()
print(card)                 # e.g. "KING of HEARTS ♥"
print(len(deck))            # 51
```

- A `CardStack` adds cards at the end with `push` and takes them from the
  front with `pop`.
- Calling `pop` on an empty stack raises `EmptyDeckError`, which is a
  subclass of `IndexError`.
- You can iterate over a stack, and `len` gives the number of cards it holds.
- `Deck.shuffle` accepts an optional `random.Random` instance for repeatable
  shuffles.
- A deck can only be shuffled while it holds all 52 cards. Otherwise
  `shuffle` raises `ValueError`.
- `Value.ACE` is 1, so the ace ranks low.

## Evaluating hands

`holdem.evaluator` picks the best five-card hand out of a set of cards and
compares hands.

```python
from holdem.deck import Card, Suit, Value
from holdem.evaluator import HandRank, best_hand, compare_hands

cards = [
    Card(Suit.HEARTS, Value.NINE), Card(Suit.HEARTS, Value.TEN),
    Card(Suit.HEARTS, Value.JACK), Card(Suit.HEARTS, Value.QUEEN),
    Card(Suit.HEARTS, Value.KING), Card(Suit.SPADES, Value.ACE),
    Card(Suit.CLUBS, Value.TWO),
]
hand = best_hand(cards)
assert hand.rank is HandRank.STRAIGHT_FLUSH
```

- `five_card_combinations(cards)` lists every five-card selection. It raises
  `ValueError` when fewer than five cards are given.
- `evaluate_five_card_hand(cards)` ranks exactly five cards. It returns a
  `Hand` with its `rank`, the `values` that decide ties, and the `kickers`.
- `compare_ranked_hands(first, second)` compares two `Hand` objects and
  returns `1`, `-1` or `0`.
- `compare_hands(first_cards, second_cards)` returns `1` if the first set of
  cards wins, `-1` if the second wins and `0` for a tie.
- `evaluate_game(players, community)` returns the players, leaving out those
  who folded, that hold the best hand with the community cards.

## Playing a round

`holdem.game.Game` takes a round through these stages in order:

1. `initialise`
2. `start_game`
3. `pre_flop`
4. `flop`
5. `turn`
6. `river`
7. `determine_winner`

Players act through the `holdem.player.Player` methods `call`, `check`,
`raise_by`, `all_in` and `fold`.

```python
from holdem.game import Game

game = Game(1000, 50)       # starting money, big blind
game.initialise()
game.add_player("Alice")
game.add_player("Bob")
for player in game.players:
    player.is_ready = True

game.start_game()           # deals two cards each and posts the blinds
game.pre_flop()

alice = game.get_player("Alice", 0)
bob = game.get_player("Bob", 1)
alice.call(game)
bob.check(game)
game.flop()                 # three community cards
```

Moving to a stage from the wrong state raises
`holdem.game.InvalidTransitionError`. It is also raised when the current
betting round is not complete, which `can_transition()` reports. A round is
complete once every player has folded, or has called or checked and matched
the highest bet.

`add_bets_to_pots` moves the players' bets into the pots: the main pot, plus
any side pots created by all-in players. If only one player has not folded,
that player takes every pot.

`determine_winner` works in four steps:

1. It shares each pot out among the best hands of the players eligible for
   that pot.
2. It removes players left with no money.
3. It returns the winners of the hand.
4. It reports each step to the `holdem.game` logger at INFO level.

`check` and `raise_by` return whether the action was allowed.
`player_raise(index, amount)` raises on behalf of the player in that seat.

## What it does not do

`holdem` is a library only. It has:

- no command-line program and no interactive table to play at;
- no enforcement of whose turn it is;
- no support for playing more than one hand with the same `Game`.

Your own code drives a round by calling the methods above.