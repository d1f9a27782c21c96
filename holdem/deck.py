"""Playing cards, stacks of cards and the 52-card deck."""

from __future__ import annotations

import random
from collections import deque
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator, Optional

DECK_SIZE = 52


class EmptyDeckError(IndexError):
    """Raised when a card is taken from an empty stack."""


class Suit(IntEnum):
    """Suit of a card."""

    SPADES = 0
    HEARTS = 1
    DIAMONDS = 2
    CLUBS = 3

    def __str__(self) -> str:
        return self.name

    @property
    def symbol(self) -> str:
        """The Unicode symbol of the suit."""
        return _SUIT_SYMBOLS[self]


_SUIT_SYMBOLS = {
    Suit.SPADES: "♠",
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
}


class Value(IntEnum):
    """Face value of a card; the ace counts as one."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Card:
    """A single playing card."""

    suit: Suit
    value: Value

    def __str__(self) -> str:
        return f"{self.value} of {self.suit} {self.suit.symbol}"


class CardStack:
    """A stack of cards: cards are pushed on the end and taken from the front."""

    def __init__(self, cards: Optional[Iterable[Card]] = None) -> None:
        self._cards: deque[Card] = deque(cards or ())

    def push(self, card: Card) -> None:
        """Add a card to the stack."""
        self._cards.append(card)

    def pop(self) -> Card:
        """Remove and return the first card, raising EmptyDeckError if none is left."""
        if not self._cards:
            raise EmptyDeckError("pop from an empty card stack")
        return self._cards.popleft()

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._cards)!r})"


class Deck(CardStack):
    """A deck of playing cards."""

    @classmethod
    def full(cls) -> "Deck":
        """Return an unshuffled 52-card deck, suit by suit, ace to king."""
        return cls(Card(suit, value) for suit in Suit for value in Value)

    def shuffle(self, rng: Optional[random.Random] = None) -> None:
        """Shuffle the deck in place; only a complete deck may be shuffled."""
        if len(self) != DECK_SIZE:
            raise ValueError(
                f"cannot shuffle: deck has {len(self)} cards, expected {DECK_SIZE}"
            )
        rng = rng if rng is not None else random.Random()
        cards = list(self._cards)
        rng.shuffle(cards)
        self._cards = deque(cards)