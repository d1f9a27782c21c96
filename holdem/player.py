"""Players and their betting actions."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Protocol

from holdem.deck import CardStack, Deck, EmptyDeckError

logger = logging.getLogger(__name__)

HAND_SIZE = 2


class BettingRound(Protocol):
    """Anything that tracks the highest bet of the current round."""

    highest_bet: int


class PlayerStatus(IntEnum):
    """What a player has done in the current round."""

    WAITING = 0
    FOLDED = 1
    CALLED = 2
    CHECKED = 3
    RAISED = 4
    ALL_IN = 5
    THINKING = 6

    def __str__(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    PlayerStatus.WAITING: "Waiting",
    PlayerStatus.FOLDED: "Folded",
    PlayerStatus.CALLED: "Called",
    PlayerStatus.CHECKED: "Checked",
    PlayerStatus.RAISED: "Raised",
    PlayerStatus.ALL_IN: "All In",
    PlayerStatus.THINKING: "Thinking",
}


@dataclass(eq=False)
class Player:
    """A player at the table with a balance, a current bet and a hand."""

    name: str
    money: int
    bet: int = 0
    hand: CardStack = field(default_factory=CardStack)
    is_ready: bool = False
    is_dealer: bool = False
    status: PlayerStatus = PlayerStatus.WAITING

    def deal(self, deck: Deck) -> None:
        """Take the next card from the deck into the player's hand."""
        if len(self.hand) == HAND_SIZE:
            raise ValueError("Player's hand cannot hold more than 2 cards")
        try:
            card = deck.pop()
        except EmptyDeckError as exc:
            raise EmptyDeckError("unable to deal to player: the deck is empty") from exc
        self.hand.push(card)

    def start_turn(self) -> None:
        """Mark that it is this player's turn."""
        self.status = PlayerStatus.THINKING

    def fold(self) -> None:
        """Fold the hand; the bet stays to be collected into the pot."""
        self.status = PlayerStatus.FOLDED
        logger.info("Player %s folds.", self.name)

    def check(self, game: BettingRound) -> bool:
        """Check if the current bet matches the highest bet; return whether allowed."""
        if self.bet == game.highest_bet:
            self.status = PlayerStatus.CHECKED
            logger.info("Player %s checks.", self.name)
            return True
        logger.info("Player %s cannot check.", self.name)
        return False

    def all_in(self, game: BettingRound) -> None:
        """Put the whole remaining balance into the bet."""
        if self.money <= 0:
            return
        logger.info("Player %s goes All In for $%d!", self.name, self.bet + self.money)
        self.bet += self.money
        self.money = 0
        self.status = PlayerStatus.ALL_IN
        game.highest_bet = max(game.highest_bet, self.bet)

    def call(self, game: BettingRound) -> None:
        """Match the highest bet, going all in when the balance does not cover it."""
        if self.status == PlayerStatus.ALL_IN:
            logger.info("Player %s is already All In", self.name)
            return
        amount_to_call = game.highest_bet - self.bet
        if self.money <= amount_to_call:
            self.all_in(game)
            return
        logger.info("Player %s calls $%d", self.name, game.highest_bet)
        self.bet += amount_to_call
        self.money -= amount_to_call
        self.status = PlayerStatus.CALLED
        game.highest_bet = max(game.highest_bet, self.bet)

    def raise_by(self, amount: int, game: BettingRound) -> bool:
        """Add amount to the bet if the balance allows; return whether it succeeded.

        When the amount equals the balance left, the player goes all in.
        """
        success = False
        if amount < self.money:
            self.bet += amount
            self.money -= amount
            success = True
            logger.info("Player %s raised by $%d", self.name, amount)
        if amount == self.money:
            self.all_in(game)
            success = True
        if amount > self.money:
            logger.info(
                "Player %s tried to raise by %d but their balance is insufficient. "
                "You can go All In instead and create a split pot.",
                self.name,
                amount,
            )
        if success:
            game.highest_bet = max(game.highest_bet, self.bet)
        logger.info("Highest bet is %d", game.highest_bet)
        return success