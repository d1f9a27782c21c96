"""The game table: phases of a hand, betting pots and winner payout."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional

from holdem.deck import CardStack, Deck
from holdem.evaluator import evaluate_game
from holdem.player import Player, PlayerStatus

logger = logging.getLogger(__name__)

FLOP_CARDS = 3


class InvalidTransitionError(RuntimeError):
    """Raised when the game cannot move to the requested phase."""


class GameStatus(IntEnum):
    """Phase of the game."""

    INIT = 0
    WAITING_FOR_PLAYERS = 1
    START_GAME = 2
    PRE_FLOP = 3
    FLOP = 4
    TURN = 5
    RIVER = 6
    DETERMINE_WINNER = 7


@dataclass(eq=False)
class Pot:
    """Money collected from betting and the players who may win it."""

    amount: int = 0
    eligible: List[Player] = field(default_factory=list)

    def has_player(self, player: Player) -> bool:
        """Whether a player with the same name may win this pot."""
        return any(p.name == player.name for p in self.eligible)


class Game:
    """A table of players moving through the phases of a hand."""

    def __init__(self, starting_money: int, big_blind: int) -> None:
        logger.info("Starting a new game!")
        self.players: List[Player] = []
        self.status = GameStatus.INIT
        self.starting_money = starting_money
        self.big_blind = big_blind
        self.dealer_index = -1
        self.deck = Deck.full()
        self.deck.shuffle()
        self.community = CardStack()
        self.pots: List[Pot] = []
        self.highest_bet = 0

    def add_player(self, name: str) -> Player:
        """Seat a new player with the starting balance."""
        player = Player(name, self.starting_money)
        self.players.append(player)
        logger.info("Player %s joined the game", name)
        return player

    def _require_status(self, expected: GameStatus, target: str) -> None:
        if self.status != expected:
            raise InvalidTransitionError(
                f"game cannot transition to {target}; current state: {self.status.name}"
            )

    def initialise(self) -> None:
        """Move from INIT to WAITING_FOR_PLAYERS."""
        self._require_status(GameStatus.INIT, "WAITING_FOR_PLAYERS")
        self.status = GameStatus.WAITING_FOR_PLAYERS
        logger.info("Game has been initialised. Waiting for Players to join.")

    def start_game(self) -> None:
        """Choose the dealer, deal two cards each and post the blinds."""
        self._require_status(GameStatus.WAITING_FOR_PLAYERS, "START_GAME")
        for player in self.players:
            if not player.is_ready:
                raise InvalidTransitionError(
                    f"player {player.name} is not ready; cannot start the game"
                )
        if not self.players:
            raise InvalidTransitionError("cannot start a game without players")

        self.status = GameStatus.START_GAME
        logger.info("Game has Started. Setting up the game...")

        self.dealer_index = 0
        logger.info("Player %s is the dealer.", self.players[self.dealer_index].name)

        deck = Deck.full()
        deck.shuffle()
        for player in self.players:
            player.deal(deck)
            player.deal(deck)

        count = len(self.players)
        if count == 2:
            small_index = self.dealer_index
            big_index = (self.dealer_index + 1) % count
        else:
            small_index = (self.dealer_index + 1) % count
            big_index = (self.dealer_index + 2) % count

        small_blind = self.big_blind // 2
        small = self.players[small_index]
        small.raise_by(small_blind, self)
        logger.info("Player %s posts the small blind of $%d.", small.name, small_blind)

        big = self.players[big_index]
        big.raise_by(self.big_blind, self)
        logger.info("Player %s posts the big blind of $%d.", big.name, self.big_blind)

        self.community = CardStack()
        self.pots = [Pot(0, list(self.players))]

    def _add_to_latest_pot(self, player: Player, include_main: bool) -> None:
        last = 0 if include_main else 1
        for pot in reversed(self.pots[last:]):
            if pot.has_player(player):
                pot.amount += player.bet
                break
        else:
            self.pots[0].amount += player.bet
        player.bet = 0

    def _collect_all_in(self, player: Player) -> None:
        highest = max((p.bet for p in self.players), default=0)
        if player.bet < highest:
            side_pot = Pot()
            for other in self.players:
                if other.bet > player.bet:
                    excess = other.bet - player.bet
                    side_pot.amount += excess
                    other.bet -= excess
                    side_pot.eligible.append(other)
            self.pots.append(side_pot)
        self.pots[0].amount += player.bet
        player.bet = 0

    def add_bets_to_pots(self) -> None:
        """Move the players' current bets into the main pot and side pots."""
        for player in self.players:
            if player.bet == 0:
                continue
            if player.status in (PlayerStatus.CALLED, PlayerStatus.CHECKED):
                self._add_to_latest_pot(player, include_main=False)
            elif player.status == PlayerStatus.FOLDED:
                self._add_to_latest_pot(player, include_main=True)
            elif player.status == PlayerStatus.ALL_IN:
                self._collect_all_in(player)

        active = [p for p in self.players if p.status != PlayerStatus.FOLDED]
        if len(active) == 1:
            logger.info("Only one player remains active. They win the pots.")
            survivor = active[0]
            for pot in self.pots:
                survivor.money += pot.amount
                pot.amount = 0

    def pre_flop(self) -> None:
        """Move from START_GAME to the first betting round."""
        self._require_status(GameStatus.START_GAME, "PRE_FLOP")
        self.status = GameStatus.PRE_FLOP
        logger.info("Transitioning to PreFlop phase...")

    def can_transition(self) -> bool:
        """Whether every active player has acted and matched the highest bet."""
        for player in self.players:
            if player.status not in (
                PlayerStatus.FOLDED,
                PlayerStatus.CALLED,
                PlayerStatus.CHECKED,
            ):
                logger.info("Not all players have called, checked, or folded.")
                return False
            if player.status != PlayerStatus.FOLDED and player.bet != self.highest_bet:
                logger.info(
                    "Player %s's current bet: %d, Current highest bet: %d",
                    player.name,
                    player.bet,
                    self.highest_bet,
                )
                logger.info("Not all active players have matched the highest bet.")
                return False
        return True

    def _require_round_complete(self) -> None:
        if not self.can_transition():
            raise InvalidTransitionError("the current betting round is not complete")

    def _advance(self, expected: GameStatus, target: GameStatus, cards: int) -> None:
        self._require_status(expected, target.name)
        self._require_round_complete()
        self.status = target
        self.highest_bet = 0
        logger.info("Transitioning to %s phase...", target.name)
        for _ in range(cards):
            self.community.push(self.deck.pop())
        logger.info("Community cards dealt:")
        for card in self.community:
            logger.info("%s", card)
        self.add_bets_to_pots()

    def flop(self) -> None:
        """Deal three community cards once pre-flop betting is complete."""
        self._advance(GameStatus.PRE_FLOP, GameStatus.FLOP, FLOP_CARDS)

    def turn(self) -> None:
        """Deal the fourth community card once flop betting is complete."""
        self._advance(GameStatus.FLOP, GameStatus.TURN, 1)

    def river(self) -> None:
        """Deal the fifth community card once turn betting is complete."""
        self._advance(GameStatus.TURN, GameStatus.RIVER, 1)

    def determine_winner(self) -> List[Player]:
        """Pay out the pots, eliminate broke players and return the winners."""
        self._require_status(GameStatus.RIVER, "DETERMINE_WINNER")
        self._require_round_complete()
        self.status = GameStatus.DETERMINE_WINNER
        self.highest_bet = 0
        logger.info("Determining the winner(s)...")

        community = list(self.community)
        winners = evaluate_game(self.players, community)
        if len(winners) == 1:
            logger.info("The winner is %s!", winners[0].name)
        else:
            logger.info("The winners are: %s!", ", ".join(w.name for w in winners))

        for pot in self.pots:
            pot_winners = evaluate_game(pot.eligible, community)
            if not pot_winners:
                continue
            share = pot.amount // len(pot_winners)
            for winner in pot_winners:
                seated = next((p for p in self.players if p.name == winner.name), None)
                if seated is not None:
                    seated.money += share

        eliminated = [p.name for p in self.players if p.money <= 0]
        self.players = [p for p in self.players if p.money > 0]
        if eliminated:
            logger.info("The following players have been eliminated:")
            for name in eliminated:
                logger.info("%s", name)

        logger.info("Final player balances:")
        for player in self.players:
            logger.info("%s: $%d", player.name, player.money)
        return winners

    def player_raise(self, player_index: int, amount: int) -> bool:
        """Have the player at the given seat raise; return whether it succeeded."""
        return self.players[player_index].raise_by(amount, self)

    def get_player(self, name: str = "", index: int = -1) -> Optional[Player]:
        """Find a player by seat index, falling back to name; None if absent."""
        if 0 <= index < len(self.players):
            return self.players[index]
        return next((p for p in self.players if p.name == name), None)