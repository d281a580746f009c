"""One round of blackjack between the player and the dealer."""

from enum import Enum
from typing import Optional

from blackjack import config
from blackjack.deck.supplier import DeckSupplier
from blackjack.game.rules import dealer_should_hit
from blackjack.logging_utils import get_logger
from blackjack.models.card import Card
from blackjack.models.hand import Hand

logger = get_logger(__name__)


class Outcome(str, Enum):
    """Result of a round from the player's point of view."""
    WIN = "win"
    LOSS = "loss"
    DRAW = "draw"


class RoundPhase(str, Enum):
    """Round phase enumeration."""
    WAITING = "waiting"
    PLAYER_TURN = "player_turn"
    COMPLETE = "complete"


class RoundStateError(RuntimeError):
    """An action was attempted in a phase that does not allow it."""


class BlackjackRound:
    """Deals and settles a single round.

    The dealer's second card is the hole card. It stays hidden until the
    dealer draws a third card or the round is settled.
    """

    def __init__(self, supplier: DeckSupplier,
                 dealer_stands_on: int = config.DEALER_STANDS_ON):
        self.supplier = supplier
        self.dealer_stands_on = dealer_stands_on
        self.player = Hand(owner="You")
        self.dealer = Hand(owner="Dealer")
        self.phase = RoundPhase.WAITING
        self.outcome: Optional[Outcome] = None
        self.hole_card_revealed = False

    @property
    def is_complete(self) -> bool:
        return self.phase == RoundPhase.COMPLETE

    @property
    def hole_card(self) -> Optional[Card]:
        return self.dealer.cards[1] if len(self.dealer) > 1 else None

    def deal(self) -> None:
        """Deal the opening cards: player, dealer, player, dealer."""
        if self.phase != RoundPhase.WAITING:
            raise RoundStateError("Cards have already been dealt this round")

        for _ in range(2):
            self.player.add(self.supplier.draw_card())
            self.dealer.add(self.supplier.draw_card())
        self.phase = RoundPhase.PLAYER_TURN
        logger.debug("Dealt player %s, dealer %s",
                     self.player.cards_str, self.dealer.cards_str)

        if self.player.is_blackjack and self.dealer.is_blackjack:
            self._settle(Outcome.DRAW)
        elif self.player.is_blackjack:
            self._settle(Outcome.WIN)
        elif self.dealer.is_blackjack:
            self._settle(Outcome.LOSS)

    def hit(self) -> Card:
        """Give the player another card. Busting ends the round."""
        self._require_player_turn("hit")
        card = self.supplier.draw_card()
        self.player.add(card)
        if self.player.is_bust:
            self._settle(Outcome.LOSS)
        return card

    def stand(self) -> Outcome:
        """End the player's turn, play out the dealer and settle."""
        self._require_player_turn("stand")
        while dealer_should_hit(self.dealer.cards, self.dealer_stands_on):
            self.dealer.add(self.supplier.draw_card())
            self.hole_card_revealed = True

        if self.dealer.is_bust:
            outcome = Outcome.WIN
        elif self.player.total > self.dealer.total:
            outcome = Outcome.WIN
        elif self.player.total < self.dealer.total:
            outcome = Outcome.LOSS
        else:
            outcome = Outcome.DRAW
        self._settle(outcome)
        return outcome

    def _require_player_turn(self, action: str) -> None:
        if self.phase != RoundPhase.PLAYER_TURN:
            raise RoundStateError(f"Cannot {action} during phase {self.phase.value}")

    def _settle(self, outcome: Outcome) -> None:
        self.outcome = outcome
        self.phase = RoundPhase.COMPLETE
        self.hole_card_revealed = True
        logger.info("Round settled: %s (player %d, dealer %d)",
                    outcome.value, self.player.total, self.dealer.total)
