"""Hand model: the cards held by the player or the dealer."""

from dataclasses import dataclass, field
from typing import List

from blackjack.models.card import Card


@dataclass
class Hand:
    """An ordered hand of cards."""
    owner: str = "Player"
    cards: List[Card] = field(default_factory=list)

    def add(self, card: Card) -> None:
        self.cards.append(card)

    @property
    def total(self) -> int:
        from blackjack.game.rules import hand_value
        return hand_value(self.cards)

    @property
    def is_soft(self) -> bool:
        from blackjack.game.rules import is_soft
        return is_soft(self.cards)

    @property
    def is_bust(self) -> bool:
        from blackjack.game.rules import is_bust
        return is_bust(self.cards)

    @property
    def is_blackjack(self) -> bool:
        from blackjack.game.rules import is_blackjack
        return is_blackjack(self.cards)

    @property
    def cards_str(self) -> str:
        return " ".join(str(c) for c in self.cards)

    def __len__(self) -> int:
        return len(self.cards)
