"""Data models for the blackjack table."""

from blackjack.models.card import Card, Rank, Suit, CARDS_PER_DECK, full_deck
from blackjack.models.hand import Hand

__all__ = [
    "Card", "Rank", "Suit", "CARDS_PER_DECK", "full_deck",
    "Hand",
]
