"""Blackjack hand arithmetic."""

from typing import Iterable, List, Tuple

from blackjack import config
from blackjack.models.card import Card, Rank

BLACKJACK = 21


def card_value(card: Card) -> int:
    # Ace counts 11 here; hand_totals downgrades it when needed
    if card.rank is Rank.ACE:
        return 11
    if card.rank.is_face:
        return 10
    return card.rank.value


def hand_totals(cards: Iterable[Card]) -> Tuple[int, bool]:
    """Best total for a hand and whether it is soft.

    Aces start at 11 and drop to 1 one at a time while the hand is over 21.
    The hand is soft if an ace still counts as 11.
    """
    total = 0
    aces = 0
    for c in cards:
        if c.rank is Rank.ACE:
            aces += 1
        total += card_value(c)
    while total > BLACKJACK and aces > 0:
        total -= 10
        aces -= 1
    return total, aces > 0


def hand_value(cards: Iterable[Card]) -> int:
    return hand_totals(cards)[0]


def is_soft(cards: Iterable[Card]) -> bool:
    return hand_totals(cards)[1]


def is_bust(cards: Iterable[Card]) -> bool:
    return hand_value(cards) > BLACKJACK


def is_blackjack(cards: List[Card]) -> bool:
    """A natural: exactly two cards worth 21."""
    return len(cards) == 2 and hand_value(cards) == BLACKJACK


def dealer_should_hit(cards: Iterable[Card],
                      stands_on: int = config.DEALER_STANDS_ON) -> bool:
    return hand_value(cards) < stands_on
