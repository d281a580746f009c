"""Card supply from a single 52-card deck that reshuffles itself when empty."""

import random
from typing import List, Optional

from blackjack.logging_utils import get_logger
from blackjack.models.card import Card, CARDS_PER_DECK

logger = get_logger(__name__)


class DeckSupplier:
    """Deals cards one at a time without replacement.

    Every card dealt since the last reshuffle is distinct. When the 52nd
    card of a generation is dealt the deck is flagged for reshuffling, so
    the next draw starts a fresh generation and may repeat any earlier card.
    Callers only ever see single cards.

    Each supplier owns its random generator and dealt state, so independent
    games (and tests) never interfere with each other.
    """

    def __init__(self, seed: Optional[int] = None):
        """Create a supplier.

        Args:
            seed: Optional seed for reproducible deals. Without one the
                generator is seeded lazily on first use.
        """
        self._rng = random.Random()
        self._initialized = False
        self._dealt: List[bool] = [False] * CARDS_PER_DECK
        self._deal_count = 0
        self._shuffled = False
        self._generation = 0
        if seed is not None:
            self.initialize(seed)

    def initialize(self, seed: Optional[int] = None) -> None:
        """Seed the random generator.

        Without a seed this only has an effect the first time it is called,
        seeding from time / OS entropy. An explicit seed always reseeds.
        The dealt state is left as it is.
        """
        if seed is None and self._initialized:
            return
        self._rng.seed(seed)
        self._initialized = True
        logger.debug("Deck supplier seeded (seed=%s)", seed)

    def draw_card(self) -> Card:
        """Deal the next card."""
        if not self._initialized:
            self.initialize()
        if not self._shuffled:
            self._reshuffle()

        # deal_count < 52 here, so at least one slot is still free
        while True:
            index = self._rng.randrange(CARDS_PER_DECK)
            if not self._dealt[index]:
                break

        self._dealt[index] = True
        self._deal_count += 1

        # Flag the reshuffle as soon as the last card goes out
        if self._deal_count == CARDS_PER_DECK:
            self._shuffled = False

        return Card.from_index(index)

    def deal(self, count: int = 1) -> List[Card]:
        """Deal several cards.

        Args:
            count: Number of cards to deal. May exceed 52, in which case
                the deal crosses one or more reshuffles.

        Returns:
            List of dealt cards in deal order.
        """
        if count < 0:
            raise ValueError(f"Cannot deal a negative number of cards: {count}")
        return [self.draw_card() for _ in range(count)]

    def _reshuffle(self) -> None:
        """Put all 52 cards back and start a new generation."""
        self._dealt = [False] * CARDS_PER_DECK
        self._deal_count = 0
        self._shuffled = True
        self._generation += 1
        logger.debug("Deck reshuffled (generation %d)", self._generation)

    @property
    def deal_count(self) -> int:
        """Cards dealt since the last reshuffle."""
        return self._deal_count

    @property
    def remaining(self) -> int:
        """Cards left before the next reshuffle."""
        if not self._shuffled:
            return CARDS_PER_DECK
        return CARDS_PER_DECK - self._deal_count

    @property
    def is_shuffled(self) -> bool:
        return self._shuffled

    @property
    def generation(self) -> int:
        """Number of reshuffles performed so far."""
        return self._generation

    def __repr__(self) -> str:
        return (f"DeckSupplier(generation={self._generation}, "
                f"dealt={self._deal_count}, remaining={self.remaining})")
