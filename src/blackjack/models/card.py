"""Card, Rank, and Suit models."""

from enum import Enum
from typing import List

CARDS_PER_SUIT = 13
CARDS_PER_DECK = 52


class Suit(str, Enum):
    CLUBS = "c"
    HEARTS = "h"
    SPADES = "s"
    DIAMONDS = "d"

    @classmethod
    def from_symbol(cls, s: str) -> "Suit":
        mapping = {
            "c": cls.CLUBS, "Clubs": cls.CLUBS, "♣": cls.CLUBS,
            "h": cls.HEARTS, "Hearts": cls.HEARTS, "♥": cls.HEARTS,
            "s": cls.SPADES, "Spades": cls.SPADES, "♠": cls.SPADES,
            "d": cls.DIAMONDS, "Diamonds": cls.DIAMONDS, "♦": cls.DIAMONDS,
        }
        if s in mapping:
            return mapping[s]
        if s.lower() in mapping:
            return mapping[s.lower()]
        raise ValueError(f"Unknown suit: {s}")

    @property
    def symbol(self) -> str:
        return {"c": "♣", "h": "♥", "s": "♠", "d": "♦"}[self.value]

    @property
    def display_name(self) -> str:
        return self.name.capitalize()

    @property
    def is_red(self) -> bool:
        return self in (Suit.HEARTS, Suit.DIAMONDS)


class Rank(int, Enum):
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

    @property
    def label(self) -> str:
        """Short label: 'A', '2'..'10', 'J', 'Q', 'K'."""
        return _FACE_LABELS.get(self.value, str(self.value))

    @property
    def display_name(self) -> str:
        """Long label: 'Ace', '2'..'10', 'Jack', 'Queen', 'King'."""
        return _FACE_NAMES.get(self.value, str(self.value))

    @property
    def is_face(self) -> bool:
        return self.value > 10

    @classmethod
    def from_char(cls, c: str) -> "Rank":
        c = c.strip().upper()
        if c == "T":
            return cls.TEN
        for r in cls:
            if r.label == c:
                return r
        raise ValueError(f"Unknown rank: {c}")


_FACE_LABELS = {1: "A", 11: "J", 12: "Q", 13: "K"}
_FACE_NAMES = {1: "Ace", 11: "Jack", 12: "Queen", 13: "King"}

# Stable suit order for the canonical 0..51 index
_SUIT_ORDER = tuple(Suit)


class Card:
    """A single playing card."""

    def __init__(self, rank: Rank, suit: Suit):
        self.rank = rank
        self.suit = suit

    @classmethod
    def parse(cls, s: str) -> "Card":
        """Parse a card string like 'Ah', 'Ts', '10c'."""
        s = s.strip()
        if len(s) == 2:
            return cls(Rank.from_char(s[0]), Suit.from_symbol(s[1]))
        elif len(s) == 3 and s[:2] == "10":
            return cls(Rank.TEN, Suit.from_symbol(s[2]))
        raise ValueError(f"Cannot parse card: {s}")

    @classmethod
    def from_index(cls, index: int) -> "Card":
        """Inverse of `Card.index`: 0..12 are the clubs, 13..25 hearts, and so on."""
        if not 0 <= index < CARDS_PER_DECK:
            raise ValueError(f"Card index out of range: {index}")
        suit_pos, rank_pos = divmod(index, CARDS_PER_SUIT)
        return cls(Rank(rank_pos + 1), _SUIT_ORDER[suit_pos])

    @property
    def index(self) -> int:
        """Canonical position of this card in a 52-card deck."""
        return _SUIT_ORDER.index(self.suit) * CARDS_PER_SUIT + self.rank.value - 1

    @property
    def label(self) -> str:
        return self.rank.label

    @property
    def display_name(self) -> str:
        """Return the long form, e.g. 'Queen of Hearts'."""
        return f"{self.rank.display_name} of {self.suit.display_name}"

    def __repr__(self) -> str:
        return f"{self.rank.label}{self.suit.value}"

    def __str__(self) -> str:
        return f"{self.rank.label}{self.suit.symbol}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank == other.rank and self.suit == other.suit

    def __hash__(self) -> int:
        return hash((self.rank, self.suit))


def full_deck() -> List[Card]:
    """All 52 cards in canonical index order."""
    return [Card.from_index(i) for i in range(CARDS_PER_DECK)]
