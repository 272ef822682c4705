"""Suit, Rank, and CardIdentity - immutable card identity values."""

from dataclasses import dataclass
from enum import Enum, auto
from functools import total_ordering

CATALOGUE_SIZE = 52


class Suit(Enum):
    """Card suits, in catalogue discovery order."""

    HEARTS = auto()
    SPADES = auto()
    DIAMONDS = auto()
    CLUBS = auto()

    def __str__(self) -> str:
        return self.name.title()

    @property
    def symbol(self) -> str:
        """Return the unicode suit symbol."""
        symbols = {
            Suit.HEARTS: "♥",
            Suit.SPADES: "♠",
            Suit.DIAMONDS: "♦",
            Suit.CLUBS: "♣",
        }
        return symbols[self]


@total_ordering
class Rank(Enum):
    """Card ranks ordered by face value, Ace highest."""

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
    ACE = 14

    def __str__(self) -> str:
        return self.name.title()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.value < other.value

    @property
    def short(self) -> str:
        """Return the short face label ('2'..'10', 'J', 'Q', 'K', 'A')."""
        if self.value <= 10:
            return str(self.value)
        return {
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
            Rank.ACE: "A",
        }[self]


@dataclass(frozen=True, slots=True)
class CardIdentity:
    """Immutable (suit, rank) value naming one card, independent of its artwork."""

    suit: Suit
    rank: Rank

    def __str__(self) -> str:
        return f"{self.rank} of {self.suit}"

    def __repr__(self) -> str:
        return f"CardIdentity({self.suit.name}, {self.rank.name})"

    @property
    def label(self) -> str:
        """Return a compact label such as '10♠'."""
        return f"{self.rank.short}{self.suit.symbol}"


def all_identities() -> tuple[CardIdentity, ...]:
    """Return the full Suit x Rank product (52 identities)."""
    return tuple(CardIdentity(suit, rank) for suit in Suit for rank in Rank)
