"""Card identity parsing from raw asset names like '7_club', '10_spades', 'j_heart', 'a'."""

import re
from dataclasses import dataclass
from enum import Enum, auto

from cardhand.cards import CardIdentity, Rank, Suit


class ParseError(Enum):
    """Reasons an asset name could not be turned into a card identity."""

    SUIT_MISMATCH = auto()
    UNKNOWN_RANK = auto()


@dataclass(frozen=True)
class ParseFailure:
    """A typed parse failure. Returned, never raised."""

    reason: ParseError
    raw_name: str
    expected_suit: Suit

    def __str__(self) -> str:
        if self.reason is ParseError.SUIT_MISMATCH:
            return f"'{self.raw_name}' names a suit other than {self.expected_suit}"
        return f"could not parse rank from '{self.raw_name}'"


_SUIT_TOKENS = {
    "club": Suit.CLUBS,
    "diamond": Suit.DIAMONDS,
    "heart": Suit.HEARTS,
    "spade": Suit.SPADES,
}

_RANK_ALIASES = {
    "a": Rank.ACE,
    "ace": Rank.ACE,
    "k": Rank.KING,
    "king": Rank.KING,
    "q": Rank.QUEEN,
    "queen": Rank.QUEEN,
    "j": Rank.JACK,
    "jack": Rank.JACK,
}

# Many art packs number the court cards and use 1 for the Ace.
_NUMERIC_COURT = {
    1: Rank.ACE,
    11: Rank.JACK,
    12: Rank.QUEEN,
    13: Rank.KING,
}

_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)


def parse_suit_token(token: str) -> Suit | None:
    """Map a suit word ('club', 'Hearts', ...) to a Suit, or None if unknown.

    A single trailing 's' is treated as a plural and stripped.
    """
    token = token.strip().lower()
    if token.endswith("s"):
        token = token[:-1]
    return _SUIT_TOKENS.get(token)


def parse_rank_token(token: str) -> Rank | None:
    """Resolve a rank token (numeric or letter/word alias), or None if unknown."""
    token = token.strip().lower()

    if _INTEGER.fullmatch(token):
        value = int(token)
        if value in _NUMERIC_COURT:
            return _NUMERIC_COURT[value]
        if 2 <= value <= 10:
            return Rank(value)
        return None

    return _RANK_ALIASES.get(token)


def parse_card_name(raw_name: str, expected_suit: Suit) -> CardIdentity | ParseFailure:
    """
    Turn a raw asset name into a card identity.

    The name is split on its first underscore into a rank token and an
    optional suit token. A suit token that names a different suit than
    ``expected_suit`` is a mismatch; an unrecognized suit token is ignored.

    Args:
        raw_name: Asset name, e.g. '7_club', '10_spades', 'j_heart', 'a'
        expected_suit: Suit of the group the asset was found in

    Returns:
        The parsed CardIdentity, or a ParseFailure describing why not
    """
    name = raw_name.strip().lower()
    rank_token, sep, suit_token = name.partition("_")

    if sep and suit_token.strip():
        named_suit = parse_suit_token(suit_token)
        if named_suit is not None and named_suit is not expected_suit:
            return ParseFailure(ParseError.SUIT_MISMATCH, raw_name, expected_suit)

    rank = parse_rank_token(rank_token)
    if rank is None:
        return ParseFailure(ParseError.UNKNOWN_RANK, raw_name, expected_suit)

    return CardIdentity(expected_suit, rank)
