"""Card identity and hand-ordering engine - 100% UI-agnostic."""

from cardhand.cards import CardIdentity, Rank, Suit
from cardhand.catalogue import DeckIndex, build
from cardhand.hand import HandState
from cardhand.layout import LayoutSlot, fan_layout, slot_for
from cardhand.naming import ParseError, ParseFailure, parse_card_name
from cardhand.reorder import resolve_insert_index
from cardhand.shuffle import shuffle

__all__ = [
    "CardIdentity",
    "Rank",
    "Suit",
    "DeckIndex",
    "build",
    "HandState",
    "LayoutSlot",
    "fan_layout",
    "slot_for",
    "ParseError",
    "ParseFailure",
    "parse_card_name",
    "resolve_insert_index",
    "shuffle",
]
