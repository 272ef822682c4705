"""Pytest fixtures for card hand engine tests."""

import pytest

from cardhand.cards import CardIdentity, Rank, Suit, all_identities
from cardhand.catalogue import DeckIndex, build
from cardhand.hand import HandState
from cardhand.layout import LayoutMode, LayoutParams
from cardhand.session import DragGesture, HandController

# Asset names as they appear in a typical art pack, one naming scheme per suit.
_SUIT_NAMES = {
    Suit.HEARTS: "heart",
    Suit.SPADES: "spades",
    Suit.DIAMONDS: "diamond",
    Suit.CLUBS: "club",
}
_RANK_NAMES = {
    Rank.JACK: "j",
    Rank.QUEEN: "queen",
    Rank.KING: "13",
    Rank.ACE: "a",
}


def asset_name(card: CardIdentity) -> str:
    """Build an asset file name such as '7_club' or 'queen_spades'."""
    rank = _RANK_NAMES.get(card.rank, str(card.rank.value))
    return f"{rank}_{_SUIT_NAMES[card.suit]}"


def full_sources() -> list[tuple[str, str, str]]:
    """(suit_group, raw_name, handle) triples for a complete 52-card pack."""
    return [
        (f"Cards/{card.suit}", asset_name(card), f"sprite:{asset_name(card)}")
        for card in all_identities()
    ]


@pytest.fixture
def name_for():
    """The asset naming scheme used by the sources fixture."""
    return asset_name


@pytest.fixture
def sources():
    """Asset sources covering the whole deck."""
    return full_sources()


@pytest.fixture
def deck_index(sources):
    """A complete catalogue."""
    return build(sources)


@pytest.fixture
def empty_index():
    """A catalogue with nothing loaded."""
    return DeckIndex({})


@pytest.fixture
def abcd():
    """Four distinct cards standing in for A, B, C, D."""
    return [
        CardIdentity(Suit.HEARTS, Rank.ACE),
        CardIdentity(Suit.SPADES, Rank.KING),
        CardIdentity(Suit.DIAMONDS, Rank.QUEEN),
        CardIdentity(Suit.CLUBS, Rank.JACK),
    ]


@pytest.fixture
def abcd_hand(abcd):
    """A hand holding A, B, C, D in order."""
    hand = HandState()
    hand.deal(abcd, 4)
    return hand


@pytest.fixture
def manual_params():
    """Manual layout with 100 units between card centers and a 10 degree fan."""
    return LayoutParams(spacing=100.0, fan_angle=10.0, mode=LayoutMode.MANUAL)


@pytest.fixture
def controller(deck_index, manual_params):
    """A controller with a dealt, seeded hand of five cards."""
    ctrl = HandController(deck_index, hand_size=5, seed=42, params=manual_params)
    ctrl.deal_new_hand()
    return ctrl


@pytest.fixture
def gesture(controller):
    """An idle drag gesture over the controller's hand."""
    return DragGesture(controller)

