"""Tests for the card catalogue builder."""

import logging
import os
from unittest.mock import patch

import pytest

from config import CatalogueConfig
from cardhand.cards import CATALOGUE_SIZE, CardIdentity, Rank, Suit, all_identities
from cardhand.catalogue import DeckIndex, build, build_from_groups, resolve_suit_group


class TestResolveSuitGroup:
    """Tests for suit group resolution."""

    def test_suit_passes_through(self):
        """Test that a Suit is used as-is."""
        assert resolve_suit_group(Suit.CLUBS) is Suit.CLUBS

    def test_words_and_paths(self):
        """Test suit words and resource paths."""
        assert resolve_suit_group("Hearts") == Suit.HEARTS
        assert resolve_suit_group("Cards/Spades") == Suit.SPADES
        assert resolve_suit_group("Cards\\Diamonds\\") == Suit.DIAMONDS
        assert resolve_suit_group("club") == Suit.CLUBS

    def test_unknown_group(self):
        """Test that an unknown group does not resolve."""
        assert resolve_suit_group("Cards/Jokers") is None

    def test_configured_paths_resolve(self):
        """Test that every default suit path resolves to its suit."""
        paths = CatalogueConfig().suit_paths
        for name, path in paths.items():
            assert resolve_suit_group(path) == resolve_suit_group(name)

    def test_configured_path_without_suit_word(self):
        """Test a configured path resolves even when its last segment is not a suit."""
        paths = {"hearts": "Art/Red1", "spades": "Art/Black1"}
        assert resolve_suit_group("Art/Red1", paths) == Suit.HEARTS
        assert resolve_suit_group("art\\black1\\", paths) == Suit.SPADES
        assert resolve_suit_group("Art/Red1") is None
        assert resolve_suit_group("Cards/Clubs", paths) == Suit.CLUBS


class TestBuild:
    """Tests for building a DeckIndex."""

    def test_complete_catalogue(self, deck_index):
        """Test a well-formed pack loads all 52 cards exactly once."""
        assert deck_index.size() == CATALOGUE_SIZE
        deck = deck_index.full_deck()
        assert len(deck) == CATALOGUE_SIZE
        assert set(deck) == set(all_identities())
        assert deck_index.is_complete
        assert deck_index.missing() == []

    def test_handles_pass_through(self, deck_index, name_for):
        """Test that handles are returned unchanged."""
        card = CardIdentity(Suit.CLUBS, Rank.SEVEN)
        assert deck_index.get(card) == f"sprite:{name_for(card)}"

    def test_discovery_order(self):
        """Test the full deck keeps source order."""
        index = build([
            (Suit.SPADES, "k", "k"),
            (Suit.HEARTS, "2", "2"),
            (Suit.SPADES, "3", "3"),
        ])
        assert index.full_deck() == (
            CardIdentity(Suit.SPADES, Rank.KING),
            CardIdentity(Suit.HEARTS, Rank.TWO),
            CardIdentity(Suit.SPADES, Rank.THREE),
        )

    def test_first_writer_wins(self):
        """Test that a later duplicate does not replace the first asset."""
        index = build([
            ("Spades", "a", "first"),
            ("Spades", "1_spades", "second"),
            ("Spades", "ace", "third"),
        ])
        ace = CardIdentity(Suit.SPADES, Rank.ACE)
        assert index.size() == 1
        assert index.get(ace) == "first"
        assert [d.raw_name for d in index.duplicates] == ["1_spades", "ace"]
        assert all(d.identity == ace for d in index.duplicates)

    def test_parse_failures_are_skipped_and_logged(self, caplog):
        """Test that bad names are logged as warnings and skipped."""
        with caplog.at_level(logging.WARNING, logger="cardhand.catalogue"):
            index = build([
                ("Cards/Clubs", "7_club", "ok"),
                ("Cards/Clubs", "7_heart", "wrong suit"),
                ("Cards/Clubs", "joker", "bad rank"),
                ("Cards/Clubs", "8", "ok"),
            ])

        assert index.size() == 2
        assert CardIdentity(Suit.CLUBS, Rank.EIGHT) in index
        messages = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
        assert any("7_heart" in m and "Cards/Clubs" in m for m in messages)
        assert any("joker" in m for m in messages)

    def test_unknown_suit_group_skipped(self, caplog):
        """Test sources from an unknown group are skipped."""
        with caplog.at_level(logging.WARNING, logger="cardhand.catalogue"):
            index = build([("Cards/Jokers", "a", "joker")])
        assert index.size() == 0
        assert any("Cards/Jokers" in r.getMessage() for r in caplog.records)

    def test_empty_catalogue_logs_error(self, caplog):
        """Test an empty result is an error log, not an exception."""
        with caplog.at_level(logging.ERROR, logger="cardhand.catalogue"):
            index = build([])
        assert index.size() == 0
        assert len(index) == 0
        assert index.full_deck() == ()
        assert any(r.levelno == logging.ERROR for r in caplog.records)

    def test_partial_catalogue_reports_missing(self):
        """Test missing identities are reported."""
        index = build([(Suit.HEARTS, str(v), v) for v in range(2, 11)])
        assert index.size() == 9
        assert not index.is_complete
        assert len(index.missing()) == CATALOGUE_SIZE - 9
        assert CardIdentity(Suit.HEARTS, Rank.ACE) in index.missing()

    def test_build_from_groups(self):
        """Test building from a suit group mapping."""
        index = build_from_groups({
            "Cards/Hearts": [("a_heart", 1), ("k", 2)],
            Suit.CLUBS: [("10_clubs", 3)],
        })
        assert index.size() == 3
        assert index.get(CardIdentity(Suit.CLUBS, Rank.TEN)) == 3

    def test_build_with_configured_paths(self):
        """Test suit paths from the environment steer the catalogue build."""
        with patch.dict(os.environ, {"SUIT_PATHS": "diamonds=Art/Red2"}):
            suit_paths = CatalogueConfig().suit_paths

        groups = {"Art/Red2": [("q", "queen"), ("7_diamond", "seven")]}
        assert build_from_groups(groups).size() == 0
        index = build_from_groups(groups, suit_paths)
        assert index.get(CardIdentity(Suit.DIAMONDS, Rank.QUEEN)) == "queen"
        assert index.get(CardIdentity(Suit.DIAMONDS, Rank.SEVEN)) == "seven"


class TestDeckIndex:
    """Tests for DeckIndex lookups."""

    def test_get_absent(self, deck_index, empty_index):
        """Test lookups of absent identities return None."""
        card = CardIdentity(Suit.HEARTS, Rank.TWO)
        assert empty_index.get(card) is None
        assert card not in empty_index
        assert card in deck_index

    def test_read_only_listing(self, deck_index):
        """Test the full deck listing cannot be mutated through the index."""
        deck = deck_index.full_deck()
        assert isinstance(deck, tuple)
        with pytest.raises(AttributeError):
            deck.append(deck[0])  # type: ignore[attr-defined]

    def test_iteration(self, deck_index):
        """Test iterating yields the full deck."""
        assert tuple(deck_index) == deck_index.full_deck()

    def test_repr(self):
        """Test repr shows the size."""
        assert repr(DeckIndex({})) == "DeckIndex(size=0)"
