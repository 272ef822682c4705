"""Ordered hand of dealt card identities."""

from typing import Iterable, Iterator

from cardhand.cards import CATALOGUE_SIZE, CardIdentity
from cardhand.math_utils import clamp

# from_index value for move_to_index meaning "insert a card not yet in the hand".
NEW_CARD = -1


class HandIndexError(IndexError):
    """A move referenced an index that cannot exist for the current hand."""


class DuplicateCardError(ValueError):
    """A card would appear twice in the hand."""


class HandCapacityError(ValueError):
    """The hand would hold more cards than the catalogue can supply."""


class HandState:
    """
    The ordered list of currently dealt cards.

    Order is left-to-right on screen. This is the single source of truth for
    card order; layout and rendering code only read it.
    """

    def __init__(self, capacity: int = CATALOGUE_SIZE) -> None:
        """
        Initialize an empty hand.

        Args:
            capacity: Maximum number of cards the hand may hold
        """
        self._capacity = capacity
        self._cards: list[CardIdentity] = []

    def deal(self, from_sequence: Iterable[CardIdentity], count: int) -> int:
        """
        Replace the hand with the first ``count`` cards of a sequence.

        ``count`` is clamped to what the sequence holds and to the hand's
        capacity; negative counts deal nothing.

        Returns:
            The number of cards dealt
        """
        source = list(from_sequence)
        n = clamp(count, 0, min(len(source), self._capacity))

        dealt = source[:n]
        if len(set(dealt)) != len(dealt):
            raise DuplicateCardError("Dealt cards must be unique")

        self._cards.clear()
        self._cards.extend(dealt)
        return n

    def clear(self) -> None:
        """Remove all cards from the hand."""
        self._cards.clear()

    def move_to_index(
        self,
        from_index: int,
        to_index: int,
        card: CardIdentity | None = None,
    ) -> int:
        """
        Move the card at ``from_index`` so it ends up at ``to_index``.

        Cards outside the moved range keep their relative order. With
        ``from_index == NEW_CARD`` the given ``card`` is inserted instead.
        The target is clamped to the valid range for the move.

        Args:
            from_index: Current index of the card, or NEW_CARD
            to_index: Desired final index
            card: Card to insert when from_index is NEW_CARD

        Returns:
            The index the card ended up at

        Raises:
            HandIndexError: from_index does not refer to a card in the hand
            DuplicateCardError: the inserted card is already in the hand
        """
        if from_index == NEW_CARD:
            if card is None:
                raise ValueError("Inserting a new card requires the card")
            if card in self._cards:
                raise DuplicateCardError(f"{card} is already in the hand")
            if len(self._cards) >= self._capacity:
                raise HandCapacityError(f"Hand is full ({self._capacity} cards)")
            target = clamp(to_index, 0, len(self._cards))
            self._cards.insert(target, card)
            return target

        if not 0 <= from_index < len(self._cards):
            raise HandIndexError(
                f"Cannot move card {from_index} in a hand of {len(self._cards)}"
            )

        target = clamp(to_index, 0, len(self._cards) - 1)
        moved = self._cards.pop(from_index)
        self._cards.insert(target, moved)
        return target

    def index_of(self, card: CardIdentity) -> int:
        """Return the index of a card, or -1 if it is not in the hand."""
        try:
            return self._cards.index(card)
        except ValueError:
            return -1

    @property
    def cards(self) -> tuple[CardIdentity, ...]:
        """Return a snapshot of the hand order."""
        return tuple(self._cards)

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[CardIdentity]:
        return iter(tuple(self._cards))

    def __getitem__(self, index: int) -> CardIdentity:
        return self._cards[index]

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __str__(self) -> str:
        return " ".join(card.label for card in self._cards)

    def __repr__(self) -> str:
        return f"HandState({list(self._cards)!r})"
