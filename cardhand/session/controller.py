"""Hand controller: deals, re-lays out and reorders a hand in response to UI requests."""

import logging
from dataclasses import dataclass, replace
from typing import Any, Callable, Sequence

from cardhand.cards import CardIdentity
from cardhand.catalogue import DeckIndex
from cardhand.hand import HandIndexError, HandState
from cardhand.layout import LayoutMode, LayoutParams, LayoutSlot, layout_hand
from cardhand.math_utils import clamp
from cardhand.reorder import resolve_insert_index, slot_positions_excluding
from cardhand.session.events import EventEmitter, EventType, HandEvent
from cardhand.shuffle import RANDOM_SEED, shuffle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderSlot:
    """Everything a renderer needs to draw one card of the hand."""

    card: CardIdentity
    handle: Any
    offset_x: float
    rotation: float


class HandController:
    """
    Owns the hand and keeps its order and layout consistent.

    Every setter applies immediately: hand size and seed changes re-deal,
    spacing and fan changes re-lay out the current cards. Drag gestures
    read slot positions from here and commit through move_card().
    """

    def __init__(
        self,
        deck: DeckIndex,
        hand_size: int = 10,
        seed: int = RANDOM_SEED,
        params: LayoutParams | None = None,
        events: EventEmitter | None = None,
    ) -> None:
        """
        Initialize a controller over a built catalogue.

        Args:
            deck: The card catalogue to deal from
            hand_size: Number of cards to deal
            seed: Shuffle seed (0 = non-deterministic)
            params: Layout parameters
            events: Event emitter (a new one is created if not provided)
        """
        self.deck = deck
        self.events = events or EventEmitter()
        self._hand = HandState(capacity=deck.size())
        self._hand_size = self._clamp_hand_size(hand_size)
        self._seed = seed
        self._params = params or LayoutParams()

        if deck.size() == 0:
            logger.error("Hand controller has an empty catalogue; nothing can be dealt")
            self.events.emit_new(EventType.CATALOGUE_EMPTY)

    @classmethod
    def from_settings(
        cls,
        deck: DeckIndex,
        settings: Any,
        events: EventEmitter | None = None,
    ) -> "HandController":
        """Create a controller from a HandSettings-like object."""
        params = LayoutParams(
            spacing=settings.spacing,
            fan_angle=settings.fan_angle,
            mode=LayoutMode(settings.layout_mode),
            card_width=settings.card_width,
        )
        return cls(
            deck,
            hand_size=settings.hand_size,
            seed=settings.seed,
            params=params,
            events=events,
        )

    def subscribe(
        self,
        handler: Callable[[HandEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to hand events."""
        self.events.subscribe(handler, event_type)

    # Hand content

    def deal_new_hand(self) -> tuple[CardIdentity, ...]:
        """Shuffle the catalogue and deal a fresh hand."""
        shuffled = shuffle(self.deck.full_deck(), self._seed)
        dealt = self._hand.deal(shuffled, self._hand_size)
        logger.debug("Dealt %d cards (seed=%d)", dealt, self._seed)
        self.events.emit_new(EventType.HAND_DEALT, cards=self.cards, seed=self._seed)
        self.relayout()
        return self.cards

    def clear_hand(self) -> None:
        """Remove every card from the hand."""
        self._hand.clear()
        self.events.emit_new(EventType.HAND_CLEARED)
        self.relayout()

    def move_card(
        self,
        from_index: int,
        to_index: int,
        card: CardIdentity | None = None,
    ) -> int | None:
        """
        Move a card to a new index and re-lay out.

        Args:
            from_index: Current index of the card, or NEW_CARD to insert ``card``
            to_index: Desired final index (clamped)
            card: Card to insert when from_index is NEW_CARD

        Returns:
            The final index, or None if the move was rejected
        """
        try:
            final = self._hand.move_to_index(from_index, to_index, card)
        except (HandIndexError, ValueError) as exc:
            logger.warning("Rejected move %d -> %d: %s", from_index, to_index, exc)
            self.events.emit_new(
                EventType.INVALID_ACTION,
                message=str(exc),
                from_index=from_index,
                to_index=to_index,
            )
            return None

        self.events.emit_new(
            EventType.CARD_MOVED,
            card=self._hand[final],
            from_index=from_index,
            to_index=final,
        )
        self.relayout()
        return final

    # Settings

    def set_hand_size(self, hand_size: int) -> None:
        """Change the hand size and re-deal."""
        self._hand_size = self._clamp_hand_size(hand_size)
        self.deal_new_hand()

    def set_seed(self, seed: int) -> None:
        """Change the shuffle seed and re-deal."""
        self._seed = seed
        self.deal_new_hand()

    def set_spacing(self, spacing: float) -> None:
        """Change card spacing and re-lay out the current hand."""
        self._params = replace(self._params, spacing=spacing)
        self.relayout()

    def set_fan_angle(self, fan_angle: float) -> None:
        """Change the per-card fan angle and re-lay out the current hand."""
        self._params = replace(self._params, fan_angle=fan_angle)
        self.relayout()

    def set_layout_mode(self, mode: LayoutMode) -> None:
        """Switch between manual and row layout."""
        self._params = replace(self._params, mode=mode)
        self.relayout()

    def set_card_width(self, card_width: float) -> None:
        """Change the card width used by row layout."""
        self._params = replace(self._params, card_width=card_width)
        self.relayout()

    # Layout

    def relayout(self) -> list[LayoutSlot]:
        """Recompute the layout for the current hand and announce it."""
        slots = self.layout()
        self.events.emit_new(EventType.LAYOUT_CHANGED, count=len(slots))
        return slots

    def layout(self) -> list[LayoutSlot]:
        """Return the slots for the current hand. Safe to call at any time."""
        return layout_hand(len(self._hand), self._params)

    def render_slots(
        self, order: Sequence[CardIdentity] | None = None
    ) -> list[RenderSlot]:
        """
        Pair each card with its artwork handle and slot.

        Args:
            order: Card order to lay out; defaults to the current hand
        """
        cards = self.cards if order is None else tuple(order)
        slots = layout_hand(len(cards), self._params)
        return [
            RenderSlot(card, self.deck.get(card), slot.offset_x, slot.rotation)
            for card, slot in zip(cards, slots)
        ]

    def insert_index_for(self, local_x: float, dragged_index: int) -> int:
        """
        Resolve where a card dragged to ``local_x`` would land.

        Args:
            local_x: Dragged card x in hand-local space
            dragged_index: Slot currently reserved for the dragged card

        Returns:
            Final index for the dragged card
        """
        positions = slot_positions_excluding(self.layout(), dragged_index)
        return resolve_insert_index(local_x, positions)

    # Queries

    @property
    def cards(self) -> tuple[CardIdentity, ...]:
        """Current hand order (read-only)."""
        return self._hand.cards

    def index_of(self, card: CardIdentity) -> int:
        """Return a card's index in the hand, or -1."""
        return self._hand.index_of(card)

    @property
    def hand_size(self) -> int:
        return self._hand_size

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def params(self) -> LayoutParams:
        return self._params

    def _clamp_hand_size(self, hand_size: int) -> int:
        return clamp(hand_size, 1, max(1, self.deck.size()))
