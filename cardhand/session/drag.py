"""Drag-to-reorder gesture with a state machine."""

import logging
import math

from transitions import Machine

from cardhand.cards import CardIdentity
from cardhand.session.controller import HandController, RenderSlot
from cardhand.session.events import EventType
from cardhand.session.state import DragState

logger = logging.getLogger(__name__)

# Returned by move() and end() when no card is being dragged.
NO_DRAG = -1


class DragGesture:
    """
    One card being dragged through a hand: begin → move* → end.

    The gesture only reads slot positions from the controller and commits
    the final order through HandController.move_card(). While dragging it
    keeps a preview index: the slot the card would drop into, which the
    other cards flow around.
    """

    # State machine states
    STATES = [s.name.lower() for s in DragState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "grab", "source": "idle", "dest": "dragging"},
        {"trigger": "track", "source": "dragging", "dest": "dragging"},
        {"trigger": "drop", "source": "dragging", "dest": "idle"},
        {"trigger": "abort", "source": "dragging", "dest": "idle"},
    ]

    def __init__(self, controller: HandController) -> None:
        """
        Initialize an idle gesture.

        Args:
            controller: Controller owning the hand being reordered
        """
        self.controller = controller
        self._card: CardIdentity | None = None
        self._from_index = NO_DRAG
        self._preview_index = NO_DRAG
        self._grab_offset = 0.0
        self._card_x = 0.0

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="idle",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> DragState:
        """Get current gesture state as enum."""
        return DragState[self._machine_state.upper()]  # type: ignore

    @property
    def is_dragging(self) -> bool:
        return self.state == DragState.DRAGGING

    def begin(self, index: int, pointer_x: float) -> bool:
        """
        Pick up the card at ``index``.

        The offset between the pointer and the card's slot is kept for the
        rest of the gesture so the card does not jump under the pointer.

        Returns:
            True if the drag started
        """
        cards = self.controller.cards
        if self.is_dragging or not 0 <= index < len(cards):
            self.controller.events.emit_new(
                EventType.INVALID_ACTION,
                message="Cannot start drag",
                index=index,
                state=self.state.name,
            )
            return False

        slot_x = self.controller.layout()[index].offset_x
        self._card = cards[index]
        self._from_index = index
        self._preview_index = index
        self._grab_offset = pointer_x - slot_x
        self._card_x = slot_x

        self.grab()
        self.controller.events.emit_new(
            EventType.DRAG_STARTED, card=self._card, index=index
        )
        return True

    def move(self, pointer_x: float) -> int:
        """
        Follow the pointer and update the preview index.

        Returns:
            The preview index, or NO_DRAG when idle
        """
        if not self.is_dragging:
            return NO_DRAG

        if math.isfinite(pointer_x):
            self._card_x = pointer_x - self._grab_offset

        candidate = self.controller.insert_index_for(self._card_x, self._preview_index)
        if candidate != self._preview_index:
            self._preview_index = candidate
            self.controller.events.emit_new(
                EventType.DRAG_PREVIEW, card=self._card, index=candidate
            )

        self.track()
        return self._preview_index

    def end(self, pointer_x: float | None = None) -> int:
        """
        Drop the card and commit the new order.

        Without a usable pointer position (released outside the hand) the
        last tracked position is used, so the gesture always lands on a
        valid index.

        Returns:
            The card's final index, or NO_DRAG when idle or the card has
            left the hand since the drag began
        """
        if not self.is_dragging:
            return NO_DRAG

        if pointer_x is not None and math.isfinite(pointer_x):
            self._card_x = pointer_x - self._grab_offset

        card = self._card
        from_index = self.controller.index_of(card) if card is not None else NO_DRAG
        if from_index == NO_DRAG:
            logger.warning("Dragged card %s is no longer in the hand", card)
            self.cancel()
            return NO_DRAG

        target = self.controller.insert_index_for(self._card_x, self._preview_index)
        final = self.controller.move_card(from_index, target)

        self.drop()
        self.controller.events.emit_new(
            EventType.DRAG_ENDED, card=card, from_index=from_index, to_index=final
        )
        self._reset()
        return NO_DRAG if final is None else final

    def cancel(self) -> int:
        """
        Abandon the drag without changing the hand order.

        Returns:
            The index the card started at, or NO_DRAG when idle
        """
        if not self.is_dragging:
            return NO_DRAG

        start = self._from_index
        card = self._card
        self.abort()
        self.controller.events.emit_new(EventType.DRAG_CANCELLED, card=card, index=start)
        self._reset()
        return start

    def preview_order(self) -> tuple[CardIdentity, ...]:
        """Hand order as it would be if the card were dropped now."""
        cards = list(self.controller.cards)
        if not self.is_dragging or self._card not in cards:
            return tuple(cards)
        cards.remove(self._card)
        cards.insert(self._preview_index, self._card)
        return tuple(cards)

    def preview_slots(self) -> list[RenderSlot]:
        """Render slots for the preview order, with the held card under the pointer."""
        slots = self.controller.render_slots(self.preview_order())
        if not self.is_dragging:
            return slots
        return [
            RenderSlot(s.card, s.handle, self._card_x, s.rotation) if s.card == self._card else s
            for s in slots
        ]

    @property
    def card(self) -> CardIdentity | None:
        """The card being dragged, if any."""
        return self._card

    @property
    def card_x(self) -> float:
        """Current x of the dragged card in hand-local space."""
        return self._card_x

    @property
    def preview_index(self) -> int:
        return self._preview_index

    def _reset(self) -> None:
        self._card = None
        self._from_index = NO_DRAG
        self._preview_index = NO_DRAG
        self._grab_offset = 0.0
        self._card_x = 0.0
