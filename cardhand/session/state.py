"""Drag gesture state enumeration."""

from enum import Enum, auto


class DragState(Enum):
    """
    Drag gesture states.

    Flow: IDLE → DRAGGING → (DRAGGING)* → IDLE
    """

    # No card is held
    IDLE = auto()

    # A card is held and follows the pointer
    DRAGGING = auto()

    def __str__(self) -> str:
        return self.name.title()

