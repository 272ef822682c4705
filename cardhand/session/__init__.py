"""Interactive hand session: controller, drag gesture and events."""

from cardhand.session.events import EventEmitter, EventType, HandEvent
from cardhand.session.state import DragState
from cardhand.session.controller import HandController, RenderSlot
from cardhand.session.drag import DragGesture

__all__ = [
    "EventEmitter",
    "EventType",
    "HandEvent",
    "DragState",
    "HandController",
    "RenderSlot",
    "DragGesture",
]
