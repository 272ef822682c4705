"""Hand events for the event system."""

from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Any, Callable


class EventType(Enum):
    """Types of hand events."""

    # Catalogue events
    CATALOGUE_EMPTY = auto()

    # Hand content events
    HAND_DEALT = auto()
    HAND_CLEARED = auto()
    CARD_MOVED = auto()

    # Geometry events
    LAYOUT_CHANGED = auto()

    # Drag gesture events
    DRAG_STARTED = auto()
    DRAG_PREVIEW = auto()
    DRAG_ENDED = auto()
    DRAG_CANCELLED = auto()

    # Error events
    INVALID_ACTION = auto()


@dataclass(frozen=True)
class HandEvent:
    """
    Immutable hand event.

    Events are the primary communication mechanism between the engine
    and the presentation layer.
    """

    event_type: EventType
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        return f"{self.event_type.name}: {self.data}"


# Type alias for event handlers
EventHandler = Callable[[HandEvent], None]

# Events kept for inspection; older ones are dropped first.
DEFAULT_HISTORY_SIZE = 256


class EventEmitter:
    """
    Simple event emitter for hand events.

    Allows subscribing to specific event types or all events. Only the
    most recent events are kept in the history, since layout and drag
    updates are emitted for every pointer move.
    """

    def __init__(self, max_history: int = DEFAULT_HISTORY_SIZE) -> None:
        """
        Initialize the event emitter.

        Args:
            max_history: Number of recent events kept in the history
        """
        self._handlers: dict[EventType | None, list[EventHandler]] = {}
        self._event_history: deque[HandEvent] = deque(maxlen=max(0, max_history))

    def subscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """
        Subscribe to events.

        Args:
            handler: Function to call when event occurs
            event_type: Specific event type to subscribe to, or None for all events
        """
        self._handlers.setdefault(event_type, []).append(handler)

    def unsubscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """Unsubscribe a handler. Unknown handlers are ignored."""
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def emit(self, event: HandEvent) -> None:
        """
        Emit an event to all subscribers.

        Args:
            event: The event to emit
        """
        self._event_history.append(event)

        for handler in self._handlers.get(event.event_type, []):
            handler(event)

        for handler in self._handlers.get(None, []):
            handler(event)

    def emit_new(
        self,
        event_type: EventType,
        **data: Any,
    ) -> HandEvent:
        """
        Create and emit a new event.

        Args:
            event_type: Type of event
            **data: Event data

        Returns:
            The created event
        """
        event = HandEvent(event_type=event_type, data=data)
        self.emit(event)
        return event

    @property
    def history(self) -> list[HandEvent]:
        """Return the retained events, oldest first."""
        return list(self._event_history)

    def clear_history(self) -> None:
        """Clear the event history."""
        self._event_history.clear()
