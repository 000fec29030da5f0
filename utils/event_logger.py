"""
Simple, robust event-driven logging for the tab stores.

Design principles:
- Non-blocking: logging errors never break a tab operation
- Simple: minimal API surface
- Flexible: easy to customize output via callbacks
"""
from enum import Enum
from typing import Any, Dict, List, Optional, Callable
from dataclasses import dataclass, field
from datetime import datetime
import time


class EventType(str, Enum):
    """All event types that can be logged"""
    # Tab events
    TAB_OPENED = "tab_opened"
    TAB_CLOSED = "tab_closed"
    TAB_ACTIVATED = "tab_activated"
    TAB_MOVED = "tab_moved"
    TAB_NOT_FOUND = "tab_not_found"
    TAB_DUPLICATE = "tab_duplicate"

    # Drag events
    DRAG_DROPPED = "drag_dropped"

    # Cache events
    CACHE_STORED = "cache_stored"
    CACHE_EVICTED = "cache_evicted"
    CACHE_CLEARED = "cache_cleared"
    CACHE_CAPACITY_CHANGED = "cache_capacity_changed"

    # System events
    SYSTEM_INFO = "system_info"
    SYSTEM_WARNING = "system_warning"
    SYSTEM_ERROR = "system_error"
    SYSTEM_DEBUG = "system_debug"


@dataclass
class TabsEvent:
    """Structured event data"""
    event_type: EventType
    message: str
    timestamp: float = field(default_factory=time.time)
    level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR
    details: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "event_type": self.event_type.value,
            "message": self.message,
            "timestamp": self.timestamp,
            "timestamp_iso": datetime.fromtimestamp(self.timestamp).isoformat(),
            "level": self.level,
            "details": self.details
        }


class EventLogger:
    """
    Simple, robust event logger.

    In debug mode: prints directly to console
    In normal mode: only calls callbacks (no prints)
    """

    def __init__(self, debug_mode: bool = False, max_history: int = 1000):
        self.debug_mode = debug_mode
        self._callbacks: List[Callable[[TabsEvent], None]] = []
        self._event_history: List[TabsEvent] = []
        self._max_history = max_history

    def register_callback(self, callback: Callable[[TabsEvent], None]) -> None:
        """Register a callback for all events"""
        if callback not in self._callbacks:
            self._callbacks.append(callback)

    def unregister_callback(self, callback: Callable[[TabsEvent], None]) -> None:
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    def get_history(self, event_type: Optional[EventType] = None) -> List[TabsEvent]:
        """Return recorded events, oldest first, optionally filtered by type"""
        if event_type is None:
            return list(self._event_history)
        return [event for event in self._event_history if event.event_type == event_type]

    def clear_history(self) -> None:
        self._event_history.clear()

    def _safe_emit(self, event: TabsEvent) -> None:
        """Safely emit an event - never raises exceptions"""
        self._event_history.append(event)
        if len(self._event_history) > self._max_history:
            self._event_history.pop(0)

        if self.debug_mode:
            try:
                self._print_event(event)
            except Exception:
                pass  # Ignore print errors

        for callback in list(self._callbacks):
            try:
                callback(event)
            except Exception:
                pass  # Ignore callback errors

    def _print_event(self, event: TabsEvent) -> None:
        """Print event in debug mode"""
        level_emoji = {
            "DEBUG": "🔍",
            "INFO": "ℹ️",
            "WARNING": "⚠️",
            "ERROR": "❌",
        }
        emoji = level_emoji.get(event.level, "•")
        print(f"{emoji} {event.message}")

        if event.details:
            for key, value in event.details.items():
                # Only print simple types
                if value is not None and isinstance(value, (str, int, float, bool)):
                    print(f"   {key}: {value}")

    def emit(self, event_type: EventType, message: str, level: str = "INFO", **details) -> None:
        """Emit an event - safe wrapper that never raises"""
        try:
            event = TabsEvent(
                event_type=event_type,
                message=message,
                level=level,
                details=details
            )
            self._safe_emit(event)
        except Exception:
            if self.debug_mode:
                try:
                    print(f"⚠️ Event logger error: {message}")
                except Exception:
                    pass

    # Convenience methods
    def tab_opened(self, tab_id: str, index: int, label: str = None, **details):
        msg = f"Opened tab: {tab_id} at position {index}"
        if label:
            msg += f" ({label})"
        self.emit(EventType.TAB_OPENED, msg, "INFO", tab_id=tab_id, index=index, label=label, **details)

    def tab_closed(self, tab_id: str, next_active_id: str = None, **details):
        msg = f"Closed tab: {tab_id}"
        if next_active_id:
            msg += f" → active: {next_active_id}"
        self.emit(EventType.TAB_CLOSED, msg, "INFO", tab_id=tab_id, next_active_id=next_active_id, **details)

    def tab_activated(self, tab_id: str, previous_id: str = None, **details):
        self.emit(EventType.TAB_ACTIVATED, f"Switched to tab: {tab_id}", "DEBUG",
                  tab_id=tab_id, previous_id=previous_id, **details)

    def tab_not_found(self, tab_id: str, operation: str, **details):
        self.emit(EventType.TAB_NOT_FOUND, f"Tab not found for {operation}: {tab_id}", "WARNING",
                  tab_id=tab_id, operation=operation, **details)

    def tab_duplicate(self, tab_id: str, **details):
        self.emit(EventType.TAB_DUPLICATE, f"Tab id already open: {tab_id}", "WARNING", tab_id=tab_id, **details)

    def tab_moved(self, tab_id: str, from_index: int, to_index: int, **details):
        self.emit(EventType.TAB_MOVED, f"Moved tab {tab_id}: {from_index} → {to_index}", "DEBUG",
                  tab_id=tab_id, from_index=from_index, to_index=to_index, **details)

    def drag_dropped(self, dragged_index: int, to_index: Optional[int], **details):
        if to_index is None:
            msg = f"Dropped tab {dragged_index} in place (no move)"
        else:
            msg = f"Dropped tab {dragged_index} at {to_index}"
        self.emit(EventType.DRAG_DROPPED, msg, "DEBUG", dragged_index=dragged_index, to_index=to_index, **details)

    def cache_stored(self, key: str, updated: bool = False, size: int = None, **details):
        action = "Updated" if updated else "Cached"
        self.emit(EventType.CACHE_STORED, f"{action} content for {key}", "DEBUG",
                  key=key, updated=updated, size=size, **details)

    def cache_evicted(self, key: str, capacity: int = None, **details):
        self.emit(EventType.CACHE_EVICTED, f"Evicted cached content for {key}", "DEBUG",
                  key=key, capacity=capacity, **details)

    def cache_cleared(self, count: int = 0, **details):
        self.emit(EventType.CACHE_CLEARED, f"Cleared {count} cached entr{'y' if count == 1 else 'ies'}", "INFO",
                  count=count, **details)

    def cache_capacity_changed(self, capacity: int, previous: int = None, size: int = None, **details):
        msg = f"Cache capacity set to {capacity}"
        if size is not None and size > capacity:
            msg += f" ({size} entries held until next insert)"
        self.emit(EventType.CACHE_CAPACITY_CHANGED, msg, "INFO",
                  capacity=capacity, previous=previous, size=size, **details)

    def system_info(self, message: str, **details):
        self.emit(EventType.SYSTEM_INFO, message, "INFO", **details)

    def system_warning(self, message: str, **details):
        self.emit(EventType.SYSTEM_WARNING, message, "WARNING", **details)

    def system_error(self, message: str, error: Exception = None, **details):
        msg = message
        if error:
            msg += f" - {str(error)}"
        self.emit(EventType.SYSTEM_ERROR, msg, "ERROR", error=str(error) if error else None, **details)

    def system_debug(self, message: str, **details):
        self.emit(EventType.SYSTEM_DEBUG, message, "DEBUG", **details)


# Global instance
_global_event_logger: Optional[EventLogger] = None

def get_event_logger() -> EventLogger:
    """Get the global event logger instance"""
    global _global_event_logger
    if _global_event_logger is None:
        _global_event_logger = EventLogger(debug_mode=False)
    return _global_event_logger

def set_event_logger(logger: EventLogger) -> None:
    """Set the global event logger instance"""
    global _global_event_logger
    _global_event_logger = logger
