"""
Utility modules for the tab stores.
"""
from .event_logger import EventLogger, EventType, TabsEvent, get_event_logger, set_event_logger

__all__ = ["EventLogger", "EventType", "TabsEvent", "get_event_logger", "set_event_logger"]
