"""
Tab Management - ordered tabs, active-tab selection and inactive content caching.

Provides the tab order store, the bounded content cache, drag-and-drop reorder
geometry and the headless views that couple them.
"""
from .tab_info import TabInfo
from .tab_order_store import TabOrderStore, TabsState
from .content_cache import ABSENT, CacheEntry, ContentCache
from .reorder import DropIntent, DropSide, TabBounds, compute_drop_intent, resolve_drop_index
from .tab_strip import TabStrip, TabView
from .tab_panel import TabPanel
from .tabs_provider import TabsProvider

__all__ = [
    "TabInfo",
    "TabOrderStore",
    "TabsState",
    "ABSENT",
    "CacheEntry",
    "ContentCache",
    "DropIntent",
    "DropSide",
    "TabBounds",
    "compute_drop_intent",
    "resolve_drop_index",
    "TabStrip",
    "TabView",
    "TabPanel",
    "TabsProvider",
]
