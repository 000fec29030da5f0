"""
TabsProvider - Host object that owns one tab group.
"""
from typing import Any, Optional

from .content_cache import ContentCache
from .tab_info import TabInfo
from .tab_order_store import TabOrderStore
from .tab_panel import TabPanel
from .tab_strip import TabStrip
from tabs_config import TabsConfig, TabStyles
from utils.event_logger import EventLogger


class TabsProvider:
    """
    Builds and owns the stores of a tab group from a TabsConfig.

    Create one per tab group and hand its parts to the views that need them.
    Two providers never share state.

    Example:
        >>> provider = TabsProvider(config=TabsConfig(cache=CacheConfig(cache_limit=3)))
        >>> provider.open_tab("readme", "README.md")
        'readme'
        >>> provider.strip.render()[0].is_active
        True
    """

    def __init__(self, config: Optional[TabsConfig] = None, event_logger: Optional[EventLogger] = None):
        """
        Initialize the provider.

        Args:
            config: Tab group configuration (defaults to TabsConfig())
            event_logger: Logger shared by all parts of this group (a new
                EventLogger honoring config.logging by default)
        """
        self.config = config or TabsConfig()
        self.event_logger = event_logger or EventLogger(debug_mode=self.config.logging.debug_mode)
        self.styles: TabStyles = self.config.resolved_styles()

        self.store = TabOrderStore(
            event_logger=self.event_logger,
            strict=self.config.store.strict_tab_ids
        )
        self.cache = ContentCache(
            capacity=self.config.cache.cache_limit,
            event_logger=self.event_logger
        )
        self.strip = TabStrip(self.store, styles=self.styles, event_logger=self.event_logger)
        self.panel = TabPanel(self.store, self.cache)

    @property
    def cache_limit(self) -> int:
        return self.cache.capacity

    def set_cache_limit(self, limit: int) -> None:
        """Change the cache capacity; takes effect on the next insertion."""
        self.cache.set_capacity(limit)

    def open_tab(self, tab_id: str, label: str, icon: Any = None, **metadata) -> str:
        return self.store.open_tab(TabInfo(tab_id=tab_id, label=label, icon=icon, metadata=metadata))

    def close(self) -> None:
        """Detach the panel from the store and drop cached content."""
        self.panel.detach()
        self.cache.clear()
