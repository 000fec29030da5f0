"""
TabPanel - Renders tab content and keeps inactive content in the cache.
"""
from typing import Any, Callable, Dict, Mapping, Optional

from .content_cache import ABSENT, ContentCache
from .tab_order_store import TabOrderStore, TabsState


class TabPanel:
    """
    Couples the tab store with the content cache on behalf of the renderer.

    The active tab renders fresh content. When a tab stops being active, the
    content it last rendered is stored in the cache under its id, so an
    inactive tab can show that snapshot as placeholder output. Closed tabs are
    not cached, but entries of tabs closed later stay in the cache until they
    are evicted or cleared.

    Example:
        >>> panel = TabPanel(store, cache)
        >>> panel.render("a", "<editor a>")
        '<editor a>'
        >>> store.set_active_tab("b")
        True
        >>> panel.placeholder("a")
        '<editor a>'
    """

    def __init__(self, store: TabOrderStore, cache: ContentCache):
        self.store = store
        self.cache = cache
        self._rendered: Dict[str, Any] = {}
        self._active_tab_id = store.active_tab_id
        self._unsubscribe: Optional[Callable[[], None]] = store.subscribe(self._on_tabs_changed)

    def render(self, tab_id: str, content: Any = None) -> Any:
        """
        Content to display for a tab.

        Args:
            tab_id: Tab being rendered
            content: Freshly rendered content, or None to fall back to the cache

        Returns:
            The content for the active tab, None for inactive tabs
        """
        if tab_id != self.store.active_tab_id:
            return None

        if content is not None:
            self._rendered[tab_id] = content
            return content

        cached = self.cache.get(tab_id)
        return None if cached is ABSENT else cached

    def render_active(self, contents: Mapping[str, Any]) -> Any:
        """Pick and render the active tab's entry from a tab_id -> content mapping."""
        active_tab_id = self.store.active_tab_id
        if active_tab_id is None:
            return None
        return self.render(active_tab_id, contents.get(active_tab_id))

    def placeholder(self, tab_id: str) -> Any:
        """Cached content for a tab, verbatim (ABSENT if nothing is cached)."""
        return self.cache.get(tab_id)

    def _on_tabs_changed(self, state: TabsState) -> None:
        previous = self._active_tab_id
        self._active_tab_id = state.active_tab_id
        if previous is None or previous == state.active_tab_id:
            return

        snapshot = self._rendered.pop(previous, None)
        if snapshot is not None and previous in state.tab_ids:
            self.cache.put(previous, snapshot)

    def detach(self) -> None:
        """Stop following the store."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
