"""
TabOrderStore - Ordered set of open tabs and the active-tab pointer.
"""
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from .tab_info import TabInfo
from error_handling import DuplicateTabError, UnknownTabError
from utils.event_logger import EventLogger, get_event_logger


@dataclass(frozen=True)
class TabsState:
    """Immutable view of the store handed to subscribers."""
    tabs: Tuple[TabInfo, ...]
    active_tab_id: Optional[str]

    @property
    def tab_ids(self) -> List[str]:
        return [tab.tab_id for tab in self.tabs]


TabsListener = Callable[[TabsState], None]


class TabOrderStore:
    """
    Owns the display order of the open tabs and which one is active.

    Responsibilities:
    - Open tabs next to the tab the user is looking at
    - Close tabs and reselect a neighbour when the active tab goes away
    - Move tabs with list-splice semantics
    - Notify subscribers after every change

    The store is single-owner: callers serialize their calls, no locking is done.
    """

    def __init__(self, event_logger: Optional[EventLogger] = None, strict: bool = False):
        """
        Initialize TabOrderStore.

        Args:
            event_logger: Logger for tab events (defaults to the process logger)
            strict: Raise on unknown ids in set_active_tab and duplicate ids in open_tab
                instead of ignoring them with a warning
        """
        self._tabs: List[TabInfo] = []
        self._active_tab_id: Optional[str] = None
        self._listeners: List[TabsListener] = []
        self._logger = event_logger or get_event_logger()
        self.strict = strict

    @property
    def tabs(self) -> List[TabInfo]:
        """Open tabs in display order (a copy)."""
        return list(self._tabs)

    @property
    def active_tab_id(self) -> Optional[str]:
        return self._active_tab_id

    def __len__(self) -> int:
        return len(self._tabs)

    def __contains__(self, tab_id: object) -> bool:
        return self.index_of(tab_id) != -1

    def snapshot(self) -> TabsState:
        return TabsState(tabs=tuple(self._tabs), active_tab_id=self._active_tab_id)

    def index_of(self, tab_id: Optional[str]) -> int:
        """Position of the first tab with this id, or -1."""
        for index, tab in enumerate(self._tabs):
            if tab.tab_id == tab_id:
                return index
        return -1

    def get_tab_info(self, tab_id: str) -> Optional[TabInfo]:
        index = self.index_of(tab_id)
        return self._tabs[index] if index != -1 else None

    def get_active_tab(self) -> Optional[TabInfo]:
        """Get the currently active tab"""
        if self._active_tab_id is None:
            return None
        return self.get_tab_info(self._active_tab_id)

    def open_tab(self, tab: TabInfo) -> str:
        """
        Insert a tab right after the active tab and make it active.

        The tab goes to the end when nothing is active or the active id is not
        among the open tabs. Keeping ids unique is the caller's job; outside
        strict mode a duplicate is inserted anyway and reported as a warning.

        Args:
            tab: Descriptor of the tab to open

        Returns:
            The id of the opened tab
        """
        if tab.tab_id in self:
            if self.strict:
                raise DuplicateTabError(
                    f"Tab already open: {tab.tab_id}",
                    operation="open_tab",
                    tab_id=tab.tab_id
                )
            self._logger.tab_duplicate(tab.tab_id)

        active_index = self.index_of(self._active_tab_id) if self._active_tab_id is not None else -1
        insert_index = active_index + 1 if active_index != -1 else len(self._tabs)

        self._tabs.insert(insert_index, tab)
        previous = self._active_tab_id
        self._active_tab_id = tab.tab_id

        self._logger.tab_opened(tab.tab_id, insert_index, label=tab.label, previous_active_id=previous)
        self._notify()
        return tab.tab_id

    def close_tab(self, tab_id: str) -> bool:
        """
        Close a tab.

        When the closed tab was active, the tab that slides into its position
        becomes active, else the tab before it, else nothing.

        Args:
            tab_id: Tab ID to close

        Returns:
            True if a tab was closed, False if the id is not open
        """
        index = self.index_of(tab_id)
        if index == -1:
            self._logger.tab_not_found(tab_id, "close_tab")
            return False

        self._tabs = [tab for tab in self._tabs if tab.tab_id != tab_id]

        if self._active_tab_id == tab_id:
            self._active_tab_id = self._reselect(index)

        self._logger.tab_closed(tab_id, next_active_id=self._active_tab_id, index=index)
        self._notify()
        return True

    def _reselect(self, closed_index: int) -> Optional[str]:
        if closed_index < len(self._tabs):
            return self._tabs[closed_index].tab_id
        if closed_index - 1 >= 0 and self._tabs:
            return self._tabs[closed_index - 1].tab_id
        return None

    def set_active_tab(self, tab_id: Optional[str]) -> bool:
        """
        Make a tab active.

        Passing None clears the selection. An id that is not open is ignored
        (or raises UnknownTabError in strict mode) so the active id always
        refers to an open tab.

        Args:
            tab_id: Tab ID to activate

        Returns:
            True if the active tab is now tab_id, False otherwise
        """
        if tab_id is not None and tab_id not in self:
            if self.strict:
                raise UnknownTabError(
                    f"Tab not found: {tab_id}",
                    operation="set_active_tab",
                    tab_id=tab_id
                )
            self._logger.tab_not_found(tab_id, "set_active_tab")
            return False

        previous = self._active_tab_id
        if previous == tab_id:
            return True

        self._active_tab_id = tab_id
        self._logger.tab_activated(tab_id, previous_id=previous)
        self._notify()
        return True

    def move_tab(self, from_index: int, to_index: int) -> bool:
        """
        Move a tab with splice semantics.

        from_index is a position in the current order; to_index is a position
        in the order after the tab has been taken out. Indices are not clamped
        on the caller's behalf: a from_index outside the list removes nothing,
        so nothing moves, and to_index past either end inserts at that end
        (list.insert behaviour). Negative indices count from the end.

        Returns:
            True if a tab was moved, False if from_index was out of range
        """
        if not -len(self._tabs) <= from_index < len(self._tabs):
            self._logger.system_debug(
                f"Ignoring move from out-of-range index {from_index}",
                from_index=from_index,
                to_index=to_index
            )
            return False

        tab = self._tabs.pop(from_index)
        self._tabs.insert(to_index, tab)

        self._logger.tab_moved(tab.tab_id, from_index, to_index)
        self._notify()
        return True

    def subscribe(self, listener: TabsListener) -> Callable[[], None]:
        """
        Register a listener called with a TabsState after every change.

        Returns:
            A callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        if not self._listeners:
            return
        state = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception as e:
                self._logger.system_error("Error in tabs listener", error=e)
