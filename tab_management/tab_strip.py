"""
TabStrip - Headless tab bar: view rows, clicks and drag-to-reorder.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .reorder import DropIntent, TabBounds, compute_drop_intent, resolve_drop_index
from .tab_order_store import TabOrderStore
from tabs_config import TabStyles
from utils.event_logger import EventLogger, get_event_logger


@dataclass
class TabView:
    """What the drawing layer needs to paint one tab."""
    tab_id: str
    label: str
    icon: Any
    index: int
    is_active: bool
    is_dragging: bool
    css_class: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tab_id": self.tab_id,
            "label": self.label,
            "index": self.index,
            "is_active": self.is_active,
            "is_dragging": self.is_dragging,
            "css_class": self.css_class,
        }


class TabStrip:
    """
    Tab bar logic without any drawing.

    The drag surface reports pointer x positions and tab boxes; the strip
    keeps the drag state, exposes the drop indicator and performs the move on
    drop. It never looks at layout itself.
    """

    def __init__(
        self,
        store: TabOrderStore,
        styles: Optional[TabStyles] = None,
        event_logger: Optional[EventLogger] = None
    ):
        self.store = store
        self.styles = styles or TabStyles.defaults()
        self.dragged_tab_id: Optional[str] = None
        self.drop_indicator: Optional[DropIntent] = None
        self._logger = event_logger or get_event_logger()

    @property
    def is_dragging(self) -> bool:
        return self.dragged_tab_id is not None

    @property
    def dragged_index(self) -> Optional[int]:
        """Current position of the dragged tab, None when not dragging or the tab is gone."""
        if self.dragged_tab_id is None:
            return None
        index = self.store.index_of(self.dragged_tab_id)
        return index if index != -1 else None

    def render(self) -> List[TabView]:
        """One TabView per open tab, in display order."""
        active_tab_id = self.store.active_tab_id
        views = []
        for index, tab in enumerate(self.store.tabs):
            is_active = tab.tab_id == active_tab_id
            is_dragging = tab.tab_id == self.dragged_tab_id
            views.append(TabView(
                tab_id=tab.tab_id,
                label=tab.label,
                icon=tab.icon,
                index=index,
                is_active=is_active,
                is_dragging=is_dragging,
                css_class=self.styles.tab_classes(is_active, is_dragging),
            ))
        return views

    def click_tab(self, tab_id: str) -> bool:
        return self.store.set_active_tab(tab_id)

    def click_close(self, tab_id: str) -> bool:
        return self.store.close_tab(tab_id)

    def drag_start(self, index: int) -> bool:
        """Begin dragging the tab at index."""
        tabs = self.store.tabs
        if not 0 <= index < len(tabs):
            return False
        self.dragged_tab_id = tabs[index].tab_id
        self.drop_indicator = None
        return True

    def drag_over(self, index: int, pointer_x: float, bounds: TabBounds) -> Optional[DropIntent]:
        """
        Pointer moved over the tab at index.

        Returns:
            The new drop intent, or None when no drag is in progress
        """
        if self.dragged_tab_id is None:
            return None
        self.drop_indicator = compute_drop_intent(pointer_x, bounds, index)
        return self.drop_indicator

    def drag_end(self) -> Optional[int]:
        """
        Finish the drag, moving the dragged tab if the drop lands elsewhere.

        The dragged tab is looked up by id, so tabs opened or closed during
        the drag do not change which tab moves. A tab closed mid-drag cancels
        the drop. Drag state is cleared in every case.

        Returns:
            The to_index passed to move_tab, or None when nothing moved
        """
        to_index = None
        try:
            if self.dragged_tab_id is not None and self.drop_indicator is not None:
                dragged_index = self.dragged_index
                if dragged_index is None:
                    self._logger.system_warning(
                        f"Dragged tab closed before drop: {self.dragged_tab_id}",
                        tab_id=self.dragged_tab_id
                    )
                    return None

                to_index = resolve_drop_index(dragged_index, self.drop_indicator)
                self._logger.drag_dropped(dragged_index, to_index)
                if to_index is not None and not self.store.move_tab(dragged_index, to_index):
                    to_index = None
        finally:
            self.cancel_drag()
        return to_index

    def cancel_drag(self) -> None:
        self.dragged_tab_id = None
        self.drop_indicator = None
