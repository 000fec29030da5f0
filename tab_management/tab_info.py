"""
TabInfo - Descriptor of one open tab.
"""
from dataclasses import dataclass, field
from typing import Dict, Any
import time


@dataclass
class TabInfo:
    """
    Caller-supplied descriptor of a tab.

    Attributes:
        tab_id: Unique identifier for this tab (assigned by the caller)
        label: Text shown on the tab
        icon: Opaque renderable shown before the label (None for no icon)
        metadata: Additional context about the tab
        created_at: Timestamp when the descriptor was created
    """
    tab_id: str
    label: str
    icon: Any = None
    metadata: Dict[str, Any] = field(default_factory=dict)
    created_at: float = field(default_factory=time.time)

    def __post_init__(self):
        """Validate tab info"""
        if not self.tab_id:
            raise ValueError("tab_id is required")
        if self.label is None:
            self.label = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary (excluding the icon)"""
        return {
            "tab_id": self.tab_id,
            "label": self.label,
            "has_icon": self.icon is not None,
            "metadata": self.metadata,
            "created_at": self.created_at,
        }
