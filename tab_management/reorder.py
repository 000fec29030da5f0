"""
Drag-and-drop reorder geometry.

Pure helpers that turn a pointer position over a tab's box into a drop intent
and a drop intent into the index passed to TabOrderStore.move_tab.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class DropSide(str, Enum):
    """Which half of the hovered tab the pointer is over"""
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class TabBounds:
    """Bounding box of a tab as reported by the drag surface."""
    left: float
    top: float
    right: float
    bottom: float

    @property
    def mid_x(self) -> float:
        return (self.left + self.right) / 2

    @property
    def width(self) -> float:
        return self.right - self.left

    def contains_point(self, x: float, y: float) -> bool:
        return self.left <= x < self.right and self.top <= y < self.bottom


@dataclass(frozen=True)
class DropIntent:
    """
    Where a dragged tab would land.

    Attributes:
        target_index: Index of the hovered tab
        side: Half of the hovered tab the pointer is over
        indicator_x: Edge of the hovered tab where a drop indicator goes
    """
    target_index: int
    side: DropSide
    indicator_x: float

    @property
    def insert_index(self) -> int:
        """Gap index in the current order: before the hovered tab or after it."""
        return self.target_index + 1 if self.side == DropSide.RIGHT else self.target_index


def compute_drop_intent(pointer_x: float, bounds: TabBounds, hovered_index: int) -> DropIntent:
    """
    Split the hovered tab at its horizontal midpoint.

    A pointer strictly left of the midpoint drops before the tab, anything
    else drops after it.
    """
    if pointer_x < bounds.mid_x:
        return DropIntent(target_index=hovered_index, side=DropSide.LEFT, indicator_x=bounds.left)
    return DropIntent(target_index=hovered_index, side=DropSide.RIGHT, indicator_x=bounds.right)


def resolve_drop_index(dragged_index: int, intent: DropIntent) -> Optional[int]:
    """
    Translate a drop intent into the to_index of a splice move.

    Dropping into the gap directly before or directly after the dragged tab
    leaves the order unchanged, so those return None. A gap to the right of the
    dragged tab shifts left by one once the tab has been taken out.

    Returns:
        Index for TabOrderStore.move_tab, or None when nothing should move
    """
    target = intent.insert_index
    if target == dragged_index or target == dragged_index + 1:
        return None
    if dragged_index < target:
        target -= 1
    return target
