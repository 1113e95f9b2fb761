"""A layout that places its children left to right in rows."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple


@dataclass(eq=False)
class Node:
    """A positioned element with a content size, an anchor and a visibility flag.

    Nodes compare by identity, so two nodes with the same fields are still
    distinct elements.
    """

    width: float = 0.0
    height: float = 0.0
    x: float = 0.0
    y: float = 0.0
    anchor: Tuple[float, float] = (0.5, 0.5)
    visible: bool = True
    texture: str = ""
    text: str = ""


class Alignment(Enum):
    LEFT = 0
    CENTER = 1
    RIGHT = 2


class TableLayout:
    """Places each added child after the previous one on the current row.

    The alignment, padding and spacing methods act on the most recently
    added child (or on the position of the next one) and return the layout,
    so calls can be chained.
    """

    def __init__(self, table_width: float = 100.0, row_height: float = 8.0) -> None:
        self.table_width = table_width
        self.row_height = row_height
        self.x = 0.0
        self.y = 0.0
        self.visible = True
        self.children: List[Node] = []
        self.next_x = 0.0
        self.next_y = 0.0
        self._last_added: Optional[Node] = None

    @property
    def next_child_position(self) -> Tuple[float, float]:
        """Where the next added child will be placed."""
        return (self.next_x, self.next_y)

    @next_child_position.setter
    def next_child_position(self, pos: Tuple[float, float]) -> None:
        self.next_x, self.next_y = pos

    @property
    def last_added_child(self) -> Optional[Node]:
        return self._last_added

    def add_child(self, child: Node) -> None:
        """Add ``child`` at the next position and advance past its width."""
        self.children.append(child)
        child.x, child.y = self.next_x, self.next_y
        self._last_added = child
        self.next_x += child.width

    def align(self, direction: Alignment) -> "TableLayout":
        """Align the last added child within the table width."""
        last = self._last_added
        if last is None:
            return self

        if direction is Alignment.LEFT:
            last.anchor = (0.0, 1.0)
            last.x = 0.0
            self.next_x = last.width
        elif direction is Alignment.CENTER:
            last.anchor = (0.5, 1.0)
            last.x = self.table_width / 2
            self.next_x = self.table_width / 2 + last.width / 2
        elif direction is Alignment.RIGHT:
            last.anchor = (1.0, 1.0)
            last.x = self.table_width
            self.next_x = self.table_width
        else:
            raise ValueError(f"Bad align value: {direction!r}")
        return self

    def pad_left(self, padding: float) -> "TableLayout":
        last = self._last_added
        if last is None:
            return self
        last.x += padding
        self.next_x = last.x + last.width
        return self

    def pad_right(self, padding: float) -> "TableLayout":
        last = self._last_added
        if last is None:
            return self
        last.x -= padding
        self.next_x = last.x + last.width
        return self

    def pad_top(self, padding: float) -> "TableLayout":
        # The next child's y stays put, so later children are not pushed down.
        last = self._last_added
        if last is not None:
            last.y -= padding
        return self

    def pad_bottom(self, padding: float) -> "TableLayout":
        # The next child's y stays put, so later children are not pushed up.
        last = self._last_added
        if last is not None:
            last.y += padding
        return self

    def space_x(self, spacing: float) -> "TableLayout":
        self.next_x += spacing
        return self

    def space_y(self, spacing: float) -> "TableLayout":
        self.next_y += spacing
        return self

    def row(self, height: Optional[float] = None) -> "TableLayout":
        """Start a new row ``height`` below (the row height by default)."""
        self.next_x = 0.0
        self.next_y -= self.row_height if height is None else height
        return self