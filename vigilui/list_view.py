"""A scrolling list showing a fixed number of rows over a list of objects."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Generic, Iterable, List, Optional, Tuple, TypeVar

from vigilui.table_layout import Alignment, Node, TableLayout

T = TypeVar("T")

SCROLL_BAR_MAX_SCALE_Y = 120.0
ITEM_HEIGHT = 25.0
EMPTY_IMAGE = ""
EMPTY_LABEL = "---"


@dataclass
class _ScrollBar:
    x: float
    y: float
    scale_y: float
    anchor: Tuple[float, float] = (0.0, 1.0)
    visible: bool = True


class ListViewItem(Generic[T]):
    """One visible row of a list view."""

    def __init__(self, parent: "ListView[T]", x: float, y: float) -> None:
        self._parent = parent
        self.layout = TableLayout(parent.width)
        self.background = Node(anchor=(0.0, 1.0), texture=parent.regular_bg)
        self.icon = Node(texture=EMPTY_IMAGE)
        self.label = Node(anchor=(0.0, 1.0), text=EMPTY_LABEL)
        self.object: Optional[T] = None

        self.layout.x, self.layout.y = x, y
        self.layout.add_child(self.background)
        self.layout.row(1)
        self.layout.add_child(self.icon)
        self.layout.align(Alignment.LEFT).pad_left(5).space_x(5)
        self.layout.add_child(self.label)
        self.layout.pad_top(1)

    @property
    def visible(self) -> bool:
        return self.layout.visible

    @property
    def selected(self) -> bool:
        return self.background.texture == self._parent.highlighted_bg and (
            self._parent.highlighted_bg != self._parent.regular_bg
        )

    def set_selected(self, selected: bool) -> None:
        parent = self._parent
        self.background.texture = parent.highlighted_bg if selected else parent.regular_bg
        if parent.on_selected is not None:
            parent.on_selected(self, selected)

    def set_visible(self, visible: bool) -> None:
        self.layout.visible = visible

    def set_object(self, obj: T) -> None:
        self.object = obj
        if self._parent.on_object_set is not None:
            self._parent.on_object_set(self, obj)


class ListView(ABC, Generic[T]):
    """Shows ``visible_item_count`` rows of its objects and scrolls with the selection.

    ``on_selected`` is called after a row is selected or deselected, and
    ``on_object_set`` after a row is given an object.
    """

    def __init__(
        self,
        visible_item_count: int,
        width: float,
        regular_bg: str = EMPTY_IMAGE,
        highlighted_bg: str = EMPTY_IMAGE,
    ) -> None:
        self.visible_item_count = visible_item_count
        self.width = width
        self.regular_bg = regular_bg
        self.highlighted_bg = highlighted_bg
        self.on_selected: Optional[Callable[[ListViewItem[T], bool], None]] = None
        self.on_object_set: Optional[Callable[[ListViewItem[T], T], None]] = None
        self.scroll_bar = _ScrollBar(x=width - 10.5, y=0.0, scale_y=SCROLL_BAR_MAX_SCALE_Y)

        self._objects: List[T] = []
        self._first_visible_index = 0
        self._current = 0
        self._show_scroll_bar = True

        self.items: List[ListViewItem[T]] = [
            ListViewItem(self, 0.0, -i * ITEM_HEIGHT) for i in range(visible_item_count)
        ]
        for item in self.items:
            item.set_visible(False)

    @property
    def objects(self) -> Tuple[T, ...]:
        return tuple(self._objects)

    @property
    def current(self) -> int:
        """Index of the selected object."""
        return self._current

    @property
    def first_visible_index(self) -> int:
        return self._first_visible_index

    @abstractmethod
    def confirm(self) -> None:
        """Act on the selected object."""

    def select_up(self) -> None:
        if self._current <= 0:
            return
        if self._current == self._first_visible_index:
            self.scroll_up()
        self.items[self._current - self._first_visible_index].set_selected(False)
        self._current -= 1
        self.items[self._current - self._first_visible_index].set_selected(True)

    def select_down(self) -> None:
        if self._current >= len(self._objects) - 1:
            return
        if self._current == self._first_visible_index + self.visible_item_count - 1:
            self.scroll_down()
        self.items[self._current - self._first_visible_index].set_selected(False)
        self._current += 1
        self.items[self._current - self._first_visible_index].set_selected(True)

    def scroll_up(self) -> None:
        if len(self._objects) <= self.visible_item_count or self._first_visible_index == 0:
            return
        self._first_visible_index -= 1
        self.show_from(self._first_visible_index)

    def scroll_down(self) -> None:
        count = len(self._objects)
        if (
            count <= self.visible_item_count
            or count <= self._first_visible_index + self.visible_item_count
        ):
            return
        self._first_visible_index += 1
        self.show_from(self._first_visible_index)

    def show_from(self, index: int) -> None:
        """Fill the rows with the objects starting at ``index``."""
        count = len(self._objects)
        for offset, item in enumerate(self.items):
            item.set_selected(False)
            if index + offset < count:
                item.set_visible(True)
                item.set_object(self._objects[index + offset])
            else:
                item.set_visible(False)

        if self._show_scroll_bar:
            if count <= self.visible_item_count:
                self.scroll_bar.visible = False
            else:
                self.scroll_bar.scale_y = (
                    self.visible_item_count / count * SCROLL_BAR_MAX_SCALE_Y
                )
                self.scroll_bar.y = -index / count * SCROLL_BAR_MAX_SCALE_Y
                self.scroll_bar.visible = True

    def set_objects(self, objects: Iterable[T]) -> None:
        """Replace the objects and select the first one."""
        self._objects = list(objects)
        self._first_visible_index = 0
        self._current = 0
        self.show_from(self._first_visible_index)
        if self._objects:
            self.items[0].set_selected(True)

    def show_scroll_bar(self) -> None:
        self._show_scroll_bar = True
        self.scroll_bar.visible = True

    def hide_scroll_bar(self) -> None:
        self._show_scroll_bar = False
        self.scroll_bar.visible = False

    def selected_object(self) -> Optional[T]:
        """The selected object, or None if the list is empty."""
        if not self._objects:
            return None
        return self._objects[self._current]