"""A row of selectable tabs."""

from __future__ import annotations

from typing import List

from vigilui.table_layout import Node


class Tab:
    """One tab: a background image and a text label."""

    def __init__(self, parent: "TabView", text: str, width: float, height: float) -> None:
        self._parent = parent
        self.background = Node(width=width, height=height, texture=parent.regular_bg)
        self.label = Node(text=text)
        self.selected = False
        self.index = len(parent.tabs)

    def set_selected(self, selected: bool) -> None:
        parent = self._parent
        self.background.texture = parent.highlighted_bg if selected else parent.regular_bg
        self.selected = selected


class TabView:
    """Tabs laid out left to right, one of which is the current tab."""

    def __init__(self, regular_bg: str, highlighted_bg: str) -> None:
        self.regular_bg = regular_bg
        self.highlighted_bg = highlighted_bg
        self.tabs: List[Tab] = []
        self.current = 0
        self.next_x = 0.0
        self.next_y = 0.0

    def add_tab(self, text: str, width: float, height: float) -> Tab:
        """Append a tab whose background is ``width`` by ``height``."""
        tab = Tab(self, text, width, height)
        self.tabs.append(tab)

        self.next_x += (width / 2 if self.next_x == 0 else width) + 1
        self.next_y += height / 2 if self.next_y == 0 else 0
        tab.background.x, tab.background.y = self.next_x, self.next_y
        tab.label.x, tab.label.y = self.next_x, self.next_y
        return tab

    def select_tab(self, index: int) -> None:
        """Select the tab at ``index``; out-of-range indices are ignored."""
        if 0 <= index < len(self.tabs):
            self.tabs[self.current].set_selected(False)
            self.tabs[index].set_selected(True)
            self.current = index

    def select_prev(self) -> None:
        prev = self.current - 1
        if prev < 0:
            prev = len(self.tabs) - 1
        self.select_tab(prev)

    def select_next(self) -> None:
        if not self.tabs:
            return
        self.select_tab((self.current + 1) % len(self.tabs))

    def selected_tab(self) -> Tab:
        """The current tab; raises IndexError when there are no tabs."""
        return self.tabs[self.current]