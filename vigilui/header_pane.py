"""The pause menu header: one title per pane, the current one highlighted."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import List, Tuple

Color = Tuple[int, int, int, int]

# RGBA colours shared by the menus.
WHITE: Color = (0xFF, 0xFF, 0xFF, 0xFF)
GREY: Color = (0x93, 0x9B, 0xB0, 0xFF)
RED: Color = (0xB0, 0x30, 0x60, 0xFF)

OPTION_GAP = 30.0
# Approximate horizontal advance of one glyph of the title font.
GLYPH_WIDTH = 6.0


class Pane(IntEnum):
    INVENTORY = 0
    EQUIPMENT = 1
    SKILLS = 2
    QUESTS = 3
    OPTIONS = 4


PANE_NAMES: Tuple[str, ...] = ("INVENTORY", "EQUIPMENT", "SKILLS", "QUESTS", "OPTIONS")


@dataclass
class HeaderLabel:
    """A pane title in the header."""

    text: str
    x: float = 0.0
    color: Color = GREY

    @property
    def width(self) -> float:
        return len(self.text) * GLYPH_WIDTH


class HeaderPane:
    """Titles of every pane laid out left to right; one of them is selected."""

    def __init__(self) -> None:
        self.labels: List[HeaderLabel] = []
        self._current = 0
        next_x = 0.0
        for i, name in enumerate(PANE_NAMES):
            label = HeaderLabel(name, x=next_x + OPTION_GAP * i)
            self.labels.append(label)
            next_x += label.width
        self.select(Pane.INVENTORY)

    @property
    def current_index(self) -> int:
        return self._current

    @property
    def current_pane(self) -> Pane:
        return Pane(self._current)

    def select(self, index: int) -> None:
        """Highlight the title at ``index``; out-of-range indices are ignored."""
        if not 0 <= index < len(Pane):
            return
        self.labels[self._current].color = GREY
        self.labels[index].color = WHITE
        self._current = int(index)

    def select_prev(self) -> None:
        self.select(self._current - 1 if self._current - 1 >= 0 else len(Pane) - 1)

    def select_next(self) -> None:
        self.select((self._current + 1) % len(Pane))