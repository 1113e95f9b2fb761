"""A pause menu dialog: a message and up to three choices."""

from __future__ import annotations

from typing import Callable, List, Optional

Handler = Callable[[], None]

ICON_WIDTH = 8.0
ICON_GAP = 5.0
# Approximate horizontal advance of one glyph of the dialog font.
GLYPH_WIDTH = 6.0
RIGHT_MARGIN = 110.0
OPTION_SPACING = 15.0


class DialogOption:
    """One choice: a selection icon, a text and what to do when confirmed."""

    def __init__(self, text: str, handler: Optional[Handler] = None) -> None:
        self.text = text
        self.handler = handler
        self.visible = True
        self.selected = False
        self.x = 0.0

    @property
    def width(self) -> float:
        return ICON_WIDTH + len(self.text) * GLYPH_WIDTH

    @property
    def label_x(self) -> float:
        """Label offset within the option, after the icon."""
        return ICON_WIDTH + ICON_GAP

    def run(self) -> None:
        """Run the handler, if one is set."""
        if self.handler is not None:
            self.handler()


class PauseMenuDialog:
    """A message with options chosen with left, right and confirm."""

    OPTION_COUNT = 3

    def __init__(self, win_width: float) -> None:
        self.win_width = win_width
        self.message = ""
        self.visible = True
        self.options: List[DialogOption] = []
        self._current = 0
        for i in range(1, self.OPTION_COUNT + 1):
            self._add_option(f"option{i}")

    @property
    def current(self) -> int:
        return self._current

    def _add_option(self, text: str, handler: Optional[Handler] = None) -> None:
        self.options.append(DialogOption(text, handler))
        self.update()
        self.options[0].selected = True

    def update(self) -> None:
        """Right-align the visible options, the last one rightmost."""
        option_width = max((option.width for option in self.options), default=0.0)
        count = 1
        for option in reversed(self.options):
            if not option.visible:
                continue
            option.x = self.win_width - RIGHT_MARGIN - (option_width + OPTION_SPACING) * count
            count += 1

    def select_left(self) -> None:
        if self._current == 0 or not self.options[self._current - 1].visible:
            return
        self.options[self._current].selected = False
        self._current -= 1
        self.options[self._current].selected = True

    def select_right(self) -> None:
        if (
            self._current == len(self.options) - 1
            or not self.options[self._current + 1].visible
        ):
            return
        self.options[self._current].selected = False
        self._current += 1
        self.options[self._current].selected = True

    def confirm(self) -> None:
        """Hide the dialog and run the selected option's handler."""
        if not self.options:
            return
        self.visible = False
        self.options[0].selected = True
        chosen = self.options[self._current]
        chosen.selected = False
        chosen.run()

    def reset(self) -> None:
        """Clear the message and hide every option."""
        self.set_message("")
        self.options[self._current].selected = False
        for option in self.options:
            option.visible = False

    def set_message(self, message: str) -> None:
        self.message = message

    def set_option(
        self,
        index: int,
        visible: bool,
        text: str = "",
        handler: Optional[Handler] = None,
    ) -> None:
        """Configure the option at ``index``; out-of-range indices are ignored."""
        if not 0 <= index < len(self.options):
            return
        option = self.options[index]
        option.visible = visible
        option.text = text
        option.handler = handler

    def show(self) -> None:
        """Lay out, show and select the first visible option."""
        self.update()
        self.visible = True
        for i, option in enumerate(self.options):
            if option.visible:
                option.selected = True
                self._current = i
                break