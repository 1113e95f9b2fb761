"""A single-line text input with a blinking cursor."""

from __future__ import annotations

from typing import Callable, Optional

from vigilui.keycodes import KeyCode, key_code_to_ascii
from vigilui.table_layout import Node

CURSOR_CHAR = "|"
CURSOR_BLINK_INTERVAL = 0.7


class TextField:
    """Collects typed characters into a buffer shown on a label.

    Keys are only taken while the field is receiving input; the grave key
    ends input, enter submits a non-empty buffer and backspace deletes.
    """

    def __init__(self) -> None:
        self.label = Node(anchor=(0.0, 0.0), text=CURSOR_CHAR)
        self.on_submit: Optional[Callable[[], None]] = None
        self._buffer = ""
        self._timer = 0.0
        self._receiving = False
        self._cursor_visible = False

    @property
    def text(self) -> str:
        """The typed text, without the cursor."""
        return self._buffer

    @property
    def label_text(self) -> str:
        """What the label currently shows."""
        return self.label.text

    @property
    def receiving_input(self) -> bool:
        return self._receiving

    def update(self, delta: float) -> None:
        """Advance the blink timer, toggling the cursor each interval."""
        self._timer += delta
        if self._timer >= CURSOR_BLINK_INTERVAL:
            self._timer = 0.0
            self._toggle_cursor()

    def begin_input(self) -> bool:
        """Start taking keys; return True if the field was not already doing so."""
        if self._receiving:
            return False
        self._receiving = True
        return True

    def handle_key(
        self, key_code: KeyCode, caps_locked: bool = False, shift_pressed: bool = False
    ) -> bool:
        """Process one key press; return True if the field acted on it."""
        if not self._receiving:
            return False

        if key_code == KeyCode.GRAVE:
            self._receiving = False
            return True

        if key_code == KeyCode.ENTER and self._buffer:
            if self.on_submit is not None:
                self.on_submit()
            self.clear()
            return True

        if key_code == KeyCode.BACKSPACE and self._buffer:
            self._buffer = self._buffer[:-1]
            self.label.text = self._buffer + CURSOR_CHAR
            return True

        c = key_code_to_ascii(key_code, caps_locked, shift_pressed)
        if c is None:
            return False
        self._buffer += c
        self.label.text = self._buffer + CURSOR_CHAR
        return True

    def set_text(self, s: str) -> None:
        self._buffer = s
        self.label.text = self._buffer + CURSOR_CHAR

    def clear(self) -> None:
        self.set_text("")

    def _toggle_cursor(self) -> None:
        self.label.text = self._buffer if self._cursor_visible else self._buffer + CURSOR_CHAR
        self._cursor_visible = not self._cursor_visible