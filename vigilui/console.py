"""The developer console: a text field, a command parser and a history."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Protocol

from vigilui import strings
from vigilui.circular_buffer import CircularBuffer
from vigilui.keycodes import KeyCode
from vigilui.logger import Severity, log
from vigilui.text_field import TextField

DEFAULT_ERR_MSG = "unable to parse this line"
DEFAULT_HISTORY_SIZE = 32

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class GameCommands(Protocol):
    """What the console commands act on."""

    def start_quest(self, quest: str) -> None: ...

    def add_item(self, item_name: str, amount: int) -> None: ...

    def remove_item(self, item_name: str, amount: int) -> None: ...


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a command: on success the command, else the error message."""

    success: bool
    message: str


class _CommandError(Exception):
    pass


def _parse_amount(args: List[str]) -> int:
    if len(args) < 3:
        return 1
    match = _LEADING_INT.match(args[2])
    if match is None:
        raise _CommandError("invalid argument `amount`")
    amount = int(match.group(1))
    if not _INT_MIN <= amount <= _INT_MAX:
        raise _CommandError("`amount` is too large")
    if amount <= 0:
        raise _CommandError("`amount` has to be at least 1")
    return amount


class CommandParser:
    """Runs space-separated console commands against the game."""

    def __init__(
        self, game: GameCommands, notify: Optional[Callable[[str], None]] = None
    ) -> None:
        self._game = game
        self._notify = notify
        self._handlers = {
            "startquest": self._start_quest,
            "additem": self._add_item,
            "removeitem": self._remove_item,
        }

    def parse(self, cmd: str, show_notification: bool = False) -> Optional[CommandResult]:
        """Execute ``cmd``; return None for a blank line, else the outcome."""
        args = strings.split(cmd)
        if not args:
            return None

        handler = self._handlers.get(args[0])
        error = DEFAULT_ERR_MSG
        success = False
        if handler is not None:
            try:
                handler(args)
                success = True
            except _CommandError as exc:
                error = str(exc)

        if success:
            result = CommandResult(True, cmd)
        else:
            result = CommandResult(False, f"{args[0]}: {error}")
            log(Severity.ERROR, result.message)

        if show_notification and self._notify is not None:
            self._notify(result.message)
        return result

    def _start_quest(self, args: List[str]) -> None:
        if len(args) < 2:
            raise _CommandError("missing parameter `quest`")
        self._game.start_quest(args[1])

    def _add_item(self, args: List[str]) -> None:
        if len(args) < 2:
            raise _CommandError("missing parameter `itemName`")
        self._game.add_item(args[1], _parse_amount(args))

    def _remove_item(self, args: List[str]) -> None:
        if len(args) < 2:
            raise _CommandError("missing parameter `itemName`")
        self._game.remove_item(args[1], _parse_amount(args))


class CommandHistory(CircularBuffer[str]):
    """Past commands with a cursor for stepping back and forth."""

    def __init__(self, capacity: int = DEFAULT_HISTORY_SIZE) -> None:
        super().__init__(capacity)
        self._current = self._tail

    def push(self, value: str) -> None:
        """Record a command and move the cursor past the newest entry."""
        super().push(value)
        self._current = self._tail

    def can_go_back(self) -> bool:
        return self._current != self._head

    def can_go_forward(self) -> bool:
        return self._current != self._tail

    def go_back(self) -> None:
        self._current = (self._current - 1) % self._capacity

    def go_forward(self) -> None:
        self._current = (self._current + 1) % self._capacity

    def current_line(self) -> str:
        line = self._data[self._current]
        return "" if line is None else line


class Console:
    """A hidden-by-default console that runs what is typed into it."""

    def __init__(self, parser: CommandParser) -> None:
        self.parser = parser
        self.text_field = TextField()
        self.history = CommandHistory()
        self.visible = False
        self.text_field.on_submit = lambda: self.execute_cmd(self.text_field.text, True)

    def update(self, delta: float) -> None:
        if self.visible:
            self.text_field.update(delta)

    def handle_key(
        self, key_code: KeyCode, caps_locked: bool = False, shift_pressed: bool = False
    ) -> None:
        """Browse the history with the arrow keys; pass other keys to the field."""
        if not self.visible:
            return
        if key_code == KeyCode.UP_ARROW and self.history.can_go_back():
            self.history.go_back()
            self.text_field.set_text(self.history.current_line())
        elif key_code == KeyCode.DOWN_ARROW and self.history.can_go_forward():
            self.history.go_forward()
            self.text_field.set_text(self.history.current_line())
        else:
            self.text_field.begin_input()
            self.text_field.handle_key(key_code, caps_locked, shift_pressed)

    def execute_cmd(
        self, cmd: str, show_notification: bool = False
    ) -> Optional[CommandResult]:
        log(Severity.INFO, f"Executing: {cmd}")
        result = self.parser.parse(cmd, show_notification)
        self.history.push(cmd)
        return result