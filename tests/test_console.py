import pytest

from vigilui.console import CommandHistory, CommandParser, CommandResult, Console
from vigilui.keycodes import KeyCode


class FakeGame:
    def __init__(self):
        self.calls = []

    def start_quest(self, quest):
        self.calls.append(("start_quest", quest))

    def add_item(self, item_name, amount):
        self.calls.append(("add_item", item_name, amount))

    def remove_item(self, item_name, amount):
        self.calls.append(("remove_item", item_name, amount))


@pytest.fixture
def game():
    return FakeGame()


@pytest.fixture
def notes():
    return []


@pytest.fixture
def parser(game, notes):
    return CommandParser(game, notes.append)


def test_blank_line_is_ignored(parser, game):
    assert parser.parse("   ") is None
    assert parser.parse("") is None
    assert game.calls == []


def test_add_item_with_amount(parser, game):
    result = parser.parse("additem sword 3")
    assert result == CommandResult(True, "additem sword 3")
    assert game.calls == [("add_item", "sword", 3)]


def test_add_item_default_amount(parser, game):
    result = parser.parse("additem shield")
    assert result == CommandResult(True, "additem shield")
    assert game.calls == [("add_item", "shield", 1)]


def test_amount_with_trailing_text_uses_leading_digits(parser, game):
    result = parser.parse("removeitem potion 5x")
    assert result == CommandResult(True, "removeitem potion 5x")
    assert game.calls == [("remove_item", "potion", 5)]


def test_start_quest(parser, game):
    assert parser.parse("startquest q1").success
    assert game.calls == [("start_quest", "q1")]


@pytest.mark.parametrize(
    "cmd, message",
    [
        ("additem", "additem: missing parameter `itemName`"),
        ("removeitem", "removeitem: missing parameter `itemName`"),
        ("startquest", "startquest: missing parameter `quest`"),
        ("additem sword abc", "additem: invalid argument `amount`"),
        ("additem sword 0", "additem: `amount` has to be at least 1"),
        ("additem sword -2", "additem: `amount` has to be at least 1"),
        ("additem sword 99999999999", "additem: `amount` is too large"),
        ("fly", "fly: unable to parse this line"),
    ],
)
def test_errors(parser, game, cmd, message):
    assert parser.parse(cmd) == CommandResult(False, message)
    assert game.calls == []


def test_notification_on_success_and_failure(parser, notes):
    first = parser.parse("additem sword", show_notification=True)
    second = parser.parse("bogus", show_notification=True)
    third = parser.parse("additem sword")
    assert first.success is True
    assert second == CommandResult(False, "bogus: unable to parse this line")
    assert third.success is True
    assert notes == ["additem sword", "bogus: unable to parse this line"]


def test_history_starts_empty():
    history = CommandHistory()
    assert not history.can_go_back()
    assert not history.can_go_forward()


def test_history_navigation():
    history = CommandHistory()
    history.push("one")
    history.push("two")
    history.go_back()
    assert history.current_line() == "two"
    history.go_back()
    assert history.current_line() == "one"
    assert not history.can_go_back()
    history.go_forward()
    history.go_forward()
    assert not history.can_go_forward()
    assert history.current_line() == ""


def test_history_wraps_when_full():
    history = CommandHistory(3)
    for cmd in ["a", "b", "c", "d"]:
        history.push(cmd)
    seen = []
    while history.can_go_back():
        history.go_back()
        seen.append(history.current_line())
    assert seen == ["d", "c"]


def test_console_hidden_ignores_keys(parser):
    console = Console(parser)
    console.handle_key(KeyCode.A)
    assert console.text_field.text == ""


def test_console_submit_runs_command(parser, game, notes):
    console = Console(parser)
    console.visible = True
    console.text_field.set_text("startquest q2")
    console.handle_key(KeyCode.ENTER)
    assert game.calls == [("start_quest", "q2")]
    assert notes == ["startquest q2"]
    assert console.text_field.text == ""


def test_console_up_arrow_recalls_history(parser):
    console = Console(parser)
    console.visible = True
    console.execute_cmd("additem a")
    console.execute_cmd("additem b")
    console.handle_key(KeyCode.UP_ARROW)
    assert console.text_field.text == "additem b"
    console.handle_key(KeyCode.UP_ARROW)
    assert console.text_field.text == "additem a"
    console.handle_key(KeyCode.DOWN_ARROW)
    assert console.text_field.text == "additem b"


def test_console_typing(parser):
    console = Console(parser)
    console.visible = True
    console.handle_key(KeyCode.X)
    console.handle_key(KeyCode.Y)
    assert console.text_field.text == "xy"


def test_execute_cmd_returns_result(parser):
    console = Console(parser)
    result = console.execute_cmd("nothing")
    assert result.success is False
    assert console.history.can_go_back()