# vigilui

UI state and small utilities for a 2D action role-playing game. Every
component keeps its state in plain Python objects (positions, visibility,
texture names, label text), so you can drive it from any rendering loop and
test it without a window. The package uses only the standard library.

## Modules

- `vigilui.circular_buffer`: `CircularBuffer`, a fixed-capacity ring buffer
  that overwrites its oldest entry when full. One slot is always kept free,
  so a buffer of capacity `n` holds at most `n - 1` entries before it starts
  overwriting.
- `vigilui.strings`: `split` (drops empty tokens), `starts_with`, `contains`,
  `replace`, `strip` (spaces, tabs, carriage returns, newlines), and
  ASCII-only `to_upper` and `to_lower`.
- `vigilui.json_util`: `parse_json` reads a JSON file, raising
  `FileNotFoundError` with a `Json not found: ...` message when it is missing;
  `split_string` splits on commas by default and drops empty tokens.
- `vigilui.keycodes`: the `KeyCode` enum, `key_code_to_string` (display name
  of a key, empty for keys without one) and `key_code_to_ascii` (the character
  a key types under caps lock and shift, or `None`).
- `vigilui.rand_util`: `seed`, `rand_int` (closed range) and `rand_float`
  (half-open range) over a shared generator.
- `vigilui.logger`: `Severity`, `format_log` building
  `[SEVERITY] [file: line] message`, `log` which tags a message with the
  caller's file and line and sends it to the `vigilui` logger, and
  `install_crash_handler` which dumps tracebacks to a file on a crash.
- `vigilui.table_layout`: `TableLayout`, a chainable row layout that places
  `Node` children left to right, with `align` (`Alignment.LEFT`, `CENTER`,
  `RIGHT`), padding, spacing and `row`.
- `vigilui.list_view`: `ListView` and `ListViewItem`, a list showing a fixed
  number of rows over its objects, scrolling with the selection and keeping a
  scroll bar. `ListView` is abstract: subclasses implement `confirm`. The
  `on_selected` and `on_object_set` callbacks let a subclass fill in rows.
- `vigilui.tab_view`: `TabView` and `Tab`, tabs laid out left to right with
  wrap-around `select_prev` and `select_next`.
- `vigilui.text_field`: `TextField`, a single-line input with a blinking
  cursor; the grave key ends input, enter submits a non-empty buffer to
  `on_submit`, backspace deletes.
- `vigilui.console`: `CommandParser`, `CommandHistory` and `Console`, a
  developer console with the commands `startquest <quest>`,
  `additem <itemName> [amount]` and `removeitem <itemName> [amount]`.
  `parse` and `Console.execute_cmd` return a `CommandResult`, or `None` for a
  blank line.
- `vigilui.timed_labels`: `TimedLabelService`, `TimedLabel` and
  `Notifications`, labels that stack upwards, expire after their lifetime and
  fade out.
- `vigilui.camera`: `bound_camera`, `lerp_to_target` and `CameraShake`.
- `vigilui.header_pane`: `Pane`, `HeaderPane` and the menu colours `WHITE`,
  `GREY` and `RED`.
- `vigilui.pause_menu_dialog`: `PauseMenuDialog` and `DialogOption`, a message
  with up to three options.
- `vigilui.status_bar`: `StatusBar`, scaled to a current value against a full
  value.
- `vigilui.floating_damages`: `FloatingDamages` and `DamageLabel`, damage
  numbers stacked per character.

## Installing

```
pip install .
```

## Examples

```python
from vigilui.circular_buffer import CircularBuffer
from vigilui.strings import split

history = CircularBuffer(4)
for word in split("additem potion 3"):
    history.push(word)

print(len(history), history.front(), history.back())  # 3 additem 3
```

The console runs its commands against any object with `start_quest`,
`add_item` and `remove_item` methods:

```python
from vigilui.console import CommandParser, Console

class Game:
    def start_quest(self, quest): print("quest", quest)
    def add_item(self, name, amount): print("add", name, amount)
    def remove_item(self, name, amount): print("remove", name, amount)

console = Console(CommandParser(Game(), notify=print))
result = console.execute_cmd("additem potion 2")
print(result.success, result.message)  # True additem potion 2
print(console.parser.parse("additem potion 0").message)
# additem: `amount` has to be at least 1
```

## What this package does not do

It draws nothing and opens no window: components only hold the state a
renderer would display, and text widths are approximated from the number of
characters. It has no game world, inventory, quests or characters of its own;
the console acts on an object you supply. It reads no keyboard itself:
key presses are passed in as `KeyCode` values. There is no command-line
program.

## Running the tests

```
pip install .[test]
pytest
```