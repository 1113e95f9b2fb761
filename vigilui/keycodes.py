"""Keyboard key codes, their display names and their ASCII characters."""

from __future__ import annotations

import string
from enum import IntEnum
from typing import Dict, Optional

_SPECIAL_NAMES = [
    "NONE",
    "BACK",
    "BACKSPACE",
    "TAB",
    "BACK_TAB",
    "RETURN",
    "CAPS_LOCK",
    "LEFT_SHIFT",
    "RIGHT_SHIFT",
    "LEFT_CTRL",
    "RIGHT_CTRL",
    "LEFT_ALT",
    "RIGHT_ALT",
    "HOME",
    "PG_UP",
    "DELETE",
    "END",
    "PG_DOWN",
    "LEFT_ARROW",
    "RIGHT_ARROW",
    "UP_ARROW",
    "DOWN_ARROW",
    "PLUS",
    "MINUS",
    "ENTER",
    "SPACE",
    "COMMA",
    "PERIOD",
    "SLASH",
    "EQUAL",
    "GRAVE",
]

KeyCode = IntEnum(
    "KeyCode",
    _SPECIAL_NAMES
    + [f"DIGIT_{d}" for d in string.digits]
    + [f"CAPITAL_{c}" for c in string.ascii_uppercase]
    + list(string.ascii_uppercase),
    start=0,
)
KeyCode.__doc__ = "Keyboard key codes; NONE (zero) means no key."

_KEY_NAMES: Dict[KeyCode, str] = {
    KeyCode.BACK: "BACK",
    KeyCode.BACKSPACE: "BACKSPACE",
    KeyCode.TAB: "TAB",
    KeyCode.BACK_TAB: "BACKTAB",
    KeyCode.RETURN: "RETURN",
    KeyCode.CAPS_LOCK: "CAPS LOCK",
    KeyCode.LEFT_SHIFT: "LEFT SHIFT",
    KeyCode.RIGHT_SHIFT: "RIGHT SHIFT",
    KeyCode.LEFT_CTRL: "LEFT CTRL",
    KeyCode.RIGHT_CTRL: "RIGHT CTRL",
    KeyCode.LEFT_ALT: "LEFT ALT",
    KeyCode.RIGHT_ALT: "RIGHT ALT",
    KeyCode.HOME: "HOME",
    KeyCode.PG_UP: "PG_UP",
    KeyCode.DELETE: "DELETE",
    KeyCode.END: "END",
    KeyCode.PG_DOWN: "PG_DOWN",
    KeyCode.LEFT_ARROW: "LEFT ARROW",
    KeyCode.RIGHT_ARROW: "RIGHT ARROW",
    KeyCode.UP_ARROW: "UP ARROW",
    KeyCode.DOWN_ARROW: "DOWN ARROW",
    KeyCode.PLUS: "PLUS",
    KeyCode.MINUS: "MINUS",
    KeyCode.ENTER: "ENTER",
    KeyCode.SPACE: "SPACE",
}
_KEY_NAMES.update({KeyCode[f"DIGIT_{d}"]: d for d in string.digits})
_KEY_NAMES.update({KeyCode[f"CAPITAL_{c}"]: c for c in string.ascii_uppercase})
_KEY_NAMES.update({KeyCode[c]: c.lower() for c in string.ascii_uppercase})

_PUNCTUATION = {
    KeyCode.COMMA: (",", "<"),
    KeyCode.PERIOD: (".", ">"),
    KeyCode.SLASH: ("/", "?"),
    KeyCode.MINUS: ("-", "_"),
    KeyCode.EQUAL: ("=", "+"),
}


def key_code_to_string(key_code: KeyCode) -> str:
    """Display name of a key, or an empty string for keys without one."""
    return _KEY_NAMES.get(key_code, "")


def _is_printable_alnum(key_code: KeyCode) -> bool:
    return (
        KeyCode.DIGIT_0 <= key_code <= KeyCode.DIGIT_9
        or KeyCode.CAPITAL_A <= key_code <= KeyCode.CAPITAL_Z
        or KeyCode.A <= key_code <= KeyCode.Z
    )


def key_code_to_ascii(
    key_code: KeyCode, caps_locked: bool, shift_pressed: bool
) -> Optional[str]:
    """Character typed by ``key_code`` under the given modifiers, or None."""
    if _is_printable_alnum(key_code):
        c = key_code_to_string(key_code)
        if c.isalpha():
            if caps_locked:
                c = c.upper()
            if shift_pressed:
                c = c.swapcase()
        return c

    if key_code == KeyCode.SPACE:
        return " "
    pair = _PUNCTUATION.get(key_code)
    if pair is None:
        return None
    return pair[1] if shift_pressed else pair[0]