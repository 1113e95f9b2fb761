"""A horizontal bar whose length shows a value against its maximum."""

from __future__ import annotations


class StatusBar:
    """A bar between a left and a right end cap, scaled to the current value."""

    def __init__(self, max_length: float) -> None:
        self.max_length = max_length
        self.bar_x = 0.0
        self.scale_x = max_length
        self.right_padding_x = self.bar_x + max_length

    def update(self, current: int, full: int) -> None:
        """Scale the bar to ``current / full`` of its maximum length."""
        if full == 0:
            raise ValueError("full value must not be zero")
        length = self.max_length * current / full
        self.scale_x = length
        self.right_padding_x = self.bar_x + length