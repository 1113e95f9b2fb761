"""Stacks of short-lived text labels that drift up and fade out."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import ClassVar, Deque, List, Optional, Tuple

Anchor = Tuple[float, float]


@dataclass(eq=False)
class TimedLabel:
    """A label that lives for ``lifetime`` seconds before fading out."""

    LEFT: ClassVar[Anchor] = (0.0, 1.0)
    CENTER: ClassVar[Anchor] = (0.5, 1.0)
    RIGHT: ClassVar[Anchor] = (1.0, 1.0)

    text: str
    lifetime: float
    alignment: Anchor = (0.0, 1.0)
    x: float = 0.0
    y: float = 0.0
    timer: float = 0.0
    fade_elapsed: Optional[float] = None

    @property
    def fading(self) -> bool:
        return self.fade_elapsed is not None

    @property
    def opacity(self) -> float:
        if self.fade_elapsed is None:
            return 1.0
        return max(0.0, 1.0 - self.fade_elapsed / TimedLabelService.FADE_DURATION)


class TimedLabelService:
    """Shows messages stacked upwards from a starting point.

    Positions are where each label ends up once its move-up animation is done.
    """

    DELTA_X = 0.0
    DELTA_Y = 13.0
    MOVE_UP_DURATION = 0.2
    FADE_DURATION = 1.0

    def __init__(
        self,
        starting_x: float,
        starting_y: float,
        max_label_count: int,
        label_lifetime: float,
        alignment: Anchor,
    ) -> None:
        self.starting_x = starting_x
        self.starting_y = starting_y
        self.max_label_count = max_label_count
        self.label_lifetime = label_lifetime
        self.alignment = alignment
        self._queue: Deque[TimedLabel] = deque()
        self._layer: List[TimedLabel] = []

    @property
    def labels(self) -> Tuple[TimedLabel, ...]:
        """Labels still within their lifetime, oldest first."""
        return tuple(self._queue)

    @property
    def layer(self) -> Tuple[TimedLabel, ...]:
        """Every label on screen, fading ones included."""
        return tuple(self._layer)

    def update(self, delta: float) -> None:
        for label in [label for label in self._layer if label.fading]:
            label.fade_elapsed += delta
            if label.fade_elapsed >= self.FADE_DURATION:
                self._layer.remove(label)

        for label in list(self._queue):
            label.timer += delta
            if label.timer >= label.lifetime:
                label.fade_elapsed = 0.0
                self._queue.remove(label)

    def show(self, message: str) -> TimedLabel:
        """Display ``message`` below the existing labels, pushing them up."""
        if len(self._queue) > self.max_label_count:
            oldest = self._queue.popleft()
            self._layer.remove(oldest)

        for label in self._queue:
            label.x += self.DELTA_X
            label.y += self.DELTA_Y

        label = TimedLabel(
            message,
            self.label_lifetime,
            self.alignment,
            x=self.starting_x + self.DELTA_X,
            y=self.starting_y + self.DELTA_Y,
        )
        self._queue.append(label)
        self._layer.append(label)
        return label


class Notifications(TimedLabelService):
    """Left-aligned notices near the bottom-left corner."""

    STARTING_X = 10.0
    STARTING_Y = 25.0
    MAX_LABEL_COUNT = 10
    LABEL_LIFETIME = 5.0

    def __init__(self) -> None:
        super().__init__(
            self.STARTING_X,
            self.STARTING_Y,
            self.MAX_LABEL_COUNT,
            self.LABEL_LIFETIME,
            TimedLabel.LEFT,
        )