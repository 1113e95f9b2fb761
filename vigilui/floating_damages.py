"""Damage numbers that float above characters and fade out."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Dict, Hashable, List, Optional, Tuple

Vec2 = Tuple[float, float]

LABEL_LIFETIME = 1.5
Y_OFFSET = 15.0


@dataclass(eq=False)
class DamageLabel:
    """A damage number that lives for ``lifetime`` seconds before fading."""

    text: str
    lifetime: float
    x: float = 0.0
    y: float = 0.0
    timer: float = 0.0
    fade_elapsed: Optional[float] = None

    @property
    def fading(self) -> bool:
        return self.fade_elapsed is not None


class FloatingDamages:
    """Per-character stacks of damage numbers.

    Positions are where each label ends up once its move-up animation is done.
    """

    DELTA_X = 0.0
    DELTA_Y = 10.0
    MOVE_UP_DURATION = 0.2
    FADE_DURATION = 0.2

    def __init__(self) -> None:
        self._damage_map: Dict[Hashable, Deque[DamageLabel]] = {}
        self._layer: List[DamageLabel] = []

    @property
    def damages(self) -> Dict[Hashable, Tuple[DamageLabel, ...]]:
        """Labels still within their lifetime, per character, oldest first."""
        return {character: tuple(q) for character, q in self._damage_map.items()}

    @property
    def layer(self) -> Tuple[DamageLabel, ...]:
        """Every label on screen, fading ones included."""
        return tuple(self._layer)

    def update(self, delta: float) -> None:
        for label in [label for label in self._layer if label.fading]:
            label.fade_elapsed += delta
            if label.fade_elapsed >= self.FADE_DURATION:
                self._layer.remove(label)

        for character, queue in list(self._damage_map.items()):
            for label in list(queue):
                label.timer += delta
                if label.timer >= label.lifetime:
                    label.fade_elapsed = 0.0
                    queue.remove(label)
            if not queue:
                del self._damage_map[character]

    def show(self, character: Hashable, damage: int, position: Vec2) -> DamageLabel:
        """Show ``damage`` above ``character``, whose position is in pixels."""
        queue = self._damage_map.setdefault(character, deque())
        for label in queue:
            label.x += self.DELTA_X
            label.y += self.DELTA_Y

        label = DamageLabel(
            str(damage),
            LABEL_LIFETIME,
            x=position[0] + self.DELTA_X,
            y=position[1] + Y_OFFSET + self.DELTA_Y,
        )
        queue.append(label)
        self._layer.append(label)
        return label