"""Camera placement: keeping it on the map, following a target, shaking."""

from __future__ import annotations

from typing import Callable, Optional, Tuple

from vigilui import rand_util

Vec2 = Tuple[float, float]


def bound_camera(position: Vec2, map_size: Vec2, win_size: Vec2) -> Vec2:
    """Clamp the camera to the map; centre it on any axis where the map is smaller."""
    x, y = position
    map_w, map_h = map_size
    win_w, win_h = win_size

    x = min(max(x, 0.0), map_w - win_w)
    y = min(max(y, 0.0), map_h - win_h)

    if map_w < win_w:
        x = -(win_w - map_w) / 2
    if map_h < win_h:
        y = -(win_h - map_h) / 2
    return (x, y)


def lerp_to_target(position: Vec2, target: Vec2, win_size: Vec2, ppm: float) -> Vec2:
    """Move a tenth of the way towards centring ``target`` (in metres) on screen."""
    x, y = position
    goal_x = target[0] * ppm - win_size[0] / 2
    goal_y = target[1] * ppm - win_size[1] / 2
    return (x + (goal_x - x) * 0.1, y + (goal_y - y) * 0.1)


class CameraShake:
    """A shake whose strength falls off linearly over its duration."""

    def __init__(self, rng: Optional[Callable[[], float]] = None) -> None:
        self._rng = rng if rng is not None else rand_util.rand_float
        self.power = 0.0
        self.duration = 0.0
        self.current_time = 0.0
        self.current_power = 0.0

    @property
    def active(self) -> bool:
        return self.duration != 0

    def shake(self, power: float, duration: float) -> None:
        self.power = power
        self.duration = duration
        self.current_time = 0.0

    def update(self, position: Vec2, delta: float) -> Vec2:
        """Return ``position`` offset by this frame's shake."""
        if self.duration == 0:
            return position
        if self.current_time > self.duration:
            self.duration = 0.0
            return position

        self.current_power = self.power * ((self.duration - self.current_time) / self.duration)
        dx = (self._rng() - 0.5) * 2 * self.current_power
        dy = (self._rng() - 0.5) * 2 * self.current_power
        self.current_time += delta
        return (position[0] + dx, position[1] + dy)