"""2-D vectors and the position component that can follow a parent."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .component import Component


@dataclass(frozen=True)
class Vector2:
    """An immutable 2-D vector."""

    x: float = 0.0
    y: float = 0.0

    @property
    def w(self) -> float:
        return self.x

    @property
    def h(self) -> float:
        return self.y

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vector2:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Vector2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vector2:
        """A unit vector in the same direction; the zero vector stays zero."""
        size = self.length()
        if size == 0:
            return Vector2()
        return Vector2(self.x / size, self.y / size)


class Transform(Component):
    """Local position and scale, optionally offset by a parent transform.

    The world position is computed once per frame and cached until
    post_update.
    """

    def __init__(self, x: float, y: float, scale_x: float, scale_y: float) -> None:
        super().__init__(True, False)
        self.position = Vector2(x, y)
        self.scale = Vector2(scale_x, scale_y)
        self._parent: Transform | None = None
        self._projected = Vector2()
        self._projected_set = False

    @property
    def parent(self) -> Transform | None:
        return self._parent

    @property
    def world_position(self) -> Vector2:
        """The local position offset by every parent's position."""
        if not self._projected_set:
            self._compute_projected()
        return self._projected

    def post_update(self) -> None:
        self._projected_set = False

    def set_position_local(self, position: Vector2) -> None:
        """Move the local position, keeping a cached world position in step."""
        if self._projected_set:
            self._projected = self._projected - self.position + position
        self.position = position

    def set_position_final(self, final_pos: Vector2) -> None:
        self.set_position_local(final_pos - self.world_position)

    def attach(self, child: Transform) -> None:
        """Make this transform the parent of another."""
        if child._parent is self:
            return
        if child._parent is not None:
            child.detach_from_parent()
        child._parent = self
        child._projected_set = False

    def detach_from_parent(self) -> None:
        """Drop the parent, keeping the current world position as local position."""
        if self._parent is None:
            return
        world = self.world_position
        self._parent = None
        self.position = world
        self._projected = Vector2()
        self._projected_set = False

    def _compute_projected(self) -> None:
        if self._parent is not None:
            self._projected = self.position + self._parent.world_position
        else:
            self._projected = self.position
        self._projected_set = True