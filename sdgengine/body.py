"""Axis-aligned rectangles and the physics body that moves a transform."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .component import Component
from .transform import Transform, Vector2

DEBUG_COLOR = (127, 255, 127, 80)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle with its origin at the top-left corner."""

    x: float = 0
    y: float = 0
    w: float = 0
    h: float = 0

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def intersects(self, other: Rect) -> bool:
        """Whether the two rectangles overlap."""
        return (
            self.left < other.right
            and other.left < self.right
            and self.top < other.bottom
            and other.top < self.bottom
        )


class Body(Component):
    """Moves its entity's Transform by a velocity and tracks a hit box.

    When ``use_sprite_mask`` is set and ``sprite_renderer`` is assigned, the
    box takes its size and offset from the renderer's sprite mask. The
    renderer is expected to expose ``sprite`` (with ``mask`` and ``offset``)
    and ``current_frame`` (with ``has_pivot``, ``piv_x``, ``piv_y``, ``ow``
    and ``oh``).
    """

    def __init__(self) -> None:
        super().__init__(True, True)
        self.show = False
        self.size = Vector2(16, 16)
        self.velocity = Vector2(0, 0)
        self.use_sprite_mask = True
        self.sprite_renderer: Any = None
        self._transform: Transform | None = None
        self._position = Vector2()

    @property
    def position(self) -> Vector2:
        """Top-left corner of the hit box in world coordinates."""
        return self._position

    @property
    def bounds(self) -> Rect:
        """The hit box with its coordinates truncated to integers."""
        return Rect(
            int(self._position.x),
            int(self._position.y),
            int(self.size.x),
            int(self.size.y),
        )

    def init(self) -> None:
        transform = self.get_component(Transform)
        if transform is None:
            raise RuntimeError("a Body needs a Transform on the same entity")
        self._transform = transform
        self.update()

    def update(self) -> None:
        if self._transform is None:
            raise RuntimeError("Body has not been initialized")
        x, y = self._mask_offset()
        tf = self._transform
        tf.set_position_local(tf.position + self.velocity)
        self._position = Vector2(x, y) + tf.world_position

    def draw(self) -> None:
        if self.show:
            rect = Rect(self._position.x, self._position.y, self.size.x, self.size.y)
            self.sprite_batch.draw_rectangle(rect, DEBUG_COLOR, 0)

    def _mask_offset(self) -> tuple[float, float]:
        renderer = self.sprite_renderer
        if not self.use_sprite_mask or renderer is None:
            return 0.0, 0.0
        sprite = renderer.sprite
        if sprite is None:
            return 0.0, 0.0

        frame = renderer.current_frame
        mask = sprite.mask
        self.size = Vector2(float(mask.w), float(mask.h))

        if frame.has_pivot:
            piv_x, piv_y = frame.piv_x, frame.piv_y
        else:
            piv_x, piv_y = sprite.offset.x, sprite.offset.y

        x = -(piv_x * frame.ow - mask.x)
        y = -(piv_y * frame.oh - mask.y)
        return x, y