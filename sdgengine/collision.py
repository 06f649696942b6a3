"""Colliders and the spatial-hash manager that pairs them up."""

from __future__ import annotations

from collections import defaultdict
from typing import Any, Callable

from .body import Body, Rect
from .component import Component

DEBUG_COLOR = (127, 255, 127, 50)
DEFAULT_HASH_SIZE = (64, 64)
_HALVE_ABOVE = 256

CollisionCallback = Callable[[Any, Any], None]


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // b
    return q if a >= 0 else -q


def _cmod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _cdiv(a, b)


class Collider(Component):
    """Reports overlaps of its entity's Body with other colliders.

    The callback, when set, is called with this collider's entity and the
    other collider's entity, once per other collider per frame.
    """

    def __init__(self, manager: CollisionManager | None = None) -> None:
        super().__init__(True, True)
        self.show = False
        self.callback: CollisionCallback | None = None
        self._manager = manager
        self._body: Body | None = None
        self._collided: set[Collider] = set()
        self._to_remove = False

    @property
    def body(self) -> Body | None:
        return self._body

    @property
    def collided(self) -> frozenset[Collider]:
        """Colliders already reported this frame."""
        return frozenset(self._collided)

    @property
    def manager(self) -> CollisionManager:
        if self._manager is None:
            self._manager = self.scene.collisions
        return self._manager

    def init(self) -> None:
        self._body = self.get_component(Body)
        self.manager.register(self)

    def close(self) -> None:
        self.manager.unregister(self)

    def draw(self) -> None:
        if self.show and self._body is not None:
            self.sprite_batch.draw_rectangle(self._body.bounds, DEBUG_COLOR, -10000.0)

    def check_collision(self, other: Collider) -> bool:
        """Whether the two colliders' bodies overlap."""
        return other._bounds().intersects(self._bounds())

    def _bounds(self) -> Rect:
        if self._body is None:
            raise RuntimeError("collider has no Body")
        return self._body.bounds


class CollisionManager:
    """Buckets colliders into grid cells and fires callbacks on overlaps.

    Registrations and removals take effect at the start of the next
    process_collisions call.
    """

    def __init__(self, hash_size: tuple[int, int] = DEFAULT_HASH_SIZE) -> None:
        self.hash_size = tuple(hash_size)
        self._colliders: list[Collider] = []
        self._to_add: list[Collider] = []
        self._removal_pending = False

    @property
    def colliders(self) -> tuple[Collider, ...]:
        return tuple(self._colliders)

    def register(self, collider: Collider) -> None:
        self._to_add.append(collider)

    def unregister(self, collider: Collider) -> None:
        collider._to_remove = True
        self._removal_pending = True

    def process_removals(self) -> None:
        if self._removal_pending:
            self._colliders = [c for c in self._colliders if not c._to_remove]
            self._removal_pending = False

    def process_additions(self) -> None:
        if self._to_add:
            self._colliders.extend(self._to_add)
            self._to_add.clear()

    def process_collisions(self, camera_bounds: Rect) -> None:
        """Check every pair sharing a cell near the camera and fire callbacks."""
        self.process_removals()
        self.process_additions()

        hx, hy = self.hash_size
        if len(self._colliders) > _HALVE_ABOVE:
            hx, hy = _cdiv(int(hx), 2), _cdiv(int(hy), 2)
        hx, hy = max(int(hx), 1), max(int(hy), 1)

        cells: dict[int, dict[int, list[Collider]]] = defaultdict(
            lambda: defaultdict(list)
        )
        for coll in self._colliders:
            coll._collided.clear()
            bounds = coll._bounds()
            bx, by = int(bounds.x), int(bounds.y)
            x = _cdiv(bx, hx)
            y = _cdiv(by, hy)
            w = _cdiv(_cmod(bx, hx) + int(bounds.w), hx)
            h = _cdiv(_cmod(by, hy) + int(bounds.h), hy)
            for i in range(w + 1):
                for k in range(h + 1):
                    cells[x + i][y + k].append(coll)

        cam = camera_bounds
        min_x, max_x = cam.left - cam.w * 0.5, cam.right + cam.w * 0.5
        min_y, max_y = cam.top - cam.h * 0.5, cam.bottom + cam.h * 0.5

        for cx, column in cells.items():
            if not min_x <= cx * hx <= max_x:
                continue
            for cy, members in column.items():
                if not min_y <= cy * hy <= max_y:
                    continue
                for this in members:
                    for other in members:
                        if this is other or other in this._collided:
                            continue
                        if this.check_collision(other):
                            if this.callback is not None:
                                this.callback(this.entity, other.entity)
                            this._collided.add(other)