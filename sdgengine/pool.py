"""A pool of reusable objects that avoids repeated construction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

DEFAULT_INITIAL_POOL_SIZE = 256


@dataclass(eq=False)
class PoolID:
    """Bookkeeping a Pool keeps on each of its objects."""

    index: int | None = None
    inner_id: int | None = None
    next_free: int | None = None
    alive: bool = False
    pool: object | None = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PoolID):
            return NotImplemented
        return self.inner_id == other.inner_id and self.pool is other.pool


class Poolable:
    """Base class for objects that a Pool manages."""

    def __init__(self) -> None:
        self.pid = PoolID()


T = TypeVar("T", bound=Poolable)


class Pool(Generic[T]):
    """Hands out reusable objects, growing when none are free."""

    def __init__(
        self,
        factory: Callable[[], T],
        initial_capacity: int = DEFAULT_INITIAL_POOL_SIZE,
    ) -> None:
        if initial_capacity < 0:
            raise ValueError("initial_capacity must not be negative")
        self._factory = factory
        self._items: list[T] = []
        self._ticket = 0
        self._free: int | None = 0 if initial_capacity > 0 else None
        self._expand(initial_capacity)

    def __len__(self) -> int:
        return len(self._items)

    def check_out(self) -> T:
        """Take a fresh object out of the pool."""
        if self._free is None:
            next_free = len(self._items)
            self._expand(next_free * 2 + 1)
            self._free = next_free
        item = self._items[self._free]
        item.pid.alive = True
        self._free = item.pid.next_free
        return item

    def give_back(self, item: T) -> None:
        """Return an object to the pool; any clean-up is the caller's job."""
        if item.pid.pool is not self:
            raise ValueError("object does not belong to this pool")
        if not item.pid.alive:
            raise ValueError("object is not checked out")
        item.pid.alive = False
        item.pid.next_free = self._free
        self._free = item.pid.index

    def return_all(self) -> None:
        """Return every object that is currently checked out."""
        for item in self._items:
            if item.pid.alive:
                self.give_back(item)

    def _expand(self, new_size: int) -> None:
        start = len(self._items)
        for index in range(start, new_size):
            item = self._factory()
            if not isinstance(item, Poolable):
                raise TypeError("pool factory must produce Poolable objects")
            item.pid = PoolID(
                index=index,
                inner_id=self._ticket,
                next_free=index + 1 if index < new_size - 1 else None,
                alive=False,
                pool=self,
            )
            self._ticket += 1
            self._items.append(item)