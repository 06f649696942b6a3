"""A container holding one component of each type for an entity."""

from __future__ import annotations

from typing import Any, TypeVar

from .component import Component

C = TypeVar("C", bound=Component)


class ComponentList:
    """Owns an entity's components and drives their update and draw calls.

    The entity, when given, exposes an ``initialized`` flag; components added
    after it is initialized are initialized straight away.
    """

    def __init__(self, entity: Any = None) -> None:
        self._entity = entity
        self._components: dict[type, Component] = {}
        self._updatable: list[Component] = []
        self._drawable: list[Component] = []
        self._removal_pending = False

    @property
    def entity(self) -> Any:
        return self._entity

    def __len__(self) -> int:
        return len(self._components)

    def add(self, cls: type[C], *args: Any, **kwargs: Any) -> C:
        """Create a component of the given type, attach it and return it."""
        if not (isinstance(cls, type) and issubclass(cls, Component)):
            raise TypeError(f"{cls!r} is not a Component type")
        if cls in self._components:
            raise ValueError("cannot add multiple components of the same type")

        component = cls(*args, **kwargs)
        component._owner = self

        if self._entity is not None and self._entity.initialized:
            component.force_init()

        if component.updatable:
            self._updatable.append(component)
        if component.drawable:
            self._drawable.append(component)
        self._components[cls] = component
        return component

    def init_all(self) -> None:
        """Initialize every component that has not been initialized yet."""
        for component in list(self._components.values()):
            component.do_init()

    def get(self, cls: type[C]) -> C | None:
        """The component of exactly this type, or None."""
        return self._components.get(cls)  # type: ignore[return-value]

    def get_typeof(self, cls: type[C]) -> C | None:
        """The first component of this type or a subtype, or None."""
        return next(
            (c for c in self._components.values() if isinstance(c, cls)), None
        )

    def has(self, cls: type[Component]) -> bool:
        return cls in self._components

    def remove(self, cls: type[Component]) -> None:
        """Mark the component of this type for removal before the next update."""
        component = self._components.get(cls)
        if component is None:
            return
        component.removing = True
        self._removal_pending = True

    def update(self) -> None:
        """Drop components marked for removal, then update the rest."""
        self._process_removals()
        for component in list(self._updatable):
            component.update()

    def post_update(self) -> None:
        for component in list(self._updatable):
            component.post_update()

    def draw(self) -> None:
        for component in list(self._drawable):
            component.draw()

    def close(self) -> None:
        """Close and drop every component."""
        for component in list(self._components.values()):
            component.close()
        self._components.clear()
        self._updatable.clear()
        self._drawable.clear()
        self._removal_pending = False

    def _process_removals(self) -> None:
        if not self._removal_pending:
            return
        self._updatable = [c for c in self._updatable if not c.removing]
        self._drawable = [c for c in self._drawable if not c.removing]
        for cls, component in list(self._components.items()):
            if component.removing:
                component.close()
                del self._components[cls]
        self._removal_pending = False