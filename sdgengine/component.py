"""Base class for the parts an entity is assembled from."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from .component_list import ComponentList

C = TypeVar("C", bound="Component")


@dataclass
class _Services:
    """Game-wide services shared by every component."""

    sprite_batch: Any = None
    time: Any = None
    content: Any = None
    input: Any = None
    graphics: Any = None
    scene_manager: Any = None


# The running game fills these in before components are initialized.
services = _Services()


def _require(name: str) -> Any:
    value = getattr(services, name)
    if value is None:
        raise RuntimeError(f"no {name.replace('_', ' ')} has been provided")
    return value


class Component:
    """A unit of behaviour owned by a ComponentList.

    Subclasses override init, update, post_update, draw and close.
    """

    def __init__(self, updatable: bool, drawable: bool) -> None:
        self._updatable = bool(updatable)
        self._drawable = bool(drawable)
        self._active = True
        self._removing = False
        self._initialized = False
        self._owner: ComponentList | None = None

    # ----- events for subclasses -----

    def init(self) -> None:
        """Connect to other components and game resources."""

    def update(self) -> None:
        """Per-frame logic."""

    def post_update(self) -> None:
        """Logic that runs after every component has updated."""

    def draw(self) -> None:
        """Rendering logic."""

    def close(self) -> None:
        """Clean-up logic."""

    # ----- initialization -----

    def do_init(self) -> None:
        """Initialize the component unless that has already happened."""
        if not self._initialized:
            self.force_init()

    def force_init(self) -> None:
        """Initialize the component whether or not it was initialized before."""
        self.init()
        self._initialized = True

    # ----- attributes -----

    @property
    def updatable(self) -> bool:
        return self._updatable

    @property
    def drawable(self) -> bool:
        return self._drawable

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def active(self) -> bool:
        return self._active

    @active.setter
    def active(self, value: bool) -> None:
        self._active = bool(value)

    @property
    def removing(self) -> bool:
        return self._removing

    @removing.setter
    def removing(self, value: bool) -> None:
        self._removing = bool(value)

    @property
    def owner(self) -> ComponentList | None:
        """The ComponentList holding this component, if any."""
        return self._owner

    @property
    def entity(self) -> Any:
        """The entity owning this component's list, if any."""
        return self._owner.entity if self._owner is not None else None

    # ----- sibling access -----

    def _require_owner(self) -> ComponentList:
        if self._owner is None:
            raise RuntimeError("component is not part of a ComponentList")
        return self._owner

    def get_component(self, cls: type[C]) -> C | None:
        """The sibling component of exactly this type, or None."""
        return self._require_owner().get(cls)

    def get_typeof(self, cls: type[C]) -> C | None:
        """The first sibling component of this type or a subtype, or None."""
        return self._require_owner().get_typeof(cls)

    def remove_component(self, cls: type[Component]) -> None:
        """Mark the sibling of this type for removal next frame."""
        self._require_owner().remove(cls)

    # ----- services -----

    @property
    def sprite_batch(self) -> Any:
        return _require("sprite_batch")

    @property
    def time(self) -> Any:
        return _require("time")

    @property
    def content(self) -> Any:
        return _require("content")

    @property
    def input(self) -> Any:
        return _require("input")

    @property
    def graphics(self) -> Any:
        return _require("graphics")

    @property
    def scene_manager(self) -> Any:
        return _require("scene_manager")

    @property
    def scene(self) -> Any:
        """The scene the scene manager currently runs."""
        return self.scene_manager.current_scene