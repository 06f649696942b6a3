"""Event delegates: callback lists that tolerate removal while firing."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable


@dataclass(eq=False)
class _Handle:
    """A subscribed target and its pending-removal flag."""

    target: Any
    to_remove: bool = False


class Delegate:
    """Fires a call to every subscribed function or bound method.

    Listeners removed while the delegate is firing are still called in that
    round and are dropped once it finishes.
    """

    def __init__(self) -> None:
        self._handles: list[_Handle] = []
        self._calling = 0
        self._remove_pending = False

    def __len__(self) -> int:
        return len(self._handles)

    def add_listener(self, func: Callable[..., Any]) -> None:
        """Subscribe a function or bound method."""
        if not callable(func):
            raise TypeError(f"listener must be callable, got {type(func).__name__}")
        self._handles.append(_Handle(func))

    def remove_listener(self, func: Callable[..., Any]) -> None:
        """Unsubscribe the first matching listener; unknown listeners are ignored."""
        handle = next(
            (h for h in self._handles if not h.to_remove and h.target == func),
            None,
        )
        if handle is None:
            return
        if self._calling:
            handle.to_remove = True
            self._remove_pending = True
        else:
            self._handles.remove(handle)

    def invoke(self, *args: Any) -> None:
        """Call every listener with the given arguments."""
        if not self._handles:
            return
        self._calling += 1
        try:
            for handle in list(self._handles):
                handle.target(*args)
        finally:
            self._calling -= 1
        if not self._calling:
            self._process_removals()

    def __call__(self, *args: Any) -> None:
        self.invoke(*args)

    def _process_removals(self) -> None:
        if self._remove_pending:
            self._handles = [h for h in self._handles if not h.to_remove]
            self._remove_pending = False


class EventListener(ABC):
    """An object that receives events from a ListenerDelegate."""

    @abstractmethod
    def callback(self, *args: Any) -> None:
        """Handle an event."""


class ListenerDelegate:
    """A handle that EventListener objects subscribe to with += and -=.

    Listeners removed during a call are dropped at the start of the next call.
    """

    def __init__(self) -> None:
        self._handles: list[_Handle] = []
        self._calling = False
        self._remove_pending = False

    def __len__(self) -> int:
        return len(self._handles)

    def __iadd__(self, listener: EventListener) -> ListenerDelegate:
        if not isinstance(listener, EventListener):
            raise TypeError(
                f"listener must be an EventListener, got {type(listener).__name__}"
            )
        self._handles.append(_Handle(listener))
        return self

    def __isub__(self, listener: EventListener) -> ListenerDelegate:
        handle = next((h for h in self._handles if h.target is listener), None)
        if handle is not None:
            if self._calling:
                handle.to_remove = True
                self._remove_pending = True
            else:
                self._handles.remove(handle)
        return self

    def __call__(self, *args: Any) -> None:
        if self._remove_pending:
            self._handles = [h for h in self._handles if not h.to_remove]
            self._remove_pending = False

        self._calling = True
        try:
            for handle in list(self._handles):
                handle.target.callback(*args)
        finally:
            self._calling = False