"""Deferred cleanup actions: single actions, valued actions and stacks of them."""

from __future__ import annotations

from typing import Any, Callable, Generic, Optional, TypeVar, Union

T = TypeVar("T")

Action = Callable[[], Any]


class Cleanup:
    """Holds an action that runs once, on ``clear()`` or when leaving a ``with`` block."""

    def __init__(self, fn: Optional[Action] = None) -> None:
        self._fn: Optional[Action] = fn

    def replace(self, fn: Optional[Action]) -> "Cleanup":
        """Run the pending action, if any, then hold ``fn`` instead."""
        previous, self._fn = self._fn, None
        if previous is not None:
            previous()
        self._fn = fn
        return self

    def wrap(self, wrapper: Callable[[Optional[Action]], Any]) -> "Cleanup":
        """Replace the pending action by one that calls ``wrapper`` with the old action."""
        inner = self._fn

        def wrapped() -> None:
            wrapper(inner)

        self._fn = wrapped
        return self

    def clear(self) -> "Cleanup":
        """Run the pending action, if any, and forget it."""
        fn, self._fn = self._fn, None
        if fn is not None:
            fn()
        return self

    def _take(self) -> Optional[Action]:
        fn, self._fn = self._fn, None
        return fn

    def __bool__(self) -> bool:
        return self._fn is not None

    def __enter__(self) -> "Cleanup":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.clear()
        return False


class ValuedCleanup(Cleanup, Generic[T]):
    """A cleanup action that also carries a value."""

    def __init__(self, value: T, fn: Optional[Action] = None) -> None:
        super().__init__(fn)
        self.value = value

    def __enter__(self) -> "ValuedCleanup[T]":
        return self


class CleanupStack:
    """A list of cleanup actions run in reverse order of addition."""

    def __init__(self) -> None:
        self._items: list[Cleanup] = []

    def add(self, item: Union[Cleanup, "CleanupStack", Action, None]) -> "CleanupStack":
        """Add a cleanup, a plain callable, or take over every entry of another stack."""
        if item is None:
            return self
        if isinstance(item, CleanupStack):
            self._items.extend(item._items)
            item._items = []
        elif isinstance(item, Cleanup):
            if item:
                self._items.append(item)
        elif callable(item):
            self._items.append(Cleanup(item))
        else:
            raise TypeError(f"cannot add {type(item).__name__} to a cleanup stack")
        return self

    def __iadd__(self, item: Union[Cleanup, "CleanupStack", Action, None]) -> "CleanupStack":
        return self.add(item)

    def __len__(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        """Run every held action, last added first."""
        while self._items:
            self._items.pop().clear()

    def __enter__(self) -> "CleanupStack":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.clear()
        return False