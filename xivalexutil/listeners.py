"""Event listener registry with removable subscriptions."""

from __future__ import annotations

import itertools
import threading
from typing import Any, Callable, Optional

from .cleanup import Cleanup


class ListenerManager:
    """Keeps callbacks in order of registration and calls them when an event fires."""

    def __init__(self, on_new_callback: Optional[Callable[[Callable[..., Any]], Any]] = None) -> None:
        self._on_new_callback = on_new_callback
        self._callbacks: dict[int, Callable[..., Any]] = {}
        self._ids = itertools.count()
        self._lock = threading.RLock()
        self._closed = False

    def add(self, fn: Callable[..., Any]) -> Cleanup:
        """Register ``fn``; the returned cleanup removes it again."""
        with self._lock:
            if self._closed:
                raise RuntimeError("listener manager is closed")
            callback_id = next(self._ids)
            if self._on_new_callback is not None:
                self._on_new_callback(fn)
            self._callbacks[callback_id] = fn

        def remove() -> None:
            with self._lock:
                if self._closed:
                    return
                self._callbacks.pop(callback_id, None)

        return Cleanup(remove)

    def __call__(self, fn: Callable[..., Any]) -> Cleanup:
        return self.add(fn)

    def fire(self, *args: Any, stop_when: Optional[Callable[[int, Any], bool]] = None) -> int:
        """Call every registered callback with ``args``; return how many were notified.

        ``stop_when(notified, result)`` may end notification early; the callback
        that triggered the stop is not counted.
        """
        with self._lock:
            callbacks = list(self._callbacks.values())
        notified = 0
        for cb in callbacks:
            result = cb(*args)
            if stop_when is not None and stop_when(notified, result):
                break
            notified += 1
        return notified

    def close(self) -> None:
        """Drop every callback; outstanding removal handles become no-ops."""
        with self._lock:
            self._callbacks.clear()
            self._closed = True

    def __len__(self) -> int:
        with self._lock:
            return len(self._callbacks)