"""Thread-safe compute-once cells."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")

_UNSET = object()


class Memoized(Generic[T]):
    """
    Lazily computed value shared by all threads.

    The factory runs at most once: concurrent first callers block on the lock
    and then read the cached value. Nothing is ever invalidated. If the
    factory raises, the exception propagates and the next call tries again.
    """

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory
        self._value: object = _UNSET
        self._lock = threading.Lock()

    @property
    def is_set(self) -> bool:
        return self._value is not _UNSET

    def get(self) -> T:
        value = self._value
        if value is _UNSET:
            with self._lock:
                # Double-check locking pattern
                value = self._value
                if value is _UNSET:
                    value = self._factory()
                    self._value = value
        return value  # type: ignore[return-value]

    def __call__(self) -> T:
        return self.get()
