"""Memoization wrappers."""

from __future__ import annotations

import logging
import threading
from functools import update_wrapper
from typing import Any, Callable, Generic, Hashable, NamedTuple, TypeVar

from memokit.cache.keys import make_key

A = TypeVar("A")
B = TypeVar("B")

logger = logging.getLogger(__name__)


class CacheInfo(NamedTuple):
    """Snapshot of a memoized function's cache counters."""

    hits: int
    misses: int
    failures: int
    currsize: int


class Memoized(Generic[A, B]):
    """Single-argument memoizing wrapper with an unbounded per-instance cache.

    The wrapped function runs at most once per distinct key. A call that
    raises is not cached, so the next call with the same key computes again.
    With ``thread_safe=True`` the lookup, computation and insertion run under
    one re-entrant lock; recursive calls from the computing thread still see
    the cache.
    """

    def __init__(
        self,
        func: Callable[[A], B],
        *,
        key: Callable[[A], Hashable] | None = None,
        thread_safe: bool = False,
    ) -> None:
        update_wrapper(self, func)
        self._func = func
        self._key = key or make_key
        self._cache: dict[Hashable, B] = {}
        self._lock = threading.RLock() if thread_safe else None
        self._hits = 0
        self._misses = 0
        self._failures = 0

    @property
    def thread_safe(self) -> bool:
        return self._lock is not None

    def __call__(self, arg: A) -> B:
        k = self._key(arg)
        if self._lock is None:
            return self._get_or_compute(k, arg)
        with self._lock:
            return self._get_or_compute(k, arg)

    def _get_or_compute(self, k: Hashable, arg: A) -> B:
        try:
            value = self._cache[k]
        except KeyError:
            pass
        else:
            self._hits += 1
            return value

        self._misses += 1
        logger.debug("Cache miss in %s for key %r", self._name, k)
        try:
            value = self._func(arg)
        except Exception:
            self._failures += 1
            logger.debug("Computation failed in %s for key %r; not cached", self._name, k)
            raise
        self._cache[k] = value
        return value

    @property
    def _name(self) -> str:
        return getattr(self, "__qualname__", None) or repr(self._func)

    def __contains__(self, arg: Any) -> bool:
        return self._key(arg) in self._cache

    def __len__(self) -> int:
        return len(self._cache)

    def __repr__(self) -> str:
        return f"<Memoized {self._name} currsize={len(self._cache)}>"

    def cached_keys(self) -> list[Hashable]:
        return list(self._cache)

    def cache_info(self) -> CacheInfo:
        return CacheInfo(self._hits, self._misses, self._failures, len(self._cache))

    def cache_clear(self) -> None:
        """Drop every entry and reset the counters."""

        if self._lock is None:
            self._reset()
            return
        with self._lock:
            self._reset()

    def _reset(self) -> None:
        self._cache.clear()
        self._hits = 0
        self._misses = 0
        self._failures = 0


def memoize(
    func: Callable[[A], B] | None = None,
    *,
    key: Callable[[A], Hashable] | None = None,
    thread_safe: bool = False,
):
    """Memoize a single-argument function, bare (``@memoize``) or with options."""

    def decorator(f: Callable[[A], B]) -> Memoized[A, B]:
        return Memoized(f, key=key, thread_safe=thread_safe)

    if func is None:
        return decorator
    return decorator(func)
