"""Memoized Fibonacci numbers."""

from __future__ import annotations

import numbers
from typing import Callable, Optional

from memokit.cache.memoize import CacheInfo, Memoized
from memokit.core.config import STRATEGIES

Step = Callable[[int, Callable[[int], int]], int]


class InvalidArgument(ValueError):
    """Raised for an index outside the Fibonacci domain."""


def check_index(n: object) -> int:
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise InvalidArgument(f"Fibonacci index must be an integer, got {type(n).__name__}")
    if n < 0:
        raise InvalidArgument(f"Fibonacci index must be non-negative, got {n}")
    return int(n)


def fibonacci_step(n: int, fib: Callable[[int], int]) -> int:
    """One recurrence step: F(n) from the memoized ``fib`` for smaller indices."""

    if n <= 1:
        return n
    return fib(n - 1) + fib(n - 2)


class MemoizedFibonacci:
    """Fibonacci function backed by its own :class:`Memoized` cache.

    The step function receives the memoized callable itself, so sub-results
    land in the same cache the outer call consults. With the ``iterative``
    strategy, missing indices below ``n`` are filled bottom-up first and each
    step recurses at most one level; ``recursive`` uses the plain recurrence
    and needs stack depth proportional to ``n``.
    """

    def __init__(
        self,
        *,
        thread_safe: bool = False,
        strategy: str = "iterative",
        step: Step | None = None,
    ) -> None:
        if strategy not in STRATEGIES:
            raise ValueError(
                f"Unsupported fibonacci strategy '{strategy}'. Supported: {'|'.join(STRATEGIES)}"
            )
        self.strategy = strategy
        self._step = step or fibonacci_step
        self.cache: Memoized[int, int] = Memoized(self._compute, thread_safe=thread_safe)

    def _compute(self, n: int) -> int:
        return self._step(n, self.cache)

    def __call__(self, n: int) -> int:
        n = check_index(n)
        if self.strategy == "iterative" and n not in self.cache:
            start = n
            while start > 0 and (start - 1) not in self.cache:
                start -= 1
            for i in range(start, n):
                self.cache(i)
        return self.cache(n)

    def cache_info(self) -> CacheInfo:
        return self.cache.cache_info()

    def cache_clear(self) -> None:
        self.cache.cache_clear()


def make_fibonacci(
    *,
    thread_safe: bool = False,
    strategy: str = "iterative",
    step: Step | None = None,
) -> MemoizedFibonacci:
    return MemoizedFibonacci(thread_safe=thread_safe, strategy=strategy, step=step)


memoized_fibonacci = MemoizedFibonacci()


def fibonacci_table(n: int, memo: Optional[list[Optional[int]]] = None) -> int:
    """Compute F(n) into an explicit memo table shared by reference.

    ``memo[i]`` holds F(i) or None. The list is grown in place as needed and
    indices ``0..n`` are populated on return, so passing the same list to
    later calls reuses earlier work.
    """

    n = check_index(n)
    if memo is None:
        memo = []
    if len(memo) <= n:
        memo.extend([None] * (n + 1 - len(memo)))
    if memo[n] is not None:
        return memo[n]
    for i in range(n + 1):
        if memo[i] is None:
            memo[i] = i if i <= 1 else memo[i - 1] + memo[i - 2]
    return memo[n]
