"""Memoizing cache wrapper and memoized Fibonacci numbers."""

from memokit.cache.keys import KeyDerivationError, make_key
from memokit.cache.memoize import CacheInfo, Memoized, memoize
from memokit.sequences.fibonacci import (
    InvalidArgument,
    MemoizedFibonacci,
    fibonacci_table,
    make_fibonacci,
    memoized_fibonacci,
)

__all__ = [
    "memoize",
    "Memoized",
    "CacheInfo",
    "make_key",
    "KeyDerivationError",
    "memoized_fibonacci",
    "make_fibonacci",
    "MemoizedFibonacci",
    "fibonacci_table",
    "InvalidArgument",
]
