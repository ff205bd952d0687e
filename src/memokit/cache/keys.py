"""Cache key derivation."""

from __future__ import annotations

from typing import Any, Hashable

import numpy as np

from memokit.utils.hash import array_sha256


class KeyDerivationError(TypeError):
    """Raised when an argument cannot be turned into a cache key."""


# Leads every derived key so it never equals a hashable argument used as its own key.
_MARK = object()


def make_key(arg: Any) -> Hashable:
    """Return a hashable cache key for ``arg``.

    Hashable values are their own key. Lists, tuples, dicts and sets holding
    unhashable items are frozen into tuples led by a private marker, and numpy
    arrays are keyed by dtype, shape and a digest of their contents.
    """

    if isinstance(arg, np.ndarray):
        return _array_key(arg)
    try:
        hash(arg)
    except TypeError:
        return _freeze(arg)
    return arg


def _freeze(value: Any) -> Hashable:
    if isinstance(value, np.ndarray):
        return _array_key(value)
    if isinstance(value, (list, tuple)):
        return (_MARK, type(value).__name__, tuple(_freeze(v) for v in value))
    if isinstance(value, dict):
        items = sorted(value.items(), key=lambda kv: repr(kv[0]))
        return (_MARK, "dict", tuple((k, _freeze(v)) for k, v in items))
    if isinstance(value, (set, frozenset)):
        return (_MARK, "set", frozenset(_freeze(v) for v in value))
    try:
        hash(value)
    except TypeError as exc:
        raise KeyDerivationError(
            f"Cannot derive a cache key from {type(value).__name__!s} value"
        ) from exc
    return value


def _array_key(arr: np.ndarray) -> Hashable:
    if arr.dtype.hasobject:
        raise KeyDerivationError("Cannot derive a cache key from an object-dtype array")
    return (_MARK, "ndarray", arr.dtype.str, arr.shape, array_sha256(arr))
