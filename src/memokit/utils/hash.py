"""Hashing helpers for cache keys and run metadata."""

from __future__ import annotations

import hashlib
import json
from typing import Any

import numpy as np


def array_sha256(arr: np.ndarray) -> str:
    """Digest of an array's contents in C order; dtype and shape are not included."""

    data = np.ascontiguousarray(arr)
    return hashlib.sha256(data.tobytes()).hexdigest()


def mapping_sha256(payload: dict[str, Any]) -> str:
    """Stable sha256 hash for nested mappings/lists."""

    canonical = json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=True)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
