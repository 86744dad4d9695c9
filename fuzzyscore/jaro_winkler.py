"""
Jaro-Winkler similarity with a reusable scratch buffer.

Summary:
- Counts matching bytes within a sliding window, the transpositions among
  them, and a common-prefix bonus (capped at 4) weighted by 0.1. Inputs are
  compared byte-wise; `str` inputs are UTF-8 encoded first.

When to use:
- Short strings such as person or company names, where typos and swapped
  neighbouring characters should still score high and a shared prefix matters.

Performance:
- `JaroWinkler` keeps one integer buffer across calls and only reallocates
  when a pair needs more room than it has, so scoring many pairs with the
  same instance does no per-call allocation of working state.

Limitations:
- No case-folding or Unicode normalization; multi-byte characters are
  compared byte by byte.

Score range:
- Returns a float in [0.0, 1.0]. Both empty -> 1.0; exactly one empty -> 0.0.
"""

from __future__ import annotations

import logging
import threading
from array import array
from typing import Optional, Union

from .registry import SCORER_REGISTRY

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 128
PREFIX_CAP = 4
SCALING_FACTOR = 0.1

# Marks a slot as cleared; in `max_flags` any non-zero value means "unmatched".
_SENTINEL = -1

StrOrBytes = Union[str, bytes, bytearray, memoryview]


def _as_bytes(value: StrOrBytes) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray)):
        return value
    if isinstance(value, memoryview):
        return value.tobytes()
    raise TypeError(
        f"expected str or bytes-like object, got {type(value).__name__}"
    )


class JaroWinkler:
    """Stateful Jaro-Winkler scorer that reuses its working memory.

    The scratch buffer grows on demand (doubling, or to the exact size needed)
    and never shrinks. An instance must not be used by several threads at
    once; give each thread its own scorer instead.
    """

    def __init__(self, size: int = DEFAULT_CAPACITY) -> None:
        if isinstance(size, bool) or not isinstance(size, int):
            raise TypeError(f"size must be an int, got {type(size).__name__}")
        if size < 0:
            raise ValueError(f"size must be >= 0, got {size}")
        self._buffer = array("q", [_SENTINEL]) * size

    @classmethod
    def with_size(cls, size: int) -> "JaroWinkler":
        """Create a scorer whose buffer starts with `size` slots."""
        return cls(size)

    @property
    def capacity(self) -> int:
        return len(self._buffer)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self.capacity})"

    def score(self, s1: StrOrBytes, s2: StrOrBytes) -> float:
        """Score two strings and return a similarity in [0.0, 1.0]."""
        b1 = _as_bytes(s1)
        b2 = _as_bytes(s2)
        if not b1 and not b2:
            return 1.0
        if not b1 or not b2:
            return 0.0

        self._ensure_capacity(len(b1) + len(b2))

        if len(b1) > len(b2):
            b1, b2 = b2, b1
        return self._calculate(b1, b2)

    def _ensure_capacity(self, capacity: int) -> None:
        current = len(self._buffer)
        if capacity <= current:
            return
        new_capacity = max(current * 2, capacity)
        logger.debug("Growing scratch buffer from %d to %d slots", current, new_capacity)
        self._buffer = array("q", [_SENTINEL]) * new_capacity

    def _calculate(self, shorter: bytes, longer: bytes) -> float:
        n_min = len(shorter)
        n_max = len(longer)
        if len(self._buffer) < n_min + n_max:
            raise RuntimeError(
                f"scratch buffer holds {len(self._buffer)} slots, "
                f"need {n_min + n_max}"
            )

        with memoryview(self._buffer) as view, \
                view[:n_min] as min_indices, \
                view[n_min:n_min + n_max] as max_flags:
            m = _matches(shorter, longer, min_indices, max_flags)
            if m == 0:
                return 0.0
            t = _transpositions(shorter, longer, min_indices, max_flags, m)

        p = _prefix(shorter, longer)
        jaro = (m / n_min + m / n_max + (m - t) / m) / 3.0
        return jaro + SCALING_FACTOR * p * (1.0 - jaro)


def _matches(
    shorter: bytes,
    longer: bytes,
    min_indices: memoryview,
    max_flags: memoryview,
) -> int:
    """Record matches of `shorter` in `longer`; return the match count.

    Each matched position of `longer` is flagged with 0 so it is consumed at
    most once, and the index in `shorter` is appended to `min_indices`.
    """
    n_max = len(longer)
    window = max(0, n_max // 2 - 1)
    matches = 0
    for i, c1 in enumerate(shorter):
        start = max(0, i - window)
        end = min(n_max, i + window + 1)
        for j in range(start, end):
            if longer[j] == c1 and max_flags[j] != 0:
                min_indices[matches] = i
                max_flags[j] = 0
                matches += 1
                break
    return matches


def _transpositions(
    shorter: bytes,
    longer: bytes,
    min_indices: memoryview,
    max_flags: memoryview,
    matches: int,
) -> int:
    # Pairs the k-th match in `shorter` with the k-th consumed slot in
    # `longer`, restoring every visited slot to the sentinel on the way.
    mismatches = 0
    max_index = 0
    for k in range(matches):
        min_index = min_indices[k]
        while max_flags[max_index] != 0:
            max_index += 1
        if shorter[min_index] != longer[max_index]:
            mismatches += 1
        min_indices[k] = _SENTINEL
        max_flags[max_index] = _SENTINEL
        max_index += 1
    return mismatches // 2


def _prefix(shorter: bytes, longer: bytes) -> int:
    p = 0
    for a, b in zip(shorter[:PREFIX_CAP], longer):
        if a != b:
            break
        p += 1
    return p


_local = threading.local()


def _thread_scorer() -> JaroWinkler:
    scorer: Optional[JaroWinkler] = getattr(_local, "scorer", None)
    if scorer is None:
        scorer = JaroWinkler()
        _local.scorer = scorer
    return scorer


def score_jaro_winkler(text_a: str, text_b: str) -> float:
    """Compute Jaro-Winkler similarity between two strings.

    Method: byte-wise Jaro similarity with the Winkler prefix bonus (prefix
    capped at 4, scaling factor 0.1). Inputs are not stripped or lowercased.

    Expected I/O:
    - Input: two strings; `None` is treated as the empty string.
    - Output: float in [0.0, 1.0]. Both empty -> 1.0; exactly one empty -> 0.0.

    Each thread scores with its own `JaroWinkler`, so this is safe to call
    concurrently.
    """
    return _thread_scorer().score(text_a or "", text_b or "")


# Register in global registry
SCORER_REGISTRY["jaro_winkler"] = score_jaro_winkler
