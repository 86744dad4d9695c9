"""
Global scorer registry.

Exposes `SCORER_REGISTRY`: a mapping from a string key to a callable of the
form `(text_a: str, text_b: str) -> float` that returns a similarity score in
the range [0.0, 1.0]. Scorer modules add themselves on import.
"""

from typing import Callable, Dict

SCORER_REGISTRY: Dict[str, Callable[[str, str], float]] = {}


def get_scorer(name: str) -> Callable[[str, str], float]:
    """Return the scorer registered under `name`.

    Raises `KeyError` naming the registered keys when `name` is unknown.
    """
    try:
        return SCORER_REGISTRY[name]
    except KeyError:
        known = ", ".join(sorted(SCORER_REGISTRY)) or "<none>"
        raise KeyError(f"Unknown scorer {name!r}. Registered scorers: {known}") from None
