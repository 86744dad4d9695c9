"""
fuzzyscore package export and registration.

Exposes `SCORER_REGISTRY`, `get_scorer` and the `JaroWinkler` scorer, and
imports the scorer modules for side-effect registration into the registry.
"""

from .registry import SCORER_REGISTRY, get_scorer  # noqa: F401

# Import modules that register themselves in the registry on import.
from . import jaro_winkler  # noqa: F401  # side-effect: registers 'jaro_winkler'
from .jaro_winkler import JaroWinkler, score_jaro_winkler  # noqa: F401

__all__ = [
    "SCORER_REGISTRY",
    "get_scorer",
    "JaroWinkler",
    "score_jaro_winkler",
]
