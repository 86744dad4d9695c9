try:
    from rapidfuzz.distance import JaroWinkler as RFJaroWinkler  # noqa: F401
    RAPIDFUZZ_OK = True
except Exception:  # pragma: no cover - environment without rapidfuzz
    RAPIDFUZZ_OK = False

import pytest

from fuzzyscore import JaroWinkler

# rapidfuzz only applies the prefix bonus above a Jaro value of 0.7, so the
# comparison is limited to pairs that are clearly similar.
SIMILAR_PAIRS = [
    ("martha", "marhta"),
    ("dwayne", "duane"),
    ("dixon", "dicksonx"),
    ("jellyfish", "smellyfish"),
    ("inoxidable", "inoxidalbe"),
]


@pytest.mark.skipif(not RAPIDFUZZ_OK, reason="rapidfuzz not installed")
@pytest.mark.parametrize("a,b", SIMILAR_PAIRS)
def test_matches_rapidfuzz(a, b):
    jw = JaroWinkler()
    assert jw.score(a, b) == pytest.approx(RFJaroWinkler.normalized_similarity(a, b), abs=1e-12)
