"""Property-based tests for the Jaro-Winkler scorer using Hypothesis."""

from hypothesis import given
from hypothesis import strategies as st

from fuzzyscore import JaroWinkler

texts = st.one_of(st.text(max_size=60), st.binary(max_size=60))


@given(texts)
def test_identity(s) -> None:
    assert JaroWinkler().score(s, s) == 1.0


@given(st.text(min_size=1, max_size=60))
def test_empty_against_nonempty(s: str) -> None:
    jw = JaroWinkler()
    assert jw.score("", s) == 0.0
    assert jw.score(s, "") == 0.0


@given(st.text(max_size=60), st.text(max_size=60))
def test_symmetry(a: str, b: str) -> None:
    jw = JaroWinkler()
    assert jw.score(a, b) == jw.score(b, a)


@given(texts, texts)
def test_bounds(a, b) -> None:
    assert 0.0 <= JaroWinkler().score(a, b) <= 1.0


@given(st.lists(st.tuples(st.text(max_size=80), st.text(max_size=80)), max_size=10))
def test_growth_is_not_observable(pairs) -> None:
    growing = JaroWinkler.with_size(1)
    presized = JaroWinkler.with_size(1024)
    for a, b in pairs:
        before = growing.capacity
        assert growing.score(a, b) == presized.score(a, b)
        assert growing.capacity >= before
        assert all(v == -1 for v in growing._buffer)
