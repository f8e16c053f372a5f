import pytest

from didyoumean.suggest.dictionary import Dictionary
from didyoumean.suggest.engine import Candidate, SuggestionEngine, suggest
from didyoumean.suggest.errors import EmptyDictionary, InvalidConfiguration
from didyoumean.utils.config import SuggestConfig


def test_suggest_ranks_by_distance_then_word():
    d = Dictionary.from_words(["hello", "help", "hell", "world"])
    out = suggest("helo", d, SuggestConfig(max_distance=1, max_results=10))
    assert out.words == ["hell", "hello"]
    assert [c.distance for c in out] == [1, 1]
    assert not out.exact_match


def test_suggest_exact_match_returns_empty_list():
    d = Dictionary.from_words(["cat", "bat", "rat"])
    out = suggest("cat", d)
    assert len(out) == 0
    assert out.exact_match


def test_suggest_exact_match_ignores_case_by_default():
    d = Dictionary.from_words(["cat", "bat", "rat"])
    out = suggest("  CAT\n", d)
    assert out.exact_match
    assert out.query == "cat"


def test_suggest_nothing_within_bound():
    d = Dictionary.from_words(["xyz"])
    out = suggest("abc", d, SuggestConfig(max_distance=1))
    assert len(out) == 0
    assert not out.exact_match


def test_suggest_zero_distance_finds_nothing_for_misspelling():
    d = Dictionary.from_words(["hello", "help"])
    out = suggest("helo", d, SuggestConfig(max_distance=0))
    assert list(out) == []


def test_suggest_empty_dictionary():
    with pytest.raises(EmptyDictionary):
        suggest("anything", Dictionary.from_words([]))


@pytest.mark.parametrize(
    "cfg",
    [
        SuggestConfig(max_distance=-1),
        SuggestConfig(max_results=0),
        SuggestConfig(workers=0),
    ],
)
def test_suggest_invalid_configuration(cfg):
    d = Dictionary.from_words(["hello"])
    with pytest.raises(InvalidConfiguration):
        suggest("helo", d, cfg)


def test_suggest_bounds_results_and_distance():
    words = ["bat", "cat", "hat", "mat", "rat", "sat", "vat", "cart", "at", "battle"]
    d = Dictionary.from_words(words)
    out = suggest("xat", d, SuggestConfig(max_distance=1, max_results=3))
    assert len(out) == 3
    assert all(c.distance <= 1 for c in out)
    assert out.words == ["at", "bat", "cat"]


def test_suggest_is_reproducible():
    words = ["spell", "spelt", "spill", "smell", "shell", "spells", "spa", "sell"]
    d1 = Dictionary.from_words(words)
    d2 = Dictionary.from_words(list(reversed(words)))
    cfg = SuggestConfig(max_distance=2, max_results=10)
    first = suggest("spel", d1, cfg)
    assert first == suggest("spel", d1, cfg)
    assert first.candidates == suggest("spel", d2, cfg).candidates


def test_case_sensitive_dictionary_and_config():
    d = Dictionary.from_words(["Paris", "paris", "Pairs"], case_sensitive=True)
    strict = suggest("Pari", d, SuggestConfig(case_sensitive=True, max_distance=1))
    assert strict.words == ["Paris"]

    loose = suggest("PARIS", d, SuggestConfig(case_sensitive=False, max_distance=1))
    assert loose.exact_match


def test_parallel_scan_matches_sequential():
    words = ["a", "ab", "abc", "abd", "abcd", "abce", "bcd", "abcde", "xbcd"]
    d = Dictionary.from_words(words)
    seq = SuggestionEngine(d, SuggestConfig(max_distance=2, max_results=20)).suggest("abcx")
    par = SuggestionEngine(d, SuggestConfig(max_distance=2, max_results=20, workers=2)).suggest("abcx")
    assert par.candidates == seq.candidates
    assert seq[0] == Candidate(word="abc", distance=1)


def test_folded_length_used_when_ignoring_case_of_case_sensitive_dictionary():
    d = Dictionary.from_words(["Straße", "Strand"], case_sensitive=True)
    cfg = SuggestConfig(case_sensitive=False, max_distance=1)
    assert suggest("strassen", d, cfg).words == ["Straße"]
    par = SuggestionEngine(d, SuggestConfig(case_sensitive=False, max_distance=1, workers=2)).suggest("strassen")
    assert par.words == ["Straße"]
