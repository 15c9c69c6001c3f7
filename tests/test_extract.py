"""Tests for candidate ranking."""

import pytest

from fuzzbridge import ScoredCandidate, UnknownScorerError
from fuzzbridge.extract import (
    all_matches,
    best_match,
    extract_best_match,
    extract_matches,
    extract_similar_strings,
    top_k_matches,
)


FUZZY_CHOICES = ["wuzzy fuzzy", "fuzzy wuzzy was a bear", "yellow submarine"]

BEAR_CHOICES = ["wuzzy fuzzy", "completely different", "fuzzy wuzzy was a bear"]

CITIES = ["New York", "Newark", "York", "New Orleans", "Newcastle", "Boston"]


def constant(a, b, score_cutoff=None):
    return 80.0


def by_length(a, b, score_cutoff=None):
    return float(len(b))


class TestExtractBestMatch:
    def test_exact_match_after_normalization(self):
        result = extract_best_match("  NEW YORK ", CITIES)
        assert result == ScoredCandidate(text="New York", score=100.0)

    def test_returns_original_text(self):
        result = extract_best_match("new york", ["  NEW YORK  "])
        assert result.text == "  NEW YORK  "
        assert result.score == 100

    def test_first_of_equal_scores_wins(self):
        result = extract_best_match("x", ["first", "second", "third"], scorer=constant)
        assert result.text == "first"
        assert result.score == 80.0

    def test_score_must_exceed_cutoff(self):
        assert extract_best_match("x", ["a", "b"], score_cutoff=80, scorer=constant) is None

    def test_highest_score_wins(self):
        result = extract_best_match("x", ["ab", "abcd", "abc"], score_cutoff=0, scorer=by_length)
        assert result.text == "abcd"

    def test_no_match(self):
        assert extract_best_match("zzzz", ["abc", "def"], scorer="Ratio") is None

    def test_empty_choices(self):
        assert extract_best_match("query", []) is None

    def test_asciify(self):
        plain = extract_best_match("zurich", ["Zürich"], scorer="Ratio")
        folded = extract_best_match("zurich", ["Zürich"], scorer="Ratio", asciify=True)
        assert folded.score == 100
        assert plain is None or plain.score < 100

    def test_without_processor_case_matters(self):
        result = extract_best_match("new york", ["NEW YORK"], score_cutoff=0,
                                    processor=False, scorer="Ratio")
        assert result is None or result.score < 100

    def test_unknown_scorer(self):
        with pytest.raises(UnknownScorerError):
            extract_best_match("a", ["a"], scorer="nope")


class TestExtractSimilarStrings:
    def test_keeps_input_order(self):
        result = extract_similar_strings("x", ["ccc", "a", "bb"], score_cutoff=0, scorer=by_length)
        assert [m.text for m in result] == ["ccc", "a", "bb"]

    def test_cutoff_is_inclusive(self):
        result = extract_similar_strings("x", ["a", "b"], score_cutoff=80, scorer=constant)
        assert len(result) == 2

    def test_all_scores_meet_cutoff(self):
        for m in extract_similar_strings("new york", CITIES, score_cutoff=60):
            assert m.score >= 60

    def test_higher_cutoff_never_adds_matches(self):
        counts = [
            len(extract_similar_strings("new york", CITIES, score_cutoff=cutoff))
            for cutoff in (0, 30, 50, 70, 90, 100)
        ]
        assert counts == sorted(counts, reverse=True)

    def test_zero_cutoff_keeps_everything(self):
        assert len(extract_similar_strings("new york", CITIES, score_cutoff=0)) == len(CITIES)

    def test_empty_choices(self):
        assert extract_similar_strings("query", []) == []

    def test_threaded_scoring_matches_sequential(self):
        sequential = extract_similar_strings("new york", CITIES, score_cutoff=0)
        threaded = extract_similar_strings("new york", CITIES, score_cutoff=0, workers=4)
        assert threaded == sequential


class TestExtractMatches:
    def test_fuzzy_wuzzy(self):
        result = extract_matches("fuzzy wuzzy", FUZZY_CHOICES, limit=2)
        assert {m.text for m in result} == {"wuzzy fuzzy", "fuzzy wuzzy was a bear"}
        assert result[0].score >= result[1].score
        assert all(m.score >= 50 for m in result)

    def test_fuzzy_wuzzy_top_two(self):
        result = extract_matches("fuzzy wuzzy", BEAR_CHOICES, score_cutoff=50, limit=2)
        assert [m.text for m in result] == ["wuzzy fuzzy", "fuzzy wuzzy was a bear"]
        assert result[0].score == pytest.approx(95.0)
        assert result[1].score == pytest.approx(90.0)
        assert all(m.score >= 50 for m in result)

    def test_sorted_descending(self):
        result = extract_matches("x", ["a", "ccc", "bb"], score_cutoff=0, scorer=by_length, limit=0)
        assert [m.text for m in result] == ["ccc", "bb", "a"]

    def test_ties_keep_input_order(self):
        result = extract_matches("x", ["one", "two", "three", "four"], scorer=constant, limit=3)
        assert [m.text for m in result] == ["one", "two", "three"]

    def test_limit_zero_returns_all(self):
        everything = extract_similar_strings("new york", CITIES, score_cutoff=0)
        result = extract_matches("new york", CITIES, score_cutoff=0, limit=0)
        assert len(result) == len(everything)

    def test_negative_limit_returns_all(self):
        result = extract_matches("x", ["a", "b", "c", "d"], scorer=constant, limit=-1)
        assert len(result) == 4

    def test_top_k_is_prefix_of_sorted_matches(self):
        everything = extract_similar_strings("new york", CITIES, score_cutoff=0)
        ranked = sorted(everything, key=lambda m: m.score, reverse=True)
        assert extract_matches("new york", CITIES, score_cutoff=0, limit=3) == ranked[:3]

    def test_default_limit(self):
        assert len(extract_matches("x", ["a", "b", "c", "d", "e"], scorer=constant)) == 3

    def test_best_match_leads_top_k(self):
        best = extract_best_match("new york", CITIES)
        top = extract_matches("new york", CITIES, limit=1)
        assert top == [best]

    def test_empty_choices(self):
        assert extract_matches("query", []) == []

    def test_threaded_scoring_matches_sequential(self):
        sequential = extract_matches("new york", CITIES, limit=0)
        threaded = extract_matches("new york", CITIES, limit=0, workers=3)
        assert threaded == sequential

    def test_scorer_by_enum_name(self):
        result = extract_matches("fuzzy wuzzy", FUZZY_CHOICES, scorer="token_sort_ratio", limit=1)
        assert result[0].text == "wuzzy fuzzy"
        assert result[0].score == 100


class TestShortNames:
    def test_aliases(self):
        assert best_match is extract_best_match
        assert all_matches is extract_similar_strings
        assert top_k_matches is extract_matches
