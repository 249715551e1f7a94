"""
Tests for binary cosine similarity.
"""

import math

import pytest

from studymatch.matching.similarity import (
    TokenNormalization,
    cosine_similarity,
    normalize_tokens,
)


class TestCosineSimilarity:
    """Propiedades de la similitud de coseno binaria."""

    def test_identical_sets_score_exactly_one(self):
        """Conjuntos idénticos dan exactamente 1.0."""
        tokens = ["Math", "CS", "Morning", "Undergrad"]
        assert cosine_similarity(tokens, list(reversed(tokens))) == 1.0

    @pytest.mark.parametrize("size", [1, 2, 3, 5, 7, 10])
    def test_self_similarity_for_any_size(self, size):
        tokens = [f"t{i}" for i in range(size)]
        assert cosine_similarity(tokens, tokens) == 1.0

    def test_disjoint_sets_score_zero(self):
        assert cosine_similarity(["Math"], ["Physics"]) == 0.0

    def test_empty_side_scores_zero(self):
        """Un lado vacío da 0.0 sin dividir por cero."""
        assert cosine_similarity([], ["Math"]) == 0.0
        assert cosine_similarity(["Math"], []) == 0.0
        assert cosine_similarity([], []) == 0.0

    def test_partial_overlap(self):
        """2 tokens en común sobre 4 y 2: 2 / sqrt(8)."""
        score = cosine_similarity(["A", "B", "C", "D"], ["A", "B"])
        assert score == pytest.approx(2 / math.sqrt(8))

    def test_symmetry(self):
        pairs = [
            (["A", "B", "C"], ["B", "C", "D", "E"]),
            (["Math"], ["Math", "CS", "Evening"]),
            (["x"], ["y"]),
        ]
        for a, b in pairs:
            assert cosine_similarity(a, b) == cosine_similarity(b, a)

    def test_bounds(self):
        samples = [
            ["A"],
            ["A", "B"],
            ["B", "C", "D"],
            ["A", "A", "Z"],
            [],
        ]
        for a in samples:
            for b in samples:
                assert 0.0 <= cosine_similarity(a, b) <= 1.0

    def test_duplicates_do_not_add_weight(self):
        """La presencia es binaria: repetir un token no cambia el score."""
        once = cosine_similarity(["Math", "CS"], ["Math"])
        twice = cosine_similarity(["Math", "Math", "CS"], ["Math", "Math"])
        assert once == twice

    def test_exact_comparison_is_case_sensitive(self):
        assert cosine_similarity(["Math"], ["math"]) == 0.0

    def test_deterministic(self):
        a = ["A", "B", "C"]
        b = ["C", "D"]
        assert cosine_similarity(a, b) == cosine_similarity(a, b)


class TestTokenNormalization:
    """Política opt-in de normalización."""

    def test_exact_returns_tokens_unchanged(self):
        tokens = [" Math", "CS "]
        assert normalize_tokens(tokens) == [" Math", "CS "]

    def test_casefold_strips_and_folds(self):
        tokens = [" Math", "CS ", "   ", "STRASSE"]
        assert normalize_tokens(tokens, TokenNormalization.CASEFOLD) == [
            "math",
            "cs",
            "strasse",
        ]

    def test_casefold_matches_case_variants(self):
        score = cosine_similarity(["Math"], ["math "], TokenNormalization.CASEFOLD)
        assert score == 1.0

    def test_casefold_blank_tokens_count_as_empty(self):
        assert cosine_similarity(["  "], ["Math"], TokenNormalization.CASEFOLD) == 0.0

    def test_exact_policy_as_string_keeps_tokens(self):
        assert normalize_tokens([" Math"], "exact") == [" Math"]

    def test_exact_policy_as_string_is_case_sensitive(self):
        assert cosine_similarity(["Math"], ["math"], "exact") == 0.0

    def test_casefold_policy_as_string(self):
        assert normalize_tokens([" Math"], "casefold") == ["math"]
        assert cosine_similarity(["Math"], ["math"], "casefold") == 1.0

    def test_unknown_policy_rejected(self):
        with pytest.raises(ValueError):
            normalize_tokens(["Math"], "lower")
