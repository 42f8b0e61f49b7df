"""Tests for dense cohort ranking."""

from propcompare.engine.ranker import rank_cohort


class TestRankCohort:
    def test_descending_by_score(self):
        assert rank_cohort({"a": 40.0, "b": 90.0, "c": 65.0}) == {"b": 1, "c": 2, "a": 3}

    def test_unrounded_scores_break_near_ties(self):
        assert rank_cohort({"a": 70.49, "b": 70.51}) == {"b": 1, "a": 2}

    def test_tie_broken_by_price_score(self):
        ranks = rank_cohort({"a": 50.0, "b": 50.0}, {"a": 20.0, "b": 80.0})
        assert ranks == {"b": 1, "a": 2}

    def test_absent_price_score_sorts_last(self):
        ranks = rank_cohort({"a": 50.0, "b": 50.0}, {"b": 0.0})
        assert ranks == {"b": 1, "a": 2}

    def test_full_tie_broken_by_id(self):
        ranks = rank_cohort({"zeta": 50.0, "alpha": 50.0, "mid": 50.0})
        assert ranks == {"alpha": 1, "mid": 2, "zeta": 3}

    def test_ranks_are_a_permutation(self):
        scores = {f"p{i}": float(i % 3) for i in range(10)}
        assert sorted(rank_cohort(scores).values()) == list(range(1, 11))
