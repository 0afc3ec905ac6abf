# tests/unit/application/processing/scoring/test_search_ranker.py

"""Tests for ranking candidate records"""

# Third party imports
from hypothesis import given
from hypothesis import strategies as st

# Local imports
from bookcenter_search.application.processing.scoring import SearchRanker
from bookcenter_search.core.domain.record import SearchableRecord
from tests.fixtures.records import sample_books


class FixedScorer:
    """Scorer returning a preset score per record id"""

    def __init__(self, scores: dict[str, float]) -> None:
        self.scores = scores
        self.calls: list[tuple[str, str]] = []

    def score(self, query: str, record: SearchableRecord) -> float:
        self.calls.append((query, record.id))
        return self.scores[record.id]


def make_records(*ids: str) -> list[SearchableRecord]:
    return [SearchableRecord(id=record_id, name=f"Book {record_id}") for record_id in ids]


class TestSearchRanker:
    """Test ranking with a stub scorer"""

    def test_sorts_by_descending_score(self):
        ranker = SearchRanker(scorer=FixedScorer({"a": 1.0, "b": 7.5, "c": 3.0}))
        ranked = ranker.rank("query", make_records("a", "b", "c"))
        assert [record.id for record in ranked] == ["b", "c", "a"]

    def test_drops_records_below_threshold(self):
        ranker = SearchRanker(scorer=FixedScorer({"a": 0.29, "b": 0.3, "c": 5.0}))
        ranked = ranker.rank("query", make_records("a", "b", "c"))
        assert [record.id for record in ranked] == ["c", "b"]

    def test_ties_keep_input_order(self):
        ranker = SearchRanker(scorer=FixedScorer({"a": 2.0, "b": 4.0, "c": 2.0, "d": 2.0}))
        ranked = ranker.rank("query", make_records("c", "a", "b", "d"))
        assert [record.id for record in ranked] == ["b", "c", "a", "d"]

    def test_explicit_threshold(self):
        ranker = SearchRanker(scorer=FixedScorer({"a": 1.0, "b": 5.0}))
        assert [record.id for record in ranker.rank("q", make_records("a", "b"), 2.0)] == ["b"]

    def test_empty_records(self):
        ranker = SearchRanker(scorer=FixedScorer({}))
        assert ranker.rank("query", []) == []

    def test_empty_query_ranks_nothing(self):
        scorer = FixedScorer({"a": 9.0})
        ranker = SearchRanker(scorer=scorer)
        assert ranker.rank("  ?? ", make_records("a"), threshold=0.0) == []
        assert scorer.calls == []

    def test_rank_scored_keeps_scores(self):
        ranker = SearchRanker(scorer=FixedScorer({"a": 1.0, "b": 5.0}))
        scored = ranker.rank_scored("query", make_records("a", "b"))
        assert [(item.record.id, item.score) for item in scored] == [("b", 5.0), ("a", 1.0)]

    def test_default_threshold_from_config(self):
        assert SearchRanker().default_threshold == 0.3


class TestSearchRankerProperties:
    """Property-based tests over the sample catalog"""

    def setup_method(self) -> None:
        """Set up test fixtures"""
        self.ranker = SearchRanker()
        self.books = sample_books()

    @given(
        st.sampled_from(["hobbit", "Hary Poter", "boi", "kobita", "tolkien", "বই", "x"]),
        st.floats(min_value=0.0, max_value=10.0),
        st.floats(min_value=0.0, max_value=10.0),
    )
    def test_threshold_monotonicity(self, query: str, low: float, high: float) -> None:
        low, high = sorted((low, high))
        assert len(self.ranker.rank(query, self.books, high)) <= len(
            self.ranker.rank(query, self.books, low)
        )

    @given(st.sampled_from(["hobbit", "Hary Poter", "boi", "kobita"]))
    def test_scores_are_non_increasing(self, query: str) -> None:
        scores = [item.score for item in self.ranker.rank_scored(query, self.books)]
        assert scores == sorted(scores, reverse=True)
