# bookcenter_search/application/processing/scoring/_search_ranker.py

"""Ranking of a candidate set by relevance to a query"""

# Standard library imports
from logging import getLogger
from typing import Iterable

# Local imports
from bookcenter_search.application.processing.scoring._candidate_scorer import CandidateScorer
from bookcenter_search.application.processing.string_similarity import normalize
from bookcenter_search.core.domain.record import ScoredRecord
from bookcenter_search.core.domain.record import SearchableRecord
from bookcenter_search.core.types.protocols import ScorerProtocol
from bookcenter_search.infrastructure.config import ConfigLoader
from bookcenter_search.shared.mixins.mixins import ConfigurableMixin

logger = getLogger(__name__)


class SearchRanker(ConfigurableMixin):
    """Scores, thresholds and sorts candidate records"""

    def __init__(
        self, config: ConfigLoader | None = None, scorer: ScorerProtocol | None = None
    ) -> None:
        """Initialize ranker

        Args:
            config: Optional configuration loader
            scorer: Record scorer, a CandidateScorer on the same config if None
        """
        self.config = self._init_config(config)
        self.scorer = scorer if scorer is not None else CandidateScorer(config)
        self.default_threshold = self.config.retrieval.fuzzy_threshold

    def rank_scored(
        self,
        query: str,
        records: Iterable[SearchableRecord],
        threshold: float | None = None,
    ) -> list[ScoredRecord]:
        """Score every record and keep the relevant ones, best first

        Args:
            query: Search query
            records: Candidate records
            threshold: Minimum score to keep, the configured default if None

        Returns:
            Records scoring at least threshold, by descending score. Equal
            scores keep their input order.
        """
        if threshold is None:
            threshold = self.default_threshold

        if not normalize(query):
            return []

        scored = []
        for record in records:
            score = self.scorer.score(query, record)
            if score >= threshold:
                scored.append(ScoredRecord(record=record, score=score))

        # sorted() is stable, so ties stay in catalog order
        ranked = sorted(scored, key=lambda item: item.score, reverse=True)
        logger.debug(f"Ranked {len(ranked)} records for {query!r} (threshold={threshold})")
        return ranked

    def rank(
        self,
        query: str,
        records: Iterable[SearchableRecord],
        threshold: float | None = None,
    ) -> list[SearchableRecord]:
        """Relevant records for a query, best first

        Args:
            query: Search query
            records: Candidate records
            threshold: Minimum score to keep, the configured default if None

        Returns:
            Records scoring at least threshold, by descending score
        """
        return [item.record for item in self.rank_scored(query, records, threshold)]
