# bookcenter_search/application/processing/scoring/_candidate_scorer.py

"""Weighted multi-field relevance scoring of a record against a query"""

# Standard library imports
from logging import getLogger

# Local imports
from bookcenter_search.application.processing.string_similarity import field_match_score
from bookcenter_search.application.processing.transliteration import QueryVariationExpander
from bookcenter_search.core.domain.record import SearchableRecord
from bookcenter_search.infrastructure.config import ConfigLoader
from bookcenter_search.shared.mixins.mixins import ConfigurableMixin

logger = getLogger(__name__)

SCORED_FIELDS = ("name", "author", "publisher", "notes")


class CandidateScorer(ConfigurableMixin):
    """Scores catalog records against queries

    The score is the weighted sum of per-field match scores, plus a
    down-weighted score for each transliterated spelling of the query, capped
    at the configured maximum.
    """

    def __init__(
        self,
        config: ConfigLoader | None = None,
        expander: QueryVariationExpander | None = None,
    ) -> None:
        """Initialize with weights from configuration

        Args:
            config: Optional configuration loader
            expander: Query variation expander; if None, built from the word lists
                of config when one is given, otherwise the process-wide default
        """
        self.config = self._init_config(config)
        scoring = self.config.scoring

        self.field_weights: dict[str, float] = {
            "name": scoring.name_weight,
            "author": scoring.author_weight,
            "publisher": scoring.publisher_weight,
            "notes": scoring.notes_weight,
        }
        self.variation_weight = scoring.variation_weight
        self.max_score = scoring.max_score
        self.word_threshold = scoring.word_match_threshold

        if expander is None:
            expander = (
                QueryVariationExpander.from_config(self.config)
                if config is not None
                else QueryVariationExpander()
            )
        self.expander = expander

    def field_scores(self, query: str, record: SearchableRecord) -> dict[str, float]:
        """Unweighted match score of each scored field

        Args:
            query: Search query
            record: Record to score

        Returns:
            Field name to score in [0, 1]; absent fields score 0.0
        """
        scores: dict[str, float] = {}
        for field in SCORED_FIELDS:
            value: str | None = getattr(record, field)
            if value is None:
                scores[field] = 0.0
            else:
                scores[field] = field_match_score(query, value, self.word_threshold)
        return scores

    def score(self, query: str, record: SearchableRecord) -> float:
        """Total relevance of a record to a query

        Args:
            query: Search query
            record: Record to score

        Returns:
            Score in [0, max_score]
        """
        return self._score(query, record, frozenset())

    def _score(self, query: str, record: SearchableRecord, expanded: frozenset[str]) -> float:
        """Score a query and, recursively, its not yet expanded variations

        Args:
            query: Query or variation being scored
            record: Record to score
            expanded: Spellings already scored higher up the recursion

        Returns:
            Capped score
        """
        total = sum(
            self.field_weights[field] * field_score
            for field, field_score in self.field_scores(query, record).items()
        )

        variations = self.expander.variations_of(query)
        # Two spellings that transliterate into each other must not recurse forever
        seen = expanded | frozenset(variations)
        for variation in variations:
            if variation == query or variation in expanded:
                continue
            total += self.variation_weight * self._score(variation, record, seen)

        return min(total, self.max_score)
