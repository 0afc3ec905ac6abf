# bookcenter_search/application/services/_retrieval_service.py

"""Two-tier retrieval: indexed lookup first, full fuzzy scan when it is inconclusive"""

# Standard library imports
from logging import getLogger
from threading import local
from typing import Callable
from typing import Sequence

# Local imports
from bookcenter_search.application.processing.phonetics import PhoneticTransliterator
from bookcenter_search.application.processing.phonetics import default_transliterator
from bookcenter_search.application.processing.scoring import SearchRanker
from bookcenter_search.application.processing.string_similarity import normalize
from bookcenter_search.application.processing.transliteration import QueryVariationExpander
from bookcenter_search.application.services._suggestion_service import QuerySuggestionStore
from bookcenter_search.core.domain.errors import RetrievalError
from bookcenter_search.core.domain.record import SearchableRecord
from bookcenter_search.core.types.protocols import CatalogProtocol
from bookcenter_search.infrastructure.config import ConfigLoader
from bookcenter_search.shared.mixins.mixins import ConfigurableMixin
from bookcenter_search.shared.utils.text_utils import contains_bangla_script

logger = getLogger(__name__)

TIER_EMPTY = "empty"
TIER_INDEXED = "indexed"
TIER_FUZZY = "fuzzy"
TIER_PHONETIC = "phonetic"


class RetrievalCoordinator(ConfigurableMixin):
    """Entry point for searching the catalog

    Flow:
    1. Ask the catalog for its cheap indexed matches
    2. If there are enough of them, return them unchanged
    3. Otherwise fuzzy-rank the whole catalog for the query and each of its
       transliterated variations, merge by record id and cap
    4. Record the query for suggestions

    A coordinator holds no per-search state shared between threads:
    search_tiered returns the serving tier with the results, and last_tier
    is tracked per calling thread.
    """

    def __init__(
        self,
        catalog: CatalogProtocol,
        suggestion_store: QuerySuggestionStore | None = None,
        config: ConfigLoader | None = None,
        ranker: SearchRanker | None = None,
        expander: QueryVariationExpander | None = None,
        transliterator: PhoneticTransliterator | None = None,
    ) -> None:
        """Initialize coordinator

        Args:
            catalog: Source of candidate records
            suggestion_store: Store updated after every search, a private one if None
            config: Optional configuration loader
            ranker: Fuzzy ranker, built from config if None
            expander: Query variation expander; if None, built from the word lists
                of config when one is given, otherwise the process-wide default
            transliterator: Phonetic transliterator for the phonetic fallback,
                chosen the same way as the expander
        """
        self.config = self._init_config(config)
        self.catalog = catalog
        self.suggestion_store = (
            suggestion_store if suggestion_store is not None else QuerySuggestionStore(self.config)
        )
        if expander is None:
            expander = (
                QueryVariationExpander.from_config(self.config)
                if config is not None
                else QueryVariationExpander()
            )
        if transliterator is None:
            transliterator = (
                PhoneticTransliterator.from_config(self.config)
                if config is not None
                else default_transliterator()
            )
        self.expander = expander
        self.ranker = ranker if ranker is not None else SearchRanker(config)
        self.transliterator = transliterator

        retrieval = self.config.retrieval
        self.min_indexed_hits = retrieval.min_indexed_hits
        self.fuzzy_threshold = retrieval.fuzzy_threshold
        self.max_results = retrieval.max_results
        self.phonetic_fallback = retrieval.phonetic_fallback

        self._state = local()

    @property
    def last_tier(self) -> str:
        """Which tier served the most recent search made by the calling thread"""
        return getattr(self._state, "tier", TIER_EMPTY)

    def search(self, query: str) -> list[SearchableRecord]:
        """Find catalog records relevant to a query

        Args:
            query: Raw query as typed by the user

        Returns:
            Relevant records, most relevant first; empty for a blank query

        Raises:
            RetrievalError: If the catalog fails; the suggestion store is
                left untouched
        """
        results, tier = self.search_tiered(query)
        self._state.tier = tier
        return results

    def search_tiered(self, query: str) -> tuple[list[SearchableRecord], str]:
        """Find catalog records relevant to a query and report which tier served them

        Args:
            query: Raw query as typed by the user

        Returns:
            Tuple of (records, tier) where tier is one of "empty", "indexed",
            "fuzzy" or "phonetic"

        Raises:
            RetrievalError: If the catalog fails; the suggestion store is
                left untouched
        """
        if not normalize(query):
            return [], TIER_EMPTY

        indexed = self._fetch(query, "indexed lookup", lambda: self.catalog.indexed_lookup(query))

        if len(indexed) >= self.min_indexed_hits:
            logger.debug(f"Indexed lookup served {query!r} with {len(indexed)} records")
            results = list(indexed)
            tier = TIER_INDEXED
        else:
            logger.debug(
                f"Indexed lookup returned {len(indexed)} records for {query!r}, "
                f"escalating to fuzzy scan"
            )
            candidates = self._fetch(query, "full scan", self.catalog.fetch_all_candidates)
            results = self._fuzzy_search(query, candidates)
            tier = TIER_FUZZY

            if not results and self.phonetic_fallback:
                results = self._phonetic_search(query, candidates)
                if results:
                    tier = TIER_PHONETIC

        self.suggestion_store.record(query)
        return results, tier

    def _fetch(
        self,
        query: str,
        operation: str,
        fetch: Callable[[], Sequence[SearchableRecord]],
    ) -> Sequence[SearchableRecord]:
        """Call the catalog, wrapping any failure in a RetrievalError"""
        try:
            return fetch()
        except Exception as e:
            raise RetrievalError(query, f"Catalog {operation} failed for {query!r}: {e}") from e

    def _fuzzy_search(
        self, query: str, candidates: Sequence[SearchableRecord]
    ) -> list[SearchableRecord]:
        """Rank candidates for the query and each variation, merged by id

        Args:
            query: Raw query
            candidates: Whole catalog

        Returns:
            Records in first-seen order across the ranked lists, capped
        """
        ranked_lists = [self.ranker.rank(query, candidates, self.fuzzy_threshold)]
        ranked_lists.extend(
            self.ranker.rank(variation, candidates, self.fuzzy_threshold)
            for variation in self.expander.variations_of(query)
            if variation != query
        )

        merged: list[SearchableRecord] = []
        seen_ids: set[str] = set()
        for ranked in ranked_lists:
            for record in ranked:
                if record.id not in seen_ids:
                    seen_ids.add(record.id)
                    merged.append(record)

        logger.debug(
            f"Fuzzy scan of {len(candidates)} candidates found {len(merged)} records for {query!r}"
        )
        return merged[: self.max_results]

    def _phonetic_search(
        self, query: str, candidates: Sequence[SearchableRecord]
    ) -> list[SearchableRecord]:
        """Match a Latin query against Bangla names and authors by sound

        Args:
            query: Raw query
            candidates: Whole catalog

        Returns:
            Matching records in catalog order, capped
        """
        if contains_bangla_script(query):
            return []

        matches: list[SearchableRecord] = []
        seen_ids: set[str] = set()
        for record in candidates:
            if record.id in seen_ids:
                continue
            for value in (record.name, record.author):
                if contains_bangla_script(value) and self.transliterator.phonetic_matches(
                    query, value or ""
                ):
                    seen_ids.add(record.id)
                    matches.append(record)
                    break

        if matches:
            logger.debug(f"Phonetic fallback found {len(matches)} records for {query!r}")
        return matches[: self.max_results]
