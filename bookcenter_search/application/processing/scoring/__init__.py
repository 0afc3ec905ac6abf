# bookcenter_search/application/processing/scoring/__init__.py

"""Scoring and ranking of catalog records"""

# Local imports
from bookcenter_search.application.processing.scoring._candidate_scorer import CandidateScorer
from bookcenter_search.application.processing.scoring._search_ranker import SearchRanker

__all__ = ["CandidateScorer", "SearchRanker"]
