"""Search package for gosearch.

This package contains the search result types and the filtering and ranking
applied to them before display.
"""

from gosearch.search.ranking import passes_filters, rank_results, ranking_key
from gosearch.search.types import (
    DisplayedEntry,
    FilterCriteria,
    SearchHit,
    SearchResponse,
)

__all__ = [
    "DisplayedEntry",
    "FilterCriteria",
    "SearchHit",
    "SearchResponse",
    "passes_filters",
    "rank_results",
    "ranking_key",
]
