"""Filtering and ranking of search hits.

Hits are ordered by popularity (stars for applications, import count for
libraries), filtered by the run's FilterCriteria, numbered from 1, and cut
off at the display limit.
"""

import logging
from collections.abc import Callable, Iterable

from gosearch.search.types import DisplayedEntry, FilterCriteria, SearchHit

logger = logging.getLogger(__name__)

InstalledCheck = Callable[[str], bool]


def ranking_key(want_applications: bool) -> Callable[[SearchHit], tuple[int, str]]:
    """Returns the sort key for the requested package kind.

    Applications are ranked by stars and libraries by import count, both
    descending. Equal counts fall back to the import path in ascending order.

    Args:
        want_applications: Whether application packages are being listed.

    Returns:
        A key function suitable for ``sorted``.
    """
    if want_applications:
        return lambda hit: (-hit.stars, hit.path)
    return lambda hit: (-hit.import_count, hit.path)


def passes_filters(hit: SearchHit, criteria: FilterCriteria, query: str) -> bool:
    """Checks a hit against every filter predicate.

    Args:
        hit: The search hit to check.
        criteria: Filter settings for this run.
        query: The original search term.

    Returns:
        True if the hit should be displayed.
    """
    if hit.is_fork and not criteria.include_forks:
        return False
    if hit.is_application != criteria.want_applications:
        return False
    if hit.stars < criteria.min_stars:
        return False
    if hit.import_count < criteria.min_imports:
        return False
    if criteria.path_must_contain_query and query not in hit.path:
        return False
    return True


def rank_results(
    hits: Iterable[SearchHit],
    criteria: FilterCriteria,
    query: str,
    installed_check: InstalledCheck | None = None,
) -> list[DisplayedEntry]:
    """Orders, filters, and numbers search hits for display.

    Args:
        hits: Search hits in any order.
        criteria: Filter settings for this run.
        query: The original search term, used by the path filter.
        installed_check: Optional callable that reports whether an import path
            is installed locally. Called once per displayed entry.

    Returns:
        Displayed entries with indices 1..N, at most ``display_limit`` long
        when the limit is positive.
    """
    ordered = sorted(hits, key=ranking_key(criteria.want_applications))

    entries: list[DisplayedEntry] = []
    for hit in ordered:
        if not passes_filters(hit, criteria, query):
            continue

        installed = installed_check(hit.path) if installed_check else False
        entries.append(
            DisplayedEntry(index=len(entries) + 1, hit=hit, installed=installed)
        )
        if 0 < criteria.display_limit <= len(entries):
            break

    logger.debug("Kept %d of %d search hits", len(entries), len(ordered))
    return entries
