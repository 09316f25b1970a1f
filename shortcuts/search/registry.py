"""
Destination registry - The process-wide router.

Built once on first use and never modified afterwards, so it can be
shared by any number of threads or requests.
"""

from functools import lru_cache

from shortcuts.search.handlers import (
    DomainHeuristicHandler,
    StaticRedirectHandler,
    WebSearchHandler,
    prefix_handlers,
)
from shortcuts.search.router import QueryRouter
from shortcuts.search.url import BuiltURL


@lru_cache(maxsize=None)
def default_router() -> QueryRouter:
    """Static keywords, then prefixes, then the domain heuristic, then web search."""
    return QueryRouter([
        StaticRedirectHandler(),
        *prefix_handlers(),
        DomainHeuristicHandler(),
        WebSearchHandler(),
    ])


def resolve(query: str) -> BuiltURL:
    """
    Resolve search-box input to its destination URL.

    Example:
        >>> str(resolve("gh rust-lang/rust #1"))
        'https://github.com/rust-lang/rust/issues/1'

    Raises:
        UrlBuildError: the query cannot be turned into a valid URL
    """
    return default_router().resolve(query)
