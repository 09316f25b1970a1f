"""
Query Router - Resolves search-box input to a destination URL.

Each rule declares a kind, a priority (lower = higher priority) and a
matches() method. The router trims the query, finds the first matching
rule and returns the URL it builds. The web search fallback matches
everything and always comes last.

Rule order is fixed when the router is constructed and never changes.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from loguru import logger

from shortcuts.errors import UrlBuildError
from shortcuts.search.url import BuiltURL

# Rule kinds, in the order the default router evaluates them
STATIC = "static-keyword"
PREFIX = "prefix-dispatch"
DOMAIN = "domain-heuristic"
FALLBACK = "fallback"


class SearchHandler(ABC):
    """Base class for all resolution rules."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Rule identifier."""
        ...

    @property
    @abstractmethod
    def kind(self) -> str:
        """One of STATIC, PREFIX, DOMAIN, FALLBACK."""
        ...

    @property
    @abstractmethod
    def priority(self) -> int:
        """Lower number = checked first. The fallback should be ~1000."""
        ...

    @abstractmethod
    def matches(self, query: str) -> bool:
        """Return True if this rule should build the URL for the query."""
        ...

    @abstractmethod
    def build(self, query: str) -> BuiltURL:
        """Build the destination URL. May raise UrlBuildError."""
        ...


class QueryRouter:
    """Routes queries to the first matching rule in priority order."""

    def __init__(self, handlers: Iterable[SearchHandler] = ()):
        # sorted() is stable: equal priorities keep registration order
        self._handlers: tuple[SearchHandler, ...] = tuple(
            sorted(handlers, key=lambda h: h.priority)
        )

    @property
    def handlers(self) -> tuple[SearchHandler, ...]:
        """The rules in evaluation order."""
        return self._handlers

    def route(self, query: str) -> tuple[str, Optional[BuiltURL]]:
        """
        Find the first matching rule and build its URL.

        Args:
            query: Raw search-box text

        Returns:
            Tuple of (rule_name, url).
            Returns ("none", None) if no rule matches.

        Raises:
            UrlBuildError: the matching rule could not build a valid URL
        """
        q = query.strip()

        for handler in self._handlers:
            if not handler.matches(q):
                continue
            try:
                url = handler.build(q)
            except UrlBuildError as e:
                logger.warning(f"{handler.name} could not build a URL for {q!r}: {e.reason}")
                raise UrlBuildError(query, e.reason) from e
            logger.debug(f"{q!r} routed to {handler.name}: {url}")
            return handler.name, url

        return "none", None

    def resolve(self, query: str) -> BuiltURL:
        """Return the destination URL for the query."""
        _, url = self.route(query)
        if url is None:
            raise UrlBuildError(query, "no rule matched")
        return url
