"""
Search handlers - The resolution rules.

Each handler checks whether it applies to a query and builds the
destination URL.
"""

from .domain import DomainHeuristicHandler
from .prefixes import PREFIXES, PrefixHandler, prefix_handlers
from .static import STATIC_REDIRECTS, StaticRedirectHandler
from .web_search import WebSearchHandler

__all__ = [
    "StaticRedirectHandler",
    "PrefixHandler",
    "DomainHeuristicHandler",
    "WebSearchHandler",
    "prefix_handlers",
    "PREFIXES",
    "STATIC_REDIRECTS",
]
