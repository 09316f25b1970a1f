"""
Search package - Query resolution and rule framework.

Search-box input is matched against priority-ordered rules (static
keywords, prefixes, domain heuristic, web search fallback), and the
first match builds the destination URL.
"""

from .router import QueryRouter, SearchHandler
from .url import BuiltURL

__all__ = ["QueryRouter", "SearchHandler", "BuiltURL"]
