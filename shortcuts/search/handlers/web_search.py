"""
Web Search Handler - General web search for everything else.

Matches any query, so it must be registered with the highest priority
number. The query goes verbatim into the engine's search parameter.

The default engine is DuckDuckGo with its "k1=-1" (no ads) setting.
"""

from shortcuts.search.router import FALLBACK
from shortcuts.search.url import BuiltURL

DEFAULT_ENGINE = {
    "name": "DuckDuckGo",
    "url": "https://duckduckgo.com/?k1=-1",
    "param": "q",
}


class WebSearchHandler:
    """Fall back to a general web search."""

    name = "web_search"
    kind = FALLBACK
    priority = 1000

    def __init__(self, engine: dict = None):
        self.engine = engine or DEFAULT_ENGINE
        self._base = BuiltURL.parse(self.engine["url"])

    def matches(self, query: str) -> bool:
        return True

    def build(self, query: str) -> BuiltURL:
        return self._base.with_query((self.engine["param"], query))
