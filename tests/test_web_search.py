"""
Tests for the WebSearchHandler fallback.

Tests URL construction, matching, and custom engines.
"""

from shortcuts.search.handlers.web_search import DEFAULT_ENGINE, WebSearchHandler


class TestWebSearchMatching:
    """The fallback matches everything."""

    def test_matches_plain_text(self):
        handler = WebSearchHandler()
        assert handler.matches("lol donkey") is True

    def test_matches_empty_query(self):
        handler = WebSearchHandler()
        assert handler.matches("") is True

    def test_is_checked_last(self):
        assert WebSearchHandler.priority >= 1000


class TestWebSearchResults:
    """Test URL construction."""

    def test_duckduckgo_by_default(self):
        assert DEFAULT_ENGINE["name"] == "DuckDuckGo"
        handler = WebSearchHandler()
        assert str(handler.build("search")) == "https://duckduckgo.com/?k1=-1&q=search"

    def test_query_is_verbatim_single_parameter(self):
        handler = WebSearchHandler()
        url = handler.build("Hello World/2")
        assert url.query == (("k1", "-1"), ("q", "Hello World/2"))

    def test_custom_engine(self):
        """Custom engine configuration should work."""
        custom = {"name": "Kagi", "url": "https://kagi.com/search", "param": "q"}
        handler = WebSearchHandler(engine=custom)
        assert str(handler.build("hello world")) == "https://kagi.com/search?q=hello+world"
