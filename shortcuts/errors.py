"""
Error types raised while resolving a query.

  UrlBuildError       → a builder produced something that is not a valid URL
  HeuristicParseError → the domain heuristic could not parse its candidate
                        (never escapes the heuristic)
  ConfigError         → settings that cannot be used to start the server

None of these are retryable: resolution is deterministic.
"""


class ShortcutsError(Exception):
    """Base class for all search-shortcuts errors."""


class UrlBuildError(ShortcutsError, ValueError):
    """A URL could not be built for the given input."""

    def __init__(self, query: str, reason: str = "not a valid URL"):
        self.query = query
        self.reason = reason
        super().__init__(f"Could not build URL for {query!r}: {reason}")


class HeuristicParseError(ShortcutsError, ValueError):
    """Candidate text is not a domain name with a known public suffix."""

    def __init__(self, candidate: str, reason: str):
        self.candidate = candidate
        self.reason = reason
        super().__init__(f"{candidate!r} is not a domain: {reason}")


class ConfigError(ShortcutsError, ValueError):
    """Invalid server settings."""
